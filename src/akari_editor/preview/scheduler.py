"""Debounced preview rendering driven by a host timer."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from akari_editor.formats.models import SyntaxMode
from akari_editor.runtime import telemetry

from .renderer import render_preview

Clock = Callable[[], float]


@dataclass
class PendingRender:
    deadline: float
    generation: int
    buffer: str
    mode: SyntaxMode


class PreviewScheduler:
    """Coalesces buffer changes into one render after ``delay_ms`` of quiet.

    Every ``schedule`` call replaces the pending render and bumps the
    generation, so a render armed for an older buffer can never land. Hosts
    poll ``process_pending`` from their own timer (the Textual host uses
    ``set_interval``).
    """

    def __init__(
        self,
        *,
        delay_ms: int = 150,
        clock: Clock = time.monotonic,
        on_render: Optional[Callable[[str], None]] = None,
    ) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms cannot be negative")
        self.delay_ms = delay_ms
        self._clock = clock
        self._on_render = on_render
        self._pending: Optional[PendingRender] = None
        self._generation = 0
        self.html = ""
        self.render_count = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, buffer: str, mode: SyntaxMode | str) -> int:
        self._generation += 1
        self._pending = PendingRender(
            deadline=self._clock() + self.delay_ms / 1000.0,
            generation=self._generation,
            buffer=buffer,
            mode=SyntaxMode(mode),
        )
        return self._generation

    def cancel(self) -> None:
        self._pending = None

    def process_pending(self) -> Optional[str]:
        """Render if the quiet period has elapsed; ``None`` otherwise."""

        pending = self._pending
        if pending is None or pending.deadline > self._clock():
            return None
        return self._trigger(pending.generation)

    def flush(self) -> Optional[str]:
        pending = self._pending
        if pending is None:
            return None
        return self._trigger(pending.generation)

    def _trigger(self, generation: int) -> Optional[str]:
        pending = self._pending
        if pending is None or pending.generation != generation:
            return None
        self._pending = None
        with telemetry.span(
            "preview::render",
            component="preview",
            metadata={"mode": pending.mode.value, "length": len(pending.buffer)},
        ):
            html = render_preview(pending.buffer, pending.mode)
        self.html = html
        self.render_count += 1
        if self._on_render is not None:
            self._on_render(html)
        return html


__all__ = ["PendingRender", "PreviewScheduler"]
