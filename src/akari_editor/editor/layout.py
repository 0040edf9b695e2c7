"""Split-pane geometry, scroll mirroring and the status line."""

from __future__ import annotations

from typing import Optional

from akari_editor.formats.labels import label


def clamp_split(
    pointer_x: float,
    container_left: float,
    container_width: float,
    *,
    minimum: float = 20.0,
    maximum: float = 80.0,
) -> Optional[float]:
    """Editor pane width in percent for a drag at ``pointer_x``.

    Returns ``None`` for a collapsed container so callers keep the old split.
    """

    if container_width <= 0:
        return None
    position = (pointer_x - container_left) / container_width * 100.0
    return max(minimum, min(maximum, position))


def scroll_ratio(offset: float, content_height: float, viewport_height: float) -> float:
    scrollable = content_height - viewport_height
    if scrollable <= 0:
        return 0.0
    return max(0.0, min(1.0, offset / scrollable))


def sync_scroll(
    editor_offset: float,
    editor_content: float,
    editor_viewport: float,
    preview_content: float,
    preview_viewport: float,
) -> float:
    """Preview scroll offset that mirrors the editor's relative position."""

    ratio = scroll_ratio(editor_offset, editor_content, editor_viewport)
    return ratio * max(0.0, preview_content - preview_viewport)


def line_count(buffer: str) -> int:
    return buffer.count("\n") + 1


def status_line(buffer: str, locale: Optional[str] = None) -> str:
    return label("status", locale, chars=len(buffer), lines=line_count(buffer))


__all__ = ["clamp_split", "line_count", "scroll_ratio", "status_line", "sync_scroll"]
