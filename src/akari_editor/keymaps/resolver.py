"""Chord lookup with per-scope caching and telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional

from akari_editor.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke
from .registry import ShortcutRegistry

ScopeIndex = Dict[str, tuple[str, ...]]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class ShortcutResolver:
    """Maps a chord in a scope to the highest priority binding that applies."""

    def __init__(
        self, registry: ShortcutRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[str, tuple[int, ScopeIndex]] = {}

    def resolve(
        self,
        scope: str,
        stroke: KeyStroke | str,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        ctx = context or {}
        chord = stroke if isinstance(stroke, KeyStroke) else KeyStroke.parse(stroke)
        with span(
            "shortcuts::resolve",
            logger_name=self._logger_name,
            component="shortcuts",
            metadata={"scope": scope, "chord": chord.token},
        ) as handle:
            candidates = self._ensure_index(scope).get(chord.token, ())
            match = self._select_match(candidates, ctx)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult(status="match", match=match)

    def reset(self, scope: Optional[str] = None) -> None:
        if scope is None:
            self._cache.clear()
        else:
            self._cache.pop(scope, None)

    def _ensure_index(self, scope: str) -> ScopeIndex:
        revision = self._registry.revision()
        cached = self._cache.get(scope)
        if cached and cached[0] == revision:
            return cached[1]

        index: Dict[str, list[str]] = {}
        for binding in self._registry.iter_bindings(scope):
            index.setdefault(binding.key_signature, []).append(binding.id)
        frozen = {token: tuple(ids) for token, ids in index.items()}
        self._cache[scope] = (revision, frozen)
        return frozen

    def _select_match(
        self, binding_ids: tuple[str, ...], context: Mapping[str, bool]
    ) -> Optional[ResolutionMatch]:
        matches: list[ResolutionMatch] = []
        for binding_id in binding_ids:
            binding = self._registry.get_binding(binding_id)
            if not binding.allows(context):
                continue
            action = self._registry.get_action(binding.action_id)
            matches.append(ResolutionMatch(binding=binding, action=action))

        if not matches:
            return None

        matches.sort(key=lambda m: (-m.binding.priority, m.binding.id))
        return matches[0]


__all__ = [
    "ResolutionMatch",
    "ResolutionResult",
    "ShortcutResolver",
]
