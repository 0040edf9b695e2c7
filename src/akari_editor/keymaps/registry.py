"""Shortcut registry responsible for storing actions and bindings."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Sequence

from akari_editor.runtime.telemetry import span

from .models import ActionRef, Binding


class ShortcutConflictError(RuntimeError):
    """Raised when a new binding claims a chord another binding already owns."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class ShortcutRegistry:
    """Owns action references and the bindings that trigger them."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._scope_index: Dict[str, Dict[str, set[str]]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "shortcuts::register_action",
            logger_name=self._logger_name,
            component="shortcuts",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "shortcuts::register_binding",
            logger_name=self._logger_name,
            component="shortcuts",
            metadata={"binding_id": binding.id, "scope": binding.scope},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding, ignore=(binding.id,) if replace else None)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise ShortcutConflictError(binding, conflicts)

            if replace:
                for conflict in conflicts:
                    self._unindex(conflict)
                    self._bindings.pop(conflict.id, None)
                existing = self._bindings.pop(binding.id, None)
                if existing:
                    self._unindex(existing)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._index(binding)
            self._touch()
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if not binding:
            return None
        self._unindex(binding)
        self._touch()
        return binding

    def iter_bindings(self, scope: Optional[str] = None) -> Iterator[Binding]:
        if scope is None:
            yield from self._bindings.values()
            return
        for bucket in self._scope_index.get(scope, {}).values():
            for binding_id in sorted(bucket):
                yield self._bindings[binding_id]

    def detect_conflicts(
        self, binding: Binding, *, ignore: Sequence[str] | None = None
    ) -> list[Binding]:
        ignored = set(ignore or ())
        conflicts: list[Binding] = []
        for match_id in sorted(
            self._scope_index.get(binding.scope, {}).get(binding.key_signature, set())
        ):
            if match_id in ignored:
                continue
            existing = self._bindings[match_id]
            if _contexts_overlap(binding, existing):
                conflicts.append(existing)
        return conflicts

    def _index(self, binding: Binding) -> None:
        by_signature = self._scope_index.setdefault(binding.scope, {})
        by_signature.setdefault(binding.key_signature, set()).add(binding.id)

    def _unindex(self, binding: Binding) -> None:
        scope_bucket = self._scope_index.get(binding.scope)
        if not scope_bucket:
            return
        signatures = scope_bucket.get(binding.key_signature)
        if not signatures:
            return
        signatures.discard(binding.id)
        if not signatures:
            scope_bucket.pop(binding.key_signature, None)
        if not scope_bucket:
            self._scope_index.pop(binding.scope, None)

    def _touch(self) -> None:
        self._revision += 1


def _contexts_overlap(left: Binding, right: Binding) -> bool:
    """Two bindings on one chord clash unless their ``when`` flags tell them apart."""

    if not left.when and not right.when:
        return True
    if not left.when or not right.when:
        return False

    left_map = left.when_map
    right_map = right.when_map
    for flag, expected in left_map.items():
        if flag in right_map and right_map[flag] != expected:
            return False
    return left_map == right_map


__all__ = [
    "ShortcutConflictError",
    "ShortcutRegistry",
]
