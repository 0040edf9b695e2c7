"""Bounded undo/redo stacks of whole-buffer snapshots."""

from __future__ import annotations

from typing import List, Optional


class HistoryStack:
    """Two snapshot stacks; pushing a new edit invalidates the redo side.

    Callers push the buffer *before* a mutation commits, so popping an undo
    entry always restores the pre-edit text.
    """

    def __init__(self, *, limit: int = 50) -> None:
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._undo: List[str] = []
        self._redo: List[str] = []

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def push_edit(self, buffer: str) -> None:
        self._push_undo(buffer)
        self._redo.clear()

    def undo(self, current: str) -> Optional[str]:
        if not self._undo:
            return None
        previous = self._undo.pop()
        self._redo.append(current)
        return previous

    def redo(self, current: str) -> Optional[str]:
        if not self._redo:
            return None
        following = self._redo.pop()
        self._push_undo(current)
        return following

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def snapshot(self) -> tuple[tuple[str, ...], tuple[str, ...]]:
        return tuple(self._undo), tuple(self._redo)

    def _push_undo(self, buffer: str) -> None:
        self._undo.append(buffer)
        overflow = len(self._undo) - self.limit
        if overflow > 0:
            del self._undo[:overflow]


__all__ = ["HistoryStack"]
