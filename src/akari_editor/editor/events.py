"""Event bus the controller uses to publish editor signals."""

from __future__ import annotations

from typing import Callable, Dict

Listener = Callable[[object], None]

BUFFER_CHANGED = "buffer_changed"
SELECTION_CHANGED = "selection_changed"
PREVIEW_RENDERED = "preview_rendered"
DIALOG_OPENED = "dialog_opened"
DIALOG_CLOSED = "dialog_closed"
VIEW_CHANGED = "view_changed"
SAVED = "saved"


class EditorBus:
    """Minimal event bus letting hosts observe the editor without polling."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Listener]] = {}

    def subscribe(self, event: str, callback: Listener) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Listener) -> None:
        listeners = self._subscribers.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "BUFFER_CHANGED",
    "DIALOG_CLOSED",
    "DIALOG_OPENED",
    "EditorBus",
    "Listener",
    "PREVIEW_RENDERED",
    "SAVED",
    "SELECTION_CHANGED",
    "VIEW_CHANGED",
]
