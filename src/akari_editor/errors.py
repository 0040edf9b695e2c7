"""Exception hierarchy shared across the editing core."""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for errors raised by akari_editor."""


class SelectionError(EditorError):
    """Raised when a selection range falls outside the buffer."""

    def __init__(
        self, message: str, *, start: int | None = None, end: int | None = None
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class DialogStateError(EditorError):
    """Raised when a dialog is confirmed or cancelled while none is open."""


class ConfigError(EditorError):
    """Raised when an ``AKARI_EDITOR_*`` environment value cannot be parsed."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}")
        self.name = name
        self.value = value


__all__ = [
    "EditorError",
    "SelectionError",
    "DialogStateError",
    "ConfigError",
]
