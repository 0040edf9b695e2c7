"""Editor verbs invoked by keyboard shortcuts."""

from .shortcuts import (
    cancel_dialog,
    close_dropdown,
    confirm_dialog,
    format_bold,
    format_code,
    format_code_block,
    format_italic,
    format_underline,
    open_link_dialog,
    redo,
    save,
    toggle_fullscreen,
    toggle_preview,
    undo,
)

__all__ = [
    "cancel_dialog",
    "close_dropdown",
    "confirm_dialog",
    "format_bold",
    "format_code",
    "format_code_block",
    "format_italic",
    "format_underline",
    "open_link_dialog",
    "redo",
    "save",
    "toggle_fullscreen",
    "toggle_preview",
    "undo",
]
