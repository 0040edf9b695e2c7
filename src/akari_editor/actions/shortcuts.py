"""Handlers bound to keyboard shortcuts.

Each handler takes the editor controller and the resolved match and returns
the controller's :class:`~akari_editor.editor.state.EditorResult`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from akari_editor.formats.models import FormatKey

if TYPE_CHECKING:
    from akari_editor.editor.controller import RichEditor
    from akari_editor.editor.state import EditorResult
    from akari_editor.keymaps.resolver import ResolutionMatch


def format_bold(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.apply_format(FormatKey.BOLD)


def format_italic(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.apply_format(FormatKey.ITALIC)


def format_underline(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.apply_format(FormatKey.UNDERLINE)


def format_code(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.apply_format(FormatKey.CODE)


def format_code_block(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.apply_format(FormatKey.CODE_BLOCK)


def save(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.save()


def undo(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.undo()


def redo(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.redo()


def open_link_dialog(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.open_dialog("link")


def toggle_preview(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.toggle_preview()


def toggle_fullscreen(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.toggle_fullscreen()


def close_dropdown(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.close_dropdown()


def cancel_dialog(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.cancel_dialog()


def confirm_dialog(editor: "RichEditor", match: "ResolutionMatch") -> "EditorResult":
    del match
    return editor.confirm_dialog()


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
