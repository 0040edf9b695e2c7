"""Command handlers applying editor intents to an :class:`EditorContext`.

Each handler receives the context and one command and returns an
:class:`EditorResult`. Handlers that change the document push the current
buffer onto the history *before* computing the edit and hand the new buffer
back in the result; committing it (and notifying listeners) is left to the
controller. UI state such as the view mode, the toolbar or the dialog
session is updated in place.
"""

from __future__ import annotations

from typing import Callable, Dict, Type

from akari_editor.buffer import Selection, TextEdit, splice
from akari_editor.errors import DialogStateError
from akari_editor.formats import (
    FormatKey,
    ImageDialogData,
    LinkDialogData,
    SyntaxMode,
    TableDialogData,
    apply_format,
    get_format,
    label,
)
from akari_editor.operators import (
    add_indent,
    apply_alignment,
    generate_color_text,
    generate_image,
    generate_link,
    generate_table,
    insert_markup,
    remove_indent,
)

from . import commands as cmd
from .dialogs import DialogSession
from .layout import clamp_split
from .state import Dropdown, EditorContext, EditorResult, ViewMode

Handler = Callable[[EditorContext, object], EditorResult]

_HANDLERS: Dict[Type[object], Handler] = {}


def handles(command_type: Type[object]) -> Callable[[Handler], Handler]:
    def decorator(func: Handler) -> Handler:
        _HANDLERS[command_type] = func
        return func

    return decorator


def reduce(context: EditorContext, command: cmd.Command) -> EditorResult:
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"No handler registered for {type(command).__name__}")
    return handler(context, command)


def handled_commands() -> tuple[Type[object], ...]:
    return tuple(_HANDLERS)


def _commit(edit: TextEdit) -> EditorResult:
    """Result for an edit whose pre-image has already been pushed."""

    return EditorResult(
        consumed=True,
        buffer=edit.buffer,
        selection=edit.selection(),
        effects=("change",),
    )


def _replace_selection(context: EditorContext, text: str) -> EditorResult:
    state = context.state
    selection = state.selection.clamp(state.buffer)
    context.history.push_edit(state.buffer)
    cursor = selection.start + len(text)
    edit = TextEdit(splice(state.buffer, selection.start, selection.end, text), cursor, cursor)
    return _commit(edit)


# --- formatting -----------------------------------------------------------


def _format(context: EditorContext, key: FormatKey | str) -> EditorResult:
    state = context.state
    template = get_format(state.mode, key, locale=context.settings.locale)
    if template is None:
        return EditorResult(consumed=False, status="unknown_format")
    selection = state.selection.clamp(state.buffer)
    context.history.push_edit(state.buffer)
    return _commit(apply_format(state.buffer, selection.start, selection.end, template))


@handles(cmd.ApplyFormat)
def _apply_format(context: EditorContext, command: cmd.ApplyFormat) -> EditorResult:
    return _format(context, command.key)


@handles(cmd.InsertHeading)
def _insert_heading(context: EditorContext, command: cmd.InsertHeading) -> EditorResult:
    context.toolbar.close()
    try:
        key = FormatKey.heading(command.level)
    except ValueError:
        return EditorResult(consumed=False, status="unknown_format")
    return _format(context, key)


@handles(cmd.Indent)
def _indent(context: EditorContext, command: cmd.Indent) -> EditorResult:
    state = context.state
    selection = state.selection.clamp(state.buffer)
    operator = add_indent if command.increase else remove_indent
    context.history.push_edit(state.buffer)
    edit = operator(
        state.buffer, selection.start, selection.end, unit=context.settings.indent_unit
    )
    return _commit(edit)


@handles(cmd.Align)
def _align(context: EditorContext, command: cmd.Align) -> EditorResult:
    state = context.state
    if state.mode is not SyntaxMode.HTML:
        return EditorResult(
            consumed=False,
            status="unsupported",
            message="Alignment is only available in HTML mode",
        )
    selection = state.selection.clamp(state.buffer)
    context.history.push_edit(state.buffer)
    edit = apply_alignment(
        state.buffer,
        selection.start,
        selection.end,
        command.alignment,
        placeholder=label("align_placeholder", context.settings.locale),
    )
    return _commit(edit)


@handles(cmd.ApplyColor)
def _apply_color(context: EditorContext, command: cmd.ApplyColor) -> EditorResult:
    context.toolbar.remember_color(command.color)
    context.toolbar.close()
    selection = context.state.selection.clamp(context.state.buffer)
    if selection.is_empty:
        return EditorResult(consumed=False, status="empty_selection")
    colored = generate_color_text(selection.text, command.color, background=command.background)
    return _replace_selection(context, colored)


@handles(cmd.InsertEmoji)
def _insert_emoji(context: EditorContext, command: cmd.InsertEmoji) -> EditorResult:
    context.toolbar.close()
    return _replace_selection(context, command.emoji)


@handles(cmd.ReplaceText)
def _replace_text(context: EditorContext, command: cmd.ReplaceText) -> EditorResult:
    state = context.state
    if command.text == state.buffer:
        return EditorResult(consumed=False, status="unchanged")
    context.history.push_edit(state.buffer)
    cursor = len(command.text) if command.cursor is None else command.cursor
    cursor = max(0, min(cursor, len(command.text)))
    return _commit(TextEdit(command.text, cursor, cursor))


@handles(cmd.Select)
def _select(context: EditorContext, command: cmd.Select) -> EditorResult:
    selection = Selection.capture(context.state.buffer, command.start, command.end)
    context.state.selection = selection
    return EditorResult(consumed=True, selection=selection)


# --- history --------------------------------------------------------------


def _restore(context: EditorContext, buffer: str | None, status: str) -> EditorResult:
    if buffer is None:
        return EditorResult(consumed=False, status=f"{status}_empty")
    return EditorResult(
        consumed=True,
        status=status,
        buffer=buffer,
        selection=context.state.selection.clamp(buffer),
        effects=("change",),
    )


@handles(cmd.Undo)
def _undo(context: EditorContext, command: cmd.Undo) -> EditorResult:
    return _restore(context, context.history.undo(context.state.buffer), "undo")


@handles(cmd.Redo)
def _redo(context: EditorContext, command: cmd.Redo) -> EditorResult:
    return _restore(context, context.history.redo(context.state.buffer), "redo")


@handles(cmd.Save)
def _save(context: EditorContext, command: cmd.Save) -> EditorResult:
    return EditorResult(consumed=True, status="save", effects=("save",))


# --- dialogs --------------------------------------------------------------


@handles(cmd.OpenDialog)
def _open_dialog(context: EditorContext, command: cmd.OpenDialog) -> EditorResult:
    if context.dialog is not None:
        raise DialogStateError(
            f"Cannot open {command.kind} dialog while {context.dialog.kind.value} is open"
        )
    context.toolbar.close()
    saved = context.state.selection.clamp(context.state.buffer)
    context.dialog = DialogSession.open(command.kind, saved)
    return EditorResult(consumed=True, status="dialog_opened", effects=("dialog",))


@handles(cmd.CancelDialog)
def _cancel_dialog(context: EditorContext, command: cmd.CancelDialog) -> EditorResult:
    if context.dialog is None:
        return EditorResult(consumed=False, status="no_dialog")
    context.dialog = None
    return EditorResult(consumed=True, status="dialog_cancelled", effects=("dialog",))


def _payload_ready(payload: object) -> bool:
    if isinstance(payload, (LinkDialogData, ImageDialogData)):
        return bool(payload.url.strip())
    return isinstance(payload, TableDialogData) and payload.rows >= 1 and payload.cols >= 1


@handles(cmd.ConfirmDialog)
def _confirm_dialog(context: EditorContext, command: cmd.ConfirmDialog) -> EditorResult:
    session = context.dialog
    if session is None:
        raise DialogStateError("No dialog is open")
    payload = command.payload if command.payload is not None else session.form.payload()
    if not session.accepts(payload):
        raise DialogStateError(
            f"{type(payload).__name__} cannot confirm the {session.kind.value} dialog"
        )
    if not _payload_ready(payload):
        if isinstance(payload, TableDialogData):
            message = "Rows and columns must be at least 1"
        else:
            message = "A URL is required"
        return EditorResult(consumed=False, status="dialog_invalid", message=message)

    state = context.state
    locale = context.settings.locale
    saved = session.saved.clamp(state.buffer)
    surround = ""
    if isinstance(payload, LinkDialogData):
        if not payload.text:
            payload = LinkDialogData(
                url=payload.url, text=saved.text, open_in_new_tab=payload.open_in_new_tab
            )
        markup = generate_link(state.mode, payload, locale=locale)
    elif isinstance(payload, ImageDialogData):
        markup = generate_image(state.mode, payload, locale=locale)
    else:
        markup = generate_table(state.mode, payload, locale=locale)
        surround = "\n"

    context.dialog = None
    context.history.push_edit(state.buffer)
    edit = insert_markup(state.buffer, saved, markup, surround=surround)
    return EditorResult(
        consumed=True,
        status="dialog_confirmed",
        buffer=edit.buffer,
        selection=edit.selection(),
        effects=("change", "dialog"),
    )


# --- view state -----------------------------------------------------------


def _view(context: EditorContext, view_mode: ViewMode) -> EditorResult:
    context.state.view_mode = ViewMode(view_mode)
    return EditorResult(consumed=True, effects=("view",))


@handles(cmd.SetViewMode)
def _set_view_mode(context: EditorContext, command: cmd.SetViewMode) -> EditorResult:
    return _view(context, command.view_mode)


@handles(cmd.TogglePreview)
def _toggle_preview(context: EditorContext, command: cmd.TogglePreview) -> EditorResult:
    current = context.state.view_mode
    return _view(context, ViewMode.EDITOR if current is ViewMode.SPLIT else ViewMode.SPLIT)


@handles(cmd.SetSyntaxMode)
def _set_syntax_mode(context: EditorContext, command: cmd.SetSyntaxMode) -> EditorResult:
    state = context.state
    mode = state.mode.toggled() if command.mode is None else SyntaxMode(command.mode)
    if mode is state.mode:
        return EditorResult(consumed=False, status="unchanged")
    state.mode = mode
    return EditorResult(consumed=True, effects=("preview", "view"))


@handles(cmd.ToggleTheme)
def _toggle_theme(context: EditorContext, command: cmd.ToggleTheme) -> EditorResult:
    context.state.dark = not context.state.dark
    return EditorResult(consumed=True, effects=("view",))


@handles(cmd.ToggleFullscreen)
def _toggle_fullscreen(context: EditorContext, command: cmd.ToggleFullscreen) -> EditorResult:
    context.state.fullscreen = not context.state.fullscreen
    return EditorResult(consumed=True, effects=("view",))


@handles(cmd.ToggleDropdown)
def _toggle_dropdown(context: EditorContext, command: cmd.ToggleDropdown) -> EditorResult:
    context.toolbar.toggle(Dropdown(command.dropdown))
    return EditorResult(consumed=True, effects=("view",))


@handles(cmd.CloseDropdown)
def _close_dropdown(context: EditorContext, command: cmd.CloseDropdown) -> EditorResult:
    if context.toolbar.open_dropdown is None:
        return EditorResult(consumed=False, status="unchanged")
    context.toolbar.close()
    return EditorResult(consumed=True, effects=("view",))


@handles(cmd.ResizeSplit)
def _resize_split(context: EditorContext, command: cmd.ResizeSplit) -> EditorResult:
    if context.state.view_mode is not ViewMode.SPLIT:
        return EditorResult(consumed=False, status="not_split")
    position = clamp_split(
        command.pointer_x,
        command.container_left,
        command.container_width,
        minimum=context.settings.split_min,
        maximum=context.settings.split_max,
    )
    if position is None:
        return EditorResult(consumed=False, status="unchanged")
    context.state.split_position = position
    return EditorResult(consumed=True, effects=("view",))


__all__ = ["Handler", "handled_commands", "handles", "reduce"]
