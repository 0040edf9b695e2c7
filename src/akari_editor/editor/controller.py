"""Top-level rich-text editor controller."""

from __future__ import annotations

import time
from typing import Callable, Iterable, Optional

from akari_editor.buffer import HistoryStack, Selection
from akari_editor.config import EditorSettings, load_settings
from akari_editor.errors import DialogStateError
from akari_editor.formats.models import Alignment, FormatKey, SyntaxMode
from akari_editor.keymaps import (
    DIALOG_SCOPE,
    EDITOR_SCOPE,
    KeyStroke,
    ShortcutRegistry,
    ShortcutResolver,
    load_default_shortcuts,
)
from akari_editor.preview import PreviewScheduler
from akari_editor.runtime import telemetry

from . import commands as cmd
from . import events
from .dialogs import DialogSession
from .layout import status_line, sync_scroll
from .reducer import reduce
from .state import (
    DialogKind,
    Dropdown,
    EditorContext,
    EditorResult,
    EditorState,
    ToolbarState,
    ViewMode,
)
from .toolbar import ToolbarButton, TOOLBAR_BUTTONS, find_button


class RichEditor:
    """Owns the buffer, selection, history, preview and dialog state.

    The embedding application supplies the initial ``value`` and receives
    every committed buffer through ``on_change``; ``on_save`` fires on an
    explicit save gesture. Nothing is persisted here.
    """

    def __init__(
        self,
        value: str = "",
        *,
        on_change: Optional[Callable[[str], None]] = None,
        on_save: Optional[Callable[[], None]] = None,
        initial_mode: SyntaxMode | str = SyntaxMode.MARKDOWN,
        settings: EditorSettings | None = None,
        shortcut_registry: ShortcutRegistry | None = None,
        shortcut_resolver: ShortcutResolver | None = None,
        load_defaults: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or load_settings()
        self.logger = telemetry.get_logger("akari_editor.editor")
        self.bus = events.EditorBus()
        self._on_change = on_change
        self._on_save = on_save
        state = EditorState(
            buffer=value,
            selection=Selection.caret(len(value)),
            mode=SyntaxMode(initial_mode),
            view_mode=ViewMode(self.settings.view_mode),
            dark=self.settings.dark,
            split_position=float(self.settings.split_default),
        )
        self.context = EditorContext(
            state=state,
            history=HistoryStack(limit=self.settings.history_limit),
            toolbar=ToolbarState(recent_limit=self.settings.recent_color_limit),
            settings=self.settings,
        )
        self.shortcut_registry = shortcut_registry or ShortcutRegistry(
            logger_name="akari_editor.shortcuts"
        )
        if load_defaults and shortcut_registry is None:
            load_default_shortcuts(self.shortcut_registry)
        self.shortcut_resolver = shortcut_resolver or ShortcutResolver(
            self.shortcut_registry, logger_name="akari_editor.shortcuts"
        )
        self.preview = PreviewScheduler(
            delay_ms=self.settings.preview_delay_ms,
            clock=clock,
            on_render=self._handle_render,
        )
        self.preview.schedule(state.buffer, state.mode)

    # --- state accessors --------------------------------------------------

    @property
    def value(self) -> str:
        return self.context.state.buffer

    @property
    def selection(self) -> Selection:
        return self.context.state.selection

    @property
    def mode(self) -> SyntaxMode:
        return self.context.state.mode

    @property
    def view_mode(self) -> ViewMode:
        return self.context.state.view_mode

    @property
    def dark(self) -> bool:
        return self.context.state.dark

    @property
    def fullscreen(self) -> bool:
        return self.context.state.fullscreen

    @property
    def split_position(self) -> float:
        return self.context.state.split_position

    @property
    def history(self) -> HistoryStack:
        return self.context.history

    @property
    def toolbar(self) -> ToolbarState:
        return self.context.toolbar

    @property
    def dialog(self) -> Optional[DialogSession]:
        return self.context.dialog

    @property
    def preview_html(self) -> str:
        return self.preview.html

    @property
    def status_line(self) -> str:
        return status_line(self.value, self.settings.locale)

    def can_undo(self) -> bool:
        return self.context.history.can_undo()

    def can_redo(self) -> bool:
        return self.context.history.can_redo()

    # --- dispatch ---------------------------------------------------------

    def dispatch(self, command: cmd.Command) -> EditorResult:
        name = type(command).__name__
        with telemetry.span(
            f"editor::{name}",
            logger_name="akari_editor.editor",
            component="editor",
            metadata={"command": name, "mode": self.mode.value},
        ) as handle:
            result = reduce(self.context, command)
            handle.add_metadata("status", result.status)
        self._run_effects(result)
        return result

    def _run_effects(self, result: EditorResult) -> None:
        state = self.context.state
        if result.buffer is not None:
            state.buffer = result.buffer
            state.selection = (result.selection or state.selection).clamp(result.buffer)
            if self._on_change is not None:
                self._on_change(result.buffer)
            self.bus.emit(events.BUFFER_CHANGED, result.buffer)
            self.preview.schedule(state.buffer, state.mode)
        elif result.selection is not None:
            self.bus.emit(events.SELECTION_CHANGED, result.selection)

        if result.status in {"undo", "redo"}:
            telemetry.record_event(
                f"history.{result.status}",
                data={
                    "undo_depth": self.history.undo_depth,
                    "redo_depth": self.history.redo_depth,
                },
            )
        for effect in result.effects:
            if effect == "save":
                telemetry.record_event("editor.save", data={"length": len(state.buffer)})
                if self._on_save is not None:
                    self._on_save()
                self.bus.emit(events.SAVED, state.buffer)
            elif effect == "preview" and result.buffer is None:
                self.preview.schedule(state.buffer, state.mode)
            elif effect == "dialog":
                self._announce_dialog(result)
            elif effect == "view":
                self.bus.emit(events.VIEW_CHANGED, state.view_mode)

    def _announce_dialog(self, result: EditorResult) -> None:
        session = self.context.dialog
        if session is not None:
            telemetry.record_event("dialog.open", data={"kind": session.kind.value})
            self.bus.emit(events.DIALOG_OPENED, session)
        else:
            telemetry.record_event("dialog.close", data={"status": result.status})
            self.bus.emit(events.DIALOG_CLOSED, result.status)

    def set_value(self, value: str) -> None:
        """Adopt a buffer pushed in by the host without recording history."""

        state = self.context.state
        if value == state.buffer:
            return
        state.buffer = value
        state.selection = state.selection.clamp(value)
        self.preview.schedule(value, state.mode)

    # --- editing ----------------------------------------------------------

    def select(self, start: int, end: int) -> EditorResult:
        return self.dispatch(cmd.Select(start, end))

    def type_text(self, text: str, cursor: Optional[int] = None) -> EditorResult:
        return self.dispatch(cmd.ReplaceText(text, cursor))

    def apply_format(self, key: FormatKey | str) -> EditorResult:
        return self.dispatch(cmd.ApplyFormat(key))

    def insert_heading(self, level: int) -> EditorResult:
        return self.dispatch(cmd.InsertHeading(level))

    def indent(self) -> EditorResult:
        return self.dispatch(cmd.Indent(increase=True))

    def outdent(self) -> EditorResult:
        return self.dispatch(cmd.Indent(increase=False))

    def align(self, alignment: Alignment | str) -> EditorResult:
        return self.dispatch(cmd.Align(Alignment(alignment)))

    def apply_color(self, color: str, *, background: bool = False) -> EditorResult:
        return self.dispatch(cmd.ApplyColor(color, background))

    def insert_emoji(self, emoji: str) -> EditorResult:
        return self.dispatch(cmd.InsertEmoji(emoji))

    def undo(self) -> EditorResult:
        return self.dispatch(cmd.Undo())

    def redo(self) -> EditorResult:
        return self.dispatch(cmd.Redo())

    def save(self) -> EditorResult:
        return self.dispatch(cmd.Save())

    # --- dialogs ----------------------------------------------------------

    def open_dialog(self, kind: DialogKind | str) -> EditorResult:
        return self.dispatch(cmd.OpenDialog(DialogKind(kind)))

    def update_dialog(self, **fields: object) -> DialogSession:
        session = self.context.dialog
        if session is None:
            raise DialogStateError("No dialog is open")
        session.update(**fields)
        return session

    def confirm_dialog(self, payload: Optional[cmd.DialogPayload] = None) -> EditorResult:
        return self.dispatch(cmd.ConfirmDialog(payload))

    def cancel_dialog(self) -> EditorResult:
        return self.dispatch(cmd.CancelDialog())

    # --- view -------------------------------------------------------------

    def set_view_mode(self, view_mode: ViewMode | str) -> EditorResult:
        return self.dispatch(cmd.SetViewMode(ViewMode(view_mode)))

    def toggle_preview(self) -> EditorResult:
        return self.dispatch(cmd.TogglePreview())

    def set_syntax_mode(self, mode: SyntaxMode | str | None = None) -> EditorResult:
        return self.dispatch(cmd.SetSyntaxMode(None if mode is None else SyntaxMode(mode)))

    def toggle_theme(self) -> EditorResult:
        return self.dispatch(cmd.ToggleTheme())

    def toggle_fullscreen(self) -> EditorResult:
        return self.dispatch(cmd.ToggleFullscreen())

    def toggle_dropdown(self, dropdown: Dropdown | str) -> EditorResult:
        return self.dispatch(cmd.ToggleDropdown(Dropdown(dropdown)))

    def close_dropdown(self) -> EditorResult:
        return self.dispatch(cmd.CloseDropdown())

    def resize_split(
        self, pointer_x: float, container_left: float, container_width: float
    ) -> EditorResult:
        return self.dispatch(cmd.ResizeSplit(pointer_x, container_left, container_width))

    def sync_scroll(
        self,
        editor_offset: float,
        editor_content: float,
        editor_viewport: float,
        preview_content: float,
        preview_viewport: float,
    ) -> Optional[float]:
        """Preview offset mirroring the editor; ``None`` outside split view."""

        if self.view_mode is not ViewMode.SPLIT:
            return None
        return sync_scroll(
            editor_offset, editor_content, editor_viewport, preview_content, preview_viewport
        )

    # --- toolbar ----------------------------------------------------------

    def toolbar_buttons(self) -> Iterable[tuple[ToolbarButton, bool, bool]]:
        """Yield ``(button, disabled, active)`` for every toolbar entry."""

        for button in TOOLBAR_BUTTONS:
            yield button, button.is_disabled(self.context), button.is_active(self.context)

    def press(self, button_id: str) -> EditorResult:
        button = find_button(button_id)
        if button.is_disabled(self.context):
            return EditorResult(consumed=False, status="disabled")
        return self.dispatch(button.command())

    # --- keyboard ---------------------------------------------------------

    def key_flags(self) -> dict[str, bool]:
        session = self.context.dialog
        return {
            "dialog_open": session is not None,
            "can_submit": session is not None and session.form.can_submit,
            "dropdown_open": self.context.toolbar.open_dropdown is not None,
            "fullscreen": self.fullscreen,
            "split": self.view_mode is ViewMode.SPLIT,
            "html_mode": self.mode is SyntaxMode.HTML,
        }

    def handle_key(self, key: str, modifiers: Iterable[str] = ()) -> EditorResult:
        stroke = KeyStroke(key, tuple(modifiers))
        scope = DIALOG_SCOPE if self.context.dialog is not None else EDITOR_SCOPE
        resolution = self.shortcut_resolver.resolve(
            scope, stroke, context=self.key_flags()
        )
        if resolution.status != "match" or resolution.match is None:
            return EditorResult(consumed=False, status="miss")
        match = resolution.match
        telemetry.record_event(
            "shortcut", level="debug", data={"binding": match.binding.id, "chord": stroke.token}
        )
        result = match.action(self, match)
        if not isinstance(result, EditorResult):
            return EditorResult(consumed=True, status="handled")
        return result

    # --- preview ----------------------------------------------------------

    def process_pending(self) -> Optional[str]:
        return self.preview.process_pending()

    def flush_preview(self) -> Optional[str]:
        return self.preview.flush()

    def _handle_render(self, html: str) -> None:
        self.bus.emit(events.PREVIEW_RENDERED, html)


__all__ = ["RichEditor"]
