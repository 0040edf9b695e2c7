"""Adapter that wires RichEditor events into Textual-friendly callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from akari_editor.buffer import Location, Selection, offset_for_location
from akari_editor.editor import RichEditor, events
from akari_editor.editor.dialogs import DialogSession
from akari_editor.editor.state import EditorResult
from akari_editor.keymaps import KeyStroke


def _noop(*_args, **_kwargs) -> None:
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[str, Selection], None]
    update_preview: Callable[[str], None] = _noop
    update_status: Callable[[str], None] = _noop
    show_dialog: Callable[[Optional[DialogSession]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


def textual_key_to_stroke(key: str, modifiers: Iterable[str] = ()) -> KeyStroke:
    """Turn a Textual key name such as ``ctrl+shift+grave_accent`` into a chord."""

    if key == "+" or "+" not in key:
        return KeyStroke(key, tuple(modifiers))
    stroke = KeyStroke.parse(key)
    return KeyStroke(stroke.key, stroke.modifiers + tuple(modifiers))


class TextualEditorAdapter:
    """Bridges RichEditor commands and bus events to a Textual surface."""

    def __init__(self, editor: RichEditor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_status()

    def handle_textual_key(
        self, key: str, *, modifiers: Iterable[str] = ()
    ) -> EditorResult:
        """Resolve a key against the shortcut table; unconsumed keys belong to the host."""

        stroke = textual_key_to_stroke(key, modifiers)
        self._log_state("key ->", chord=stroke.token)
        result = self.editor.handle_key(stroke.key, stroke.modifiers)
        self._after_result(result)
        return result

    def handle_text_change(self, text: str, cursor: Location | None = None) -> EditorResult:
        """Commit raw typing reported by the host text widget."""

        offset = None if cursor is None else offset_for_location(text, cursor)
        result = self.editor.type_text(text, offset)
        if result.changed:
            self._refresh_status()
        return result

    def handle_selection(self, start: Location, end: Location) -> EditorResult:
        text = self.editor.value
        return self.editor.select(
            offset_for_location(text, start), offset_for_location(text, end)
        )

    def press(self, button_id: str) -> EditorResult:
        result = self.editor.press(button_id)
        self._after_result(result)
        return result

    def update_dialog(self, **fields: object) -> DialogSession:
        return self.editor.update_dialog(**fields)

    def confirm_dialog(self) -> EditorResult:
        result = self.editor.confirm_dialog()
        self._after_result(result)
        return result

    def cancel_dialog(self) -> EditorResult:
        result = self.editor.cancel_dialog()
        self._after_result(result)
        return result

    def process_pending(self) -> Optional[str]:
        """Forward the host timer tick to the preview debounce."""

        return self.editor.process_pending()

    def sync_scroll(
        self,
        editor_offset: float,
        editor_content: float,
        editor_viewport: float,
        preview_content: float,
        preview_viewport: float,
    ) -> Optional[float]:
        return self.editor.sync_scroll(
            editor_offset, editor_content, editor_viewport, preview_content, preview_viewport
        )

    def _after_result(self, result: EditorResult) -> None:
        if result.message:
            self.hooks.update_status(result.message)
        elif result.consumed:
            self._refresh_status()
        self._log_state("result <-", consumed=result.consumed, status=result.status)

    def _subscribe_events(self) -> None:
        bus = self.editor.bus
        bus.subscribe(events.BUFFER_CHANGED, lambda payload: self._on_buffer_changed())
        bus.subscribe(events.PREVIEW_RENDERED, self._on_preview)
        bus.subscribe(events.DIALOG_OPENED, self._on_dialog_opened)
        bus.subscribe(events.DIALOG_CLOSED, lambda payload: self.hooks.show_dialog(None))
        for event in (events.VIEW_CHANGED, events.SAVED, events.SELECTION_CHANGED):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _on_buffer_changed(self) -> None:
        self._refresh_buffer()
        self._refresh_status()

    def _on_preview(self, payload: object) -> None:
        self.hooks.update_preview(str(payload))

    def _on_dialog_opened(self, payload: object) -> None:
        if isinstance(payload, DialogSession):
            self.hooks.show_dialog(payload)

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.editor.value, self.editor.selection)

    def _refresh_status(self) -> None:
        self.hooks.update_status(self.editor.status_line)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        editor = self.editor
        dialog = editor.dialog
        return {
            "mode": editor.mode.value,
            "view": editor.view_mode.value,
            "selection": (editor.selection.start, editor.selection.end),
            "dialog": dialog.kind.value if dialog else None,
            "undo": editor.history.undo_depth,
            "redo": editor.history.redo_depth,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "textual_key_to_stroke"]
