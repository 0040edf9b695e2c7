"""Executable Textual app that hosts the rich-text editor."""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, Vertical, VerticalScroll
    from textual.screen import ModalScreen
    from textual.widgets import (
        Button,
        Checkbox,
        Footer,
        Header,
        Input,
        Label,
        Select,
        Static,
        TextArea,
    )
    from textual.widgets.text_area import Selection as AreaSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use akari_editor.adapters.textual.app"
    ) from exc

from akari_editor.buffer import Selection, location_for_offset
from akari_editor.config import load_telemetry_settings
from akari_editor.editor import RichEditor, ViewMode, events
from akari_editor.editor.dialogs import DialogSession, ImageForm, LinkForm, TableForm
from akari_editor.formats.models import Alignment, SyntaxMode
from akari_editor.keymaps import EDITOR_SCOPE, Binding as Shortcut
from akari_editor.keymaps.defaults import DEFAULT_BINDINGS
from akari_editor.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

# Textual names a few keys differently from the chord text.
_TEXTUAL_KEYS = {"`": "grave_accent", " ": "space", "+": "plus"}


def shortcut_bindings(shortcuts: Iterable[Shortcut] = DEFAULT_BINDINGS) -> List[Binding]:
    """Priority Textual bindings for every unconditional editor-scope shortcut."""

    bindings: List[Binding] = []
    for binding in shortcuts:
        if binding.scope != EDITOR_SCOPE or binding.when:
            continue
        stroke = binding.stroke
        key = "+".join(stroke.modifiers + (_TEXTUAL_KEYS.get(stroke.key, stroke.key),))
        bindings.append(
            Binding(
                key,
                f"shortcut({stroke.token!r})",
                binding.description,
                show=False,
                priority=True,
            )
        )
    return bindings


class EditorDialog(ModalScreen[None]):
    """Base modal; field edits go through the adapter so the core validates them."""

    DEFAULT_CSS = """
    EditorDialog {
        align: center middle;
    }

    EditorDialog > Vertical {
        width: 60;
        height: auto;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }

    EditorDialog Horizontal {
        height: auto;
        margin-top: 1;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    title_text = ""

    def __init__(self, adapter: TextualEditorAdapter, session: DialogSession) -> None:
        super().__init__()
        self.adapter = adapter
        self.session = session

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_text)
            yield from self.fields()
            with Horizontal():
                yield Button("挿入", variant="primary", id="confirm")
                yield Button("キャンセル", id="cancel")

    def fields(self) -> ComposeResult:  # pragma: no cover - overridden
        return iter(())

    def collect(self) -> dict[str, Any]:  # pragma: no cover - overridden
        return {}

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "confirm":
            self.action_confirm()
        else:
            self.action_cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_confirm()

    def action_confirm(self) -> None:
        self.adapter.update_dialog(**self.collect())
        result = self.adapter.confirm_dialog()
        if result.status == "dialog_invalid":
            self.notify(result.message or "入力内容を確認してください", severity="warning")

    def action_cancel(self) -> None:
        self.adapter.cancel_dialog()


class LinkDialog(EditorDialog):
    title_text = "リンクを挿入"

    def fields(self) -> ComposeResult:
        form = self.session.form
        assert isinstance(form, LinkForm)
        yield Input(value=form.url, placeholder="https://example.com", id="url")
        yield Input(value=form.text, placeholder="リンクテキスト", id="text")
        yield Checkbox("新しいタブで開く", value=form.open_in_new_tab, id="new-tab")

    def collect(self) -> dict[str, Any]:
        return {
            "url": self.query_one("#url", Input).value,
            "text": self.query_one("#text", Input).value,
            "open_in_new_tab": self.query_one("#new-tab", Checkbox).value,
        }


class ImageDialog(EditorDialog):
    title_text = "画像を挿入"

    def fields(self) -> ComposeResult:
        form = self.session.form
        assert isinstance(form, ImageForm)
        yield Input(value=form.url, placeholder="https://example.com/image.png", id="url")
        yield Input(value=form.alt, placeholder="代替テキスト", id="alt")
        with Horizontal():
            yield Input(value=form.width, placeholder="幅", id="width")
            yield Input(value=form.height, placeholder="高さ", id="height")

    def collect(self) -> dict[str, Any]:
        return {
            name: self.query_one(f"#{name}", Input).value
            for name in ("url", "alt", "width", "height")
        }


class TableDialog(EditorDialog):
    title_text = "テーブルを挿入"

    def fields(self) -> ComposeResult:
        form = self.session.form
        assert isinstance(form, TableForm)
        with Horizontal():
            yield Input(value=str(form.rows), type="integer", placeholder="行", id="rows")
            yield Input(value=str(form.cols), type="integer", placeholder="列", id="cols")
        yield Checkbox("ヘッダー行", value=form.has_header, id="header")
        yield Select(
            [("左寄せ", Alignment.LEFT), ("中央寄せ", Alignment.CENTER), ("右寄せ", Alignment.RIGHT)],
            value=form.alignment,
            allow_blank=False,
            id="alignment",
        )

    def collect(self) -> dict[str, Any]:
        form = self.session.form
        assert isinstance(form, TableForm)
        rows = self.query_one("#rows", Input).value.strip()
        cols = self.query_one("#cols", Input).value.strip()
        return {
            "rows": int(rows) if rows.lstrip("-").isdigit() else form.rows,
            "cols": int(cols) if cols.lstrip("-").isdigit() else form.cols,
            "has_header": self.query_one("#header", Checkbox).value,
            "alignment": self.query_one("#alignment", Select).value,
        }


_DIALOGS = {"link": LinkDialog, "image": ImageDialog, "table": TableDialog}


class AkariEditorApp(App[None]):
    """Split-pane Markdown/HTML editor with a live preview."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#panes {
		height: 1fr;
	}

	#editor-pane {
		height: 1fr;
	}

	#preview-scroll {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        *shortcut_bindings(),
    ]

    def __init__(
        self,
        *,
        value: str = "",
        mode: SyntaxMode = SyntaxMode.MARKDOWN,
        path: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self.path = path
        self.editor = RichEditor(value, initial_mode=mode, on_save=self._write_file)
        self.adapter: TextualEditorAdapter | None = None
        self._text_area: TextArea | None = None
        self._preview_scroll: VerticalScroll | None = None
        self._preview: Static | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="panes"):
            self._text_area = TextArea(self.editor.value, id="editor-pane")
            yield self._text_area
            with VerticalScroll(id="preview-scroll") as scroll:
                self._preview_scroll = scroll
                self._preview = Static("", id="preview", markup=False)
                yield self._preview
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_preview=self._update_preview,
            update_status=self._update_status,
            show_dialog=self._show_dialog,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.editor, hooks)
        self.editor.flush_preview()
        self._apply_view()
        self.set_interval(0.05, self._tick)

    def action_shortcut(self, chord: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(chord)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            area = event.text_area
            self.adapter.handle_text_change(area.text, area.cursor_location)

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if self.adapter:
            selection = event.selection
            self.adapter.handle_selection(selection.start, selection.end)

    def _tick(self) -> None:
        if not self.adapter:
            return
        self.adapter.process_pending()
        area, scroll = self._text_area, self._preview_scroll
        if area is None or scroll is None:
            return
        target = self.adapter.sync_scroll(
            area.scroll_y,
            area.virtual_size.height,
            area.size.height,
            scroll.virtual_size.height,
            scroll.size.height,
        )
        if target is not None and abs(scroll.scroll_y - target) >= 1:
            scroll.scroll_to(y=target, animate=False)

    def _update_buffer(self, text: str, selection: Selection) -> None:
        area = self._text_area
        if area is None:
            return
        if area.text != text:
            area.text = text
        area.selection = AreaSelection(
            location_for_offset(text, selection.start),
            location_for_offset(text, selection.end),
        )

    def _update_preview(self, html: str) -> None:
        if self._preview:
            self._preview.update(html)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)

    def _show_dialog(self, session: Optional[DialogSession]) -> None:
        if session is None:
            if isinstance(self.screen, EditorDialog):
                self.pop_screen()
            if self._text_area:
                self._text_area.focus()
            return
        if self.adapter:
            self.push_screen(_DIALOGS[session.kind.value](self.adapter, session))

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == events.VIEW_CHANGED:
            self._apply_view()
        elif name == events.SAVED:
            self.notify("保存しました")

    def _apply_view(self) -> None:
        editor = self.editor
        area, scroll = self._text_area, self._preview_scroll
        if area is None or scroll is None:
            return
        view = editor.view_mode
        area.display = view is not ViewMode.PREVIEW
        scroll.display = view is not ViewMode.EDITOR
        if view is ViewMode.SPLIT:
            area.styles.width = f"{editor.split_position:.0f}%"
            scroll.styles.width = f"{100 - editor.split_position:.0f}%"
        else:
            area.styles.width = "100%"
            scroll.styles.width = "100%"
        area.language = "markdown" if editor.mode is SyntaxMode.MARKDOWN else "html"
        self.theme = "textual-dark" if editor.dark else "textual-light"
        for widget in self.query(Header):
            widget.display = not editor.fullscreen
        for widget in self.query(Footer):
            widget.display = not editor.fullscreen

    def _log_line(self, line: str) -> None:
        self.log(line)

    def _write_file(self) -> None:
        if self.path is not None:
            self.path.write_text(self.editor.value, encoding="utf-8")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Akari rich-text editor.")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="File to edit; Ctrl+S writes the buffer back to it",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SyntaxMode],
        default=SyntaxMode.MARKDOWN.value,
        help="Initial syntax mode (default: markdown)",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        help="Telelog preset; by default logs follow AKARI_EDITOR_* settings",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    else:
        # The terminal belongs to Textual, so console logging stays off.
        telemetry.configure(
            settings=dataclasses.replace(load_telemetry_settings(), console=False)
        )
    value = ""
    if args.path is not None and args.path.exists():
        value = args.path.read_text(encoding="utf-8")
    app = AkariEditorApp(value=value, mode=SyntaxMode(args.mode), path=args.path)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
