import pytest

from akari_editor.buffer import Selection
from akari_editor.config import EditorSettings
from akari_editor.editor import Dropdown, RichEditor, ViewMode, events
from akari_editor.errors import SelectionError
from akari_editor.formats import FormatKey, SyntaxMode


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


def make_editor(value: str = "", **kwargs):
    changes: list[str] = []
    kwargs.setdefault("settings", EditorSettings())
    kwargs.setdefault("clock", FakeClock())
    editor = RichEditor(value, on_change=changes.append, **kwargs)
    return editor, changes


def test_initial_caret_sits_at_end() -> None:
    editor, _ = make_editor("abc")

    assert editor.selection == Selection.caret(3)
    assert editor.mode is SyntaxMode.MARKDOWN
    assert editor.view_mode is ViewMode.SPLIT


def test_bold_wraps_selection_and_notifies() -> None:
    editor, changes = make_editor("hello world")
    editor.select(6, 11)

    result = editor.apply_format(FormatKey.BOLD)

    assert result.changed
    assert editor.value == "hello **world**"
    assert editor.selection == Selection.caret(13)
    assert changes == ["hello **world**"]
    assert editor.can_undo()


def test_unknown_format_is_a_no_op() -> None:
    editor, changes = make_editor("abc")

    result = editor.apply_format("sparkle")

    assert not result.consumed
    assert result.status == "unknown_format"
    assert editor.value == "abc"
    assert changes == []
    assert not editor.can_undo()


def test_heading_uses_level_placeholder() -> None:
    editor, _ = make_editor()

    editor.insert_heading(2)

    assert editor.value == "## 見出し2"
    assert editor.insert_heading(9).status == "unknown_format"


def test_select_outside_buffer_raises() -> None:
    editor, _ = make_editor("abc")

    with pytest.raises(SelectionError):
        editor.select(0, 10)


def test_reversed_selection_is_ordered() -> None:
    editor, _ = make_editor("abcdef")

    editor.select(4, 1)

    assert editor.selection == Selection(1, 4, "bcd")


def test_indent_then_outdent_restores_buffer_and_selection() -> None:
    editor, _ = make_editor("hello")
    editor.select(0, 5)

    editor.indent()
    assert editor.value == "  hello"
    assert (editor.selection.start, editor.selection.end) == (2, 7)

    editor.outdent()
    assert editor.value == "hello"
    assert (editor.selection.start, editor.selection.end) == (0, 5)
    assert editor.history.undo_depth == 2


def test_outdent_with_caret_before_indent_strips_line() -> None:
    editor, changes = make_editor("  abc")
    editor.select(0, 0)

    editor.outdent()

    assert editor.value == "abc"
    assert editor.selection == Selection.caret(0)
    assert changes == ["abc"]


def test_outdent_selection_ending_inside_next_indent() -> None:
    editor, _ = make_editor("  one\n  two")
    editor.select(0, 7)

    editor.outdent()

    assert editor.value == "one\ntwo"
    assert (editor.selection.start, editor.selection.end) == (0, 4)


def test_indent_uses_configured_unit() -> None:
    editor, _ = make_editor("x", settings=EditorSettings(indent_unit="    "))

    editor.indent()

    assert editor.value == "    x"


def test_alignment_only_in_html_mode() -> None:
    editor, _ = make_editor("abc")
    editor.select(0, 3)

    refused = editor.align("center")
    assert refused.status == "unsupported"
    assert refused.message
    assert editor.value == "abc"

    editor.set_syntax_mode(SyntaxMode.HTML)
    editor.align("right")
    assert editor.value == '<div style="text-align: right">abc</div>'
    assert editor.selection.text == "abc"


def test_color_wraps_selection_and_remembers_color() -> None:
    editor, _ = make_editor("abc")
    editor.select(0, 3)

    editor.apply_color("#ff0000")
    assert editor.value == '<span style="color: #ff0000">abc</span>'
    assert editor.selection == Selection.caret(len(editor.value))

    skipped = editor.apply_color("#00ff00", background=True)
    assert skipped.status == "empty_selection"
    assert editor.toolbar.recent_colors == ["#00ff00", "#ff0000"]


def test_recent_colors_are_bounded() -> None:
    editor, _ = make_editor()
    for index in range(12):
        editor.apply_color(f"#0000{index:02d}")

    assert len(editor.toolbar.recent_colors) == 10
    assert editor.toolbar.recent_colors[0] == "#000011"


def test_emoji_replaces_selection_and_closes_menu() -> None:
    editor, _ = make_editor("ab")
    editor.toggle_dropdown(Dropdown.EMOJI)
    editor.select(1, 1)

    editor.insert_emoji("👍")

    assert editor.value == "a👍b"
    assert editor.selection == Selection.caret(2)
    assert editor.toolbar.open_dropdown is None


def test_typing_pushes_history_and_skips_identical_text() -> None:
    editor, changes = make_editor()

    editor.type_text("abc", cursor=1)
    unchanged = editor.type_text("abc")

    assert editor.selection == Selection.caret(1)
    assert unchanged.status == "unchanged"
    assert changes == ["abc"]
    assert editor.history.undo_depth == 1


def test_undo_redo_round_trip() -> None:
    editor, _ = make_editor()
    for text in ["a", "ab", "abc"]:
        editor.type_text(text)

    for expected in ["ab", "a", ""]:
        assert editor.undo().status == "undo"
        assert editor.value == expected
    assert editor.undo().status == "undo_empty"

    for expected in ["a", "ab", "abc"]:
        editor.redo()
        assert editor.value == expected
    assert editor.redo().status == "redo_empty"


def test_edit_after_undo_clears_redo() -> None:
    editor, _ = make_editor()
    editor.type_text("one")
    editor.type_text("two")
    editor.undo()
    assert editor.can_redo()

    editor.type_text("three")

    assert not editor.can_redo()
    assert editor.history.redo_depth == 0


def test_history_cap_through_editor() -> None:
    editor, _ = make_editor()
    for index in range(60):
        editor.type_text(f"v{index}")

    assert editor.history.undo_depth == 50


def test_undo_clamps_selection_to_restored_buffer() -> None:
    editor, _ = make_editor()
    editor.type_text("a long line")
    editor.undo()

    assert editor.value == ""
    assert editor.selection == Selection.caret(0)


def test_set_value_skips_history_and_callback() -> None:
    editor, changes = make_editor("old")

    editor.set_value("new")

    assert editor.value == "new"
    assert changes == []
    assert not editor.can_undo()


def test_save_calls_back_without_touching_buffer() -> None:
    saves: list[str] = []
    editor, changes = make_editor("doc", on_save=lambda: saves.append("saved"))
    seen: list[object] = []
    editor.bus.subscribe(events.SAVED, seen.append)

    editor.save()
    editor.handle_key("s", ["ctrl"])

    assert saves == ["saved", "saved"]
    assert seen == ["doc", "doc"]
    assert changes == []
    assert not editor.can_undo()


def test_shortcuts_drive_formatting_and_history() -> None:
    editor, _ = make_editor("hello")
    editor.select(0, 5)

    assert editor.handle_key("b", ["cmd"]).changed
    assert editor.value == "**hello**"

    editor.handle_key("z", ["ctrl"])
    assert editor.value == "hello"

    editor.handle_key("z", ["ctrl", "shift"])
    assert editor.value == "**hello**"


def test_code_shortcuts() -> None:
    editor, _ = make_editor("x")
    editor.select(0, 1)

    editor.handle_key("`", ["ctrl"])
    assert editor.value == "`x`"

    editor, _ = make_editor("x")
    editor.select(0, 1)
    editor.handle_key("grave_accent", ["ctrl", "shift"])
    assert editor.value == "```\nx\n```"


def test_unbound_key_is_left_to_host() -> None:
    editor, _ = make_editor()

    result = editor.handle_key("j", ["ctrl"])

    assert not result.consumed
    assert result.status == "miss"


def test_escape_closes_open_dropdown() -> None:
    editor, _ = make_editor()
    editor.toggle_dropdown("heading")
    assert editor.key_flags()["dropdown_open"]

    editor.handle_key("escape")

    assert editor.toolbar.open_dropdown is None
    assert editor.handle_key("escape").status == "miss"


def test_dropdowns_are_exclusive() -> None:
    editor, _ = make_editor()

    editor.toggle_dropdown(Dropdown.TEXT_COLOR)
    editor.toggle_dropdown(Dropdown.BG_COLOR)
    assert editor.toolbar.open_dropdown is Dropdown.BG_COLOR

    editor.toggle_dropdown(Dropdown.BG_COLOR)
    assert editor.toolbar.open_dropdown is None
    assert editor.close_dropdown().status == "unchanged"


def test_view_mode_toggles() -> None:
    editor, _ = make_editor()

    editor.handle_key("p", ["ctrl", "shift"])
    assert editor.view_mode is ViewMode.EDITOR
    editor.toggle_preview()
    assert editor.view_mode is ViewMode.SPLIT

    editor.set_view_mode("preview")
    editor.toggle_preview()
    assert editor.view_mode is ViewMode.SPLIT


def test_theme_and_fullscreen_toggles() -> None:
    editor, _ = make_editor()
    views: list[object] = []
    editor.bus.subscribe(events.VIEW_CHANGED, views.append)

    editor.handle_key("enter", ["ctrl", "shift"])
    editor.toggle_theme()

    assert editor.fullscreen is True
    assert editor.dark is False
    assert len(views) == 2


def test_split_resize_is_clamped() -> None:
    editor, _ = make_editor()

    editor.resize_split(900, 0, 1000)
    assert editor.split_position == 80.0
    editor.resize_split(100, 0, 1000)
    assert editor.split_position == 20.0
    editor.resize_split(550, 50, 1000)
    assert editor.split_position == 50.0

    assert editor.resize_split(10, 0, 0).status == "unchanged"
    editor.set_view_mode(ViewMode.EDITOR)
    assert editor.resize_split(500, 0, 1000).status == "not_split"


def test_scroll_sync_only_in_split_view() -> None:
    editor, _ = make_editor()

    assert editor.sync_scroll(50, 200, 100, 400, 100) == 150.0
    assert editor.sync_scroll(50, 100, 100, 400, 100) == 0.0

    editor.set_view_mode("editor")
    assert editor.sync_scroll(50, 200, 100, 400, 100) is None


def test_preview_is_debounced() -> None:
    clock = FakeClock()
    editor, _ = make_editor("# T", clock=clock)
    rendered: list[object] = []
    editor.bus.subscribe(events.PREVIEW_RENDERED, rendered.append)

    assert editor.process_pending() is None
    clock.advance(200)
    assert editor.process_pending() == "<h1>T</h1>"

    editor.type_text("**b**")
    clock.advance(50)
    assert editor.process_pending() is None
    assert editor.flush_preview() == "<p><strong>b</strong></p>"
    assert editor.preview_html == "<p><strong>b</strong></p>"
    assert rendered == ["<h1>T</h1>", "<p><strong>b</strong></p>"]


def test_syntax_mode_switch_rerenders_preview() -> None:
    editor, _ = make_editor("**x**")
    editor.flush_preview()

    editor.set_syntax_mode()

    assert editor.mode is SyntaxMode.HTML
    assert editor.key_flags()["html_mode"]
    assert editor.flush_preview() == "**x**"
    assert editor.set_syntax_mode("html").status == "unchanged"


def test_status_line_counts_characters_and_lines() -> None:
    editor, _ = make_editor("ab\ncd")

    assert editor.status_line == "5 文字 | 2 行"

    english, _ = make_editor("", settings=EditorSettings(locale="en"))
    assert english.status_line == "0 chars | 1 lines"


def test_buffer_events_follow_commits() -> None:
    editor, _ = make_editor("ab")
    buffers: list[object] = []
    selections: list[object] = []
    editor.bus.subscribe(events.BUFFER_CHANGED, buffers.append)
    editor.bus.subscribe(events.SELECTION_CHANGED, selections.append)

    editor.select(0, 1)
    editor.apply_format("italic")

    assert selections == [Selection(0, 1, "a")]
    assert buffers == ["*a*b"]
