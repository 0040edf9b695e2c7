from akari_editor.formats import Alignment
from akari_editor.operators import (
    add_indent,
    alignment_tag,
    apply_alignment,
    generate_color_text,
    remove_indent,
)


def test_indent_prefixes_every_touched_line() -> None:
    edit = add_indent("a\nb\nc", 0, 3)

    assert edit.buffer == "  a\n  b\nc"
    assert (edit.start, edit.end) == (2, 7)
    assert edit.buffer[edit.start : edit.end] == "a\n  b"


def test_indent_with_caret_uses_current_line() -> None:
    edit = add_indent("abc\ndef", 5, 5)

    assert edit.buffer == "abc\n  def"
    assert (edit.start, edit.end) == (7, 7)


def test_indent_respects_custom_unit() -> None:
    edit = add_indent("x", 0, 1, unit="    ")

    assert edit.buffer == "    x"
    assert (edit.start, edit.end) == (4, 5)


def test_indent_then_outdent_restores_single_line() -> None:
    indented = add_indent("hello", 0, 5)
    restored = remove_indent(indented.buffer, indented.start, indented.end)

    assert indented.buffer == "  hello"
    assert restored.buffer == "hello"
    assert (restored.start, restored.end) == (0, 5)


def test_outdent_multiline_tracks_removed_characters() -> None:
    edit = remove_indent("  a\n  b\nc", 2, 7)

    assert edit.buffer == "a\nb\nc"
    assert (edit.start, edit.end) == (0, 3)


def test_outdent_strips_tab_and_leaves_plain_lines() -> None:
    tabbed = remove_indent("\tx", 1, 2)
    plain = remove_indent("abc", 1, 1)

    assert tabbed.buffer == "x"
    assert (tabbed.start, tabbed.end) == (0, 1)
    assert plain.buffer == "abc"
    assert (plain.start, plain.end) == (1, 1)


def test_outdent_never_moves_before_line_start() -> None:
    edit = remove_indent("ab\n  cd", 3, 7)

    assert edit.buffer == "ab\ncd"
    assert (edit.start, edit.end) == (3, 5)


def test_outdent_with_caret_at_line_start_strips_whole_line() -> None:
    edit = remove_indent("  abc", 0, 0)

    assert edit.buffer == "abc"
    assert (edit.start, edit.end) == (0, 0)


def test_outdent_reaches_indent_past_selection_end() -> None:
    edit = remove_indent("  one\n  two", 0, 7)

    assert edit.buffer == "one\ntwo"
    assert (edit.start, edit.end) == (0, 4)


def test_alignment_wraps_selection_and_keeps_it_selected() -> None:
    edit = apply_alignment("say abc now", 4, 7, Alignment.CENTER)
    opening = '<div style="text-align: center">'

    assert edit.buffer == f"say {opening}abc</div> now"
    assert edit.buffer[edit.start : edit.end] == "abc"


def test_left_alignment_omits_style() -> None:
    assert alignment_tag(Alignment.LEFT) == "<div>"
    assert apply_alignment("abc", 0, 3, "left").buffer == "<div>abc</div>"


def test_alignment_with_empty_selection_inserts_placeholder() -> None:
    edit = apply_alignment("", 0, 0, Alignment.RIGHT)

    assert edit.buffer == '<div style="text-align: right">テキスト</div>'
    assert edit.buffer[edit.start : edit.end] == "テキスト"


def test_color_text_spans() -> None:
    assert generate_color_text("x", "#ff0000") == '<span style="color: #ff0000">x</span>'
    assert (
        generate_color_text("x", "#ffff00", background=True)
        == '<span style="background-color: #ffff00">x</span>'
    )
