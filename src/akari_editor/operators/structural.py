"""Line-oriented transforms: indent, outdent, block alignment and colour spans."""

from __future__ import annotations

from akari_editor.buffer import TextEdit, line_start, splice
from akari_editor.formats.models import Alignment

INDENT_UNIT = "  "


def _touched(buffer: str, start: int, end: int) -> tuple[int, list[str]]:
    anchor = line_start(buffer, start)
    return anchor, buffer[anchor:end].split("\n")


def add_indent(buffer: str, start: int, end: int, *, unit: str = INDENT_UNIT) -> TextEdit:
    """Prefix every line touched by ``[start, end]`` with ``unit``.

    An empty selection still indents the line holding the caret.
    """

    anchor, lines = _touched(buffer, start, end)
    indented = "\n".join(unit + line for line in lines)
    return TextEdit(
        buffer=splice(buffer, anchor, end, indented),
        start=start + len(unit),
        end=end + len(unit) * len(lines),
    )


def _strip_indent(line: str, unit: str) -> tuple[str, int]:
    if unit and line.startswith(unit):
        return line[len(unit):], len(unit)
    if line.startswith("\t"):
        return line[1:], 1
    return line, 0


def remove_indent(
    buffer: str, start: int, end: int, *, unit: str = INDENT_UNIT
) -> TextEdit:
    """Drop one indent unit (or a tab) from each touched line that has one.

    Whole lines are stripped, so a caret sitting inside the indent still
    outdents its line. Selection offsets only shift by the indent removed
    before them.
    """

    anchor = line_start(buffer, start)
    line_end = buffer.find("\n", end)
    if line_end == -1:
        line_end = len(buffer)
    stripped: list[str] = []
    shift_start = 0
    shift_end = 0
    offset = anchor
    for index, line in enumerate(buffer[anchor:line_end].split("\n")):
        text, removed = _strip_indent(line, unit)
        if index == 0:
            shift_start = min(removed, start - offset)
        shift_end += min(removed, max(0, end - offset))
        stripped.append(text)
        offset += len(line) + 1
    return TextEdit(
        buffer=splice(buffer, anchor, line_end, "\n".join(stripped)),
        start=max(anchor, start - shift_start),
        end=max(anchor, end - shift_end),
    )


def alignment_tag(alignment: Alignment | str) -> str:
    resolved = Alignment(alignment)
    if resolved is Alignment.LEFT:
        return "<div>"
    return f'<div style="text-align: {resolved.value}">'


def apply_alignment(
    buffer: str,
    start: int,
    end: int,
    alignment: Alignment | str,
    *,
    placeholder: str = "テキスト",
) -> TextEdit:
    """Wrap the selection in an aligned ``<div>``; the inner text stays selected."""

    opening = alignment_tag(alignment)
    inner = buffer[start:end] or placeholder
    updated = splice(buffer, start, end, f"{opening}{inner}</div>")
    inner_start = start + len(opening)
    return TextEdit(buffer=updated, start=inner_start, end=inner_start + len(inner))


def generate_color_text(text: str, color: str, *, background: bool = False) -> str:
    # Markdown has no colour syntax, so both modes emit the same span.
    prop = "background-color" if background else "color"
    return f'<span style="{prop}: {color}">{text}</span>'


__all__ = [
    "INDENT_UNIT",
    "add_indent",
    "alignment_tag",
    "apply_alignment",
    "generate_color_text",
    "remove_indent",
]
