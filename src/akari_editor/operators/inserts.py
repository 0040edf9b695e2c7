"""Builders for link, image and table markup collected through dialogs."""

from __future__ import annotations

from akari_editor.buffer import Selection, TextEdit, splice
from akari_editor.formats.labels import label
from akari_editor.formats.models import (
    Alignment,
    ImageDialogData,
    LinkDialogData,
    SyntaxMode,
    TableDialogData,
)

_SEPARATORS = {
    Alignment.LEFT: "---",
    Alignment.CENTER: ":---:",
    Alignment.RIGHT: "---:",
}


def generate_link(
    mode: SyntaxMode | str, data: LinkDialogData, *, locale: str | None = None
) -> str:
    text = data.text or label("link_fallback", locale)
    if SyntaxMode(mode) is SyntaxMode.MARKDOWN:
        return f"[{text}]({data.url})"
    target = ' target="_blank" rel="noopener noreferrer"' if data.open_in_new_tab else ""
    return f'<a href="{data.url}"{target}>{text}</a>'


def generate_image(
    mode: SyntaxMode | str, data: ImageDialogData, *, locale: str | None = None
) -> str:
    alt = data.alt or label("image_fallback", locale)
    if SyntaxMode(mode) is SyntaxMode.MARKDOWN:
        return f"![{alt}]({data.url})"
    width = f' width="{data.width}"' if data.width else ""
    height = f' height="{data.height}"' if data.height else ""
    return f'<img src="{data.url}" alt="{alt}"{width}{height}>'


def body_row_count(data: TableDialogData) -> int:
    """Rows left for the body once a header (if any) takes one; never negative."""

    rows = data.rows - 1 if data.has_header else data.rows
    return max(0, rows)


def _markdown_row(cell: str, cols: int) -> str:
    return "|" + "|".join([f" {cell} "] * cols) + "|\n"


def _markdown_table(data: TableDialogData, header: str, cell: str) -> str:
    parts: list[str] = []
    if data.has_header:
        parts.append(_markdown_row(header, data.cols))
        parts.append(_markdown_row(_SEPARATORS[Alignment(data.alignment)], data.cols))
    for _ in range(body_row_count(data)):
        parts.append(_markdown_row(cell, data.cols))
    return "".join(parts)


def _html_table(data: TableDialogData, header: str, cell: str) -> str:
    alignment = Alignment(data.alignment)
    style = "" if alignment is Alignment.LEFT else f' style="text-align: {alignment.value}"'
    lines = ["<table>"]
    if data.has_header:
        lines.append("  <thead>")
        lines.append("    <tr>")
        lines.extend(f"      <th>{header}</th>" for _ in range(data.cols))
        lines.append("    </tr>")
        lines.append("  </thead>")
    lines.append("  <tbody>")
    for _ in range(body_row_count(data)):
        lines.append("    <tr>")
        lines.extend(f"      <td{style}>{cell}</td>" for _ in range(data.cols))
        lines.append("    </tr>")
    lines.append("  </tbody>")
    lines.append("</table>")
    return "\n".join(lines)


def generate_table(
    mode: SyntaxMode | str, data: TableDialogData, *, locale: str | None = None
) -> str:
    header = label("table_header", locale)
    cell = label("table_cell", locale)
    if SyntaxMode(mode) is SyntaxMode.MARKDOWN:
        return _markdown_table(data, header, cell)
    return _html_table(data, header, cell)


def insert_markup(buffer: str, saved: Selection, markup: str, *, surround: str = "") -> TextEdit:
    """Replace the saved selection with ``markup`` (optionally fenced by ``surround``)."""

    inserted = f"{surround}{markup}{surround}"
    cursor = saved.start + len(inserted)
    return TextEdit(
        buffer=splice(buffer, saved.start, saved.end, inserted),
        start=cursor,
        end=cursor,
    )


__all__ = [
    "body_row_count",
    "generate_image",
    "generate_link",
    "generate_table",
    "insert_markup",
]
