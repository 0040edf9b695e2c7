"""Structural operators and compound-insert builders."""

from .inserts import (
    body_row_count,
    generate_image,
    generate_link,
    generate_table,
    insert_markup,
)
from .structural import (
    INDENT_UNIT,
    add_indent,
    alignment_tag,
    apply_alignment,
    generate_color_text,
    remove_indent,
)

__all__ = [
    "INDENT_UNIT",
    "add_indent",
    "alignment_tag",
    "apply_alignment",
    "body_row_count",
    "generate_color_text",
    "generate_image",
    "generate_link",
    "generate_table",
    "insert_markup",
    "remove_indent",
]
