"""Format engine: template tables and selection wrapping."""

from .engine import apply_format, get_format
from .labels import DEFAULT_LOCALE, label, labels_for
from .models import (
    Alignment,
    FormatKey,
    FormatTemplate,
    ImageDialogData,
    LinkDialogData,
    SyntaxMode,
    TableDialogData,
)
from .tables import FORMAT_TABLE, build_format_table

__all__ = [
    "Alignment",
    "DEFAULT_LOCALE",
    "FORMAT_TABLE",
    "FormatKey",
    "FormatTemplate",
    "ImageDialogData",
    "LinkDialogData",
    "SyntaxMode",
    "TableDialogData",
    "apply_format",
    "build_format_table",
    "get_format",
    "label",
    "labels_for",
]
