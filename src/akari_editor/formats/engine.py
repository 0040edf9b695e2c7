"""Template lookup and selection wrapping."""

from __future__ import annotations

from typing import Optional

from akari_editor.buffer import TextEdit, splice

from .labels import DEFAULT_LOCALE
from .models import FormatKey, FormatTemplate, SyntaxMode
from .tables import build_format_table


def get_format(
    mode: SyntaxMode | str,
    key: FormatKey | str,
    *,
    locale: str = DEFAULT_LOCALE,
) -> Optional[FormatTemplate]:
    """Look up the template for ``(mode, key)``; ``None`` when either is unknown."""

    try:
        resolved_mode = SyntaxMode(mode)
        resolved_key = FormatKey(key)
    except ValueError:
        return None
    return build_format_table(locale)[resolved_mode][resolved_key]


def apply_format(buffer: str, start: int, end: int, template: FormatTemplate) -> TextEdit:
    """Wrap ``buffer[start:end]`` (or the placeholder) and splice it back.

    The cursor lands right after the wrapped text, before the suffix.
    """

    wrapped = buffer[start:end] or template.default_text
    updated = splice(buffer, start, end, template.wrap(wrapped))
    cursor = start + len(template.prefix) + len(wrapped)
    return TextEdit(buffer=updated, start=cursor, end=cursor)


__all__ = ["apply_format", "get_format"]
