"""Static (syntax mode x format key) template tables."""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .labels import DEFAULT_LOCALE, labels_for
from .models import FormatKey, FormatTemplate, SyntaxMode

# prefix, suffix, placeholder label, block level
_Row = Tuple[str, str, str, bool]

_MARKDOWN: Dict[FormatKey, _Row] = {
    FormatKey.BOLD: ("**", "**", "bold", False),
    FormatKey.ITALIC: ("*", "*", "italic", False),
    FormatKey.UNDERLINE: ("<u>", "</u>", "underline", False),
    FormatKey.STRIKETHROUGH: ("~~", "~~", "strikethrough", False),
    FormatKey.CODE: ("`", "`", "code", False),
    FormatKey.CODE_BLOCK: ("```\n", "\n```", "codeBlock", False),
    FormatKey.LINK: ("[", "](url)", "link", False),
    FormatKey.IMAGE: ("![", "](url)", "image", False),
    FormatKey.QUOTE: ("> ", "", "quote", True),
    FormatKey.H1: ("# ", "", "heading", True),
    FormatKey.H2: ("## ", "", "heading", True),
    FormatKey.H3: ("### ", "", "heading", True),
    FormatKey.H4: ("#### ", "", "heading", True),
    FormatKey.H5: ("##### ", "", "heading", True),
    FormatKey.H6: ("###### ", "", "heading", True),
    FormatKey.UL: ("- ", "", "list_item", True),
    FormatKey.OL: ("1. ", "", "list_item", True),
    FormatKey.TASK: ("- [ ] ", "", "task", True),
    FormatKey.HR: ("\n---\n", "", "", False),
}

_HTML: Dict[FormatKey, _Row] = {
    FormatKey.BOLD: ("<strong>", "</strong>", "bold", False),
    FormatKey.ITALIC: ("<em>", "</em>", "italic", False),
    FormatKey.UNDERLINE: ("<u>", "</u>", "underline", False),
    FormatKey.STRIKETHROUGH: ("<del>", "</del>", "strikethrough", False),
    FormatKey.CODE: ("<code>", "</code>", "code", False),
    FormatKey.CODE_BLOCK: ("<pre><code>\n", "\n</code></pre>", "codeBlock", False),
    FormatKey.LINK: ('<a href="url">', "</a>", "link", False),
    FormatKey.IMAGE: ('<img src="url" alt="', '">', "image", False),
    FormatKey.QUOTE: ("<blockquote>", "</blockquote>", "quote", True),
    FormatKey.H1: ("<h1>", "</h1>", "heading", True),
    FormatKey.H2: ("<h2>", "</h2>", "heading", True),
    FormatKey.H3: ("<h3>", "</h3>", "heading", True),
    FormatKey.H4: ("<h4>", "</h4>", "heading", True),
    FormatKey.H5: ("<h5>", "</h5>", "heading", True),
    FormatKey.H6: ("<h6>", "</h6>", "heading", True),
    FormatKey.UL: ("<ul>\n  <li>", "</li>\n</ul>", "list_item", True),
    FormatKey.OL: ("<ol>\n  <li>", "</li>\n</ol>", "list_item", True),
    FormatKey.TASK: ('<input type="checkbox"> ', "", "task", True),
    FormatKey.HR: ("\n<hr>\n", "", "", False),
}

_ROWS: Dict[SyntaxMode, Dict[FormatKey, _Row]] = {
    SyntaxMode.MARKDOWN: _MARKDOWN,
    SyntaxMode.HTML: _HTML,
}

FormatTable = Mapping[SyntaxMode, Mapping[FormatKey, FormatTemplate]]


def _placeholder(key: FormatKey, label_name: str, locale: str) -> str:
    if not label_name:
        return ""
    text = labels_for(locale)[label_name]
    if label_name == "heading":
        return text.format(level=key.value[1])
    return text


@lru_cache(maxsize=None)
def build_format_table(locale: str = DEFAULT_LOCALE) -> FormatTable:
    """Resolve every (mode, key) pair into a ``FormatTemplate``.

    Raises ``LookupError`` if a mode is missing a key, so an incomplete
    table fails at import rather than as a silent runtime no-op.
    """

    table: Dict[SyntaxMode, Mapping[FormatKey, FormatTemplate]] = {}
    for mode in SyntaxMode:
        rows = _ROWS.get(mode, {})
        missing = [key.value for key in FormatKey if key not in rows]
        if missing:
            raise LookupError(f"{mode.value} table missing formats: {missing}")
        table[mode] = MappingProxyType(
            {
                key: FormatTemplate(
                    prefix=prefix,
                    suffix=suffix,
                    default_text=_placeholder(key, label_name, locale),
                    block_level=block_level,
                )
                for key, (prefix, suffix, label_name, block_level) in rows.items()
            }
        )
    return MappingProxyType(table)


FORMAT_TABLE = build_format_table()

__all__ = ["FORMAT_TABLE", "FormatTable", "build_format_table"]
