"""Localised placeholder strings inserted when the selection is empty."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_LOCALE = "ja"

_JA = {
    "bold": "太字テキスト",
    "italic": "斜体テキスト",
    "underline": "下線テキスト",
    "strikethrough": "取り消し線",
    "code": "コード",
    "codeBlock": "コードブロック",
    "link": "リンクテキスト",
    "image": "画像の説明",
    "quote": "引用テキスト",
    "heading": "見出し{level}",
    "list_item": "リスト項目",
    "task": "タスク",
    "link_fallback": "リンク",
    "image_fallback": "画像",
    "align_placeholder": "テキスト",
    "table_header": "ヘッダー",
    "table_cell": "セル",
    "status": "{chars} 文字 | {lines} 行",
}

_EN = {
    "bold": "bold text",
    "italic": "italic text",
    "underline": "underlined text",
    "strikethrough": "strikethrough",
    "code": "code",
    "codeBlock": "code block",
    "link": "link text",
    "image": "image description",
    "quote": "quote",
    "heading": "Heading {level}",
    "list_item": "list item",
    "task": "task",
    "link_fallback": "link",
    "image_fallback": "image",
    "align_placeholder": "text",
    "table_header": "Header",
    "table_cell": "Cell",
    "status": "{chars} chars | {lines} lines",
}

CATALOGUES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {"ja": MappingProxyType(_JA), "en": MappingProxyType(_EN)}
)


def labels_for(locale: str | None) -> Mapping[str, str]:
    """Return the catalogue for ``locale``, falling back to Japanese."""

    return CATALOGUES.get((locale or DEFAULT_LOCALE).lower(), CATALOGUES[DEFAULT_LOCALE])


def label(name: str, locale: str | None = None, **params: object) -> str:
    text = labels_for(locale)[name]
    return text.format(**params) if params else text


__all__ = ["CATALOGUES", "DEFAULT_LOCALE", "label", "labels_for"]
