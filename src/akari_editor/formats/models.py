"""Enums and records describing syntax modes, formats and dialog payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SyntaxMode(str, Enum):
    """Target syntax for insertions and preview conversion."""

    MARKDOWN = "markdown"
    HTML = "html"

    def toggled(self) -> "SyntaxMode":
        return SyntaxMode.HTML if self is SyntaxMode.MARKDOWN else SyntaxMode.MARKDOWN


class FormatKey(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    CODE_BLOCK = "codeBlock"
    LINK = "link"
    IMAGE = "image"
    QUOTE = "quote"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    UL = "ul"
    OL = "ol"
    TASK = "task"
    HR = "hr"

    @classmethod
    def heading(cls, level: int) -> "FormatKey":
        if not 1 <= level <= 6:
            raise ValueError(f"heading level must be 1-6, got {level}")
        return cls(f"h{level}")


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class FormatTemplate:
    """Prefix/suffix pair wrapped around a selection or placeholder.

    ``block_level`` marks line-anchored constructs (headings, lists, quotes);
    insertion itself is the same for both kinds.
    """

    prefix: str
    suffix: str
    default_text: str = ""
    block_level: bool = False

    def wrap(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"


@dataclass(frozen=True, slots=True)
class LinkDialogData:
    url: str
    text: str = ""
    open_in_new_tab: bool = False


@dataclass(frozen=True, slots=True)
class ImageDialogData:
    url: str
    alt: str = ""
    width: str = ""
    height: str = ""


@dataclass(frozen=True, slots=True)
class TableDialogData:
    rows: int = 3
    cols: int = 3
    has_header: bool = True
    alignment: Alignment = Alignment.LEFT


__all__ = [
    "Alignment",
    "FormatKey",
    "FormatTemplate",
    "ImageDialogData",
    "LinkDialogData",
    "SyntaxMode",
    "TableDialogData",
]
