"""Markdown preview rendering and its debounce scheduler."""

from .renderer import (
    INLINE_RULES,
    MarkdownRenderer,
    markdown_to_html,
    render_inline,
    render_preview,
)
from .scheduler import PendingRender, PreviewScheduler

__all__ = [
    "INLINE_RULES",
    "MarkdownRenderer",
    "PendingRender",
    "PreviewScheduler",
    "markdown_to_html",
    "render_inline",
    "render_preview",
]
