"""UI-agnostic Markdown/HTML rich-text editing core."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "editor",
    "errors",
    "formats",
    "keymaps",
    "operators",
    "preview",
    "runtime",
]

__version__ = "0.1.0"
