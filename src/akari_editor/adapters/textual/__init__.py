"""Textual host for the editor. ``app`` imports Textual; ``controller`` does not."""

from .controller import TextualEditorAdapter, TextualUIHooks, textual_key_to_stroke

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "textual_key_to_stroke"]
