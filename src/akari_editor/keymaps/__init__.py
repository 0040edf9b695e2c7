"""Declarative shortcut registry and default bindings."""

from .models import ActionRef, Binding, KeyStroke, WhenClause
from .registry import ShortcutConflictError, ShortcutRegistry
from .resolver import ResolutionMatch, ResolutionResult, ShortcutResolver
from .defaults import DIALOG_SCOPE, EDITOR_SCOPE, load_default_shortcuts

__all__ = [
    "ActionRef",
    "Binding",
    "DIALOG_SCOPE",
    "EDITOR_SCOPE",
    "KeyStroke",
    "ResolutionMatch",
    "ResolutionResult",
    "ShortcutConflictError",
    "ShortcutRegistry",
    "ShortcutResolver",
    "WhenClause",
    "load_default_shortcuts",
]
