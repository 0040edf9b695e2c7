"""Built-in shortcuts matching the editor's documented key table."""

from __future__ import annotations

from typing import Iterable, Sequence

from akari_editor.actions import shortcuts as shortcut_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import ShortcutRegistry

EDITOR_SCOPE = "editor"
DIALOG_SCOPE = "dialog"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id="format.bold", handler=shortcut_actions.format_bold, description="Bold"),
    ActionRef(id="format.italic", handler=shortcut_actions.format_italic, description="Italic"),
    ActionRef(
        id="format.underline", handler=shortcut_actions.format_underline, description="Underline"
    ),
    ActionRef(id="format.code", handler=shortcut_actions.format_code, description="Inline code"),
    ActionRef(
        id="format.code_block",
        handler=shortcut_actions.format_code_block,
        description="Code block",
    ),
    ActionRef(id="editor.save", handler=shortcut_actions.save, description="Save"),
    ActionRef(id="history.undo", handler=shortcut_actions.undo, description="Undo"),
    ActionRef(id="history.redo", handler=shortcut_actions.redo, description="Redo"),
    ActionRef(
        id="dialog.open_link", handler=shortcut_actions.open_link_dialog, description="Link"
    ),
    ActionRef(
        id="view.toggle_preview",
        handler=shortcut_actions.toggle_preview,
        description="Toggle preview",
    ),
    ActionRef(
        id="view.toggle_fullscreen",
        handler=shortcut_actions.toggle_fullscreen,
        description="Fullscreen",
    ),
    ActionRef(
        id="toolbar.close_dropdown",
        handler=shortcut_actions.close_dropdown,
        description="Close the open toolbar menu",
    ),
    ActionRef(
        id="dialog.cancel", handler=shortcut_actions.cancel_dialog, description="Cancel dialog"
    ),
    ActionRef(
        id="dialog.confirm", handler=shortcut_actions.confirm_dialog, description="Confirm dialog"
    ),
)


def _editor(binding_id: str, chord: str, action_id: str, description: str, **extra: object) -> Binding:
    return Binding(
        id=f"editor.{binding_id}",
        scope=EDITOR_SCOPE,
        stroke=KeyStroke.parse(chord),
        action_id=action_id,
        description=description,
        **extra,  # type: ignore[arg-type]
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _editor("bold", "ctrl+b", "format.bold", "Bold"),
    _editor("italic", "ctrl+i", "format.italic", "Italic"),
    _editor("underline", "ctrl+u", "format.underline", "Underline"),
    _editor("save", "ctrl+s", "editor.save", "Save"),
    _editor("undo", "ctrl+z", "history.undo", "Undo"),
    _editor("redo", "ctrl+shift+z", "history.redo", "Redo"),
    _editor("link", "ctrl+k", "dialog.open_link", "Link"),
    _editor("code", "ctrl+`", "format.code", "Inline code"),
    _editor("code_block", "ctrl+shift+`", "format.code_block", "Code block"),
    _editor("toggle_preview", "ctrl+shift+p", "view.toggle_preview", "Toggle preview"),
    _editor("fullscreen", "ctrl+shift+enter", "view.toggle_fullscreen", "Fullscreen"),
    _editor(
        "close_dropdown",
        "escape",
        "toolbar.close_dropdown",
        "Close the open toolbar menu",
        when=("dropdown_open",),
    ),
    Binding(
        id="dialog.cancel",
        scope=DIALOG_SCOPE,
        stroke=KeyStroke("escape"),
        action_id="dialog.cancel",
        description="Cancel dialog",
    ),
    Binding(
        id="dialog.confirm",
        scope=DIALOG_SCOPE,
        stroke=KeyStroke("enter"),
        action_id="dialog.confirm",
        description="Confirm dialog",
        when=("can_submit",),
    ),
)


def load_default_shortcuts(
    registry: ShortcutRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and their bindings."""

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "DIALOG_SCOPE",
    "EDITOR_SCOPE",
    "load_default_shortcuts",
]
