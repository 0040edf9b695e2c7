"""Editor orchestration: commands, reducer, dialogs, toolbar and controller."""

from .state import (
    DialogKind,
    Dropdown,
    EditorContext,
    EditorResult,
    EditorState,
    ToolbarState,
    ViewMode,
)
from . import commands
from .commands import Command
from .dialogs import DialogSession, ImageForm, LinkForm, TableForm
from .events import EditorBus
from .layout import clamp_split, scroll_ratio, status_line, sync_scroll
from .toolbar import COMMON_EMOJIS, PRESET_COLORS, TOOLBAR_BUTTONS, ToolbarButton, find_button
from .reducer import reduce
from .controller import RichEditor

__all__ = [
    "COMMON_EMOJIS",
    "Command",
    "DialogKind",
    "DialogSession",
    "Dropdown",
    "EditorBus",
    "EditorContext",
    "EditorResult",
    "EditorState",
    "ImageForm",
    "LinkForm",
    "PRESET_COLORS",
    "RichEditor",
    "TOOLBAR_BUTTONS",
    "TableForm",
    "ToolbarButton",
    "ToolbarState",
    "ViewMode",
    "clamp_split",
    "commands",
    "find_button",
    "reduce",
    "scroll_ratio",
    "status_line",
    "sync_scroll",
]
