"""Editor state owned by the top-level controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from akari_editor.buffer import HistoryStack, Selection
from akari_editor.config import EditorSettings
from akari_editor.formats.models import SyntaxMode

if TYPE_CHECKING:
    from .dialogs import DialogSession


class ViewMode(str, Enum):
    EDITOR = "editor"
    PREVIEW = "preview"
    SPLIT = "split"


class Dropdown(str, Enum):
    """Toolbar menus; at most one is open at a time."""

    TEXT_COLOR = "text_color"
    BG_COLOR = "bg_color"
    HEADING = "heading"
    EMOJI = "emoji"


class DialogKind(str, Enum):
    LINK = "link"
    IMAGE = "image"
    TABLE = "table"


@dataclass(slots=True)
class EditorState:
    buffer: str = ""
    selection: Selection = field(default_factory=Selection)
    mode: SyntaxMode = SyntaxMode.MARKDOWN
    view_mode: ViewMode = ViewMode.SPLIT
    dark: bool = True
    fullscreen: bool = False
    split_position: float = 50.0


@dataclass(slots=True)
class ToolbarState:
    open_dropdown: Optional[Dropdown] = None
    recent_colors: List[str] = field(default_factory=list)
    recent_limit: int = 10

    def toggle(self, dropdown: Dropdown) -> None:
        self.open_dropdown = None if self.open_dropdown is dropdown else dropdown

    def close(self) -> None:
        self.open_dropdown = None

    def remember_color(self, color: str) -> None:
        colors = [color] + [existing for existing in self.recent_colors if existing != color]
        self.recent_colors = colors[: self.recent_limit]


@dataclass(slots=True)
class EditorResult:
    """Outcome of one dispatched command.

    ``buffer`` is set only when the command produced a new document; the
    controller commits it and fires ``on_change``. ``effects`` names the
    remaining side effects (``save``, ``preview``, ``dialog``, ``view``).
    """

    consumed: bool
    status: str = "ok"
    buffer: Optional[str] = None
    selection: Optional[Selection] = None
    effects: Tuple[str, ...] = ()
    message: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.buffer is not None


@dataclass(slots=True)
class EditorContext:
    """Everything a reducer handler may read or update."""

    state: EditorState
    history: HistoryStack
    toolbar: ToolbarState
    settings: EditorSettings
    dialog: Optional["DialogSession"] = None


__all__ = [
    "DialogKind",
    "Dropdown",
    "EditorContext",
    "EditorResult",
    "EditorState",
    "ToolbarState",
    "ViewMode",
]
