"""Intent records dispatched to the editor reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from akari_editor.formats.models import (
    Alignment,
    FormatKey,
    ImageDialogData,
    LinkDialogData,
    SyntaxMode,
    TableDialogData,
)

from .state import DialogKind, Dropdown, ViewMode

DialogPayload = Union[LinkDialogData, ImageDialogData, TableDialogData]


@dataclass(frozen=True, slots=True)
class ApplyFormat:
    key: FormatKey | str


@dataclass(frozen=True, slots=True)
class InsertHeading:
    level: int


@dataclass(frozen=True, slots=True)
class Indent:
    increase: bool = True


@dataclass(frozen=True, slots=True)
class Align:
    alignment: Alignment


@dataclass(frozen=True, slots=True)
class ApplyColor:
    color: str
    background: bool = False


@dataclass(frozen=True, slots=True)
class InsertEmoji:
    emoji: str


@dataclass(frozen=True, slots=True)
class ReplaceText:
    """Raw typing: the host hands over the whole new buffer."""

    text: str
    cursor: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Select:
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class OpenDialog:
    kind: DialogKind


@dataclass(frozen=True, slots=True)
class ConfirmDialog:
    payload: Optional[DialogPayload] = None


@dataclass(frozen=True, slots=True)
class CancelDialog:
    pass


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


@dataclass(frozen=True, slots=True)
class Save:
    pass


@dataclass(frozen=True, slots=True)
class SetViewMode:
    view_mode: ViewMode


@dataclass(frozen=True, slots=True)
class TogglePreview:
    pass


@dataclass(frozen=True, slots=True)
class SetSyntaxMode:
    mode: Optional[SyntaxMode] = None  # None toggles


@dataclass(frozen=True, slots=True)
class ToggleTheme:
    pass


@dataclass(frozen=True, slots=True)
class ToggleFullscreen:
    pass


@dataclass(frozen=True, slots=True)
class ToggleDropdown:
    dropdown: Dropdown


@dataclass(frozen=True, slots=True)
class CloseDropdown:
    pass


@dataclass(frozen=True, slots=True)
class ResizeSplit:
    pointer_x: float
    container_left: float
    container_width: float


Command = Union[
    ApplyFormat,
    InsertHeading,
    Indent,
    Align,
    ApplyColor,
    InsertEmoji,
    ReplaceText,
    Select,
    OpenDialog,
    ConfirmDialog,
    CancelDialog,
    Undo,
    Redo,
    Save,
    SetViewMode,
    TogglePreview,
    SetSyntaxMode,
    ToggleTheme,
    ToggleFullscreen,
    ToggleDropdown,
    CloseDropdown,
    ResizeSplit,
]

__all__ = [
    "Align",
    "ApplyColor",
    "ApplyFormat",
    "CancelDialog",
    "CloseDropdown",
    "Command",
    "ConfirmDialog",
    "DialogPayload",
    "Indent",
    "InsertEmoji",
    "InsertHeading",
    "OpenDialog",
    "Redo",
    "ReplaceText",
    "ResizeSplit",
    "Save",
    "Select",
    "SetSyntaxMode",
    "SetViewMode",
    "ToggleDropdown",
    "ToggleFullscreen",
    "TogglePreview",
    "ToggleTheme",
    "Undo",
]
