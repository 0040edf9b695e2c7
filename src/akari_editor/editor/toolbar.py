"""Static toolbar catalogue, colour palette and emoji picker contents."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from akari_editor.formats.models import Alignment, FormatKey

from . import commands as cmd
from .state import DialogKind, Dropdown, EditorContext, ViewMode

PRESET_COLORS: Tuple[str, ...] = (
    "#000000", "#434343", "#666666", "#999999", "#b7b7b7",
    "#cccccc", "#d9d9d9", "#efefef", "#f3f3f3", "#ffffff",
    "#980000", "#ff0000", "#ff9900", "#ffff00", "#00ff00",
    "#00ffff", "#4a86e8", "#0000ff", "#9900ff", "#ff00ff",
    "#e6b8af", "#f4cccc", "#fce5cd", "#fff2cc", "#d9ead3",
    "#d0e0e3", "#c9daf8", "#cfe2f3", "#d9d2e9", "#ead1dc",
    "#dd7e6b", "#ea9999", "#f9cb9c", "#ffe599", "#b6d7a8",
    "#a2c4c9", "#a4c2f4", "#9fc5e8", "#b4a7d6", "#d5a6bd",
    "#cc4125", "#e06666", "#f6b26b", "#ffd966", "#93c47d",
    "#76a5af", "#6d9eeb", "#6fa8dc", "#8e7cc3", "#c27ba0",
)

COMMON_EMOJIS: Tuple[str, ...] = (
    "😀", "😃", "😄", "😁", "😅", "😂", "🤣", "😊", "😇", "🙂",
    "🙃", "😉", "😌", "😍", "🥰", "😘", "😗", "😙", "😚", "😋",
    "😛", "😜", "🤪", "😝", "🤑", "🤗", "🤭", "🤫", "🤔", "🤐",
    "🤨", "😐", "😑", "😶", "😏", "😒", "🙄", "😬", "🤥", "😌",
    "😔", "😪", "🤤", "😴", "😷", "🤒", "🤕", "🤢", "🤮", "🤧",
    "🥵", "🥶", "🥴", "😵", "🤯", "🤠", "🥳", "🥸", "😎", "🤓",
    "👍", "👎", "👏", "🙌", "🤝", "🙏", "✌️", "🤞", "🤟", "🤘",
    "👌", "🤌", "🤏", "👈", "👉", "👆", "👇", "☝️", "✋", "🤚",
    "❤️", "🧡", "💛", "💚", "💙", "💜", "🖤", "🤍", "🤎", "💔",
    "⭐", "🌟", "✨", "💫", "🔥", "💯", "✅", "❌", "⚠️", "💡",
)

HEADING_LEVELS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)

Predicate = Callable[[EditorContext], bool]


@dataclass(frozen=True, slots=True)
class ToolbarButton:
    """One toolbar entry: what it dispatches and when it is greyed out."""

    id: str
    label: str
    command: Callable[[], cmd.Command]
    shortcut: Optional[str] = None
    disabled: Optional[Predicate] = None
    active: Optional[Predicate] = None

    @property
    def title(self) -> str:
        return f"{self.label} ({self.shortcut})" if self.shortcut else self.label

    def is_disabled(self, context: EditorContext) -> bool:
        return self.disabled is not None and self.disabled(context)

    def is_active(self, context: EditorContext) -> bool:
        return self.active is not None and self.active(context)


def _format(button_id: str, label: str, key: FormatKey, shortcut: Optional[str] = None) -> ToolbarButton:
    return ToolbarButton(button_id, label, lambda: cmd.ApplyFormat(key), shortcut)


def _view(button_id: str, label: str, view_mode: ViewMode, shortcut: Optional[str] = None) -> ToolbarButton:
    return ToolbarButton(
        button_id,
        label,
        lambda: cmd.SetViewMode(view_mode),
        shortcut,
        active=lambda context: context.state.view_mode is view_mode,
    )


TOOLBAR_BUTTONS: Tuple[ToolbarButton, ...] = (
    ToolbarButton("save", "保存", cmd.Save, "Ctrl+S"),
    ToolbarButton(
        "undo", "元に戻す", cmd.Undo, "Ctrl+Z",
        disabled=lambda context: not context.history.can_undo(),
    ),
    ToolbarButton(
        "redo", "やり直し", cmd.Redo, "Ctrl+Shift+Z",
        disabled=lambda context: not context.history.can_redo(),
    ),
    _format("bold", "太字", FormatKey.BOLD, "Ctrl+B"),
    _format("italic", "斜体", FormatKey.ITALIC, "Ctrl+I"),
    _format("underline", "下線", FormatKey.UNDERLINE, "Ctrl+U"),
    _format("strikethrough", "取り消し線", FormatKey.STRIKETHROUGH),
    ToolbarButton(
        "text_color", "文字色", lambda: cmd.ToggleDropdown(Dropdown.TEXT_COLOR),
        active=lambda context: context.toolbar.open_dropdown is Dropdown.TEXT_COLOR,
    ),
    ToolbarButton(
        "bg_color", "背景色", lambda: cmd.ToggleDropdown(Dropdown.BG_COLOR),
        active=lambda context: context.toolbar.open_dropdown is Dropdown.BG_COLOR,
    ),
    ToolbarButton(
        "heading", "見出し", lambda: cmd.ToggleDropdown(Dropdown.HEADING),
        active=lambda context: context.toolbar.open_dropdown is Dropdown.HEADING,
    ),
    _format("hr", "区切り線", FormatKey.HR),
    _format("quote", "引用", FormatKey.QUOTE),
    _format("ul", "箇条書きリスト", FormatKey.UL),
    _format("ol", "番号付きリスト", FormatKey.OL),
    _format("task", "チェックリスト", FormatKey.TASK),
    _format("code", "インラインコード", FormatKey.CODE, "Ctrl+`"),
    _format("code_block", "コードブロック", FormatKey.CODE_BLOCK, "Ctrl+Shift+`"),
    ToolbarButton("link", "リンク挿入", lambda: cmd.OpenDialog(DialogKind.LINK), "Ctrl+K"),
    ToolbarButton("image", "画像挿入", lambda: cmd.OpenDialog(DialogKind.IMAGE)),
    ToolbarButton("table", "テーブル挿入", lambda: cmd.OpenDialog(DialogKind.TABLE)),
    ToolbarButton(
        "emoji", "絵文字", lambda: cmd.ToggleDropdown(Dropdown.EMOJI),
        active=lambda context: context.toolbar.open_dropdown is Dropdown.EMOJI,
    ),
    ToolbarButton("indent", "インデント追加", lambda: cmd.Indent(True)),
    ToolbarButton("outdent", "インデント削除", lambda: cmd.Indent(False)),
    ToolbarButton("align_left", "左寄せ", lambda: cmd.Align(Alignment.LEFT)),
    ToolbarButton("align_center", "中央寄せ", lambda: cmd.Align(Alignment.CENTER)),
    ToolbarButton("align_right", "右寄せ", lambda: cmd.Align(Alignment.RIGHT)),
    _view("view_editor", "エディターのみ", ViewMode.EDITOR),
    _view("view_preview", "プレビューのみ", ViewMode.PREVIEW),
    _view("view_split", "サイドバイサイド", ViewMode.SPLIT, "Ctrl+Shift+P"),
    ToolbarButton("syntax_mode", "Markdown/HTML切替", cmd.SetSyntaxMode),
    ToolbarButton("theme", "テーマ切替", cmd.ToggleTheme),
    ToolbarButton(
        "fullscreen", "フルスクリーン", cmd.ToggleFullscreen, "Ctrl+Shift+Enter",
        active=lambda context: context.state.fullscreen,
    ),
)

BUTTONS_BY_ID: Mapping[str, ToolbarButton] = MappingProxyType(
    {button.id: button for button in TOOLBAR_BUTTONS}
)


def find_button(button_id: str) -> ToolbarButton:
    try:
        return BUTTONS_BY_ID[button_id]
    except KeyError as exc:
        raise KeyError(f"Unknown toolbar button '{button_id}'") from exc


__all__ = [
    "BUTTONS_BY_ID",
    "COMMON_EMOJIS",
    "HEADING_LEVELS",
    "PRESET_COLORS",
    "TOOLBAR_BUTTONS",
    "ToolbarButton",
    "find_button",
]
