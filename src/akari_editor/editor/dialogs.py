"""Modal dialog forms and the selection they freeze while open."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from akari_editor.buffer import Selection
from akari_editor.formats.models import (
    Alignment,
    ImageDialogData,
    LinkDialogData,
    TableDialogData,
)

from .state import DialogKind

MAX_TABLE_ROWS = 20
MAX_TABLE_COLS = 10
GRID_ROWS = 6
GRID_COLS = 8


def _clamp(value: int, upper: int) -> int:
    return max(1, min(int(value), upper))


@dataclass(slots=True)
class LinkForm:
    url: str = ""
    text: str = ""
    open_in_new_tab: bool = True

    @property
    def can_submit(self) -> bool:
        return bool(self.url.strip())

    def payload(self) -> LinkDialogData:
        return LinkDialogData(
            url=self.url.strip(), text=self.text, open_in_new_tab=self.open_in_new_tab
        )


@dataclass(slots=True)
class ImageForm:
    url: str = ""
    alt: str = ""
    width: str = ""
    height: str = ""

    @property
    def can_submit(self) -> bool:
        return bool(self.url.strip())

    def payload(self) -> ImageDialogData:
        return ImageDialogData(
            url=self.url.strip(),
            alt=self.alt,
            width=self.width.strip(),
            height=self.height.strip(),
        )


@dataclass(slots=True)
class TableForm:
    """Rows and columns are clamped on every write, so the form is always valid."""

    rows: int = 3
    cols: int = 3
    has_header: bool = True
    alignment: Alignment = Alignment.LEFT

    def __post_init__(self) -> None:
        self.rows = _clamp(self.rows, MAX_TABLE_ROWS)
        self.cols = _clamp(self.cols, MAX_TABLE_COLS)
        self.alignment = Alignment(self.alignment)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "rows":
            value = _clamp(value, MAX_TABLE_ROWS)  # type: ignore[arg-type]
        elif name == "cols":
            value = _clamp(value, MAX_TABLE_COLS)  # type: ignore[arg-type]
        elif name == "alignment":
            value = Alignment(value)
        object.__setattr__(self, name, value)

    @property
    def can_submit(self) -> bool:
        return True

    def select_grid(self, row: int, col: int) -> None:
        """Pick a size from the zero-based visual grid."""

        if not (0 <= row < GRID_ROWS and 0 <= col < GRID_COLS):
            raise ValueError(f"grid cell ({row}, {col}) outside {GRID_ROWS}x{GRID_COLS}")
        self.rows = row + 1
        self.cols = col + 1

    def payload(self) -> TableDialogData:
        return TableDialogData(
            rows=self.rows,
            cols=self.cols,
            has_header=self.has_header,
            alignment=self.alignment,
        )


DialogForm = Union[LinkForm, ImageForm, TableForm]

_PAYLOAD_TYPES = {
    DialogKind.LINK: LinkDialogData,
    DialogKind.IMAGE: ImageDialogData,
    DialogKind.TABLE: TableDialogData,
}


@dataclass(slots=True)
class DialogSession:
    """An open dialog: its kind, form and the selection saved at open time."""

    kind: DialogKind
    saved: Selection
    form: DialogForm

    @classmethod
    def open(cls, kind: DialogKind | str, saved: Selection) -> "DialogSession":
        resolved = DialogKind(kind)
        form: DialogForm
        if resolved is DialogKind.LINK:
            form = LinkForm(text=saved.text)
        elif resolved is DialogKind.IMAGE:
            form = ImageForm()
        else:
            form = TableForm()
        return cls(kind=resolved, saved=saved, form=form)

    def update(self, **fields: object) -> None:
        for name, value in fields.items():
            if not hasattr(self.form, name):
                raise AttributeError(f"{self.kind.value} dialog has no field '{name}'")
            setattr(self.form, name, value)

    def accepts(self, payload: object) -> bool:
        return isinstance(payload, _PAYLOAD_TYPES[self.kind])


__all__ = [
    "DialogForm",
    "DialogSession",
    "GRID_COLS",
    "GRID_ROWS",
    "ImageForm",
    "LinkForm",
    "MAX_TABLE_COLS",
    "MAX_TABLE_ROWS",
    "TableForm",
]
