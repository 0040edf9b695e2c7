"""Selection snapshots and the edit result shared by every text transform."""

from __future__ import annotations

from dataclasses import dataclass

from akari_editor.errors import SelectionError


@dataclass(frozen=True, slots=True)
class Selection:
    """A ``[start, end)`` range of the buffer plus the text it covers."""

    start: int = 0
    end: int = 0
    text: str = ""

    @classmethod
    def capture(cls, buffer: str, start: int, end: int) -> "Selection":
        """Build a selection from host offsets, ordering them if reversed."""

        if start > end:
            start, end = end, start
        if start < 0 or end > len(buffer):
            raise SelectionError(
                f"Selection ({start}, {end}) outside buffer of length {len(buffer)}",
                start=start,
                end=end,
            )
        return cls(start=start, end=end, text=buffer[start:end])

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(start=offset, end=offset, text="")

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def clamp(self, buffer: str) -> "Selection":
        """Shrink the range to fit ``buffer`` and refresh ``text``."""

        limit = len(buffer)
        start = min(max(self.start, 0), limit)
        end = min(max(self.end, start), limit)
        return Selection(start=start, end=end, text=buffer[start:end])


# A selection frozen while a modal dialog owns focus.
SavedSelection = Selection


@dataclass(frozen=True, slots=True)
class TextEdit:
    """New buffer produced by a transform plus the selection to restore."""

    buffer: str
    start: int
    end: int

    @property
    def cursor(self) -> int:
        return self.end

    def selection(self) -> Selection:
        return Selection.capture(self.buffer, self.start, self.end)


def splice(buffer: str, start: int, end: int, replacement: str) -> str:
    return buffer[:start] + replacement + buffer[end:]


__all__ = ["Selection", "SavedSelection", "TextEdit", "splice"]
