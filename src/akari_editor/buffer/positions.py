"""Conversions between flat buffer offsets and host ``(row, column)`` locations."""

from __future__ import annotations

from typing import Tuple

Location = Tuple[int, int]  # (row, column)


def offset_for_location(text: str, location: Location) -> int:
    lines = text.split("\n")
    row, col = location
    row = max(0, min(row, len(lines) - 1))
    offset = 0
    for index in range(row):
        offset += len(lines[index]) + 1  # newline
    return offset + max(0, min(col, len(lines[row])))


def location_for_offset(text: str, offset: int) -> Location:
    lines = text.split("\n")
    running = 0
    for row, line in enumerate(lines):
        if offset <= running + len(line):
            return (row, max(0, offset - running))
        running += len(line) + 1
    return (len(lines) - 1, len(lines[-1]))


def line_start(text: str, offset: int) -> int:
    """Offset of the first character on the line containing ``offset``."""

    return text.rfind("\n", 0, offset) + 1


__all__ = ["Location", "offset_for_location", "location_for_offset", "line_start"]
