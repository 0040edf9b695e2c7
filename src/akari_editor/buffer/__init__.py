"""Buffer model: selections, offset helpers and the undo/redo history."""

from .history import HistoryStack
from .positions import Location, line_start, location_for_offset, offset_for_location
from .selection import SavedSelection, Selection, TextEdit, splice

__all__ = [
    "HistoryStack",
    "Location",
    "SavedSelection",
    "Selection",
    "TextEdit",
    "line_start",
    "location_for_offset",
    "offset_for_location",
    "splice",
]
