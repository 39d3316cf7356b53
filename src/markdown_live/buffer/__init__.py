"""Document values, line tracking, positional edits and history."""

from .document import Document, Selection
from .edits import TextEdit, apply_edits, map_offset, map_selection
from .history import DocumentHistory, HistoryEntry
from .lines import (
    LineSpan,
    Location,
    line_of,
    lines_of,
    location_to_offset,
    offset_to_location,
    span_at,
)
from .sync import DocumentMirror, DocumentSync

__all__ = [
    "Document",
    "Selection",
    "TextEdit",
    "apply_edits",
    "map_offset",
    "map_selection",
    "DocumentHistory",
    "HistoryEntry",
    "LineSpan",
    "Location",
    "line_of",
    "lines_of",
    "location_to_offset",
    "offset_to_location",
    "span_at",
    "DocumentMirror",
    "DocumentSync",
]
