"""Cursor-to-line mapping over a flat text buffer.

Line spans are recomputed from scratch for every edit. Documents are
editor-sized, so an O(n) walk per discrete event is cheap enough and avoids
incremental bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

Location = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class LineSpan:
    """One line of text; ``end`` excludes the terminating newline."""

    start: int
    end: int
    index: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        return self.start <= offset <= self.end

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


def lines_of(text: str) -> List[LineSpan]:
    """Split ``text`` on ``\\n`` into spans that partition it exactly.

    A trailing newline yields a final empty span and an empty text yields
    one zero-length span.
    """

    spans: List[LineSpan] = []
    start = 0
    for index, line in enumerate(text.split("\n")):
        end = start + len(line)
        spans.append(LineSpan(start=start, end=end, index=index))
        start = end + 1  # newline
    return spans


def line_of(text: str, offset: int, spans: Sequence[LineSpan] | None = None) -> int:
    """Return the index of the line holding ``offset``.

    An offset sitting on a newline belongs to the line that newline ends.
    Negative offsets and empty text map to line 0; offsets past the end map
    to the last line.
    """

    if offset < 0 or not text:
        return 0
    spans = spans if spans is not None else lines_of(text)
    for span in spans:
        if span.end >= offset:
            return span.index
    return spans[-1].index


def span_at(text: str, offset: int, spans: Sequence[LineSpan] | None = None) -> LineSpan:
    spans = spans if spans is not None else lines_of(text)
    return spans[line_of(text, offset, spans)]


def offset_to_location(text: str, offset: int) -> Location:
    spans = lines_of(text)
    offset = max(0, min(offset, len(text)))
    span = spans[line_of(text, offset, spans)]
    return (span.index, offset - span.start)


def location_to_offset(text: str, location: Location) -> int:
    spans = lines_of(text)
    row, col = location
    row = max(0, min(row, len(spans) - 1))
    span = spans[row]
    return span.start + max(0, min(col, span.length))


__all__ = [
    "LineSpan",
    "Location",
    "lines_of",
    "line_of",
    "span_at",
    "offset_to_location",
    "location_to_offset",
]
