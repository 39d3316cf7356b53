"""Line-prefix toggles: quote, unordered, ordered and checkbox lists."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from markdown_live.buffer import (
    Document,
    LineSpan,
    TextEdit,
    apply_edits,
    line_of,
    lines_of,
    map_offset,
    map_selection,
    span_at,
)

from .specs import LinePrefixSpec

# One level of indentation: up to three spaces or a single tab. Anything
# deeper is content and the marker goes at column 0.
_INDENT = re.compile(r"(?: {1,3}(?! )|\t(?![ \t]))?")


def covered_lines(document: Document, spans: Sequence[LineSpan] | None = None) -> List[LineSpan]:
    """Lines holding at least one selected character, or the caret line.

    A non-empty selection that ends at column 0 does not cover that line.
    """

    text = document.text
    spans = spans if spans is not None else lines_of(text)
    start, end = document.selection.start, document.selection.end
    first = line_of(text, start, spans)
    last = line_of(text, end, spans)
    if end > start and last > first and spans[last].start == end:
        last -= 1
    return list(spans[first : last + 1])


def _indent_width(line: str) -> int:
    match = _INDENT.match(line)
    return match.end() if match else 0


def _marker_length(line: str, spec: LinePrefixSpec) -> Optional[int]:
    """Length of the marker (plus one space) after the indentation, if any."""

    match = spec.pattern.match(line, _indent_width(line))
    if match is None:
        return None
    return match.end() - match.start()


def line_prefix_toggle(document: Document, spec: LinePrefixSpec) -> Document:
    """Toggle ``spec`` on every covered line using all-or-add-missing.

    If every covered line already carries the marker it is removed from all
    of them; otherwise it is added to the lines that lack it and lines that
    have it are left alone.
    """

    text = document.text
    spans = lines_of(text)
    targets = covered_lines(document, spans)
    found = [(span, _marker_length(span.slice(text), spec)) for span in targets]

    edits: List[TextEdit] = []
    if all(length is not None for _, length in found):
        for span, length in found:
            indent = _indent_width(span.slice(text))
            edits.append(TextEdit(start=span.start + indent, removed=length or 0))
    else:
        for position, (span, length) in enumerate(found):
            if length is not None:
                continue
            indent = _indent_width(span.slice(text))
            edits.append(
                TextEdit(start=span.start + indent, inserted=spec.marker_for(position))
            )

    if not edits:
        return document
    updated = apply_edits(text, edits)
    selection = map_selection(document.selection, edits)
    start, end = document.selection.start, document.selection.end
    if end > start and any(edit.start < end <= edit.stop for edit in edits if edit.removed):
        # The end sat in a removed marker; keep its line covered.
        new_end = map_offset(end, edits)
        span = span_at(updated, new_end)
        if new_end == span.start and span.length > 0:
            new_end += 1
        selection = selection.with_range(map_offset(start, edits), new_end)
    return Document.create(updated, selection)


__all__ = ["covered_lines", "line_prefix_toggle"]
