"""Heading level switching on the line holding the selection start."""

from __future__ import annotations

import re

from markdown_live.buffer import Document, TextEdit, apply_edits, map_selection, span_at

from .specs import DEFAULT_MAX_HEADING_LEVEL, HeadingSpec

_HEADING = re.compile(r"(#+)(?: |$)")


def heading_level(line: str) -> int:
    """Return the ATX heading level of ``line`` or 0 when it has none."""

    match = _HEADING.match(line)
    return len(match.group(1)) if match else 0


def heading_toggle(
    document: Document,
    level: int,
    *,
    max_level: int = DEFAULT_MAX_HEADING_LEVEL,
) -> Document:
    """Set the line's heading to ``level``, or strip it if already that level.

    Levels switch directly (``#`` -> ``##``); they never cycle.
    """

    spec = HeadingSpec(level=level, max_level=max_level)
    text = document.text
    span = span_at(text, document.selection.start)
    line = span.slice(text)
    match = _HEADING.match(line)
    existing = match.end() if match else 0

    if match and len(match.group(1)) == spec.level:
        edit = TextEdit(start=span.start, removed=existing)
    else:
        edit = TextEdit(start=span.start, removed=existing, inserted=spec.marker)

    edits = [edit]
    return Document.create(
        apply_edits(text, edits), map_selection(document.selection, edits)
    )


__all__ = ["heading_level", "heading_toggle"]
