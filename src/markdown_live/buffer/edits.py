"""Positional text edits applied in one pass with a running offset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .document import Selection


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``removed`` characters at ``start`` with ``inserted``."""

    start: int
    removed: int = 0
    inserted: str = ""

    @property
    def delta(self) -> int:
        return len(self.inserted) - self.removed

    @property
    def stop(self) -> int:
        return self.start + self.removed


def _ordered(edits: Iterable[TextEdit]) -> List[TextEdit]:
    ordered = sorted(edits, key=lambda edit: edit.start)
    for previous, current in zip(ordered, ordered[1:]):
        if current.start < previous.stop:
            raise ValueError(
                f"Overlapping edits at {previous.start} and {current.start}"
            )
    return ordered


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    parts: List[str] = []
    cursor = 0
    for edit in _ordered(edits):
        parts.append(text[cursor : edit.start])
        parts.append(edit.inserted)
        cursor = edit.stop
    parts.append(text[cursor:])
    return "".join(parts)


def map_offset(offset: int, edits: Sequence[TextEdit]) -> int:
    """Translate an offset in the old text to the edited text.

    Offsets after an edit shift by its delta, offsets inside a removed range
    land after the replacement, and an offset exactly at a pure insertion
    moves past the inserted text.
    """

    shift = 0
    for edit in _ordered(edits):
        if offset < edit.start:
            break
        if offset == edit.start:
            if edit.removed:
                return offset + shift
            shift += len(edit.inserted)
            continue
        if offset < edit.stop:
            return edit.start + shift + len(edit.inserted)
        shift += edit.delta
    return offset + shift


def map_selection(selection: Selection, edits: Sequence[TextEdit]) -> Selection:
    return Selection(
        anchor=map_offset(selection.anchor, edits),
        caret=map_offset(selection.caret, edits),
    )


__all__ = ["TextEdit", "apply_edits", "map_offset", "map_selection"]
