"""Live ``:shortcode:`` to glyph substitution for the input pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from markdown_live.buffer import Document

from .table import DEFAULT_EMOJI_TABLE, EmojiTable


def _is_name_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def _inserted_range(old_text: str, new_text: str) -> Tuple[int, int]:
    """Range of ``new_text`` that the edit inserted (common prefix/suffix diff)."""

    limit = min(len(old_text), len(new_text))
    prefix = 0
    while prefix < limit and old_text[prefix] == new_text[prefix]:
        prefix += 1
    suffix = 0
    while (
        suffix < limit - prefix
        and old_text[len(old_text) - 1 - suffix] == new_text[len(new_text) - 1 - suffix]
    ):
        suffix += 1
    return prefix, len(new_text) - suffix


@dataclass(frozen=True, slots=True)
class Substitution:
    start: int
    end: int
    shortcode: str
    glyph: str

    def replace(self, text: str, caret: int) -> Tuple[str, int]:
        """Swap ``:shortcode:`` for the glyph; the caret sits after the span."""

        shift = len(self.glyph) - (self.end - self.start)
        return text[: self.start] + self.glyph + text[self.end :], caret + shift


class EmojiSubstitutor:
    """Replaces a just-closed ``:name:`` with its glyph.

    Only a colon inserted by the current edit can trigger a scan, so colons
    in settled text are never converted after the fact.
    """

    def __init__(self, table: EmojiTable = DEFAULT_EMOJI_TABLE) -> None:
        self.table = table

    def find(self, old_text: str, new_text: str, caret: int) -> Optional[Substitution]:
        start, stop = _inserted_range(old_text, new_text)
        caret = max(0, min(caret, len(new_text)))
        closing = new_text.rfind(":", start, min(stop, caret))
        if closing < 0:
            return None
        opening = closing - 1
        while opening >= 0 and _is_name_char(new_text[opening]):
            opening -= 1
        if opening < 0 or new_text[opening] != ":" or opening == closing - 1:
            return None
        name = new_text[opening + 1 : closing]
        glyph = self.table.glyph_for(name)
        if glyph is None:
            return None
        return Substitution(start=opening, end=closing + 1, shortcode=name, glyph=glyph)

    def apply(self, old_text: str, new_text: str, caret: int) -> Tuple[str, int]:
        """Return ``(text, caret)`` after substitution; unchanged on no match."""

        found = self.find(old_text, new_text, caret)
        if found is None:
            return new_text, caret
        return found.replace(new_text, caret)

    def apply_document(self, old_text: str, document: Document) -> Document:
        text, caret = self.apply(old_text, document.text, document.caret)
        if text == document.text:
            return document
        return Document.create(text, caret=caret)


def substitute_emoji(
    old_text: str,
    new_text: str,
    caret: int,
    *,
    table: EmojiTable = DEFAULT_EMOJI_TABLE,
) -> Tuple[str, int]:
    return EmojiSubstitutor(table).apply(old_text, new_text, caret)


def insert_emoji(document: Document, glyph: str) -> Document:
    """Insert a picked glyph over the selection (emoji picker path)."""

    return document.replace_selection(glyph)


__all__ = ["EmojiSubstitutor", "Substitution", "substitute_emoji", "insert_emoji"]
