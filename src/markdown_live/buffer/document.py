"""Immutable document and selection values shared by every transform."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


@dataclass(frozen=True, slots=True)
class Selection:
    """Anchor/caret pair; ``anchor > caret`` means a backward selection."""

    anchor: int = 0
    caret: int = 0

    @classmethod
    def collapsed(cls, offset: int) -> "Selection":
        return cls(anchor=offset, caret=offset)

    @classmethod
    def spanning(cls, start: int, end: int, *, backward: bool = False) -> "Selection":
        if backward:
            return cls(anchor=end, caret=start)
        return cls(anchor=start, caret=end)

    @property
    def start(self) -> int:
        return min(self.anchor, self.caret)

    @property
    def end(self) -> int:
        return max(self.anchor, self.caret)

    @property
    def is_collapsed(self) -> bool:
        return self.anchor == self.caret

    @property
    def is_backward(self) -> bool:
        return self.anchor > self.caret

    def clamped(self, length: int) -> "Selection":
        return Selection(_clamp(self.anchor, length), _clamp(self.caret, length))

    def with_range(self, start: int, end: int) -> "Selection":
        """Return a selection over ``[start, end]`` keeping this direction."""

        return Selection.spanning(start, end, backward=self.is_backward)


@dataclass(frozen=True, slots=True)
class Document:
    """Text plus selection. Transforms return new documents."""

    text: str = ""
    selection: Selection = Selection()

    @classmethod
    def create(
        cls,
        text: str = "",
        selection: Selection | None = None,
        *,
        caret: int | None = None,
    ) -> "Document":
        """Build a document, clamping selection offsets into the text."""

        if selection is None:
            offset = len(text) if caret is None else caret
            selection = Selection.collapsed(offset)
        return cls(text=text, selection=selection.clamped(len(text)))

    @property
    def selected_text(self) -> str:
        return self.text[self.selection.start : self.selection.end]

    @property
    def caret(self) -> int:
        return self.selection.caret

    def with_text(self, text: str, selection: Selection) -> "Document":
        return Document.create(text, selection)

    def with_selection(self, selection: Selection) -> "Document":
        return Document(text=self.text, selection=selection.clamped(len(self.text)))

    def replace_selection(self, replacement: str) -> "Document":
        """Replace the selected range and collapse the caret after it."""

        start, end = self.selection.start, self.selection.end
        text = self.text[:start] + replacement + self.text[end:]
        return Document(text=text, selection=Selection.collapsed(start + len(replacement)))
