"""Undo/redo history of committed documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .document import Document


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    label: str
    before: Document
    after: Document


class DocumentHistory:
    """Linear undo/redo timeline; a new push drops the redo tail."""

    def __init__(self, *, limit: int = 200) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._entries: List[HistoryEntry] = []
        self._index: int = -1
        self._limit = limit

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: HistoryEntry) -> None:
        if entry.before == entry.after:
            return
        if self._index < len(self._entries) - 1:
            self._entries = self._entries[: self._index + 1]
        self._entries.append(entry)
        if len(self._entries) > self._limit:
            del self._entries[0]
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[HistoryEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[HistoryEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]

    def clear(self) -> None:
        self._entries.clear()
        self._index = -1


__all__ = ["DocumentHistory", "HistoryEntry"]
