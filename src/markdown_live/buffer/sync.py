"""Adapter boundary types for syncing documents with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .document import Document, Selection


@dataclass(slots=True)
class DocumentMirror:
    """Host-friendly snapshot of the committed document."""

    text: str
    selection: Selection
    caret_line: int = 0
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_document(
        cls,
        document: Document,
        *,
        caret_line: int = 0,
        version: int = 0,
        attributes: dict[str, str] | None = None,
    ) -> "DocumentMirror":
        return cls(
            text=document.text,
            selection=document.selection,
            caret_line=caret_line,
            version=version,
            attributes=dict(attributes or {}),
        )


class DocumentSync(Protocol):
    """Protocol describing how adapters exchange data with the session."""

    def pull_document(self) -> DocumentMirror:
        """Return the latest committed snapshot the host should render."""
        ...

    def push_host_edit(
        self, old_text: str, new_text: str, before: Selection, after: Selection
    ) -> DocumentMirror:
        """Submit a host edit (keystroke, IME insert, paste) and get the result."""
        ...
