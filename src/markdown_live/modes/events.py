"""Host events, pipeline outcomes and the outbound notification bus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from markdown_live.buffer import Document, LineSpan, Selection

from .render_mode import RenderPlan


@dataclass(frozen=True, slots=True)
class HostEdit:
    """Keystroke-level change reported by the host input surface."""

    old_text: str
    new_text: str
    selection_before: Selection
    selection_after: Selection


@dataclass(frozen=True, slots=True)
class FocusChange:
    gained: bool


@dataclass(frozen=True, slots=True)
class EditOutcome:
    """Everything the host needs after one event: text, selection, render plan."""

    document: Document
    lines: Tuple[LineSpan, ...]
    caret_line: int
    plan: RenderPlan
    substituted: bool = False
    status: str = "ok"

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def selection(self) -> Selection:
        return self.document.selection


class ReentrantEditError(RuntimeError):
    """Raised when a subscriber feeds an event back into the session mid-dispatch."""

    def __init__(self, message: str, *, event: Optional[str] = None) -> None:
        super().__init__(message)
        self.event = event


class EventBus:
    """Minimal publish/subscribe channel for post-commit notifications."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "HostEdit",
    "FocusChange",
    "EditOutcome",
    "ReentrantEditError",
    "EventBus",
]
