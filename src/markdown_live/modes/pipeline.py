"""Single-pass edit pipeline: substitute, commit, recompute lines, decide.

Every function here is pure. Each takes the previous ``EditorState`` and
returns a new one; nothing is notified until the caller has the final state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from markdown_live.buffer import Document, LineSpan, line_of, lines_of
from markdown_live.config import EditorConfig, RenderPolicy
from markdown_live.emoji import EmojiSubstitutor, Substitution

from .events import EditOutcome, FocusChange, HostEdit
from .render_mode import RenderPlan, decide_render


@dataclass(frozen=True, slots=True)
class EditorState:
    document: Document
    focused: bool
    lines: Tuple[LineSpan, ...]
    caret_line: int
    plan: RenderPlan

    def outcome(self, *, substituted: bool = False, status: str = "ok") -> EditOutcome:
        return EditOutcome(
            document=self.document,
            lines=self.lines,
            caret_line=self.caret_line,
            plan=self.plan,
            substituted=substituted,
            status=status,
        )


def derive_state(
    document: Document,
    *,
    focused: bool,
    policy: RenderPolicy = RenderPolicy.PER_LINE,
) -> EditorState:
    """Recompute line spans, caret line and render plan for ``document``."""

    spans = tuple(lines_of(document.text))
    caret_line = line_of(document.text, document.caret, spans)
    plan = decide_render(document.text, spans, caret_line, focused, policy=policy)
    return EditorState(
        document=document,
        focused=focused,
        lines=spans,
        caret_line=caret_line,
        plan=plan,
    )


def process_edit(
    state: EditorState,
    edit: HostEdit,
    *,
    config: EditorConfig,
    substitutor: Optional[EmojiSubstitutor] = None,
) -> Tuple[EditorState, Optional[Substitution]]:
    """Apply a host keystroke edit, running emoji substitution first."""

    document = Document.create(edit.new_text, edit.selection_after)
    found: Optional[Substitution] = None
    if config.emoji_convert and substitutor is not None:
        found = substitutor.find(edit.old_text, document.text, document.caret)
        if found is not None:
            text, caret = found.replace(document.text, document.caret)
            document = Document.create(text, caret=caret)
    return derive_state(document, focused=state.focused, policy=config.render_policy), found


def process_focus(state: EditorState, change: FocusChange, *, config: EditorConfig) -> EditorState:
    return derive_state(state.document, focused=change.gained, policy=config.render_policy)


def process_document(state: EditorState, document: Document, *, config: EditorConfig) -> EditorState:
    """Commit a document produced outside the keystroke path (toolbar, undo)."""

    return derive_state(document, focused=state.focused, policy=config.render_policy)


__all__ = [
    "EditorState",
    "derive_state",
    "process_edit",
    "process_focus",
    "process_document",
]
