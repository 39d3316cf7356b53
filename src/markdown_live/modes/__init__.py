"""Render-mode decisions, the edit pipeline and the editor session."""

from .events import EditOutcome, EventBus, FocusChange, HostEdit, ReentrantEditError
from .pipeline import (
    EditorState,
    derive_state,
    process_document,
    process_edit,
    process_focus,
)
from .render_mode import (
    LineRender,
    MarkdownRenderer,
    RenderBlock,
    RenderMode,
    RenderPlan,
    decide_render,
    is_raw,
)
from .session import EditorSession

__all__ = [
    "EditOutcome",
    "EventBus",
    "FocusChange",
    "HostEdit",
    "ReentrantEditError",
    "EditorState",
    "derive_state",
    "process_document",
    "process_edit",
    "process_focus",
    "LineRender",
    "MarkdownRenderer",
    "RenderBlock",
    "RenderMode",
    "RenderPlan",
    "decide_render",
    "is_raw",
    "EditorSession",
]
