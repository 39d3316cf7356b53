"""Per-line raw/rendered decisions derived from caret line and focus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Protocol, Sequence, Tuple

from markdown_live.buffer import LineSpan
from markdown_live.config import RenderPolicy


class RenderMode(str, Enum):
    RAW = "raw"
    RENDERED = "rendered"


class MarkdownRenderer(Protocol):
    """Collaborator that turns markdown into a host-specific visual."""

    def render(self, text: str) -> Any:
        ...


@dataclass(frozen=True, slots=True)
class LineRender:
    span: LineSpan
    mode: RenderMode

    @property
    def is_raw(self) -> bool:
        return self.mode is RenderMode.RAW


@dataclass(frozen=True, slots=True)
class RenderBlock:
    """Consecutive lines sharing one mode, joined back into text."""

    mode: RenderMode
    first_line: int
    last_line: int
    text: str


@dataclass(frozen=True, slots=True)
class RenderPlan:
    text: str
    lines: Tuple[LineRender, ...]
    focused: bool
    caret_line: int

    def mode_of(self, index: int) -> RenderMode:
        return self.lines[index].mode

    @property
    def raw_lines(self) -> Tuple[int, ...]:
        return tuple(line.span.index for line in self.lines if line.is_raw)

    def blocks(self) -> List[RenderBlock]:
        """Group runs of same-mode lines so renderers see whole constructs."""

        blocks: List[RenderBlock] = []
        run: List[LineRender] = []
        for line in self.lines:
            if run and run[-1].mode is not line.mode:
                blocks.append(self._block(run))
                run = []
            run.append(line)
        if run:
            blocks.append(self._block(run))
        return blocks

    def _block(self, run: Sequence[LineRender]) -> RenderBlock:
        start, end = run[0].span.start, run[-1].span.end
        return RenderBlock(
            mode=run[0].mode,
            first_line=run[0].span.index,
            last_line=run[-1].span.index,
            text=self.text[start:end],
        )

    def render(self, renderer: MarkdownRenderer) -> List[Tuple[RenderBlock, Any]]:
        """Render the rendered blocks; raw blocks pass through as text."""

        return [
            (block, block.text if block.mode is RenderMode.RAW else renderer.render(block.text))
            for block in self.blocks()
        ]


def is_raw(line: LineSpan, caret_line: int, focused: bool) -> bool:
    return focused and line.index == caret_line


def decide_render(
    text: str,
    spans: Sequence[LineSpan],
    caret_line: int,
    focused: bool,
    *,
    policy: RenderPolicy = RenderPolicy.PER_LINE,
) -> RenderPlan:
    """Build the render plan for one committed document.

    ``PER_LINE`` shows only the caret line raw while focused.
    ``WHOLE_BUFFER`` shows everything raw while focused and everything
    rendered otherwise.
    """

    if policy is RenderPolicy.WHOLE_BUFFER:
        mode = RenderMode.RAW if focused else RenderMode.RENDERED
        lines = tuple(LineRender(span, mode) for span in spans)
    else:
        lines = tuple(
            LineRender(
                span,
                RenderMode.RAW if is_raw(span, caret_line, focused) else RenderMode.RENDERED,
            )
            for span in spans
        )
    return RenderPlan(text=text, lines=lines, focused=focused, caret_line=caret_line)


__all__ = [
    "RenderMode",
    "MarkdownRenderer",
    "LineRender",
    "RenderBlock",
    "RenderPlan",
    "is_raw",
    "decide_render",
]
