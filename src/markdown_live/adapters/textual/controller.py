"""Minimal Textual adapter that wires EditorSession events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from markdown_live.actions import CommandResult, ToolbarCommand
from markdown_live.buffer import DocumentMirror, Selection
from markdown_live.keymaps import KeyStroke
from markdown_live.modes import EditorSession, HostEdit, MarkdownRenderer, RenderBlock, RenderPlan

from ..renderer import MarkdownItRenderer

_FORWARDED_EVENTS = (
    "document.commit",
    "render.plan",
    "emoji.substitute",
    "command.run",
    "focus.change",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[DocumentMirror], None]
    update_preview: Callable[[RenderPlan], None] = _noop
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges EditorSession + bus events to a Textual-friendly surface.

    Implements the ``DocumentSync`` protocol: the host pushes raw edits in
    and pulls committed snapshots back out.
    """

    def __init__(
        self,
        session: EditorSession,
        hooks: TextualUIHooks,
        *,
        renderer: Optional[MarkdownRenderer] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.renderer = renderer or MarkdownItRenderer()
        self._subscribe_events()
        self._refresh_buffer()
        self.hooks.update_preview(session.state.plan)

    def pull_document(self) -> DocumentMirror:
        return self.session.mirror()

    def push_host_edit(
        self, old_text: str, new_text: str, before: Selection, after: Selection
    ) -> DocumentMirror:
        self._log_state("edit ->", length=len(new_text))
        outcome = self.session.handle_edit(
            HostEdit(
                old_text=old_text,
                new_text=new_text,
                selection_before=before,
                selection_after=after,
            )
        )
        if outcome.status != "ok":
            self.hooks.update_status(outcome.status)
        self._log_state("edit <-", status=outcome.status, substituted=outcome.substituted)
        return self._refresh_buffer()

    def handle_selection(self, anchor: int, caret: int) -> DocumentMirror:
        self.session.handle_selection(Selection(anchor=anchor, caret=caret))
        return self.pull_document()

    def handle_focus(self, gained: bool) -> DocumentMirror:
        self._log_state("focus ->", gained=gained)
        self.session.handle_focus(gained)
        return self.pull_document()

    def handle_textual_key(
        self, key: str, *, modifiers: Iterable[str] = ()
    ) -> Optional[CommandResult]:
        """Resolve a Textual key through the shortcut registry.

        Returns ``None`` when no binding applies so the host can let the key
        reach the text widget.
        """

        parsed = KeyStroke.parse(key)
        stroke = KeyStroke(key=parsed.key, modifiers=(*parsed.modifiers, *modifiers))
        self._log_state("key ->", chord=stroke.token)
        result = self.session.handle_shortcut(stroke)
        if result is None:
            return None
        self._after_command(result)
        return result

    def run_toolbar(
        self,
        command: Union[str, ToolbarCommand],
        *,
        level: Optional[int] = None,
        glyph: Optional[str] = None,
    ) -> CommandResult:
        result = self.session.run_command(command, level=level, glyph=glyph)
        self._after_command(result)
        return result

    def rendered_blocks(self) -> List[Tuple[RenderBlock, Any]]:
        """Current plan rendered through ``renderer``; raw blocks stay text."""

        return self.session.state.plan.render(self.renderer)

    def _after_command(self, result: CommandResult) -> None:
        self.hooks.update_status(f"{result.command}:{result.message or result.status}")
        self._log_state("command <-", command=result.command, status=result.status)
        self._refresh_buffer()

    def _subscribe_events(self) -> None:
        for event in _FORWARDED_EVENTS:
            self.session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if name == "render.plan" and isinstance(payload, RenderPlan):
            self.hooks.update_preview(payload)

    def _refresh_buffer(self) -> DocumentMirror:
        mirror = self.pull_document()
        self.hooks.update_buffer(mirror)
        return mirror

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.session.state
        return {
            "caret": state.document.caret,
            "caret_line": state.caret_line,
            "focused": state.focused,
            "version": self.session.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
