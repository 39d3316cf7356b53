"""Executable Textual app that hosts the live markdown editor."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding as TextualBinding
    from textual.containers import Horizontal, VerticalScroll
    from textual.widgets import Button, Footer, Header, Markdown, Static, TextArea
    from textual.widgets.text_area import Selection as AreaSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markdown_live.adapters.textual.app"
    ) from exc

from markdown_live.actions import ToolbarCommand
from markdown_live.buffer import DocumentMirror, Selection, location_to_offset, offset_to_location
from markdown_live.config import EditorConfig, RenderPolicy
from markdown_live.keymaps import DEFAULT_BINDINGS
from markdown_live.modes import EditorSession, RenderMode, RenderPlan
from markdown_live.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

# Commands that need extra input from the host get no button.
_BUTTON_COMMANDS = tuple(
    command
    for command in ToolbarCommand
    if command not in (ToolbarCommand.HEADING, ToolbarCommand.EMOJI)
)


def create_default_session(
    config: Optional[EditorConfig] = None, *, text: Optional[str] = None
) -> EditorSession:
    """Build an EditorSession from env config + default shortcuts."""

    return EditorSession(config or EditorConfig.from_env(), text=text)


@dataclass
class UIState:
    status_text: str = ""
    caret_line: int = 0
    version: int = 0


class MarkdownLiveApp(App[None]):
    """TextArea editor beside a per-line preview of the committed document."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#toolbar {
		height: 3;
	}

	#toolbar Button {
		min-width: 6;
		margin: 0 1 0 0;
	}

	#workspace {
		height: 1fr;
	}

	#editor {
		width: 1fr;
		border: round $accent;
	}

	#preview {
		width: 1fr;
		border: round $secondary;
		padding: 0 1;
	}

	.raw-block {
		background: $surface-darken-1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        *(
            TextualBinding(
                binding.stroke.token,
                f"shortcut('{binding.stroke.token}')",
                binding.description,
                priority=True,
            )
            for binding in DEFAULT_BINDINGS
        ),
    ]

    def __init__(self, *, config: Optional[EditorConfig] = None, text: Optional[str] = None) -> None:
        super().__init__()
        self._state = UIState()
        self.session = create_default_session(config, text=text)
        self.adapter: TextualEditorAdapter | None = None
        self._editor: TextArea | None = None
        self._preview: VerticalScroll | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="toolbar"):
            for level in range(1, self.session.config.max_heading_level + 1):
                yield Button(f"H{level}", id=f"heading-{level}")
            for command in _BUTTON_COMMANDS:
                yield Button(command.value.replace("_", " "), id=f"cmd-{command.value}")
        with Horizontal(id="workspace"):
            self._editor = TextArea(
                self.session.document.text,
                id="editor",
                read_only=self.session.config.read_only,
            )
            yield self._editor
            self._preview = VerticalScroll(id="preview")
            yield self._preview
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_preview=self._update_preview,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        if self._editor:
            self._editor.focus()

    def action_shortcut(self, chord: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(chord)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not self.adapter or not event.button.id:
            return
        kind, _, value = event.button.id.partition("-")
        if kind == "heading":
            self.adapter.run_toolbar(ToolbarCommand.HEADING, level=int(value))
        else:
            self.adapter.run_toolbar(value)
        if self._editor:
            self._editor.focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if not self.adapter:
            return
        area = event.text_area
        document = self.session.document
        # Echo of a text we pushed into the widget ourselves.
        if area.text == document.text:
            return
        self.adapter.push_host_edit(
            document.text, area.text, document.selection, self._area_selection(area)
        )

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if not self.adapter:
            return
        area = event.text_area
        if area.text != self.session.document.text:
            return
        selection = self._area_selection(area)
        if selection != self.session.document.selection:
            self.adapter.handle_selection(selection.anchor, selection.caret)

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        if self.adapter and event.widget is self._editor:
            self.adapter.handle_focus(True)

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        if self.adapter and event.widget is self._editor:
            self.adapter.handle_focus(False)

    def _area_selection(self, area: TextArea) -> Selection:
        text = area.text
        return Selection(
            anchor=location_to_offset(text, area.selection.start),
            caret=location_to_offset(text, area.selection.end),
        )

    def _update_buffer(self, mirror: DocumentMirror) -> None:
        self._state.caret_line = mirror.caret_line
        self._state.version = mirror.version
        editor = self._editor
        if not editor:
            return
        if editor.text != mirror.text:
            editor.load_text(mirror.text)
        selection = mirror.selection
        editor.selection = AreaSelection(
            start=offset_to_location(mirror.text, selection.anchor),
            end=offset_to_location(mirror.text, selection.caret),
        )

    def _update_preview(self, plan: RenderPlan) -> None:
        self.call_later(self._rebuild_preview, plan)

    async def _rebuild_preview(self, plan: RenderPlan) -> None:
        if not self._preview:
            return
        widgets: List[Any] = []
        for block in plan.blocks():
            if block.mode is RenderMode.RAW:
                widgets.append(Static(block.text, markup=False, classes="raw-block"))
            else:
                widgets.append(Markdown(block.text))
        await self._preview.remove_children()
        await self._preview.mount(*widgets)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(
                f"{status}  line {self._state.caret_line + 1}  v{self._state.version}"
            )

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "ui.trace", level="debug", data={"line": line}, logger_name="markdown_live.ui"
        )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the live markdown editor demo.")
    parser.add_argument("path", nargs="?", help="Markdown file to open (read only once)")
    parser.add_argument(
        "--emoji",
        action="store_true",
        help="Convert :shortcode: to emoji while typing",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in RenderPolicy],
        help="Render policy (default: per_line)",
    )
    parser.add_argument(
        "--max-heading-level",
        type=int,
        help="Highest heading level offered by the toolbar",
    )
    parser.add_argument("--read-only", action="store_true", help="Refuse edits")
    parser.add_argument(
        "--log-preset",
        choices=["development", "production", "performance"],
        help="telelog preset to configure before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    overrides: dict[str, Any] = {}
    if args.emoji:
        overrides["emoji_convert"] = True
    if args.policy:
        overrides["render_policy"] = args.policy
    if args.max_heading_level is not None:
        overrides["max_heading_level"] = args.max_heading_level
    if args.read_only:
        overrides["read_only"] = True
    config = EditorConfig.from_env().with_overrides(**overrides)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else None
    app = MarkdownLiveApp(config=config, text=text)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
