"""Editor session: the single mutable holder of editor state."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Union

from markdown_live.actions import CommandResult, ToolbarCommand, run_command
from markdown_live.buffer import (
    Document,
    DocumentHistory,
    DocumentMirror,
    HistoryEntry,
    Selection,
)
from markdown_live.config import EditorConfig
from markdown_live.emoji import DEFAULT_EMOJI_TABLE, EmojiSubstitutor, EmojiTable
from markdown_live.keymaps import KeyStroke, ShortcutRegistry, load_default_shortcuts
from markdown_live.runtime import telemetry

from .events import EditOutcome, EventBus, FocusChange, HostEdit, ReentrantEditError
from .pipeline import (
    EditorState,
    derive_state,
    process_document,
    process_edit,
    process_focus,
)


class EditorSession:
    """Owns the current document and routes host events through the pipeline.

    Each public entry point runs one pass (substitute, commit, recompute
    lines, decide render modes) and only then notifies subscribers. A
    subscriber that calls back into the session while being notified gets a
    ``ReentrantEditError``.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        text: Optional[str] = None,
        emoji_table: EmojiTable = DEFAULT_EMOJI_TABLE,
        shortcuts: Optional[ShortcutRegistry] = None,
        load_defaults: bool = True,
        bus: Optional[EventBus] = None,
        history: Optional[DocumentHistory] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.bus = bus or EventBus()
        self.history = history if history is not None else DocumentHistory()
        self.substitutor = EmojiSubstitutor(emoji_table)
        self.shortcuts = (
            shortcuts if shortcuts is not None else ShortcutRegistry(logger_name="markdown_live.keymaps")
        )
        if load_defaults and shortcuts is None:
            load_default_shortcuts(self.shortcuts)
        initial = self.config.markdown_syntax if text is None else text
        self._state = derive_state(
            Document.create(initial), focused=False, policy=self.config.render_policy
        )
        self._version = 0
        self._dispatching: Optional[str] = None

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def document(self) -> Document:
        return self._state.document

    @property
    def focused(self) -> bool:
        return self._state.focused

    @property
    def version(self) -> int:
        return self._version

    def outcome(self) -> EditOutcome:
        return self._state.outcome()

    def mirror(self) -> DocumentMirror:
        return DocumentMirror.from_document(
            self.document,
            caret_line=self._state.caret_line,
            version=self._version,
            attributes={"focused": str(self.focused).lower()},
        )

    def handle_edit(self, edit: HostEdit) -> EditOutcome:
        """Run a keystroke edit through substitution and commit the result."""

        with self._pass("session::edit", {"length": len(edit.new_text)}):
            if self.config.read_only:
                return self._state.outcome(status="read_only")
            before = self._state.document
            state, found = process_edit(
                self._state, edit, config=self.config, substitutor=self.substitutor
            )
            self._commit(state, label="edit", before=before)
            if found is not None:
                telemetry.record_event(
                    "emoji.substitute",
                    level="debug",
                    data={"shortcode": found.shortcode, "start": found.start},
                    logger_name="markdown_live.session",
                )
            outcome = state.outcome(substituted=found is not None)
        if found is not None:
            self._notify("emoji.substitute", found)
        self._notify_commit(outcome)
        return outcome

    def edit_text(self, new_text: str, selection: Optional[Selection] = None) -> EditOutcome:
        """Convenience for hosts that only report the new text and selection."""

        after = selection if selection is not None else Selection.collapsed(len(new_text))
        return self.handle_edit(
            HostEdit(
                old_text=self.document.text,
                new_text=new_text,
                selection_before=self.document.selection,
                selection_after=after,
            )
        )

    def handle_selection(self, selection: Selection) -> EditOutcome:
        """Caret or selection moved without a text change."""

        with self._pass("session::selection", {"caret": selection.caret}):
            state = process_document(
                self._state, self.document.with_selection(selection), config=self.config
            )
            self._state = state
            outcome = state.outcome()
        self._notify("render.plan", outcome.plan)
        return outcome

    def handle_focus(self, change: Union[FocusChange, bool]) -> EditOutcome:
        if isinstance(change, bool):
            change = FocusChange(gained=change)
        with self._pass("session::focus", {"gained": change.gained}):
            self._state = process_focus(self._state, change, config=self.config)
            telemetry.record_event(
                "focus.change",
                data={"gained": change.gained, "caret_line": self._state.caret_line},
                logger_name="markdown_live.session",
            )
            outcome = self._state.outcome()
        self._notify("focus.change", change.gained)
        self._notify("render.plan", outcome.plan)
        return outcome

    def run_command(
        self,
        command: Union[str, ToolbarCommand],
        *,
        level: Optional[int] = None,
        glyph: Optional[str] = None,
    ) -> CommandResult:
        """Apply a toolbar command to the current document and commit it."""

        name = command.value if isinstance(command, ToolbarCommand) else str(command)
        with self._pass(f"command::{name}", {"level": level}) as handle:
            before = self._state.document
            result = run_command(
                before, command, level=level, glyph=glyph, config=self.config
            )
            handle.add_metadata("status", result.status)
            outcome = None
            if result.changed:
                state = process_document(self._state, result.document, config=self.config)
                self._commit(state, label=result.command, before=before)
                outcome = state.outcome()
        if result.command == ToolbarCommand.RESET.value and result.changed:
            telemetry.record_event("document.reset", logger_name="markdown_live.session")
        self._notify("command.run", result)
        if outcome is not None:
            self._notify_commit(outcome)
        return result

    def reset(self) -> CommandResult:
        return self.run_command(ToolbarCommand.RESET)

    def handle_shortcut(self, stroke: Union[KeyStroke, str]) -> Optional[CommandResult]:
        """Run the command bound to ``stroke``; ``None`` when nothing matches."""

        flags = {"focused": self.focused, "read_only": self.config.read_only}
        binding = self.shortcuts.resolve(stroke, context=flags)
        if binding is None:
            return None
        return self.run_command(binding.command, level=binding.level)

    def undo(self) -> Optional[EditOutcome]:
        return self._travel("undo")

    def redo(self) -> Optional[EditOutcome]:
        return self._travel("redo")

    def _travel(self, direction: str) -> Optional[EditOutcome]:
        with self._pass(f"session::{direction}", None):
            entry = self.history.undo() if direction == "undo" else self.history.redo()
            if entry is None:
                return None
            target = entry.before if direction == "undo" else entry.after
            self._state = process_document(self._state, target, config=self.config)
            self._version += 1
            outcome = self._state.outcome()
        self._notify_commit(outcome)
        return outcome

    def _commit(self, state: EditorState, *, label: str, before: Document) -> None:
        self.history.push(HistoryEntry(label=label, before=before, after=state.document))
        self._state = state
        self._version += 1

    def _notify_commit(self, outcome: EditOutcome) -> None:
        self._notify("document.commit", outcome)
        self._notify("render.plan", outcome.plan)

    def _notify(self, event: str, payload: object) -> None:
        self._dispatching = event
        try:
            self.bus.emit(event, payload)
        finally:
            self._dispatching = None

    @contextmanager
    def _pass(self, name: str, metadata: Optional[dict]) -> Iterator[telemetry.SpanHandle]:
        if self._dispatching is not None:
            raise ReentrantEditError(
                f"Session re-entered with '{name}' while dispatching '{self._dispatching}'",
                event=self._dispatching,
            )
        with telemetry.span(
            name,
            logger_name="markdown_live.session",
            component=True,
            metadata={"version": self._version, **(metadata or {})},
        ) as handle:
            yield handle


__all__ = ["EditorSession"]
