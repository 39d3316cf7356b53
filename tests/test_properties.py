"""Behavioural guarantees of the editing engine, end to end."""

from __future__ import annotations

from markdown_live.actions import BOLD, QUOTE, UNORDERED_LIST, heading_toggle, line_prefix_toggle, wrap_toggle
from markdown_live.buffer import Document, Selection, line_of
from markdown_live.config import EditorConfig
from markdown_live.emoji import EmojiTable
from markdown_live.modes import EditorSession


def make_document(lines: list[str], start: int, end: int) -> Document:
    return Document.create("\n".join(lines), Selection(start, end))


def type_text(session: EditorSession, text: str) -> None:
    for index in range(1, len(text) + 1):
        current = session.document.text
        session.edit_text(current + text[index - 1])


def test_wrap_toggle_is_idempotent() -> None:
    document = Document.create("hello", Selection(0, 5))

    wrapped = wrap_toggle(document, BOLD)
    assert wrapped.text == "**hello**"

    restored = wrap_toggle(wrapped, BOLD)
    assert restored.text == "hello"
    assert restored.selected_text == "hello"


def test_line_prefix_all_or_add_missing() -> None:
    once = line_prefix_toggle(make_document(["a", "b", "c"], 0, 5), QUOTE)
    assert once.text.split("\n") == ["> a", "> b", "> c"]

    twice = line_prefix_toggle(once, QUOTE)
    assert twice.text.split("\n") == ["a", "b", "c"]

    mixed = line_prefix_toggle(make_document(["> a", "b"], 0, 5), QUOTE)
    assert mixed.text.split("\n") == ["> a", "> b"]


def test_heading_switches_instead_of_cycling() -> None:
    result = heading_toggle(Document.create("# Title", caret=0), 2)

    assert result.text == "## Title"


def test_emoji_substitution_boundary() -> None:
    table = EmojiTable({"smiley": "😃"})
    session = EditorSession(EditorConfig(emoji_convert=True), emoji_table=table)

    type_text(session, "Hi :smiley:")
    assert session.document.text == "Hi 😃"
    assert session.document.caret == len("Hi 😃")

    other = EditorSession(EditorConfig(emoji_convert=True), emoji_table=table)
    type_text(other, "Hi :unknown:")
    assert other.document.text == "Hi :unknown:"


def test_cursor_line_boundary_tie_break() -> None:
    assert line_of("ab\ncd", 2) == 0
    assert line_of("ab\ncd", 3) == 1


def test_bulk_marker_edits_shift_selection_end_exactly() -> None:
    lines = ["l0", "l1", "l2", "l3", "l4", "l5"]
    document = make_document(lines, 6, 14)

    added = line_prefix_toggle(document, UNORDERED_LIST)
    added_lines = added.text.split("\n")
    assert added_lines[:2] == lines[:2]
    assert added_lines[5] == lines[5]
    assert added_lines[2:5] == ["- l2", "- l3", "- l4"]
    assert added.selection.end == 14 + 3 * len("- ")

    removed = line_prefix_toggle(added, UNORDERED_LIST)
    assert removed.text == document.text
    assert removed.selection.end == added.selection.end - 3 * len("- ")
    assert removed.selection == document.selection
