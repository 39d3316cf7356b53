from __future__ import annotations

import pytest

from markdown_live.buffer import (
    Document,
    DocumentHistory,
    HistoryEntry,
    LineSpan,
    Selection,
    TextEdit,
    apply_edits,
    line_of,
    lines_of,
    location_to_offset,
    map_offset,
    map_selection,
    offset_to_location,
)


def test_lines_partition_text_exactly() -> None:
    assert lines_of("ab\ncd") == [LineSpan(0, 2, 0), LineSpan(3, 5, 1)]
    assert lines_of("") == [LineSpan(0, 0, 0)]
    assert lines_of("a\n") == [LineSpan(0, 1, 0), LineSpan(2, 2, 1)]


def test_offset_on_newline_belongs_to_line_it_ends() -> None:
    text = "ab\ncd"
    assert line_of(text, 0) == 0
    assert line_of(text, 2) == 0
    assert line_of(text, 3) == 1
    assert line_of(text, 5) == 1


def test_line_of_clamps_out_of_range_offsets() -> None:
    assert line_of("ab\ncd", -4) == 0
    assert line_of("ab\ncd", 99) == 1
    assert line_of("", 3) == 0
    assert line_of("a\n", 2) == 1


def test_location_round_trip_clamps_columns() -> None:
    text = "ab\ncd"
    assert offset_to_location(text, 4) == (1, 1)
    assert location_to_offset(text, (1, 1)) == 4
    assert location_to_offset(text, (1, 40)) == 5
    assert location_to_offset(text, (9, 0)) == 3


def test_document_create_clamps_selection_and_defaults_caret_to_end() -> None:
    assert Document.create("abc").selection == Selection.collapsed(3)
    assert Document.create("abc", caret=1).caret == 1
    assert Document.create("abc", Selection(7, -2)).selection == Selection(3, 0)


def test_selection_direction_is_preserved_by_with_range() -> None:
    backward = Selection.spanning(2, 5, backward=True)
    assert (backward.anchor, backward.caret) == (5, 2)
    moved = backward.with_range(0, 3)
    assert moved.is_backward
    assert (moved.start, moved.end) == (0, 3)


def test_replace_selection_collapses_after_replacement() -> None:
    document = Document.create("hello", Selection(1, 4))
    updated = document.replace_selection("EY")
    assert updated.text == "hEYo"
    assert updated.selection == Selection.collapsed(3)


def test_apply_edits_uses_running_offsets() -> None:
    edits = [TextEdit(4, inserted="> "), TextEdit(0, inserted="> ")]
    assert apply_edits("one\ntwo", edits) == "> one\n> two"
    assert apply_edits("abcd", [TextEdit(1, 2, "Z")]) == "aZd"


def test_overlapping_edits_are_rejected() -> None:
    with pytest.raises(ValueError):
        apply_edits("abcd", [TextEdit(0, 2), TextEdit(1, 1)])


def test_map_offset_at_insertion_moves_past_inserted_text() -> None:
    edits = [TextEdit(1, inserted="XY")]
    assert map_offset(0, edits) == 0
    assert map_offset(1, edits) == 3
    assert map_offset(2, edits) == 4


def test_map_offset_inside_removed_range_lands_after_replacement() -> None:
    edits = [TextEdit(1, 2, "Z")]
    assert map_offset(1, edits) == 1
    assert map_offset(2, edits) == 2
    assert map_offset(3, edits) == 2


def test_map_selection_maps_both_ends() -> None:
    edits = [TextEdit(0, inserted="# ")]
    assert map_selection(Selection(1, 3), edits) == Selection(3, 5)


def make_entry(before: str, after: str) -> HistoryEntry:
    return HistoryEntry("edit", Document.create(before), Document.create(after))


def test_history_undo_redo_and_redo_tail() -> None:
    history = DocumentHistory()
    history.push(make_entry("", "a"))
    history.push(make_entry("a", "ab"))

    undone = history.undo()
    assert undone is not None and undone.before.text == "a"
    assert history.can_redo()

    history.push(make_entry("a", "ac"))
    assert not history.can_redo()
    assert len(history) == 2


def test_history_skips_noops_and_respects_limit() -> None:
    history = DocumentHistory(limit=2)
    history.push(make_entry("a", "a"))
    assert len(history) == 0
    for before, after in (("", "a"), ("a", "ab"), ("ab", "abc")):
        history.push(make_entry(before, after))
    assert len(history) == 2
    assert history.undo().after.text == "abc"
    assert history.undo().after.text == "ab"
    assert history.undo() is None


def test_history_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError):
        DocumentHistory(limit=0)
