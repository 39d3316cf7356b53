from __future__ import annotations

from markdown_live.actions import (
    CHECKBOX_LIST,
    ORDERED_LIST,
    QUOTE,
    UNORDERED_LIST,
    covered_lines,
    heading_level,
    heading_toggle,
    line_prefix_toggle,
    link_insert,
)
from markdown_live.actions.specs import IMAGE
from markdown_live.buffer import Document, Selection


def make_document(text: str, start: int, end: int | None = None) -> Document:
    return Document.create(text, Selection(start, start if end is None else end))


def test_quote_added_to_every_line_then_removed() -> None:
    quoted = line_prefix_toggle(make_document("a\nb", 0, 3), QUOTE)
    assert quoted.text == "> a\n> b"
    assert quoted.selection == Selection(2, 7)

    assert line_prefix_toggle(quoted, QUOTE).text == "a\nb"


def test_mixed_lines_only_get_missing_markers() -> None:
    result = line_prefix_toggle(make_document("- a\nb", 0, 5), UNORDERED_LIST)

    assert result.text == "- a\n- b"


def test_aliases_count_as_present_and_are_removed() -> None:
    result = line_prefix_toggle(make_document("* a\n+ b", 0, 7), UNORDERED_LIST)

    assert result.text == "a\nb"


def test_ordered_list_numbers_new_lines() -> None:
    numbered = line_prefix_toggle(make_document("x\ny\nz", 0, 5), ORDERED_LIST)
    assert numbered.text == "1. x\n2. y\n3. z"

    stripped = line_prefix_toggle(make_document("1. x\n7) y", 0, 9), ORDERED_LIST)
    assert stripped.text == "x\ny"


def test_checked_boxes_are_detected() -> None:
    result = line_prefix_toggle(make_document("- [x] done", 3), CHECKBOX_LIST)
    assert result.text == "done"

    added = line_prefix_toggle(make_document("todo", 0), CHECKBOX_LIST)
    assert added.text == "- [ ] todo"


def test_marker_goes_after_small_indentation() -> None:
    result = line_prefix_toggle(make_document("  item", 3), UNORDERED_LIST)
    assert result.text == "  - item"

    assert line_prefix_toggle(result, UNORDERED_LIST).text == "  item"


def test_marker_needs_following_space_except_for_quote() -> None:
    assert line_prefix_toggle(make_document("-5 degrees", 0), UNORDERED_LIST).text == (
        "- -5 degrees"
    )
    assert line_prefix_toggle(make_document(">a", 0), QUOTE).text == "a"


def test_selection_ending_at_column_zero_skips_that_line() -> None:
    document = make_document("a\nb", 0, 2)

    assert [span.index for span in covered_lines(document)] == [0]
    assert line_prefix_toggle(document, QUOTE).text == "> a\nb"


def test_heading_sets_switches_and_strips() -> None:
    document = make_document("Title", 0)

    first = heading_toggle(document, 1)
    assert first.text == "# Title"
    second = heading_toggle(first, 2)
    assert second.text == "## Title"
    assert heading_toggle(second, 2).text == "Title"


def test_heading_level_is_clamped_to_max() -> None:
    assert heading_toggle(make_document("Title", 0), 6).text == "### Title"
    assert heading_toggle(make_document("Title", 0), 6, max_level=6).text == "###### Title"
    assert heading_toggle(make_document("Title", 0), 0).text == "# Title"


def test_heading_only_touches_line_of_selection_start() -> None:
    result = heading_toggle(make_document("a\nb", 3), 1)

    assert result.text == "a\n# b"


def test_heading_level_requires_space_or_line_end() -> None:
    assert heading_level("## x") == 2
    assert heading_level("###") == 3
    assert heading_level("#hashtag") == 0
    assert heading_toggle(make_document("#hashtag", 0), 1).text == "# #hashtag"


def test_link_uses_selection_as_title_and_selects_url() -> None:
    result = link_insert(make_document("see docs", 4, 8))

    assert result.text == "see [docs](url)"
    assert result.selected_text == "url"


def test_link_with_caret_selects_title_placeholder() -> None:
    result = link_insert(make_document("", 0))

    assert result.text == "[title](url)"
    assert result.selection == Selection(1, 6)


def test_image_template() -> None:
    result = link_insert(make_document("", 0), IMAGE)

    assert result.text == "![alt](url)"
    assert result.selected_text == "alt"


def test_caret_inside_removed_marker_collapses_to_edit_point() -> None:
    result = line_prefix_toggle(make_document("- a", 1), UNORDERED_LIST)

    assert result.text == "a"
    assert result.selection == Selection.collapsed(0)


def test_four_spaces_of_indentation_are_content() -> None:
    result = line_prefix_toggle(make_document("    code", 0), UNORDERED_LIST)

    assert result.text == "-     code"
    assert line_prefix_toggle(result, UNORDERED_LIST).text == "    code"


def test_deeply_indented_marker_is_not_detected() -> None:
    result = line_prefix_toggle(make_document("    - a", 0), UNORDERED_LIST)

    assert result.text == "-     - a"


def test_selection_ending_inside_removed_marker_keeps_its_line() -> None:
    document = make_document("- a\n- b\nc", 0, 5)

    removed = line_prefix_toggle(document, UNORDERED_LIST)
    assert removed.text == "a\nb\nc"
    assert removed.selection == Selection(0, 3)

    assert line_prefix_toggle(removed, UNORDERED_LIST).text == document.text


def test_toggle_twice_restores_text_for_every_selection_end() -> None:
    text = "- a\n- b\n- c"
    for end in range(1, len(text) + 1):
        document = make_document(text, 0, end)
        once = line_prefix_toggle(document, UNORDERED_LIST)
        assert line_prefix_toggle(once, UNORDERED_LIST).text == text, end


def test_mixed_markers_round_trip_to_the_main_marker() -> None:
    document = make_document("- a\n* b\n+ c", 0, 11)

    removed = line_prefix_toggle(document, UNORDERED_LIST)
    assert removed.text == "a\nb\nc"

    restored = line_prefix_toggle(removed, UNORDERED_LIST)
    assert restored.text == "- a\n- b\n- c"
    assert line_prefix_toggle(restored, UNORDERED_LIST).text == "a\nb\nc"
