from __future__ import annotations

import pytest

from markdown_live.actions import (
    BOLD,
    CODE,
    ITALIC,
    STRIKETHROUGH,
    WrapSpec,
    code_toggle,
    wrap_toggle,
)
from markdown_live.buffer import Document, Selection


def make_document(text: str, start: int, end: int | None = None) -> Document:
    return Document.create(text, Selection(start, start if end is None else end))


def test_bold_wraps_selection_and_keeps_inner_text_selected() -> None:
    result = wrap_toggle(make_document("hello world", 0, 5), BOLD)

    assert result.text == "**hello** world"
    assert result.selected_text == "hello"


def test_toggle_twice_restores_text_and_selection() -> None:
    document = make_document("say hello now", 4, 9)
    for spec in (BOLD, ITALIC, STRIKETHROUGH):
        once = wrap_toggle(document, spec)
        twice = wrap_toggle(once, spec)
        assert twice.text == document.text
        assert twice.selection == document.selection


def test_selection_including_markers_is_unwrapped() -> None:
    result = wrap_toggle(make_document("**hello** x", 0, 9), BOLD)

    assert result.text == "hello x"
    assert result.selection == Selection(0, 5)


def test_collapsed_caret_inserts_pair_then_removes_it() -> None:
    inserted = wrap_toggle(make_document("abc", 3), BOLD)
    assert inserted.text == "abc****"
    assert inserted.selection == Selection.collapsed(5)

    removed = wrap_toggle(inserted, BOLD)
    assert removed.text == "abc"
    assert removed.selection == Selection.collapsed(3)


def test_backward_selection_keeps_direction() -> None:
    result = wrap_toggle(Document.create("hello", Selection(5, 0)), ITALIC)

    assert result.text == "_hello_"
    assert result.selection == Selection(6, 1)


def test_short_selection_is_not_mistaken_for_markers() -> None:
    result = wrap_toggle(make_document("a**b", 1, 3), BOLD)

    assert result.text == "a******b"


def test_code_uses_inline_ticks_for_single_line() -> None:
    result = code_toggle(make_document("run ls now", 4, 6))

    assert result.text == "run `ls` now"
    assert code_toggle(result).text == "run ls now"


def test_code_uses_fenced_block_for_multi_line_selection() -> None:
    fenced = code_toggle(make_document("a\nb", 0, 3))

    assert fenced.text == "```\na\nb\n```"
    assert fenced.selection == Selection(4, 7)

    restored = code_toggle(fenced)
    assert restored.text == "a\nb"
    assert restored.selection == Selection(0, 3)


def test_wrap_spec_rejects_empty_markers() -> None:
    with pytest.raises(ValueError):
        WrapSpec("", "*")


def test_other_markers_inside_selection_are_kept() -> None:
    result = wrap_toggle(make_document("_x_", 0, 3), BOLD)

    assert result.text == "**_x_**"
    assert wrap_toggle(result, BOLD).text == "_x_"


def test_italic_around_bold_underscores_wraps_and_restores() -> None:
    document = make_document("__bold__", 0, 8)

    italic = wrap_toggle(document, ITALIC)
    assert italic.text == "___bold___"

    restored = wrap_toggle(italic, ITALIC)
    assert restored.text == "__bold__"
    assert restored.selection == document.selection


def test_italic_inside_bold_underscores_wraps_and_restores() -> None:
    document = make_document("__bold__", 2, 6)

    italic = wrap_toggle(document, ITALIC)
    assert italic.text == "___bold___"
    assert italic.selected_text == "bold"

    restored = wrap_toggle(italic, ITALIC)
    assert restored.text == "__bold__"
    assert restored.selection == document.selection


def test_inline_code_around_double_ticks_round_trips() -> None:
    document = make_document("``x``", 0, 5)

    wrapped = code_toggle(document)
    assert wrapped.text == "```x```"
    assert code_toggle(wrapped).text == "``x``"
    assert wrap_toggle(wrap_toggle(document, CODE), CODE).text == "``x``"


@pytest.mark.parametrize("spec", [BOLD, ITALIC, STRIKETHROUGH, CODE])
def test_toggle_twice_restores_text_next_to_same_marker_runs(spec: WrapSpec) -> None:
    for text in ("__x__", "**x**", "~~x~~", "``x``", "a__b", "_x_ y"):
        for start in range(len(text) + 1):
            for end in range(start, len(text) + 1):
                document = make_document(text, start, end)
                once = wrap_toggle(document, spec)
                assert wrap_toggle(once, spec).text == text, (text, start, end)


def test_unwrapping_markers_inside_selection_selects_inner_text() -> None:
    document = make_document("_hello_", 0, 7)

    stripped = wrap_toggle(document, ITALIC)
    assert stripped.text == "hello"
    assert stripped.selection == Selection(0, 5)

    rewrapped = wrap_toggle(stripped, ITALIC)
    assert rewrapped.text == document.text
    assert rewrapped.selection == Selection(1, 6)
