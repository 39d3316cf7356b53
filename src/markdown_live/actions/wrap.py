"""Inline wrap toggles: bold, italic, strikethrough and code."""

from __future__ import annotations

from typing import Optional

from markdown_live.buffer import Document, Selection

from .specs import CODE, CODE_BLOCK, WrapSpec


def _is_wrapped(text: str, spec: WrapSpec) -> bool:
    return (
        len(text) >= len(spec.prefix) + len(spec.suffix)
        and text.startswith(spec.prefix)
        and text.endswith(spec.suffix)
    )


def _is_surrounded(text: str, start: int, end: int, spec: WrapSpec) -> bool:
    before = start - len(spec.prefix)
    return before >= 0 and text[before:start] == spec.prefix and text.startswith(
        spec.suffix, end
    )


def _run_char(spec: WrapSpec) -> Optional[str]:
    """The repeated character of a symmetric marker like ``**`` or ``_``."""

    if spec.prefix == spec.suffix and len(set(spec.prefix)) == 1:
        return spec.prefix[0]
    return None


def _run_before(text: str, index: int, char: str, floor: int = 0) -> int:
    count = 0
    while index - count - 1 >= floor and text[index - count - 1] == char:
        count += 1
    return count


def _run_after(text: str, index: int, char: str, ceiling: int) -> int:
    count = 0
    while index + count < ceiling and text[index + count] == char:
        count += 1
    return count


def _run_toggle(document: Document, spec: WrapSpec, char: str) -> Document:
    """Toggle a repeated-character marker by the length of the marker runs.

    The runs touching each selection boundary (outside plus inside) decide
    presence: the marker is present when ``min(left, right) // len(marker)``
    is odd. Wrapping and stripping both move each run by exactly one marker,
    so ``_`` around ``__bold__`` wraps instead of eating the bold markers.
    """

    text = document.text
    selection = document.selection
    start, end = selection.start, selection.end
    width = len(spec.prefix)

    outer_left = _run_before(text, start, char)
    outer_right = _run_after(text, end, char, len(text))
    inner_left = _run_after(text, start, char, end)
    inner_right = _run_before(text, end, char, start)
    if inner_left == end - start:
        # A selection made only of marker characters is content.
        inner_left = inner_right = 0

    left, right = outer_left + inner_left, outer_right + inner_right
    if (min(left, right) // width) % 2 == 0:
        updated = text[:start] + spec.prefix + text[start:end] + spec.suffix + text[end:]
        if selection.is_collapsed:
            return Document.create(updated, Selection.collapsed(start + width))
        inner_start = start + width
        return Document.create(
            updated, selection.with_range(inner_start, inner_start + end - start)
        )

    take_left = min(outer_left, width)
    take_right = min(outer_right, width)
    keep_start = start + width - take_left
    keep_end = end - (width - take_right)
    new_start = start - take_left
    updated = text[:new_start] + text[keep_start:keep_end] + text[end + take_right :]
    if selection.is_collapsed:
        return Document.create(updated, Selection.collapsed(new_start))
    return Document.create(
        updated, selection.with_range(new_start, new_start + keep_end - keep_start)
    )


def wrap_toggle(document: Document, spec: WrapSpec) -> Document:
    """Wrap the selection with ``spec`` or strip it when already present.

    Detection wins over wrapping: a selection that starts and ends with the
    markers, or that sits directly between them, is unwrapped. Applying the
    same spec twice restores the text. When the stripped markers were inside
    the selection, only the inner text stays selected, so re-wrapping covers
    the inner text rather than the original markers.
    """

    char = _run_char(spec)
    if char is not None:
        return _run_toggle(document, spec, char)

    text = document.text
    selection = document.selection
    start, end = selection.start, selection.end
    prefix, suffix = spec.prefix, spec.suffix

    if selection.is_collapsed:
        if _is_surrounded(text, start, start, spec):
            updated = text[: start - len(prefix)] + text[start + len(suffix) :]
            return Document.create(updated, Selection.collapsed(start - len(prefix)))
        updated = text[:start] + prefix + suffix + text[start:]
        return Document.create(updated, Selection.collapsed(start + len(prefix)))

    selected = text[start:end]
    if _is_wrapped(selected, spec):
        inner = selected[len(prefix) : len(selected) - len(suffix)]
        updated = text[:start] + inner + text[end:]
        return Document.create(updated, selection.with_range(start, start + len(inner)))

    if _is_surrounded(text, start, end, spec):
        outer_start = start - len(prefix)
        updated = text[:outer_start] + selected + text[end + len(suffix) :]
        return Document.create(
            updated, selection.with_range(outer_start, outer_start + len(selected))
        )

    updated = text[:start] + prefix + selected + suffix + text[end:]
    inner_start = start + len(prefix)
    return Document.create(
        updated, selection.with_range(inner_start, inner_start + len(selected))
    )


def code_toggle(document: Document) -> Document:
    """Inline code for single-line selections, a fenced block otherwise."""

    selected = document.selected_text
    start, end = document.selection.start, document.selection.end
    if (
        "\n" in selected
        or _is_wrapped(selected, CODE_BLOCK)
        or _is_surrounded(document.text, start, end, CODE_BLOCK)
    ):
        return wrap_toggle(document, CODE_BLOCK)
    return wrap_toggle(document, CODE)


__all__ = ["wrap_toggle", "code_toggle"]
