"""Link and image template insertion."""

from __future__ import annotations

from markdown_live.buffer import Document, Selection

from .specs import LINK, LinkSpec


def link_insert(document: Document, spec: LinkSpec = LINK) -> Document:
    """Insert ``spec``'s template around the selection.

    With a selection the selected text becomes the title and the url
    placeholder is selected for overtyping. With a collapsed caret the whole
    template is inserted and the title placeholder is selected.
    """

    head, middle, tail = spec.parts()
    text = document.text
    start, end = document.selection.start, document.selection.end
    selected = text[start:end]
    title = selected or spec.title

    inserted = head + title + middle + spec.url + tail
    updated = text[:start] + inserted + text[end:]

    if selected:
        url_start = start + len(head) + len(title) + len(middle)
        selection = Selection.spanning(url_start, url_start + len(spec.url))
    else:
        title_start = start + len(head)
        selection = Selection.spanning(title_start, title_start + len(title))
    return Document.create(updated, selection)


__all__ = ["link_insert"]
