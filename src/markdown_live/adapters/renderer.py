"""markdown-it-py renderer used for the rendered lines of a plan."""

from __future__ import annotations

from typing import Any, Dict, Optional

from markdown_it import MarkdownIt


class MarkdownItRenderer:
    """Renders markdown blocks to HTML with commonmark, tables and strikethrough.

    ``linkify`` stays off so the renderer works without ``linkify-it-py``.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None) -> None:
        settings: Dict[str, Any] = {"html": False, "linkify": False, "typographer": False}
        settings.update(options or {})
        self._md = MarkdownIt("commonmark", settings).enable("table").enable("strikethrough")

    @property
    def parser(self) -> MarkdownIt:
        return self._md

    def render(self, text: str) -> str:
        return self._md.render(text)


__all__ = ["MarkdownItRenderer"]
