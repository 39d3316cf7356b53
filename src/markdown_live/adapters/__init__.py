"""Host-facing adapters: markdown rendering and the Textual demo surface."""

from .renderer import MarkdownItRenderer

__all__ = ["MarkdownItRenderer"]
