"""Markdown syntax toggles and the toolbar commands built on them."""

from .heading import heading_level, heading_toggle
from .line_prefix import covered_lines, line_prefix_toggle
from .link import link_insert
from .specs import (
    BOLD,
    CHECKBOX_LIST,
    CODE,
    CODE_BLOCK,
    IMAGE,
    ITALIC,
    LINK,
    ORDERED_LIST,
    QUOTE,
    STRIKETHROUGH,
    UNORDERED_LIST,
    HeadingSpec,
    LinePrefixSpec,
    LinkSpec,
    ToggleSpec,
    WrapSpec,
)
from .toolbar import CommandResult, ToolbarCommand, parse_command, run_command
from .wrap import code_toggle, wrap_toggle

__all__ = [
    "heading_level",
    "heading_toggle",
    "covered_lines",
    "line_prefix_toggle",
    "link_insert",
    "code_toggle",
    "wrap_toggle",
    "BOLD",
    "CHECKBOX_LIST",
    "CODE",
    "CODE_BLOCK",
    "IMAGE",
    "ITALIC",
    "LINK",
    "ORDERED_LIST",
    "QUOTE",
    "STRIKETHROUGH",
    "UNORDERED_LIST",
    "HeadingSpec",
    "LinePrefixSpec",
    "LinkSpec",
    "ToggleSpec",
    "WrapSpec",
    "CommandResult",
    "ToolbarCommand",
    "parse_command",
    "run_command",
]
