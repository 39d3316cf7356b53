"""Toolbar commands mapped onto the syntax toggles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Dict, Optional, Union

from markdown_live.buffer import Document
from markdown_live.config import EditorConfig
from markdown_live.emoji import insert_emoji

from .heading import heading_toggle
from .line_prefix import line_prefix_toggle
from .link import link_insert
from .specs import (
    BOLD,
    CHECKBOX_LIST,
    IMAGE,
    ITALIC,
    LINK,
    ORDERED_LIST,
    QUOTE,
    STRIKETHROUGH,
    UNORDERED_LIST,
)
from .wrap import code_toggle, wrap_toggle


class ToolbarCommand(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    QUOTE = "quote"
    HEADING = "heading"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    CHECKBOX_LIST = "checkbox_list"
    LINK = "link"
    IMAGE = "image"
    EMOJI = "emoji"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a toolbar command; ``document`` is what the host commits."""

    document: Document
    command: str
    status: str = "ok"
    message: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.status == "ok"


@dataclass(frozen=True, slots=True)
class CommandArgs:
    level: Optional[int] = None
    glyph: Optional[str] = None


CommandHandler = Callable[[Document, CommandArgs, EditorConfig], Document]


def _toggle(transform: Callable[[Document], Document]) -> CommandHandler:
    def handler(document: Document, args: CommandArgs, config: EditorConfig) -> Document:
        del args, config
        return transform(document)

    return handler


def _heading(document: Document, args: CommandArgs, config: EditorConfig) -> Document:
    level = args.level if args.level is not None else 1
    return heading_toggle(document, level, max_level=config.max_heading_level)


def _emoji(document: Document, args: CommandArgs, config: EditorConfig) -> Document:
    del config
    if not args.glyph:
        return document
    return insert_emoji(document, args.glyph)


def _reset(document: Document, args: CommandArgs, config: EditorConfig) -> Document:
    del document, args
    return Document.create(config.markdown_syntax)


_COMMAND_HANDLERS: Dict[ToolbarCommand, CommandHandler] = {
    ToolbarCommand.BOLD: _toggle(partial(wrap_toggle, spec=BOLD)),
    ToolbarCommand.ITALIC: _toggle(partial(wrap_toggle, spec=ITALIC)),
    ToolbarCommand.STRIKETHROUGH: _toggle(partial(wrap_toggle, spec=STRIKETHROUGH)),
    ToolbarCommand.CODE: _toggle(code_toggle),
    ToolbarCommand.QUOTE: _toggle(partial(line_prefix_toggle, spec=QUOTE)),
    ToolbarCommand.HEADING: _heading,
    ToolbarCommand.UNORDERED_LIST: _toggle(partial(line_prefix_toggle, spec=UNORDERED_LIST)),
    ToolbarCommand.ORDERED_LIST: _toggle(partial(line_prefix_toggle, spec=ORDERED_LIST)),
    ToolbarCommand.CHECKBOX_LIST: _toggle(partial(line_prefix_toggle, spec=CHECKBOX_LIST)),
    ToolbarCommand.LINK: _toggle(partial(link_insert, spec=LINK)),
    ToolbarCommand.IMAGE: _toggle(partial(link_insert, spec=IMAGE)),
    ToolbarCommand.EMOJI: _emoji,
    ToolbarCommand.RESET: _reset,
}


def parse_command(name: Union[str, ToolbarCommand]) -> Optional[ToolbarCommand]:
    if isinstance(name, ToolbarCommand):
        return name
    try:
        return ToolbarCommand(name.strip().lower().replace("-", "_"))
    except ValueError:
        return None


def run_command(
    document: Document,
    command: Union[str, ToolbarCommand],
    *,
    level: Optional[int] = None,
    glyph: Optional[str] = None,
    config: Optional[EditorConfig] = None,
) -> CommandResult:
    """Apply ``command`` to ``document``.

    Unknown names and read-only configs are reported through ``status``
    instead of raising, and hand back the document untouched.
    """

    config = config or EditorConfig()
    parsed = parse_command(command)
    label = parsed.value if parsed else str(command)
    if parsed is None:
        return CommandResult(document, label, status="command_error", message=label)
    if config.read_only:
        return CommandResult(document, label, status="read_only")

    handler = _COMMAND_HANDLERS[parsed]
    updated = handler(document, CommandArgs(level=level, glyph=glyph), config)
    if updated == document:
        return CommandResult(updated, label, status="unchanged")
    return CommandResult(updated, label)


__all__ = [
    "ToolbarCommand",
    "CommandResult",
    "CommandArgs",
    "parse_command",
    "run_command",
]
