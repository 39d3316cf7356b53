"""Built-in editor shortcuts."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Binding, KeyStroke
from .registry import ShortcutRegistry

_EDITABLE = ("focused", "!read_only")

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="format.bold",
        stroke=KeyStroke.parse("ctrl+b"),
        command="bold",
        description="Toggle bold",
        when=_EDITABLE,
    ),
    Binding(
        id="format.italic",
        stroke=KeyStroke.parse("ctrl+i"),
        command="italic",
        description="Toggle italic",
        when=_EDITABLE,
    ),
    Binding(
        id="format.strikethrough",
        stroke=KeyStroke.parse("ctrl+shift+x"),
        command="strikethrough",
        description="Toggle strikethrough",
        when=_EDITABLE,
    ),
    Binding(
        id="format.code",
        stroke=KeyStroke.parse("ctrl+e"),
        command="code",
        description="Toggle inline code or a code block",
        when=_EDITABLE,
    ),
    Binding(
        id="insert.link",
        stroke=KeyStroke.parse("ctrl+k"),
        command="link",
        description="Insert a link",
        when=_EDITABLE,
    ),
)


def load_default_shortcuts(
    registry: ShortcutRegistry,
    *,
    replace: bool = False,
    exclude: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register the built-in bindings, minus ``exclude``, plus ``extra_bindings``."""

    skipped = set(exclude or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id not in skipped:
            registry.register(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register(binding, replace=replace)


__all__ = ["DEFAULT_BINDINGS", "load_default_shortcuts"]
