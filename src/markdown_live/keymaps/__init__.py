"""Keyboard shortcuts bound to toolbar commands."""

from .defaults import DEFAULT_BINDINGS, load_default_shortcuts
from .models import Binding, KeyStroke, WhenClause
from .registry import RegistryStats, ShortcutConflictError, ShortcutRegistry

__all__ = [
    "DEFAULT_BINDINGS",
    "load_default_shortcuts",
    "Binding",
    "KeyStroke",
    "WhenClause",
    "RegistryStats",
    "ShortcutConflictError",
    "ShortcutRegistry",
]
