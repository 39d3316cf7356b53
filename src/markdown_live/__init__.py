"""UI-agnostic live markdown editing engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "emoji",
    "keymaps",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
