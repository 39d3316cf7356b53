"""Emoji shortcode table and live substitution."""

from .substitutor import EmojiSubstitutor, Substitution, insert_emoji, substitute_emoji
from .table import DEFAULT_EMOJI_TABLE, EmojiTable

__all__ = [
    "EmojiSubstitutor",
    "Substitution",
    "insert_emoji",
    "substitute_emoji",
    "EmojiTable",
    "DEFAULT_EMOJI_TABLE",
]
