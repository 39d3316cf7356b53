"""Static shortcode to glyph table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

_DEFAULT_GLYPHS: dict[str, str] = {
    "smile": "😄",
    "smiley": "😃",
    "grinning": "😀",
    "grin": "😁",
    "laughing": "😆",
    "joy": "😂",
    "rofl": "🤣",
    "sweat_smile": "😅",
    "blush": "😊",
    "innocent": "😇",
    "wink": "😉",
    "relaxed": "☺️",
    "slightly_smiling_face": "🙂",
    "upside_down_face": "🙃",
    "heart_eyes": "😍",
    "kissing_heart": "😘",
    "yum": "😋",
    "stuck_out_tongue": "😛",
    "sunglasses": "😎",
    "nerd_face": "🤓",
    "thinking": "🤔",
    "neutral_face": "😐",
    "expressionless": "😑",
    "unamused": "😒",
    "roll_eyes": "🙄",
    "smirk": "😏",
    "pensive": "😔",
    "confused": "😕",
    "worried": "😟",
    "cry": "😢",
    "sob": "😭",
    "angry": "😠",
    "rage": "😡",
    "scream": "😱",
    "flushed": "😳",
    "sleeping": "😴",
    "mask": "😷",
    "hugs": "🤗",
    "wave": "👋",
    "ok_hand": "👌",
    "thumbsup": "👍",
    "thumbsdown": "👎",
    "clap": "👏",
    "pray": "🙏",
    "muscle": "💪",
    "raised_hands": "🙌",
    "point_up": "☝️",
    "point_right": "👉",
    "eyes": "👀",
    "heart": "❤️",
    "broken_heart": "💔",
    "sparkling_heart": "💖",
    "star": "⭐",
    "sparkles": "✨",
    "fire": "🔥",
    "zap": "⚡",
    "boom": "💥",
    "tada": "🎉",
    "rocket": "🚀",
    "bulb": "💡",
    "memo": "📝",
    "book": "📖",
    "bookmark": "🔖",
    "link": "🔗",
    "lock": "🔒",
    "key": "🔑",
    "bell": "🔔",
    "calendar": "📆",
    "hourglass": "⌛",
    "warning": "⚠️",
    "no_entry": "⛔",
    "x": "❌",
    "white_check_mark": "✅",
    "heavy_check_mark": "✔️",
    "question": "❓",
    "exclamation": "❗",
    "100": "💯",
    "bug": "🐛",
    "coffee": "☕",
    "pizza": "🍕",
    "cake": "🍰",
    "beer": "🍺",
    "sunny": "☀️",
    "cloud": "☁️",
    "umbrella": "☔",
    "snowflake": "❄️",
    "rainbow": "🌈",
    "earth_africa": "🌍",
    "cat": "🐱",
    "dog": "🐶",
    "unicorn": "🦄",
    "penguin": "🐧",
    "snake": "🐍",
    "tree": "🌳",
    "rose": "🌹",
    "seedling": "🌱",
    "gift": "🎁",
    "trophy": "🏆",
    "computer": "💻",
    "gear": "⚙️",
    "hammer": "🔨",
    "wrench": "🔧",
    "package": "📦",
    "chart_with_upwards_trend": "📈",
    "mag": "🔍",
    "speech_balloon": "💬",
    "email": "📧",
    "pushpin": "📌",
    "paperclip": "📎",
    "construction": "🚧",
    "recycle": "♻️",
}


class EmojiTable(Mapping[str, str]):
    """Read-only mapping from shortcode name (no colons) to glyph."""

    def __init__(self, glyphs: Mapping[str, str]) -> None:
        cleaned = {}
        for name, glyph in glyphs.items():
            key = name.strip(":")
            if not key or not glyph:
                raise ValueError(f"Invalid emoji entry {name!r} -> {glyph!r}")
            cleaned[key] = glyph
        self._glyphs: Mapping[str, str] = MappingProxyType(cleaned)

    def __getitem__(self, name: str) -> str:
        return self._glyphs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def glyph_for(self, shortcode: str) -> Optional[str]:
        """Look up ``name`` or ``:name:``."""

        return self._glyphs.get(shortcode.strip(":"))

    def suggest(self, prefix: str, *, limit: int = 10) -> List[str]:
        """Shortcode names starting with ``prefix`` for an emoji picker."""

        needle = prefix.strip(":").lower()
        names = sorted(name for name in self._glyphs if name.startswith(needle))
        return names[:limit]

    def merged(self, extra: Mapping[str, str]) -> "EmojiTable":
        return EmojiTable({**self._glyphs, **extra})


DEFAULT_EMOJI_TABLE = EmojiTable(_DEFAULT_GLYPHS)

__all__ = ["EmojiTable", "DEFAULT_EMOJI_TABLE"]
