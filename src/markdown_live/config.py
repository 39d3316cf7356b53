"""Editor configuration loaded from keywords, mappings or the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional

DEFAULT_MAX_HEADING_LEVEL = 3

ENV_PREFIX = "MARKDOWN_LIVE_"


class ConfigError(ValueError):
    """Raised when a configuration value cannot be interpreted."""

    def __init__(self, message: str, *, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class RenderPolicy(str, Enum):
    """How focus maps to raw/rendered lines."""

    PER_LINE = "per_line"
    WHOLE_BUFFER = "whole_buffer"


# camelCase spellings accepted alongside the snake_case names.
_ALIASES = {
    "emojiConvert": "emoji_convert",
    "maxHeadingLevel": "max_heading_level",
    "autoCloseAfterSelectEmoji": "auto_close_after_select_emoji",
    "markdownSyntax": "markdown_syntax",
    "readOnly": "read_only",
    "renderPolicy": "render_policy",
}


def _as_bool(option: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off", ""}:
            return False
    raise ConfigError(f"Option '{option}' expects a boolean, got {value!r}", option=option)


def _as_int(option: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Option '{option}' expects an integer", option=option)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"Option '{option}' expects an integer, got {value!r}", option=option
        ) from exc


def _as_policy(option: str, value: Any) -> RenderPolicy:
    if isinstance(value, RenderPolicy):
        return value
    try:
        return RenderPolicy(str(value).strip().lower())
    except ValueError as exc:
        raise ConfigError(
            f"Option '{option}' must be one of {[p.value for p in RenderPolicy]}",
            option=option,
        ) from exc


_CONVERTERS = {
    "emoji_convert": _as_bool,
    "max_heading_level": _as_int,
    "auto_close_after_select_emoji": _as_bool,
    "markdown_syntax": lambda option, value: str(value),
    "read_only": _as_bool,
    "render_policy": _as_policy,
}


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Options recognised by the editing engine.

    ``auto_close_after_select_emoji`` is carried for host UIs only; the
    engine never reads it.
    """

    emoji_convert: bool = False
    max_heading_level: int = DEFAULT_MAX_HEADING_LEVEL
    auto_close_after_select_emoji: bool = True
    markdown_syntax: str = ""
    read_only: bool = False
    render_policy: RenderPolicy = RenderPolicy.PER_LINE

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "max_heading_level", _as_int("max_heading_level", self.max_heading_level)
        )
        if self.max_heading_level < 1:
            raise ConfigError(
                "max_heading_level must be at least 1", option="max_heading_level"
            )
        if not isinstance(self.render_policy, RenderPolicy):
            object.__setattr__(
                self, "render_policy", _as_policy("render_policy", self.render_policy)
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EditorConfig":
        known = {field.name for field in fields(cls)}
        values: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = _ALIASES.get(raw_key, raw_key)
            if key not in known:
                raise ConfigError(f"Unknown option '{raw_key}'", option=raw_key)
            values[key] = _CONVERTERS[key](key, value)
        return cls(**values)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, *, prefix: str = ENV_PREFIX
    ) -> "EditorConfig":
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for field in fields(cls):
            raw = env.get(f"{prefix}{field.name.upper()}")
            if raw is not None:
                values[field.name] = raw
        return cls.from_mapping(values)

    def with_overrides(self, **changes: Any) -> "EditorConfig":
        converted = {
            key: _CONVERTERS[key](key, value) if key in _CONVERTERS else value
            for key, value in changes.items()
        }
        return replace(self, **converted)


__all__ = [
    "ConfigError",
    "EditorConfig",
    "RenderPolicy",
    "ENV_PREFIX",
    "DEFAULT_MAX_HEADING_LEVEL",
]
