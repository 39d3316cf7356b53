"""Immutable descriptions of the markdown constructs the toggler knows."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern, Union

from markdown_live.config import DEFAULT_MAX_HEADING_LEVEL

TITLE_FIELD = "{title}"
URL_FIELD = "{url}"


@dataclass(frozen=True, slots=True)
class WrapSpec:
    """Inline construct expressed as a prefix/suffix pair."""

    prefix: str
    suffix: str
    name: str = "wrap"

    def __post_init__(self) -> None:
        if not self.prefix or not self.suffix:
            raise ValueError("WrapSpec prefix and suffix cannot be empty")


@dataclass(frozen=True, slots=True)
class LinePrefixSpec:
    """Construct expressed as a marker at the start of each line.

    ``aliases`` are other markers that also count as present when detecting
    (they are removed like the marker but never inserted). Ordered specs
    match any ``<digits>.`` or ``<digits>)`` marker and number new lines.
    """

    marker: str
    ordered: bool = False
    aliases: tuple[str, ...] = ()
    requires_space: bool = True
    name: str = "line_prefix"

    def __post_init__(self) -> None:
        if not self.marker:
            raise ValueError("LinePrefixSpec marker cannot be empty")
        if self.marker[0].isspace() or self.marker[-1].isspace():
            raise ValueError("LinePrefixSpec marker cannot start or end with whitespace")

    @property
    def pattern(self) -> Pattern[str]:
        if self.ordered:
            body = r"\d{1,9}[.)]"
        else:
            choices = sorted((self.marker, *self.aliases), key=len, reverse=True)
            body = "|".join(re.escape(choice) for choice in choices)
        tail = r"(?= |$)" if self.requires_space else ""
        return re.compile(rf"(?:{body}){tail} ?")

    def marker_for(self, position: int) -> str:
        """Marker text (with trailing space) for the ``position``-th new line."""

        if self.ordered:
            return f"{position + 1}. "
        return f"{self.marker} "


@dataclass(frozen=True, slots=True)
class HeadingSpec:
    level: int
    max_level: int = DEFAULT_MAX_HEADING_LEVEL

    def __post_init__(self) -> None:
        if self.max_level < 1:
            raise ValueError("max_level must be at least 1")
        object.__setattr__(self, "level", max(1, min(self.level, self.max_level)))

    @property
    def marker(self) -> str:
        return "#" * self.level + " "


@dataclass(frozen=True, slots=True)
class LinkSpec:
    """Insertion template with ``{title}`` and ``{url}`` fields."""

    template: str = "[{title}]({url})"
    title: str = "title"
    url: str = "url"
    name: str = "link"

    def __post_init__(self) -> None:
        title_at = self.template.find(TITLE_FIELD)
        url_at = self.template.find(URL_FIELD)
        if title_at < 0 or url_at < 0:
            raise ValueError("LinkSpec template needs {title} and {url} fields")
        if url_at < title_at:
            raise ValueError("LinkSpec template must place {title} before {url}")

    def parts(self) -> tuple[str, str, str]:
        """Return the literal text before title, between fields, after url."""

        head, rest = self.template.split(TITLE_FIELD, 1)
        middle, tail = rest.split(URL_FIELD, 1)
        return head, middle, tail


ToggleSpec = Union[WrapSpec, LinePrefixSpec, HeadingSpec, LinkSpec]

BOLD = WrapSpec("**", "**", name="bold")
ITALIC = WrapSpec("_", "_", name="italic")
STRIKETHROUGH = WrapSpec("~~", "~~", name="strikethrough")
CODE = WrapSpec("`", "`", name="code")
CODE_BLOCK = WrapSpec("```\n", "\n```", name="code_block")

QUOTE = LinePrefixSpec(">", requires_space=False, name="quote")
UNORDERED_LIST = LinePrefixSpec("-", aliases=("*", "+"), name="unordered_list")
ORDERED_LIST = LinePrefixSpec("1.", ordered=True, name="ordered_list")
CHECKBOX_LIST = LinePrefixSpec(
    "- [ ]", aliases=("- [x]", "- [X]"), name="checkbox_list"
)

LINK = LinkSpec()
IMAGE = LinkSpec(template="![{title}]({url})", title="alt", name="image")

__all__ = [
    "DEFAULT_MAX_HEADING_LEVEL",
    "WrapSpec",
    "LinePrefixSpec",
    "HeadingSpec",
    "LinkSpec",
    "ToggleSpec",
    "BOLD",
    "ITALIC",
    "STRIKETHROUGH",
    "CODE",
    "CODE_BLOCK",
    "QUOTE",
    "UNORDERED_LIST",
    "ORDERED_LIST",
    "CHECKBOX_LIST",
    "LINK",
    "IMAGE",
]
