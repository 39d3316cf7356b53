from __future__ import annotations

import pytest

from markdown_live.config import ConfigError, EditorConfig, RenderPolicy


def test_defaults() -> None:
    config = EditorConfig()

    assert config.emoji_convert is False
    assert config.max_heading_level == 3
    assert config.auto_close_after_select_emoji is True
    assert config.markdown_syntax == ""
    assert config.read_only is False
    assert config.render_policy is RenderPolicy.PER_LINE


def test_from_mapping_accepts_camel_case_and_converts() -> None:
    config = EditorConfig.from_mapping(
        {"emojiConvert": "true", "maxHeadingLevel": "4", "render_policy": "whole_buffer"}
    )

    assert config.emoji_convert is True
    assert config.max_heading_level == 4
    assert config.render_policy is RenderPolicy.WHOLE_BUFFER


def test_unknown_option_raises_config_error() -> None:
    with pytest.raises(ConfigError) as excinfo:
        EditorConfig.from_mapping({"theme": "dark"})

    assert excinfo.value.option == "theme"


@pytest.mark.parametrize(
    "data",
    [
        {"read_only": "maybe"},
        {"max_heading_level": "three"},
        {"max_heading_level": 0},
        {"render_policy": "sometimes"},
    ],
)
def test_invalid_values_raise_config_error(data: dict) -> None:
    with pytest.raises(ConfigError):
        EditorConfig.from_mapping(data)


def test_from_env_reads_prefixed_variables() -> None:
    config = EditorConfig.from_env(
        {
            "MARKDOWN_LIVE_READ_ONLY": "1",
            "MARKDOWN_LIVE_MARKDOWN_SYNTAX": "# Notes",
            "UNRELATED": "x",
        }
    )

    assert config.read_only is True
    assert config.markdown_syntax == "# Notes"


def test_with_overrides_converts_values() -> None:
    config = EditorConfig().with_overrides(render_policy="whole_buffer", emoji_convert="yes")

    assert config.render_policy is RenderPolicy.WHOLE_BUFFER
    assert config.emoji_convert is True


def test_constructor_coerces_heading_level() -> None:
    assert EditorConfig(max_heading_level="4").max_heading_level == 4

    with pytest.raises(ConfigError) as excinfo:
        EditorConfig(max_heading_level="three")

    assert excinfo.value.option == "max_heading_level"
