from __future__ import annotations

import pytest

from markdown_live.runtime import telemetry


def test_settings_from_env_reads_prefixed_flags() -> None:
    settings = telemetry.TelemetrySettings.from_env(
        {
            "MARKDOWN_LIVE_LOG_LEVEL": "debug",
            "MARKDOWN_LIVE_NO_COLOR": "1",
            "MARKDOWN_LIVE_LOG_JSON": "yes",
            "MARKDOWN_LIVE_LOG_BUFFER_SIZE": "64",
        }
    )

    assert settings.level == "DEBUG"
    assert settings.colored is False
    assert settings.json is True
    assert settings.buffer_size == 64
    assert settings.console is True


def test_preset_keeps_env_log_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKDOWN_LIVE_LOG_FILE", "custom.log")

    settings = telemetry.preset_settings("production")

    assert settings.log_file == "custom.log"
    assert settings.buffered is True
    assert settings.console is False


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.preset_settings("verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_span_reraises_after_recording_failure() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::boom", component=True, metadata={"case": "fail"}):
            raise RuntimeError("boom")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("markdown_live.test") is telemetry.get_logger("markdown_live.test")
