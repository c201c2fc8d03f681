"""Tests for settings loading and logging setup."""

from __future__ import annotations

import io
import logging

import orjson
import pytest

from trycase import SettingsError, configure_logging, get_settings, try_get_value
from trycase.foundation.config import LoggingSettings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"
    assert settings.serialization.indent is False
    assert settings.http.ensure_success is False


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCASE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TRYCASE_JSON_INDENT", "true")
    monkeypatch.setenv("TRYCASE_HTTP_ENSURE_SUCCESS", "1")

    settings = get_settings()
    assert settings.logging.level == "DEBUG"
    assert settings.serialization.indent is True
    assert settings.http.ensure_success is True


def test_configure_logging_json_output() -> None:
    stream = io.StringIO()
    log = configure_logging(LoggingSettings(level="DEBUG", format="json"), stream=stream)
    try:
        try_get_value({}, "k")
        line = stream.getvalue().strip().splitlines()[-1]
        entry = orjson.loads(line)

        assert entry["level"] == "debug"
        assert entry["logger"] == "trycase.boundary"
        assert "Collection.AccessError" in entry["event"]
    finally:
        for handler in list(log.handlers):
            log.removeHandler(handler)
        log.setLevel(logging.NOTSET)


def test_configure_logging_is_idempotent() -> None:
    log = configure_logging(LoggingSettings(format="text"), stream=io.StringIO())
    configure_logging(LoggingSettings(format="text"), stream=io.StringIO())
    try:
        assert len([h for h in log.handlers if getattr(h, "_trycase", False)]) == 1
        assert log.level == logging.WARNING
    finally:
        for handler in list(log.handlers):
            log.removeHandler(handler)
        log.setLevel(logging.NOTSET)


def test_invalid_env_raises_settings_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCASE_LOG_LEVEL", "LOUD")
    with pytest.raises(SettingsError):
        get_settings()

    monkeypatch.setenv("TRYCASE_LOG_LEVEL", "info")
    assert get_settings().logging.level == "INFO"
