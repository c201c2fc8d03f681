"""Shared fixtures: isolate settings from the environment between tests."""

from __future__ import annotations

import pytest

from trycase.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and TRYCASE_ env overrides around each test."""
    for name in ("TRYCASE_HTTP_ENSURE_SUCCESS", "TRYCASE_JSON_SORT_KEYS", "TRYCASE_JSON_INDENT", "TRYCASE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
