"""Configuration management using pydantic-settings.

Provides environment-based configuration and logging setup.
"""

from .logging import JsonFormatter, configure_logging
from .settings import (
    HttpSettings,
    JsonSettings,
    LoggingSettings,
    SettingsError,
    TrycaseSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "HttpSettings",
    "JsonSettings",
    "LoggingSettings",
    "SettingsError",
    "TrycaseSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
    "JsonFormatter",
]
