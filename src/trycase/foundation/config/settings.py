"""Environment-based configuration using pydantic-settings.

Provides defaults for the toolkits (JSON options, HTTP status policy) and
logging, loaded from environment variables with the TRYCASE_ prefix.

Example:
    >>> from trycase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.http.ensure_success
    False

    # Or with environment variables:
    # TRYCASE_JSON_SORT_KEYS=true
    # TRYCASE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TRYCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class JsonSettings(BaseSettings):
    """Defaults for the JSON toolkit when no JsonOptions are passed."""

    model_config = SettingsConfigDict(
        env_prefix="TRYCASE_JSON_",
        extra="ignore",
    )

    indent: bool = Field(default=False, description="Pretty-print with two-space indentation")
    sort_keys: bool = False
    naive_utc: bool = Field(default=False, description="Serialize naive datetimes as UTC")
    strict: bool = Field(default=False, description="Strict (no coercion) typed decoding")


class HttpSettings(BaseSettings):
    """HTTP toolkit defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRYCASE_HTTP_",
        extra="ignore",
    )

    ensure_success: bool = Field(
        default=False,
        description="Classify non-2xx responses as HttpError instead of returning them",
    )


class TrycaseSettings(BaseSettings):
    """Root settings for trycase.

    Example environment variables:
        TRYCASE_LOG_LEVEL=DEBUG
        TRYCASE_JSON_INDENT=true
        TRYCASE_HTTP_ENSURE_SUCCESS=true
    """

    model_config = SettingsConfigDict(
        env_prefix="TRYCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    serialization: JsonSettings = Field(default_factory=JsonSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)


class SettingsError(ValueError):
    """TRYCASE_ environment variables failed validation."""


@lru_cache(maxsize=1)
def get_settings() -> TrycaseSettings:
    """Get the global settings instance (cached).

    Raises:
        SettingsError: When the environment holds invalid values. Not cached,
            so fixing the environment and calling again recovers.
    """
    try:
        return TrycaseSettings()
    except ValidationError as e:
        raise SettingsError(f"Invalid trycase settings: {e.error_count()} error(s) in {e.title}") from e


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
