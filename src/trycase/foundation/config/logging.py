"""Logging setup for the ``trycase`` logger hierarchy.

Toolkit modules log through ``logging.getLogger("trycase.<area>")``. This helper
installs one stream handler on the ``trycase`` root logger, rendering either
plain text or one orjson-encoded object per line.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from .settings import LoggingSettings, get_settings

ROOT_LOGGER = "trycase"
_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=str).decode()


def configure_logging(settings: LoggingSettings | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Configure the ``trycase`` logger from settings. Idempotent: replaces its own handler."""
    settings = settings or get_settings().logging
    log = logging.getLogger(ROOT_LOGGER)
    log.setLevel(settings.level)

    for handler in [h for h in log.handlers if getattr(h, "_trycase", False)]:
        log.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if settings.format == "json" else logging.Formatter(_TEXT_FORMAT))
    handler._trycase = True  # type: ignore[attr-defined]
    log.addHandler(handler)
    return log
