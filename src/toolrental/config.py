"""
Tool Rental Runtime Configuration

Environment variables and logging setup for the CLI and API entry points.
Business settings (weekends, rounding, display formats) are reference data
and live in settings.yaml, not here.

Environment:
    TOOLRENTAL_DATA_DIR        Reference data directory (default: bundled data)
    TOOLRENTAL_LOG_LEVEL       Log level (default: INFO)
    TOOLRENTAL_LOG_FORMAT      "text" or "json" (default: text)
    TOOLRENTAL_STRICT_VERSION  Reject schema version mismatches (default: true)
    TOOLRENTAL_DOCS_ENABLED    Serve the OpenAPI docs (default: true)
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


LOGGER_NAME = "toolrental"

# Extra record attributes copied into JSON log lines
LOG_EXTRA_FIELDS = (
    "tool_code",
    "checkout_date",
    "rental_days",
    "final_charge",
    "source",
    "error_code",
)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RuntimeConfig:
    """Process-level settings read from the environment."""
    data_dir: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "text"
    strict_version: bool = True
    docs_enabled: bool = True

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        return cls(
            data_dir=os.getenv("TOOLRENTAL_DATA_DIR") or None,
            log_level=os.getenv("TOOLRENTAL_LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("TOOLRENTAL_LOG_FORMAT", "text").lower(),
            strict_version=_env_flag("TOOLRENTAL_STRICT_VERSION", "true"),
            docs_enabled=_env_flag("TOOLRENTAL_DOCS_ENABLED", "true"),
        )


# =============================================================================
# Logging Setup
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in LOG_EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Calling it again replaces the handler rather than stacking another one.

    Args:
        level: Level name such as "DEBUG" or "INFO"
        json_format: Emit one JSON object per line instead of plain text

    Returns:
        The configured "toolrental" logger

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    for existing in list(logger.handlers):
        if getattr(existing, "_toolrental_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    handler._toolrental_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def logging_configured() -> bool:
    """True once configure_logging has installed its handler."""
    logger = logging.getLogger(LOGGER_NAME)
    return any(getattr(h, "_toolrental_handler", False) for h in logger.handlers)
