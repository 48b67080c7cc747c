"""
toolrental Runtime Configuration Tests

Environment parsing and logging setup.
"""
from __future__ import annotations

import json
import logging
import sys

import pytest

from toolrental.config import (
    LOGGER_NAME,
    JSONFormatter,
    RuntimeConfig,
    configure_logging,
    logging_configured,
)


@pytest.fixture
def package_logger():
    return logging.getLogger(LOGGER_NAME)


class TestRuntimeConfig:
    """Test environment parsing."""

    def test_defaults(self) -> None:
        assert RuntimeConfig.from_env() == RuntimeConfig()

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("TOOLRENTAL_DATA_DIR", "/srv/rental")
        monkeypatch.setenv("TOOLRENTAL_LOG_LEVEL", "debug")
        monkeypatch.setenv("TOOLRENTAL_LOG_FORMAT", "JSON")
        monkeypatch.setenv("TOOLRENTAL_STRICT_VERSION", "no")
        monkeypatch.setenv("TOOLRENTAL_DOCS_ENABLED", "0")
        assert RuntimeConfig.from_env() == RuntimeConfig(
            data_dir="/srv/rental",
            log_level="DEBUG",
            log_format="json",
            strict_version=False,
            docs_enabled=False,
        )

    def test_empty_data_dir_is_unset(self, monkeypatch) -> None:
        monkeypatch.setenv("TOOLRENTAL_DATA_DIR", "")
        assert RuntimeConfig.from_env().data_dir is None


class TestConfigureLogging:
    """Test the package logger setup."""

    def test_level(self, package_logger) -> None:
        assert configure_logging("warning") is package_logger
        assert package_logger.level == logging.WARNING

    def test_unknown_level(self, package_logger) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("CHATTY")

    def test_repeated_calls_keep_one_handler(self, package_logger) -> None:
        configure_logging("INFO")
        configure_logging("DEBUG", json_format=True)
        handlers = [h for h in package_logger.handlers if getattr(h, "_toolrental_handler", False)]
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JSONFormatter)

    def test_logging_configured(self, package_logger) -> None:
        assert not logging_configured()
        configure_logging("INFO")
        assert logging_configured()


class TestJSONFormatter:
    """Test structured log lines."""

    def test_extra_fields(self) -> None:
        record = logging.LogRecord(
            "toolrental.engine", logging.INFO, __file__, 1,
            "Computed agreement for %s", ("JAKR",), None,
        )
        record.tool_code = "JAKR"
        record.final_charge = "8.07"
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "toolrental.engine"
        assert entry["message"] == "Computed agreement for JAKR"
        assert entry["tool_code"] == "JAKR"
        assert entry["final_charge"] == "8.07"
        assert "checkout_date" not in entry
        assert "timestamp" in entry

    def test_exception(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "toolrental", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        entry = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in entry["exception"]
