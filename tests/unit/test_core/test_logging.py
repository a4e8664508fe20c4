"""
Unit tests for structured logging helpers.

Covers:
- JSONFormatter output fields
- Log level resolution from QUADNAV_LOG_LEVEL
- setup_structured_logging console and file handlers
- get_logger naming
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

from quadnav.core.config import Settings
from quadnav.core.logging import (
    JSONFormatter,
    create_file_handler,
    get_log_level_from_env,
    get_logger,
    setup_structured_logging,
)


@pytest.fixture(autouse=True)
def restore_quadnav_logger():
    """setup_structured_logging() replaces handlers; put them back afterwards."""
    logger = logging.getLogger("quadnav")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def _record(message: str = "hello %s", args: tuple = ("world",), exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="quadnav.graph.traversal",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=args,
        exc_info=exc_info,
    )


# =============================================================================
# Test: JSONFormatter
# =============================================================================


class TestJSONFormatter:
    """Tests for JSON record formatting."""

    def test_standard_fields(self) -> None:
        data = json.loads(JSONFormatter(service_name="svc").format(_record()))

        assert data["level"] == "INFO"
        assert data["service"] == "svc"
        assert data["logger"] == "quadnav.graph.traversal"
        assert data["message"] == "hello world"
        assert "timestamp" in data
        assert "exception" not in data

    def test_exception_included(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in data["exception"]

    def test_non_ascii_kept(self) -> None:
        data = JSONFormatter().format(_record("café", ()))

        assert "café" in data


# =============================================================================
# Test: Log level
# =============================================================================


class TestLogLevelFromEnv:
    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QUADNAV_LOG_LEVEL", raising=False)

        assert get_log_level_from_env(default="WARNING") == logging.WARNING

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUADNAV_LOG_LEVEL", "debug")

        assert get_log_level_from_env() == logging.DEBUG

    def test_invalid_falls_back_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUADNAV_LOG_LEVEL", "chatty")

        assert get_log_level_from_env() == logging.INFO


# =============================================================================
# Test: setup_structured_logging
# =============================================================================


class TestSetupStructuredLogging:
    """Tests for handler wiring."""

    def test_console_only(self, settings: Settings) -> None:
        logger = setup_structured_logging(settings, log_level=logging.DEBUG)

        assert logger.name == "quadnav"
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_level_from_settings(self, settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QUADNAV_LOG_LEVEL", raising=False)

        logger = setup_structured_logging(settings)

        assert logger.level == logging.DEBUG

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "quadnav.log"
        settings = Settings(service_name="file-test", log_file_path=str(log_file))

        logger = setup_structured_logging(settings, log_level=logging.INFO)
        get_logger("graph.store").info("stored %d quads", 3)
        for handler in logger.handlers:
            handler.flush()

        data = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert len(logger.handlers) == 2
        assert data["service"] == "file-test"
        assert data["message"] == "stored 3 quads"

    def test_repeat_setup_replaces_handlers(self, settings: Settings) -> None:
        setup_structured_logging(settings)
        logger = setup_structured_logging(settings)

        assert len(logger.handlers) == 1


class TestCreateFileHandler:
    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        log_file = tmp_path / "nested" / "dir" / "out.log"

        handler = create_file_handler(str(log_file), max_bytes=1024, backup_count=1)
        handler.close()

        assert log_file.parent.is_dir()
        assert handler.maxBytes == 1024
        assert handler.backupCount == 1


# =============================================================================
# Test: get_logger
# =============================================================================


class TestGetLogger:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            (None, "quadnav"),
            ("quadnav", "quadnav"),
            ("graph", "quadnav.graph"),
            ("quadnav.graph.store", "quadnav.graph.store"),
        ],
    )
    def test_names_under_quadnav(self, name: str | None, expected: str) -> None:
        assert get_logger(name).name == expected
