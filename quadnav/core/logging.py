"""Structured logging helpers for quadnav.

The library itself only logs through module loggers (``logging.getLogger``).
Applications that want JSON output call setup_structured_logging() once:

- JSONFormatter with timestamp, level, service, module, message
- Optional RotatingFileHandler for a JSON log file
- Log level configurable via QUADNAV_LOG_LEVEL env var
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from quadnav.core.config import Settings, get_settings


class JSONFormatter(logging.Formatter):
    """JSON log formatter with standard fields."""

    def __init__(self, service_name: str = "quadnav", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "module": record.module,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def get_log_level_from_env(service_prefix: str = "QUADNAV", default: str = "INFO") -> int:
    """Get log level from the QUADNAV_LOG_LEVEL env var."""
    env_var = f"{service_prefix}_LOG_LEVEL"
    level_str = os.environ.get(env_var, default).upper()
    level = getattr(logging, level_str, None)
    return level if isinstance(level, int) else logging.INFO


def create_file_handler(
    log_file_path: str,
    service_name: str = "quadnav",
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
) -> RotatingFileHandler:
    """Create a rotating file handler for JSON logs."""
    log_dir = Path(log_file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=log_file_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(JSONFormatter(service_name=service_name))
    return handler


def setup_structured_logging(
    settings: Settings | None = None,
    log_level: int | None = None,
) -> logging.Logger:
    """Attach JSON handlers to the ``quadnav`` logger hierarchy."""
    settings = settings or get_settings()
    if log_level is None:
        log_level = get_log_level_from_env(default=settings.log_level)

    logger = logging.getLogger("quadnav")
    logger.setLevel(log_level)
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JSONFormatter(service_name=settings.service_name))
    logger.addHandler(console_handler)

    # File handler
    if settings.log_file_path:
        try:
            file_handler = create_file_handler(
                settings.log_file_path, settings.service_name
            )
            file_handler.setLevel(log_level)
            logger.addHandler(file_handler)
        except PermissionError:
            logger.warning(
                "Cannot write to %s, file logging disabled", settings.log_file_path
            )

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance under the quadnav hierarchy."""
    if not name:
        return logging.getLogger("quadnav")
    if name == "quadnav" or name.startswith("quadnav."):
        return logging.getLogger(name)
    return logging.getLogger(f"quadnav.{name}")
