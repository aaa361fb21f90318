"""Opt-in logging for happypoisson.

The library logs under the ``happypoisson`` logger and is silent until one of
these helpers is called:

    import happypoisson

    happypoisson.enable_console_logging(level="DEBUG")
    happypoisson.enable_file_logging("logs/poisson.log")
    happypoisson.enable_json_logging()
    happypoisson.configure_from_env()

Environment variables read by ``configure_from_env``:
    HP_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    HP_LOG_FILE: Path of a rotating log file
    HP_LOG_JSON: "1" for JSON lines
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "happypoisson"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _attach(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Log to stderr.

    Returns:
        The created StreamHandler.
    """
    handler = logging.StreamHandler()
    _attach(handler, level, logging.Formatter(format, date_format))
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    json_lines: bool = False,
) -> RotatingFileHandler:
    """Log to a size-rotated file, creating parent directories as needed.

    Args:
        path: Log file path.
        level: Log level name or int.
        max_bytes: Size at which the file is rotated.
        backup_count: Rotated files to keep.
        json_lines: Write JsonFormatter output instead of plain text.

    Returns:
        The created RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    formatter = JsonFormatter() if json_lines else logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT)
    _attach(handler, level, formatter)
    return handler


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log JSON lines to stderr."""
    handler = logging.StreamHandler()
    _attach(handler, level, JsonFormatter())
    return handler


def configure_from_env() -> None:
    """Configure logging from HP_LOGGING, HP_LOG_FILE and HP_LOG_JSON.

    Does nothing when neither HP_LOGGING nor HP_LOG_FILE is set.
    """
    level = os.environ.get("HP_LOGGING", "").upper()
    log_file = os.environ.get("HP_LOG_FILE", "")
    use_json = os.environ.get("HP_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"
    if log_file:
        enable_file_logging(log_file, level=level, json_lines=use_json)
    elif use_json:
        enable_json_logging(level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    _get_logger().setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove every handler and silence the library logger."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
