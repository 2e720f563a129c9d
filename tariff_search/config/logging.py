"""Logging setup for the ``tariff_search`` logger tree."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "tariff_search"

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s | %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# The driver logs every command and heartbeat at DEBUG
QUIET_LOGGERS = ("pymongo",)


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record.

    Records logged through ``log_exception`` carry the structured error
    payload, which is emitted under ``error`` instead of a raw traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        payload = getattr(record, "error_payload", None)
        if payload is not None:
            entry["error"] = payload
        elif record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Attach fresh handlers to the ``tariff_search`` logger.

    Args:
        level: Level name, case-insensitive. Unknown names mean INFO.
        log_file: Also write to this file; parent directories are created.
        json_format: Emit JSON lines instead of the pipe-separated text format.

    Returns:
        The ``tariff_search`` logger.
    """
    formatter: logging.Formatter
    if json_format:
        formatter = JSONExceptionFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
