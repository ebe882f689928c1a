"""Process-wide JSON logger writing to standard output."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_LOGGER_NAME = "taskservice"

# Numeric levels as used in configuration: 0 panic .. 6 trace.
_LEVELS = {
    0: logging.CRITICAL,
    1: logging.CRITICAL,
    2: logging.ERROR,
    3: logging.WARNING,
    4: logging.INFO,
    5: logging.DEBUG,
    6: logging.DEBUG,
}

_main_logger: logging.Logger | None = None


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": "warning" if record.levelno == logging.WARNING else record.levelname.lower(),
            "msg": record.getMessage(),
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
        }
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, sort_keys=True)


def _to_logging_level(level: int) -> int:
    if level <= 0:
        return _LEVELS[0]
    return _LEVELS.get(level, logging.DEBUG)


def init_logger(level: int) -> logging.Logger:
    """Create the main logger at the given configuration level."""
    global _main_logger
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(_to_logging_level(level))
    logger.propagate = False
    _main_logger = logger
    return logger


def log() -> logging.Logger:
    """Return the main logger; it must have been initialised."""
    if _main_logger is None:
        raise RuntimeError("error on Log - need setup logger before using")
    return _main_logger