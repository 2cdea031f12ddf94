"""Logging setup for the repoclone package."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

from repoclone.config import LOG_LEVEL

ROOT_LOGGER_NAME = "repoclone"

# Attributes present on every LogRecord; anything else was passed through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class ExtraFieldsFormatter(logging.Formatter):
    """Format records as ``LEVEL [timestamp] name: message key=value ...``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%dT%H:%M:%S")
        line = f"{record.levelname} [{timestamp}] {record.name}: {record.getMessage()}"

        extras = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        if extras:
            line += " " + " ".join(f"{key}={value}" for key, value in sorted(extras.items()))

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        return line


def configure_logging(level: str | int = LOG_LEVEL) -> None:
    """Install a single stderr handler on the package logger.

    Calling this again replaces that handler with one writing to the current ``sys.stderr``.

    Parameters
    ----------
    level : str | int
        Minimum log level, as a name (``"DEBUG"``) or a ``logging`` constant (default: ``REPOCLONE_LOG_LEVEL``).

    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    for stale in [h for h in package_logger.handlers if h.get_name() == ROOT_LOGGER_NAME]:
        package_logger.removeHandler(stale)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(ROOT_LOGGER_NAME)
    handler.setFormatter(ExtraFieldsFormatter())
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``)."""
    return logging.getLogger(name)
