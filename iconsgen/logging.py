"""Logging utilities for iconsgen commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "iconsgen"
_CONSOLE_FORMAT = f"[{_LOGGER_NAME}] %(levelname)s %(message)s"
# File records keep the emitting module name.
_FILE_FORMAT = f"%(asctime)s [{_LOGGER_NAME}] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the iconsgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route iconsgen records to stderr and, when given, to ``log_file``.

    Calling this again replaces the previously installed handlers, so a
    generation run never logs the same record twice.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(_handler(logging.StreamHandler(), level, _CONSOLE_FORMAT))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        logger.addHandler(_handler(sink, level, _FILE_FORMAT))
    return logger


__all__ = ["configure_logging", "get_logger"]
