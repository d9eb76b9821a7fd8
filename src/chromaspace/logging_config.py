"""
Logging configuration for chromaspace.

Configures the ``chromaspace`` package logger with a console handler and an
optional log file. Modules log through ``logging.getLogger(__name__)``, so
everything below the package namespace follows this setup.

Repeated ``setup_logging()`` calls replace the handlers installed by the
previous call instead of adding duplicates.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "chromaspace"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_installed_handlers: list[logging.Handler] = []


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
        log_file: Optional file to log to in addition to stderr
        fmt: Format string for all handlers

    Returns:
        The package logger
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    formatter = logging.Formatter(fmt)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        logger.addHandler(handler)

    return logger

