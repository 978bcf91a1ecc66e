"""Logging configuration for the treeshell CLI."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from treeshell.core.constants import LOGGER_NAMESPACE

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the treeshell namespace logger.

    Console output goes to stderr so it never mixes with command output on
    stdout. When log_file is given, a rotating file handler is added
    (max 5MB per file, 3 backup files).

    Calling this again replaces the previous handlers.

    Args:
        level: Level for the namespace logger and its handlers.
        log_file: Optional path of a log file. Parent dirs are created.

    Returns:
        The configured namespace logger.
    """
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates on reconfigure
    for handler in list(namespace_logger.handlers):
        namespace_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    namespace_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(
            LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        namespace_logger.addHandler(file_handler)

    # Don't propagate to root logger
    namespace_logger.propagate = False

    return namespace_logger
