"""
Logging configuration for minigrep.

This module provides a consistent logging setup across all package modules.
It uses Rich for console output when stderr is an interactive terminal.
Logs always go to stderr so that stdout carries matching lines only.

Configuration:
    LOG_LEVEL environment variable controls the logging level.
    Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)

Usage:
    from minigrep.core.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Loaded %d characters", len(text))
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Package-level logger name
LOGGER_NAME = "minigrep"

# Format for non-Rich handlers (piped or redirected stderr)
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_logging_configured = False


def _get_log_level() -> int:
    """
    Get log level from environment variable.

    Returns:
        Logging level constant (e.g., logging.INFO)
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level: Optional[int] = None) -> None:
    """
    Configure the package-level logger.

    Safe to call more than once; only the first call has an effect.

    Args:
        level: Logging level. If None, reads from LOG_LEVEL env var.
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = level if level is not None else _get_log_level()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    if sys.stderr.isatty():
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    handler.setLevel(log_level)
    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Returns a child logger of the package-level logger, configuring
    logging with default settings on first use.

    Args:
        name: Module name, typically __name__ from the calling module.
              Names outside the package namespace are prefixed with it.

    Returns:
        Configured logger instance.
    """
    if not _logging_configured:
        configure_logging()

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
