"""Core module — types, exceptions, and logging.

This module provides the foundational components used throughout the package:
    - Data types (SearchConfig)
    - Exception hierarchy (MinigrepError and subclasses)
    - Logging utilities (get_logger, configure_logging)

Usage:
    from minigrep.core import SearchConfig, FileReadError, get_logger
"""

from minigrep.core.exceptions import (
    ConfigurationError,
    FileReadError,
    MinigrepError,
    ReadErrorKind,
)
from minigrep.core.logging import configure_logging, get_logger
from minigrep.core.types import SearchConfig

__all__ = [
    # Types
    "SearchConfig",
    # Exceptions
    "MinigrepError",
    "ConfigurationError",
    "FileReadError",
    "ReadErrorKind",
    # Logging
    "get_logger",
    "configure_logging",
]
