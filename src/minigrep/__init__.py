"""minigrep — print the lines of a file that contain a query string.

This package provides a small line-oriented search tool: a pure search
engine, a run orchestrator that loads a file and emits matches, and a
Typer command-line interface.

Usage:
    from minigrep import __version__
    from minigrep.search import search
    from minigrep.pipeline import run
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("minigrep")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Re-export lightweight core types for convenience.
from minigrep.core import (
    ConfigurationError,
    FileReadError,
    MinigrepError,
    ReadErrorKind,
    SearchConfig,
)

__all__ = [
    "__version__",
    # Core types
    "SearchConfig",
    # Exceptions
    "MinigrepError",
    "ConfigurationError",
    "FileReadError",
    "ReadErrorKind",
]
