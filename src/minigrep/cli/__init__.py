"""CLI module — the ``minigrep`` console script."""

from minigrep.cli.main import app

__all__ = [
    "app",
]
