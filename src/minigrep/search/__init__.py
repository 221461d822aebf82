"""Search module — substring matching over document lines.

This module provides the pure search interface:
    - search: Lazy, restartable filter returning LineMatches
    - search_case_sensitive / search_case_insensitive: Eager helpers

Usage:
    from minigrep.search import search

    lines = list(search("duct", text))
"""

from minigrep.search.engine import (
    LineMatches,
    search,
    search_case_insensitive,
    search_case_sensitive,
)

__all__ = [
    "LineMatches",
    "search",
    "search_case_sensitive",
    "search_case_insensitive",
]
