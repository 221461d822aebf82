"""
Line-filtering search over an in-memory document.

Everything here is pure: no I/O, no environment access. The run
orchestrator hands in the document text and the resolved case mode.

Usage:
    from minigrep.search import search

    for line in search("duct", text):
        print(line)
"""

from typing import Iterator


def _lines(text: str) -> Iterator[str]:
    """Split on line feeds only, dropping one carriage return before each."""
    if not text:
        return
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece


def _matches(query: str, line: str, case_insensitive: bool) -> bool:
    if case_insensitive:
        return query.lower() in line.lower()
    return query in line


class LineMatches:
    """
    Lines of a document that contain a query, in source order.

    Matching is lazy and every iteration starts a fresh pass over the
    text, so the same object can be consumed more than once with the
    same result. Lines are yielded verbatim, never normalised.

    Example:
        >>> matches = LineMatches("rUsT", "Rust:\\nTrust me.", case_insensitive=True)
        >>> list(matches)
        ['Rust:', 'Trust me.']
    """

    def __init__(self, query: str, text: str, case_insensitive: bool = False) -> None:
        self._query = query
        self._text = text
        self._case_insensitive = case_insensitive

    @property
    def query(self) -> str:
        return self._query

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    def __iter__(self) -> Iterator[str]:
        for line in _lines(self._text):
            if _matches(self._query, line, self._case_insensitive):
                yield line

    def __repr__(self) -> str:
        return (
            f"LineMatches(query={self._query!r}, "
            f"case_insensitive={self._case_insensitive})"
        )


def search(query: str, text: str, case_insensitive: bool = False) -> LineMatches:
    """
    Find every line of ``text`` that contains ``query``.

    Lines end at a line feed, optionally preceded by a carriage return.
    Other control characters (form feed, a lone carriage return, Unicode
    line separators) stay inside the line. A trailing terminator does not
    produce an extra empty line. An empty query matches every line; empty
    text matches nothing.

    Args:
        query: Substring to look for.
        text: Full document text.
        case_insensitive: Lowercase both query and line before comparing.

    Returns:
        A restartable ``LineMatches`` over the matching lines.
    """
    return LineMatches(query, text, case_insensitive=case_insensitive)


def search_case_sensitive(query: str, text: str) -> list[str]:
    """Return matching lines using exact substring comparison."""
    return list(search(query, text))


def search_case_insensitive(query: str, text: str) -> list[str]:
    """Return matching lines, ignoring case."""
    return list(search(query, text, case_insensitive=True))
