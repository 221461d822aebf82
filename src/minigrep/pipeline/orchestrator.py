"""
Run orchestrator for a single search.

This module coordinates one run end to end:
    Load → Search → Emit

Usage:
    from minigrep.core import SearchConfig
    from minigrep.pipeline import run

    run(SearchConfig("duct", "poem.txt"))
"""

import sys
from typing import Optional, TextIO

from minigrep.config.constants import DEFAULT_ENCODING
from minigrep.core import SearchConfig, get_logger
from minigrep.pipeline.load import load_document
from minigrep.search import search

logger = get_logger(__name__)


def run(
    config: SearchConfig,
    out: Optional[TextIO] = None,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """
    Search the configured file and write each matching line to ``out``.

    Lines are written verbatim, one per output line, in source order.
    Nothing is written if the file cannot be read.

    Args:
        config: Validated run configuration.
        out: Destination stream. Defaults to ``sys.stdout``.
        encoding: Text encoding used to read the file.

    Returns:
        Number of lines written. Zero matches is still a successful run.

    Raises:
        FileReadError: If the file cannot be loaded.
    """
    stream = out if out is not None else sys.stdout

    logger.debug(
        "Searching %s for %r (case_insensitive=%s)",
        config.file_path,
        config.query,
        config.case_insensitive,
    )

    contents = load_document(config.file_path, encoding=encoding)
    results = search(config.query, contents, case_insensitive=config.case_insensitive)

    written = 0
    for line in results:
        stream.write(line + "\n")
        written += 1

    logger.debug("Wrote %d matching line(s)", written)
    return written
