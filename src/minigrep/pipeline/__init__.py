"""
Pipeline module — load a document and run a search over it.

This module provides the run orchestration:
    - load_document: Read a file fully into memory
    - run: Load, search, and emit matching lines

Usage:
    from minigrep.pipeline import run

    count = run(config)
"""

from minigrep.pipeline.load import load_document
from minigrep.pipeline.orchestrator import run

__all__ = [
    "load_document",
    "run",
]
