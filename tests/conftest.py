"""
Shared pytest fixtures for minigrep tests.

This module provides reusable test data and temporary resources used
across both unit and integration tests:

    - poem_text: The short multi-line text used by most search tests
    - poem_file: poem_text written to a temporary UTF-8 file
    - clean_settings: Settings singleton reset and CASE_INSENSITIVE unset
"""

from pathlib import Path

import pytest

import minigrep.config.settings as settings_module


POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


@pytest.fixture
def poem_text() -> str:
    return POEM


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """The poem on disk, UTF-8 encoded, with a trailing newline."""
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


@pytest.fixture
def rust_text() -> str:
    return "Rust:\nsafe, fast, productive.\nPick three."


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test with case-sensitive defaults and no cached settings."""
    monkeypatch.delenv("CASE_INSENSITIVE", raising=False)
    monkeypatch.delenv("MINIGREP_ENCODING", raising=False)
    settings_module._settings_instance = None
    yield
    settings_module._settings_instance = None
