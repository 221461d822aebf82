"""
Custom exception hierarchy for minigrep.

All exceptions inherit from MinigrepError, allowing callers to catch
all project-specific errors with a single except clause when desired.

Exception hierarchy:
    MinigrepError (base)
    ├── ConfigurationError — Missing arguments or invalid settings
    └── FileReadError — The document could not be opened or decoded
"""

from enum import Enum
from typing import Optional


class MinigrepError(Exception):
    """
    Base exception for all minigrep errors.

    Args:
        message: Human-readable error description.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message} — {self.details}"
        return self.message


class ConfigurationError(MinigrepError):
    """
    Raised when the run configuration is invalid or incomplete.

    Examples:
        - No query string on the command line
        - No filename on the command line
        - An empty query or file path
    """

    pass


class ReadErrorKind(Enum):
    """Why a document could not be loaded."""

    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    INVALID_ENCODING = "invalid-encoding"
    OTHER = "other"


class FileReadError(MinigrepError):
    """
    Raised when the target file cannot be read into memory.

    The ``kind`` attribute classifies the failure so callers can react
    without parsing the message.
    """

    def __init__(
        self,
        file_path: str,
        kind: ReadErrorKind,
        details: Optional[str] = None,
    ) -> None:
        self.file_path = file_path
        self.kind = kind
        message = f"Cannot read '{file_path}' ({kind.value})"
        super().__init__(message, details)
