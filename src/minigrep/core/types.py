"""Core data types for minigrep.

This module defines the value objects shared by the pipeline:
    - SearchConfig: Immutable run configuration (query, file, case mode)

Design notes:
    - SearchConfig is a frozen dataclass; it is built once per run
    - The case-insensitivity flag is passed in explicitly, never read
      from the environment here
"""

from dataclasses import dataclass
from typing import Sequence

from minigrep.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for a single search run.

    Attributes:
        query: Substring to look for in each line
        file_path: Path of the file to search
        case_insensitive: Compare lowercased query and lines when True

    Example:
        >>> config = SearchConfig.from_args(["duct", "poem.txt"])
        >>> config.case_insensitive
        False
    """

    query: str
    file_path: str
    case_insensitive: bool = False

    def __post_init__(self) -> None:
        """Reject empty query or file path."""
        if not self.query:
            raise ConfigurationError("Didn't get a query string!")
        if not self.file_path:
            raise ConfigurationError("Didn't get a filename!")

    @classmethod
    def from_args(
        cls,
        args: Sequence[str],
        case_insensitive: bool = False,
    ) -> "SearchConfig":
        """
        Build a configuration from positional command-line arguments.

        Args:
            args: Positional arguments without the program name. The first
                  is the query, the second the file path; any further
                  arguments are ignored.
            case_insensitive: Resolved case-insensitivity flag.

        Raises:
            ConfigurationError: If the query or file path is missing.
        """
        if len(args) < 1:
            raise ConfigurationError("Didn't get a query string!")
        if len(args) < 2:
            raise ConfigurationError("Didn't get a filename!")

        return cls(
            query=args[0],
            file_path=args[1],
            case_insensitive=case_insensitive,
        )
