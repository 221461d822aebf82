"""Configuration module — settings and constants."""

from minigrep.config.constants import (
    CASE_INSENSITIVE_ENV_VAR,
    DEFAULT_ENCODING,
    EXIT_FAILURE,
    PROGRAM_NAME,
)
from minigrep.config.settings import (
    ReadSettings,
    SearchSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    # Constants
    "PROGRAM_NAME",
    "CASE_INSENSITIVE_ENV_VAR",
    "DEFAULT_ENCODING",
    "EXIT_FAILURE",
    # Settings
    "Settings",
    "SearchSettings",
    "ReadSettings",
    "get_settings",
    "reload_settings",
]
