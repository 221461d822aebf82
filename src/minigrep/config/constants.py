"""Application-wide constants."""

# Console script name, used in the version banner
PROGRAM_NAME = "minigrep"

# Any non-empty value of this variable enables case-insensitive matching
CASE_INSENSITIVE_ENV_VAR = "CASE_INSENSITIVE"

# Encoding used to decode the searched file
DEFAULT_ENCODING = "utf-8"

# Exit status for configuration and read failures
EXIT_FAILURE = 1
