"""
Document loading for minigrep.

Reads the target file fully into memory as a single string. Every
failure is translated into a FileReadError carrying a ReadErrorKind.
"""

from minigrep.config.constants import DEFAULT_ENCODING
from minigrep.core import FileReadError, ReadErrorKind, get_logger

logger = get_logger(__name__)


def load_document(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the whole file at ``file_path`` as text.

    Newlines are left untranslated so the search engine sees the exact
    line terminators. The file handle is closed on every exit path,
    including errors.

    Args:
        file_path: Path of the file to read.
        encoding: Text encoding used to decode the file.

    Returns:
        The complete file contents.

    Raises:
        FileReadError: If the file is missing, not readable, not valid
            text in ``encoding``, or the OS refuses the read.
    """
    try:
        with open(file_path, encoding=encoding, newline="") as fh:
            text = fh.read()
    except FileNotFoundError as e:
        raise FileReadError(file_path, ReadErrorKind.NOT_FOUND, details=e.strerror) from e
    except PermissionError as e:
        raise FileReadError(
            file_path, ReadErrorKind.PERMISSION_DENIED, details=e.strerror
        ) from e
    except UnicodeDecodeError as e:
        raise FileReadError(
            file_path,
            ReadErrorKind.INVALID_ENCODING,
            details=f"not valid {encoding}: {e.reason} at byte {e.start}",
        ) from e
    except OSError as e:
        raise FileReadError(file_path, ReadErrorKind.OTHER, details=e.strerror or str(e)) from e

    logger.debug("Loaded %s (%d characters)", file_path, len(text))
    return text
