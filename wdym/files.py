"""File helpers used by the write and file-query modes."""

import logging
from pathlib import Path

from .errors import FileSystemError

logger = logging.getLogger(__name__)


def read_file(path: str) -> str:
    """Read the content of a text file."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileSystemError(f"failed to read file {path}: {e}") from e


def write_file(path: str, content: str) -> None:
    """Write content to a file, creating parent directories as needed."""
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(f"failed to create directory {target.parent}: {e}") from e

    try:
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"failed to write file {path}: {e}") from e
    logger.debug(f"Wrote {len(content)} chars to {path}")


def file_exists(path: str) -> bool:
    return Path(path).exists()
