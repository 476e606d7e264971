"""
Shell history lookup for the default mode.

Best effort only: finds the most recent command in the usual history
files, skipping wdym's own invocations.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from . import TOOL_NAME
from .errors import NotFoundError

logger = logging.getLogger(__name__)

HISTORY_FILES = [".zsh_history", ".bash_history", ".history"]


def history_paths(home: Optional[Path] = None) -> List[Path]:
    """History files to try, in order of preference."""
    home = home or Path.home()
    return [home / name for name in HISTORY_FILES]


def parse_history_line(line: str) -> str:
    """
    Reduce one history line to its command.

    zsh extended history looks like ": 1700000000:0;git status".
    """
    line = line.strip()
    if line.startswith(":") and ";" in line:
        line = line.split(";", 1)[1]
    return line


def last_command_from_lines(lines: Iterable[str]) -> str:
    """Return the last non-empty command that is not a wdym invocation."""
    last = ""
    for raw in lines:
        if not raw.strip():
            continue
        line = parse_history_line(raw)
        if line and not line.startswith(TOOL_NAME):
            last = line
    return last


def last_command_from_file(path: Path) -> str:
    with open(path, encoding="utf-8", errors="replace") as f:
        return last_command_from_lines(f)


def get_last_command(paths: Optional[Iterable[Path]] = None) -> str:
    """
    Find the last command from the first history file that has one.

    Raises:
        NotFoundError: If no history file yields a command
    """
    for path in paths if paths is not None else history_paths():
        if not path.exists():
            continue
        try:
            command = last_command_from_file(path)
        except OSError as e:
            logger.debug(f"Skipping unreadable history file {path}: {e}")
            continue
        if command:
            logger.debug(f"Last command from {path}: {command}")
            return command

    raise NotFoundError("could not find shell history or last command")
