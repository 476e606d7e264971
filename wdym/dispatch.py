"""
Mode selection for wdym.

Modes are tried in the order of MODES; the first whose predicate matches
the Settings handles the run.
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, List, NamedTuple

from . import handlers
from .config import Settings

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Handling modes, one per run."""
    SHELL = "shell"
    WRITE = "write"
    CODE = "code"
    FILE_QUERY = "file_query"
    QUERY = "query"
    LAST_COMMAND = "last_command"


class ModeRule(NamedTuple):
    mode: Mode
    matches: Callable[[Settings], bool]
    handler: Callable[..., Awaitable[None]]


MODES: List[ModeRule] = [
    ModeRule(Mode.SHELL, lambda s: s.shell, handlers.handle_shell),
    ModeRule(Mode.WRITE, lambda s: s.write, handlers.handle_write),
    ModeRule(Mode.CODE, lambda s: s.code, handlers.handle_code),
    ModeRule(Mode.FILE_QUERY, lambda s: bool(s.file_path), handlers.handle_file_query),
    ModeRule(Mode.QUERY, lambda s: bool(s.query), handlers.handle_query),
    ModeRule(Mode.LAST_COMMAND, lambda s: True, handlers.handle_last_command),
]


def select_rule(settings: Settings) -> ModeRule:
    for rule in MODES:
        if rule.matches(settings):
            return rule
    # unreachable: LAST_COMMAND always matches
    raise AssertionError("no mode matched")


def select_mode(settings: Settings) -> Mode:
    return select_rule(settings).mode


async def dispatch(ai, settings: Settings) -> Mode:
    """Run the handler for the selected mode and return that mode."""
    rule = select_rule(settings)
    logger.debug(f"Selected mode: {rule.mode.value}")
    await rule.handler(ai, settings)
    return rule.mode
