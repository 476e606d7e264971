"""Runs generated shell commands."""

import logging
import subprocess

from .errors import ExecutionError

logger = logging.getLogger(__name__)


def execute_command(command: str) -> str:
    """
    Run a command through /bin/sh and return stdout+stderr combined.

    Raises:
        ExecutionError: on non-zero exit or spawn failure. The captured
            output is kept on the exception so it can still be shown.
    """
    logger.debug(f"Executing: {command}")
    try:
        proc = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise ExecutionError(f"failed to start command: {e}") from e

    if proc.returncode != 0:
        raise ExecutionError(f"exit status {proc.returncode}", output=proc.stdout)
    return proc.stdout
