"""
Error kinds for wdym.

Every failure that reaches the user is one of these; main() prints the
message on stderr and exits non-zero.
"""


class WdymError(Exception):
    """Base class for all wdym errors."""


class ConfigurationError(WdymError):
    """Required configuration (the API key) is missing."""


class UsageError(WdymError):
    """A mode was selected without the arguments it needs."""


class ClientError(WdymError):
    """The remote completion service failed or returned nothing usable."""


class FileSystemError(WdymError):
    """Reading, writing or creating directories failed."""


class NotFoundError(WdymError):
    """No shell history could be found."""


class ExecutionError(WdymError):
    """A shell command exited non-zero or could not be spawned."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output
