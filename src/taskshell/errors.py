"""Exception types raised by shell operations."""

from __future__ import annotations

from collections.abc import Sequence


class ShellError(Exception):
    """Base class for all recoverable shell failures."""


class ShellIOError(ShellError):
    """A filesystem or process-spawn operation failed at the OS level."""

    def __init__(self, error: OSError) -> None:
        super().__init__(str(error))
        self.error = error


class ShellCommandError(ShellError):
    """A subprocess ran but did not exit successfully."""

    def __init__(self, message: str, *, argv: Sequence[str] = (), returncode: int = 0) -> None:
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
