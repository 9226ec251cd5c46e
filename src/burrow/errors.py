"""
Exceptions raised by burrow.

Per-path filesystem failures are reported, not raised; these cover the
errors that abort a whole command.
"""

from typing import Any


class BurrowError(Exception):
    """Base exception for burrow errors."""

    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(message={self.message!r})>"


class UnsupportedShellError(BurrowError):
    """Raised when no init template exists for the requested shell."""

    def __init__(self, shell: str) -> None:
        super().__init__(f"Unsupported shell: {shell}")
        self.shell = shell


class InvalidCommandError(BurrowError):
    """Raised when a command alias cannot be used as a shell function name."""

    def __init__(self, cmd: str) -> None:
        super().__init__(f"Invalid command alias: {cmd!r}")
        self.cmd = cmd
