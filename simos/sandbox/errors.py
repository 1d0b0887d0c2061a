"""
Error kinds reported by shell commands.

Every failure a command can hit falls into one of four kinds. Handlers raise
the matching ShellError subclass; the command boundary turns it into an
"Error: <message>" status line so the session survives.
"""

from enum import Enum


class ErrorKind(Enum):
    USAGE = "usage"
    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"
    IO_FAULT = "io_fault"


class ShellError(Exception):
    """Base class for errors reported back to the user as status text."""

    kind: ErrorKind = ErrorKind.IO_FAULT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def format(self) -> str:
        return format_error(self.message)


class UsageError(ShellError):
    """A required argument is missing or the request makes no sense."""

    kind = ErrorKind.USAGE


class NotFoundError(ShellError):
    """The target path does not exist under the root."""

    kind = ErrorKind.NOT_FOUND


class TypeMismatchError(ShellError):
    """A file was given where a directory was expected, or the reverse."""

    kind = ErrorKind.TYPE_MISMATCH


class IOFaultError(ShellError):
    """The operating system refused the operation."""

    kind = ErrorKind.IO_FAULT

    @classmethod
    def from_os_error(cls, error: OSError) -> "IOFaultError":
        return cls(error.strerror or str(error))


def format_error(message: str) -> str:
    return f"Error: {message}"
