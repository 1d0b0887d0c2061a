"""
Sandbox package for confining file operations to a real root directory.

This package maps the shell's virtual "/" onto a configured directory and
guarantees that no virtual path, however many ".." segments it carries,
resolves outside of it.
"""

from .errors import (
    ErrorKind,
    IOFaultError,
    NotFoundError,
    ShellError,
    TypeMismatchError,
    UsageError,
    format_error,
)
from .paths import ROOT, is_within_root, normalize_path, to_real_path
from .rootfs import RootedFS
from .sandbox import DirEntry, Sandbox

__all__ = [
    "Sandbox",
    "RootedFS",
    "DirEntry",
    "ROOT",
    "normalize_path",
    "to_real_path",
    "is_within_root",
    "ErrorKind",
    "ShellError",
    "UsageError",
    "NotFoundError",
    "TypeMismatchError",
    "IOFaultError",
    "format_error",
]
