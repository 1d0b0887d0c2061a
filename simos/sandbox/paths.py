"""
Virtual path resolution and confinement.

A virtual path is what the user sees: always absolute, rooted at "/". A real
path is where that virtual path lives on disk, under the configured root
directory. Confinement comes from the order of operations: user input is
normalized first (which collapses every ".." segment) and only the normalized
result is ever joined onto the root.
"""

import os

from .errors import UsageError

ROOT = "/"


def normalize_path(input_path: str | None, current_directory: str = ROOT) -> str:
    """
    Normalize a user-supplied path against the current virtual directory.

    ".." past the root is clamped to the root rather than rejected.

    Args:
        input_path: Absolute or relative virtual path; empty means "here"
        current_directory: Normalized virtual directory relative paths start from

    Returns:
        Normalized absolute virtual path

    Examples:
        normalize_path("../../x", "/a/b") -> "/x"
        normalize_path("foo/./bar/../baz", "/") -> "/foo/baz"
        normalize_path("/../..", "/tmp") -> "/"
    """
    if not input_path:
        return current_directory

    if input_path.startswith("/"):
        full_path = input_path
    else:
        full_path = f"{current_directory}/{input_path}"

    segments: list[str] = []
    for part in full_path.split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            if segments:
                segments.pop()
        else:
            segments.append(part)

    return ROOT + "/".join(segments)


def to_real_path(root_dir: str, virtual_path: str) -> str:
    """
    Map a normalized virtual path onto the real filesystem.

    Args:
        root_dir: Absolute real directory backing "/"
        virtual_path: Output of normalize_path; raw user input must not be passed

    Returns:
        Real path equal to root_dir or below it

    Raises:
        UsageError: If the joined path would land outside root_dir
    """
    tail = virtual_path[1:] if virtual_path.startswith("/") else virtual_path
    if not tail:
        return root_dir

    real_path = os.path.normpath(os.path.join(root_dir, *tail.split("/")))
    if not is_within_root(root_dir, real_path):
        raise UsageError(f"Path escapes root: {virtual_path}")
    return real_path


def is_within_root(root_dir: str, real_path: str) -> bool:
    """Return True if real_path is root_dir itself or one of its descendants."""
    root = os.path.abspath(root_dir)
    target = os.path.abspath(real_path)
    try:
        return os.path.commonpath([root, target]) == root
    except ValueError:
        # Different drives on Windows
        return False
