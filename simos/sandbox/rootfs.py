#!/usr/bin/env python3
"""
Confine file operations to a single real directory acting as "/".
"""

import logging
import os
import shutil
from typing import List, Tuple

from .paths import normalize_path, to_real_path
from .sandbox import DirEntry, Sandbox

logger = logging.getLogger(__name__)


class RootedFS(Sandbox):
    """Maps virtual paths onto a real root directory and performs whole-file I/O there."""

    def __init__(self, root_dir: str):
        """
        Initialize the rooted filesystem.

        Args:
            root_dir: Real directory backing the virtual "/", created if missing

        Raises:
            NotADirectoryError: If root_dir exists but is not a directory
        """
        self.root_dir = os.path.abspath(root_dir)

        if not os.path.exists(self.root_dir):
            os.makedirs(self.root_dir)
            logger.info("Created root directory: %s", self.root_dir)
        elif not os.path.isdir(self.root_dir):
            raise NotADirectoryError(f"Root path is not a directory: {self.root_dir}")

    def resolve(self, path: str | None, current_directory: str) -> Tuple[str, str]:
        virtual_path = normalize_path(path, current_directory)
        real_path = to_real_path(self.root_dir, virtual_path)
        logger.debug("Resolved %r from %s to %s", path, current_directory, real_path)
        return virtual_path, real_path

    def exists(self, real_path: str) -> bool:
        return os.path.exists(real_path)

    def is_dir(self, real_path: str) -> bool:
        return os.path.isdir(real_path)

    def list_dir(self, real_path: str) -> List[DirEntry]:
        directories: List[DirEntry] = []
        files: List[DirEntry] = []

        for name in sorted(os.listdir(real_path)):
            entry_path = os.path.join(real_path, name)
            if os.path.isdir(entry_path):
                directories.append(DirEntry(name, True, 0))
            else:
                files.append(DirEntry(name, False, os.path.getsize(entry_path)))

        return directories + files

    def read_file(self, real_path: str) -> str:
        with open(real_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def write_file(self, real_path: str, content: str) -> None:
        parent_dir = os.path.dirname(real_path)
        os.makedirs(parent_dir, exist_ok=True)

        # newline="" keeps "\n" as written on every platform
        with open(real_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def make_dir(self, real_path: str) -> None:
        os.makedirs(real_path, exist_ok=True)

    def remove(self, real_path: str) -> bool:
        if os.path.isdir(real_path):
            shutil.rmtree(real_path)
            return True

        os.remove(real_path)
        return False

    def truncate(self, real_path: str) -> None:
        os.truncate(real_path, 0)
