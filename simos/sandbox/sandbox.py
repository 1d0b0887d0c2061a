from abc import ABC, abstractmethod
from typing import List, NamedTuple, Tuple


class DirEntry(NamedTuple):
    name: str
    is_dir: bool
    size: int


class Sandbox(ABC):
    """Abstract base class for environments that confine file operations to a root."""

    root_dir: str

    @abstractmethod
    def resolve(self, path: str | None, current_directory: str) -> Tuple[str, str]:
        """
        Resolve a user path to its virtual and real forms.

        Args:
            path: Absolute or relative virtual path, empty for the current directory
            current_directory: Normalized virtual working directory

        Returns:
            (virtual_path, real_path) with real_path confined under the root
        """
        pass

    @abstractmethod
    def exists(self, real_path: str) -> bool:
        pass

    @abstractmethod
    def is_dir(self, real_path: str) -> bool:
        pass

    @abstractmethod
    def list_dir(self, real_path: str) -> List[DirEntry]:
        """
        List a directory with subdirectories first, each group sorted by name.

        Args:
            real_path: Real directory path returned by resolve()

        Returns:
            List of DirEntry objects
        """
        pass

    @abstractmethod
    def read_file(self, real_path: str) -> str:
        pass

    @abstractmethod
    def write_file(self, real_path: str, content: str) -> None:
        """Replace the whole content of a file, creating parent directories."""
        pass

    @abstractmethod
    def make_dir(self, real_path: str) -> None:
        pass

    @abstractmethod
    def remove(self, real_path: str) -> bool:
        """
        Remove a file or a whole directory tree.

        Returns:
            True if a directory was removed, False for a single file
        """
        pass

    @abstractmethod
    def truncate(self, real_path: str) -> None:
        pass
