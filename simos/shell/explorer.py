"""
Open a real directory in the platform's file manager.
"""

import subprocess
import sys
from typing import Dict, List

EXPLORER_COMMANDS: Dict[str, List[str]] = {
    "win32": ["explorer"],
    "darwin": ["open"],
    "linux": ["xdg-open"],
}


class UnsupportedPlatformError(RuntimeError):
    def __init__(self, platform: str):
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform


def explorer_command(real_path: str, platform: str | None = None) -> List[str]:
    """
    Build the command line that opens real_path in a file manager.

    Raises:
        UnsupportedPlatformError: If there is no known file manager for the platform
    """
    platform = platform or sys.platform
    if platform.startswith("linux"):
        platform = "linux"

    if platform not in EXPLORER_COMMANDS:
        raise UnsupportedPlatformError(platform)

    return [*EXPLORER_COMMANDS[platform], real_path]


def open_in_explorer(real_path: str, platform: str | None = None) -> None:
    """Launch the file manager without waiting for it."""
    subprocess.Popen(
        explorer_command(real_path, platform),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
