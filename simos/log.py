"""
Logging setup for the shell.

Log records go to stderr through rich so they stay visually apart from
command output on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """
    Install a RichHandler on the "simos" logger.

    Args:
        level: Logging level name, e.g. "DEBUG" or "WARNING"
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("simos")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
