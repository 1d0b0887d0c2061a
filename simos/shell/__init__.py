"""
Shell package for the interactive command line interface.

This package provides the session state, the command set, the line
dispatcher with its edit mode, and the prompt loop that drives them.
"""

from .commands import COMMANDS, Command, build_command_table
from .dispatcher import Dispatcher, LineResult
from .editor import EditOutcome, EditSession
from .prompter import Prompter
from .session import Session, ShellContext

__all__ = [
    "Prompter",
    "Dispatcher",
    "LineResult",
    "Session",
    "ShellContext",
    "Command",
    "COMMANDS",
    "build_command_table",
    "EditSession",
    "EditOutcome",
]
