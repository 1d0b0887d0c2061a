"""
Line dispatcher: the shell's two-state machine.

In the normal state an input line is a command. In the editing state, which
only the edit command can enter, every line is file content until the
sentinel line saves the file and switches back.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from simos.sandbox import ErrorKind

from .commands import Command, build_command_table
from .editor import EditOutcome
from .session import ShellContext

logger = logging.getLogger(__name__)

EDIT_PROMPT = "edit> "


@dataclass
class LineResult:
    """Text to print for one input line, plus the finished edit if the line ended one."""

    output: str = ""
    edit: Optional[EditOutcome] = None
    error: Optional[ErrorKind] = None


class Dispatcher:
    """Routes each input line to command dispatch or to the active editor."""

    def __init__(self, ctx: ShellContext):
        self.ctx = ctx
        self.commands: Dict[str, Command] = build_command_table()

    @property
    def running(self) -> bool:
        return self.ctx.session.running

    @property
    def prompt(self) -> str:
        if self.ctx.session.editing:
            return EDIT_PROMPT
        return f"{self.ctx.config.prompt_name}:{self.ctx.session.current_directory}> "

    def handle_line(self, line: str) -> LineResult:
        """
        Process one line of input in the current state.

        Args:
            line: Raw input line without its trailing newline

        Returns:
            LineResult with the text to show (possibly empty)
        """
        if self.ctx.session.editing:
            return self._handle_edit_line(line)
        return self._handle_command_line(line)

    def _handle_command_line(self, line: str) -> LineResult:
        stripped = line.strip()
        if not stripped:
            return LineResult()

        name, *args = stripped.split()
        name = name.lower()

        command = self.commands.get(name)
        if command is None:
            return LineResult(f"Unknown command: {name}", error=ErrorKind.USAGE)

        try:
            result = command.run(self.ctx, args)
        except Exception as e:
            logger.exception("Command %r failed", name)
            # A half-started edit must not leave the shell stuck in edit mode
            self.ctx.session.editor = None
            return LineResult(f"Error executing command: {e}", error=ErrorKind.IO_FAULT)

        if self.ctx.session.editing:
            logger.debug("Entered edit mode for %s", self.ctx.session.editor.virtual_path)
        return LineResult(result.text, error=result.error)

    def _handle_edit_line(self, line: str) -> LineResult:
        editor = self.ctx.session.editor

        if not editor.is_sentinel(line):
            editor.append(line)
            return LineResult()

        try:
            outcome = editor.save()
        finally:
            self.ctx.session.editor = None
            logger.debug("Left edit mode for %s", editor.virtual_path)

        error = None if outcome.saved else ErrorKind.IO_FAULT
        return LineResult(outcome.message, edit=outcome, error=error)
