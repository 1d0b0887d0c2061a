"""
Shell commands.

Each command is one Command subclass. The full set is listed in COMMANDS and
turned into a name/alias lookup table once per shell by build_command_table().
Handlers return a status string; an empty string means "print nothing".
Failures are raised as ShellError subclasses and formatted at the Command.run
boundary so a failed command never takes the shell down.
"""

import logging
import os
import posixpath
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type

from simos.sandbox import (
    ROOT,
    ErrorKind,
    IOFaultError,
    NotFoundError,
    ShellError,
    TypeMismatchError,
    UsageError,
)

from .editor import EditSession
from .explorer import UnsupportedPlatformError, open_in_explorer
from .session import ShellContext

logger = logging.getLogger(__name__)

SYSTEM = "System"
FILES = "File operations"
DIRECTORIES = "Directory operations"

EMPTY_FILE = "(empty file)"
EMPTY_DIRECTORY = "Directory is empty"


@dataclass
class CommandResult:
    """Status text of one command run, and the kind of error if it failed."""

    text: str = ""
    error: Optional[ErrorKind] = None


class Command(ABC):
    """A single shell command, looked up by name or alias."""

    name: str = ""
    aliases: Tuple[str, ...] = ()
    usage: str = ""
    summary: str = ""
    group: str = SYSTEM

    def run(self, ctx: ShellContext, args: List[str]) -> CommandResult:
        """
        Execute the command, converting every expected failure into "Error: ..." text.

        Args:
            ctx: Shell context shared by all commands
            args: Whitespace-split arguments following the command name

        Returns:
            CommandResult with the status text for the user
        """
        try:
            return CommandResult(self.execute(ctx, args))
        except ShellError as e:
            error = e
        except OSError as e:
            error = IOFaultError.from_os_error(e)

        logger.debug("%s failed (%s): %s", self.name, error.kind.value, error.message)
        return CommandResult(error.format(), error.kind)

    @abstractmethod
    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        pass

    def names(self) -> Tuple[str, ...]:
        return (self.name, *self.aliases)

    def _require_path(self, args: List[str], what: str = "file path") -> str:
        if not args:
            raise UsageError(f"Missing {what}. Usage: {self.usage}")
        return args[0]


# ---------- system ----------
class HelpCommand(Command):
    name = "help"
    usage = "help"
    summary = "Show this help message"

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        lines = ["", "Available commands:"]
        for group in (SYSTEM, FILES, DIRECTORIES):
            lines.append("")
            lines.append(f"{group}:")
            for command_cls in COMMANDS:
                if command_cls.group == group:
                    lines.append(f"  {command_cls.usage:<24} - {command_cls.summary}")
        return "\n".join(lines) + "\n"


class ExitCommand(Command):
    name = "exit"
    aliases = ("quit",)
    usage = "exit, quit"
    summary = "Exit SiMOS"

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        ctx.session.running = False
        return "SiMOS terminated."


class InfoCommand(Command):
    name = "info"
    usage = "info"
    summary = "Show system information"

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        return f"SiMOS Version {ctx.config.version}\nRoot directory: {ctx.sandbox.root_dir}"


class ClearCommand(Command):
    name = "clear"
    aliases = ("cls",)
    usage = "clear, cls"
    summary = "Clear the screen"

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        ctx.console.clear()
        return ""


# ---------- files ----------
class CreateCommand(Command):
    name = "create"
    aliases = ("touch",)
    usage = "create <path> [content]"
    summary = "Create a new file with optional content"
    group = FILES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        path = self._require_path(args)
        virtual_path, real_path = ctx.sandbox.resolve(path, ctx.session.current_directory)

        if ctx.sandbox.is_dir(real_path):
            raise TypeMismatchError(f"Not a file: {virtual_path}")

        ctx.sandbox.write_file(real_path, " ".join(args[1:]))
        return f"Created file: {virtual_path}"


class ShowCommand(Command):
    name = "show"
    aliases = ("cat",)
    usage = "show <path>"
    summary = "Display file contents"
    group = FILES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        path = self._require_path(args)
        virtual_path, real_path = ctx.sandbox.resolve(path, ctx.session.current_directory)

        if not ctx.sandbox.exists(real_path):
            raise NotFoundError(f"File not found: {virtual_path}")
        if ctx.sandbox.is_dir(real_path):
            raise TypeMismatchError(f"Not a file: {virtual_path}")

        return ctx.sandbox.read_file(real_path) or EMPTY_FILE


class EditCommand(Command):
    name = "edit"
    usage = "edit <path>"
    summary = "Edit file with simple editor (type EOF to save and exit)"
    group = FILES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        path = self._require_path(args)
        virtual_path, real_path = ctx.sandbox.resolve(path, ctx.session.current_directory)

        if ctx.sandbox.is_dir(real_path):
            raise TypeMismatchError(f"Not a file: {virtual_path}")

        ctx.sandbox.make_dir(os.path.dirname(real_path))
        editor, intro = EditSession.open(
            ctx.sandbox, virtual_path, real_path, sentinel=ctx.config.edit_sentinel
        )
        ctx.session.editor = editor
        return intro


class EraseCommand(Command):
    name = "erase"
    aliases = ("rm",)
    usage = "erase <path>"
    summary = "Remove file or directory"
    group = FILES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        path = self._require_path(args, what="path")
        virtual_path, real_path = ctx.sandbox.resolve(path, ctx.session.current_directory)

        if virtual_path == ROOT:
            raise UsageError("Cannot remove the root directory")
        if not ctx.sandbox.exists(real_path):
            raise NotFoundError(f"Path not found: {virtual_path}")

        if ctx.sandbox.remove(real_path):
            removed = f"Removed directory: {virtual_path}"
        else:
            removed = f"Removed file: {virtual_path}"

        # Keep the working directory pointing at something that exists
        cwd = ctx.session.current_directory
        if cwd == virtual_path or cwd.startswith(virtual_path + "/"):
            ctx.session.current_directory = posixpath.dirname(virtual_path)
        return removed


class TruncateCommand(Command):
    name = "trunct"
    usage = "trunct <path>"
    summary = "Truncate file (empty its contents)"
    group = FILES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        path = self._require_path(args)
        virtual_path, real_path = ctx.sandbox.resolve(path, ctx.session.current_directory)

        if not ctx.sandbox.exists(real_path):
            raise NotFoundError(f"File not found: {virtual_path}")
        if ctx.sandbox.is_dir(real_path):
            raise TypeMismatchError(f"Not a file: {virtual_path}")

        ctx.sandbox.truncate(real_path)
        return f"Truncated file: {virtual_path}"


# ---------- directories ----------
class ListCommand(Command):
    name = "ls"
    usage = "ls [path]"
    summary = "List directory contents"
    group = DIRECTORIES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        label = args[0] if args else ctx.session.current_directory
        _, real_path = ctx.sandbox.resolve(label, ctx.session.current_directory)

        if not ctx.sandbox.exists(real_path):
            raise NotFoundError(f"Directory not found: {label}")
        if not ctx.sandbox.is_dir(real_path):
            raise TypeMismatchError(f"Not a directory: {label}")

        entries = ctx.sandbox.list_dir(real_path)
        if not entries:
            return EMPTY_DIRECTORY

        lines = [f"Contents of {label}:"]
        for entry in entries:
            if entry.is_dir:
                lines.append(f"d {entry.name}/")
            else:
                lines.append(f"f {entry.name} ({entry.size} bytes)")
        return "\n".join(lines)


class ChangeDirectoryCommand(Command):
    name = "cd"
    usage = "cd [path]"
    summary = "Change directory"
    group = DIRECTORIES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        if not args:
            ctx.session.current_directory = ROOT
            return f"Changed directory to: {ROOT}"

        virtual_path, real_path = ctx.sandbox.resolve(args[0], ctx.session.current_directory)

        if not ctx.sandbox.exists(real_path):
            raise NotFoundError(f"Directory not found: {args[0]}")
        if not ctx.sandbox.is_dir(real_path):
            raise TypeMismatchError(f"Not a directory: {args[0]}")

        ctx.session.current_directory = virtual_path
        return f"Changed directory to: {virtual_path}"


class PrintDirectoryCommand(Command):
    name = "pwd"
    usage = "pwd"
    summary = "Print working directory"
    group = DIRECTORIES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        return ctx.session.current_directory


class MakeDirectoryCommand(Command):
    name = "mkdir"
    usage = "mkdir <path>"
    summary = "Create directory"
    group = DIRECTORIES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        path = self._require_path(args, what="directory path")
        virtual_path, real_path = ctx.sandbox.resolve(path, ctx.session.current_directory)

        if ctx.sandbox.exists(real_path) and not ctx.sandbox.is_dir(real_path):
            raise TypeMismatchError(f"Not a directory: {virtual_path}")

        ctx.sandbox.make_dir(real_path)
        return f"Created directory: {virtual_path}"


class ExplorerCommand(Command):
    name = "explorer"
    usage = "explorer"
    summary = "Open current directory in file explorer"
    group = DIRECTORIES

    def execute(self, ctx: ShellContext, args: List[str]) -> str:
        cwd = ctx.session.current_directory
        _, real_path = ctx.sandbox.resolve(cwd, cwd)

        try:
            open_in_explorer(real_path)
        except UnsupportedPlatformError as e:
            return str(e)
        return f"Opening {cwd} in file explorer..."


COMMANDS: Tuple[Type[Command], ...] = (
    HelpCommand,
    ExitCommand,
    InfoCommand,
    ClearCommand,
    CreateCommand,
    ShowCommand,
    EditCommand,
    EraseCommand,
    TruncateCommand,
    ListCommand,
    ChangeDirectoryCommand,
    PrintDirectoryCommand,
    MakeDirectoryCommand,
    ExplorerCommand,
)


def build_command_table() -> Dict[str, Command]:
    """Map every command name and alias to its handler."""
    table: Dict[str, Command] = {}
    for command_cls in COMMANDS:
        command = command_cls()
        for name in command.names():
            if name in table:
                raise ValueError(f"Duplicate command name: {name}")
            table[name] = command
    return table
