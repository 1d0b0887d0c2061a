from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from rich.console import Console

from simos.config import ShellConfig
from simos.sandbox import ROOT

if TYPE_CHECKING:
    from simos.sandbox import Sandbox

    from .editor import EditSession


@dataclass
class Session:
    """State of one running shell: where the user is and whether a file is being edited."""

    current_directory: str = ROOT
    editor: Optional["EditSession"] = None
    running: bool = True

    @property
    def editing(self) -> bool:
        return self.editor is not None


@dataclass
class ShellContext:
    """Everything a command handler may touch, passed explicitly to each one."""

    sandbox: "Sandbox"
    config: ShellConfig = field(default_factory=ShellConfig)
    session: Session = field(default_factory=Session)
    console: Console = field(default_factory=Console)
