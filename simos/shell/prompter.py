import logging
from typing import TYPE_CHECKING, Optional

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.text import Text

from simos.config import ShellConfig
from simos.sandbox import ErrorKind

from .diff_display import display_edit
from .dispatcher import Dispatcher, LineResult
from .session import ShellContext

if TYPE_CHECKING:
    from simos.sandbox import Sandbox

logger = logging.getLogger(__name__)

LOGO = r"""
 .----..-..-.   .-. .----.  .----.
{ {__  | ||  `.'  |/  {}  \{ {__
.-._} }| || |\ /| |\      /.-._} }
`----' `-'`-' ` `-' `----' `----'
"""


class Prompter:
    """Handles interactive prompting over a rooted sandbox."""

    def __init__(
        self,
        sandbox: "Sandbox",
        config: Optional[ShellConfig] = None,
        console: Optional[Console] = None,
        session: Optional[PromptSession] = None,
    ):
        """
        Initialize the Prompter.

        Args:
            sandbox: The sandbox all file commands run against
            config: Shell settings (read from the environment if not given)
            console: Rich console used for all output
            session: prompt_toolkit session to read lines from
        """
        self.sandbox = sandbox
        self.console = console or Console()
        self.session: PromptSession = session or PromptSession()
        self.context = ShellContext(
            sandbox=sandbox,
            config=config or ShellConfig(),
            console=self.console,
        )
        self.dispatcher = Dispatcher(self.context)

    def run_interactive_session(self) -> None:
        """Run the read-dispatch-print loop until exit, quit or end of input."""
        self._show_welcome_banner()

        while self.dispatcher.running:
            try:
                line = self.session.prompt(self.dispatcher.prompt)
            except KeyboardInterrupt:
                if self.context.session.editing:
                    self.console.print(
                        f'Type "{self.context.config.edit_sentinel}" on a line by itself to save.'
                    )
                else:
                    self.console.print("Use 'exit' to quit.")
                continue
            except EOFError:
                break

            try:
                result = self.dispatcher.handle_line(line)
            except Exception as e:
                logger.exception("Failed to handle input line")
                self._print_output(LineResult(f"Error: {e}", error=ErrorKind.IO_FAULT))
                continue

            self._print_output(result)
            if result.edit is not None:
                display_edit(result.edit, self.console)

    def _print_output(self, result: LineResult) -> None:
        if not result.output:
            return
        if result.error is not None:
            self.console.print(Text(result.output, style="red"), soft_wrap=True)
        else:
            # Plain print keeps file content as is: no wrapping, tabs untouched
            print(result.output, file=self.console.file)

    def _show_welcome_banner(self) -> None:
        """Display the logo and where the shell's root lives."""
        config = self.context.config
        self.console.print(Text(LOGO, style="bold cyan"))
        self.console.print(f"SiMOS Version {config.version}", markup=False)
        self.console.print(f"Root directory: {self.sandbox.root_dir}", markup=False)
        self.console.print('Type "help" for available commands, "exit" to quit.', markup=False)
