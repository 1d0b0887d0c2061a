"""
Diff display utility for showing what an edit changed, with rich formatting.
"""

import difflib
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .editor import EditOutcome


def display_edit(outcome: EditOutcome, console: Console | None = None) -> None:
    """
    Display a formatted diff between a file's content before and after an edit.

    Args:
        outcome: The EditOutcome returned when the editor saved
        console: Optional Rich console instance (creates one if not provided)
    """
    if console is None:
        console = Console()

    if not outcome.saved:
        return

    diff_lines = _generate_diff(outcome)
    if not diff_lines:
        console.print("[dim]  (no changes)[/dim]")
        return

    if outcome.original:
        header = Text(f"~ {outcome.virtual_path}", style="bold yellow")
        border_style = "yellow"
    else:
        header = Text(f"+ {outcome.virtual_path}", style="bold green")
        border_style = "green"

    console.print(Panel(header, border_style=border_style, expand=False))
    _print_colored_diff(diff_lines, console)
    console.print()


def _generate_diff(outcome: EditOutcome) -> List[str]:
    """
    Generate unified diff lines for an edit.

    Args:
        outcome: The EditOutcome to compare

    Returns:
        List of diff lines, empty when the content did not change
    """
    original_lines = outcome.original.splitlines()
    new_lines = outcome.content.splitlines()

    diff = difflib.unified_diff(
        original_lines,
        new_lines,
        fromfile=f"a{outcome.virtual_path}",
        tofile=f"b{outcome.virtual_path}",
        lineterm="",
    )
    return list(diff)


def _print_colored_diff(diff_lines: List[str], console: Console) -> None:
    """
    Print diff lines with appropriate coloring.

    Args:
        diff_lines: List of diff lines
        console: Rich console instance
    """
    for line in diff_lines:
        if line.startswith("+++") or line.startswith("---"):
            style = "bold"
        elif line.startswith("@@"):
            style = "cyan"
        elif line.startswith("+"):
            style = "green"
        elif line.startswith("-"):
            style = "red"
        else:
            style = "dim"
        # Text objects so file content is never parsed as console markup
        console.print(Text(line, style=style))
