"""
Line-by-line text editor.

While an EditSession is active every input line is file content. The only
way out is a line whose trimmed text is exactly the sentinel, which writes
the accumulated lines back to the file in one go.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from simos.sandbox import IOFaultError, format_error

if TYPE_CHECKING:
    from simos.sandbox import Sandbox

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 58


@dataclass
class EditOutcome:
    """What a finished edit did to the file."""

    virtual_path: str
    original: str
    content: str
    saved: bool
    message: str


@dataclass
class EditSession:
    virtual_path: str
    real_path: str
    sandbox: "Sandbox"
    sentinel: str = "EOF"
    original: str = ""
    lines: List[str] = field(default_factory=list)

    @classmethod
    def open(
        cls, sandbox: "Sandbox", virtual_path: str, real_path: str, sentinel: str = "EOF"
    ) -> tuple["EditSession", str]:
        """
        Start editing a file, seeding the buffer with its current lines.

        Args:
            sandbox: Sandbox the file lives in
            virtual_path: Normalized virtual path of the file
            real_path: Real path returned by sandbox.resolve()
            sentinel: Line that saves and leaves the editor

        Returns:
            The new EditSession and the intro text to show the user
        """
        intro: List[str] = []
        original = ""

        if sandbox.exists(real_path):
            try:
                original = sandbox.read_file(real_path)
                intro.append("Current content:")
                intro.append(original)
            except OSError as e:
                intro.append(f"Could not read file: {e.strerror or e}")
                intro.append("Starting with empty file.")
        else:
            intro.append("New file. Enter content below:")

        intro.append("")
        intro.append(
            f'Enter content line by line. Type "{sentinel}" on a new line to save and exit:'
        )
        intro.append(SEPARATOR)

        session = cls(
            virtual_path=virtual_path,
            real_path=real_path,
            sandbox=sandbox,
            sentinel=sentinel,
            original=original,
            lines=original.split("\n") if original else [],
        )
        logger.debug("Editing %s", virtual_path)
        return session, "\n".join(intro)

    def is_sentinel(self, line: str) -> bool:
        return line.strip() == self.sentinel

    def append(self, line: str) -> None:
        self.lines.append(line)

    def save(self) -> EditOutcome:
        """Write the buffer over the file and describe the result."""
        content = "\n".join(self.lines)

        try:
            self.sandbox.write_file(self.real_path, content)
        except OSError as e:
            error = IOFaultError.from_os_error(e)
            logger.warning("Failed to save %s: %s", self.virtual_path, error.message)
            message = format_error(f"Failed to save file: {error.message}") + f"\n{SEPARATOR}"
            return EditOutcome(self.virtual_path, self.original, content, False, message)

        logger.info("Saved %s (%d lines)", self.virtual_path, len(self.lines))
        message = f"File saved: {self.virtual_path}\n{SEPARATOR}"
        return EditOutcome(self.virtual_path, self.original, content, True, message)
