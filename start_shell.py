#!/usr/bin/env python3
"""
Simple script to start the SiMOS shell.
Run with: python3 -m start_shell
"""

import sys

from simos.config import ShellConfig
from simos.log import configure_logging
from simos.sandbox import RootedFS
from simos.shell import Prompter


def main() -> None:
    """Start the interactive shell over the configured root directory."""
    config = ShellConfig()
    configure_logging(config.log_level)

    try:
        rooted_fs = RootedFS(root_dir=config.root_dir)
    except OSError as e:
        print(f"Error: {e}")
        print("Set SIMOS_ROOT_DIR to a directory the shell can create and write to.")
        sys.exit(1)

    prompter = Prompter(sandbox=rooted_fs, config=config)
    prompter.run_interactive_session()


if __name__ == "__main__":
    main()
