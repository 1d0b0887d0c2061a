from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from . import __version__

load_dotenv()

DEFAULT_ROOT_DIR = "simos-files"
DEFAULT_PROMPT_NAME = "simos"


@dataclass
class ShellConfig:
    """
    Settings for a shell session.
    Env:
      SIMOS_ROOT_DIR     (optional, default './simos-files')
      SIMOS_PROMPT_NAME  (optional, default 'simos')
      SIMOS_LOG_LEVEL    (optional, default 'WARNING')
    """

    root_dir: str = field(
        default_factory=lambda: os.environ.get("SIMOS_ROOT_DIR", DEFAULT_ROOT_DIR)
    )
    prompt_name: str = field(
        default_factory=lambda: os.environ.get("SIMOS_PROMPT_NAME", DEFAULT_PROMPT_NAME)
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("SIMOS_LOG_LEVEL", "WARNING").upper()
    )
    version: str = __version__
    edit_sentinel: str = "EOF"
