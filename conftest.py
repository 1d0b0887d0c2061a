import io

import pytest
from rich.console import Console

from simos.config import ShellConfig
from simos.sandbox import RootedFS
from simos.shell import Dispatcher, ShellContext


@pytest.fixture
def root_dir(tmp_path):
    return str(tmp_path / "simos-files")


@pytest.fixture
def rooted_fs(root_dir):
    return RootedFS(root_dir=root_dir)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.fixture
def ctx(rooted_fs, root_dir, console):
    config = ShellConfig(root_dir=root_dir, prompt_name="simos", log_level="WARNING")
    return ShellContext(sandbox=rooted_fs, config=config, console=console)


@pytest.fixture
def dispatcher(ctx):
    return Dispatcher(ctx)


@pytest.fixture
def run(dispatcher):
    """Feed one line to the dispatcher and return its printed output."""

    def _run(line: str) -> str:
        return dispatcher.handle_line(line).output

    return _run
