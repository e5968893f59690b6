import logging
from pathlib import Path

import pytest

from factorial_lab.app_shell.term_color import ColorFormatter


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """
    The CLI reconfigures the root logger with basicConfig(force=True).
    Drop its handler and restore the level so later tests are unaffected.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, ColorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def rules_file(tmp_path: Path):
    """Write a rules file into a temp dir and return its path."""

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
