"""Command-line interface."""

from treeshell.cli.app import ShellApp
from treeshell.cli.line_source import PromptLineSource, StreamLineSource, TreeCompleter
from treeshell.cli.main import main
from treeshell.cli.shell import Shell, ShellState

__all__ = [
    "main",
    "PromptLineSource",
    "Shell",
    "ShellApp",
    "ShellState",
    "StreamLineSource",
    "TreeCompleter",
]
