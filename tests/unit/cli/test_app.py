"""Unit tests for treeshell.cli.app module."""

import io
from unittest.mock import MagicMock, patch

import pytest

from treeshell.cli.app import ShellApp
from treeshell.cli.line_source import PromptLineSource, StreamLineSource
from treeshell.commands import CommandNode, CommandOutput
from treeshell.config import ShellConfig
from treeshell.core.errors import DuplicateNameError, UnknownCommandError


def _qwert(ctx, args):
    return CommandOutput.success(message="qwert tested")


class TestShellApp:
    """Tests for ShellApp construction and registration."""

    def test_metadata(self):
        app = ShellApp("xCLI", version="v0.1", author="someone")
        assert (app.name, app.version, app.author) == ("xCLI", "v0.1", "someone")
        assert app.context.tree is app.tree
        assert app.context.config is app.config

    def test_builtins_registered(self):
        app = ShellApp("xCLI")
        for name in ("help", "tree", "log", "mode", "version", "exit"):
            assert name in app.tree

    def test_without_builtins(self):
        app = ShellApp("bare", builtins=False)
        assert len(app.tree) == 0

    def test_global_user_data(self):
        data = {"db": "sqlite://"}
        app = ShellApp("xCLI", user_data=data)
        assert app.context.user_data is data

    def test_custom_config(self):
        config = ShellConfig(prompt="x> ")
        assert ShellApp("xCLI", config=config).config is config

    def test_add_command(self):
        app = ShellApp("xCLI")
        node = app.add_command(CommandNode(name="qwert", handler=_qwert))
        assert app.tree.locate(["qwert"]) is node

    def test_add_command_under(self):
        app = ShellApp("xCLI")
        app.add_command(CommandNode(name="remote"))
        app.add_command_under(["remote"], CommandNode(name="add", handler=_qwert), user_data=[1])
        assert app.tree.locate(["remote", "add"]).user_data == [1]

    def test_add_duplicate_builtin_fails(self):
        app = ShellApp("xCLI")
        with pytest.raises(DuplicateNameError):
            app.add_command(CommandNode(name="h"))

    def test_add_under_unknown_path(self):
        app = ShellApp("xCLI")
        with pytest.raises(UnknownCommandError):
            app.add_command_under(["nope"], CommandNode(name="x"))


class TestRun:
    """Tests for ShellApp.run."""

    def test_runs_session_over_given_source(self, output):
        app = ShellApp("xCLI", version="v0.1")
        app.add_command(CommandNode(name="qwert", handler=_qwert))
        source = StreamLineSource(io.StringIO("qwert\nexit\nqwert\n"))

        app.run(source)

        assert output.text.count("qwert tested") == 1
        assert app.context.line_source is source

    def test_default_source_for_pipe(self):
        app = ShellApp("xCLI")
        with patch("treeshell.cli.app.sys.stdin") as stdin:
            stdin.isatty.return_value = False
            assert isinstance(app.default_line_source(), StreamLineSource)

    def test_default_source_for_tty(self):
        app = ShellApp("xCLI")
        with patch("treeshell.cli.app.sys.stdin") as stdin, \
                patch("treeshell.cli.app.PromptLineSource") as prompt_source:
            stdin.isatty.return_value = True
            prompt_source.return_value = MagicMock(spec=PromptLineSource)
            app.default_line_source()
            prompt_source.assert_called_once_with(app.config)
