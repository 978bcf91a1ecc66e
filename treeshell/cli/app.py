"""ShellApp: the embedding API for host programs.

Example:
    from treeshell.cli import ShellApp
    from treeshell.commands import CommandNode, CommandOutput

    def qwert(ctx, args):
        return CommandOutput.success(message="qwert tested")

    app = ShellApp("xCLI", version="v0.1", author="someone@example.com")
    app.add_command(CommandNode(name="qwert", about="controls testing features", handler=qwert))
    app.run()
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from treeshell.cli.line_source import PromptLineSource, StreamLineSource
from treeshell.cli.shell import Shell
from treeshell.commands.builtins import register_builtins
from treeshell.commands.node import CommandNode
from treeshell.commands.protocol import ExecutionContext
from treeshell.commands.tree import CommandTree
from treeshell.config.schema import ShellConfig
from treeshell.core.interfaces import LineSource

logger = logging.getLogger(__name__)


class ShellApp:
    """An interactive shell application with a command tree.

    The builtin commands (help, tree, log, mode, version, exit) are
    registered at construction unless builtins=False.
    """

    def __init__(
        self,
        name: str,
        version: str = "",
        author: str = "",
        *,
        config: ShellConfig | None = None,
        user_data: Any = None,
        builtins: bool = True,
        about: str = "Interactive CLI",
    ) -> None:
        """Initialize the application.

        Args:
            name: Application name, shown by `version` and `tree`.
            version: Application version string.
            author: Application author.
            config: Shell configuration. Defaults are used if None.
            user_data: Global data exposed to handlers as ctx.user_data.
            builtins: Register the builtin commands.
            about: Description of the root of the command tree.
        """
        self.config = config or ShellConfig()
        self.tree = CommandTree(about=about)
        if builtins:
            register_builtins(self.tree)
        self.context = ExecutionContext(
            name=name,
            tree=self.tree,
            version=version,
            author=author,
            user_data=user_data,
            config=self.config,
        )

    @property
    def name(self) -> str:
        return self.context.name

    @property
    def version(self) -> str:
        return self.context.version

    @property
    def author(self) -> str:
        return self.context.author

    def add_command(
        self, node: CommandNode[Any], user_data: Any = None
    ) -> CommandNode[Any]:
        """Register a top-level command.

        Raises:
            DuplicateNameError: If the name or an alias is already taken.
        """
        return self.tree.register(node, (), user_data)

    def add_command_under(
        self,
        path: Sequence[str],
        node: CommandNode[Any],
        user_data: Any = None,
    ) -> CommandNode[Any]:
        """Register a command below the node addressed by path.

        Raises:
            DuplicateNameError: If the name or an alias is already taken.
            UnknownCommandError: If path does not name an existing node.
        """
        return self.tree.register(node, path, user_data)

    def default_line_source(self) -> LineSource:
        """Interactive source for a TTY, plain stream reads otherwise."""
        if sys.stdin.isatty():
            return PromptLineSource(self.config)
        logger.debug("stdin is not a TTY, reading lines without a prompt")
        return StreamLineSource(sys.stdin)

    def run(self, line_source: LineSource | None = None) -> None:
        """Run the shell loop until exit or end of input.

        Args:
            line_source: Source of input lines. Chosen from stdin if None.
        """
        source = line_source or self.default_line_source()
        self.context.line_source = source
        Shell(self.context, source).run()
