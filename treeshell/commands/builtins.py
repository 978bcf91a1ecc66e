"""Builtin commands registered at the root of every shell.

Commands:
    help, h [command...]   - List commands, or describe one command
    tree                   - Print the whole command tree
    log, l [level]         - Show or set the treeshell log level
    mode [vi|emacs]        - Show or set the line editor edit mode
    version, v             - Show application name, author and version
    exit, quit             - Leave the shell

Builtins are ordinary command nodes; the dispatcher does not treat them
specially and a host may register its own tree without them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from rich.markup import escape
from rich.tree import Tree

from treeshell.commands.node import CommandNode
from treeshell.commands.protocol import CommandOutput, ExecutionContext
from treeshell.commands.tree import CommandTree
from treeshell.core.constants import LOGGER_NAMESPACE
from treeshell.core.errors import BadArgumentError, BadSyntaxError
from treeshell.core.interfaces import EditModeSupport
from treeshell.display import get_console

# Level used for "off": above CRITICAL so nothing is emitted
LOG_OFF = logging.CRITICAL + 10

LOG_LEVELS: dict[str, int] = {
    "off": LOG_OFF,
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def format_command_help(node: CommandNode[Any]) -> str:
    """Detailed help block for one command."""
    return "\n".join([
        f"Command:     {node.label}",
        f"Usage:       {node.usage_text}",
        f"Description: {node.about}",
    ])


def format_listing(entries: Sequence[tuple[str, str]]) -> str:
    """One line per (label, about) entry, label padded to 16 columns."""
    return "\n".join(f"{label:16}: {about}" for label, about in entries)


def cmd_help(ctx: ExecutionContext, args: list[str]) -> CommandOutput:
    """Handle help command - list root commands or describe one.

    Args:
        ctx: Execution context (provides the tree).
        args: Optional command path, names or aliases.

    Returns:
        CommandOutput with the help text, or ERROR if the path is unknown.
    """
    if not args:
        return CommandOutput.success(message=format_listing(ctx.tree.listing()))

    node = ctx.tree.locate(args)
    if node is None:
        return CommandOutput.error(f"Unrecognized command {' '.join(args)}")

    text = format_command_help(node)
    if node.children:
        text = f"{text}\n\n{format_listing(ctx.tree.listing(node))}"
    return CommandOutput.success(message=text, data={"path": list(args)})


def build_tree_view(tree: CommandTree, title: str) -> Tree:
    """Render the command tree as a rich Tree."""
    view = Tree(escape(title))
    branches: dict[tuple[str, ...], Tree] = {(): view}
    for path, node, _depth in tree.walk():
        parent = branches[tuple(path[:-1])]
        label = escape(node.label)
        if node.about:
            label = f"{label}  [dim]{escape(node.about)}[/dim]"
        branches[tuple(path)] = parent.add(label)
    return view


def cmd_tree(ctx: ExecutionContext, args: list[str]) -> CommandOutput:
    """Print every command and its subcommands."""
    get_console().print(build_tree_view(ctx.tree, ctx.name))
    return CommandOutput.success()


def cmd_version(ctx: ExecutionContext, args: list[str]) -> CommandOutput:
    return CommandOutput.success(message=f"{ctx.name}\n{ctx.author}\n{ctx.version}")


def cmd_exit(ctx: ExecutionContext, args: list[str]) -> CommandOutput:
    return CommandOutput.stop()


def _level_name(level: int) -> str:
    if level > logging.CRITICAL:
        return "off"
    return logging.getLevelName(level).lower()


def cmd_log(ctx: ExecutionContext, args: list[str]) -> CommandOutput:
    """Handle log command - show or set the treeshell log level.

    Args:
        ctx: Execution context.
        args: Empty to show the level, or a single level name.

    Returns:
        CommandOutput with the current or new level.

    Raises:
        BadArgumentError: If the level name is not recognized.
        BadSyntaxError: If more than one argument is given.
    """
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    if not args:
        level = _level_name(namespace_logger.getEffectiveLevel())
        return CommandOutput.success(
            message=f"Global log level is: {level}",
            data={"level": level},
        )
    if len(args) > 1:
        raise BadSyntaxError()

    requested = args[0].lower()
    if requested not in LOG_LEVELS:
        raise BadArgumentError(
            f"{args[0]}, expected one of: {', '.join(LOG_LEVELS)}"
        )
    namespace_logger.setLevel(LOG_LEVELS[requested])
    return CommandOutput.success(
        message=f"Global log level set to: {_level_name(LOG_LEVELS[requested])}",
        data={"level": _level_name(LOG_LEVELS[requested])},
    )


def cmd_mode(ctx: ExecutionContext, args: list[str]) -> CommandOutput:
    """Handle mode command - show or set the line editor edit mode.

    Raises:
        BadArgumentError: If the mode is neither vi nor emacs.
        BadSyntaxError: If more than one argument is given.
    """
    source = ctx.line_source
    if not isinstance(source, EditModeSupport):
        return CommandOutput.error("The line editor does not support edit modes")

    if not args:
        mode = "Vi" if source.edit_mode == "vi" else "Emacs"
        return CommandOutput.success(message=f"Current edit mode is: {mode}")
    if len(args) > 1:
        raise BadSyntaxError()

    requested = args[0].lower()
    if requested == "vi":
        source.set_edit_mode("vi")
    elif requested == "emacs":
        source.set_edit_mode("emacs")
    else:
        raise BadArgumentError(args[0])
    return CommandOutput.success()


def builtin_nodes() -> list[CommandNode[Any]]:
    """Fresh builtin command nodes, in display order."""
    return [
        CommandNode(
            name="tree",
            about="prints the whole command tree",
            usage="tree",
            handler=cmd_tree,
        ),
        CommandNode(
            name="mode",
            about="manages the line editor mode, vi/emacs",
            usage="mode [vi|emacs]",
            handler=cmd_mode,
        ),
        CommandNode(
            name="log",
            aliases=("l",),
            about="manages log level filter",
            usage="log [off|critical|error|warning|info|debug]",
            handler=cmd_log,
        ),
        CommandNode(
            name="help",
            aliases=("h",),
            about="displays help information",
            usage="help [command]",
            handler=cmd_help,
        ),
        CommandNode(
            name="exit",
            aliases=("quit",),
            about="quits the shell",
            handler=cmd_exit,
        ),
        CommandNode(
            name="version",
            aliases=("v",),
            about="shows version information",
            handler=cmd_version,
        ),
    ]


def register_builtins(tree: CommandTree) -> None:
    """Register every builtin at the root of tree.

    Raises:
        DuplicateNameError: If the tree already has a clashing command.
    """
    for node in builtin_nodes():
        tree.register(node)
