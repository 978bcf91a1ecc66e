"""Command tree and dispatch infrastructure for treeshell.

Architecture:
    - protocol.py: Types for the command system (CommandResult, CommandOutput,
      ExecutionContext, handler protocols)
    - node.py: CommandNode, one entry of the command tree
    - tree.py: CommandTree registration, resolution and completion
    - dispatcher.py: Dispatcher invoking handlers for resolved nodes
    - builtins.py: help, tree, log, mode, version and exit

Example:
    from treeshell.commands import CommandNode, CommandOutput, CommandTree, Dispatcher

    def greet(ctx, args):
        return CommandOutput.success(message=f"hello {' '.join(args)}")

    tree = CommandTree()
    tree.register(CommandNode(name="greet", aliases=("g",), handler=greet))
    output = Dispatcher(tree).dispatch(["g", "world"], ctx)
"""

from treeshell.commands.builtins import builtin_nodes, register_builtins
from treeshell.commands.dispatcher import Dispatcher
from treeshell.commands.node import CommandNode
from treeshell.commands.protocol import (
    CommandOutput,
    CommandResult,
    DataHandler,
    ExecutionContext,
    Handler,
)
from treeshell.commands.tree import CommandTree, Resolution

__all__ = [
    # Protocol types
    "CommandOutput",
    "CommandResult",
    "DataHandler",
    "ExecutionContext",
    "Handler",
    # Tree
    "CommandNode",
    "CommandTree",
    "Resolution",
    # Dispatch
    "Dispatcher",
    # Builtins
    "builtin_nodes",
    "register_builtins",
]
