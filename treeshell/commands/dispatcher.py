"""Resolve token sequences and invoke command handlers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from treeshell.commands.protocol import CommandOutput, ExecutionContext
from treeshell.commands.tree import CommandTree, Resolution

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes token sequences to handlers in a CommandTree.

    Dispatch is synchronous: the handler runs to completion on the calling
    thread before dispatch() returns. The dispatcher performs no I/O of its
    own; printing is left to handlers and the shell loop.
    """

    def __init__(self, tree: CommandTree) -> None:
        self._tree = tree

    @property
    def tree(self) -> CommandTree:
        return self._tree

    def dispatch(
        self, tokens: Sequence[str], ctx: ExecutionContext
    ) -> CommandOutput:
        """Dispatch tokens to the matching handler.

        Args:
            tokens: Tokens from one input line.
            ctx: Execution context passed to the handler.

        Returns:
            The handler's CommandOutput, unchanged. An empty token
            sequence returns a success output without any lookup.

        Raises:
            UnknownCommandError: If the first token matches nothing.
            NoHandlerError: If the tokens name a namespace.
            CommandError: Propagated unchanged from the handler.
        """
        if not tokens:
            return CommandOutput.success()

        resolution = self._tree.resolve(tokens)
        return self.invoke(resolution, ctx)

    def invoke(self, resolution: Resolution, ctx: ExecutionContext) -> CommandOutput:
        """Call the handler of an already resolved node."""
        node = resolution.node
        logger.debug("Dispatching %s args=%s", " ".join(resolution.path), resolution.args)
        if node.has_user_data:
            return node.handler(ctx, resolution.args, node.user_data)  # type: ignore[call-arg,misc]
        return node.handler(ctx, resolution.args)  # type: ignore[call-arg,misc]
