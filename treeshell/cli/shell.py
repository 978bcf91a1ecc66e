"""The shell loop: read, split, dispatch, report.

State machine:
    READING      blocked on the line source
    PARSING      splitting the line into tokens
    DISPATCHING  resolving and running the handler
    TERMINATED   a handler returned STOP, or input ended

Every dispatch-time failure is caught here and printed; nothing raised by
a command escapes run().
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum, auto

from treeshell.cli.output import print_error, print_message
from treeshell.commands.builtins import format_listing
from treeshell.commands.dispatcher import Dispatcher
from treeshell.commands.protocol import CommandOutput, ExecutionContext
from treeshell.core.errors import (
    USAGE_ERRORS,
    CommandError,
    NoHandlerError,
    UnknownCommandError,
)
from treeshell.core.interfaces import LineSource
from treeshell.core.tokens import split_line

logger = logging.getLogger(__name__)


class ShellState(Enum):
    """States of the shell loop."""

    READING = auto()
    PARSING = auto()
    DISPATCHING = auto()
    TERMINATED = auto()


class Shell:
    """Drives one interactive session over a line source.

    Attributes:
        state: Current ShellState.
    """

    def __init__(
        self,
        ctx: ExecutionContext,
        line_source: LineSource,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        """Initialize the shell and install the tree completer.

        Args:
            ctx: Execution context shared by every handler.
            line_source: Where input lines come from.
            dispatcher: Dispatcher to use. Built from ctx.tree if None.
        """
        self._ctx = ctx
        self._source = line_source
        self._dispatcher = dispatcher or Dispatcher(ctx.tree)
        self.state = ShellState.READING

        if ctx.line_source is None:
            ctx.line_source = line_source
        line_source.register_completer(ctx.tree.complete_line)

    @property
    def context(self) -> ExecutionContext:
        return self._ctx

    @property
    def terminated(self) -> bool:
        return self.state == ShellState.TERMINATED

    def run(self) -> None:
        """Read and execute lines until STOP or end of input."""
        logger.info("Starting shell loop for %s", self._ctx.name)
        self.state = ShellState.READING
        while not self.terminated:
            line = self._source.next_line()
            if line is None:
                logger.debug("End of input")
                self.state = ShellState.TERMINATED
                break
            logger.debug("Line: %s", line)
            self.handle_line(line)
        logger.info("Shell loop terminated")

    def handle_line(self, line: str) -> bool:
        """Run one parse/dispatch cycle for a raw line.

        Returns:
            False once the shell has terminated, True to keep reading.
        """
        self.state = ShellState.PARSING
        tokens = split_line(line)

        self.state = ShellState.DISPATCHING
        output = self._execute(tokens)

        if output is not None and output.is_stop:
            self.state = ShellState.TERMINATED
            return False
        self.state = ShellState.READING
        return True

    def _execute(self, tokens: Sequence[str]) -> CommandOutput | None:
        """Dispatch tokens, printing any failure.

        Returns:
            The handler's output, or None if dispatch or the handler failed.
        """
        try:
            output = self._dispatcher.dispatch(tokens, self._ctx)
        except UnknownCommandError as e:
            print_error(e.message)
            return None
        except NoHandlerError as e:
            print_error(e.message)
            namespace = self._ctx.tree.locate(e.path)
            if not e.remaining and namespace is not None and namespace.children:
                print_message(format_listing(self._ctx.tree.listing(namespace)))
            return None
        except CommandError as e:
            print_error(e.message)
            if isinstance(e, USAGE_ERRORS):
                node = self._ctx.tree.walk_tokens(tokens).node
                print_message(f"Usage:       {node.usage_text}")
            return None
        except Exception as e:
            logger.exception("Command failed: %s", " ".join(tokens))
            print_error(f"Command failed: {e}")
            return None

        # Plain print-and-return handlers yield None
        if output is None:
            return CommandOutput.success()
        if not isinstance(output, CommandOutput):
            logger.error(
                "Handler for '%s' returned %s, expected CommandOutput",
                " ".join(tokens), type(output).__name__,
            )
            print_error(f"Command returned {type(output).__name__}, expected CommandOutput")
            return None

        self._report(output)
        return output

    def _report(self, output: CommandOutput) -> None:
        if output.is_error:
            print_error(output.message or "Command failed")
        elif output.message:
            print_message(output.message)
