"""Types for the command system.

This module defines the result types returned by handlers, the execution
context threaded through every invocation, and the handler protocols.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from treeshell.core.interfaces import LineSource
    from treeshell.commands.tree import CommandTree
    from treeshell.config.schema import ShellConfig

T_contra = TypeVar("T_contra", contravariant=True)


class CommandResult(Enum):
    """Result status of a command execution.

    Attributes:
        CONTINUE: Command completed; keep reading input.
        STOP: Command requested graceful shell termination.
        ERROR: Command failed with an error message.
    """

    CONTINUE = auto()
    STOP = auto()
    ERROR = auto()


@dataclass
class CommandOutput:
    """Output from a command execution.

    Handlers may print directly, or return a message and let the shell
    display it.

    Attributes:
        result: The result status of the command.
        message: Human-readable message (for display).
        data: Structured data (for further processing or tests).
    """

    result: CommandResult
    message: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        message: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> CommandOutput:
        """Create a successful output.

        Args:
            message: Optional human-readable message.
            data: Optional structured data.

        Returns:
            CommandOutput with CONTINUE result.
        """
        return cls(result=CommandResult.CONTINUE, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> CommandOutput:
        """Create an error output.

        Args:
            message: Error message describing what went wrong.

        Returns:
            CommandOutput with ERROR result.
        """
        return cls(result=CommandResult.ERROR, message=message)

    @classmethod
    def stop(cls, message: str | None = None) -> CommandOutput:
        """Create a stop output that terminates the shell loop.

        Returns:
            CommandOutput with STOP result.
        """
        return cls(result=CommandResult.STOP, message=message)

    @property
    def is_stop(self) -> bool:
        return self.result == CommandResult.STOP

    @property
    def is_error(self) -> bool:
        return self.result == CommandResult.ERROR


@dataclass
class ExecutionContext:
    """Shared state passed by reference into every handler invocation.

    Exactly one context exists per running shell. Handlers may mutate
    `user_data` freely; the shell never copies the context.

    Attributes:
        name: Application name.
        tree: The command tree, for introspecting builtins such as help.
        version: Application version string.
        author: Application author.
        user_data: Global host data, distinct from per-command user data.
        config: Active shell configuration, if any.
        line_source: The line source feeding the shell, if any.
    """

    name: str
    tree: CommandTree
    version: str = ""
    author: str = ""
    user_data: Any = None
    config: ShellConfig | None = None
    line_source: LineSource | None = None


class Handler(Protocol):
    """Handler for a node without attached user data."""

    def __call__(self, ctx: ExecutionContext, args: list[str]) -> CommandOutput: ...


class DataHandler(Protocol[T_contra]):
    """Handler for a node carrying user data; receives it as third argument."""

    def __call__(
        self, ctx: ExecutionContext, args: list[str], user_data: T_contra
    ) -> CommandOutput: ...
