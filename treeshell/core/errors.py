"""Typed exception hierarchy for treeshell."""

from __future__ import annotations

from collections.abc import Sequence


class TreeShellError(Exception):
    """Base class for all treeshell errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(TreeShellError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


# === Registration errors ===


class CommandNameError(TreeShellError, ValueError):
    """Raised when a command name or alias is empty or contains whitespace."""

    pass


class DuplicateNameError(TreeShellError):
    """Raised when a command name or alias collides with a sibling.

    Registration errors propagate to the host program building the tree,
    since an invalid tree is a programming error rather than user input.
    """

    def __init__(self, name: str, parent_path: Sequence[str] = ()) -> None:
        self.name = name
        self.parent_path = tuple(parent_path)
        where = " ".join(self.parent_path) or "<root>"
        super().__init__(f"Duplicate command name '{name}' under {where}")


# === Dispatch errors ===


class DispatchError(TreeShellError):
    """Base class for errors raised while resolving a line to a command.

    Dispatch errors are non-fatal: the shell loop prints them and keeps
    reading input.
    """


class UnknownCommandError(DispatchError):
    """No command matches the first unresolved token."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = list(tokens)
        name = self.tokens[0] if self.tokens else ""
        super().__init__(f"Unknown command: {name}")


class NoHandlerError(DispatchError):
    """The resolved node is a pure namespace with nothing to execute.

    Attributes:
        path: Names of the nodes walked to reach the namespace.
        remaining: Tokens left over after the namespace was reached.
    """

    def __init__(self, path: Sequence[str], args: Sequence[str] = ()) -> None:
        self.path = list(path)
        self.remaining = list(args)
        joined = " ".join(self.path)
        if self.remaining:
            message = f"Unknown command or arguments under '{joined}': {' '.join(self.remaining)}"
        else:
            message = f"'{joined}' is a command group, not a command"
        super().__init__(message)


# === Handler errors ===


class CommandError(TreeShellError):
    """Raised by a handler to report a failure to the user.

    The message is surfaced verbatim by the shell loop.
    """


class BadSyntaxError(CommandError):
    """Wrong number or shape of arguments."""

    def __init__(self, message: str = "Bad syntax") -> None:
        super().__init__(message)


class MissingArgumentError(CommandError):
    """A required argument was not supplied."""

    def __init__(self, message: str = "Missing required argument") -> None:
        super().__init__(message)


class BadArgumentError(CommandError):
    """An argument has an unacceptable value."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Bad argument: {argument}")


# Handler errors that are followed by the command's usage line
USAGE_ERRORS = (BadSyntaxError, MissingArgumentError, BadArgumentError)
