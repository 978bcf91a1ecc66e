"""Core types: errors, constants and the token splitter."""

from treeshell.core.errors import (
    BadArgumentError,
    BadSyntaxError,
    CommandError,
    CommandNameError,
    ConfigError,
    DispatchError,
    DuplicateNameError,
    MissingArgumentError,
    NoHandlerError,
    TreeShellError,
    UnknownCommandError,
)
from treeshell.core.tokens import split_line

__all__ = [
    "TreeShellError",
    "ConfigError",
    # Registration
    "CommandNameError",
    "DuplicateNameError",
    # Dispatch
    "DispatchError",
    "UnknownCommandError",
    "NoHandlerError",
    # Handler failures
    "CommandError",
    "BadSyntaxError",
    "BadArgumentError",
    "MissingArgumentError",
    # Tokens
    "split_line",
]
