"""Core interfaces (protocols) for treeshell.

This module defines the Protocol interfaces the shell consumes from its
line-editing collaborator. Using Protocols lets any object with the right
methods act as a line source without inheriting from a base class.
"""

from collections.abc import Callable, Sequence
from typing import Literal, Protocol, runtime_checkable

# Given the text typed before the cursor, return completion candidates
CompletionCallback = Callable[[str], Sequence[str]]

EditMode = Literal["emacs", "vi"]


@runtime_checkable
class LineSource(Protocol):
    """Protocol for the external source of input lines.

    Example:
        class ListSource:
            def __init__(self, lines: list[str]) -> None:
                self._lines = iter(lines)

            def next_line(self) -> str | None:
                return next(self._lines, None)

            def register_completer(self, completer: CompletionCallback) -> None:
                pass
    """

    def next_line(self) -> str | None:
        """Block until a line is available.

        Returns:
            The raw line without its trailing newline, or None at end of
            input (including an interrupt while reading).
        """
        ...

    def register_completer(self, completer: CompletionCallback) -> None:
        """Install the callback used for tab completion.

        Args:
            completer: Callable mapping the text before the cursor to
                candidate completions.
        """
        ...


@runtime_checkable
class EditModeSupport(Protocol):
    """Optional protocol for line sources with switchable key bindings."""

    @property
    def edit_mode(self) -> EditMode:
        """The active edit mode."""
        ...

    def set_edit_mode(self, mode: EditMode) -> None:
        """Switch key bindings to the given mode."""
        ...
