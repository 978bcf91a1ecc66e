"""Command nodes: the entries of the command tree.

A node is a plain configuration value. Build it, then hand it to
`CommandTree.register` (or `ShellApp.add_command`):

    CommandNode(
        name="version",
        aliases=("v",),
        about="shows version information",
        handler=show_version,
    )

A node without a handler is a namespace that only groups subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from treeshell.commands.protocol import DataHandler, Handler
from treeshell.core.errors import DuplicateNameError

T = TypeVar("T")


@dataclass(eq=False)
class CommandNode(Generic[T]):
    """A single node in the command tree.

    Attributes:
        name: Identifier, unique among siblings.
        aliases: Alternate names, also unique among siblings.
        about: One-line description shown by help.
        usage: Usage string; help falls back to the name when unset.
        handler: Callable invoked when the node is resolved. Receives
            (ctx, args), or (ctx, args, user_data) when user_data is set.
        user_data: Optional value owned by this node.
        children: Child nodes, in insertion order.
    """

    name: str
    aliases: Sequence[str] = ()
    about: str = ""
    usage: str | None = None
    handler: Handler | DataHandler[T] | None = None
    user_data: T | None = None
    children: list[CommandNode[Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.aliases, str):
            self.aliases = (self.aliases,)
        else:
            self.aliases = tuple(self.aliases)
        self.children = list(self.children)

    @property
    def names(self) -> tuple[str, ...]:
        """The name followed by every alias."""
        return (self.name, *self.aliases)

    @property
    def label(self) -> str:
        """Name and aliases joined for display, e.g. 'help, h'."""
        return ", ".join(self.names)

    @property
    def usage_text(self) -> str:
        return self.usage or self.name

    @property
    def is_namespace(self) -> bool:
        return self.handler is None

    @property
    def has_user_data(self) -> bool:
        return self.user_data is not None

    def matches(self, token: str) -> bool:
        """Exact, case-sensitive match against the name or any alias."""
        return token == self.name or token in self.aliases

    def find_child(self, token: str) -> CommandNode[Any] | None:
        """Return the first child matching token exactly, or None."""
        for child in self.children:
            if child.matches(token):
                return child
        return None

    def add_child(
        self, child: CommandNode[Any], path: Sequence[str] = ()
    ) -> None:
        """Append a child after checking sibling name/alias collisions.

        Args:
            child: The node to add.
            path: Path of this node, used in error messages.

        Raises:
            DuplicateNameError: If any of child's names is already taken
                by a sibling, or repeats within child itself.
        """
        seen: set[str] = set()
        for candidate in child.names:
            if candidate in seen or self.find_child(candidate) is not None:
                raise DuplicateNameError(candidate, path)
            seen.add(candidate)
        self.children.append(child)
