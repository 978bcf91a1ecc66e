"""Command tree: registration, exact resolution and prefix completion.

The tree owns a nameless root node whose children are the top-level
commands. Resolution walks the tree with exact, case-sensitive matches on
names and aliases. Completion is the only place prefixes are used, so
adding a new command never changes what an existing input line runs.

Example:
    tree = CommandTree()
    tree.register(CommandNode(name="remote", about="manage remotes"))
    tree.register(CommandNode(name="add", handler=add_remote), ("remote",))

    resolution = tree.resolve(["remote", "add", "origin"])
    resolution.path   # ["remote", "add"]
    resolution.args   # ["origin"]

    tree.complete(["remote", "a"])  # ["add"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from treeshell.commands.node import CommandNode
from treeshell.core.errors import (
    CommandNameError,
    DuplicateNameError,
    NoHandlerError,
    UnknownCommandError,
)
from treeshell.core.tokens import ends_with_separator, split_line

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Outcome of resolving a token sequence against the tree.

    Attributes:
        node: Deepest node matched.
        path: Canonical names of the nodes walked (aliases normalized).
        args: Tokens left after the last matched node.
    """

    node: CommandNode[Any]
    path: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)


def _validate_name(name: str) -> None:
    if not isinstance(name, str):
        raise CommandNameError(
            f"Command name must be a string, got {type(name).__name__}"
        )
    if not name:
        raise CommandNameError("Command name cannot be empty")
    if split_line(name) != [name]:
        raise CommandNameError(f"Command name cannot contain whitespace: {name!r}")


class CommandTree:
    """Root collection of command nodes.

    The tree is built once at startup and treated as read-only while the
    shell loop runs.
    """

    def __init__(self, about: str = "") -> None:
        self._root: CommandNode[Any] = CommandNode(name="", about=about)

    @property
    def root(self) -> CommandNode[Any]:
        return self._root

    def __contains__(self, name: str) -> bool:
        return self._root.find_child(name) is not None

    def __len__(self) -> int:
        return len(self._root.children)

    # === Registration ===

    def register(
        self,
        node: CommandNode[Any],
        parent_path: Sequence[str] = (),
        user_data: Any = None,
    ) -> CommandNode[Any]:
        """Insert node as a child of the node at parent_path.

        Children already attached to node are validated the same way, so a
        fully built subtree can be registered in one call.

        Args:
            node: The node to insert.
            parent_path: Names (or aliases) leading to the parent. Empty
                means the root.
            user_data: If given, attached to node once it is inserted.

        Returns:
            The registered node.

        Raises:
            CommandNameError: If a name or alias is empty or has whitespace.
            DuplicateNameError: If a name or alias collides with a sibling.
            UnknownCommandError: If parent_path does not resolve exactly.
        """
        parent = self.locate(parent_path)
        if parent is None:
            raise UnknownCommandError(list(parent_path))

        path = self._canonical_path(parent_path)
        self._check_subtree(node, path + [node.name])
        parent.add_child(node, path)
        if user_data is not None:
            node.user_data = user_data
        logger.debug("Registered command: %s", " ".join(path + [node.name]))
        return node

    def _check_subtree(self, node: CommandNode[Any], path: list[str]) -> None:
        """Validate names and sibling uniqueness in a detached subtree.

        Nothing is modified, so a failed registration leaves node as it was.
        """
        for name in node.names:
            _validate_name(name)
        seen: set[str] = set()
        for child in node.children:
            for name in child.names:
                if name in seen:
                    raise DuplicateNameError(name, path)
                seen.add(name)
            self._check_subtree(child, path + [child.name])

    def _canonical_path(self, tokens: Sequence[str]) -> list[str]:
        path: list[str] = []
        current = self._root
        for token in tokens:
            child = current.find_child(token)
            if child is None:
                break
            path.append(child.name)
            current = child
        return path

    # === Lookup ===

    def locate(self, tokens: Sequence[str]) -> CommandNode[Any] | None:
        """Find the node addressed by tokens, consuming every token.

        Returns:
            The node, the root for an empty sequence, or None if any token
            fails to match.
        """
        current = self._root
        for token in tokens:
            child = current.find_child(token)
            if child is None:
                return None
            current = child
        return current

    def walk_tokens(self, tokens: Sequence[str]) -> Resolution:
        """Descend while tokens match; never raises."""
        current = self._root
        path: list[str] = []
        index = 0
        while index < len(tokens):
            child = current.find_child(tokens[index])
            if child is None:
                break
            current = child
            path.append(child.name)
            index += 1
        return Resolution(node=current, path=path, args=list(tokens[index:]))

    def resolve(self, tokens: Sequence[str]) -> Resolution:
        """Resolve tokens to an executable node and its arguments.

        Args:
            tokens: Non-empty token sequence.

        Returns:
            Resolution with a node that has a handler.

        Raises:
            UnknownCommandError: If the first token matches no root child.
            NoHandlerError: If the deepest match is a namespace.
        """
        resolution = self.walk_tokens(tokens)
        if resolution.node is self._root:
            raise UnknownCommandError(tokens)
        if resolution.node.handler is None:
            raise NoHandlerError(resolution.path, resolution.args)
        return resolution

    # === Completion ===

    def complete(self, tokens: Sequence[str]) -> list[str]:
        """Candidate completions for a partial token sequence.

        All tokens but the last must match exactly; the last is treated as
        a prefix of a child name or alias.

        Args:
            tokens: Tokens typed so far. The last one may be incomplete.

        Returns:
            Matching names, then matching aliases, per child in insertion
            order. With no tokens, all root-level names.
        """
        if not tokens:
            return [child.name for child in self._root.children]

        *complete_tokens, partial = tokens
        parent = self.locate(complete_tokens)
        if parent is None:
            return []

        if not partial:
            return [child.name for child in parent.children]

        candidates: list[str] = []
        for child in parent.children:
            for name in child.names:
                if name.startswith(partial) and name not in candidates:
                    candidates.append(name)
        return candidates

    def complete_line(self, line: str) -> list[str]:
        """Completion for raw text typed before the cursor."""
        tokens = split_line(line)
        if tokens and ends_with_separator(line):
            tokens.append("")
        return self.complete(tokens)

    # === Introspection ===

    def listing(
        self, node: CommandNode[Any] | None = None
    ) -> list[tuple[str, str]]:
        """(label, about) for each immediate child of node, in order."""
        target = node if node is not None else self._root
        return [(child.label, child.about) for child in target.children]

    def walk(
        self, node: CommandNode[Any] | None = None
    ) -> Iterator[tuple[list[str], CommandNode[Any], int]]:
        """Depth-first (path, node, depth) for every node below node."""
        start = node if node is not None else self._root

        def _walk(
            current: CommandNode[Any], path: list[str], depth: int
        ) -> Iterator[tuple[list[str], CommandNode[Any], int]]:
            for child in current.children:
                child_path = path + [child.name]
                yield child_path, child, depth
                yield from _walk(child, child_path, depth + 1)

        yield from _walk(start, [], 0)
