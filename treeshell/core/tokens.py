"""Splitting raw input lines into command tokens.

Tokens are separated by runs of whitespace. There is no quoting, escaping
or comment syntax: a quote character is just another character of the
token it appears in.
"""

from __future__ import annotations


def split_line(line: str) -> list[str]:
    """Split a raw line into whitespace-separated tokens.

    Args:
        line: Raw input text.

    Returns:
        Non-empty tokens in order. Empty or all-whitespace input yields [].
    """
    return line.split()


def ends_with_separator(line: str) -> bool:
    """Return True if the line ends in whitespace (the next token is empty)."""
    return bool(line) and line[-1].isspace()
