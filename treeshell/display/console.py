"""Shared Rich Console instance for treeshell."""

from __future__ import annotations

from rich.console import Console


_console: Console | None = None


def get_console() -> Console:
    """Get the shared Console instance.

    Created on first access. Markup is enabled for shell chrome; command
    text is printed with markup disabled by the output helpers.
    """
    global _console
    if _console is None:
        _console = Console(highlight=False, markup=True)
    return _console


def set_console(console: Console | None) -> None:
    """Set a custom Console instance.

    Useful for testing or custom configurations. Passing None drops the
    current console so the next get_console() builds a fresh one.
    """
    global _console
    _console = console
