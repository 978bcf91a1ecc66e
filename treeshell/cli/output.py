"""Rich-based output utilities for the treeshell CLI."""

from rich.markup import escape

from treeshell.display import get_console


def print_message(message: str) -> None:
    """Print command output verbatim (no markup interpretation).

    Args:
        message: The text to display.
    """
    get_console().print(message, markup=False, highlight=False)


def print_error(message: str) -> None:
    """Print an error message in red.

    Args:
        message: The error message to display.
    """
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The info message to display.
    """
    get_console().print(f"[dim]{escape(message)}[/dim]")
