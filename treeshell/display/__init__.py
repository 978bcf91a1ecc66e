"""treeshell display system.

Provides the shared Rich console used for all user-visible output.
"""

from treeshell.display.console import get_console, set_console

__all__ = [
    "get_console",
    "set_console",
]
