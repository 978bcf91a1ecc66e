"""Shared pytest fixtures and configuration for pytest."""

import io
import logging
from collections.abc import Iterator

import pytest
from rich.console import Console

from treeshell.core.constants import LOGGER_NAMESPACE
from treeshell.display import set_console


class RecordingConsole:
    """Wraps a Rich Console writing to an in-memory buffer."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        self.console = Console(
            file=self.buffer,
            force_terminal=False,
            color_system=None,
            width=120,
            highlight=False,
        )

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def output() -> Iterator[RecordingConsole]:
    """Install a recording console for everything printed during the test."""
    recording = RecordingConsole()
    set_console(recording.console)
    yield recording
    set_console(None)


@pytest.fixture(autouse=True)
def _restore_log_level() -> Iterator[None]:
    """Keep the treeshell logger level from leaking between tests."""
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    level = namespace_logger.level
    yield
    namespace_logger.setLevel(level)
