"""Unit tests for treeshell.cli.logging_setup module."""

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler

import pytest

from treeshell.cli.logging_setup import configure_logging
from treeshell.core.constants import LOGGER_NAMESPACE


@pytest.fixture(autouse=True)
def _clean_handlers() -> Iterator[None]:
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    handlers = list(namespace_logger.handlers)
    propagate = namespace_logger.propagate
    yield
    for handler in list(namespace_logger.handlers):
        namespace_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        namespace_logger.addHandler(handler)
    namespace_logger.propagate = propagate


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_stderr_handler(self):
        namespace_logger = configure_logging(logging.INFO)
        assert namespace_logger.name == LOGGER_NAMESPACE
        assert namespace_logger.level == logging.INFO
        assert len(namespace_logger.handlers) == 1
        assert namespace_logger.propagate is False

    def test_reconfigure_replaces_handlers(self):
        configure_logging()
        namespace_logger = configure_logging()
        assert len(namespace_logger.handlers) == 1

    def test_rotating_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "shell.log"
        namespace_logger = configure_logging(logging.DEBUG, log_file)

        file_handlers = [
            h for h in namespace_logger.handlers if isinstance(h, RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 5 * 1024 * 1024
        assert file_handlers[0].backupCount == 3

        logging.getLogger("treeshell.cli.shell").debug("written to file")
        file_handlers[0].flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
