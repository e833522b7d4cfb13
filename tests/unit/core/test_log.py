"""Unit tests for logging configuration."""

import io
import logging
from collections.abc import Iterator

import pytest
from lsinfo.core.log import configure_logging
from rich.console import Console
from rich.logging import RichHandler


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Root logger restored to its original level and handlers afterwards."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def log_console() -> Console:
    """Console writing log records into a buffer."""
    return Console(file=io.StringIO(), width=200)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_rich_handler(self, root_logger: logging.Logger, log_console: Console) -> None:
        """A RichHandler is attached to the root logger."""
        handler = configure_logging(console=log_console)

        assert isinstance(handler, RichHandler)
        assert handler in root_logger.handlers

    def test_default_level_is_warning(
        self, root_logger: logging.Logger, log_console: Console
    ) -> None:
        """Without verbose only warnings and above are emitted."""
        handler = configure_logging(console=log_console)

        assert handler.level == logging.WARNING
        assert root_logger.level == logging.WARNING

    def test_verbose_level_is_debug(
        self, root_logger: logging.Logger, log_console: Console
    ) -> None:
        """Verbose mode logs debug records."""
        handler = configure_logging(verbose=True, console=log_console)

        assert handler.level == logging.DEBUG
        assert root_logger.level == logging.DEBUG

    def test_repeated_calls_replace_handler(
        self, root_logger: logging.Logger, log_console: Console
    ) -> None:
        """Calling twice leaves a single lsinfo handler installed."""
        first = configure_logging(console=log_console)
        second = configure_logging(verbose=True, console=log_console)

        assert first not in root_logger.handlers
        assert second in root_logger.handlers

    def test_records_reach_console(
        self, root_logger: logging.Logger, log_console: Console
    ) -> None:
        """Records logged anywhere end up on the given console."""
        configure_logging(verbose=True, console=log_console)

        logging.getLogger("lsinfo.listing.traversal").debug("probing entry")

        assert isinstance(log_console.file, io.StringIO)
        assert "probing entry" in log_console.file.getvalue()
