"""Tests for logging setup."""

import io
import logging
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

from inkfeed.config.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger("inkfeed")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_handler(self, buffer: io.StringIO) -> None:
        """Test that records reach the rich console."""
        logger = setup_logging(console=Console(file=buffer, width=120))

        assert logger.name == "inkfeed"
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0], RichHandler)

        logging.getLogger("inkfeed.atom.writer").info("hello from writer")
        assert "hello from writer" in buffer.getvalue()

    def test_verbose_enables_debug(self, buffer: io.StringIO) -> None:
        logger = setup_logging(verbose=True, console=Console(file=buffer))
        assert logger.level == logging.DEBUG

    def test_level(self, buffer: io.StringIO) -> None:
        logger = setup_logging(level="WARNING", console=Console(file=buffer))
        assert logger.level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(
        self, buffer: io.StringIO
    ) -> None:
        setup_logging(console=Console(file=buffer))
        logger = setup_logging(console=Console(file=buffer))
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path: Path, buffer: io.StringIO) -> None:
        """Test that records are also written to the log file."""
        log_file = tmp_path / "logs" / "inkfeed.log"
        logger = setup_logging(log_file=log_file, console=Console(file=buffer))

        logger.warning("written to file")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "inkfeed - WARNING - written to file" in content
