"""Logging setup for Inkfeed."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from inkfeed.config.schema import LogLevel

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: LogLevel = "INFO",
    console: Console | None = None,
) -> logging.Logger:
    """Configure the ``inkfeed`` logger.

    Args:
        verbose: Log at DEBUG regardless of ``level``
        log_file: Optional file that also receives log records
        level: Level used when not verbose
        console: Rich console for the console handler (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("inkfeed")
    logger.setLevel(logging.DEBUG if verbose else level)

    # Drop handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(
        RichHandler(
            console=console or Console(stderr=True),
            show_path=verbose,
            rich_tracebacks=True,
        )
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
