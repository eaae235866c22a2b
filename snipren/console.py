"""Console output and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler


# Rename confirmations go to stdout, errors and log records to stderr
console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the `snipren` logger to write through rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("snipren")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Avoid adding duplicate handlers when invoked repeatedly in one process
    if not logger.handlers:
        handler = RichHandler(
            console=err_console,
            markup=False,
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
