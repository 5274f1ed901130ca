"""Opt-in log output for the dagstore logger.

The library only emits DEBUG records and installs no handler on import.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dagstore"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Send dagstore log records to a Rich handler.

    Calling this again replaces the handler installed by the previous call.

    Args:
        verbose: Log at DEBUG and show source paths. Otherwise log at INFO.
        console: Console to write to. Defaults to stderr.

    Returns:
        The configured dagstore logger.

    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_time=False,
        show_path=verbose,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
