"""Console logging for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "ascii_render"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """
    Attach a rich handler to the package logger.

    The library itself never installs handlers. Only the CLI calls this.
    Calling it again just updates the level.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if logger.handlers:
        return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.debug("logging configured (verbose=%s)", verbose)
    return logger
