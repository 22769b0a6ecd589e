"""
Logging bootstrap for the CLI.

The library only emits records; the CLI decides where they go.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Route id3v1kit log records to stderr through Rich.

    Args:
        verbose: Show DEBUG records instead of warnings only

    Returns:
        The configured "id3v1kit" logger
    """
    logger = logging.getLogger("id3v1kit")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
