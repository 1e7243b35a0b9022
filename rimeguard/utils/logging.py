"""Logging setup for RimeGuard."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru logger for command-line use.

    Removes the default handler and installs a single stderr sink. Debug mode
    adds module and line information to every message.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages (implies verbose)
    """
    logger.remove()

    if debug:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<level>{level: <8}</level> <cyan>{name}:{line}</cyan> {message}",
        )
    elif verbose:
        logger.add(sys.stderr, level="INFO", format="{message}")
    else:
        logger.add(sys.stderr, level="WARNING", format="<level>{level}</level>: {message}")
