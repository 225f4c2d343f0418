"""Loguru sink setup for the CLI."""

import sys

from loguru import logger


def configure_logging(verbose: bool = False) -> None:
    """Send log records to standard error.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<dim>{time:HH:mm:ss}</dim> <level>{level: <8}</level> {message}",
    )
