"""Shared CLI helpers: console output, error handling and logging."""

from .console import CLIConsole, console, with_error_handling
from .log import configure_logging

__all__ = [
    "CLIConsole",
    "console",
    "configure_logging",
    "with_error_handling",
]
