"""Logging utilities for jswasm-fetch.

Usage:
    >>> from jswasm_fetch.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Processing %s", name)  # Use %-style formatting

Handlers are only attached to the root ``jswasm_fetch`` logger; never
call ``logging.basicConfig()``.
"""

from jswasm_fetch.logger.config import update_handler_levels
from jswasm_fetch.logger.formatters import PLAIN, ConsoleFormatter
from jswasm_fetch.logger.handlers import LoggingSetupError
from jswasm_fetch.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    get_state,
    setup_logging,
)

__all__ = [
    "PLAIN",
    "ConsoleFormatter",
    "LoggingSetupError",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_levels",
]


def update_logger_levels(console_level: str, file_level: str) -> None:
    """Apply configured levels to the running console and file handlers.

    Example:
        >>> update_logger_levels("DEBUG", "INFO")

    """
    update_handler_levels(get_state(), console_level, file_level)
