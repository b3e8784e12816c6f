"""Log file location and runtime level changes."""

import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from jswasm_fetch.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILENAME,
)
from jswasm_fetch.logger.handlers import (
    CONSOLE_HANDLER_NAME,
    LoggerState,
    level_number,
)


def load_log_settings() -> tuple[str, str, Path]:
    """Return the bootstrap console level, file level and log file path.

    ``JSWASM_FETCH_LOG_DIR`` overrides the log directory; tests set it so
    runs never write to the user's config directory.
    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = Path.home() / ".config" / "jswasm-fetch" / "logs"

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_dir / LOG_FILENAME


def update_handler_levels(
    state: LoggerState,
    console_level: str,
    file_level: str,
) -> None:
    """Change console and file levels on the running listener.

    The stderr handler always stays at WARNING.
    """
    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(level_number(file_level))
        elif handler.name == CONSOLE_HANDLER_NAME:
            handler.setLevel(level_number(console_level))
