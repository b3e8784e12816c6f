"""Handlers behind the ``jswasm_fetch`` root logger.

Records are pushed onto a queue by a QueueHandler and written by a
QueueListener thread, so neither the event loop nor the extraction
worker blocks on terminal or file I/O. Output is split by level:

- stdout ("console"): below WARNING, bare INFO lines
- stderr ("errors"): WARNING and above
- rotating log file: everything at or above the file level
"""

import logging
import queue
import sys
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from typing import TextIO

from jswasm_fetch.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from jswasm_fetch.logger.formatters import ConsoleFormatter

ROOT_LOGGER_NAME = "jswasm_fetch"
CONSOLE_HANDLER_NAME = "console"
ERROR_HANDLER_NAME = "errors"


class LoggingSetupError(Exception):
    """Error in logging configuration."""


@dataclass
class LoggerState:
    """Process-wide logging state; the root logger is set up once."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below ``level``."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def level_number(level: str, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` to its number."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else default


def _create_stream_handler(
    stream: TextIO,
    name: str,
    level: str,
    below: int | None = None,
) -> logging.StreamHandler:
    """Create a terminal handler.

    Args:
        stream: Output stream
        name: Handler name, used to find it again when levels change
        level: Minimum level name
        below: If set, records at or above this level are dropped

    """
    handler = logging.StreamHandler(stream)
    handler.set_name(name)
    handler.setFormatter(
        ConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
            use_color=stream.isatty(),
        )
    )
    handler.setLevel(level_number(level))
    if below is not None:
        handler.addFilter(_BelowLevelFilter(below))
    return handler


def _create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create the rotating file handler.

    Raises:
        LoggingSetupError: If the log directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise LoggingSetupError(msg) from e

    handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    handler.setLevel(level_number(file_level))
    return handler


def setup_root_logger(
    state: LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Attach the queue handler to the root logger and start the listener.

    A log file that cannot be opened is reported on stderr and skipped;
    the tool keeps running with terminal output only.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [
        _create_stream_handler(
            sys.stdout,
            CONSOLE_HANDLER_NAME,
            console_level,
            below=logging.WARNING,
        ),
        _create_stream_handler(sys.stderr, ERROR_HANDLER_NAME, "WARNING"),
    ]
    file_error: LoggingSetupError | None = None
    if enable_file_logging:
        try:
            handlers.append(_create_file_handler(log_file, file_level))
        except LoggingSetupError as e:
            file_error = e

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue, *handlers, respect_handler_level=True
    )
    state.queue_listener.start()

    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True

    if file_error is not None:
        root_logger.warning("%s; continuing without file logging", file_error)
