"""Public logging API: one root logger, module loggers beneath it."""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from jswasm_fetch.logger.config import load_log_settings
from jswasm_fetch.logger.handlers import (
    ROOT_LOGGER_NAME,
    LoggerState,
    setup_root_logger,
)

FLUSH_TIMEOUT_SECONDS = 5.0

_state = LoggerState()


def get_state() -> LoggerState:
    """Return the process-wide logger state."""
    return _state


def flush_all_handlers() -> None:
    """Wait for queued records to drain, then flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    deadline = time.monotonic() + FLUSH_TIMEOUT_SECONDS
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _stop_listener(state: LoggerState) -> None:
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(lambda: _stop_listener(get_state()))


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Return logger ``name``, initializing the root logger on first use.

    Arguments other than ``name`` only take effect on the first call;
    later level changes go through ``update_logger_levels``.
    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger in the ``jswasm_fetch`` hierarchy.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Downloading %s", asset.name)

    """
    return setup_logging(name=name)


def clear_logger_state() -> None:
    """Stop the listener and detach root handlers. For tests only.

    Module-level loggers keep working; the next ``get_logger`` call sets
    the root logger up again.
    """
    state = get_state()
    with state.lock:
        _stop_listener(state)
        state.log_queue = None
        state.root_initialized = False

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
