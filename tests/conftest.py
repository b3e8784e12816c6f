"""Pytest configuration and fixtures for jswasm-fetch tests."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

# Keep test runs away from the user's log and config directories. This must
# happen before any jswasm_fetch module is imported.
_TEST_ROOT = Path(tempfile.gettempdir()) / f"jswasm-fetch-tests-{os.getpid()}"
os.environ.setdefault("JSWASM_FETCH_LOG_DIR", str(_TEST_ROOT / "logs"))
os.environ.setdefault("JSWASM_FETCH_CONFIG_DIR", str(_TEST_ROOT / "config"))


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("jswasm_fetch"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture(autouse=True)
def no_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's GITHUB_TOKEN never leaks into tests."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
