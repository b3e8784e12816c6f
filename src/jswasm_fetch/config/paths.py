"""Filesystem locations used by the configuration layer."""

import os
from pathlib import Path

from jswasm_fetch.constants import CONFIG_DIR_ENV_VAR, SETTINGS_FILENAME


class Paths:
    """Resolve configuration paths, honoring environment overrides."""

    @staticmethod
    def config_dir() -> Path:
        """Return the configuration directory.

        ``JSWASM_FETCH_CONFIG_DIR`` takes precedence over
        ``~/.config/jswasm-fetch``.
        """
        override = os.getenv(CONFIG_DIR_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / "jswasm-fetch"

    @classmethod
    def settings_file(cls) -> Path:
        """Return the path of the INI settings file."""
        return cls.config_dir() / SETTINGS_FILENAME
