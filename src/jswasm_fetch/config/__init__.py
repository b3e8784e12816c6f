"""Configuration management for jswasm-fetch."""

from jswasm_fetch.config.paths import Paths
from jswasm_fetch.config.settings import (
    Settings,
    SettingsLoader,
    validate_settings,
)

__all__ = ["Paths", "Settings", "SettingsLoader", "validate_settings"]
