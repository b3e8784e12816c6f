"""INI-backed settings for jswasm-fetch.

Settings come from three layers, later layers winning:

1. Built-in defaults (upstream ``utelle/SQLite3MultipleCiphers``,
   output directory ``sqlite-wasm``)
2. ``settings.conf`` in the configuration directory, if present
3. Command-line overrides

The default settings file is optional; a file named with ``--config``
must exist. The tool never writes settings.
"""

import configparser
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from jswasm_fetch.config.paths import Paths
from jswasm_fetch.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_ASSET_SUFFIX,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OWNER,
    DEFAULT_REPO,
    DEFAULT_TARGET_DIR_NAME,
    DEFAULT_TIMEOUT_SECONDS,
    KEY_API_BASE_URL,
    KEY_ASSET_SUFFIX,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DIRECTORY,
    KEY_LOG_LEVEL,
    KEY_OWNER,
    KEY_REPO,
    KEY_TARGET_DIR,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_NETWORK,
    SECTION_OUTPUT,
    SECTION_UPSTREAM,
    VALID_LOG_LEVELS,
)
from jswasm_fetch.exceptions import ConfigurationError
from jswasm_fetch.logger import get_logger

logger = get_logger(__name__)

RawConfigDict = dict[str, str | dict[str, str]]


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved, validated settings for one run.

    Attributes:
        owner: Upstream repository owner
        repo: Upstream repository name
        asset_suffix: Filename suffix identifying the WASM build archive
        api_base_url: GitHub REST API base URL
        output_dir: Destination directory for the extracted files
        target_dir_name: Directory to locate inside the archive
        timeout_seconds: Base network timeout
        log_level: File log level
        console_log_level: Console log level

    """

    owner: str = DEFAULT_OWNER
    repo: str = DEFAULT_REPO
    asset_suffix: str = DEFAULT_ASSET_SUFFIX
    api_base_url: str = DEFAULT_API_BASE_URL
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    target_dir_name: str = DEFAULT_TARGET_DIR_NAME
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL

    @property
    def slug(self) -> str:
        """Return ``owner/repo``."""
        return f"{self.owner}/{self.repo}"

    def with_overrides(self, **overrides: Any) -> "Settings":  # noqa: ANN401
        """Return a copy with every non-None override applied and validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "output_dir" in changes:
            changes["output_dir"] = Path(changes["output_dir"])
        updated = replace(self, **changes)
        validate_settings(updated)
        return updated


def validate_settings(settings: Settings) -> None:
    """Validate resolved settings.

    Raises:
        ConfigurationError: If any value is unusable

    """
    for field_name in ("owner", "repo", "asset_suffix", "target_dir_name"):
        if not getattr(settings, field_name).strip():
            msg = f"'{field_name}' must not be empty"
            raise ConfigurationError(msg)

    if "/" in settings.owner or "/" in settings.repo:
        msg = f"invalid repository '{settings.slug}'"
        raise ConfigurationError(msg)

    if settings.timeout_seconds <= 0:
        msg = f"'{KEY_TIMEOUT_SECONDS}' must be positive"
        raise ConfigurationError(msg)

    for key, level in (
        (KEY_LOG_LEVEL, settings.log_level),
        (KEY_CONSOLE_LOG_LEVEL, settings.console_log_level),
    ):
        if level not in VALID_LOG_LEVELS:
            msg = (
                f"'{key}' must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got '{level}'"
            )
            raise ConfigurationError(msg)


class SettingsLoader:
    """Load settings from the INI file on top of built-in defaults."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize the loader.

        Args:
            settings_file: Path to settings.conf. An explicit path must
                exist; the default Paths.settings_file() is optional.

        """
        self.required = settings_file is not None
        self.settings_file = settings_file or Paths.settings_file()

    @staticmethod
    def get_defaults() -> RawConfigDict:
        """Get default configuration values in INI layout."""
        return {
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_UPSTREAM: {
                KEY_OWNER: DEFAULT_OWNER,
                KEY_REPO: DEFAULT_REPO,
                KEY_ASSET_SUFFIX: DEFAULT_ASSET_SUFFIX,
                KEY_API_BASE_URL: DEFAULT_API_BASE_URL,
            },
            SECTION_OUTPUT: {
                KEY_DIRECTORY: DEFAULT_OUTPUT_DIR,
                KEY_TARGET_DIR: DEFAULT_TARGET_DIR_NAME,
            },
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
        }

    def _create_parser(self) -> configparser.ConfigParser:
        """Create a ConfigParser pre-populated with the defaults."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        defaults = self.get_defaults()

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for section, values in defaults.items():
            if isinstance(values, dict):
                config.add_section(section)
                for key, value in values.items():
                    config.set(section, key, value)

        return config

    def load(self) -> Settings:
        """Load and validate settings.

        Returns:
            Resolved Settings

        Raises:
            ConfigurationError: If an explicit file is missing, or the
                file cannot be parsed or holds invalid values

        """
        config = self._create_parser()

        if self.settings_file.is_file():
            logger.debug("Loading settings from %s", self.settings_file)
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                msg = f"cannot parse {self.settings_file}: {e}"
                raise ConfigurationError(msg) from e
        elif self.required:
            msg = f"settings file not found: {self.settings_file}"
            raise ConfigurationError(msg)
        else:
            logger.debug(
                "No settings file at %s, using defaults", self.settings_file
            )

        try:
            timeout = config.getint(SECTION_NETWORK, KEY_TIMEOUT_SECONDS)
        except ValueError as e:
            msg = f"'{KEY_TIMEOUT_SECONDS}' must be an integer"
            raise ConfigurationError(msg) from e

        upstream = config[SECTION_UPSTREAM]
        output = config[SECTION_OUTPUT]
        defaults = config[SECTION_DEFAULT]

        settings = Settings(
            owner=upstream[KEY_OWNER].strip(),
            repo=upstream[KEY_REPO].strip(),
            asset_suffix=upstream[KEY_ASSET_SUFFIX].strip(),
            api_base_url=upstream[KEY_API_BASE_URL].strip().rstrip("/"),
            output_dir=Path(output[KEY_DIRECTORY].strip()).expanduser(),
            target_dir_name=output[KEY_TARGET_DIR].strip(),
            timeout_seconds=timeout,
            log_level=defaults[KEY_LOG_LEVEL].strip().upper(),
            console_log_level=defaults[KEY_CONSOLE_LOG_LEVEL].strip().upper(),
        )
        validate_settings(settings)
        return settings
