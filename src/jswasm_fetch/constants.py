"""Constants shared across jswasm-fetch modules.

Keeping literal values in one place avoids drift between the settings
loader, the network layer, and the logger.
"""

from typing import Final

from jswasm_fetch import __version__

# =============================================================================
# Upstream defaults
# =============================================================================

DEFAULT_OWNER: Final[str] = "utelle"
DEFAULT_REPO: Final[str] = "SQLite3MultipleCiphers"
DEFAULT_ASSET_SUFFIX: Final[str] = "-wasm.zip"
DEFAULT_API_BASE_URL: Final[str] = "https://api.github.com"

# =============================================================================
# Output defaults
# =============================================================================

DEFAULT_OUTPUT_DIR: Final[str] = "sqlite-wasm"
DEFAULT_TARGET_DIR_NAME: Final[str] = "jswasm"

# =============================================================================
# Network
# =============================================================================

DEFAULT_TIMEOUT_SECONDS: Final[int] = 30
USER_AGENT: Final[str] = f"jswasm-fetch/{__version__}"
GITHUB_ACCEPT: Final[str] = "application/vnd.github+json"
TOKEN_ENV_VAR: Final[str] = "GITHUB_TOKEN"

HEADER_RATELIMIT_REMAINING: Final[str] = "X-RateLimit-Remaining"
HEADER_RATELIMIT_RESET: Final[str] = "X-RateLimit-Reset"

HTTP_OK: Final[int] = 200
HTTP_FORBIDDEN: Final[int] = 403

CHUNK_SIZE: Final[int] = 8192

# =============================================================================
# Configuration file
# =============================================================================

CONFIG_DIR_ENV_VAR: Final[str] = "JSWASM_FETCH_CONFIG_DIR"
SETTINGS_FILENAME: Final[str] = "settings.conf"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_UPSTREAM: Final[str] = "upstream"
SECTION_OUTPUT: Final[str] = "output"
SECTION_NETWORK: Final[str] = "network"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_OWNER: Final[str] = "owner"
KEY_REPO: Final[str] = "repo"
KEY_ASSET_SUFFIX: Final[str] = "asset_suffix"
KEY_API_BASE_URL: Final[str] = "api_base_url"
KEY_DIRECTORY: Final[str] = "directory"
KEY_TARGET_DIR: Final[str] = "target_dir"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Logging
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"

LOG_DIR_ENV_VAR: Final[str] = "JSWASM_FETCH_LOG_DIR"
LOG_FILENAME: Final[str] = "jswasm-fetch.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
