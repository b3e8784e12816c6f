"""Release and extraction output.

All output goes through the logger at INFO level, which the console
handler prints without decoration.
"""

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from jswasm_fetch.core.github import Asset, Release
from jswasm_fetch.logger import get_logger

logger = get_logger(__name__)


def format_size_kb(size: int) -> str:
    """Format a byte count as kilobytes with two decimals.

    >>> format_size_kb(2048)
    '2.00 KB'
    >>> format_size_kb(0)
    'unknown'
    """
    if not size:
        return "unknown"
    return f"{size / 1024:.2f} KB"


def format_published(published_at: datetime | None) -> str:
    """Format a publication timestamp in local time."""
    if published_at is None:
        return "unknown"
    return published_at.astimezone().strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def display_release_info(release: Release) -> None:
    """Show release name, version, publish time, and description."""
    logger.info("")
    logger.info("Latest Release: %s", release.name or "unnamed")
    logger.info("Version: %s", release.tag_name or "untagged")
    logger.info("Published: %s", format_published(release.published_at))
    logger.info("")
    logger.info("Description:")
    logger.info("%s", release.body or "No description provided")


def display_wasm_assets(assets: Iterable[Asset]) -> None:
    """List matching WASM build archives."""
    logger.info("")
    logger.info("WASM Build Files:")
    for asset in assets:
        logger.info("- %s", asset.name)
        logger.info("  Size: %s", format_size_kb(asset.size))
        logger.info("  Download: %s", asset.browser_download_url)


def display_extracted_files(files: Iterable[Path], root: Path) -> None:
    """List copied files relative to the output root."""
    logger.info("Downloaded and unzipped:")
    for path in files:
        try:
            shown = path.relative_to(root)
        except ValueError:
            shown = path
        logger.info("‣ %s", shown.as_posix())
