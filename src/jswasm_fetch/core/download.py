"""Download service for release assets.

Streams an asset to disk with aiofiles. Redirects are handled by hand:
GitHub answers ``browser_download_url`` with a single 302 to its object
storage, so exactly one hop is followed and anything further is treated
as a failure. A partially written file never survives a failed download.
"""

import contextlib
from pathlib import Path
from urllib.parse import urljoin

import aiofiles
import aiohttp

from jswasm_fetch.constants import CHUNK_SIZE, USER_AGENT
from jswasm_fetch.core.github import Asset
from jswasm_fetch.exceptions import DownloadError
from jswasm_fetch.logger import get_logger

logger = get_logger(__name__)

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


class DownloadService:
    """Service for downloading release assets to local files."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout_seconds: int | None = None,
    ) -> None:
        """Initialize download service with HTTP session.

        Args:
            session: aiohttp session for downloads
            timeout_seconds: Base timeout; the whole transfer may take
                up to sixty times this value

        """
        self.session = session
        self.timeout = (
            aiohttp.ClientTimeout(
                total=timeout_seconds * 60,
                sock_read=timeout_seconds * 3,
                sock_connect=timeout_seconds,
            )
            if timeout_seconds
            else None
        )

    async def download_asset(self, asset: Asset, dest: Path) -> Path:
        """Download a release asset.

        Args:
            asset: GitHub asset containing download information
            dest: Destination path

        Returns:
            Path to the downloaded file

        """
        logger.debug("Downloading asset %s (%s bytes)", asset.name, asset.size)
        return await self.download_file(asset.browser_download_url, dest)

    async def download_file(self, url: str, dest: Path) -> Path:
        """Download ``url`` to ``dest``, following at most one redirect.

        Args:
            url: URL to download from
            dest: Destination path

        Returns:
            ``dest`` once the file is complete

        Raises:
            DownloadError: Non-success status, a second redirect, or a
                network failure
            OSError: Writing the file failed

        """
        try:
            await self._download(url, dest)
        except aiohttp.ClientError as e:
            _remove_partial(dest)
            msg = f"Unable to download {url}: {e}"
            raise DownloadError(msg) from e
        except TimeoutError as e:
            _remove_partial(dest)
            msg = f"Unable to download {url}: timed out"
            raise DownloadError(msg) from e
        except BaseException:
            _remove_partial(dest)
            raise

        logger.debug("Download completed: %s", dest)
        return dest

    async def _download(self, url: str, dest: Path) -> None:
        async with self._get(url) as response:
            location = response.headers.get("Location")
            if response.status in REDIRECT_STATUSES and location:
                target = urljoin(url, location)
                logger.debug("Following redirect: %s", target)
            else:
                await self._write_response(url, response, dest)
                return

        async with self._get(target) as response:
            await self._write_response(target, response, dest)

    def _get(self, url: str):  # noqa: ANN202
        kwargs = {
            "headers": {"User-Agent": USER_AGENT},
            "allow_redirects": False,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return self.session.get(url, **kwargs)

    async def _write_response(
        self,
        url: str,
        response: aiohttp.ClientResponse,
        dest: Path,
    ) -> None:
        """Stream a successful response body into ``dest``.

        Raises:
            DownloadError: If the response status is not 2xx

        """
        if not 200 <= response.status < 300:  # noqa: PLR2004
            msg = f"Unable to download {url}: HTTP {response.status}"
            raise DownloadError(msg)

        total = int(response.headers.get("Content-Length", 0) or 0)
        logger.debug("Downloading file: %s", dest.name)
        logger.debug("   URL: %s", url)
        logger.debug(
            "   Size: %s bytes" if total > 0 else "   Size: Unknown%s",
            f"{total:,}" if total > 0 else "",
        )

        dest.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(dest, mode="wb") as f:
            async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                if chunk:
                    await f.write(chunk)


def _remove_partial(dest: Path) -> None:
    """Delete a partially written download, if any."""
    if dest.exists():
        logger.debug("Removing partial download: %s", dest)
        with contextlib.suppress(OSError):
            dest.unlink()
