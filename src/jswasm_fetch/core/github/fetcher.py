"""High-level release fetching: API call plus model conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jswasm_fetch.constants import DEFAULT_API_BASE_URL
from jswasm_fetch.core.auth import GitHubAuthManager
from jswasm_fetch.core.github.client import ReleaseAPIClient
from jswasm_fetch.core.github.models import Release
from jswasm_fetch.logger import get_logger

if TYPE_CHECKING:
    import aiohttp

logger = get_logger(__name__)


class ReleaseFetcher:
    """Fetch the latest release of one repository as a ``Release``."""

    def __init__(
        self,
        owner: str,
        repo: str,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager | None = None,
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout_seconds: int | None = None,
    ) -> None:
        """Initialize the release fetcher.

        Args:
            owner: Repository owner
            repo: Repository name
            session: aiohttp session for making requests
            auth_manager: Optional GitHub authentication manager
            api_base_url: GitHub REST API base URL
            timeout_seconds: Base network timeout

        """
        self.owner = owner
        self.repo = repo
        self.api_client = ReleaseAPIClient(
            owner,
            repo,
            session,
            auth_manager=auth_manager,
            api_base_url=api_base_url,
            timeout_seconds=timeout_seconds,
        )

    async def fetch_latest_release(self) -> Release:
        """Fetch and parse the latest release.

        Raises:
            RateLimitExceededError, ApiError, TransportError: from the client

        """
        api_data = await self.api_client.fetch_latest_release()
        release = Release.from_api_response(self.owner, self.repo, api_data)
        logger.debug(
            "Release %s for %s/%s has %d assets",
            release.tag_name or "<untagged>",
            self.owner,
            self.repo,
            len(release.assets),
        )
        return release
