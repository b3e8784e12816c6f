"""Low-level GitHub API client for the release metadata request.

One GET against ``/repos/{owner}/{repo}/releases/latest``. There is no
retry: every failure is mapped to a specific exception and propagated.
"""

from typing import Any

import aiohttp
import orjson

from jswasm_fetch.constants import (
    DEFAULT_API_BASE_URL,
    GITHUB_ACCEPT,
    HTTP_FORBIDDEN,
    HTTP_OK,
    USER_AGENT,
)
from jswasm_fetch.core.auth import GitHubAuthManager
from jswasm_fetch.exceptions import (
    ApiError,
    RateLimitExceededError,
    TransportError,
)
from jswasm_fetch.logger import get_logger

logger = get_logger(__name__)


class ReleaseAPIClient:
    """Handles direct communication with GitHub API for release data."""

    def __init__(
        self,
        owner: str,
        repo: str,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager | None = None,
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout_seconds: int | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            owner: Repository owner
            repo: Repository name
            session: aiohttp session for making requests
            auth_manager: GitHub authentication manager
                (creates default if not provided)
            api_base_url: GitHub REST API base URL
            timeout_seconds: Base timeout; None leaves the session default

        """
        self.owner = owner
        self.repo = repo
        self.session = session
        self.auth_manager = auth_manager or GitHubAuthManager.create_default()
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = (
            aiohttp.ClientTimeout(
                total=timeout_seconds * 3,
                sock_connect=timeout_seconds,
            )
            if timeout_seconds
            else None
        )

    @property
    def latest_release_url(self) -> str:
        """URL of the latest-release endpoint."""
        return (
            f"{self.api_base_url}/repos/{self.owner}/"
            f"{self.repo}/releases/latest"
        )

    def _build_headers(self) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT, "Accept": GITHUB_ACCEPT}
        return self.auth_manager.apply_auth(headers)

    async def fetch_latest_release(self) -> dict[str, Any]:
        """Fetch the latest release document.

        Returns:
            Parsed release JSON object

        Raises:
            RateLimitExceededError: 403 with no remaining requests
            ApiError: Any other non-200 status, or a non-object body
            TransportError: Network-level failure

        """
        url = self.latest_release_url
        logger.debug("GET %s", url)

        kwargs: dict[str, Any] = {"headers": self._build_headers()}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            async with self.session.get(url, **kwargs) as response:
                self.auth_manager.update_rate_limit_info(response.headers)
                body = await response.read()
                status = response.status
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.debug("Request to %s failed: %r", url, e)
            raise TransportError(str(e) or type(e).__name__) from e

        if status == HTTP_OK:
            data = _decode_json(body)
            if not isinstance(data, dict):
                raise ApiError(status, "response body is not a JSON object")
            return data

        if status == HTTP_FORBIDDEN and self.auth_manager.is_rate_limited():
            raise RateLimitExceededError(
                reset_at=self.auth_manager.rate_limit_reset
            )

        error_data = _decode_json(body)
        api_message = (
            error_data.get("message") if isinstance(error_data, dict) else None
        )
        raise ApiError(status, api_message)


def _decode_json(body: bytes) -> Any:  # noqa: ANN401
    """Decode a JSON body, returning None when it is not valid JSON."""
    try:
        return orjson.loads(body)
    except orjson.JSONDecodeError:
        return None
