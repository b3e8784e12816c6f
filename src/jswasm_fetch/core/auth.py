"""GitHub authentication and rate-limit tracking.

The token is read from the ``GITHUB_TOKEN`` environment variable and sent
as a bearer ``Authorization`` header. Rate-limit headers from API
responses are recorded so they can be reported when a request is refused.
"""

import os
from collections.abc import Mapping

from jswasm_fetch.constants import (
    HEADER_RATELIMIT_REMAINING,
    HEADER_RATELIMIT_RESET,
    TOKEN_ENV_VAR,
)
from jswasm_fetch.logger import get_logger

logger = get_logger(__name__)


class GitHubAuthManager:
    """Apply GitHub authentication and track rate-limit information."""

    def __init__(self, token: str | None = None) -> None:
        """Initialize the auth manager.

        Args:
            token: Explicit token. When None, ``GITHUB_TOKEN`` is consulted
                on every call to ``get_token``.

        """
        self._token = token
        self.remaining_requests: int | None = None
        self.rate_limit_reset: int | None = None

    @classmethod
    def create_default(cls) -> "GitHubAuthManager":
        """Create an auth manager backed by the environment."""
        return cls()

    def get_token(self) -> str | None:
        """Return the configured token, or None when unauthenticated."""
        token = self._token or os.getenv(TOKEN_ENV_VAR)
        return token.strip() if token and token.strip() else None

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Apply GitHub authentication to the given request headers.

        Args:
            headers: HTTP headers to update.

        Returns:
            Headers with ``Authorization`` set when a token is available.

        """
        token = self.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
            logger.debug("Applied GitHub authentication (token present)")
        else:
            logger.debug(
                "No %s set, unauthenticated rate limits apply", TOKEN_ENV_VAR
            )
        return headers

    def update_rate_limit_info(self, headers: Mapping[str, str]) -> None:
        """Record rate-limit information from response headers.

        Args:
            headers: Response headers from a GitHub API call.

        """
        remaining = headers.get(HEADER_RATELIMIT_REMAINING)
        reset = headers.get(HEADER_RATELIMIT_RESET)
        try:
            self.remaining_requests = (
                int(remaining) if remaining is not None else None
            )
            self.rate_limit_reset = int(reset) if reset is not None else None
        except (ValueError, TypeError):
            logger.warning("Invalid rate limit headers received")
            return

        if self.remaining_requests is not None:
            logger.debug(
                "GitHub rate limit remaining: %s", self.remaining_requests
            )

    def is_rate_limited(self) -> bool:
        """Return True when the last response reported zero remaining."""
        return self.remaining_requests == 0
