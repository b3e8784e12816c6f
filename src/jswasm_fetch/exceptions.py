"""Exception classes for jswasm-fetch operations."""

from datetime import UTC, datetime

from jswasm_fetch.constants import TOKEN_ENV_VAR


class JswasmFetchError(Exception):
    """Base exception for jswasm-fetch operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str) -> None:
        """Initialize error with a message.

        Args:
            message: Error message describing the failure.

        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return formatted error message."""
        return f"{self.error_prefix}: {self.message}"


class ConfigurationError(JswasmFetchError):
    """Raised when settings contain invalid values."""

    error_prefix = "Invalid configuration"


class RateLimitExceededError(JswasmFetchError):
    """Raised when GitHub refuses a request because the rate limit is spent."""

    error_prefix = "GitHub API rate limit exceeded"

    def __init__(
        self, message: str | None = None, reset_at: int | None = None
    ) -> None:
        """Initialize with a remediation hint by default.

        Args:
            message: Custom message replacing the hint.
            reset_at: Epoch seconds from ``X-RateLimit-Reset``, if known.

        """
        self.reset_at = reset_at
        if message is None:
            message = (
                f"Use {TOKEN_ENV_VAR} environment variable to increase the "
                "limit."
            )
            if reset_at is not None:
                resets = datetime.fromtimestamp(reset_at, tz=UTC).astimezone()
                message += f" The limit resets at {resets:%H:%M:%S}."
        super().__init__(message)


class ApiError(JswasmFetchError):
    """Raised when the release metadata request returns a non-200 status."""

    error_prefix = "API request failed"

    def __init__(self, status: int, api_message: str | None = None) -> None:
        """Initialize with the HTTP status and the API's message field.

        Args:
            status: HTTP status code of the response.
            api_message: ``message`` field of the error body, if any.

        """
        self.status = status
        self.api_message = api_message or "Unknown error"
        super().__init__(
            f"status code {status}: {self.api_message}",
        )


class TransportError(JswasmFetchError):
    """Raised on network-level failures (DNS, connection reset, timeout)."""

    error_prefix = "Request failed"


class DownloadError(JswasmFetchError):
    """Raised when an asset download does not complete successfully."""

    error_prefix = "Download failed"


class ExtractionError(JswasmFetchError):
    """Raised when an archive is corrupt or lacks the expected directory."""

    error_prefix = "Extraction failed"
