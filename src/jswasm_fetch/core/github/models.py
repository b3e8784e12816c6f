"""GitHub release and asset models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class Asset:
    """Represents a GitHub release asset.

    Attributes:
        name: Asset filename
        size: Asset size in bytes (0 when the API omits it)
        browser_download_url: Direct download URL for the asset

    """

    name: str
    size: int
    browser_download_url: str

    @classmethod
    def from_api_response(cls, asset_data: dict[str, Any]) -> Asset | None:
        """Create Asset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            Asset instance or None if required fields are missing

        """
        if not isinstance(asset_data, dict):
            return None

        name = asset_data.get("name") or ""
        download_url = asset_data.get("browser_download_url") or ""
        if not name or not download_url:
            return None

        try:
            size = int(asset_data.get("size") or 0)
        except (TypeError, ValueError):
            size = 0

        return cls(name=name, size=size, browser_download_url=download_url)


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release with its metadata and assets.

    Attributes:
        owner: Repository owner
        repo: Repository name
        tag_name: Release tag ("" when absent)
        name: Release display name ("" when absent)
        published_at: Publication time, None when absent or unparseable
        body: Release notes ("" when absent)
        assets: Release assets in API order

    """

    owner: str
    repo: str
    tag_name: str = ""
    name: str = ""
    published_at: datetime | None = None
    body: str = ""
    assets: list[Asset] = field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, owner: str, repo: str, api_data: dict[str, Any]
    ) -> Release:
        """Create Release from GitHub API response data.

        Args:
            owner: Repository owner
            repo: Repository name
            api_data: Raw release data from GitHub API

        Returns:
            Release instance

        """
        assets = []
        for asset_data in api_data.get("assets") or []:
            asset = Asset.from_api_response(asset_data)
            if asset:
                assets.append(asset)

        return cls(
            owner=owner,
            repo=repo,
            tag_name=api_data.get("tag_name") or "",
            name=api_data.get("name") or "",
            published_at=_parse_timestamp(api_data.get("published_at")),
            body=api_data.get("body") or "",
            assets=assets,
        )


def _parse_timestamp(value: Any) -> datetime | None:  # noqa: ANN401
    """Parse a GitHub ISO 8601 timestamp ("2024-05-01T12:00:00Z")."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
