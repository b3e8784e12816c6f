"""GitHub release access: API client, models, and asset selection."""

from jswasm_fetch.core.github.client import ReleaseAPIClient
from jswasm_fetch.core.github.fetcher import ReleaseFetcher
from jswasm_fetch.core.github.models import Asset, Release
from jswasm_fetch.core.github.selector import AssetSelector

__all__ = [
    "Asset",
    "AssetSelector",
    "Release",
    "ReleaseAPIClient",
    "ReleaseFetcher",
]
