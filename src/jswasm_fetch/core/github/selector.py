"""Asset selection for release assets.

Picks the WASM build archive out of a release's assets by filename
suffix. Selection is deterministic: the first match in API order wins.
"""

from collections.abc import Iterable

from jswasm_fetch.constants import DEFAULT_ASSET_SUFFIX
from jswasm_fetch.core.github.models import Asset


class AssetSelector:
    """Select assets whose names end with a fixed suffix."""

    def __init__(self, suffix: str = DEFAULT_ASSET_SUFFIX) -> None:
        """Initialize selector.

        Args:
            suffix: Filename suffix of the wanted archive

        """
        self.suffix = suffix

    def filter(self, assets: Iterable[Asset] | None) -> list[Asset]:
        """Return all matching assets in their original order."""
        if not assets:
            return []
        return [asset for asset in assets if asset.name.endswith(self.suffix)]

    def select(self, assets: Iterable[Asset] | None) -> Asset | None:
        """Return the first matching asset, or None."""
        matches = self.filter(assets)
        return matches[0] if matches else None
