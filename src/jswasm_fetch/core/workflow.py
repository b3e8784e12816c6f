"""End-to-end fetch workflow.

Fetch release metadata, select the WASM archive, download it to a
scratch directory, and extract its ``jswasm`` folder. Steps run strictly
in order; any failure aborts the run.

Zero-match policy: a release without a matching asset is reported and the
run ends successfully without downloading anything.
"""

from __future__ import annotations

import asyncio
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from jswasm_fetch.core.auth import GitHubAuthManager
from jswasm_fetch.core.download import DownloadService
from jswasm_fetch.core.extract import ArchiveExtractor, ExtractionResult
from jswasm_fetch.core.github import (
    Asset,
    AssetSelector,
    Release,
    ReleaseFetcher,
)
from jswasm_fetch.exceptions import ExtractionError
from jswasm_fetch.logger import get_logger
from jswasm_fetch.ui import (
    display_extracted_files,
    display_release_info,
    display_wasm_assets,
)

if TYPE_CHECKING:
    import aiohttp

    from jswasm_fetch.config import Settings

logger = get_logger(__name__)

DOWNLOAD_DIR_PREFIX = "jswasm-fetch-download-"


@dataclass(slots=True, frozen=True)
class WorkflowResult:
    """Outcome of one workflow run.

    Attributes:
        release: Release that was inspected
        asset: Selected asset, None when nothing matched
        extraction: Extraction outcome, None when nothing was downloaded

    """

    release: Release
    asset: Asset | None = None
    extraction: ExtractionResult | None = None

    @property
    def downloaded(self) -> bool:
        """Whether an archive was downloaded and extracted."""
        return self.extraction is not None


class WasmFetchWorkflow:
    """Run the fetch, select, download and extract pipeline once."""

    def __init__(
        self,
        settings: Settings,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager | None = None,
    ) -> None:
        """Initialize the workflow.

        Args:
            settings: Resolved settings for this run
            session: aiohttp session shared by all network steps
            auth_manager: Optional GitHub authentication manager

        """
        self.settings = settings
        self.fetcher = ReleaseFetcher(
            settings.owner,
            settings.repo,
            session,
            auth_manager=auth_manager or GitHubAuthManager.create_default(),
            api_base_url=settings.api_base_url,
            timeout_seconds=settings.timeout_seconds,
        )
        self.selector = AssetSelector(settings.asset_suffix)
        self.downloader = DownloadService(
            session, timeout_seconds=settings.timeout_seconds
        )
        self.extractor = ArchiveExtractor(settings.target_dir_name)

    async def run(self) -> WorkflowResult:
        """Execute the pipeline.

        Returns:
            WorkflowResult describing what was done

        Raises:
            JswasmFetchError: Any step failed

        """
        logger.info(
            "Fetching latest release information for %s...",
            self.settings.slug,
        )
        release = await self.fetcher.fetch_latest_release()
        display_release_info(release)

        if not release.assets:
            logger.info("")
            logger.info("No assets found for this release.")
            return WorkflowResult(release=release)

        matches = self.selector.filter(release.assets)
        if not matches:
            logger.info("")
            logger.info("No WASM build files found in this release.")
            return WorkflowResult(release=release)

        display_wasm_assets(matches)
        if len(matches) > 1:
            logger.warning(
                "Found %d WASM assets, using the first: %s",
                len(matches),
                matches[0].name,
            )
        asset = matches[0]

        extraction = await self._download_and_extract(asset)
        return WorkflowResult(
            release=release, asset=asset, extraction=extraction
        )

    async def _download_and_extract(self, asset: Asset) -> ExtractionResult:
        """Download ``asset`` into a scratch directory and extract it.

        Raises:
            DownloadError: Download failed
            ExtractionError: Archive corrupt or target directory absent

        """
        destination = self.settings.output_dir
        logger.info("")
        logger.info("Downloading and unzipping %s...", asset.name)

        with tempfile.TemporaryDirectory(prefix=DOWNLOAD_DIR_PREFIX) as tmp:
            archive = Path(tmp) / Path(asset.name).name
            await self.downloader.download_asset(asset, archive)

            loop = asyncio.get_running_loop()
            result = await loop.run_in_executor(
                None, self.extractor.extract, archive, destination
            )

        if result is None:
            msg = (
                f"no '{self.settings.target_dir_name}' directory found in "
                f"{asset.name}"
            )
            raise ExtractionError(msg)

        display_extracted_files(result.files, destination)
        return result
