"""Fixtures for download service tests."""

from pathlib import Path

import aiohttp
import pytest
import pytest_asyncio


@pytest_asyncio.fixture
async def session():
    """Provide a real aiohttp session (requests are intercepted)."""
    async with aiohttp.ClientSession() as s:
        yield s


@pytest.fixture
def tmp_file(tmp_path: Path) -> Path:
    """Destination path for a downloaded file."""
    return tmp_path / "downloads" / "asset-wasm.zip"
