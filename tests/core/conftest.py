"""Pytest configuration and fixtures for core module tests.

Provides:
- Sample GitHub API payloads
- A factory for building zip archives on disk
- Settings pointing at a temporary destination
"""

import tempfile
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from jswasm_fetch.config import Settings

API_URL = (
    "https://api.github.com/repos/utelle/SQLite3MultipleCiphers/"
    "releases/latest"
)
ASSET_URL = (
    "https://github.com/utelle/SQLite3MultipleCiphers/releases/download/"
    "v2.0.2/sqlite3mc-2.0.2-sqlite-3.47.2-wasm.zip"
)
CDN_URL = "https://objects.githubusercontent.com/release-asset/abc123"


@pytest.fixture
def sample_release_data() -> dict[str, Any]:
    """Latest-release payload with one WASM archive among other assets."""
    return {
        "tag_name": "v2.0.2",
        "name": "SQLite3 Multiple Ciphers 2.0.2",
        "published_at": "2024-12-10T18:30:00Z",
        "body": "Based on SQLite 3.47.2",
        "prerelease": False,
        "assets": [
            {
                "name": "sqlite3mc-2.0.2-sqlite-3.47.2-win64.zip",
                "size": 4096,
                "browser_download_url": "https://example.com/win64.zip",
            },
            {
                "name": "sqlite3mc-2.0.2-sqlite-3.47.2-wasm.zip",
                "size": 2048,
                "browser_download_url": ASSET_URL,
            },
            {
                "name": "sqlite3mc-2.0.2-sqlite-3.47.2-amalgamation.zip",
                "size": 1024,
                "browser_download_url": "https://example.com/amalg.zip",
            },
        ],
    }


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[[dict[str, bytes]], Path]:
    """Return a factory that writes a zip with the given members."""
    counter = 0

    def _make(members: dict[str, bytes], name: str | None = None) -> Path:
        nonlocal counter
        counter += 1
        archive = tmp_path / (name or f"archive-{counter}.zip")
        with zipfile.ZipFile(archive, "w") as zf:
            for member, data in members.items():
                zf.writestr(member, data)
        return archive

    return _make


@pytest.fixture
def wasm_zip_bytes(
    make_zip: Callable[[dict[str, bytes]], Path],
) -> bytes:
    """Bytes of a realistic WASM build archive."""
    archive = make_zip(
        {
            "sqlite3mc-wasm/README.txt": b"readme",
            "sqlite3mc-wasm/jswasm/sqlite3.wasm": b"\x00asm\x01\x00\x00\x00",
            "sqlite3mc-wasm/jswasm/sqlite3.mjs": b"export default {};",
            "sqlite3mc-wasm/jswasm/sqlite3.js": b"var sqlite3;",
        },
        name="wasm-build.zip",
    )
    return archive.read_bytes()


@pytest.fixture
def isolated_tempdir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Route tempfile scratch directories into an inspectable directory."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Default settings writing into a temporary destination."""
    return Settings(output_dir=tmp_path / "sqlite-wasm")


@pytest.fixture
def api_url() -> str:
    """Latest-release endpoint of the default upstream."""
    return API_URL


@pytest.fixture
def asset_url() -> str:
    """Download URL of the sample WASM asset."""
    return ASSET_URL


@pytest.fixture
def cdn_url() -> str:
    """Redirect target of the sample asset download."""
    return CDN_URL
