"""Tests for DownloadService."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest
from aioresponses import aioresponses

from jswasm_fetch.core.download import DownloadService
from jswasm_fetch.core.github import Asset
from jswasm_fetch.exceptions import DownloadError


async def failing_chunk_gen(
    chunks: list[bytes], error: Exception
) -> AsyncGenerator[bytes, None]:
    """Yield ``chunks`` and then raise ``error``."""
    for chunk in chunks:
        yield chunk
    raise error


class _FailingFile:
    """aiofiles stand-in whose writes fail after the file is created."""

    def __init__(self, path):
        self.path = path

    async def __aenter__(self):
        self.path.write_bytes(b"partial")
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def write(self, chunk):
        raise OSError(28, "No space left on device")


class TestDownloadFile:
    """Test DownloadService.download_file."""

    @pytest.mark.asyncio
    async def test_download_success(self, session, tmp_file, asset_url):
        """A 200 body is written byte for byte."""
        content = b"PK\x03\x04" + b"x" * 20000
        with aioresponses() as m:
            m.get(asset_url, body=content)
            result = await DownloadService(session).download_file(
                asset_url, tmp_file
            )

        assert result == tmp_file
        assert tmp_file.read_bytes() == content

    @pytest.mark.asyncio
    async def test_follows_single_redirect(
        self, session, tmp_file, asset_url, cdn_url
    ):
        """One redirect is followed and the final body is saved exactly."""
        content = b"final archive bytes"
        with aioresponses() as m:
            m.get(asset_url, status=302, headers={"Location": cdn_url})
            m.get(cdn_url, body=content)
            await DownloadService(session).download_file(asset_url, tmp_file)

        assert tmp_file.read_bytes() == content

    @pytest.mark.asyncio
    async def test_relative_redirect_location(
        self, session, tmp_file, asset_url
    ):
        """A relative Location is resolved against the request URL."""
        with aioresponses() as m:
            m.get(
                asset_url,
                status=301,
                headers={"Location": "/mirror/asset-wasm.zip"},
            )
            m.get("https://github.com/mirror/asset-wasm.zip", body=b"ok")
            await DownloadService(session).download_file(asset_url, tmp_file)

        assert tmp_file.read_bytes() == b"ok"

    @pytest.mark.asyncio
    async def test_second_redirect_fails(
        self, session, tmp_file, asset_url, cdn_url
    ):
        """Only one hop is followed; a second redirect is an error."""
        with aioresponses() as m:
            m.get(asset_url, status=302, headers={"Location": cdn_url})
            m.get(
                cdn_url,
                status=302,
                headers={"Location": "https://elsewhere.example.com/x"},
            )
            with pytest.raises(DownloadError, match="HTTP 302"):
                await DownloadService(session).download_file(
                    asset_url, tmp_file
                )

        assert not tmp_file.exists()

    @pytest.mark.asyncio
    async def test_not_found(self, session, tmp_file, asset_url):
        """A non-success status raises DownloadError, no file is left."""
        with aioresponses() as m:
            m.get(asset_url, status=404, body=b"Not Found")
            with pytest.raises(DownloadError, match="HTTP 404"):
                await DownloadService(session).download_file(
                    asset_url, tmp_file
                )

        assert not tmp_file.exists()

    @pytest.mark.asyncio
    async def test_connection_error(self, session, tmp_file, asset_url):
        """Network failures become DownloadError with the cause chained."""
        cause = aiohttp.ClientConnectionError("reset by peer")
        with aioresponses() as m:
            m.get(asset_url, exception=cause)
            with pytest.raises(DownloadError) as exc_info:
                await DownloadService(session).download_file(
                    asset_url, tmp_file
                )

        assert exc_info.value.__cause__ is cause
        assert not tmp_file.exists()

    @pytest.mark.asyncio
    async def test_partial_file_removed_on_stream_error(self, tmp_file):
        """A body that breaks mid-stream leaves no partial file."""
        mock_response = AsyncMock()
        mock_response.__aenter__.return_value = mock_response
        mock_response.__aexit__.return_value = None
        mock_response.status = 200
        mock_response.headers = {"Content-Length": "100"}
        mock_response.content.iter_chunked = lambda size: failing_chunk_gen(
            [b"first chunk"], aiohttp.ClientPayloadError("truncated")
        )
        mock_session = MagicMock()
        mock_session.get.return_value = mock_response

        with pytest.raises(DownloadError):
            await DownloadService(mock_session).download_file(
                "https://example.com/a.zip", tmp_file
            )

        assert not tmp_file.exists()

    @pytest.mark.asyncio
    async def test_write_error_propagates_and_cleans_up(
        self, session, tmp_file, asset_url
    ):
        """A write failure is re-raised unchanged after cleanup."""
        with (
            aioresponses() as m,
            patch(
                "jswasm_fetch.core.download.aiofiles.open",
                side_effect=lambda dest, mode: _FailingFile(dest),
            ),
        ):
            m.get(asset_url, body=b"data")
            with pytest.raises(OSError, match="No space left"):
                await DownloadService(session).download_file(
                    asset_url, tmp_file
                )

        assert not tmp_file.exists()

    @pytest.mark.asyncio
    async def test_redirects_not_followed_by_aiohttp(self, tmp_file):
        """Requests disable aiohttp's own redirect handling."""
        mock_response = AsyncMock()
        mock_response.__aenter__.return_value = mock_response
        mock_response.__aexit__.return_value = None
        mock_response.status = 200
        mock_response.headers = {}

        async def chunks(size):
            yield b"abc"

        mock_response.content.iter_chunked = chunks
        mock_session = MagicMock()
        mock_session.get.return_value = mock_response

        await DownloadService(mock_session, timeout_seconds=5).download_file(
            "https://example.com/a.zip", tmp_file
        )

        _, kwargs = mock_session.get.call_args
        assert kwargs["allow_redirects"] is False
        assert kwargs["timeout"].sock_connect == 5
        assert tmp_file.read_bytes() == b"abc"


class TestDownloadAsset:
    """Test DownloadService.download_asset."""

    @pytest.mark.asyncio
    async def test_uses_browser_download_url(
        self, session, tmp_file, asset_url
    ):
        """The asset's browser_download_url is fetched."""
        asset = Asset(
            name="asset-wasm.zip", size=4, browser_download_url=asset_url
        )
        with aioresponses() as m:
            m.get(asset_url, body=b"wasm")
            result = await DownloadService(session).download_asset(
                asset, tmp_file
            )

        assert result.read_bytes() == b"wasm"
