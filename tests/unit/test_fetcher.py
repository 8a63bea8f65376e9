"""Tests for page fetching."""

import asyncio
from unittest.mock import MagicMock

import aiohttp
import pytest

from manga_tracker.config import FetchConfig
from manga_tracker.services.fetcher import FetchError, create_session, fetch_page


@pytest.mark.asyncio
async def test_fetch_page_returns_body(mock_session_factory, asura_url):
    session = mock_session_factory("<html>ok</html>")

    html = await fetch_page(asura_url, session)

    assert html == "<html>ok</html>"
    session.get.assert_called_once_with(asura_url)


@pytest.mark.asyncio
async def test_fetch_page_wraps_connection_errors(mock_session_factory, asura_url):
    session = mock_session_factory(error=aiohttp.ClientConnectionError("refused"))

    with pytest.raises(FetchError) as exc_info:
        await fetch_page(asura_url, session)

    assert exc_info.value.url == asura_url
    assert "refused" in exc_info.value.reason


@pytest.mark.asyncio
async def test_fetch_page_wraps_timeouts(mock_session_factory, asura_url):
    session = mock_session_factory(error=asyncio.TimeoutError())

    with pytest.raises(FetchError) as exc_info:
        await fetch_page(asura_url, session)

    assert exc_info.value.reason == "request timed out"


@pytest.mark.asyncio
async def test_fetch_page_reports_http_status(mock_session_factory, asura_url):
    session = mock_session_factory("")
    response = await session.get.return_value.__aenter__()
    response.raise_for_status = MagicMock(
        side_effect=aiohttp.ClientResponseError(MagicMock(), (), status=404)
    )

    with pytest.raises(FetchError) as exc_info:
        await fetch_page(asura_url, session)

    assert exc_info.value.reason == "HTTP 404"


@pytest.mark.asyncio
async def test_create_session_applies_fetch_config():
    fetch_config = FetchConfig(FETCH_TIMEOUT=7, FETCH_USER_AGENT="tracker-test")

    session = create_session(fetch_config)
    try:
        assert session.timeout.total == 7
        assert session.headers["User-Agent"] == "tracker-test"
    finally:
        await session.close()


@pytest.mark.asyncio
async def test_fetch_page_wraps_decode_errors(mock_session_factory, asura_url):
    session = mock_session_factory("")
    response = await session.get.return_value.__aenter__()
    response.text.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    with pytest.raises(FetchError) as exc_info:
        await fetch_page(asura_url, session)

    assert "utf-8" in exc_info.value.reason
