"""Global test configuration and fixtures.

Provides sample manga pages and environment isolation shared by all tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

ASURA_URL = "https://asura.gg/manga/0223090894-return-of-the-mount-hua-sect/"


def build_asura_page(
    chapter_heading: str | None = "Chapter 123: The Return",
    title: str | None = "Return of the Mount Hua Sect",
    cover: str | None = '<img class="attachment- size- wp-post-image" src="https://asura.gg/covers/hua.jpg">',
) -> str:
    """Build a minimal Asura Scans series page; None drops that part."""
    parts = ["<html><body>"]
    if title is not None:
        parts.append(f"<h1 class=\"entry-title\">{title}</h1>")
    if cover is not None:
        parts.append(f"<div class=\"thumb\">{cover}</div>")
    if chapter_heading is not None:
        parts.append(
            "<div id=\"chapterlist\"><ul>"
            f"<li><a href=\"/chapter-1\"><span class=\"chapternum\">{chapter_heading}</span></a></li>"
            "</ul></div>"
        )
    parts.append("</body></html>")
    return "".join(parts)


@pytest.fixture(autouse=True)
def test_environment(monkeypatch):
    """Keep tests independent of the caller's environment."""
    for key in ("FETCH_TIMEOUT", "FETCH_USER_AGENT", "FETCH_MAX_CONNECTIONS", "MANGA_DB_PATH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
def asura_url():
    return ASURA_URL


@pytest.fixture
def asura_page():
    return build_asura_page()


@pytest.fixture
def mock_session_factory():
    """Build an aiohttp-like session whose GET returns the given body."""

    def factory(html: str = "", error: Exception | None = None):
        mock_session = MagicMock()
        if error is not None:
            mock_session.get.side_effect = error
            return mock_session

        mock_response = AsyncMock()
        mock_response.raise_for_status = MagicMock()
        mock_response.text.return_value = html
        mock_session.get.return_value.__aenter__ = AsyncMock(return_value=mock_response)
        mock_session.get.return_value.__aexit__ = AsyncMock(return_value=False)
        return mock_session

    return factory


@pytest.fixture
def page_builder():
    return build_asura_page
