"""Page fetching over HTTP.

Supplies parsers with raw page markup. Transport failures are reported as
``FetchError`` and are never mixed up with extraction errors.
"""

import asyncio
import logging

import aiohttp

from ..config import FetchConfig, config

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A page could not be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Error fetching {url}: {reason}")
        self.url = url
        self.reason = reason


def create_session(fetch_config: FetchConfig | None = None) -> aiohttp.ClientSession:
    """Create configured aiohttp session for fetching manga pages.

    Args:
        fetch_config: Fetch settings, defaults to the global configuration.

    Returns:
        aiohttp.ClientSession: Configured HTTP session.
    """
    fetch_config = fetch_config or config.fetch
    connector = aiohttp.TCPConnector(limit=fetch_config.max_connections)
    timeout = aiohttp.ClientTimeout(total=fetch_config.timeout)

    headers = {
        "User-Agent": fetch_config.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
    }

    return aiohttp.ClientSession(connector=connector, timeout=timeout, headers=headers)


async def fetch_page(url: str, session: aiohttp.ClientSession) -> str:
    """Fetch a page and return its body text.

    Args:
        url: Page URL.
        session: HTTP session for making requests.

    Returns:
        Response body decoded as text.

    Raises:
        FetchError: On connection errors, timeouts, non-2xx responses or
            undecodable bodies.
    """
    logger.debug(f"Fetching {url}")
    try:
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.text()
    except aiohttp.ClientResponseError as e:
        raise FetchError(url, f"HTTP {e.status}") from e
    except asyncio.TimeoutError as e:
        raise FetchError(url, "request timed out") from e
    except aiohttp.ClientError as e:
        raise FetchError(url, str(e) or e.__class__.__name__) from e
    except UnicodeDecodeError as e:
        raise FetchError(url, f"could not decode response body ({e.encoding})") from e
