"""Latest-chapter tracking pipeline.

Coordinates host resolution, page fetching, parsing and optional storage for
one or many manga URLs. Each URL is checked independently: a failure for one
URL never affects the others.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TypedDict

import aiohttp

from ..models import ParseResult
from ..scrapers import ParserError, ParserRegistry, parser_registry
from .fetcher import FetchError, fetch_page
from .repository import MangaRepository

logger = logging.getLogger(__name__)


class TrackOutcome(TypedDict, total=False):
    """Result of checking one URL: either a parse result or an error.

    Unexpected exceptions are recorded as failures too, so one URL can never
    abort a batch.
    """

    success: bool
    url: str
    result: ParseResult | None
    error: Exception | None
    processing_time_ms: int


class ChapterTracker:
    """Checks manga pages for their latest chapter."""

    def __init__(
        self,
        registry: ParserRegistry | None = None,
        repository: MangaRepository | None = None,
    ) -> None:
        self.registry = registry or parser_registry
        self.repository = repository

    async def check(self, url: str, session: aiohttp.ClientSession) -> ParseResult:
        """Fetch and parse a single manga page.

        The parser is resolved before fetching so unsupported hosts fail
        without any network traffic.

        Raises:
            HostNotFound: If no parser handles the URL's host.
            FetchError: If the page cannot be retrieved.
            ParserError: If extraction fails.
        """
        parser = self.registry.resolve(url)
        html = await fetch_page(url, session)
        return parser.parse(html, url)

    async def check_many(self, urls: list[str], session: aiohttp.ClientSession) -> list[TrackOutcome]:
        """Check several URLs concurrently, preserving input order."""
        return list(await asyncio.gather(*(self._check_outcome(url, session) for url in urls)))

    async def _check_outcome(self, url: str, session: aiohttp.ClientSession) -> TrackOutcome:
        start = time.monotonic()
        outcome: TrackOutcome = {"url": url, "result": None, "error": None}
        try:
            outcome["result"] = await self.check(url, session)
            outcome["success"] = True
        except FetchError as e:
            logger.warning(str(e))
            outcome["error"] = e
            outcome["success"] = False
        except ParserError as e:
            logger.error(f"Error checking {url}: {e}")
            outcome["error"] = e
            outcome["success"] = False
        except Exception as e:
            logger.exception(f"Unexpected error checking {url}")
            outcome["error"] = e
            outcome["success"] = False
        outcome["processing_time_ms"] = int((time.monotonic() - start) * 1000)
        return outcome

    async def add_manga(self, url: str, session: aiohttp.ClientSession) -> ParseResult:
        """Check a page and store the extracted record.

        Returns:
            ParseResult whose record carries the id assigned by storage.

        Raises:
            RuntimeError: If the tracker has no repository.
        """
        if self.repository is None:
            raise RuntimeError("ChapterTracker has no repository configured")

        result = await self.check(url, session)
        stored = self.repository.add(result.record)
        return ParseResult(record=stored, notes=result.notes)
