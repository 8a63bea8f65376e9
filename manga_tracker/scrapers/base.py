"""Base parser protocol and the host-based parser registry.

Defines the interface every site parser implements and the registry that maps
page hosts to those parsers. Adding a site means adding a ``Site`` member, a
parser class declaring the hosts it handles, and registering an instance.
"""

import logging
from enum import Enum
from typing import Protocol
from urllib.parse import urlparse

from ..models import ParseResult
from .errors import HostNotFound, ParserError

logger = logging.getLogger(__name__)


class Site(str, Enum):
    """Manga reader sites with a dedicated parser."""

    ASURA_SCANS = "asura_scans"


class MangaParser(Protocol):
    """Protocol defining the interface for all site parsers.

    Attributes:
        site: Site this parser handles.
        hosts: Exact URL hosts served by the site.
    """

    site: Site
    hosts: tuple[str, ...]

    def parse(self, html: str, url: str) -> ParseResult:
        """Extract the latest chapter record from a page.

        Args:
            html: Raw page markup.
            url: URL the markup was fetched from.

        Returns:
            ParseResult with the record and any non-fatal diagnostics.

        Raises:
            ParserError: If a required value cannot be extracted.
        """
        ...


class BaseParser:
    """Base class providing shared logging for site parsers."""

    site: Site
    hosts: tuple[str, ...] = ()

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.site.value}")

    def _log_parsing_start(self, url: str) -> None:
        self.logger.debug(f"Starting {self.site.value} parsing: {url}")

    def _log_parsing_success(self, url: str, result: str) -> None:
        self.logger.info(f"Parsed {self.site.value} page {url}: {result}")

    def _log_parsing_error(self, url: str, error: ParserError) -> None:
        self.logger.error(
            f"Failed to parse {self.site.value} page ({url}) at stage "
            f"'{error.stage}': {error}"
        )


class ParserRegistry:
    """Registry mapping page hosts to site parsers.

    Holds a host -> site table and a site -> parser table. Both are filled
    once at import time and only read afterwards.
    """

    def __init__(self) -> None:
        """Initialize empty parser registry."""
        self._hosts: dict[str, Site] = {}
        self._parsers: dict[Site, MangaParser] = {}

    def register(self, parser: MangaParser) -> None:
        """Register a parser for its site and every host it declares.

        Args:
            parser: Parser instance implementing MangaParser.

        Raises:
            ValueError: If the site or one of its hosts is already registered.
        """
        if parser.site in self._parsers:
            raise ValueError(f"Parser for site '{parser.site.value}' is already registered")
        for host in parser.hosts:
            if host.lower() in self._hosts:
                raise ValueError(f"Host '{host}' is already registered")

        self._parsers[parser.site] = parser
        for host in parser.hosts:
            self._hosts[host.lower()] = parser.site
        logger.info("Registered parser for site '%s' (%s)", parser.site.value, ", ".join(parser.hosts))

    def resolve(self, url: str) -> MangaParser:
        """Return the parser responsible for the host of url.

        Args:
            url: Page URL.

        Returns:
            Registered parser for the URL's host.

        Raises:
            HostNotFound: If the host cannot be parsed or has no parser.
        """
        try:
            host = urlparse(url).hostname
        except ValueError:
            host = None

        if not host:
            raise HostNotFound(f"could not determine host of URL '{url}'", stage="resolve")

        site = self._hosts.get(host)
        if site is None:
            logger.warning("No parser found for host: %s", host)
            raise HostNotFound(f"host '{host}' is not supported", stage="resolve")
        return self._parsers[site]

    def supports_url(self, url: str) -> bool:
        """Check whether a parser is registered for the host of url."""
        try:
            self.resolve(url)
        except HostNotFound:
            return False
        return True

    def get(self, site: Site) -> MangaParser | None:
        """Get parser by site."""
        return self._parsers.get(site)

    def supported_hosts(self) -> list[str]:
        """Get sorted list of all registered hosts."""
        return sorted(self._hosts)


# Global parser registry instance
parser_registry = ParserRegistry()
