"""Site parsers package.

Contains the extraction helpers, the host-based parser registry and the
site-specific parsing strategies that turn a manga page into a
``ChapterRecord``.

Architecture:
- MangaParser: Protocol every site parser implements
- ParserRegistry: Host -> parser lookup table
- AsuraScansParser: asura.gg series pages
"""

from .asura_scans import AsuraScansParser
from .base import BaseParser, MangaParser, ParserRegistry, Site, parser_registry
from .errors import (
    AttributeNotFound,
    ElementNotFound,
    HostNotFound,
    NumericFormatFailure,
    ParserError,
)

asura_scans_parser = AsuraScansParser()

# Register all available parsers
parser_registry.register(asura_scans_parser)

__all__ = [
    'AsuraScansParser',
    'AttributeNotFound',
    'BaseParser',
    'ElementNotFound',
    'HostNotFound',
    'MangaParser',
    'NumericFormatFailure',
    'ParserError',
    'ParserRegistry',
    'Site',
    'asura_scans_parser',
    'parser_registry',
]
