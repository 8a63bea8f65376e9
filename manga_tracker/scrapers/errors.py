"""Extraction error taxonomy.

Every failure raised while turning a page into a ``ChapterRecord`` derives
from ``ParserError``. Parsers tag errors with the ``stage`` in which they
happened so callers can report which step failed.
"""

from __future__ import annotations


class ParserError(Exception):
    """Base class for all extraction failures."""

    default_message = "parser error"

    def __init__(self, message: str | None = None, *, stage: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.stage = stage

    @property
    def message(self) -> str:
        return str(self.args[0])


class ElementNotFound(ParserError):
    """A required DOM query matched no element."""

    default_message = "DOM element not found"


class AttributeNotFound(ParserError):
    """A matched element lacked the requested attribute."""

    default_message = "attribute of element not found"


class HostNotFound(ParserError):
    """The URL host is either not supported or could not be parsed."""

    default_message = "host is either not supported or not found"


class NumericFormatFailure(ParserError):
    """Text expected to hold a number could not be parsed as one."""

    default_message = "could not parse number"
