"""Asura Scans series page parser.

The series page lists chapters newest first under ``#chapterlist``; the text of
that list's first block carries both the chapter number and, after a colon,
the chapter title (e.g. "Chapter 123: The Return"). The cover image is
optional: a page without one still yields a record.
"""

from typing import Callable, TypeVar

from ..models import ChapterRecord, ExtractionNote, ParseResult
from .base import BaseParser, Site
from .errors import ElementNotFound, NumericFormatFailure, ParserError
from .helpers import (
    first_digit_run,
    first_matching_attribute,
    first_matching_text,
    text_after_separator,
)

CHAPTER_HEADING_SELECTOR = "#chapterlist > ul"
TITLE_SELECTOR = "h1"
COVER_SELECTOR = "img.attachment-.size-.wp-post-image"
CHAPTER_TITLE_SEPARATOR = ":"

T = TypeVar("T")


class AsuraScansParser(BaseParser):
    """Parser for asura.gg series pages."""

    site = Site.ASURA_SCANS
    hosts = ("asura.gg",)

    def parse(self, html: str, url: str) -> ParseResult:
        """Extract the latest chapter record from an Asura Scans series page.

        Args:
            html: Raw page markup.
            url: Series page URL, stored as the record's only source URL.

        Returns:
            ParseResult with the record and a note if the cover was missing.

        Raises:
            ElementNotFound: If the chapter list or the title heading is missing
                or the title heading is empty.
            NumericFormatFailure: If the chapter heading holds no usable number.
        """
        self._log_parsing_start(url)

        try:
            raw_heading = self._run("chapter_heading", first_matching_text, html, CHAPTER_HEADING_SELECTOR)
            title = self._run("title", self._title, html)
            chapter_number = self._run("chapter_number", self._chapter_number, raw_heading)
        except ParserError as e:
            self._log_parsing_error(url, e)
            raise

        chapter_title = text_after_separator(raw_heading, CHAPTER_TITLE_SEPARATOR)
        image_url, note = self._cover_image(html, title)

        record = ChapterRecord(
            title=title,
            image_url=image_url,
            source_urls=[url],
            chapter_number=chapter_number,
            chapter_title=chapter_title,
        )
        self._log_parsing_success(url, f"'{title}' chapter {chapter_number}")
        return ParseResult(record=record, notes=[note] if note else [])

    @staticmethod
    def _run(stage: str, func: Callable[..., T], *args: str) -> T:
        """Call func and tag any ParserError it raises with stage."""
        try:
            return func(*args)
        except ParserError as e:
            e.stage = stage
            raise

    @staticmethod
    def _title(html: str) -> str:
        title = first_matching_text(html, TITLE_SELECTOR)
        if not title:
            raise ElementNotFound(f"element matching '{TITLE_SELECTOR}' has no text")
        return title

    @staticmethod
    def _chapter_number(raw_heading: str) -> int:
        digits = first_digit_run(raw_heading)
        if not digits:
            raise NumericFormatFailure(f"no chapter number in heading '{raw_heading}'")
        try:
            return int(digits)
        except ValueError as e:
            raise NumericFormatFailure(f"chapter number '{digits[:20]}...' is not a valid integer") from e

    def _cover_image(self, html: str, title: str) -> tuple[str | None, ExtractionNote | None]:
        """Look up the cover image, converting lookup failures into a note."""
        try:
            return first_matching_attribute(html, COVER_SELECTOR, "src"), None
        except ParserError as e:
            e.stage = "cover_image"
            self.logger.warning(f"Error getting the image for {title}: {e}")
            return None, ExtractionNote(
                stage="cover_image",
                message=f"could not find the cover image for {title}: {e}",
            )
