"""Formatting of chapter records and failures for display."""

from .messages import (
    CHAPTER_MESSAGE,
    CHAPTER_TITLE_SUFFIX,
    ERROR_FETCH,
    ERROR_PARSE,
    ERROR_UNSUPPORTED_HOST,
    NOTE_LINE,
    STAGE_NAMES,
    STORED_SUFFIX,
)
from .models import ChapterRecord, ParseResult
from .scrapers import HostNotFound, ParserError, parser_registry
from .services.fetcher import FetchError


def format_chapter_message(record: ChapterRecord) -> str:
    """Format a record as 'Title - Chapter N[: chapter title]'."""
    message = CHAPTER_MESSAGE.format(title=record.title, chapter_number=record.chapter_number)
    if record.chapter_title:
        message += CHAPTER_TITLE_SUFFIX.format(chapter_title=record.chapter_title)
    if record.id is not None:
        message += STORED_SUFFIX.format(id=record.id)
    return message


def format_parse_result(result: ParseResult) -> str:
    """Format a record followed by one line per non-fatal note."""
    lines = [format_chapter_message(result.record)]
    lines.extend(NOTE_LINE.format(message=note.message) for note in result.notes)
    return "\n".join(lines)


def format_failure(url: str, error: Exception) -> str:
    """Format a failed check, naming the stage that failed when known.

    Args:
        url: URL that was being checked.
        error: Exception raised by the check.

    Returns:
        Message for the user.
    """
    if isinstance(error, HostNotFound):
        hosts = ", ".join(parser_registry.supported_hosts())
        return ERROR_UNSUPPORTED_HOST.format(url=url, hosts=hosts)
    if isinstance(error, FetchError):
        return ERROR_FETCH.format(url=url, reason=error.reason)
    if isinstance(error, ParserError):
        stage = STAGE_NAMES.get(error.stage or "", error.stage or "unknown stage")
        return ERROR_PARSE.format(url=url, stage=stage, reason=error.message)
    return ERROR_PARSE.format(url=url, stage="unknown stage", reason=error)
