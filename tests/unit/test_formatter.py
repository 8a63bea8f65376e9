"""Tests for user-facing formatting of records and failures."""

from manga_tracker.formatter import format_chapter_message, format_failure, format_parse_result
from manga_tracker.models import ChapterRecord, ExtractionNote, ParseResult
from manga_tracker.scrapers import ElementNotFound, HostNotFound, NumericFormatFailure
from manga_tracker.services.fetcher import FetchError

URL = "https://asura.gg/manga/hua/"


def make_record(**overrides):
    data = {"title": "Mount Hua", "source_urls": [URL], "chapter_number": 45}
    data.update(overrides)
    return ChapterRecord(**data)


class TestFormatChapterMessage:
    def test_with_chapter_title(self):
        record = make_record(chapter_title="Into the Fire")
        assert format_chapter_message(record) == "Mount Hua - Chapter 45: Into the Fire"

    def test_without_chapter_title(self):
        assert format_chapter_message(make_record()) == "Mount Hua - Chapter 45"

    def test_stored_record_shows_id(self):
        assert format_chapter_message(make_record(id=3)) == "Mount Hua - Chapter 45 [id 3]"


def test_format_parse_result_lists_notes():
    result = ParseResult(
        record=make_record(),
        notes=[ExtractionNote(stage="cover_image", message="could not find the cover image")],
    )

    assert format_parse_result(result) == (
        "Mount Hua - Chapter 45\nNote: could not find the cover image"
    )


class TestFormatFailure:
    def test_names_failed_stage(self):
        error = ElementNotFound("no element matches selector 'h1'", stage="title")

        message = format_failure(URL, error)

        assert "manga title" in message
        assert "no element matches selector 'h1'" in message

    def test_numeric_failure(self):
        error = NumericFormatFailure(stage="chapter_number")
        assert "chapter number" in format_failure(URL, error)

    def test_unsupported_host_lists_supported_hosts(self):
        message = format_failure("https://example.com/x", HostNotFound(stage="resolve"))
        assert "asura.gg" in message

    def test_fetch_error(self):
        message = format_failure(URL, FetchError(URL, "HTTP 503"))
        assert message == f"Could not fetch {URL}: HTTP 503"
