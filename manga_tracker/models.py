"""Data models for the manga tracker application.

Defines Pydantic models for the structured output of page extraction: the
chapter record itself, the non-fatal diagnostics that may accompany it, and the
result pair handed back by site parsers.
"""

from pydantic import BaseModel, ConfigDict, Field


class ChapterRecord(BaseModel):
    """Latest chapter information extracted from a manga page.

    Records are immutable once built. Identity is assigned by the persistence
    layer through ``with_id``, which returns a new record.

    Attributes:
        id: Database identity, None until the record has been stored.
        title: Display title of the manga.
        image_url: Cover image URL, None if the page has no readable cover.
        source_urls: URLs the record was extracted from, never empty.
        chapter_number: Number of the most recent chapter.
        chapter_title: Title of the most recent chapter, if the page gives one.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    title: str = Field(min_length=1)
    image_url: str | None = None
    source_urls: list[str] = Field(min_length=1)
    chapter_number: int = Field(ge=0)
    chapter_title: str | None = None

    def with_id(self, new_id: int) -> "ChapterRecord":
        """Return a copy of this record carrying a persisted identity."""
        return self.model_copy(update={"id": new_id})


class ExtractionNote(BaseModel):
    """Informational diagnostic for a non-fatal extraction failure.

    Attributes:
        stage: Extraction step that failed (e.g. 'cover_image').
        message: Human readable description of what went wrong.
    """

    model_config = ConfigDict(frozen=True)

    stage: str
    message: str


class ParseResult(BaseModel):
    """Successful parse outcome: the record plus any non-fatal diagnostics."""

    model_config = ConfigDict(frozen=True)

    record: ChapterRecord
    notes: list[ExtractionNote] = Field(default_factory=list)
