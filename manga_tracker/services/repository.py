"""SQLite storage for extracted chapter records.

Records are immutable, so storing one returns a copy carrying the identity
assigned by the database.
"""

import json
import logging
import sqlite3
from pathlib import Path

from ..models import ChapterRecord

logger = logging.getLogger(__name__)


class MangaRepository:
    """SQLite-based store of tracked manga and their latest chapter.

    Attributes:
        db_path: Path to SQLite database file.
    """

    def __init__(self, db_path: str):
        """Initialize repository and create the schema if needed.

        Args:
            db_path: Path to SQLite database file.
        """
        self.db_path = db_path
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._init_database()
        logger.info(f"Manga repository initialized with database: {db_path}")

    def _init_database(self) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS manga (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    image_url TEXT,
                    urls TEXT NOT NULL,
                    chapter INTEGER NOT NULL,
                    chapter_title TEXT
                )
            """)
            conn.commit()

    def add(self, record: ChapterRecord) -> ChapterRecord:
        """Store a new record.

        Args:
            record: Freshly extracted record without an id.

        Returns:
            Copy of the record with the assigned id.
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO manga (title, image_url, urls, chapter, chapter_title)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    record.title,
                    record.image_url,
                    json.dumps(record.source_urls),
                    record.chapter_number,
                    record.chapter_title,
                ),
            )
            conn.commit()
            new_id = cursor.lastrowid

        logger.info(f"Stored '{record.title}' with id {new_id}")
        return record.with_id(new_id)

    def get(self, manga_id: int) -> ChapterRecord | None:
        """Get a stored record by id."""
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT id, title, image_url, urls, chapter, chapter_title FROM manga WHERE id = ?",
                (manga_id,),
            ).fetchone()
        return self._row_to_record(row) if row else None

    def list_all(self) -> list[ChapterRecord]:
        """Get every stored record ordered by id."""
        with sqlite3.connect(self.db_path) as conn:
            rows = conn.execute(
                "SELECT id, title, image_url, urls, chapter, chapter_title FROM manga ORDER BY id"
            ).fetchall()
        return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row: tuple) -> ChapterRecord:
        manga_id, title, image_url, urls, chapter, chapter_title = row
        return ChapterRecord(
            id=manga_id,
            title=title,
            image_url=image_url,
            source_urls=json.loads(urls),
            chapter_number=chapter,
            chapter_title=chapter_title,
        )
