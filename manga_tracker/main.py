"""Application entry point.

Command line front end that checks manga pages for their latest chapter,
prints the result for each URL and optionally stores successful records.
Periodic re-checking is not implemented; run the command from a scheduler
to poll.
"""

import argparse
import asyncio
import logging
import sys

from .config import config
from .formatter import format_chapter_message, format_failure, format_parse_result
from .messages import NO_STORED_MANGA
from .services.fetcher import create_session
from .services.repository import MangaRepository
from .services.tracker import ChapterTracker

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manga-tracker",
        description="Show the latest chapter of manga series from supported reader sites.",
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="Manga series page URL")
    parser.add_argument("--save", action="store_true", help="Store successfully parsed manga")
    parser.add_argument("--list", dest="list_stored", action="store_true", help="Print stored manga")
    parser.add_argument("--db", dest="db_path", help="SQLite database path (overrides MANGA_DB_PATH)")
    return parser


async def run(urls: list[str], save: bool, repository: MangaRepository | None) -> bool:
    """Check every URL and print its outcome.

    Returns:
        True if every URL was checked successfully.
    """
    tracker = ChapterTracker(repository=repository)
    logger.info(f"Checking {len(urls)} URL(s)")
    all_ok = True

    async with create_session() as session:
        outcomes = await tracker.check_many(urls, session)

    for outcome in outcomes:
        if not outcome["success"]:
            all_ok = False
            print(format_failure(outcome["url"], outcome["error"]))
            continue

        result = outcome["result"]
        if save and repository is not None:
            stored = repository.add(result.record)
            result = result.model_copy(update={"record": stored})
        print(format_parse_result(result))

    return all_ok


def main(argv: list[str] | None = None) -> None:
    """Main application entry point.

    Exits with status 1 when any URL failed, 2 on usage errors.
    """
    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(message)s",
        level=config.logging.level.upper(),
    )

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.urls and not args.list_stored:
        parser.error("at least one URL or --list is required")

    repository = None
    if args.save or args.list_stored:
        repository = MangaRepository(args.db_path or config.storage.db_path)

    all_ok = True
    if args.urls:
        all_ok = asyncio.run(run(args.urls, args.save, repository))

    if args.list_stored:
        records = repository.list_all()
        if not records:
            print(NO_STORED_MANGA)
        for record in records:
            print(format_chapter_message(record))

    if not all_ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
