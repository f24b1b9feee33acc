"""Script to print the books of the remote catalog."""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx  # noqa: E402

from book_catalog.infrastructure.http import Repos  # noqa: E402
from book_catalog.infrastructure.logging import get_logger  # noqa: E402
from book_catalog.modules.book.repository import BookRepository  # noqa: E402
from book_catalog.modules.book.store import BookStore  # noqa: E402

logger = get_logger(__name__)


async def main() -> None:
    """Fetch and print the catalog."""
    async with Repos() as repos:
        store = BookStore(BookRepository(repos))

        try:
            books = await store.fetch_books()
        except httpx.HTTPError as e:
            logger.error(f"❌ Could not load the catalog from {store.repository.base_url}: {str(e)}", exc_info=True)
            sys.exit(1)

    for book in books:
        print(f"{book.id}\t{book.title or ''}\t{book.author or ''}")
    logger.info(f"✅ {len(books)} books listed")


if __name__ == "__main__":
    asyncio.run(main())
