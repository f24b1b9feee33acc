"""State store holding the books shown by the interface."""

from typing import Any, List, Optional

import httpx
import pydantic

from ...infrastructure.logging import get_logger
from ..common.exceptions import BookNotFoundError, ValidationError
from .repository import BookRepository
from .schemas import Book

logger = get_logger(__name__)


def _read_body(response: httpx.Response) -> Any:
    """Decode a JSON response body, ``None`` when the catalog sent nothing."""
    if not response.content or not response.content.strip():
        return None
    return response.json()


def _as_book(payload: Any) -> Book:
    """Validate one catalog record, reporting a malformed one as a domain error."""
    try:
        return Book.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Catalog sent a malformed book record: {e.error_count()} invalid field(s)") from e


def _as_book_list(payload: Any) -> List[Book]:
    if payload is None:
        return []
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        payload = payload["data"]
    if not isinstance(payload, list):
        raise ValidationError(f"Expected a list of books, got {type(payload).__name__}")
    return [_as_book(item) for item in payload]


class BookStore:
    """Client-side state for the book catalog.

    Holds the last fetched list and the selected book. Every action goes
    through the ``BookRepository`` and updates the state only once the
    remote call has succeeded, so a failed call leaves the state untouched
    and re-raises the error.
    """

    def __init__(self, repository: BookRepository):
        self.repository = repository
        self.books: List[Book] = []
        self.selected: Optional[Book] = None
        self.loading = False

    def find(self, book_id: str) -> Optional[Book]:
        """Return the cached book with ``book_id``, without calling the catalog."""
        if self.selected is not None and self.selected.id == book_id:
            return self.selected
        return next((book for book in self.books if book.id == book_id), None)

    async def fetch_books(self) -> List[Book]:
        """Load the whole catalog into ``books``."""
        self.loading = True
        try:
            response = await self.repository.get_book_list()
            self.books = _as_book_list(_read_body(response))
        finally:
            self.loading = False

        logger.info(f"Loaded {len(self.books)} books")
        return self.books

    async def fetch_book(self, book_id: str) -> Book:
        """Load one book into ``selected``.

        Raises:
            BookNotFoundError: If the catalog answers with an empty body or list
        """
        response = await self.repository.get_book_by_id(book_id)
        payload = _read_body(response)

        if isinstance(payload, list):
            payload = payload[0] if payload else None
        if not payload:
            raise BookNotFoundError(f"Book {book_id} not found")

        self.selected = _as_book(payload)
        return self.selected

    async def add_book(self, book: Book) -> Book:
        """Create a book and append it to ``books``.

        The catalog's answer is used when it returns the created record, the
        submitted book otherwise.
        """
        response = await self.repository.add_book_to_list(book)
        payload = _read_body(response)

        created = _as_book(payload) if isinstance(payload, dict) else book
        self.books.append(created)
        return created

    async def edit_book(self, book: Book) -> Book:
        """Save a book and replace the matching entry in ``books``."""
        response = await self.repository.edit_book_details(book)
        payload = _read_body(response)

        updated = _as_book(payload) if isinstance(payload, dict) else book
        self.books = [updated if existing.id == updated.id else existing for existing in self.books]
        if self.selected is not None and self.selected.id == updated.id:
            self.selected = updated
        return updated

    async def remove_book(self, book_id: str) -> None:
        """Delete a book and drop it from ``books``."""
        await self.repository.delete_book_by_id(book_id)

        self.books = [book for book in self.books if book.id != book_id]
        if self.selected is not None and self.selected.id == book_id:
            self.selected = None
