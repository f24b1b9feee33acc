"""Resource client for the remote book catalog API."""

import logging
from typing import Optional, Union

import httpx
from fastapi.encoders import jsonable_encoder

from ...infrastructure.config.settings import get_settings
from ...infrastructure.http import Repos
from ...infrastructure.logging import get_logger
from .schemas import Book


class BookRepository:
    """One call per operation over the ``books`` resource of the catalog API.

    Each method issues exactly one request through the ``Repos`` helper and
    returns its response unchanged. Errors raised by the helper propagate
    to the caller as-is.

    The catalog expects item-scoped calls as ``<base>?id=<id>``, not as a
    path segment.
    """

    def __init__(
        self,
        repos: Repos,
        base_url: Optional[str] = None,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    ):
        """Initialize the repository.

        Args:
            repos: HTTP helper exposing ``get``/``add``/``put``/``delete``
            base_url: Resource URL, defaults to ``BOOK_API_BASE_URL``
            logger: Logger for request diagnostics, defaults to this module's logger
        """
        self.repos = repos
        self.base_url = base_url or get_settings().BOOK_API_BASE_URL
        self.logger = logger or get_logger(__name__)

    def _item_url(self, book_id: str) -> str:
        return f"{self.base_url}?id={book_id}"

    async def get_book_list(self) -> httpx.Response:
        return await self.repos.get(self.base_url)

    async def get_book_by_id(self, book_id: str) -> httpx.Response:
        return await self.repos.get(self._item_url(book_id))

    async def add_book_to_list(self, book: Book) -> httpx.Response:
        return await self.repos.add(self.base_url, book)

    async def edit_book_details(self, book: Book) -> httpx.Response:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Editing book details", extra={"book": jsonable_encoder(book, exclude_unset=True)})
        return await self.repos.put(self.base_url, book)

    async def delete_book_by_id(self, book_id: str) -> httpx.Response:
        return await self.repos.delete(self._item_url(book_id))
