"""Test configuration and fixtures for the book catalog front end."""

import os

os.environ["ENVIRONMENT"] = "local"
os.environ["LOG_CONSOLE_ENABLED"] = "false"
os.environ["BOOK_API_BASE_URL"] = "http://localhost:5148/api/v1/books"

import json  # noqa: E402
import uuid  # noqa: E402
from typing import Any, Dict, List, Optional, Tuple  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from book_catalog.infrastructure.http import Repos  # noqa: E402
from book_catalog.infrastructure.logging import configure_testing_logging  # noqa: E402
from book_catalog.interfaces.main import bootstrap  # noqa: E402
from book_catalog.modules.book.repository import BookRepository  # noqa: E402

BASE_URL = "http://localhost:5148/api/v1/books"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep test output free of application logs."""
    configure_testing_logging()


class RecordingRepos:
    """Stand-in for ``Repos`` that records every call.

    Answers each call with ``response`` or raises ``error`` when set.
    """

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        self.calls: List[Tuple[str, str, Any]] = []
        self.response = response if response is not None else object()
        self.error = error

    async def _record(self, method: str, url: str, body: Any = None) -> Any:
        self.calls.append((method, url, body))
        if self.error is not None:
            raise self.error
        return self.response

    async def get(self, url: str) -> Any:
        return await self._record("get", url)

    async def add(self, url: str, body: Any) -> Any:
        return await self._record("add", url, body)

    async def put(self, url: str, body: Any) -> Any:
        return await self._record("put", url, body)

    async def delete(self, url: str) -> Any:
        return await self._record("delete", url)


class FakeCatalog:
    """In-memory version of the remote catalog API for ``httpx.MockTransport``.

    Item-scoped calls take the id from the ``id`` query parameter. An
    unknown id answers 200 with an empty body. Setting ``fail_with`` makes
    every request answer that status code.
    """

    def __init__(self):
        self.books: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.fail_with: Optional[int] = None

    def seed(self, *books: Dict[str, Any]) -> None:
        for book in books:
            self.books[str(book["id"])] = dict(book)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"detail": "catalog failure"})

        book_id = request.url.params.get("id")

        if request.method == "GET" and book_id is None:
            return httpx.Response(200, json=list(self.books.values()))
        if request.method == "GET":
            if book_id not in self.books:
                return httpx.Response(200, content=b"")
            return httpx.Response(200, json=self.books[book_id])
        if request.method == "POST":
            payload = json.loads(request.content)
            payload["id"] = payload.get("id") or str(uuid.uuid4())
            self.books[payload["id"]] = payload
            return httpx.Response(201, json=payload)
        if request.method == "PUT":
            payload = json.loads(request.content)
            if payload.get("id") not in self.books:
                return httpx.Response(404, json={"detail": "not found"})
            self.books[payload["id"]] = payload
            return httpx.Response(200, json=payload)
        if request.method == "DELETE":
            if self.books.pop(book_id, None) is None:
                return httpx.Response(404, json={"detail": "not found"})
            return httpx.Response(204)

        return httpx.Response(405)


@pytest.fixture
def recording_repos() -> RecordingRepos:
    return RecordingRepos()


@pytest.fixture
def catalog() -> FakeCatalog:
    """Empty fake catalog."""
    return FakeCatalog()


@pytest.fixture
def sample_books() -> List[Dict[str, Any]]:
    return [
        {"id": "1", "title": "Dune", "author": "Frank Herbert", "publishedYear": 1965, "genre": "sci-fi"},
        {"id": "2", "title": "Emma", "author": "Jane Austen", "publishedYear": 1815},
    ]


@pytest_asyncio.fixture
async def repos(catalog: FakeCatalog):
    """``Repos`` sending every request to the fake catalog."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(catalog.handle))
    yield Repos(client=client)
    await client.aclose()


@pytest.fixture
def book_repository(repos: Repos) -> BookRepository:
    return BookRepository(repos, base_url=BASE_URL)


@pytest.fixture
def app(repos: Repos):
    """Bootstrapped application wired to the fake catalog."""
    return bootstrap(repos=repos)


@pytest_asyncio.fixture
async def client(app):
    """Test client driving the application in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
