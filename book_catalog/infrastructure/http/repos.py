"""Generic async HTTP helper shared by the resource clients."""

from typing import Any, Mapping, Optional

import httpx
from fastapi.encoders import jsonable_encoder

from ..config.settings import get_settings
from ..logging import get_logger

logger = get_logger(__name__)


class Repos:
    """Thin wrapper over ``httpx.AsyncClient`` exposing ``get``/``add``/``put``/``delete``.

    Every call returns the raw ``httpx.Response``. Non-2xx answers raise
    ``httpx.HTTPStatusError`` and transport failures raise the matching
    ``httpx`` error; nothing is retried or translated here.

    Features:
    - JSON request bodies from pydantic models or plain mappings
    - One pooled client shared by every call
    - Usable as an async context manager
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the helper.

        Args:
            client: Client to send requests with. When given, the caller keeps
                ownership and ``aclose`` leaves it open.
            timeout: Seconds before a request fails, defaults to ``BOOK_API_TIMEOUT``
            headers: Extra headers sent with every request
        """
        if timeout is None:
            timeout = get_settings().BOOK_API_TIMEOUT

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, headers={"Accept": "application/json"})
        self._headers = dict(headers or {})

    async def get(self, url: str) -> httpx.Response:
        return await self._send("GET", url)

    async def add(self, url: str, body: Any) -> httpx.Response:
        """POST ``body`` as JSON to ``url``."""
        return await self._send("POST", url, body)

    async def put(self, url: str, body: Any) -> httpx.Response:
        return await self._send("PUT", url, body)

    async def delete(self, url: str) -> httpx.Response:
        return await self._send("DELETE", url)

    async def _send(self, method: str, url: str, body: Any = None) -> httpx.Response:
        json_body = jsonable_encoder(body, exclude_unset=True) if body is not None else None

        response = await self._client.request(method, url, json=json_body, headers=self._headers or None)
        logger.debug(f"{method} {url} -> {response.status_code}", extra={"method": method, "url": url})

        response.raise_for_status()
        return response

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying client if this helper created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "Repos":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

