"""Tests for mapping failures to toast messages."""

import httpx
import pytest

from book_catalog.modules.common.exceptions import BookNotFoundError, DomainError, ValidationError
from book_catalog.modules.common.utils.error_handler import handle_exception
from book_catalog.modules.notifications import ToastType


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "http://localhost:5148/api/v1/books")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("failed", request=request, response=response)


@pytest.mark.parametrize(
    "error, expected_type, expected_text",
    [
        (BookNotFoundError("Book 3 not found"), ToastType.WARNING, "Book 3 not found"),
        (ValidationError("bad payload"), ToastType.WARNING, "bad payload"),
        (DomainError("odd"), ToastType.ERROR, "An unexpected error occurred: odd"),
        (_status_error(503), ToastType.ERROR, "Catalog API answered 503 Service Unavailable"),
        (httpx.ReadTimeout("slow"), ToastType.ERROR, "Catalog API did not answer in time"),
        (httpx.ConnectError("refused"), ToastType.ERROR, "Could not reach the catalog API: refused"),
    ],
)
def test_handle_exception(error, expected_type, expected_text):
    assert handle_exception(error) == (expected_type, expected_text)


def test_unknown_exception_is_not_mapped():
    assert handle_exception(RuntimeError("boom")) is None
