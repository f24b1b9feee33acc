"""Utility functions for mapping failures to user-facing toast messages."""

from typing import Optional

import httpx

from ...notifications import ToastType
from ..exceptions import DomainError, ResourceNotFoundError, ValidationError

TOAST_MAPPING: dict[type[DomainError], ToastType] = {
    ResourceNotFoundError: ToastType.WARNING,
    ValidationError: ToastType.WARNING,
}


def map_exception(error: DomainError) -> tuple[ToastType, str]:
    """Map a domain exception to a toast type and message."""
    for exception_class, toast_type in TOAST_MAPPING.items():
        if isinstance(error, exception_class):
            return toast_type, str(error)

    return ToastType.ERROR, f"An unexpected error occurred: {str(error)}"


def describe_http_error(error: httpx.HTTPError) -> str:
    """Build a short message for a failed call to the remote catalog."""
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return f"Catalog API answered {response.status_code} {response.reason_phrase}"
    if isinstance(error, httpx.TimeoutException):
        return "Catalog API did not answer in time"
    return f"Could not reach the catalog API: {str(error)}"


def handle_exception(error: Exception) -> Optional[tuple[ToastType, str]]:
    """
    Handle an exception and return a toast type and message if possible.

    For use in UI route handlers that report failures with a toast.

    Args:
        error: The exception to handle

    Returns:
        A ``(toast_type, message)`` pair if the error can be mapped, None otherwise
    """
    if isinstance(error, DomainError):
        return map_exception(error)
    elif isinstance(error, httpx.HTTPError):
        return ToastType.ERROR, describe_http_error(error)
    return None
