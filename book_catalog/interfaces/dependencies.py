"""FastAPI dependencies for the UI endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from ..modules.book.store import BookStore
from ..modules.notifications import ToastNotifier


def get_book_store(request: Request) -> BookStore:
    """Dependency for the ``BookStore`` installed by the store plugin."""
    return request.app.state.store


def get_toast_notifier(request: Request) -> ToastNotifier:
    """Dependency for the ``ToastNotifier`` installed by the toast plugin."""
    return request.app.state.toast


BookStoreDep = Annotated[BookStore, Depends(get_book_store)]
ToastDep = Annotated[ToastNotifier, Depends(get_toast_notifier)]
