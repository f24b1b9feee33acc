"""Application plugins: the book state store and toast notifications.

A plugin is any object with an ``install(app)`` method. ``use_plugin``
installs it on the application once and records it in
``app.state.plugins``.
"""

from typing import List, Optional, Protocol, runtime_checkable

from fastapi import FastAPI

from ..modules.book.repository import BookRepository
from ..modules.book.store import BookStore
from ..modules.notifications import ToastNotifier, ToastOptions
from .logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Plugin(Protocol):
    """Something that can be installed on the application."""

    def install(self, app: FastAPI) -> None: ...


def installed_plugins(app: FastAPI) -> List[Plugin]:
    """Return the plugins installed on ``app``, in installation order."""
    if not hasattr(app.state, "plugins"):
        app.state.plugins = []
    return app.state.plugins


def use_plugin(app: FastAPI, plugin: Plugin) -> FastAPI:
    """Install ``plugin`` on ``app`` unless it is already installed.

    Returns:
        The application, so calls can be chained
    """
    if not isinstance(plugin, Plugin):
        raise TypeError(f"{type(plugin).__name__} does not provide install(app)")

    plugins = installed_plugins(app)
    if plugin in plugins:
        return app

    plugin.install(app)
    plugins.append(plugin)
    logger.debug(f"Installed plugin {type(plugin).__name__}")
    return app


class StorePlugin:
    """Exposes a ``BookStore`` as ``app.state.store``."""

    def __init__(self, store: BookStore):
        self.store = store

    def install(self, app: FastAPI) -> None:
        app.state.store = self.store


def create_store(repository: BookRepository) -> StorePlugin:
    """Create the state store plugin backed by ``repository``."""
    return StorePlugin(BookStore(repository))


class ToastPlugin:
    """Exposes a ``ToastNotifier`` as ``app.state.toast``."""

    def __init__(self, options: Optional[ToastOptions] = None):
        self.notifier = ToastNotifier(options)

    def install(self, app: FastAPI) -> None:
        app.state.toast = self.notifier
