"""Tests for application bootstrap and plugins."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from book_catalog.infrastructure.app_factory import create_application
from book_catalog.infrastructure.config.settings import EnvironmentOption, Settings
from book_catalog.infrastructure.plugins import StorePlugin, ToastPlugin, create_store, installed_plugins, use_plugin
from book_catalog.interfaces.main import bootstrap, mount
from book_catalog.modules.book.store import BookStore
from book_catalog.modules.notifications import ToastNotifier


class TestBootstrap:
    """The configured instance is the mounted one."""

    def test_plugins_installed_in_order(self, app: FastAPI):
        plugins = installed_plugins(app)

        assert [type(plugin) for plugin in plugins] == [StorePlugin, ToastPlugin]

    def test_state_exposes_store_and_toast(self, app: FastAPI, repos):
        assert isinstance(app.state.store, BookStore)
        assert isinstance(app.state.toast, ToastNotifier)
        assert app.state.store.repository.repos is repos
        assert app.state.repos is repos

    def test_mounted_at_app(self, app: FastAPI):
        assert app.state.mount_id == "app"

    def test_toast_options_from_settings(self, repos):
        settings = Settings(TOAST_AUTO_CLOSE=1500, TOAST_POSITION="bottom-right", APP_MOUNT_ID="catalog")

        app = bootstrap(settings=settings, repos=repos)

        assert app.state.toast.options.auto_close == 1500
        assert app.state.toast.options.position == "bottom-right"
        assert app.state.mount_id == "catalog"

    @pytest.mark.asyncio
    async def test_index_renders_mount_point(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert '<div id="app"' in response.text
        assert 'hx-get="/ui/books"' in response.text

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestMount:
    def test_mount_twice_fails(self, app: FastAPI):
        with pytest.raises(RuntimeError, match="already mounted"):
            mount(app)

    def test_mount_rejects_empty_selector(self):
        with pytest.raises(ValueError):
            mount(create_application(), "#")


class TestUsePlugin:
    def test_install_once(self, book_repository):
        app = create_application()
        plugin = create_store(book_repository)

        use_plugin(app, plugin)
        use_plugin(app, plugin)

        assert installed_plugins(app) == [plugin]
        assert app.state.store is plugin.store

    def test_returns_app_for_chaining(self):
        app = create_application()

        assert use_plugin(app, ToastPlugin()) is app

    def test_rejects_objects_without_install(self):
        with pytest.raises(TypeError):
            use_plugin(create_application(), object())


class TestCreateApplication:
    def test_metadata_from_settings(self):
        app = create_application(settings=Settings())

        assert app.title == "Book Catalog"
        assert app.version == "0.1.0"
        assert app.docs_url == "/docs"

    def test_docs_hidden_in_production(self):
        app = create_application(settings=Settings(ENVIRONMENT=EnvironmentOption.PRODUCTION))

        assert app.docs_url is None
        assert app.openapi_url is None

    def test_docs_kept_in_production_when_enabled(self):
        settings = Settings(ENVIRONMENT=EnvironmentOption.PRODUCTION)

        app = create_application(settings=settings, enable_docs_in_production=True)

        assert app.docs_url == "/docs"

    @pytest.mark.asyncio
    async def test_lifespan_closes_repos(self):
        """Test that shutting the application down closes its HTTP helper."""
        app = bootstrap()
        repos = app.state.repos

        async with app.router.lifespan_context(app):
            assert not repos.is_closed
            assert app.state.initialization_complete.is_set()

        assert repos.is_closed

    @pytest.mark.asyncio
    async def test_cors_headers(self, app: FastAPI):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.get("/health", headers={"Origin": "http://example.com"})

        assert "access-control-allow-origin" in response.headers
