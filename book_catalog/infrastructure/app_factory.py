from asyncio import Event
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, Dict, List, Optional

import anyio
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from .config.settings import EnvironmentOption, EnvironmentSettings, Settings, get_settings
from .logging import get_logger

logger = get_logger(__name__)


async def set_threadpool_tokens(number_of_tokens: int = 100) -> None:
    """Configure the number of threadpool tokens for anyio."""
    limiter = anyio.to_thread.current_default_thread_limiter()
    limiter.total_tokens = number_of_tokens


def lifespan_factory(settings: Settings) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Factory to create a lifespan async context manager for a FastAPI app.

    On shutdown the ``Repos`` helper found at ``app.state.repos`` is closed.

    Args:
        settings: Application settings

    Returns:
        An async context manager for FastAPI's lifespan
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        initialization_complete = Event()
        app.state.initialization_complete = initialization_complete

        await set_threadpool_tokens()

        try:
            logger.info(f"{settings.APP_NAME} started against {settings.BOOK_API_BASE_URL}")
            initialization_complete.set()
            yield

        finally:
            repos = getattr(app.state, "repos", None)
            if repos is not None:
                await repos.aclose()

    return lifespan


def create_application(
    router: Optional[APIRouter] = None,
    settings: Optional[Settings] = None,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[None]]] = None,
    enable_cors: Optional[bool] = None,
    cors_origins: Optional[List[str]] = None,
    enable_docs_in_production: Optional[bool] = None,
    enable_gzip: Optional[bool] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    version: Optional[str] = None,
    **kwargs: Any,
) -> FastAPI:
    """Creates and configures a FastAPI application based on the provided settings.

    Args:
        router: Optional APIRouter included in the application
        settings: Application settings (uses get_settings() if None)
        lifespan: Optional lifespan function. If None, uses ``lifespan_factory``.
        enable_cors: Whether to enable CORS middleware.
            Defaults to settings.CORS_ENABLED if None.
        cors_origins: List of allowed origins for CORS.
            Defaults to settings.CORS_ORIGINS if None.
        enable_docs_in_production: Whether to keep the API docs in production.
            Defaults to settings.ENABLE_DOCS_IN_PRODUCTION if None.
        enable_gzip: Whether to enable GZip compression middleware.
            Defaults to settings.GZIP_ENABLED if None.
        title: The title of the application.
        description: A description of the application (supports Markdown).
        version: The version of the application.
        **kwargs: Additional keyword arguments passed to FastAPI constructor

    Returns:
        A configured FastAPI application
    """

    if settings is None:
        settings = get_settings()

    _enable_cors = settings.CORS_ENABLED if enable_cors is None else enable_cors
    _cors_origins = settings.CORS_ORIGINS_LIST if cors_origins is None else cors_origins
    _enable_gzip = settings.GZIP_ENABLED if enable_gzip is None else enable_gzip
    _enable_docs_in_production = (
        settings.ENABLE_DOCS_IN_PRODUCTION if enable_docs_in_production is None else enable_docs_in_production
    )

    metadata: Dict[str, Any] = {
        "title": title or settings.API_TITLE or settings.APP_NAME,
        "description": description or settings.API_DESCRIPTION or settings.APP_DESCRIPTION,
        "version": version or settings.API_VERSION or settings.VERSION,
        "docs_url": settings.DOCS_URL,
        "redoc_url": settings.REDOC_URL,
        "openapi_url": settings.OPENAPI_URL,
    }

    hide_docs = (
        isinstance(settings, EnvironmentSettings)
        and settings.ENVIRONMENT == EnvironmentOption.PRODUCTION
        and not _enable_docs_in_production
    )
    if hide_docs:
        metadata.update({"docs_url": None, "redoc_url": None, "openapi_url": None})

    metadata.update(kwargs)

    if lifespan is None:
        lifespan = lifespan_factory(settings)

    application = FastAPI(lifespan=lifespan, **metadata)

    if router is not None:
        application.include_router(router)

    if _enable_cors:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=_cors_origins,
            allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
            allow_methods=settings.CORS_ALLOW_METHODS.split(","),
            allow_headers=settings.CORS_ALLOW_HEADERS.split(","),
        )

    if _enable_gzip:
        application.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)

    return application
