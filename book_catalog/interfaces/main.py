from html import escape
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.responses import HTMLResponse

from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import Settings, get_settings
from ..infrastructure.http import Repos
from ..infrastructure.logging import get_logger
from ..infrastructure.plugins import ToastPlugin, create_store, use_plugin
from ..modules.book.repository import BookRepository
from ..modules.notifications import ToastOptions
from .ui import router as ui_router

logger = get_logger(__name__)

health_router = APIRouter()


@health_router.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "message": "Book catalog front end is running"}


INDEX_PAGE = """
<html>
    <head>
        <title>{title}</title>
        <script src="https://unpkg.com/htmx.org@1.9.12"></script>
        <script src="https://cdn.tailwindcss.com"></script>
    </head>
    <body class="bg-white p-6">
        <div id="toasts" class="fixed space-y-2 z-50"></div>
        <div id="{mount_id}" class="max-w-3xl mx-auto space-y-4">
            <h1 class="text-2xl font-bold">{title}</h1>
            <form hx-post="/ui/books" hx-target="#book-list" hx-swap="innerHTML" class="space-y-2">
                <input name="title" placeholder="Title" required class="border rounded px-2 py-1 w-full">
                <input name="author" placeholder="Author" class="border rounded px-2 py-1 w-full">
                <input name="published_year" placeholder="Year" class="border rounded px-2 py-1">
                <input name="isbn" placeholder="ISBN" class="border rounded px-2 py-1">
                <button type="submit" class="bg-green-500 text-white px-3 py-1 rounded text-sm">Add book</button>
            </form>
            <div id="book-details"></div>
            <div id="book-list" hx-get="/ui/books" hx-trigger="load" hx-swap="innerHTML"></div>
        </div>
        <script>
            document.body.addEventListener("showToast", function (event) {{
                var toasts = Array.isArray(event.detail.value) ? event.detail.value : [event.detail.value];
                toasts.forEach(function (toast) {{
                    var container = document.getElementById("toasts");
                    container.className = "fixed space-y-2 z-50 " + (toast.position.indexOf("top") === 0 ? "top-4" : "bottom-4")
                        + (toast.position.indexOf("right") > 0 ? " right-4" : " left-4");
                    var node = document.createElement("div");
                    node.className = "toast toast-" + toast.type + " toast-" + toast.theme + " px-4 py-2 rounded shadow";
                    node.textContent = toast.message;
                    container.appendChild(node);
                    if (toast.autoClose > 0) {{
                        setTimeout(function () {{ node.remove(); }}, toast.autoClose);
                    }}
                }});
            }});
        </script>
    </body>
</html>
"""


def mount(app: FastAPI, selector: str = "#app") -> FastAPI:
    """Attach the HTMX interface to ``app`` under the page element ``selector``.

    The index page renders the interface inside ``<div id="...">``.

    Raises:
        RuntimeError: If the application is already mounted
    """
    if getattr(app.state, "mount_id", None) is not None:
        raise RuntimeError(f"Application is already mounted at #{app.state.mount_id}")

    mount_id = selector.lstrip("#")
    if not mount_id:
        raise ValueError(f"Invalid mount selector: {selector!r}")

    app.state.mount_id = mount_id
    app.include_router(ui_router)

    page = INDEX_PAGE.format(title=escape(app.title), mount_id=escape(mount_id))

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def get_index():
        """Serve the HTMX interface."""
        return HTMLResponse(content=page)

    logger.info(f"Mounted {app.title} at #{mount_id}")
    return app


def bootstrap(settings: Optional[Settings] = None, repos: Optional[Repos] = None) -> FastAPI:
    """Build the application, install the store and toast plugins, then mount it.

    Args:
        settings: Application settings (uses get_settings() if None)
        repos: HTTP helper for the catalog API, created if None. It is
            closed when the application shuts down.

    Returns:
        The configured and mounted application
    """
    if settings is None:
        settings = get_settings()

    app = create_application(router=health_router, settings=settings)

    app.state.repos = repos or Repos(timeout=settings.BOOK_API_TIMEOUT)
    repository = BookRepository(app.state.repos, base_url=settings.BOOK_API_BASE_URL)

    store = create_store(repository)
    use_plugin(app, store)

    toast_options = ToastOptions(
        auto_close=settings.TOAST_AUTO_CLOSE,
        position=settings.TOAST_POSITION,
        theme=settings.TOAST_THEME,
    )
    use_plugin(app, ToastPlugin(toast_options))

    return mount(app, f"#{settings.APP_MOUNT_ID}")


app = bootstrap()
