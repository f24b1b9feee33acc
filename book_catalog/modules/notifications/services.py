"""Toast notification service."""

import json
from typing import Optional

from starlette.responses import Response

from .schemas import Toast, ToastOptions, ToastType

HX_TRIGGER_HEADER = "HX-Trigger"
TOAST_EVENT = "showToast"


class ToastNotifier:
    """Builds toasts and attaches them to HTMX responses.

    Toasts travel in the ``HX-Trigger`` response header as a ``showToast``
    event; the index page listens for it and renders each toast with the
    configured options.
    """

    def __init__(self, options: Optional[ToastOptions] = None):
        self.options = options or ToastOptions()

    def toast(self, message: str, type: ToastType = ToastType.DEFAULT) -> Toast:
        """Create a toast using the notifier's display options."""
        return Toast(message=message, type=type, **self.options.model_dump())

    def info(self, message: str) -> Toast:
        return self.toast(message, ToastType.INFO)

    def success(self, message: str) -> Toast:
        return self.toast(message, ToastType.SUCCESS)

    def warning(self, message: str) -> Toast:
        return self.toast(message, ToastType.WARNING)

    def error(self, message: str) -> Toast:
        return self.toast(message, ToastType.ERROR)

    def attach(self, response: Response, *toasts: Toast) -> Response:
        """Add toasts to the response's ``HX-Trigger`` header.

        Events already present in the header are kept.

        Args:
            response: Response returned by a UI route
            *toasts: Toasts to show, in display order

        Returns:
            The same response, for chaining
        """
        if not toasts:
            return response

        events: dict = {}
        existing = response.headers.get(HX_TRIGGER_HEADER)
        if existing:
            try:
                events = json.loads(existing)
            except json.JSONDecodeError:
                events = {name.strip(): None for name in existing.split(",") if name.strip()}

        pending = events.get(TOAST_EVENT) or []
        pending.extend(toast.model_dump(mode="json", by_alias=True) for toast in toasts)
        events[TOAST_EVENT] = pending

        response.headers[HX_TRIGGER_HEADER] = json.dumps(events)
        return response
