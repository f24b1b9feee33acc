"""Toast notifications delivered to the HTMX interface."""

from .schemas import Toast, ToastOptions, ToastType
from .services import ToastNotifier

__all__ = ["Toast", "ToastNotifier", "ToastOptions", "ToastType"]
