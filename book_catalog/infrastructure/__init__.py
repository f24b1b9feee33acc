"""Infrastructure module for the application."""

from .config.settings import get_settings
from .http import Repos

__all__ = [
    "Repos",
    "get_settings",
]
