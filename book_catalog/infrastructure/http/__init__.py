"""Generic HTTP request helper used by the resource clients."""

from .repos import Repos

__all__ = ["Repos"]
