"""Centralized logging infrastructure for the book catalog front end.

Every module obtains its logger through ``get_logger`` so that handlers,
formatters and levels follow the application settings and the current
environment.

Usage:
    ```python
    from book_catalog.infrastructure.logging import get_logger

    logger = get_logger()  # Auto-detects module name
    logger.info("Application started")

    logger = get_logger("book_catalog.http", component="repos")
    logger.debug("Request sent", extra={"url": url})
    ```
"""

from .config import configure_testing_logging, setup_logging_configuration
from .factory import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "configure_testing_logging",
    "setup_logging_configuration",
]
