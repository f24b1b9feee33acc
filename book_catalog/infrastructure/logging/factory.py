"""Logger factory with automatic module detection and settings integration.

This module provides the main interface for obtaining loggers throughout
the application. The logging system is configured from the settings the
first time a logger is requested.
"""

import inspect
import logging
from threading import Lock
from typing import Optional, Union

from ..config.settings import get_settings
from .config import get_configured_logger, setup_logging_configuration

_logging_configured = False
_configuration_lock = Lock()


def get_logger(name: Optional[str] = None, **extra_context) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a properly configured logger with automatic module detection.

    Args:
        name: Logger name. If None, automatically detects from calling module.
        **extra_context: Additional context to include in log records.

    Returns:
        Configured logger instance ready for use.

    Example:
        ```python
        logger = get_logger()
        logger.info("Application started")

        logger = get_logger(component="repos")
        logger.debug("GET sent", extra={"url": url})
        ```
    """
    _ensure_logging_configured()

    if name is None:
        name = _detect_calling_module()

    base_logger = get_configured_logger(name)

    if extra_context:
        logger: Union[logging.Logger, logging.LoggerAdapter] = logging.LoggerAdapter(base_logger, extra_context)
    else:
        logger = base_logger

    return logger


def configure_logging() -> None:
    """Manually trigger logging configuration.

    Typically called automatically when the first logger is requested,
    but useful for early application setup.
    """
    global _logging_configured

    with _configuration_lock:
        if not _logging_configured:
            setup_logging_configuration()
            _logging_configured = True

            settings = get_settings()
            logging.getLogger(__name__).info(
                f"Logging configured for {settings.ENVIRONMENT.value} environment",
                extra={
                    "log_level": settings.LOG_LEVEL,
                    "log_format": settings.LOG_FORMAT,
                    "console_enabled": settings.LOG_CONSOLE_ENABLED,
                    "file_enabled": settings.LOG_FILE_ENABLED,
                },
            )


def _ensure_logging_configured() -> None:
    """Ensure logging is configured, calling setup if needed."""
    if not _logging_configured:
        configure_logging()


def _detect_calling_module() -> str:
    """Return the ``__name__`` of the module that called ``get_logger``."""
    frame = inspect.currentframe()

    try:
        for _ in range(2):
            if frame is None:
                break
            frame = frame.f_back

        if frame is not None:
            return str(frame.f_globals.get("__name__", "unknown"))
        return "unknown"

    finally:
        del frame
