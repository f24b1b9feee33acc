"""Environment-aware logging configuration.

Configuration Logic:
- Development/Local: Colored console output, detailed format
- Staging: Console output in LOG_FORMAT (structured by default), optional rotating file
- Production: JSON console output, noisy HTTP loggers quieted
- Testing: Null handler, errors only
"""

import logging

from ..config.settings import EnvironmentOption, Settings, get_settings
from .handlers import (
    create_console_handler,
    create_file_handler,
    create_null_handler,
)

NOISY_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def setup_logging_configuration() -> None:
    """Set up the root logger based on application settings.

    Should be called once during application startup; ``get_logger`` calls
    it lazily when the first logger is requested.
    """
    settings = get_settings()

    logging.getLogger().handlers.clear()

    if settings.ENVIRONMENT == EnvironmentOption.STAGING:
        handlers = _staging_handlers(settings)
    elif settings.ENVIRONMENT == EnvironmentOption.PRODUCTION:
        handlers = _production_handlers(settings)
    else:
        handlers = _development_handlers(settings)

    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(settings.LOG_LEVEL_INT)

    if settings.ENVIRONMENT == EnvironmentOption.PRODUCTION:
        for logger_name, level in NOISY_LOGGERS.items():
            logging.getLogger(logger_name).setLevel(level)


def _file_handler(settings: Settings) -> logging.Handler:
    return create_file_handler(
        filepath=settings.LOG_FILE_PATH,
        format_type="structured",
        level=logging.DEBUG,
        max_bytes=settings.LOG_FILE_MAX_SIZE,
        backup_count=settings.LOG_FILE_BACKUP_COUNT,
    )


def _development_handlers(settings: Settings) -> list[logging.Handler]:
    """Colored, detailed console output; DEBUG when verbose."""
    handlers = []

    if settings.LOG_CONSOLE_ENABLED:
        console_level = logging.DEBUG if settings.LOG_DEVELOPMENT_VERBOSE else settings.LOG_LEVEL_INT
        handlers.append(create_console_handler(format_type="detailed", level=console_level, use_colors=True))

    if settings.LOG_FILE_ENABLED:
        handlers.append(_file_handler(settings))

    return handlers


def _staging_handlers(settings: Settings) -> list[logging.Handler]:
    handlers = []

    if settings.LOG_CONSOLE_ENABLED:
        handlers.append(create_console_handler(format_type=settings.LOG_FORMAT, level=settings.LOG_LEVEL_INT, use_colors=False))

    if settings.LOG_FILE_ENABLED:
        handlers.append(_file_handler(settings))

    return handlers


def _production_handlers(settings: Settings) -> list[logging.Handler]:
    """JSON console output for log aggregation."""
    handlers = []

    if settings.LOG_CONSOLE_ENABLED:
        console_level = logging.WARNING if settings.LOG_PRODUCTION_OPTIMIZE else settings.LOG_LEVEL_INT
        handlers.append(create_console_handler(format_type="json", level=console_level, use_colors=False))

    return handlers


def configure_testing_logging() -> None:
    """Configure minimal logging for the test suite.

    Replaces every root handler with a null handler so that test output
    stays quiet; pytest's ``caplog`` still captures records.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(create_null_handler())
    root_logger.setLevel(logging.ERROR)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.ERROR)


def get_configured_logger(name: str) -> logging.Logger:
    """Get a logger that inherits from the configured root logger."""
    return logging.getLogger(name)
