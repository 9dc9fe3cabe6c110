"""Structlog configuration and logger setup.

Importing langline never touches logging configuration. Library modules
log through ``structlog.stdlib.get_logger()``, so their events follow
whatever the host application configured. Applications that want
langline's defaults call ``configure_logging()`` once at startup.

Usage:
    from langline.logging import configure_logging, get_module_logger

    # Optional, at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - langline.configuration.Settings
"""

import inspect
import logging
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from langline.configuration import Settings, get_settings


def _build_processors(prod_mode: bool) -> List[Processor]:
    """Processor chain: call-site context, exceptions, then a renderer.

    Args:
        prod_mode: JSON output when True, console output otherwise.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structured logging for an application embedding langline.

    Not called on import. Existing root handlers are kept; ``basicConfig``
    only adds one when the root logger has none.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.
        settings: Optional Settings instance. Defaults to get_settings().

    Returns:
        Configured logger instance
    """
    settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Automatically detects the calling module and binds component
    and module_path context for structured logging. The logger is lazy:
    it picks up the structlog configuration in effect when it first logs.

    Returns:
        Logger instance with module context

    Example:
        # In langline/i18n/cache.py
        logger = get_module_logger()
        # logger has context: {"component": "cache", "module_path": "langline.i18n.cache"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return structlog.stdlib.get_logger()

    frame = current_frame.f_back
    if frame is None:
        return structlog.stdlib.get_logger()

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        # Initial values keep the proxy lazy until the first event.
        return structlog.stdlib.get_logger(component=parts[-1], module_path=module_name)

    return structlog.stdlib.get_logger(component="unknown")
