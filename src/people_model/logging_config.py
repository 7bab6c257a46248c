"""structlog setup for people_model.

Domain modules log through ``get_logger(__name__)`` at debug level: name
parse failures, group membership changes and identity forks. Nothing is
emitted through a configured pipeline until an embedding application calls
``configure_logging()``; the format follows ``Settings.log_format``.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from people_model.config import Settings, get_settings


def _add_log_level(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add an upper-case level for JSON consumers."""
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def _add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["environment"] = settings.environment.value
    return event_dict


def get_processors(log_format: str) -> list[Processor]:
    """Processor chain for "json" or "console" output."""
    if log_format == "json":
        return [
            _add_log_level,
            _add_app_context,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Route people_model events through structlog and the stdlib root logger.

    Args:
        settings: Library settings. If None, loads from environment.
    """
    if settings is None:
        settings = get_settings()

    log_level = getattr(logging, settings.log_level.value)

    structlog.configure(
        processors=get_processors(settings.log_format or "console"),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Example:
        logger = get_logger(__name__)
        logger.debug("person_joined_group", group=people.name, person=str(person.name))
    """
    return structlog.stdlib.get_logger(name)
