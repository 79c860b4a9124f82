"""Structured logging configuration using structlog."""

import datetime
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict

from .config import LoggingConfig


def add_timestamp(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO timestamp to log entries."""
    event_dict["timestamp"] = (
        datetime.datetime.now(datetime.timezone.utc)
        .isoformat()
        .replace("+00:00", "Z")
    )
    return event_dict


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structured logging for applications using the library.

    The library itself never calls this; it only emits events through
    ``get_logger``.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format type ('json' for production, 'console' for development)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )

    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_timestamp,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if log_level.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging_from_config(config: LoggingConfig) -> None:
    """Configure logging from a ``LoggingConfig``."""
    setup_logging(log_level=config.level, log_format=config.format)


def get_logger(name: Optional[str] = None) -> Any:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def get_component_logger(config: LoggingConfig) -> Any:
    """
    Get the logger a client component emits through.

    The stdlib logger named ``config.logger_name`` is set to ``config.level``,
    so events below it are dropped by ``filter_by_level``.
    """
    logging.getLogger(config.logger_name).setLevel(
        getattr(logging, config.level.upper(), logging.INFO)
    )
    return structlog.get_logger(config.logger_name)
