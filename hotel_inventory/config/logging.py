"""Structured logging configuration using structlog."""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from pythonjsonlogger import jsonlogger

from hotel_inventory.config.settings import LoggingSettings, settings

# Characters of the hotel id shown in the log prefix
HOTEL_ID_PREFIX_LENGTH = 8


def add_hotel_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with the hotel it concerns.

    Registry and ledger events bind ``hotel_name`` and ``hotel_id``; the
    prefix reads ``[NAME #1a2b3c4d]``, or only the part that is bound.

    Args:
        logger: The logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary containing log data

    Returns:
        Modified event dictionary with the hotel prefix
    """
    hotel_name = event_dict.get("hotel_name")
    hotel_id = event_dict.get("hotel_id")
    parts = []
    if hotel_name:
        parts.append(str(hotel_name))
    if hotel_id:
        parts.append(f"#{str(hotel_id)[:HOTEL_ID_PREFIX_LENGTH]}")
    if parts:
        event_dict["event"] = f"[{' '.join(parts)}] {event_dict.get('event', '')}"
    return event_dict


def _build_handler(logging_settings: LoggingSettings, stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    if logging_settings.format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    handler.setLevel(getattr(logging, logging_settings.level))
    return handler


def _build_renderer(logging_settings: LoggingSettings, stream: TextIO) -> Any:
    if logging_settings.format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    is_terminal = getattr(stream, "isatty", lambda: False)()
    return structlog.dev.ConsoleRenderer(colors=is_terminal)


def configure_logging(
    logging_settings: Optional[LoggingSettings] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure structlog and the root logger.

    Output goes to stderr by default so the command line report on stdout
    stays parseable.

    Args:
        logging_settings: Level and format, defaults to the application settings
        stream: Destination stream, defaults to sys.stderr
    """
    logging_settings = logging_settings or settings.logging
    stream = stream or sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_settings.level))
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(logging_settings, stream))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_hotel_prefix,
            _build_renderer(logging_settings, stream),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound to the module name, typically __name__."""
    return structlog.get_logger(name)
