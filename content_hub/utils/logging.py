"""Structured logging: JSON events in production, console output when LOG_LEVEL=DEBUG."""
import logging
import sys

import structlog

from content_hub.config import settings

SERVICE_NAME = "content-hub"


def _add_service(_logger, _method, event_dict: dict) -> dict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_user(user_id: str) -> None:
    """Attach the owner to every event logged for the rest of this request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(user_id=user_id)


def setup_logging() -> None:
    """Configure structlog and stdlib logging. Call once at startup."""
    debug = settings.log_level.upper() == "DEBUG"
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    processors = [
        structlog.contextvars.merge_contextvars,
        _add_service,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if debug:
        processors += [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer()]
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
    # uvicorn/sqlalchemy go through stdlib logging
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
