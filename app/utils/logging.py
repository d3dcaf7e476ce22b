"""Structured logging for the dashboard API.

structlog events and plain ``logging.getLogger`` records share one
pipeline.  Both are rendered by ``structlog.stdlib.ProcessorFormatter`` on a
single stdout handler, so lifespan and pool messages carry the same
``request_id``, ``service`` and timestamp fields as the structlog events
from the repository and broadcaster.
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor

HANDLER_NAME = "building_dashboard"

# Third-party loggers that are chatty at INFO
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "asyncpg", "sse_starlette")


def _add_service(service: str) -> Processor:
    def processor(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return processor


def _shared_processors(service: str) -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        _add_service(service),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def setup_logging(
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "json",
    service: str = "building-dashboard-api",
) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call more than once: the handler installed by a previous call
    is replaced rather than duplicated.

    Args:
        log_level: Standard Python log level name (INFO, DEBUG, etc.).
        log_format: ``"json"`` for machine-readable output (staging and
            production) or ``"console"`` for coloured output in development.
        service: Value of the ``service`` field on every record.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    shared = _shared_processors(service)

    final: list[Processor]
    if log_format == "console":
        final = [structlog.dev.ConsoleRenderer()]
    else:
        final = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to the stdlib logger *name*."""
    return structlog.stdlib.get_logger(name)
