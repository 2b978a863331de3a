"""
greeting_demo.observability.logging

Structured logging configuration for the service.

Responsibilities:
- Configure `structlog` on top of stdlib logging, rendering JSON lines.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str) -> None:
    """
    JSON logs on stdout. The configured level applies to the `greeting_demo`
    loggers only; third-party loggers (aiosqlite, sqlalchemy) stay at INFO or
    above, so `GREETING_LOG_LEVEL=DEBUG` surfaces the seeder's lines alone.
    """

    service_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=max(service_level, logging.INFO),
    )
    logging.getLogger().setLevel(max(service_level, logging.INFO))
    logging.getLogger("greeting_demo").setLevel(service_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            # Renders "record count: %s"-style templates with their arguments.
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request-scoped metadata is bound via contextvars in `observability.middleware`.
