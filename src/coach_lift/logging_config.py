"""Logging setup: structlog over the standard logging module."""

import logging
import os
import sys

import structlog
from structlog.contextvars import merge_contextvars

LOG_LEVEL_ENV = "COACH_LIFT_LOG_LEVEL"
LOG_JSON_ENV = "COACH_LIFT_LOG_JSON"


def _add_app_name(logger, method_name, event_dict):
    event_dict["app"] = "coach-lift"
    return event_dict


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for the CLI and the web app.

    Args:
        level: Log level name; defaults to COACH_LIFT_LOG_LEVEL or INFO
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    shared_processors = [
        merge_contextvars,
        _add_app_name,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if os.getenv(LOG_JSON_ENV):
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    # stderr keeps CLI output clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
