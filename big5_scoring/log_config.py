"""
Big Five — structured logging configuration.

Call ``configure_logging()`` once from the process entry point; modules
obtain named loggers with ``structlog.get_logger("big5.<module>")``.
Log lines go to stderr so CLI output on stdout stays machine-readable.
"""

from __future__ import annotations

import sys
from typing import Optional

import structlog

from big5_scoring.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # cached loggers keep the stream they were first created with
        cache_logger_on_first_use=settings.is_production,
    )
