"""structlog configuration.

Called once at process start. Modules obtain loggers with
``structlog.get_logger(__name__)`` and log snake_case event names.
"""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: str = "INFO", *, debug: bool = False) -> None:
    """Configure structlog with level filtering and a JSON or console renderer."""
    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper()),
        ),
        cache_logger_on_first_use=True,
    )
