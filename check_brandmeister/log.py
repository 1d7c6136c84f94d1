"""structlog configuration for the plugin.

Every event goes to stderr so the monitoring framework only ever reads the
status line on stdout. JSON is used when stderr is not a terminal.

Usage:
    from check_brandmeister.log import get_logger
    logger = get_logger("checks")
    logger.warning("repeater_check_unknown", repeater_id=270107)
"""

import logging
import sys

import structlog
from pydantic import ValidationError

_initialized = False


def setup_logging(level: str = "WARNING", log_format: str = "auto") -> None:
    """Configure structlog; later ``get_logger`` calls keep this setup."""
    global _initialized
    _initialized = True

    log_format = log_format.lower()
    as_json = log_format == "json" or (log_format == "auto" and not sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Logger bound to ``component``; configures logging from Settings once."""
    if not _initialized:
        from check_brandmeister.config import Settings

        try:
            settings = Settings()
        except ValidationError:
            # Bad env values are reported by the CLI; logging keeps defaults.
            setup_logging()
        else:
            setup_logging(settings.log_level, settings.log_format)

    return structlog.get_logger(component=component)
