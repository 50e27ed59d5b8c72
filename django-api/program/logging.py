"""Structured logging for the program app.

Console output during development, JSON lines in production. Django keeps
its own LOGGING configuration; only structlog loggers are set up here.
"""

import logging

import structlog
from structlog.typing import FilteringBoundLogger


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog for the process.

    Args:
        json_output: Render JSON lines instead of console output.
        log_level: Minimum level name; unknown names fall back to INFO.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Return a logger bound to the calling module's name."""
    return structlog.get_logger(name)
