"""Structured logging configuration with structlog.

This module provides centralized structlog configuration for the
residence council, supporting both production (JSON) and development
(console) output modes.

Log Entry Format:
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "council_finalized",
        "correlation_id": "uuid",
        "operation": "finalize_council",
        ...additional context
    }

Usage:
    from residence_council.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import cast

import structlog
from structlog.typing import Processor

from residence_council.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for the application.

    Should be called once at startup.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def call_context(operation: str, caller: str | None = None) -> Iterator[str]:
    """Bind a fresh correlation ID and call metadata for one service call.

    Every log line emitted inside the block carries the correlation ID,
    the operation name and, when given, the caller. The previous
    correlation ID is restored on exit.

    Args:
        operation: Name of the public operation being executed.
        caller: Textual caller identity, if the operation has one.

    Yields:
        The correlation ID bound for the call.
    """
    previous = get_correlation_id()
    correlation_id = generate_correlation_id()
    set_correlation_id(correlation_id)
    bound: dict[str, str] = {"operation": operation}
    if caller is not None:
        bound["caller"] = caller
    try:
        with structlog.contextvars.bound_contextvars(**bound):
            yield correlation_id
    finally:
        set_correlation_id(previous)
