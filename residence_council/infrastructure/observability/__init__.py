"""Observability infrastructure for structured logging and correlation.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog
- Correlation ID management for call tracing
- Per-call log context binding

Usage:
    from residence_council.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

from residence_council.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from residence_council.infrastructure.observability.logging import (
    call_context,
    configure_structlog,
)

__all__: list[str] = [
    "call_context",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
