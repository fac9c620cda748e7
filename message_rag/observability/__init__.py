"""
Observability module.

Provides logging configuration, safe structured-context helpers and
correlation ID tracking for HTTP requests.
"""

from message_rag.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from message_rag.observability.logger import configure_logging, get_logger

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
