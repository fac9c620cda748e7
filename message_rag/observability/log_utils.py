"""
Structured logging helpers.

Context values are flattened into short strings before they reach a log
record: embedding vectors and fragment batches would otherwise flood the logs.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any, Mapping

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render value as a bounded string for a log record.

    Sequences and mappings are summarised by size, never expanded.

    Args:
        value: Any context value
        max_length: Longest string kept before truncation

    Returns:
        str: Loggable representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, Mapping):
        text = f"dict({len(value)} keys)"
    else:
        try:
            text = value if isinstance(value, str) else str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def _safe_context(context: Mapping[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """Log message at level with context attached as record attributes."""
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log exc at ERROR with its traceback and context.

    Safe to call outside an except block: the traceback comes from exc.

    Args:
        logger: Target logger
        message: Log message
        exc: Exception being reported
        **context: Extra attributes (IDs, counts) for the record
    """
    extra = _safe_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
