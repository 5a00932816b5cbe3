"""
Helpers for structured log fields.

Values passed through ``extra`` end up in formatters and log shippers, so
they are flattened to short strings first. Enrollment lists in particular
can grow large; they are logged as a count.

Dependencies: logging (stdlib)
System role: Log field rendering
"""

import logging
import uuid
from datetime import date, datetime, time
from typing import Any

MAX_FIELD_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_FIELD_LENGTH) -> str:
    """
    Render a value as a bounded log string.

    Args:
        value: Any field value
        max_length: Truncation limit

    Returns:
        str: Short representation; collections become ``type(n items)``
    """
    if value is None:
        return "-"
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        if len(value) <= 5 and all(isinstance(v, str) and len(v) < 40 for v in value):
            text = ",".join(sorted(value) if isinstance(value, (set, frozenset)) else value)
        else:
            return f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        return f"dict({len(value)} keys)"
    else:
        text = str(value)

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log ``message`` with every context value rendered by ``safe_log_value``.

    Args:
        logger: Target logger
        level: Log level (logging.INFO, ...)
        message: Log message
        **context: Structured fields (course_id, fields, ...)
    """
    logger.log(
        level,
        message,
        extra={key: safe_log_value(val) for key, val in context.items()},
    )
