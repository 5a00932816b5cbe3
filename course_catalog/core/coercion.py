"""
Explicit parsing of loosely typed course fields.

Form posts deliver numbers and dates as strings. Each parser returns a
ParseResult instead of raising, and the caller decides how to report a
failure before anything is written.

Dependencies: dataclasses, datetime, json, math (stdlib)
System role: Type coercion for course payloads
"""

import json
import math
from dataclasses import dataclass
from datetime import datetime, time, timezone
from typing import Any, Generic, TypeVar

from course_catalog.core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing one raw value."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult[T]":
        return cls(error=error)

    def unwrap(self, field: str) -> T:
        """
        Return the parsed value or raise.

        Args:
            field: External field name reported in the error

        Raises:
            ValidationError: If parsing failed
        """
        if self.error is not None:
            raise ValidationError(self.error, field=field)
        return self.value  # type: ignore[return-value]


def parse_price(raw: Any) -> ParseResult[float]:
    """Parse a non-negative, finite price from a number or numeric string."""
    if isinstance(raw, bool):
        return ParseResult.failure(f"Failed to convert price into a number: {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        return ParseResult.failure(f"Failed to convert price into a number. Error: {e}")
    if not math.isfinite(value):
        return ParseResult.failure(f"Price must be a finite number, got {raw!r}")
    if value < 0:
        return ParseResult.failure(f"Price must not be negative, got {value}")
    return ParseResult.success(value)


def parse_max_students(raw: Any) -> ParseResult[int]:
    """Parse a non-negative integer seat count."""
    if isinstance(raw, bool):
        return ParseResult.failure(f"Failed to convert maxStudents into an integer: {raw!r}")
    if isinstance(raw, float):
        if not raw.is_integer():
            return ParseResult.failure(f"maxStudents must be a whole number, got {raw}")
        value = int(raw)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError as e:
            return ParseResult.failure(
                f"Failed to convert maxStudents into an integer. Error: {e}"
            )
    if value < 0:
        return ParseResult.failure(f"maxStudents must not be negative, got {value}")
    return ParseResult.success(value)


def parse_timestamp(raw: Any, field: str) -> ParseResult[datetime]:
    """
    Parse an ISO-8601 timestamp.

    A JSON-encoded string (``'"2024-01-01T10:00:00Z"'``) is unwrapped first.
    Naive timestamps are taken as UTC; offset timestamps are converted to UTC.
    """
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if len(text) >= 2 and text[0] == text[-1] == '"':
            try:
                text = json.loads(text)
            except json.JSONDecodeError as e:
                return ParseResult.failure(
                    f"Failed to convert {field} to date. Error: {e}"
                )
        try:
            value = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            return ParseResult.failure(f"Failed to convert {field} to date. Error: {e}")
    else:
        return ParseResult.failure(
            f"Failed to convert {field} to date: unsupported type {type(raw).__name__}"
        )
    if value.tzinfo is None:
        return ParseResult.success(value.replace(tzinfo=timezone.utc))
    return ParseResult.success(value.astimezone(timezone.utc))


def parse_time_of_day(raw: Any, field: str) -> ParseResult[time]:
    """
    Parse an ISO time-of-day such as ``09:30`` or ``09:30:00``.

    Times of day are stored without a zone, so a UTC offset is rejected.
    """
    if isinstance(raw, time):
        value = raw
    elif isinstance(raw, str):
        try:
            value = time.fromisoformat(raw.strip())
        except ValueError as e:
            return ParseResult.failure(f"Failed to convert {field} to a time of day. Error: {e}")
    else:
        return ParseResult.failure(
            f"Failed to convert {field} to a time of day: unsupported type {type(raw).__name__}"
        )
    if value.tzinfo is not None:
        return ParseResult.failure(f"{field} must not carry a UTC offset, got {raw!r}")
    return ParseResult.success(value)
