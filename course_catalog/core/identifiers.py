"""
Record identifier validation.

Every table keys its rows by UUID. The canonical string form is
``str(uuid.UUID)``: lowercase, hyphenated 8-4-4-4-12. Inputs that parse
but serialize differently (uppercase hex, braces, ``urn:uuid:`` prefix,
missing hyphens) are not canonical and are rejected.

Dependencies: uuid (stdlib), course_catalog.core.exceptions
System role: Identifier guard in front of every id-bearing operation
"""

import uuid
from typing import Any

from course_catalog.core.exceptions import InvalidIdentifierError


def is_valid_id(raw: Any) -> bool:
    """
    Check that ``raw`` is exactly the canonical serialization of an identifier.

    Args:
        raw: Candidate identifier

    Returns:
        bool: True iff ``raw`` parses and re-serializes to itself
    """
    if not isinstance(raw, str):
        return False
    try:
        parsed = uuid.UUID(raw)
    except ValueError:
        return False
    return str(parsed) == raw


def parse_id(raw: Any, field: str = "id") -> uuid.UUID:
    """
    Parse a canonical identifier.

    Args:
        raw: Candidate identifier
        field: Field name reported on failure

    Returns:
        uuid.UUID: Parsed identifier

    Raises:
        InvalidIdentifierError: If ``raw`` is not canonical
    """
    if not is_valid_id(raw):
        raise InvalidIdentifierError(raw, field=field)
    return uuid.UUID(raw)
