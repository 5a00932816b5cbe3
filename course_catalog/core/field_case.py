"""
Field name translation between the API and the store.

Request and response payloads use camelCase keys; persisted rows use
snake_case columns. Both directions drop keys whose value is ``None`` or
an empty string: such values mean "not provided", never "clear this field".

Dependencies: re (stdlib)
System role: Payload key translation at the service boundary
"""

import re
from typing import Any, Mapping

_UPPER = re.compile(r"([A-Z])")
_UNDERSCORE_LOWER = re.compile(r"_([a-z])")


def is_provided(value: Any) -> bool:
    """True unless ``value`` is ``None`` or ``""``."""
    return value is not None and not (isinstance(value, str) and value == "")


def to_snake_case(key: str) -> str:
    """Rewrite a camelCase key as snake_case (``providerId`` -> ``provider_id``)."""
    return _UPPER.sub(lambda m: "_" + m.group(1).lower(), key).removeprefix("_")


def to_camel_case(key: str) -> str:
    """Rewrite a snake_case key as camelCase (``provider_id`` -> ``providerId``)."""
    return _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), key)


def to_storage_form(obj: Mapping[str, Any]) -> dict[str, Any]:
    """
    Translate an external mapping to storage field names.

    Args:
        obj: Flat mapping with camelCase keys

    Returns:
        dict: New mapping with snake_case keys, absent/empty values dropped
    """
    return {to_snake_case(key): val for key, val in obj.items() if is_provided(val)}


def to_external_form(obj: Mapping[str, Any]) -> dict[str, Any]:
    """
    Translate a storage mapping to external field names.

    Args:
        obj: Flat mapping with snake_case keys

    Returns:
        dict: New mapping with camelCase keys, absent/empty values dropped
    """
    return {to_camel_case(key): val for key, val in obj.items() if is_provided(val)}
