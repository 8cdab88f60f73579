"""JSON-safe conversion of audited attribute values."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID


def serialize_value(value: Any) -> Any:
    """Serialize a value to JSON-compatible primitives.

    Recursively converts non-JSON-serializable types to their
    string or primitive representations.

    Args:
        value: Any value to serialize

    Returns:
        JSON-serializable representation of the value
    """
    # Pass through JSON primitives
    if value is None or isinstance(value, str | int | float | bool):
        return value

    result: Any
    if isinstance(value, UUID):
        result = str(value)
    elif isinstance(value, datetime | date):
        result = value.isoformat()
    elif isinstance(value, Decimal):
        result = str(value)
    elif isinstance(value, Enum):
        result = value.value
    elif isinstance(value, bytes):
        result = value.hex()
    elif isinstance(value, dict):
        result = {str(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list | tuple | set | frozenset):
        result = [serialize_value(item) for item in value]
    else:
        # Fallback: convert to string
        result = str(value)

    return result


def serialize_values(values: dict[str, Any]) -> dict[str, Any]:
    """Serialize every value of an attribute map."""
    return {name: serialize_value(value) for name, value in values.items()}
