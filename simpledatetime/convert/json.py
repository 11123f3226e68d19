"""JSON serialization and deserialization for value types.

This module provides functions for converting values to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a value to a JSON-serializable dict.
    from_json: Create a value from a JSON dict.

The JSON format uses canonical strings with type tags, so the variant and
the full precision survive a round trip:

    {"_type": "DateImmutable", "value": "2025-01-15"}
    {"_type": "Date", "value": "2025-01-15"}
    {"_type": "TimeImmutable", "value": "14:30:00.000000"}
    {"_type": "Time", "value": "14:30:00.250000"}

Examples:
    >>> from simpledatetime import DateImmutable
    >>> from simpledatetime.convert import to_json, from_json

    >>> data = to_json(DateImmutable("2025-01-15"))
    >>> data
    {'_type': 'DateImmutable', 'value': '2025-01-15'}

    >>> from_json(data) == DateImmutable("2025-01-15")
    True
"""

from __future__ import annotations

from typing import Any

from simpledatetime.core.base import TemporalValue
from simpledatetime.core.date import Date, DateImmutable
from simpledatetime.core.time import Time, TimeImmutable
from simpledatetime.errors import ParseError

_TYPES: dict[str, type[TemporalValue]] = {
    cls.__name__: cls for cls in (DateImmutable, Date, TimeImmutable, Time)
}


def to_json(value: TemporalValue) -> dict[str, Any]:
    """Convert a value to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a value of this package.
    """
    if not isinstance(value, TemporalValue):
        raise TypeError(f"cannot serialize {type(value).__name__} to JSON")
    payload_key = value.dimension.descriptor.payload_key
    return {"_type": type(value).__name__, "value": value.__getstate__()[payload_key]}


def from_json(data: dict[str, Any]) -> TemporalValue:
    """Create a value from a JSON dictionary.

    Raises:
        ParseError: If the dictionary is missing fields or holds an invalid
            value.
        TypeError: If ``_type`` is not a recognized value type.

    Examples:
        >>> from_json({"_type": "TimeImmutable", "value": "14:30:00.000000"})
        TimeImmutable('14:30:00.000000')
    """
    type_name = data.get("_type")
    if type_name is None:
        raise ParseError("missing '_type' field in JSON data")
    if "value" not in data:
        raise ParseError("missing 'value' field in JSON data")

    cls = _TYPES.get(type_name)
    if cls is None:
        raise TypeError(f"unknown type: {type_name}")

    value = object.__new__(cls)
    value.__setstate__({cls.dimension.descriptor.payload_key: data["value"]})
    return value


__all__ = ["to_json", "from_json"]
