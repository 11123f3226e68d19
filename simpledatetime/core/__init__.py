"""Core value types.

This module provides the value types:
    - DateImmutable / Date: Calendar date, immutable and mutable
    - TimeImmutable / Time: Time of day, immutable and mutable
    - TemporalValue: Shared canonical core (base class)
"""

from __future__ import annotations

from simpledatetime.core.base import TemporalValue
from simpledatetime.core.date import Date, DateImmutable, DateValue
from simpledatetime.core.time import Time, TimeImmutable, TimeValue

__all__: list[str] = [
    "Date",
    "DateImmutable",
    "DateValue",
    "TemporalValue",
    "Time",
    "TimeImmutable",
    "TimeValue",
]
