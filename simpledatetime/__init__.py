"""simpledatetime: timezone-agnostic Date and Time value types.

A Date is a calendar day and nothing else; a Time is a time of day and
nothing else. Neither carries a timezone, and neither can be pushed into
the other's dimension: formatting a Date with "H", modifying a Time by
"+1 day" or calling set_time() on a Date raises StructuralViolation.

Core Types:
    DateImmutable: Calendar date (recommended)
    Date: Calendar date, mutated in place
    TimeImmutable: Time of day (recommended)
    Time: Time of day, mutated in place

Exceptions:
    SimpleDateTimeError: Base exception
    RangeError: Component out of range
    ParseError: Failed to parse a string
    StructuralViolation: Operation touched the other dimension

Example:
    >>> from simpledatetime import DateImmutable, TimeImmutable
    >>> DateImmutable("2025-01-15").modify("next monday")
    DateImmutable('2025-01-20')
    >>> TimeImmutable("23:00").add("PT2H")
    TimeImmutable('01:00:00.000000')
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from simpledatetime.core.date import Date, DateImmutable
from simpledatetime.core.time import Time, TimeImmutable

# Dimensions
from simpledatetime.dimension import Dimension

# Exceptions
from simpledatetime.errors import (
    ParseError,
    RangeError,
    SimpleDateTimeError,
    StructuralViolation,
)

__all__: list[str] = [
    # Version
    "__version__",
    # Core types
    "Date",
    "DateImmutable",
    "Time",
    "TimeImmutable",
    # Dimensions
    "Dimension",
    # Exceptions
    "SimpleDateTimeError",
    "RangeError",
    "ParseError",
    "StructuralViolation",
]
