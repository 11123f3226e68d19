"""Dimension descriptors.

A dimension is one of the two mutually exclusive axes this library keeps
apart: the calendar date and the wall-clock time. Everything that differs
between Date and Time values lives in a DimensionDescriptor, so that the
value classes share one implementation parameterized by the descriptor.

Format letter tables:
    Time letters:       a A B g G h H i s u v
    Date letters:       d D j l N S w z W F m M n t L o X x Y y
    Timezone letters:   e I O P p T Z   (blocked for both dimensions)
    Composite letters:  c r U           (blocked for both dimensions)
"""

from __future__ import annotations

import datetime as _datetime
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from simpledatetime._internal.constants import (
    DATE_DISPLAY_FORMAT,
    TIME_DISPLAY_FORMAT,
)
from simpledatetime.normalize import normalize_date, normalize_time

TIME_FORMAT_CHARS: tuple[str, ...] = (
    "a",  # Lowercase am/pm
    "A",  # Uppercase AM/PM
    "B",  # Swatch Internet time
    "g",  # 12-hour without leading zeros
    "G",  # 24-hour without leading zeros
    "h",  # 12-hour with leading zeros
    "H",  # 24-hour with leading zeros
    "i",  # Minutes with leading zeros
    "s",  # Seconds with leading zeros
    "u",  # Microseconds
    "v",  # Milliseconds
)

DATE_FORMAT_CHARS: tuple[str, ...] = (
    "d",  # Day of month, 2 digits
    "D",  # Weekday abbreviation
    "j",  # Day of month without leading zeros
    "l",  # Full weekday name
    "N",  # ISO-8601 day of week (1=Monday)
    "S",  # English ordinal suffix
    "w",  # Day of week (0=Sunday)
    "z",  # Day of year, from 0
    "W",  # ISO-8601 week number
    "F",  # Full month name
    "m",  # Month, 2 digits
    "M",  # Month abbreviation
    "n",  # Month without leading zeros
    "t",  # Days in month
    "L",  # Leap year flag
    "o",  # ISO-8601 week-numbering year
    "X",  # Expanded year, always signed
    "x",  # Expanded year if required
    "Y",  # Year, at least 4 digits
    "y",  # Year, 2 digits
)

TIMEZONE_FORMAT_CHARS: tuple[str, ...] = ("e", "I", "O", "P", "p", "T", "Z")

COMPOSITE_FORMAT_CHARS: tuple[str, ...] = (
    "c",  # ISO 8601 stamp
    "r",  # RFC 2822 stamp
    "U",  # Seconds since the Unix epoch
)

# Keywords in modifier phrases that move the calendar date
DATE_MODIFIER_KEYWORDS: tuple[str, ...] = (
    "day",
    "days",
    "week",
    "weeks",
    "fortnight",
    "fortnights",
    "weekday",
    "weekdays",
    "month",
    "months",
    "year",
    "years",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
    "first",
    "last",
    "next",
    "previous",
    "this",
    "today",
    "tomorrow",
    "yesterday",
)

# Keywords in modifier phrases that move the wall-clock time
TIME_MODIFIER_KEYWORDS: tuple[str, ...] = (
    "hour",
    "hours",
    "hr",
    "hrs",
    "minute",
    "minutes",
    "min",
    "mins",
    "second",
    "seconds",
    "sec",
    "secs",
    "microsecond",
    "microseconds",
    "usec",
    "usecs",
    "millisecond",
    "milliseconds",
    "msec",
    "msecs",
    "noon",
)


@dataclass(frozen=True)
class DimensionDescriptor:
    """Everything that distinguishes one dimension from the other.

    Attributes:
        label: Human name used in messages ("Date" or "Time").
        allowed_format_chars: Format letters this dimension may output.
        blocked_format_chars: Format letters rejected by format().
        blocked_keywords: Modifier keywords rejected by modify().
        foreign: Name of the dimension this one must never touch.
        modifier_examples: Phrases quoted in rejection messages.
        display_format: Format used by str() and JSON.
        payload_key: Key of the single-field persistence record.
        normalize: Projection of a full moment onto this dimension.
        from_canonical: Reader of the canonical string, for restoring state.
    """

    label: str
    allowed_format_chars: tuple[str, ...]
    blocked_format_chars: frozenset[str]
    blocked_keywords: tuple[str, ...]
    foreign: str
    modifier_examples: str
    display_format: str
    payload_key: str
    normalize: Callable[[_datetime.datetime | _datetime.date | _datetime.time], _datetime.datetime]
    from_canonical: Callable[[str], _datetime.date | _datetime.time]


class Dimension(Enum):
    """The two axes a value can live on."""

    DATE = "date"
    TIME = "time"

    @property
    def descriptor(self) -> DimensionDescriptor:
        """Return the descriptor for this dimension."""
        return _DESCRIPTORS[self]

    @property
    def opposite(self) -> Dimension:
        """Return the other dimension."""
        return Dimension.TIME if self is Dimension.DATE else Dimension.DATE


_DESCRIPTORS: dict[Dimension, DimensionDescriptor] = {
    Dimension.DATE: DimensionDescriptor(
        label="Date",
        allowed_format_chars=DATE_FORMAT_CHARS,
        blocked_format_chars=frozenset(
            TIME_FORMAT_CHARS + TIMEZONE_FORMAT_CHARS + COMPOSITE_FORMAT_CHARS
        ),
        blocked_keywords=TIME_MODIFIER_KEYWORDS,
        foreign="time",
        modifier_examples='"+1 day", "+1 month", "next monday"',
        display_format=DATE_DISPLAY_FORMAT,
        payload_key="date",
        normalize=normalize_date,
        from_canonical=_datetime.date.fromisoformat,
    ),
    Dimension.TIME: DimensionDescriptor(
        label="Time",
        allowed_format_chars=TIME_FORMAT_CHARS,
        blocked_format_chars=frozenset(
            DATE_FORMAT_CHARS + TIMEZONE_FORMAT_CHARS + COMPOSITE_FORMAT_CHARS
        ),
        blocked_keywords=DATE_MODIFIER_KEYWORDS,
        foreign="date",
        modifier_examples='"+1 hour", "+30 minutes", "+45 seconds"',
        display_format=TIME_DISPLAY_FORMAT,
        payload_key="time",
        normalize=normalize_time,
        from_canonical=_datetime.time.fromisoformat,
    ),
}


__all__ = [
    "Dimension",
    "DimensionDescriptor",
    "TIME_FORMAT_CHARS",
    "DATE_FORMAT_CHARS",
    "TIMEZONE_FORMAT_CHARS",
    "COMPOSITE_FORMAT_CHARS",
    "DATE_MODIFIER_KEYWORDS",
    "TIME_MODIFIER_KEYWORDS",
]
