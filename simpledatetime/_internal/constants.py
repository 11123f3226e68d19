"""Internal constants for simpledatetime.

These constants define the canonical anchors, limits and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

# Time unit conversions
MICROS_PER_MILLISECOND: int = 1_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
ONE_DAY: _datetime.timedelta = _datetime.timedelta(seconds=SECONDS_PER_DAY)

# Every canonical value lives at zero UTC offset
UTC: _datetime.tzinfo = _datetime.timezone.utc

# Reference day that anchors Time values (never observable)
EPOCH_DATE: _datetime.date = _datetime.date(1970, 1, 1)
UNIX_EPOCH: _datetime.datetime = _datetime.datetime(1970, 1, 1, tzinfo=UTC)

# Year limits (those of the datetime engine)
MIN_YEAR: int = _datetime.MINYEAR
MAX_YEAR: int = _datetime.MAXYEAR

# Component bounds, inclusive
HOUR_RANGE: tuple[int, int] = (0, 23)
MINUTE_RANGE: tuple[int, int] = (0, 59)
SECOND_RANGE: tuple[int, int] = (0, 59)
MICROSECOND_RANGE: tuple[int, int] = (0, 999_999)
MONTH_RANGE: tuple[int, int] = (1, 12)
YEAR_RANGE: tuple[int, int] = (MIN_YEAR, MAX_YEAR)
SECONDS_OF_DAY_RANGE: tuple[int, int] = (0, SECONDS_PER_DAY - 1)
# Unix timestamps of 0001-01-01T00:00:00Z and 9999-12-31T23:59:59Z
TIMESTAMP_RANGE: tuple[int, int] = (-62_135_596_800, 253_402_300_799)

# str() formats (engine letter formats)
DATE_DISPLAY_FORMAT: str = "Y-m-d"
TIME_DISPLAY_FORMAT: str = "H:i:s"


__all__ = [
    "MICROS_PER_MILLISECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "ONE_DAY",
    "UTC",
    "EPOCH_DATE",
    "UNIX_EPOCH",
    "MIN_YEAR",
    "MAX_YEAR",
    "HOUR_RANGE",
    "MINUTE_RANGE",
    "SECOND_RANGE",
    "MICROSECOND_RANGE",
    "MONTH_RANGE",
    "YEAR_RANGE",
    "SECONDS_OF_DAY_RANGE",
    "TIMESTAMP_RANGE",
    "DATE_DISPLAY_FORMAT",
    "TIME_DISPLAY_FORMAT",
]
