"""Canonical normalization.

Every stored value is an aware ``datetime`` at zero UTC offset:

    Date: (year, month, day) at 00:00:00.000000
    Time: (hour, minute, second, microsecond) on 1970-01-01

The wall-clock fields of the input are kept as they are; no timezone
conversion happens here. The offset of the input only ever matters to the
engine when it decides what "now" means.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Union

from simpledatetime._internal.constants import EPOCH_DATE, UTC

if TYPE_CHECKING:
    from simpledatetime.dimension import Dimension

Moment = Union[_datetime.datetime, _datetime.date, _datetime.time]


def normalize_date(moment: Moment) -> _datetime.datetime:
    """Project a moment onto the date dimension.

    Args:
        moment: A datetime or date. Any time and offset are discarded.

    Returns:
        Midnight UTC of the same calendar day.

    Raises:
        TypeError: If moment carries no calendar date.

    Examples:
        >>> normalize_date(_datetime.datetime(2025, 1, 15, 14, 30))
        datetime.datetime(2025, 1, 15, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(moment, (_datetime.datetime, _datetime.date)):
        return _datetime.datetime(moment.year, moment.month, moment.day, tzinfo=UTC)
    raise TypeError(f"cannot take a date from {type(moment).__name__}")


def normalize_time(moment: Moment) -> _datetime.datetime:
    """Project a moment onto the time dimension.

    Args:
        moment: A datetime, time or date. A bare date projects to midnight.

    Returns:
        The same wall-clock time on the epoch day, UTC.

    Examples:
        >>> normalize_time(_datetime.datetime(2025, 6, 15, 16, 45, 30))
        datetime.datetime(1970, 1, 1, 16, 45, 30, tzinfo=datetime.timezone.utc)
    """
    if isinstance(moment, (_datetime.datetime, _datetime.time)):
        return _datetime.datetime.combine(
            EPOCH_DATE,
            _datetime.time(
                moment.hour, moment.minute, moment.second, moment.microsecond
            ),
            tzinfo=UTC,
        )
    if isinstance(moment, _datetime.date):
        return _datetime.datetime.combine(EPOCH_DATE, _datetime.time(), tzinfo=UTC)
    raise TypeError(f"cannot take a time from {type(moment).__name__}")


def normalize(moment: Moment, dimension: Dimension) -> _datetime.datetime:
    """Project a moment onto the canonical representation of a dimension."""
    return dimension.descriptor.normalize(moment)


def canonical_string(moment: Moment, dimension: Dimension) -> str:
    """Return the fixed-width comparison key of a moment.

    ``YYYY-MM-DD`` for dates and ``HH:MM:SS.ffffff`` for times. Both are
    zero-padded to a fixed width, so lexicographic order matches calendar
    and clock order.

    Examples:
        >>> from simpledatetime.dimension import Dimension
        >>> canonical_string(_datetime.time(9, 5), Dimension.TIME)
        '09:05:00.000000'
    """
    from simpledatetime.dimension import Dimension

    value = normalize(moment, dimension)
    if dimension is Dimension.DATE:
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    return (
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond:06d}"
    )


__all__ = [
    "Moment",
    "normalize_date",
    "normalize_time",
    "normalize",
    "canonical_string",
]
