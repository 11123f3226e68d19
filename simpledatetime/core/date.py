"""Date classes representing a calendar date without time or timezone.

DateImmutable is the recommended variant; Date mutates in place and is
meant for code that owns the value exclusively.

Both store the calendar day as midnight UTC, so two dates built from the
same day compare equal whatever the clock or zone of their source.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TypeVar

from simpledatetime import engine
from simpledatetime._internal.constants import TIMESTAMP_RANGE, UNIX_EPOCH, UTC, YEAR_RANGE
from simpledatetime._internal.decorators import structural_violation
from simpledatetime._internal.validation import validate_range, validate_ymd
from simpledatetime.core.base import Comparable, TemporalValue
from simpledatetime.dimension import Dimension
from simpledatetime.engine import TimezoneLike
from simpledatetime.engine.calendar import iso_week_date

D = TypeVar("D", bound="DateValue")

_NO_TIME = "Date represents a calendar date without time."
_NO_TIMEZONE = "Date is timezone-agnostic and stored as midnight UTC."


class DateValue(TemporalValue):
    """Behaviour shared by DateImmutable and Date.

    Examples:
        >>> d = DateImmutable("2025-01-15")
        >>> d.year, d.month, d.day
        (2025, 1, 15)
        >>> str(d.modify("+1 month"))
        '2025-02-15'
        >>> d.format("l jS F Y")
        'Wednesday 15th January 2025'
    """

    __slots__ = ()

    dimension = Dimension.DATE

    @classmethod
    def create(cls: type[D], year: int, month: int, day: int) -> D:
        """Create a date from its components.

        Raises:
            RangeError: If year, month or day is out of range, checked in
                that order.

        Examples:
            >>> DateImmutable.create(2024, 2, 29)
            DateImmutable('2024-02-29')
            >>> DateImmutable.create(2025, 2, 29)
            Traceback (most recent call last):
            ...
            RangeError: day must be between 1 and 28, got 29
        """
        validate_ymd(year, month, day)
        return cls._from_moment(_datetime.datetime(year, month, day, tzinfo=UTC))

    @classmethod
    def today(cls: type[D], tz: TimezoneLike = None) -> D:
        """Return the current calendar day in tz (the local zone by default)."""
        return cls._from_moment(engine.now(tz))

    @property
    def year(self) -> int:
        return self._moment.year

    @property
    def month(self) -> int:
        return self._moment.month

    @property
    def day(self) -> int:
        return self._moment.day

    def set_date(self: D, year: int, month: int, day: int) -> D:
        """Replace every component of the date.

        Raises:
            RangeError: If the components do not form a valid date.
        """
        validate_ymd(year, month, day)
        return self._commit(_datetime.datetime(year, month, day, tzinfo=UTC))

    @validate_range(year=YEAR_RANGE)
    def set_iso_date(self: D, year: int, week: int, day_of_week: int = 1) -> D:
        """Move to an ISO 8601 week date.

        Weeks and days past the end of their range roll over into the next
        week or year.

        Examples:
            >>> DateImmutable("2025-06-01").set_iso_date(2025, 1)
            DateImmutable('2024-12-30')
        """
        return self._commit(
            _datetime.datetime.combine(iso_week_date(year, week, day_of_week), _datetime.time())
        )

    @validate_range(timestamp=TIMESTAMP_RANGE)
    def set_timestamp(self: D, timestamp: int) -> D:
        """Move to the UTC calendar day of a Unix timestamp.

        Raises:
            RangeError: If the timestamp falls outside years 1 to 9999.

        Examples:
            >>> DateImmutable("2000-01-01").set_timestamp(1750075200)
            DateImmutable('2025-06-16')
        """
        return self._commit(UNIX_EPOCH + _datetime.timedelta(seconds=timestamp))

    @structural_violation(_NO_TIME)
    def set_time(self, hour: int, minute: int, second: int = 0, microsecond: int = 0) -> None:
        ...

    @structural_violation(_NO_TIMEZONE)
    def set_timezone(self, tz: TimezoneLike) -> None:
        ...

    def is_same_date_as(self, other: Comparable) -> bool:
        """Alias of is_same_as()."""
        return self.is_same_as(other)

    def to_immutable(self) -> DateImmutable:
        """Return an immutable copy."""
        return DateImmutable._from_moment(self._moment)

    def to_mutable(self) -> Date:
        """Return a mutable copy."""
        return Date._from_moment(self._moment)


class DateImmutable(DateValue):
    """An immutable calendar date.

    Every mutator returns a new instance and leaves the receiver unchanged.
    Instances are hashable.

    Examples:
        >>> d = DateImmutable("2025-01-15")
        >>> d.add("P1D")
        DateImmutable('2025-01-16')
        >>> d
        DateImmutable('2025-01-15')
    """

    __slots__ = ()

    _mutable = False

    def __hash__(self) -> int:
        return hash((self.dimension, self._canonical))


class Date(DateValue):
    """A mutable calendar date.

    Every mutator changes the receiver and returns it. Instances are not
    hashable; use to_immutable() for dictionary keys.

    Examples:
        >>> d = Date("2025-01-15")
        >>> d.add("P1D") is d
        True
        >>> d
        Date('2025-01-16')
    """

    __slots__ = ()

    _mutable = True

    __hash__ = None  # type: ignore[assignment]


__all__ = ["DateValue", "DateImmutable", "Date"]
