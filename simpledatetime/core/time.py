"""Time classes representing a time of day without date or timezone.

TimeImmutable is the recommended variant; Time mutates in place and is
meant for code that owns the value exclusively.

Both store the wall-clock time on 1970-01-01 UTC. Arithmetic wraps around
midnight: 23:00 plus two hours is 01:00.
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import TypeVar

from simpledatetime import engine
from simpledatetime._internal.constants import (
    EPOCH_DATE,
    HOUR_RANGE,
    MICROSECOND_RANGE,
    MINUTE_RANGE,
    SECOND_RANGE,
    SECONDS_OF_DAY_RANGE,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UTC,
)
from simpledatetime._internal.decorators import structural_violation
from simpledatetime._internal.validation import validate_range
from simpledatetime.core.base import Comparable, TemporalValue
from simpledatetime.dimension import Dimension
from simpledatetime.engine import TimezoneLike

T = TypeVar("T", bound="TimeValue")

_NO_DATE = "Time represents a time-of-day without date."
_NO_TIMEZONE = "Time is timezone-agnostic and stored with UTC."
_NO_TIMESTAMP = "Use set_time() or create() instead."

# H:MM, HH:MM:SS, HH:MM:SS.ffffff
CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\.(\d+))?$")


@validate_range(
    hour=HOUR_RANGE,
    minute=MINUTE_RANGE,
    second=SECOND_RANGE,
    microsecond=MICROSECOND_RANGE,
)
def _clock(
    hour: int, minute: int, second: int = 0, microsecond: int = 0
) -> _datetime.datetime:
    """Return the canonical moment of a wall-clock time."""
    return _datetime.datetime.combine(
        EPOCH_DATE, _datetime.time(hour, minute, second, microsecond), tzinfo=UTC
    )


class TimeValue(TemporalValue):
    """Behaviour shared by TimeImmutable and Time.

    Examples:
        >>> t = TimeImmutable("14:30")
        >>> t.hour, t.minute, t.second
        (14, 30, 0)
        >>> str(t.modify("+45 minutes"))
        '15:15:00'
        >>> t.format("g:i A")
        '2:30 PM'
    """

    __slots__ = ()

    dimension = Dimension.TIME

    def __init__(self, text: str = "now", tz: TimezoneLike = None) -> None:
        """Parse a time of day.

        "HH:MM", "HH:MM:SS" and "HH:MM:SS.ffffff" are read directly, with
        range checks; anything else ("2:30pm", "noon", "now") goes through
        the engine. Any date in the text is discarded.

        Raises:
            RangeError: If a directly read component is out of range.
            ParseError: If the text cannot be parsed.
        """
        match = CLOCK_PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            super().__init__(text, tz)
            return
        hour, minute, second, fraction = match.groups()
        self._moment = _clock(
            int(hour),
            int(minute),
            int(second or 0),
            int(fraction.ljust(6, "0")[:6]) if fraction else 0,
        )

    @classmethod
    def create(
        cls: type[T], hour: int, minute: int, second: int = 0, microsecond: int = 0
    ) -> T:
        """Create a time from its components.

        Raises:
            RangeError: If a component is out of range, naming the field,
                its bound and the rejected value.

        Examples:
            >>> TimeImmutable.create(14, 30)
            TimeImmutable('14:30:00.000000')
            >>> TimeImmutable.create(24, 0)
            Traceback (most recent call last):
            ...
            RangeError: hour must be between 0 and 23, got 24
        """
        return cls._from_moment(_clock(hour, minute, second, microsecond))

    @classmethod
    def now(cls: type[T], tz: TimezoneLike = None) -> T:
        """Return the current wall-clock time in tz (the local zone by default)."""
        return cls._from_moment(engine.now(tz))

    @classmethod
    @validate_range(seconds=SECONDS_OF_DAY_RANGE)
    def from_seconds(cls: type[T], seconds: int) -> T:
        """Create a time from the number of seconds since midnight.

        Examples:
            >>> TimeImmutable.from_seconds(3661)
            TimeImmutable('01:01:01.000000')
        """
        hour, rest = divmod(seconds, SECONDS_PER_HOUR)
        minute, second = divmod(rest, SECONDS_PER_MINUTE)
        return cls.create(hour, minute, second)

    @classmethod
    def midnight(cls: type[T]) -> T:
        return cls.create(0, 0)

    @classmethod
    def noon(cls: type[T]) -> T:
        return cls.create(12, 0)

    @property
    def hour(self) -> int:
        return self._moment.hour

    @property
    def minute(self) -> int:
        return self._moment.minute

    @property
    def second(self) -> int:
        return self._moment.second

    @property
    def microsecond(self) -> int:
        return self._moment.microsecond

    @property
    def total_seconds(self) -> float:
        """Seconds since midnight, with microseconds as the fraction."""
        return (self._moment - _clock(0, 0)).total_seconds()

    def set_time(
        self: T, hour: int, minute: int, second: int = 0, microsecond: int = 0
    ) -> T:
        """Replace every component of the time.

        Raises:
            RangeError: If a component is out of range.
        """
        return self._commit(_clock(hour, minute, second, microsecond))

    @structural_violation(_NO_DATE)
    def set_date(self, year: int, month: int, day: int) -> None:
        ...

    @structural_violation(_NO_DATE)
    def set_iso_date(self, year: int, week: int, day_of_week: int = 1) -> None:
        ...

    @structural_violation(_NO_TIMEZONE)
    def set_timezone(self, tz: TimezoneLike) -> None:
        ...

    @structural_violation(_NO_TIMESTAMP)
    def set_timestamp(self, timestamp: int) -> None:
        ...

    def is_same_time_as(self, other: Comparable) -> bool:
        """Alias of is_same_as()."""
        return self.is_same_as(other)

    def to_immutable(self) -> TimeImmutable:
        """Return an immutable copy."""
        return TimeImmutable._from_moment(self._moment)

    def to_mutable(self) -> Time:
        """Return a mutable copy."""
        return Time._from_moment(self._moment)


class TimeImmutable(TimeValue):
    """An immutable time of day.

    Every mutator returns a new instance and leaves the receiver unchanged.
    Instances are hashable.
    """

    __slots__ = ()

    _mutable = False

    def __hash__(self) -> int:
        return hash((self.dimension, self._canonical))


class Time(TimeValue):
    """A mutable time of day.

    Every mutator changes the receiver and returns it. Instances are not
    hashable.

    Examples:
        >>> t = Time("23:00")
        >>> t.add("PT2H")
        Time('01:00:00.000000')
    """

    __slots__ = ()

    _mutable = True

    __hash__ = None  # type: ignore[assignment]


__all__ = ["TimeValue", "TimeImmutable", "Time"]
