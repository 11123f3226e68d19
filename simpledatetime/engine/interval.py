"""Intervals accepted by add() and subtract().

An interval is dimension-agnostic: it may carry calendar and clock
magnitudes at once. Three spellings are accepted:

    relativedelta(months=1, hours=2)      dateutil relative delta
    timedelta(days=1, hours=2)            standard library delta
    "P1MT2H"                              ISO 8601 duration string

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import Union

from dateutil.relativedelta import relativedelta

from simpledatetime._internal.constants import ONE_DAY
from simpledatetime.engine.calendar import add_months
from simpledatetime.errors import ParseError

Interval = Union[relativedelta, _datetime.timedelta, str]

_ABSOLUTE_FIELDS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)

ISO_DURATION_PATTERN = re.compile(
    r"^(?P<sign>[+-])?P"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<weeks>\d+)W)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)(?:[.,](?P<fraction>\d+))?S)?"
    r")?$"
)


def parse_iso_duration(value: str) -> relativedelta:
    """Parse an ISO 8601 duration string.

    Args:
        value: Duration such as "P1D", "PT5H30M" or "-P1Y2M3DT4H5M6.5S".

    Returns:
        The equivalent relativedelta.

    Raises:
        ParseError: If the string is not a valid ISO 8601 duration.

    Examples:
        >>> parse_iso_duration("P1DT5H30M")
        relativedelta(days=+1, hours=+5, minutes=+30)
    """
    text = value.strip()
    match = ISO_DURATION_PATTERN.match(text)
    if not match or text.endswith(("P", "T")):
        raise ParseError(f"invalid ISO 8601 duration: {value!r}")

    fields = {
        name: int(match.group(name) or 0)
        for name in ("years", "months", "weeks", "days", "hours", "minutes", "seconds")
    }
    fraction = match.group("fraction")
    microseconds = int(fraction.ljust(6, "0")[:6]) if fraction else 0

    delta = relativedelta(
        years=fields["years"],
        months=fields["months"],
        days=fields["days"] + 7 * fields["weeks"],
        hours=fields["hours"],
        minutes=fields["minutes"],
        seconds=fields["seconds"],
        microseconds=microseconds,
    )
    return -delta if match.group("sign") == "-" else delta


def to_relativedelta(interval: Interval) -> relativedelta:
    """Coerce any accepted interval spelling to a relative relativedelta.

    Raises:
        ParseError: If a string interval is not a valid ISO 8601 duration.
        TypeError: If interval is of an unsupported type, or is a
            relativedelta carrying absolute fields (year=, month=...).
    """
    if isinstance(interval, str):
        return parse_iso_duration(interval)
    if isinstance(interval, _datetime.timedelta):
        return relativedelta(
            days=interval.days,
            seconds=interval.seconds,
            microseconds=interval.microseconds,
        )
    if isinstance(interval, relativedelta):
        absolute = [name for name in _ABSOLUTE_FIELDS if getattr(interval, name) is not None]
        if absolute or interval.leapdays:
            raise TypeError(
                "interval must be relative, got absolute fields: "
                + ", ".join(absolute or ["leapdays"])
            )
        return interval
    raise TypeError(
        f"expected relativedelta, timedelta or ISO 8601 string, got {type(interval).__name__}"
    )


def shift(
    moment: _datetime.datetime,
    interval: Interval,
    sign: int = 1,
    clock_only: bool = False,
) -> _datetime.datetime:
    """Apply an interval to a moment.

    Years and months are applied first, with overflow past short months;
    the remaining days and clock units are then added as exact time.

    Args:
        moment: The moment to shift.
        interval: Interval in any accepted spelling.
        sign: 1 to add, -1 to subtract.
        clock_only: Ignore years, months and days, and wrap the clock units
            around midnight.

    Returns:
        The shifted moment.
    """
    delta = to_relativedelta(interval)
    if sign < 0:
        delta = -delta

    clock = _datetime.timedelta(
        hours=delta.hours,
        minutes=delta.minutes,
        seconds=delta.seconds,
        microseconds=delta.microseconds,
    )
    if clock_only:
        return moment + clock % ONE_DAY

    moment = add_months(moment, delta.years * 12 + delta.months)
    return moment + _datetime.timedelta(days=delta.days) + clock


__all__ = [
    "Interval",
    "parse_iso_duration",
    "to_relativedelta",
    "shift",
]
