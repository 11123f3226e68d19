"""Relative phrase parsing and application.

This module turns phrases such as "+1 day", "next monday", "3 hours ago",
"first day of next month" or "tomorrow 14:30" into adjustments of a
reference moment. Whatever text is not recognised as a relative phrase is
handed back as the remainder, for the absolute parser to deal with.

Adjustments are applied in a fixed order, whatever order they were written
in:

    1. day keywords (today, tomorrow, yesterday, midnight, noon, now)
    2. explicit time of day (14:30, 2:30pm, 3pm)
    3. weekday moves (monday, next friday, last sunday)
    4. unit offsets, summed (+1 day, -2 hours, next month, 3 weeks ago)
    5. first/last day of the month

Day keywords and weekday moves reset the clock to midnight unless the phrase
also names an explicit time of day.

With clock_only, day and month moves are skipped and the summed clock
offset wraps around midnight.

Internal module - use simpledatetime.engine instead.
"""

from __future__ import annotations

import datetime as _datetime
import re
from dataclasses import dataclass, field
from typing import NamedTuple

from simpledatetime._internal.constants import MICROS_PER_MILLISECOND, ONE_DAY
from simpledatetime.engine.calendar import (
    add_months,
    first_day_of_month,
    last_day_of_month,
    shift_to_weekday,
)

# Unit names to (canonical unit, multiplier)
UNIT_NAMES: dict[str, tuple[str, int]] = {
    "usec": ("microseconds", 1),
    "usecs": ("microseconds", 1),
    "microsecond": ("microseconds", 1),
    "microseconds": ("microseconds", 1),
    "msec": ("microseconds", MICROS_PER_MILLISECOND),
    "msecs": ("microseconds", MICROS_PER_MILLISECOND),
    "millisecond": ("microseconds", MICROS_PER_MILLISECOND),
    "milliseconds": ("microseconds", MICROS_PER_MILLISECOND),
    "sec": ("seconds", 1),
    "secs": ("seconds", 1),
    "second": ("seconds", 1),
    "seconds": ("seconds", 1),
    "min": ("minutes", 1),
    "mins": ("minutes", 1),
    "minute": ("minutes", 1),
    "minutes": ("minutes", 1),
    "hr": ("hours", 1),
    "hrs": ("hours", 1),
    "hour": ("hours", 1),
    "hours": ("hours", 1),
    "day": ("days", 1),
    "days": ("days", 1),
    "week": ("days", 7),
    "weeks": ("days", 7),
    "fortnight": ("days", 14),
    "fortnights": ("days", 14),
    "month": ("months", 1),
    "months": ("months", 1),
    "year": ("months", 12),
    "years": ("months", 12),
}

# Weekday names to day-of-week number (Monday=0, Sunday=6)
WEEKDAY_NAMES: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
    # Abbreviations
    "mon": 0,
    "tue": 1,
    "tues": 1,
    "wed": 2,
    "thu": 3,
    "thur": 3,
    "thurs": 3,
    "fri": 4,
    "sat": 5,
    "sun": 6,
}

# Direction words to the multiplier they give a unit ("next week" = +1 week)
DIRECTIONS: dict[str, int] = {
    "next": 1,
    "last": -1,
    "previous": -1,
    "this": 0,
}

# Day keywords to (day offset, time of day or None to keep the clock)
DAY_KEYWORDS: dict[str, tuple[int, _datetime.time | None]] = {
    "now": (0, None),
    "today": (0, _datetime.time()),
    "midnight": (0, _datetime.time()),
    "tomorrow": (1, _datetime.time()),
    "yesterday": (-1, _datetime.time()),
    "noon": (0, _datetime.time(12)),
}


def _alternation(words: dict[str, object]) -> str:
    return "|".join(sorted(words, key=len, reverse=True))


_UNITS = _alternation(UNIT_NAMES)
_WEEKDAYS = _alternation(WEEKDAY_NAMES)
_DIRECTIONS = _alternation(DIRECTIONS)

FIRST_LAST_DAY_PATTERN = re.compile(
    rf"\b(?P<which>first|last)\s+day\s+of\b"
    rf"(?:\s+(?P<direction>{_DIRECTIONS})\s+month\b)?",
    re.IGNORECASE,
)

WEEKDAY_PATTERN = re.compile(
    rf"\b(?:(?P<direction>{_DIRECTIONS})\s+)?(?P<weekday>{_WEEKDAYS})\b",
    re.IGNORECASE,
)

DIRECTION_UNIT_PATTERN = re.compile(
    rf"\b(?P<direction>{_DIRECTIONS})\s+(?P<unit>{_UNITS})\b",
    re.IGNORECASE,
)

NUMBER_UNIT_PATTERN = re.compile(
    rf"(?<![\w:.])(?P<sign>[+-]?)\s*(?P<amount>\d+)\s*(?P<unit>{_UNITS})\b"
    rf"(?P<ago>\s+ago\b)?",
    re.IGNORECASE,
)

DAY_KEYWORD_PATTERN = re.compile(
    rf"\b(?P<keyword>{_alternation(DAY_KEYWORDS)})\b",
    re.IGNORECASE,
)

CLOCK_PATTERN = re.compile(
    r"(?<![\w:.+-])(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?"
    r"(?:\s*(?P<meridiem>[ap])\.?m\.?)?(?![\w:.+-])",
    re.IGNORECASE,
)

HOUR_MERIDIEM_PATTERN = re.compile(
    r"(?<![\w:.])(?P<hour>\d{1,2})\s*(?P<meridiem>[ap])\.?m\b\.?",
    re.IGNORECASE,
)

# Connective words left behind once phrases are cut out ("tomorrow at 3pm")
NOISE_PATTERN = re.compile(r"\b(?:at|on)\b|[,\s]+", re.IGNORECASE)


class TimeOfDay(NamedTuple):
    """Explicit time of day found in a phrase."""

    hour: int
    minute: int
    second: int
    microsecond: int


@dataclass
class Adjustments:
    """Everything a relative phrase asks for, in application order."""

    day_offset: int = 0
    day_reset: _datetime.time | None = None
    clock: TimeOfDay | None = None
    weekday: tuple[int, str] | None = None
    offsets: dict[str, int] = field(
        default_factory=lambda: {
            "months": 0,
            "days": 0,
            "hours": 0,
            "minutes": 0,
            "seconds": 0,
            "microseconds": 0,
        }
    )
    month_edge: str | None = None
    matched: bool = False

    def apply(
        self, moment: _datetime.datetime, clock_only: bool = False
    ) -> _datetime.datetime:
        """Apply the adjustments to a moment.

        Args:
            moment: The moment to adjust.
            clock_only: Drop day and month offsets and wrap the clock
                offsets around midnight, for values without a calendar.

        Raises:
            ValueError: If an explicit time of day is out of range.
            OverflowError: If the result leaves the representable range.
        """
        resets_clock = self.day_reset is not None or self.weekday is not None

        if self.day_offset and not clock_only:
            moment = moment + _datetime.timedelta(days=self.day_offset)
        if self.clock is not None:
            moment = moment.replace(
                hour=self.clock.hour,
                minute=self.clock.minute,
                second=self.clock.second,
                microsecond=self.clock.microsecond,
            )
        elif resets_clock:
            moment = _set_clock(moment, self.day_reset or _datetime.time())

        if self.weekday is not None and not clock_only:
            moment = shift_to_weekday(moment, *self.weekday)

        offset = _datetime.timedelta(
            hours=self.offsets["hours"],
            minutes=self.offsets["minutes"],
            seconds=self.offsets["seconds"],
            microseconds=self.offsets["microseconds"],
        )
        if clock_only:
            return moment + offset % ONE_DAY

        # Month edges count from the 1st: Jan 31 + "next month" is February
        if self.month_edge is not None:
            moment = first_day_of_month(moment)
        moment = add_months(moment, self.offsets["months"])
        moment = moment + _datetime.timedelta(days=self.offsets["days"]) + offset

        if self.month_edge == "first":
            moment = first_day_of_month(moment)
        elif self.month_edge == "last":
            moment = last_day_of_month(moment)
        return moment


def _set_clock(moment: _datetime.datetime, clock: _datetime.time) -> _datetime.datetime:
    return moment.replace(
        hour=clock.hour,
        minute=clock.minute,
        second=clock.second,
        microsecond=clock.microsecond,
    )


def _to_24_hour(hour: int, meridiem: str | None) -> int:
    if not meridiem:
        return hour
    if not 1 <= hour <= 12:
        raise ValueError(f"hour must be between 1 and 12 with am/pm, got {hour}")
    if meridiem.lower() == "a":
        return 0 if hour == 12 else hour
    return hour if hour == 12 else hour + 12


def _add_offset(adjustments: Adjustments, unit_name: str, amount: int) -> None:
    unit, multiplier = UNIT_NAMES[unit_name.lower()]
    adjustments.offsets[unit] += amount * multiplier


def scan(text: str) -> tuple[Adjustments, str]:
    """Extract relative phrases from text.

    Args:
        text: Free-form text mixing relative phrases and absolute parts.

    Returns:
        Tuple of (adjustments, remainder). The remainder is the text left
        once every recognised phrase and connective word is removed; it is
        empty when the whole text was relative.

    Raises:
        ValueError: If an explicit time of day uses an invalid am/pm hour.

    Examples:
        >>> adjustments, rest = scan("2025-01-15 +1 day")
        >>> rest
        '2025-01-15'
        >>> adjustments.offsets["days"]
        1
    """
    adjustments = Adjustments()
    working = text

    def consume(match: re.Match[str]) -> str:
        adjustments.matched = True
        return " " * len(match.group(0))

    def first_last(match: re.Match[str]) -> str:
        adjustments.month_edge = match.group("which").lower()
        direction = match.group("direction")
        if direction:
            adjustments.offsets["months"] += DIRECTIONS[direction.lower()]
        return consume(match)

    def weekday(match: re.Match[str]) -> str:
        direction = (match.group("direction") or "this").lower()
        if direction == "previous":
            direction = "last"
        adjustments.weekday = (WEEKDAY_NAMES[match.group("weekday").lower()], direction)
        return consume(match)

    def direction_unit(match: re.Match[str]) -> str:
        _add_offset(
            adjustments,
            match.group("unit"),
            DIRECTIONS[match.group("direction").lower()],
        )
        return consume(match)

    def number_unit(match: re.Match[str]) -> str:
        amount = int(match.group("amount"))
        if match.group("sign") == "-":
            amount = -amount
        if match.group("ago"):
            amount = -amount
        _add_offset(adjustments, match.group("unit"), amount)
        return consume(match)

    def day_keyword(match: re.Match[str]) -> str:
        offset, reset = DAY_KEYWORDS[match.group("keyword").lower()]
        adjustments.day_offset += offset
        if reset is not None:
            adjustments.day_reset = reset
        return consume(match)

    def clock(match: re.Match[str]) -> str:
        fraction = match.group("fraction")
        adjustments.clock = TimeOfDay(
            hour=_to_24_hour(int(match.group("hour")), match.group("meridiem")),
            minute=int(match.group("minute")),
            second=int(match.group("second") or 0),
            microsecond=int(fraction.ljust(6, "0")[:6]) if fraction else 0,
        )
        return consume(match)

    def hour_meridiem(match: re.Match[str]) -> str:
        adjustments.clock = TimeOfDay(
            hour=_to_24_hour(int(match.group("hour")), match.group("meridiem")),
            minute=0,
            second=0,
            microsecond=0,
        )
        return consume(match)

    for pattern, handler in (
        (FIRST_LAST_DAY_PATTERN, first_last),
        (WEEKDAY_PATTERN, weekday),
        (DIRECTION_UNIT_PATTERN, direction_unit),
        (NUMBER_UNIT_PATTERN, number_unit),
        (DAY_KEYWORD_PATTERN, day_keyword),
        (CLOCK_PATTERN, clock),
        (HOUR_MERIDIEM_PATTERN, hour_meridiem),
    ):
        working = pattern.sub(handler, working)

    remainder = NOISE_PATTERN.sub(" ", working).strip()
    return adjustments, remainder


__all__ = [
    "Adjustments",
    "TimeOfDay",
    "UNIT_NAMES",
    "WEEKDAY_NAMES",
    "DIRECTIONS",
    "DAY_KEYWORDS",
    "scan",
]
