"""Calendar arithmetic helpers for the engine.

Month and year shifts overflow rather than clip: the day of month is kept
and any excess days roll into the following month, so 2025-01-31 plus one
month is 2025-03-03 and 2024-02-29 plus one year is 2025-03-01.

This module is not part of the public API.
"""

from __future__ import annotations

import calendar
import datetime as _datetime

from dateutil.relativedelta import relativedelta

ENGLISH_WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

ENGLISH_MONTHS: tuple[str, ...] = (
    "",  # Placeholder for 1-indexed access
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month (28-31)."""
    return calendar.monthrange(year, month)[1]


def add_months(moment: _datetime.datetime, months: int) -> _datetime.datetime:
    """Shift a moment by whole months, overflowing past short months.

    Args:
        moment: The moment to shift.
        months: Number of months, negative to go back.

    Returns:
        The shifted moment; the time of day is kept.

    Examples:
        >>> add_months(_datetime.datetime(2025, 1, 31), 1)
        datetime.datetime(2025, 3, 3, 0, 0)
        >>> add_months(_datetime.datetime(2025, 3, 31), -1)
        datetime.datetime(2025, 3, 3, 0, 0)
    """
    if not months:
        return moment
    first = moment.replace(day=1) + relativedelta(months=months)
    return first + _datetime.timedelta(days=moment.day - 1)


def first_day_of_month(moment: _datetime.datetime) -> _datetime.datetime:
    """Return the same time of day on the first day of the month."""
    return moment.replace(day=1)


def last_day_of_month(moment: _datetime.datetime) -> _datetime.datetime:
    """Return the same time of day on the last day of the month."""
    return moment.replace(day=days_in_month(moment.year, moment.month))


def shift_to_weekday(
    moment: _datetime.datetime, weekday: int, direction: str
) -> _datetime.datetime:
    """Move to a weekday relative to the moment's own day.

    Args:
        moment: Reference moment.
        weekday: Target day of week (0=Monday, 6=Sunday).
        direction: "this" (today if it matches, else the next one), "next"
            (strictly after today) or "last" (strictly before today).

    Returns:
        The moment moved to the target day; the time of day is kept.

    Examples:
        >>> wed = _datetime.datetime(2025, 1, 15)
        >>> shift_to_weekday(wed, 0, "next").day
        20
        >>> shift_to_weekday(wed, 2, "this").day
        15
        >>> shift_to_weekday(wed, 2, "last").day
        8
    """
    current = moment.weekday()
    if direction == "next":
        days = (weekday - current) % 7 or 7
    elif direction == "last":
        days = -((current - weekday) % 7 or 7)
    else:
        days = (weekday - current) % 7
    return moment + _datetime.timedelta(days=days)


def iso_week_date(year: int, week: int, day_of_week: int = 1) -> _datetime.date:
    """Return the calendar date of an ISO-8601 week date.

    Out-of-range weeks and days overflow into neighbouring weeks, so week 53
    of a 52-week year is week 1 of the next year.

    Examples:
        >>> iso_week_date(2025, 1, 1)
        datetime.date(2024, 12, 30)
    """
    week_one_monday = _datetime.date.fromisocalendar(year, 1, 1)
    return week_one_monday + _datetime.timedelta(
        weeks=week - 1, days=day_of_week - 1
    )


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix of a day of month."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


__all__ = [
    "ENGLISH_WEEKDAYS",
    "ENGLISH_MONTHS",
    "days_in_month",
    "add_months",
    "first_day_of_month",
    "last_day_of_month",
    "shift_to_weekday",
    "iso_week_date",
    "ordinal_suffix",
]
