"""Validation utilities for simpledatetime.

This module provides the range-checking decorator and helpers used by the
component factories (``create``, ``set_time``, ``set_date``...).

This module is not part of the public API.
"""

from __future__ import annotations

import calendar
import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from simpledatetime._internal.constants import MONTH_RANGE, YEAR_RANGE
from simpledatetime.errors import RangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Named parameters are checked against inclusive (min, max) ranges in the
    order the limits are given, so the first offending field is reported.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23), minute=(0, 59))
        ... def create(hour: int, minute: int) -> None:
        ...     pass

        >>> create(24, 0)
        Traceback (most recent call last):
        ...
        RangeError: hour must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise RangeError(param_name, (min_val, max_val), value)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the engine's supported range.

    Raises:
        RangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < YEAR_RANGE[0] or year > YEAR_RANGE[1]:
        raise RangeError("year", YEAR_RANGE, year)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        RangeError: If month is outside 1-12.
    """
    if month < MONTH_RANGE[0] or month > MONTH_RANGE[1]:
        raise RangeError("month", MONTH_RANGE, month)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        RangeError: If day is outside the length of the month.
    """
    max_day = calendar.monthrange(year, month)[1]
    if day < 1 or day > max_day:
        raise RangeError("day", (1, max_day), day)


def validate_ymd(year: int, month: int, day: int) -> None:
    """Validate a full calendar date, year first."""
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_ymd",
]
