"""Temporal engine adapter.

The value types never do calendar arithmetic, parsing or formatting
themselves; they hand a canonical moment to this adapter and store whatever
comes back, after it has been projected onto their dimension. Callers are
expected to have run the dimension validators first.

Functions:
    parse: Parse free-form text into a canonical moment.
    parse_format: Parse text against a letter format into a canonical moment.
    apply_modifier: Apply a relative phrase to a canonical moment.
    apply_interval: Add or subtract an interval from a canonical moment.
    format: Format a moment with a letter format.
    now: The current moment in a timezone.
    resolve_timezone: Turn a tz argument into a tzinfo.

Examples:
    >>> from simpledatetime.dimension import Dimension
    >>> moment = parse("2025-01-15 +1 day", Dimension.DATE)
    >>> format(moment, "Y-m-d")
    '2025-01-16'
"""

from __future__ import annotations

import datetime as _datetime
from typing import Union

import structlog
from dateutil import tz as _tz

from simpledatetime.dimension import Dimension
from simpledatetime.engine.formatter import format_moment, parse_with_format
from simpledatetime.engine.interval import Interval, shift
from simpledatetime.engine.parser import parse_text
from simpledatetime.errors import ParseError
from simpledatetime.normalize import normalize

log = structlog.get_logger(__name__)

TimezoneLike = Union[_datetime.tzinfo, str, None]


def resolve_timezone(tz: TimezoneLike) -> _datetime.tzinfo:
    """Turn a tz argument into a tzinfo.

    Args:
        tz: A tzinfo, an IANA name such as "Europe/Paris", or None for the
            system local zone.

    Raises:
        ParseError: If a name does not resolve to a zone.
        TypeError: If tz is of an unsupported type.
    """
    if tz is None:
        return _tz.tzlocal()
    if isinstance(tz, _datetime.tzinfo):
        return tz
    if isinstance(tz, str):
        zone = _tz.gettz(tz)
        if zone is None:
            raise ParseError(f"unknown timezone {tz!r}")
        return zone
    raise TypeError(f"expected tzinfo, str or None, got {type(tz).__name__}")


def now(tz: TimezoneLike = None) -> _datetime.datetime:
    """Return the current moment in a timezone."""
    return _datetime.datetime.now(resolve_timezone(tz))


def _require_text(text: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")


def parse(
    text: str, dimension: Dimension, tz: TimezoneLike = None
) -> _datetime.datetime:
    """Parse free-form text into a canonical moment.

    Args:
        text: Absolute and/or relative text ("2025-01-15", "tomorrow",
            "14:30", "next monday", "now").
        dimension: The dimension to project the result onto.
        tz: Timezone deciding what "now" and "today" mean.

    Returns:
        The canonical moment of the dimension.

    Raises:
        ParseError: If the text cannot be parsed.
    """
    _require_text(text)
    try:
        moment = parse_text(text, now(tz))
    except ParseError:
        raise
    except (ValueError, OverflowError) as e:
        raise ParseError(str(e)) from e
    return normalize(moment, dimension)


def parse_format(
    fmt: str, text: str, dimension: Dimension, tz: TimezoneLike = None
) -> _datetime.datetime:
    """Parse text against a letter format into a canonical moment.

    Fields the format does not mention are taken from the current moment in
    tz, unless the format contains "!" or "|".

    Raises:
        ParseError: If the text does not match the format.
    """
    _require_text(fmt)
    _require_text(text)
    return normalize(parse_with_format(fmt, text, now(tz)), dimension)


def apply_modifier(
    moment: _datetime.datetime, text: str, dimension: Dimension
) -> _datetime.datetime:
    """Apply a relative phrase to a canonical moment.

    Times keep only the clock part of the phrase, wrapped around midnight.

    Raises:
        ParseError: If the phrase cannot be applied.
    """
    _require_text(text)
    try:
        result = parse_text(
            text, moment, reset_clock=False, clock_only=dimension is Dimension.TIME
        )
    except ParseError:
        log.debug("modifier_failed", modifier=text, dimension=dimension.value)
        raise
    except (ValueError, OverflowError) as e:
        log.debug("modifier_failed", modifier=text, dimension=dimension.value)
        raise ParseError(f"cannot apply modifier {text!r}: {e}") from e
    return normalize(result, dimension)


def apply_interval(
    moment: _datetime.datetime,
    interval: Interval,
    dimension: Dimension,
    sign: int = 1,
) -> _datetime.datetime:
    """Add (sign=1) or subtract (sign=-1) an interval from a canonical moment.

    Times ignore the years, months and days of the interval and wrap
    around midnight.

    Raises:
        ParseError: If a string interval is invalid, or the result leaves
            the representable range.
        TypeError: If the interval is of an unsupported type.
    """
    try:
        result = shift(moment, interval, sign, clock_only=dimension is Dimension.TIME)
    except ParseError:
        raise
    except (ValueError, OverflowError) as e:
        raise ParseError(f"cannot apply interval {interval!r}: {e}") from e
    return normalize(result, dimension)


def format(moment: _datetime.datetime, fmt: str) -> str:
    """Format a moment with a letter format."""
    _require_text(fmt)
    return format_moment(moment, fmt)


__all__ = [
    "TimezoneLike",
    "Interval",
    "resolve_timezone",
    "now",
    "parse",
    "parse_format",
    "apply_modifier",
    "apply_interval",
    "format",
]
