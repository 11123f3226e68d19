"""Letter-format output and parsing.

Format strings are made of single letters. Each letter is replaced by a
component of the moment, a backslash makes the next character literal,
and every other character is copied through.

Supported Letters:
    Day:      d D j l N S w z
    Week:     W
    Month:    F m M n t
    Year:     L o X x Y y
    Time:     a A B g G h H i s u v
    Zone:     e I O P p T Z
    Full:     c r U

Names are always English; there is no locale support.

Functions:
    format_moment: Format a datetime using a letter format string.
    parse_with_format: Parse a string using a letter format string.

Examples:
    >>> import datetime
    >>> moment = datetime.datetime(2025, 1, 15, 14, 30, tzinfo=datetime.timezone.utc)
    >>> format_moment(moment, "l, F jS Y")
    'Wednesday, January 15th 2025'
    >>> format_moment(moment, "g:i A")
    '2:30 PM'
"""

from __future__ import annotations

import calendar
import datetime as _datetime
import re
from typing import Callable

from dateutil import tz as _tz

from simpledatetime._internal.constants import (
    MICROS_PER_MILLISECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH,
)
from simpledatetime.engine.calendar import (
    ENGLISH_MONTHS,
    ENGLISH_WEEKDAYS,
    days_in_month,
    ordinal_suffix,
)
from simpledatetime.errors import ParseError

ESCAPE = "\\"


def _offset_seconds(moment: _datetime.datetime) -> int:
    offset = moment.utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def _offset(moment: _datetime.datetime, separator: str) -> str:
    seconds = _offset_seconds(moment)
    sign = "+" if seconds >= 0 else "-"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _zone_name(moment: _datetime.datetime) -> str:
    if moment.tzinfo is None:
        return "UTC"
    name = getattr(moment.tzinfo, "key", None) or moment.tzname()
    return name or _offset(moment, ":")


def _zone_abbreviation(moment: _datetime.datetime) -> str:
    name = moment.tzname() if moment.tzinfo is not None else None
    return name or "UTC"


def _is_dst(moment: _datetime.datetime) -> str:
    if moment.tzinfo is None:
        return "0"
    dst = moment.dst()
    return "1" if dst else "0"


def _swatch(moment: _datetime.datetime) -> str:
    # Biel Mean Time is UTC+1
    seconds = (
        moment.hour * SECONDS_PER_HOUR + moment.minute * SECONDS_PER_MINUTE + moment.second
    )
    seconds = (seconds - _offset_seconds(moment) + SECONDS_PER_HOUR) % SECONDS_PER_DAY
    return f"{int(seconds / 86.4):03d}"


def _expanded_year(year: int, always_signed: bool) -> str:
    if always_signed or year >= 10000:
        return f"+{year:04d}"
    return f"{year:04d}"


def _hour12(moment: _datetime.datetime) -> int:
    return moment.hour % 12 or 12


def _timestamp(moment: _datetime.datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=_datetime.timezone.utc)
    return str(calendar.timegm(moment.utctimetuple()))


_LETTERS: dict[str, Callable[[_datetime.datetime], str]] = {
    # Day
    "d": lambda m: f"{m.day:02d}",
    "D": lambda m: ENGLISH_WEEKDAYS[m.weekday()][:3],
    "j": lambda m: str(m.day),
    "l": lambda m: ENGLISH_WEEKDAYS[m.weekday()],
    "N": lambda m: str(m.isoweekday()),
    "S": lambda m: ordinal_suffix(m.day),
    "w": lambda m: str(m.isoweekday() % 7),
    "z": lambda m: str(m.timetuple().tm_yday - 1),
    # Week
    "W": lambda m: f"{m.isocalendar()[1]:02d}",
    # Month
    "F": lambda m: ENGLISH_MONTHS[m.month],
    "m": lambda m: f"{m.month:02d}",
    "M": lambda m: ENGLISH_MONTHS[m.month][:3],
    "n": lambda m: str(m.month),
    "t": lambda m: str(days_in_month(m.year, m.month)),
    # Year
    "L": lambda m: "1" if calendar.isleap(m.year) else "0",
    "o": lambda m: str(m.isocalendar()[0]),
    "X": lambda m: _expanded_year(m.year, always_signed=True),
    "x": lambda m: _expanded_year(m.year, always_signed=False),
    "Y": lambda m: f"{m.year:04d}",
    "y": lambda m: f"{m.year % 100:02d}",
    # Time
    "a": lambda m: "am" if m.hour < 12 else "pm",
    "A": lambda m: "AM" if m.hour < 12 else "PM",
    "B": _swatch,
    "g": lambda m: str(_hour12(m)),
    "G": lambda m: str(m.hour),
    "h": lambda m: f"{_hour12(m):02d}",
    "H": lambda m: f"{m.hour:02d}",
    "i": lambda m: f"{m.minute:02d}",
    "s": lambda m: f"{m.second:02d}",
    "u": lambda m: f"{m.microsecond:06d}",
    "v": lambda m: f"{m.microsecond // MICROS_PER_MILLISECOND:03d}",
    # Zone
    "e": _zone_name,
    "I": _is_dst,
    "O": lambda m: _offset(m, ""),
    "P": lambda m: _offset(m, ":"),
    "p": lambda m: "Z" if _offset_seconds(m) == 0 else _offset(m, ":"),
    "T": _zone_abbreviation,
    "Z": lambda m: str(_offset_seconds(m)),
    # Full
    "c": lambda m: format_moment(m, "Y-m-d\\TH:i:sP"),
    "r": lambda m: format_moment(m, "D, d M Y H:i:s O"),
    "U": _timestamp,
}


def format_moment(moment: _datetime.datetime, fmt: str) -> str:
    """Format a datetime using a letter format string.

    Args:
        moment: The datetime to format.
        fmt: Format string of letters, escapes and literal characters.

    Returns:
        Formatted string.

    Examples:
        >>> import datetime
        >>> moment = datetime.datetime(2025, 1, 15)
        >>> format_moment(moment, "Y-m-d \\\\H:\\\\i")
        '2025-01-15 H:i'
    """
    result = []
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char == ESCAPE and i + 1 < len(fmt):
            result.append(fmt[i + 1])
            i += 2
            continue
        handler = _LETTERS.get(char)
        result.append(handler(moment) if handler is not None else char)
        i += 1

    return "".join(result)


# Mapping of format letters to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "d": r"(?P<day>\d{2})",
    "j": r"(?P<day>\d{1,2})",
    "D": r"(?:mon|tue|wed|thu|fri|sat|sun)",
    "l": r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)",
    "S": r"(?:st|nd|rd|th)",
    "z": r"(?P<day_of_year>\d{1,3})",
    "F": r"(?P<month_name>[a-z]{3,9})",
    "M": r"(?P<month_name>[a-z]{3})",
    "m": r"(?P<month>\d{2})",
    "n": r"(?P<month>\d{1,2})",
    "Y": r"(?P<year>\d{4})",
    "y": r"(?P<short_year>\d{2})",
    "a": r"(?P<meridiem>am|pm)",
    "A": r"(?P<meridiem>am|pm)",
    "g": r"(?P<hour12>\d{1,2})",
    "h": r"(?P<hour12>\d{2})",
    "G": r"(?P<hour>\d{1,2})",
    "H": r"(?P<hour>\d{2})",
    "i": r"(?P<minute>\d{2})",
    "s": r"(?P<second>\d{2})",
    "u": r"(?P<microsecond>\d{1,6})",
    "v": r"(?P<millisecond>\d{3})",
    "U": r"(?P<timestamp>-?\d+)",
    "e": r"(?P<zone>[a-z_]+(?:/[a-z_]+)*|[+-]\d{2}:?\d{2}|z)",
    "T": r"(?P<zone>[a-z]{1,6}|[+-]\d{2}:?\d{2}|z)",
    "O": r"(?P<zone>[+-]\d{2}:?\d{2}|z)",
    "P": r"(?P<zone>[+-]\d{2}:?\d{2}|z)",
    "p": r"(?P<zone>[+-]\d{2}:?\d{2}|z)",
    "#": r"[;:/.,\-()]",
    "?": r".",
    "*": r"[^\s;:/.,\-()]*",
    " ": r"\s",
}

# Letters that reset every field not parsed to its epoch value
_RESET_LETTERS = ("!", "|")


def _format_to_regex(fmt: str) -> tuple[str, bool]:
    """Convert a letter format string to a regex pattern.

    Returns:
        Tuple of (pattern, reset) where reset tells whether unparsed fields
        take their epoch value instead of the current one.

    Raises:
        ParseError: If a letter appears twice for the same field.
    """
    result = []
    seen: set[str] = set()
    reset = False
    trailing = False
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char == ESCAPE and i + 1 < len(fmt):
            result.append(re.escape(fmt[i + 1]))
            i += 2
            continue
        if char in _RESET_LETTERS:
            reset = True
        elif char == "+":
            trailing = True
        elif char in _PARSE_PATTERNS:
            pattern = _PARSE_PATTERNS[char]
            group = re.match(r"\(\?P<(\w+)>", pattern)
            if group is not None:
                name = group.group(1)
                if name in seen:
                    raise ParseError(f"format {fmt!r} sets {name} more than once")
                seen.add(name)
            result.append(pattern)
        else:
            result.append(re.escape(char))
        i += 1

    return "^" + "".join(result) + (".*" if trailing else "") + "$", reset


def _resolve_zone(text: str) -> _datetime.tzinfo:
    if text.lower() == "z":
        return _datetime.timezone.utc
    offset = re.fullmatch(r"([+-])(\d{2}):?(\d{2})", text)
    if offset is not None:
        sign = -1 if offset.group(1) == "-" else 1
        return _datetime.timezone(
            sign * _datetime.timedelta(hours=int(offset.group(2)), minutes=int(offset.group(3)))
        )
    zone = _tz.gettz(text)
    if zone is None:
        raise ParseError(f"unknown timezone {text!r}")
    return zone


def _month_from_name(name: str) -> int:
    lowered = name.lower()
    for number, month in enumerate(ENGLISH_MONTHS):
        if number and (lowered == month.lower() or lowered == month[:3].lower()):
            return number
    raise ParseError(f"unknown month name {name!r}")


def parse_with_format(
    fmt: str, text: str, default: _datetime.datetime
) -> _datetime.datetime:
    """Parse a string using a letter format string.

    Fields the format does not mention are taken from default, or from the
    Unix epoch when the format contains "!" or "|". Besides the letters of
    format_moment, the format may use "#" (one separator), "?" (any
    character), "*" (anything up to the next separator) and a trailing "+"
    (ignore trailing data).

    Args:
        fmt: Format string.
        text: The string to parse.
        default: Aware datetime supplying unparsed fields and the zone.

    Returns:
        The parsed aware datetime.

    Raises:
        ParseError: If the string doesn't match the format, or a parsed
            component is out of range.

    Examples:
        >>> import datetime
        >>> default = datetime.datetime(2025, 1, 1, tzinfo=datetime.timezone.utc)
        >>> parse_with_format("d/m/Y", "25/12/2025", default).date()
        datetime.date(2025, 12, 25)
    """
    pattern, reset = _format_to_regex(fmt)
    match = re.match(pattern, text, re.IGNORECASE)
    if not match:
        raise ParseError(f"string {text!r} does not match format {fmt!r}")

    groups = {name: value for name, value in match.groupdict().items() if value is not None}

    zone = _resolve_zone(groups["zone"]) if "zone" in groups else default.tzinfo

    if "timestamp" in groups:
        try:
            moment = UNIX_EPOCH + _datetime.timedelta(seconds=int(groups["timestamp"]))
            return moment.astimezone(zone) if "zone" in groups else moment
        except OverflowError as e:
            raise ParseError(f"timestamp {groups['timestamp']} is out of range") from e

    if reset:
        base = _datetime.datetime(1970, 1, 1, tzinfo=zone)
    else:
        base = default.astimezone(zone) if zone is not default.tzinfo else default
        # A parsed clock field resets the finer ones it does not name
        if groups.keys() & {"hour", "hour12", "minute", "second"}:
            base = base.replace(second=0, microsecond=0)
            if groups.keys() & {"hour", "hour12"}:
                base = base.replace(minute=0)

    year = base.year
    if "year" in groups:
        year = int(groups["year"])
    elif "short_year" in groups:
        short = int(groups["short_year"])
        year = 2000 + short if short < 70 else 1900 + short

    month = base.month
    if "month" in groups:
        month = int(groups["month"])
    elif "month_name" in groups:
        month = _month_from_name(groups["month_name"])

    day = int(groups["day"]) if "day" in groups else base.day

    hour = base.hour
    if "hour" in groups:
        hour = int(groups["hour"])
    elif "hour12" in groups:
        hour = int(groups["hour12"])
    if "meridiem" in groups:
        if not 1 <= hour <= 12:
            raise ParseError(f"hour must be between 1 and 12 with am/pm, got {hour}")
        hour = hour % 12 + (12 if groups["meridiem"].lower() == "pm" else 0)

    microsecond = base.microsecond
    if "microsecond" in groups:
        microsecond = int(groups["microsecond"].ljust(6, "0"))
    elif "millisecond" in groups:
        microsecond = int(groups["millisecond"]) * MICROS_PER_MILLISECOND

    try:
        if "day_of_year" in groups:
            moment = _datetime.datetime(
                year, 1, 1, tzinfo=zone
            ) + _datetime.timedelta(days=int(groups["day_of_year"]))
            month, day = moment.month, moment.day
        return _datetime.datetime(
            year,
            month,
            day,
            hour,
            int(groups.get("minute", base.minute)),
            int(groups.get("second", base.second)),
            microsecond,
            tzinfo=zone,
        )
    except (ValueError, OverflowError) as e:
        raise ParseError(f"string {text!r} does not form a valid moment: {e}") from e


__all__ = ["format_moment", "parse_with_format"]
