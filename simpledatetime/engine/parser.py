"""Free-form text parsing.

Text is split in two: relative phrases ("tomorrow", "+2 hours", "next
monday 9am") are cut out by the relative scanner, and whatever is left is
an absolute date or time that dateutil parses. The absolute part is parsed
first and the relative adjustments are applied on top of it, so
"2025-01-15 +1 day" is 2025-01-16.

A leading "@" followed by a number is a Unix timestamp in UTC.

Internal module - use simpledatetime.engine instead.
"""

from __future__ import annotations

import datetime as _datetime
import re

import structlog
from dateutil import parser as _dateutil_parser

from simpledatetime._internal.constants import UNIX_EPOCH
from simpledatetime.engine.relative import scan
from simpledatetime.errors import ParseError

log = structlog.get_logger(__name__)

TIMESTAMP_PATTERN = re.compile(r"^@(?P<seconds>-?\d+)(?:\.(?P<fraction>\d{1,6}))?(?P<rest>\s.*)?$")


def _from_timestamp(seconds: str, fraction: str | None) -> _datetime.datetime:
    moment = UNIX_EPOCH + _datetime.timedelta(seconds=int(seconds))
    if fraction:
        moment = moment.replace(microsecond=int(fraction.ljust(6, "0")))
    return moment


def parse_text(
    text: str,
    reference: _datetime.datetime,
    reset_clock: bool = True,
    clock_only: bool = False,
) -> _datetime.datetime:
    """Parse free-form text against a reference moment.

    Args:
        text: Absolute and/or relative text.
        reference: The moment "now" stands for. Relative-only text is
            applied to it directly.
        reset_clock: When the text names a date but no time, use midnight
            (True) or keep the reference time of day (False).
        clock_only: Apply only the clock part of relative adjustments,
            wrapping around midnight.

    Returns:
        The parsed moment. Its offset is that of the text if the text names
        one, else that of the reference.

    Raises:
        ParseError: If the text is empty or not understood.
        ValueError: If a component is out of range.
        OverflowError: If the result leaves the representable range.
    """
    stripped = text.strip()
    if not stripped:
        raise ParseError("cannot parse an empty string")

    timestamp = TIMESTAMP_PATTERN.match(stripped)
    if timestamp is not None:
        reference = _from_timestamp(timestamp.group("seconds"), timestamp.group("fraction"))
        stripped = (timestamp.group("rest") or "").strip()
        if not stripped:
            return reference

    adjustments, remainder = scan(stripped)

    if remainder:
        default = reference
        if reset_clock:
            default = reference.replace(hour=0, minute=0, second=0, microsecond=0)
        try:
            base = _dateutil_parser.parse(remainder, default=default)
        except _dateutil_parser.ParserError as e:
            log.debug("absolute_parse_failed", text=text, remainder=remainder)
            raise ParseError(f"unrecognised text {remainder!r}") from e
    elif adjustments.matched:
        base = reference
    else:
        raise ParseError(f"unrecognised text {text!r}")

    return adjustments.apply(base, clock_only=clock_only)


__all__ = ["parse_text"]
