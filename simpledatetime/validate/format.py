"""Format string validation.

Format strings use single-letter output specifiers (``Y-m-d``, ``H:i:s``).
Before a format reaches the engine, every unescaped letter is checked
against the dimension's blocked set: letters of the other dimension,
timezone letters, and composite letters whose output spans more than one
dimension. A backslash escapes the next character, which is then output
literally and never checked.
"""

from __future__ import annotations

import structlog

from simpledatetime.dimension import Dimension
from simpledatetime.errors import StructuralViolation

log = structlog.get_logger(__name__)

ESCAPE = "\\"


def find_blocked_char(fmt: str, dimension: Dimension) -> str | None:
    """Return the first unescaped blocked character in fmt, or None.

    Examples:
        >>> find_blocked_char("Y-m-d H", Dimension.DATE)
        'H'
        >>> find_blocked_char(r"Y-m-d \\H", Dimension.DATE) is None
        True
    """
    blocked = dimension.descriptor.blocked_format_chars
    i = 0
    length = len(fmt)
    while i < length:
        char = fmt[i]
        if char == ESCAPE and i + 1 < length:
            i += 2
            continue
        if char in blocked:
            return char
        i += 1
    return None


def validate_format(fmt: str, dimension: Dimension) -> None:
    """Reject a format string that would expose a foreign dimension.

    Args:
        fmt: Format string with single-letter specifiers.
        dimension: The dimension of the value being formatted.

    Raises:
        StructuralViolation: If an unescaped character belongs to the other
            dimension, the timezone set or the composite set.

    Examples:
        >>> validate_format("Y-m-d", Dimension.DATE)
        >>> validate_format("H:i", Dimension.DATE)
        Traceback (most recent call last):
        ...
        StructuralViolation: format character 'H' is not allowed for Date; ...
    """
    char = find_blocked_char(fmt, dimension)
    if char is None:
        return

    descriptor = dimension.descriptor
    log.debug("format_rejected", format=fmt, char=char, dimension=dimension.value)
    if dimension is Dimension.TIME:
        detail = "allowed: " + ", ".join(descriptor.allowed_format_chars)
    else:
        detail = "Date values do not support time or timezone formatting"
    raise StructuralViolation(
        f"format character {char!r} is not allowed for {descriptor.label}; {detail}"
    )


__all__ = ["validate_format", "find_blocked_char"]
