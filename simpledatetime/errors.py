"""simpledatetime exception hierarchy.

All simpledatetime-specific exceptions inherit from SimpleDateTimeError.
"""

from __future__ import annotations


class SimpleDateTimeError(Exception):
    """Base exception for all simpledatetime errors."""

    pass


class RangeError(SimpleDateTimeError, ValueError):
    """A numeric component is outside its valid bound.

    Raised immediately by the call that introduced the value; never
    recovered internally.

    Attributes:
        field: Name of the offending component (e.g. "hour").
        bound: The inclusive (min, max) range that was violated.
        value: The rejected value.

    Examples:
        - Hour value outside 0-23
        - Month value outside 1-12
        - Day value outside the length of its month
    """

    def __init__(self, field: str, bound: tuple[int, int], value: int) -> None:
        self.field = field
        self.bound = bound
        self.value = value
        super().__init__(
            f"{field} must be between {bound[0]} and {bound[1]}, got {value}"
        )


class ParseError(SimpleDateTimeError, ValueError):
    """Failed to parse a string, or to apply a format or modifier.

    Examples:
        - Text the engine does not understand as a date or time
        - A relative modifier the engine cannot apply
        - Text that does not match a create_from_format() pattern
    """

    pass


class StructuralViolation(SimpleDateTimeError):
    """An operation touched the dimension a value type does not represent.

    This is always a programming error: setting a time on a Date, setting a
    timezone on either type, or formatting/modifying with a specifier or
    keyword that belongs to the other dimension.
    """

    pass


__all__ = [
    "SimpleDateTimeError",
    "RangeError",
    "ParseError",
    "StructuralViolation",
]
