"""Shared core of the Date and Time value types.

Every value holds one aware ``datetime`` in its ``_moment`` slot, always in
the canonical form of its dimension (see simpledatetime.normalize). All
four public classes are thin parameterizations of TemporalValue:

    dimension   which axis the value lives on (Dimension.DATE or TIME)
    _mutable    whether mutators overwrite the value or return a new one

Mutators never touch ``_moment`` directly; they compute a new moment
through the engine adapter and hand it to ``_commit``, which normalizes it
and applies the variant's policy.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any, ClassVar, TypeVar, Union

from simpledatetime import engine
from simpledatetime.dimension import Dimension
from simpledatetime.engine import Interval, TimezoneLike
from simpledatetime.errors import ParseError, SimpleDateTimeError
from simpledatetime.normalize import canonical_string, normalize
from simpledatetime.validate import validate_format, validate_modifier

V = TypeVar("V", bound="TemporalValue")

Comparable = Union["TemporalValue", _datetime.datetime, _datetime.date, _datetime.time]


class TemporalValue:
    """A canonical moment of one dimension.

    Subclasses set ``dimension`` and ``_mutable``; they are not meant to be
    instantiated directly.
    """

    __slots__ = ("_moment",)

    dimension: ClassVar[Dimension]
    _mutable: ClassVar[bool] = False

    _moment: _datetime.datetime

    def __init__(self, text: str = "now", tz: TimezoneLike = None) -> None:
        """Parse free-form text.

        Args:
            text: Absolute or relative text; anything outside this value's
                dimension is discarded.
            tz: Timezone deciding what "now" means.

        Raises:
            ParseError: If the text cannot be parsed.
        """
        self._moment = engine.parse(text, self.dimension, tz)

    @classmethod
    def _from_moment(cls: type[V], moment: _datetime.datetime) -> V:
        """Create a value from a moment, bypassing the parser."""
        value = object.__new__(cls)
        value._moment = normalize(moment, cls.dimension)
        return value

    def _commit(self: V, moment: _datetime.datetime) -> V:
        """Store the result of a mutation according to the variant's policy."""
        if self._mutable:
            self._moment = normalize(moment, self.dimension)
            return self
        return self._from_moment(moment)

    @classmethod
    def _coerce(cls, other: Comparable) -> _datetime.datetime:
        """Project another value onto this dimension's canonical form.

        Raises:
            TypeError: If other belongs to the other dimension or is not a
                temporal value at all.
        """
        if isinstance(other, TemporalValue):
            if other.dimension is not cls.dimension:
                raise TypeError(
                    f"cannot compare {cls.__name__} with {type(other).__name__}"
                )
            return other._moment
        if isinstance(other, (_datetime.datetime, _datetime.date, _datetime.time)):
            return normalize(other, cls.dimension)
        raise TypeError(
            f"expected {cls.dimension.descriptor.label} value, datetime, date "
            f"or time, got {type(other).__name__}"
        )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls: type[V], text: str) -> V:
        """Parse text, reporting any failure as a ParseError.

        Raises:
            ParseError: If the text cannot be parsed or has out-of-range
                components. The original error is kept as ``__cause__``.
        """
        try:
            return cls(text)
        except SimpleDateTimeError as e:
            raise ParseError(
                f"Cannot parse '{text}' as a {cls.dimension.value}: {e}"
            ) from e

    @classmethod
    def from_datetime(cls: type[V], value: Comparable) -> V:
        """Create a value from a datetime, date, time or any value of this package.

        Only the components of this value's dimension are kept.

        Raises:
            TypeError: If value carries no component of this dimension.
        """
        return cls._from_moment(cls._coerce(value))

    @classmethod
    def create_from_format(
        cls: type[V], fmt: str, text: str, tz: TimezoneLike = None
    ) -> V:
        """Parse text against a letter format.

        Fields the format does not mention come from the current moment in
        tz, unless the format contains "!" or "|".

        Raises:
            ParseError: If the text does not match the format.
        """
        try:
            moment = engine.parse_format(fmt, text, cls.dimension, tz)
        except ParseError as e:
            raise ParseError(f"Cannot parse '{text}' using format '{fmt}'") from e
        return cls._from_moment(moment)

    # -------------------------------------------------------------------------
    # Formatting and mutation
    # -------------------------------------------------------------------------

    def format(self, fmt: str) -> str:
        """Format the value using letters of its own dimension.

        Raises:
            StructuralViolation: If fmt uses an unescaped letter of the
                other dimension, a timezone letter or a composite letter.
        """
        validate_format(fmt, self.dimension)
        return engine.format(self._moment, fmt)

    def modify(self: V, modifier: str) -> V:
        """Apply a relative phrase such as "+1 day" or "+30 minutes".

        Raises:
            StructuralViolation: If the phrase mentions the other dimension.
            ParseError: If the phrase cannot be applied.
        """
        validate_modifier(modifier, self.dimension)
        return self._commit(engine.apply_modifier(self._moment, modifier, self.dimension))

    def add(self: V, interval: Interval) -> V:
        """Add a relativedelta, timedelta or ISO 8601 duration string.

        Components of the other dimension are applied and then discarded.
        """
        return self._commit(engine.apply_interval(self._moment, interval, self.dimension))

    def subtract(self: V, interval: Interval) -> V:
        """Subtract a relativedelta, timedelta or ISO 8601 duration string."""
        return self._commit(
            engine.apply_interval(self._moment, interval, self.dimension, sign=-1)
        )

    def sub(self: V, interval: Interval) -> V:
        """Alias of subtract()."""
        return self.subtract(interval)

    def diff(self, other: Comparable, absolute: bool = False) -> _datetime.timedelta:
        """Return the span from this value to other.

        The result is positive when other is later. With absolute=True the
        sign is dropped.
        """
        delta = self._coerce(other) - self._moment
        return abs(delta) if absolute else delta

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    @property
    def _canonical(self) -> str:
        return canonical_string(self._moment, self.dimension)

    def is_before(self, other: Comparable) -> bool:
        """Return True if this value comes strictly before other."""
        return self._canonical < canonical_string(self._coerce(other), self.dimension)

    def is_after(self, other: Comparable) -> bool:
        """Return True if this value comes strictly after other."""
        return self._canonical > canonical_string(self._coerce(other), self.dimension)

    def is_same_as(self, other: Comparable) -> bool:
        """Return True if this value and other share every component of the dimension."""
        return self._canonical == canonical_string(self._coerce(other), self.dimension)

    def _comparable(self, other: object) -> bool:
        return isinstance(other, TemporalValue) and other.dimension is self.dimension

    def __eq__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._canonical == other._canonical  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._canonical < other._canonical  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._canonical <= other._canonical  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._canonical > other._canonical  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._canonical >= other._canonical  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def __getstate__(self) -> dict[str, str]:
        return {self.dimension.descriptor.payload_key: self._canonical}

    def __setstate__(self, state: dict[str, Any]) -> None:
        descriptor = self.dimension.descriptor
        try:
            text = state[descriptor.payload_key]
            component = descriptor.from_canonical(text)
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(
                f"invalid {descriptor.label} state {state!r}"
            ) from e
        self._moment = normalize(component, self.dimension)

    def to_json(self) -> str:
        """Return the interchange string, as used by str()."""
        return str(self)

    def __str__(self) -> str:
        return engine.format(self._moment, self.dimension.descriptor.display_format)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._canonical}')"


__all__ = ["TemporalValue", "Comparable"]
