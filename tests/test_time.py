"""Tests for the Time classes.

This module provides tests for TimeImmutable and Time including:
- Construction from text, components, seconds and formats
- Validation of component ranges
- Formatting, modification and wrap-around arithmetic
- Rejected date and timezone operations
- Comparisons, hashing and conversion between variants
"""

from __future__ import annotations

import datetime

import pytest

from simpledatetime import (
    DateImmutable,
    ParseError,
    RangeError,
    StructuralViolation,
    Time,
    TimeImmutable,
)

UTC = datetime.timezone.utc


class TestTimeConstruction:
    """Tests for Time construction."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("14:30", "14:30:00"),
            ("9:05", "09:05:00"),
            ("14:30:45", "14:30:45"),
            ("2:30pm", "14:30:00"),
            ("12am", "00:00:00"),
            ("noon", "12:00:00"),
            ("midnight", "00:00:00"),
        ],
    )
    def test_from_text(self, text: str, expected: str) -> None:
        assert str(TimeImmutable(text)) == expected

    def test_fraction(self) -> None:
        t = TimeImmutable("14:30:45.123456")
        assert (t.hour, t.minute, t.second, t.microsecond) == (14, 30, 45, 123456)

    def test_short_fraction_is_padded(self) -> None:
        assert TimeImmutable("14:30:45.5").microsecond == 500000

    def test_date_in_text_is_discarded(self) -> None:
        t = TimeImmutable("2025-06-15 16:45:30")
        assert t._moment == datetime.datetime(1970, 1, 1, 16, 45, 30, tzinfo=UTC)

    def test_default_is_now(self) -> None:
        t = Time()
        assert t._moment.date() == datetime.date(1970, 1, 1)

    @pytest.mark.parametrize(
        ("text", "field"),
        [("24:00", "hour"), ("12:60", "minute"), ("12:30:60", "second")],
    )
    def test_out_of_range_text(self, text: str, field: str) -> None:
        with pytest.raises(RangeError) as excinfo:
            TimeImmutable(text)
        assert excinfo.value.field == field

    def test_invalid_text(self) -> None:
        with pytest.raises(ParseError):
            TimeImmutable("invalid")


class TestTimeFactories:
    """Tests for the Time class-level factories."""

    def test_create(self) -> None:
        t = TimeImmutable.create(14, 30, 45, 250)
        assert repr(t) == "TimeImmutable('14:30:45.000250')"

    @pytest.mark.parametrize(
        ("components", "message"),
        [
            ((24, 0), "hour must be between 0 and 23, got 24"),
            ((-1, 0), "hour must be between 0 and 23, got -1"),
            ((12, 60), "minute must be between 0 and 59, got 60"),
            ((12, 0, 60), "second must be between 0 and 59, got 60"),
            ((12, 0, 0, 1_000_000), "microsecond must be between 0 and 999999, got 1000000"),
        ],
    )
    def test_create_out_of_range(self, components: tuple[int, ...], message: str) -> None:
        with pytest.raises(RangeError, match=message):
            Time.create(*components)

    def test_range_error_attributes(self) -> None:
        with pytest.raises(RangeError) as excinfo:
            TimeImmutable.create(25, 0)
        assert excinfo.value.field == "hour"
        assert excinfo.value.bound == (0, 23)
        assert excinfo.value.value == 25

    def test_from_string_wraps_errors(self) -> None:
        with pytest.raises(ParseError, match="Cannot parse '25:00' as a time") as excinfo:
            TimeImmutable.from_string("25:00")
        assert isinstance(excinfo.value.__cause__, RangeError)

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0, "00:00:00"), (3661, "01:01:01"), (45000, "12:30:00"), (86399, "23:59:59")],
    )
    def test_from_seconds(self, seconds: int, expected: str) -> None:
        assert str(TimeImmutable.from_seconds(seconds)) == expected

    @pytest.mark.parametrize("seconds", [-1, 86400])
    def test_from_seconds_out_of_range(self, seconds: int) -> None:
        with pytest.raises(RangeError, match="seconds must be between 0 and 86399"):
            TimeImmutable.from_seconds(seconds)

    def test_midnight_and_noon(self) -> None:
        assert str(TimeImmutable.midnight()) == "00:00:00"
        assert str(Time.noon()) == "12:00:00"
        assert isinstance(Time.noon(), Time)

    def test_now(self) -> None:
        before = datetime.datetime.now()
        t = TimeImmutable.now()
        assert t._moment.date() == datetime.date(1970, 1, 1)
        assert t.hour in (before.hour, (before.hour + 1) % 24)

    def test_from_datetime(self) -> None:
        t = TimeImmutable.from_datetime(datetime.datetime(2025, 6, 15, 16, 45, 30))
        assert str(t) == "16:45:30"

    def test_from_time(self) -> None:
        assert str(Time.from_datetime(datetime.time(9, 5))) == "09:05:00"

    def test_from_package_value(self) -> None:
        mutable = Time("09:05")
        assert TimeImmutable.from_datetime(mutable) == mutable

    def test_from_date_value_rejected(self) -> None:
        with pytest.raises(TypeError):
            TimeImmutable.from_datetime(DateImmutable("2025-01-15"))

    def test_create_from_format(self) -> None:
        t = TimeImmutable.create_from_format("g:i A", "2:30 PM")
        assert repr(t) == "TimeImmutable('14:30:00.000000')"

    def test_create_from_format_failure(self) -> None:
        with pytest.raises(ParseError, match="Cannot parse '14h30' using format 'H:i'"):
            Time.create_from_format("H:i", "14h30")


class TestTimeFormat:
    """Tests for Time formatting."""

    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [
            ("H", "14"), ("h", "02"), ("G", "14"), ("g", "2"), ("i", "30"),
            ("s", "45"), ("a", "pm"), ("A", "PM"), ("u", "123456"), ("v", "123"),
        ],
    )
    def test_time_letters(self, afternoon: TimeImmutable, fmt: str, expected: str) -> None:
        assert afternoon.format(fmt) == expected

    def test_escaped_date_letters(self) -> None:
        t = TimeImmutable("14:30")
        assert t.format("\\T\\i\\m\\e: H:i:s \\Y-\\m-\\d") == "Time: 14:30:00 Y-m-d"

    @pytest.mark.parametrize("fmt", ["Y-m-d", "H:i d", "D", "e", "T", "P", "c", "U"])
    def test_date_and_zone_letters_rejected(self, afternoon: TimeImmutable, fmt: str) -> None:
        with pytest.raises(StructuralViolation, match="is not allowed for Time"):
            afternoon.format(fmt)

    def test_str_and_json_drop_microseconds(self, afternoon: TimeImmutable) -> None:
        assert str(afternoon) == "14:30:45"
        assert afternoon.to_json() == "14:30:45"

    def test_repr_keeps_microseconds(self, afternoon: TimeImmutable) -> None:
        assert repr(afternoon) == "TimeImmutable('14:30:45.123456')"


class TestTimeModify:
    """Tests for relative modification."""

    @pytest.mark.parametrize(
        ("modifier", "expected"),
        [
            ("+1 hour", "15:30:00"),
            ("+15 minutes", "14:45:00"),
            ("+30 seconds", "14:30:30"),
            ("-2 hours", "12:30:00"),
            ("+10 hours", "00:30:00"),
            ("noon", "12:00:00"),
            ("3 hours ago", "11:30:00"),
        ],
    )
    def test_modifiers(self, modifier: str, expected: str) -> None:
        assert str(TimeImmutable("14:30").modify(modifier)) == expected

    def test_mutable_in_place(self) -> None:
        t = Time("14:30")
        assert t.modify("+1 hour") is t
        assert str(t) == "15:30:00"

    @pytest.mark.parametrize(
        ("modifier", "expected"),
        [
            ("-20000000 hours", "04:00:00"),
            ("+20000000 hours", "20:00:00"),
            ("+1500000 minutes", "04:00:00"),
        ],
    )
    def test_large_offsets_wrap(self, modifier: str, expected: str) -> None:
        assert str(TimeImmutable.create(12, 0).modify(modifier)) == expected

    @pytest.mark.parametrize(
        "modifier", ["+1 day", "+1 week", "+1 month", "+1 year", "next monday", "tomorrow"]
    )
    def test_date_modifiers_rejected(self, modifier: str) -> None:
        t = Time("14:30")
        with pytest.raises(StructuralViolation, match="affects date components"):
            t.modify(modifier)
        assert str(t) == "14:30:00"


class TestTimeArithmetic:
    """Tests for add() and subtract() with wrap-around."""

    @pytest.mark.parametrize(
        ("interval", "expected"),
        [
            ("PT1H", "15:30:00"),
            ("PT15M", "14:45:00"),
            ("PT30S", "14:30:30"),
            (datetime.timedelta(hours=10), "00:30:00"),
        ],
    )
    def test_add(self, interval: object, expected: str) -> None:
        assert str(TimeImmutable("14:30").add(interval)) == expected

    @pytest.mark.parametrize(
        ("interval", "expected"),
        [("PT1H", "13:30:00"), ("PT15M", "14:15:00"), ("PT30S", "14:29:30"), ("PT15H", "23:30:00")],
    )
    def test_subtract(self, interval: str, expected: str) -> None:
        assert str(TimeImmutable("14:30").subtract(interval)) == expected
        assert str(TimeImmutable("14:30").sub(interval)) == expected

    def test_wraps_past_midnight(self) -> None:
        t = Time("23:00")
        t.add("PT2H")
        assert str(t) == "01:00:00"
        assert t._moment == datetime.datetime(1970, 1, 1, 1, 0, tzinfo=UTC)

    def test_date_part_is_discarded(self) -> None:
        assert str(TimeImmutable("14:30").add("P1Y2M3DT1H")) == "15:30:00"

    @pytest.mark.parametrize(
        "interval", ["P2000Y", "P9000Y", datetime.timedelta(days=800_000), "P99999999D"]
    )
    def test_large_date_parts_are_discarded(self, interval: object) -> None:
        noon = TimeImmutable.create(12, 0)
        assert str(noon.add(interval)) == "12:00:00"
        assert str(noon.subtract(interval)) == "12:00:00"

    def test_large_clock_parts_wrap(self) -> None:
        # 20000000 hours is a whole number of days plus 8 hours
        assert str(TimeImmutable.create(12, 0).add("PT20000000H")) == "20:00:00"
        assert str(TimeImmutable.create(12, 0).subtract("PT20000000H")) == "04:00:00"

    def test_diff(self) -> None:
        start = TimeImmutable("14:00")
        assert start.diff(TimeImmutable("16:30")) == datetime.timedelta(hours=2, minutes=30)
        assert start.diff(datetime.time(13, 0)) == datetime.timedelta(hours=-1)
        assert start.diff(datetime.time(13, 0), absolute=True) == datetime.timedelta(hours=1)

    def test_diff_ignores_date(self) -> None:
        other = datetime.datetime(2030, 5, 5, 14, 0, 1)
        assert TimeImmutable("14:00").diff(other) == datetime.timedelta(seconds=1)

    def test_total_seconds(self) -> None:
        assert TimeImmutable("01:01:01.5").total_seconds == 3661.5


class TestTimeSetters:
    """Tests for the setters."""

    def test_set_time(self) -> None:
        t = TimeImmutable("14:30")
        assert str(t.set_time(9, 15, 30)) == "09:15:30"
        assert str(t) == "14:30:00"

    def test_set_time_in_place(self) -> None:
        t = Time("14:30")
        assert t.set_time(9, 15) is t
        assert str(t) == "09:15:00"

    def test_set_time_out_of_range(self) -> None:
        t = Time("14:30")
        with pytest.raises(RangeError, match="hour must be between 0 and 23, got 25"):
            t.set_time(25, 0)
        assert str(t) == "14:30:00"

    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("set_date", (2025, 1, 15)),
            ("set_iso_date", (2025, 1)),
            ("set_timezone", ("UTC",)),
            ("set_timestamp", (1750075200,)),
        ],
    )
    def test_date_and_zone_setters_rejected(self, method: str, args: tuple) -> None:
        t = Time("14:30")
        with pytest.raises(StructuralViolation, match=f"{method}\\(\\) is not supported on Time objects"):
            getattr(t, method)(*args)
        assert str(t) == "14:30:00"


class TestTimeComparison:
    """Tests for comparison, equality and hashing."""

    def test_is_before_and_after(self) -> None:
        morning = TimeImmutable("09:00")
        evening = TimeImmutable("21:00")
        assert morning.is_before(evening)
        assert evening.is_after(morning)
        assert not morning.is_after(morning)

    def test_microseconds_count(self) -> None:
        assert TimeImmutable("09:00:00.000001").is_after(TimeImmutable("09:00"))

    def test_is_same_as_ignores_date(self) -> None:
        t = TimeImmutable("14:30")
        assert t.is_same_as(datetime.datetime(2025, 1, 15, 14, 30))
        assert t.is_same_time_as(datetime.time(14, 30))

    def test_operators(self) -> None:
        assert TimeImmutable("09:00") < Time("10:00")
        assert Time("10:00") >= TimeImmutable("10:00")
        assert TimeImmutable("10:00") == Time("10:00")

    def test_hash(self) -> None:
        assert len({TimeImmutable("10:00"), TimeImmutable("10:00:00.000000")}) == 1

    def test_mutable_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Time("10:00"))


class TestTimeConversion:
    """Tests for switching between variants."""

    def test_round_trip(self, afternoon: TimeImmutable) -> None:
        mutable = afternoon.to_mutable()
        assert isinstance(mutable, Time)
        assert mutable.to_immutable() == afternoon

    def test_copies_do_not_alias(self) -> None:
        t = Time("14:30")
        frozen = t.to_immutable()
        other = t.to_mutable()
        t.add("PT1H")
        assert str(frozen) == "14:30:00"
        assert str(other) == "14:30:00"
