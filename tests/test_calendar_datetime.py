"""Tests for the mutable CalendarDateTime engine."""

from __future__ import annotations

import pytest

from stillpoint.core.calendar_datetime import CalendarDateTime
from stillpoint.core.duration import Duration
from stillpoint.errors import TimezoneError, ValidationError
from stillpoint.units import TimeUnit, Timezone


class TestConstruction:
    """Tests for building values from fields and epochs."""

    def test_fields(self) -> None:
        dt = CalendarDateTime(2024, 1, 15, 14, 30, 5, nanosecond=7)
        assert (dt.year, dt.month, dt.day) == (2024, 1, 15)
        assert (dt.hour, dt.minute, dt.second, dt.nanosecond) == (14, 30, 5, 7)

    def test_defaults(self) -> None:
        dt = CalendarDateTime(2024)
        assert dt.iso8601() == "2024-01-01T00:00:00"
        assert dt.is_floating
        assert dt.locale == "en-US"
        assert dt.formatter is None

    @pytest.mark.parametrize(
        "args",
        [(2023, 2, 29), (2024, 13, 1), (2024, 1, 1, 24), (2024, 1, 1, 0, 60), (10000,)],
    )
    def test_invalid_fields(self, args: tuple[int, ...]) -> None:
        with pytest.raises(ValidationError):
            CalendarDateTime(*args)

    @pytest.mark.parametrize("year", [2024.0, "2024", True])
    def test_non_integer_fields(self, year: object) -> None:
        with pytest.raises(ValidationError):
            CalendarDateTime(year)  # type: ignore[arg-type]

    def test_bad_timezone(self) -> None:
        with pytest.raises(TimezoneError):
            CalendarDateTime(2024, timezone="EST")

    def test_bad_locale_and_formatter(self) -> None:
        with pytest.raises(ValidationError):
            CalendarDateTime(2024, locale="")
        with pytest.raises(ValidationError):
            CalendarDateTime(2024, formatter="%Y")  # type: ignore[arg-type]

    def test_from_epoch(self) -> None:
        assert CalendarDateTime.from_epoch(0).iso8601() == "1970-01-01T00:00:00"
        assert CalendarDateTime.from_epoch(-1).iso8601() == "1969-12-31T23:59:59"
        assert CalendarDateTime.from_epoch(1705329000).iso8601() == "2024-01-15T14:30:00"

    def test_from_epoch_defaults_to_utc(self) -> None:
        assert CalendarDateTime.from_epoch(0).time_zone == Timezone.utc()

    def test_from_epoch_with_offset(self) -> None:
        dt = CalendarDateTime.from_epoch(0, timezone="-05:00")
        assert dt.iso8601() == "1969-12-31T19:00:00"
        assert dt.epoch() == 0

    def test_from_epoch_rejects_float(self) -> None:
        with pytest.raises(ValidationError):
            CalendarDateTime.from_epoch(1.5)  # type: ignore[arg-type]

    def test_last_day_of_month(self) -> None:
        assert CalendarDateTime.last_day_of_month(2024, 2).day == 29
        assert CalendarDateTime.last_day_of_month(1900, 2).day == 28
        dt = CalendarDateTime.last_day_of_month(2024, 4, hour=23, timezone="UTC")
        assert dt.iso8601() == "2024-04-30T23:00:00"
        assert dt.time_zone == Timezone.utc()


class TestInstant:
    """Tests for epoch(), compare() and the comparison operators."""

    def test_epoch(self) -> None:
        dt = CalendarDateTime(2024, 1, 15, 14, 30, timezone="UTC")
        assert dt.epoch() == 1705329000

    def test_floating_is_read_as_utc(self) -> None:
        assert CalendarDateTime(2024, 1, 15, 14, 30).epoch() == 1705329000

    def test_epoch_floors_fractions(self) -> None:
        dt = CalendarDateTime(1969, 12, 31, 23, 59, 59, nanosecond=500_000_000)
        assert dt.epoch() == -1

    def test_same_instant_in_two_zones(self) -> None:
        utc = CalendarDateTime(2024, 1, 15, 12, timezone="UTC")
        india = CalendarDateTime(2024, 1, 15, 17, 30, timezone="+05:30")
        assert CalendarDateTime.compare(utc, india) == 0
        assert utc == india

    def test_compare(self) -> None:
        early = CalendarDateTime.from_epoch(10)
        late = CalendarDateTime.from_epoch(20)
        assert CalendarDateTime.compare(early, late) == -1
        assert CalendarDateTime.compare(late, early) == 1
        assert early < late <= late
        assert late > early >= early

    def test_compare_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            CalendarDateTime.compare(CalendarDateTime(2024), 0)  # type: ignore[arg-type]

    def test_unhashable(self) -> None:
        """Test that a mutable engine value cannot key a set or dict."""
        dt = CalendarDateTime(2024, timezone="UTC")
        with pytest.raises(TypeError):
            hash(dt)
        with pytest.raises(TypeError):
            {dt}

    def test_not_equal_to_other_types(self) -> None:
        assert CalendarDateTime.from_epoch(0) != 0

    def test_day_of_week(self) -> None:
        assert CalendarDateTime(2024, 5, 17).day_of_week == 4


class TestClone:
    def test_clone_is_independent(self) -> None:
        original = CalendarDateTime(2024, 1, 15, timezone="UTC")
        copy = original.clone()
        copy.set_hour(9)
        assert original.hour == 0
        assert copy.hour == 9
        assert type(copy) is CalendarDateTime


class TestMutators:
    """Tests for in-place changes, each of which returns self."""

    def test_add_duration(self) -> None:
        dt = CalendarDateTime(2024, 12, 31, 18)
        assert dt.add_duration(Duration(hours=12)) is dt
        assert dt.iso8601() == "2025-01-01T06:00:00"

    def test_subtract_duration(self) -> None:
        dt = CalendarDateTime(2024, 3, 1)
        dt.subtract_duration(Duration(days=1))
        assert dt.ymd() == "2024-02-29"

    def test_add_duration_rejects_numbers(self) -> None:
        with pytest.raises(ValidationError):
            CalendarDateTime(2024).add_duration(3600)  # type: ignore[arg-type]

    def test_add_duration_out_of_range(self) -> None:
        dt = CalendarDateTime(9999, 12, 31, 23)
        with pytest.raises(ValidationError):
            dt.add_duration(Duration(days=1))
        assert dt.iso8601() == "9999-12-31T23:00:00"

    @pytest.mark.parametrize(
        "unit, expected",
        [
            (TimeUnit.YEAR, "2024-01-01T00:00:00"),
            ("month", "2024-05-01T00:00:00"),
            ("week", "2024-05-13T00:00:00"),
            ("day", "2024-05-17T00:00:00"),
            ("hour", "2024-05-17T13:00:00"),
            ("minute", "2024-05-17T13:45:00"),
        ],
    )
    def test_truncate(self, unit: TimeUnit | str, expected: str) -> None:
        dt = CalendarDateTime(2024, 5, 17, 13, 45, 30)
        assert dt.truncate(unit).iso8601() == expected

    def test_set(self) -> None:
        dt = CalendarDateTime(2024, 1, 31)
        dt.set(month=3, hour=6)
        assert dt.iso8601() == "2024-03-31T06:00:00"

    def test_set_invalid_leaves_value_unchanged(self) -> None:
        dt = CalendarDateTime(2024, 1, 31)
        with pytest.raises(ValidationError):
            dt.set(month=2)
        with pytest.raises(ValidationError):
            dt.set(hours=1)
        assert dt.iso8601() == "2024-01-31T00:00:00"

    def test_field_setters(self) -> None:
        dt = CalendarDateTime(2024)
        dt.set_year(1999).set_month(12).set_day(31)
        dt.set_hour(23).set_minute(59).set_second(58).set_nanosecond(1)
        assert dt.iso8601() == "1999-12-31T23:59:58"
        assert dt.nanosecond == 1

    def test_set_time_zone_preserves_instant(self) -> None:
        dt = CalendarDateTime(2024, 1, 15, 12, timezone="UTC")
        before = dt.epoch()
        dt.set_time_zone("+05:30")
        assert dt.hms() == "17:30:00"
        assert dt.epoch() == before

    def test_set_time_zone_from_floating_keeps_fields(self) -> None:
        dt = CalendarDateTime(2024, 1, 15, 12)
        before = dt.epoch()
        dt.set_time_zone("+02:00")
        assert dt.hms() == "12:00:00"
        assert dt.epoch() == before - 7200

    def test_set_time_zone_to_floating(self) -> None:
        dt = CalendarDateTime(2024, 1, 15, 12, timezone="-05:00")
        dt.set_time_zone("floating")
        assert dt.is_floating
        assert dt.hms() == "12:00:00"

    def test_set_locale_and_formatter(self) -> None:
        dt = CalendarDateTime(2024)
        dt.set_locale("fr-FR").set_formatter(lambda value: value.ymd("/"))
        assert dt.locale == "fr-FR"
        assert str(dt) == "2024/01/01"
        with pytest.raises(ValidationError):
            dt.set_locale("")
        with pytest.raises(ValidationError):
            dt.set_formatter(5)  # type: ignore[arg-type]


class TestFormatting:
    def test_ymd_and_hms(self) -> None:
        dt = CalendarDateTime(987, 6, 5, 4, 3, 2)
        assert dt.ymd() == "0987-06-05"
        assert dt.ymd("") == "09870605"
        assert dt.hms() == "04:03:02"
        assert dt.hms(".") == "04.03.02"

    def test_negative_year(self) -> None:
        assert CalendarDateTime(-44, 3, 15).ymd() == "-0044-03-15"

    def test_str_defaults_to_iso8601(self) -> None:
        assert str(CalendarDateTime(2024, 1, 15, 14, 30)) == "2024-01-15T14:30:00"

    def test_repr(self) -> None:
        dt = CalendarDateTime(2024, 1, 15, 14, 30, timezone="UTC")
        assert repr(dt) == (
            "CalendarDateTime(2024, 1, 15, 14, 30, 0, nanosecond=0, timezone='UTC')"
        )
        assert repr(CalendarDateTime(2024)).endswith("timezone='floating')")


class TestOperators:
    """Tests for the Duration-based + and - operators."""

    def test_add_returns_new_value(self) -> None:
        dt = CalendarDateTime(2024, 1, 15)
        later = dt + Duration(days=1)
        assert later.ymd() == "2024-01-16"
        assert dt.ymd() == "2024-01-15"

    def test_reflected_add(self) -> None:
        assert (Duration(hours=1) + CalendarDateTime(2024)).hour == 1

    def test_subtract_duration(self) -> None:
        dt = CalendarDateTime(2024, 1, 1)
        assert (dt - Duration(seconds=1)).iso8601() == "2023-12-31T23:59:59"

    def test_subtract_values(self) -> None:
        a = CalendarDateTime(2024, 1, 2, timezone="UTC")
        b = CalendarDateTime(2024, 1, 1, 12, timezone="UTC")
        assert a - b == Duration(hours=12)
        assert b - a == Duration(hours=-12)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            CalendarDateTime(2024) + 1  # type: ignore[operator]
