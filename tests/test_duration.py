"""Tests for the Duration class."""

from __future__ import annotations

from stillpoint.core.duration import Duration


class TestDurationConstruction:
    def test_normalizes_hours(self) -> None:
        d = Duration(hours=25)
        assert d.days == 1
        assert d.seconds == 3600
        assert d.nanoseconds == 0

    def test_negative_borrows_from_days(self) -> None:
        d = Duration(seconds=-30)
        assert d.days == -1
        assert d.seconds == 86370
        assert d.is_negative

    def test_mixed_units(self) -> None:
        d = Duration(weeks=1, days=1, minutes=1, milliseconds=1500)
        assert d.total_nanoseconds == (8 * 86400 + 61) * 10**9 + 500_000_000

    def test_zero(self) -> None:
        assert Duration.zero().is_zero
        assert not Duration.zero()
        assert Duration(nanoseconds=1)


class TestAsSeconds:
    def test_whole_seconds(self) -> None:
        assert Duration(days=1, seconds=1).as_seconds() == 86401
        assert Duration.from_seconds(-90).as_seconds() == -90

    def test_floors_fractions(self) -> None:
        assert Duration(milliseconds=1500).as_seconds() == 1
        assert Duration(milliseconds=-1).as_seconds() == -1


class TestDurationOperators:
    def test_add_and_subtract(self) -> None:
        assert Duration(seconds=30) + Duration(seconds=45) == Duration(seconds=75)
        assert Duration(minutes=1) - Duration(seconds=90) == Duration(seconds=-30)

    def test_negate(self) -> None:
        assert -Duration(hours=1) == Duration(hours=-1)

    def test_non_duration_operand(self) -> None:
        assert Duration(seconds=1).__add__(1) is NotImplemented
        assert Duration(seconds=1).__sub__(1) is NotImplemented

    def test_hash_matches_equality(self) -> None:
        assert hash(Duration(minutes=1)) == hash(Duration(seconds=60))

    def test_repr_and_str(self) -> None:
        assert repr(Duration(hours=25)) == "Duration(days=1, seconds=3600, nanoseconds=0)"
        assert str(Duration(hours=25)) == "1 day, 1:00:00"
        assert str(Duration(seconds=-1)) == "-1 day, 23:59:59"
        assert str(Duration(days=2, milliseconds=500)) == "2 days, 0:00:00.5"
