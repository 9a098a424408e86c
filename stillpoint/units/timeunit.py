"""TimeUnit enumeration and second-count helpers.

TimeUnit names the calendar units that CalendarDateTime.truncate() and
the span helpers understand. The helpers (seconds, minutes, hours, days,
weeks) return plain integer second counts, which is what Moment
arithmetic consumes:

    >>> from stillpoint.units import hours
    >>> later = moment + hours(12)
"""

from __future__ import annotations

from enum import Enum

from stillpoint._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)
from stillpoint.errors import ValidationError


class TimeUnit(Enum):
    """Calendar units, from seconds up to years.

    Note:
        YEAR and MONTH do not have fixed second equivalents, so
        to_seconds() returns None for them.

    Examples:
        >>> TimeUnit.HOUR.to_seconds()
        3600

        >>> TimeUnit.parse("day") is TimeUnit.DAY
        True
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: TimeUnit | str) -> TimeUnit:
        """Return the TimeUnit for a unit or a unit name.

        Raises:
            ValidationError: If the name is not a known unit.
        """
        if isinstance(value, TimeUnit):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError(f"unknown time unit: {value!r}") from None

    def to_seconds(self) -> int | None:
        """Return the number of seconds in one unit, or None if variable."""
        conversions: dict[TimeUnit, int | None] = {
            TimeUnit.SECOND: 1,
            TimeUnit.MINUTE: SECONDS_PER_MINUTE,
            TimeUnit.HOUR: SECONDS_PER_HOUR,
            TimeUnit.DAY: SECONDS_PER_DAY,
            TimeUnit.WEEK: SECONDS_PER_WEEK,
            TimeUnit.MONTH: None,
            TimeUnit.YEAR: None,
        }
        return conversions[self]


def _span(unit: TimeUnit, count: int) -> int:
    per_unit = unit.to_seconds()
    assert per_unit is not None
    return count * per_unit


def seconds(count: int) -> int:
    """Return count seconds as a second count (identity, for symmetry)."""
    return _span(TimeUnit.SECOND, count)


def minutes(count: int) -> int:
    """Return the number of seconds in count minutes."""
    return _span(TimeUnit.MINUTE, count)


def hours(count: int) -> int:
    """Return the number of seconds in count hours.

    Examples:
        >>> hours(12)
        43200
    """
    return _span(TimeUnit.HOUR, count)


def days(count: int) -> int:
    """Return the number of seconds in count days."""
    return _span(TimeUnit.DAY, count)


def weeks(count: int) -> int:
    """Return the number of seconds in count weeks."""
    return _span(TimeUnit.WEEK, count)


__all__ = ["TimeUnit", "seconds", "minutes", "hours", "days", "weeks"]
