"""Duration, the calendar engine's interval type.

A Duration is an exact signed count of nanoseconds. It reports whole
seconds through as_seconds(), which is all Moment arithmetic needs to
treat it as interval-like:

    >>> from stillpoint import Moment
    >>> (Moment(0) + Duration(minutes=5)).st()
    '1970-01-01 00:05:00'

CalendarDateTime.add_duration and the engine's ``+``/``-`` operators
take Durations; subtracting two engine values returns one.
"""

from __future__ import annotations

from stillpoint._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)

# Multipliers for each constructor keyword, in nanoseconds
_UNIT_NANOS = {
    "weeks": SECONDS_PER_WEEK * NANOS_PER_SECOND,
    "days": NANOS_PER_DAY,
    "hours": SECONDS_PER_HOUR * NANOS_PER_SECOND,
    "minutes": SECONDS_PER_MINUTE * NANOS_PER_SECOND,
    "seconds": NANOS_PER_SECOND,
    "milliseconds": NANOS_PER_MILLISECOND,
    "microseconds": NANOS_PER_MICROSECOND,
    "nanoseconds": 1,
}


class Duration:
    """A signed, exact span of time.

    The span is viewed as (days, seconds, nanoseconds) with the day part
    carrying the sign, so Duration(seconds=-30) reads as
    ``days=-1, seconds=86370``.

    Examples:
        >>> Duration(hours=25)
        Duration(days=1, seconds=3600, nanoseconds=0)
        >>> Duration(minutes=-1).as_seconds()
        -60
    """

    __slots__ = ("_total",)

    def __init__(
        self,
        *,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        parts = {
            "weeks": weeks,
            "days": days,
            "hours": hours,
            "minutes": minutes,
            "seconds": seconds,
            "milliseconds": milliseconds,
            "microseconds": microseconds,
            "nanoseconds": nanoseconds,
        }
        self._total: int = sum(count * _UNIT_NANOS[unit] for unit, count in parts.items())

    @classmethod
    def zero(cls) -> Duration:
        return cls()

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        """Create a Duration of a whole number of seconds.

        >>> Duration.from_seconds(3661).as_seconds()
        3661
        """
        return cls(seconds=seconds)

    def _split(self) -> tuple[int, int, int]:
        days, rest = divmod(self._total, NANOS_PER_DAY)
        seconds, nanos = divmod(rest, NANOS_PER_SECOND)
        return days, seconds, nanos

    @property
    def days(self) -> int:
        return self._split()[0]

    @property
    def seconds(self) -> int:
        """Seconds past the day part, always 0-86399."""
        return self._split()[1]

    @property
    def nanoseconds(self) -> int:
        """Nanoseconds past the second, always 0-999999999."""
        return self._split()[2]

    @property
    def total_nanoseconds(self) -> int:
        return self._total

    def as_seconds(self) -> int:
        """Return the span in whole seconds, rounding toward negative infinity.

        Examples:
            >>> Duration(milliseconds=1500).as_seconds()
            1
            >>> Duration(milliseconds=-1).as_seconds()
            -1
        """
        return self._total // NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        return self._total < 0

    @property
    def is_zero(self) -> bool:
        return self._total == 0

    def __add__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(nanoseconds=self._total + other._total)
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(nanoseconds=self._total - other._total)
        return NotImplemented

    def __neg__(self) -> Duration:
        return Duration(nanoseconds=-self._total)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Duration):
            return self._total == other._total
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._total)

    def __bool__(self) -> bool:
        return self._total != 0

    def __repr__(self) -> str:
        days, seconds, nanos = self._split()
        return f"Duration(days={days}, seconds={seconds}, nanoseconds={nanos})"

    def __str__(self) -> str:
        """Render as "[N day(s), ]H:MM:SS[.fraction]".

        >>> str(Duration(seconds=-1))
        '-1 day, 23:59:59'
        """
        days, seconds, nanos = self._split()
        minutes, second = divmod(seconds, SECONDS_PER_MINUTE)
        hour, minute = divmod(minutes, 60)
        clock = f"{hour}:{minute:02d}:{second:02d}"
        if nanos:
            clock = f"{clock}.{nanos:09d}".rstrip("0")
        if not days:
            return clock
        unit = "day" if abs(days) == 1 else "days"
        return f"{days} {unit}, {clock}"


__all__ = ["Duration"]
