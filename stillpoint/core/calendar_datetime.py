"""CalendarDateTime, the mutable calendar engine.

This module provides the CalendarDateTime class: a date and time with an
optional fixed-offset timezone, a locale tag and an optional formatter.
Unlike Moment, a CalendarDateTime can be changed in place through its
mutator methods (add_duration, truncate, set_hour, ...). Moment builds
on this class and disables every one of those mutators.

The internal representation is a count of local days since 1970-01-01
plus nanoseconds since local midnight. Floating values (no timezone)
are treated as UTC whenever an absolute instant is needed.
"""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any, Callable, Optional

from stillpoint._internal.calendar import (
    day_of_week,
    days_in_month,
    days_to_ymd,
    validate_date,
    ymd_to_days,
)
from stillpoint._internal.constants import (
    DEFAULT_LOCALE,
    DEFAULT_TIME_ZONE,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from stillpoint.core.duration import Duration
from stillpoint.errors import ValidationError
from stillpoint.units.timeunit import TimeUnit
from stillpoint.units.timezone import Timezone, TimezoneLike

if TYPE_CHECKING:
    Formatter = Callable[["CalendarDateTime"], str]

_MIN_DAYS = ymd_to_days(MIN_YEAR, 1, 1)
_MAX_DAYS = ymd_to_days(MAX_YEAR, 12, 31)

_FIELD_NAMES = ("year", "month", "day", "hour", "minute", "second", "nanosecond")


def _require_int(name: str, value: object) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def _time_to_nanos(hour: int, minute: int, second: int, nanosecond: int) -> int:
    """Validate time-of-day fields and return nanoseconds since midnight."""
    if not 0 <= hour <= 23:
        raise ValidationError(f"hour must be 0-23, got {hour}")
    if not 0 <= minute <= 59:
        raise ValidationError(f"minute must be 0-59, got {minute}")
    if not 0 <= second <= 59:
        raise ValidationError(f"second must be 0-59, got {second}")
    if not 0 <= nanosecond < NANOS_PER_SECOND:
        raise ValidationError(f"nanosecond must be 0-999999999, got {nanosecond}")
    seconds = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
    return seconds * NANOS_PER_SECOND + nanosecond


def _check_formatter(formatter: object) -> None:
    if formatter is not None and not callable(formatter):
        raise ValidationError(
            f"formatter must be callable or None, got {type(formatter).__name__}"
        )


def _check_locale(locale: object) -> None:
    if not isinstance(locale, str) or not locale:
        raise ValidationError(f"locale must be a non-empty string, got {locale!r}")


class CalendarDateTime:
    """A mutable calendar date and time.

    Attributes:
        year, month, day: Calendar date fields.
        hour, minute, second, nanosecond: Time-of-day fields.
        time_zone: The fixed-offset Timezone, or None if floating.
        locale: Locale tag (informational, e.g. "en-US").
        formatter: Optional callable used by str().

    Examples:
        >>> dt = CalendarDateTime(2024, 1, 15, 14, 30, timezone="UTC")
        >>> dt.set_hour(9).hms()
        '09:30:00'
        >>> dt.hour
        9
    """

    __slots__ = ("_days", "_nanos", "_tz", "_locale", "_formatter")

    def __init__(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        timezone: TimezoneLike = None,
        locale: str = DEFAULT_LOCALE,
        formatter: Optional[Formatter] = None,
    ) -> None:
        """Create a CalendarDateTime from calendar fields.

        Args:
            year: The year (astronomical numbering, -9999 to 9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).
            timezone: A Timezone, an offset string such as "+05:30",
                "UTC", or None/"floating" for no timezone.
            locale: Locale tag.
            formatter: Optional callable taking the value and returning
                its string form.

        Raises:
            ValidationError: If any field is out of range.
            TimezoneError: If the timezone cannot be interpreted.
        """
        days, nanos = self._fields_to_local(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            nanosecond=nanosecond,
        )
        _check_locale(locale)
        _check_formatter(formatter)
        self._store(days, nanos, Timezone.coerce(timezone), locale, formatter)

    @staticmethod
    def _fields_to_local(**fields: Any) -> tuple[int, int]:
        values = {name: _require_int(name, fields[name]) for name in _FIELD_NAMES}
        validate_date(values["year"], values["month"], values["day"])
        nanos = _time_to_nanos(
            values["hour"], values["minute"], values["second"], values["nanosecond"]
        )
        return ymd_to_days(values["year"], values["month"], values["day"]), nanos

    def _store(
        self,
        days: int,
        nanos: int,
        tz: Timezone | None,
        locale: str,
        formatter: Optional[Formatter],
    ) -> None:
        # Every state write goes through here. Moment blocks __setattr__,
        # so the slots are written with object.__setattr__.
        object.__setattr__(self, "_days", days)
        object.__setattr__(self, "_nanos", nanos)
        object.__setattr__(self, "_tz", tz)
        object.__setattr__(self, "_locale", locale)
        object.__setattr__(self, "_formatter", formatter)

    def _state(self) -> tuple[int, int, Timezone | None, str, Optional[Formatter]]:
        return (self._days, self._nanos, self._tz, self._locale, self._formatter)

    @staticmethod
    def _normalize_local(days: int, nanos: int) -> tuple[int, int]:
        """Carry nanosecond overflow into days and check the year range."""
        extra_days, nanos = divmod(nanos, NANOS_PER_DAY)
        days += extra_days
        if days < _MIN_DAYS or days > _MAX_DAYS:
            raise ValidationError(
                f"result is outside the supported years {MIN_YEAR} to {MAX_YEAR}"
            )
        return days, nanos

    def _store_local(self, days: int, nanos: int) -> None:
        days, nanos = self._normalize_local(days, nanos)
        self._store(days, nanos, self._tz, self._locale, self._formatter)

    @classmethod
    def _from_internal(
        cls,
        days: int,
        nanos: int,
        tz: Timezone | None,
        locale: str = DEFAULT_LOCALE,
        formatter: Optional[Formatter] = None,
    ) -> CalendarDateTime:
        """Create an instance from internal state, bypassing validation."""
        instance = object.__new__(cls)
        instance._store(days, nanos, tz, locale, formatter)
        return instance

    @classmethod
    def from_epoch(
        cls,
        seconds: int,
        *,
        timezone: TimezoneLike = DEFAULT_TIME_ZONE,
        locale: str = DEFAULT_LOCALE,
        formatter: Optional[Formatter] = None,
    ) -> CalendarDateTime:
        """Create a value from seconds since 1970-01-01T00:00:00 UTC.

        Args:
            seconds: Integer epoch offset (negative before 1970).
            timezone: Timezone for the local fields (UTC by default).
            locale: Locale tag.
            formatter: Optional string formatter.

        Raises:
            ValidationError: If seconds is not an integer or the instant
                falls outside the supported years.

        Examples:
            >>> CalendarDateTime.from_epoch(0).ymd()
            '1970-01-01'
            >>> CalendarDateTime.from_epoch(0, timezone="-05:00").hms()
            '19:00:00'
        """
        seconds = _require_int("epoch seconds", seconds)
        tz = Timezone.coerce(timezone)
        _check_locale(locale)
        _check_formatter(formatter)

        local_seconds = seconds + (tz.offset_seconds if tz is not None else 0)
        days, nanos = cls._normalize_local(0, local_seconds * NANOS_PER_SECOND)
        return cls._from_internal(days, nanos, tz, locale, formatter)

    @classmethod
    def last_day_of_month(
        cls, year: int, month: int, **fields: Any
    ) -> CalendarDateTime:
        """Create a value on the last day of the given month.

        Args:
            year: The year.
            month: The month (1-12).
            **fields: Any other constructor arguments (hour, timezone, ...).

        Examples:
            >>> CalendarDateTime.last_day_of_month(2024, 2).day
            29
        """
        year = _require_int("year", year)
        month = _require_int("month", month)
        return cls(year, month, days_in_month(year, month), **fields)

    @classmethod
    def compare(cls, a: CalendarDateTime, b: CalendarDateTime) -> int:
        """Compare two values as instants.

        Returns:
            -1 if a is earlier than b, 0 if they are the same instant,
            1 if a is later.

        Raises:
            TypeError: If either argument is not a CalendarDateTime.
        """
        if not isinstance(a, CalendarDateTime) or not isinstance(b, CalendarDateTime):
            raise TypeError(
                f"can't compare {type(a).__name__!r} and {type(b).__name__!r}"
            )
        left = a._utc_nanos()
        right = b._utc_nanos()
        return (left > right) - (left < right)

    def clone(self) -> CalendarDateTime:
        """Return an independent copy of this value.

        Later mutation of either value never affects the other.
        """
        return type(self)._from_internal(*self._state())

    # Instant accessors

    def _offset_seconds(self) -> int:
        return self._tz.offset_seconds if self._tz is not None else 0

    def _utc_nanos(self) -> int:
        return (
            self._days * NANOS_PER_DAY
            + self._nanos
            - self._offset_seconds() * NANOS_PER_SECOND
        )

    def epoch(self) -> int:
        """Return whole seconds since 1970-01-01T00:00:00 UTC.

        Sub-second parts are floored.
        """
        return self._utc_nanos() // NANOS_PER_SECOND

    # Calendar fields

    @property
    def year(self) -> int:
        return days_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return days_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return days_to_ymd(self._days)[2]

    @property
    def hour(self) -> int:
        return self._nanos // (SECONDS_PER_HOUR * NANOS_PER_SECOND)

    @property
    def minute(self) -> int:
        return (self._nanos // (SECONDS_PER_MINUTE * NANOS_PER_SECOND)) % 60

    @property
    def second(self) -> int:
        return (self._nanos // NANOS_PER_SECOND) % 60

    @property
    def nanosecond(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    @property
    def day_of_week(self) -> int:
        """Return the weekday of the local date (Monday=0, Sunday=6)."""
        return day_of_week(self._days)

    @property
    def time_zone(self) -> Timezone | None:
        """Return the timezone, or None if floating."""
        return self._tz

    @property
    def is_floating(self) -> bool:
        return self._tz is None

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def formatter(self) -> Optional[Formatter]:
        return self._formatter

    # Formatting

    def ymd(self, sep: str = "-") -> str:
        """Return the zero-padded local date, e.g. "2024-01-05"."""
        year, month, day = days_to_ymd(self._days)
        year_str = f"{year:04d}" if year >= 0 else f"{year:05d}"
        return f"{year_str}{sep}{month:02d}{sep}{day:02d}"

    def hms(self, sep: str = ":") -> str:
        """Return the zero-padded local time, e.g. "09:05:00"."""
        return f"{self.hour:02d}{sep}{self.minute:02d}{sep}{self.second:02d}"

    def iso8601(self) -> str:
        """Return the local date and time as "YYYY-MM-DDTHH:MM:SS"."""
        return f"{self.ymd()}T{self.hms()}"

    # Mutators

    def add_duration(self, duration: Duration) -> CalendarDateTime:
        """Move this value forward by a Duration, in place.

        Returns:
            self, to allow chaining.
        """
        if not isinstance(duration, Duration):
            raise ValidationError(
                f"add_duration expects a Duration, got {type(duration).__name__}"
            )
        self._store_local(self._days, self._nanos + duration.total_nanoseconds)
        return self

    def subtract_duration(self, duration: Duration) -> CalendarDateTime:
        """Move this value backward by a Duration, in place."""
        if not isinstance(duration, Duration):
            raise ValidationError(
                f"subtract_duration expects a Duration, got {type(duration).__name__}"
            )
        return self.add_duration(-duration)

    def truncate(self, to: TimeUnit | str) -> CalendarDateTime:
        """Zero out every field smaller than the given unit, in place.

        Truncating to WEEK moves back to the Monday of the current week.

        Examples:
            >>> CalendarDateTime(2024, 5, 17, 13, 45).truncate("month").iso8601()
            '2024-05-01T00:00:00'
        """
        unit = TimeUnit.parse(to)
        year, month, _ = days_to_ymd(self._days)

        if unit is TimeUnit.YEAR:
            self._store_local(ymd_to_days(year, 1, 1), 0)
        elif unit is TimeUnit.MONTH:
            self._store_local(ymd_to_days(year, month, 1), 0)
        elif unit is TimeUnit.WEEK:
            self._store_local(self._days - day_of_week(self._days), 0)
        elif unit is TimeUnit.DAY:
            self._store_local(self._days, 0)
        else:
            step = unit.to_seconds() * NANOS_PER_SECOND
            self._store_local(self._days, self._nanos - self._nanos % step)
        return self

    def set(self, **fields: int) -> CalendarDateTime:
        """Replace calendar fields in place.

        Args:
            **fields: Any of year, month, day, hour, minute, second,
                nanosecond.

        Raises:
            ValidationError: On an unknown field name or an invalid result.
                The value is left unchanged in that case.
        """
        unknown = sorted(set(fields) - set(_FIELD_NAMES))
        if unknown:
            raise ValidationError(f"unknown field(s) for set(): {', '.join(unknown)}")

        current = {name: getattr(self, name) for name in _FIELD_NAMES}
        current.update(fields)
        days, nanos = self._fields_to_local(**current)
        self._store_local(days, nanos)
        return self

    def set_year(self, year: int) -> CalendarDateTime:
        return self.set(year=year)

    def set_month(self, month: int) -> CalendarDateTime:
        return self.set(month=month)

    def set_day(self, day: int) -> CalendarDateTime:
        return self.set(day=day)

    def set_hour(self, hour: int) -> CalendarDateTime:
        return self.set(hour=hour)

    def set_minute(self, minute: int) -> CalendarDateTime:
        return self.set(minute=minute)

    def set_second(self, second: int) -> CalendarDateTime:
        return self.set(second=second)

    def set_nanosecond(self, nanosecond: int) -> CalendarDateTime:
        return self.set(nanosecond=nanosecond)

    def set_time_zone(self, timezone: TimezoneLike) -> CalendarDateTime:
        """Change the timezone in place.

        Between two fixed offsets the instant is preserved and the local
        fields move. When either side is floating the local fields are
        kept as they are.
        """
        new_tz = Timezone.coerce(timezone)
        nanos = self._nanos
        if self._tz is not None and new_tz is not None:
            nanos += (new_tz.offset_seconds - self._tz.offset_seconds) * NANOS_PER_SECOND
        days, nanos = self._normalize_local(self._days, nanos)
        self._store(days, nanos, new_tz, self._locale, self._formatter)
        return self

    def set_locale(self, locale: str) -> CalendarDateTime:
        _check_locale(locale)
        self._store(self._days, self._nanos, self._tz, locale, self._formatter)
        return self

    def set_formatter(self, formatter: Optional[Formatter]) -> CalendarDateTime:
        _check_formatter(formatter)
        self._store(self._days, self._nanos, self._tz, self._locale, formatter)
        return self

    # Arithmetic operators

    def __add__(self, other: object) -> CalendarDateTime:
        """Return a new value moved forward by a Duration."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.clone().add_duration(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> CalendarDateTime | Duration:
        """Subtract a Duration (new value) or another value (Duration)."""
        if isinstance(other, Duration):
            return self.clone().subtract_duration(other)
        if isinstance(other, CalendarDateTime):
            return Duration(nanoseconds=self._utc_nanos() - other._utc_nanos())
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._utc_nanos() == other._utc_nanos()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._utc_nanos() < other._utc_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._utc_nanos() <= other._utc_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._utc_nanos() > other._utc_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._utc_nanos() >= other._utc_nanos()

    # Mutable, so unhashable; Moment restores hashing
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        year, month, day = days_to_ymd(self._days)
        tz = str(self._tz) if self._tz is not None else "floating"
        return (
            f"{type(self).__name__}({year}, {month}, {day}, {self.hour}, "
            f"{self.minute}, {self.second}, nanosecond={self.nanosecond}, "
            f"timezone={tz!r})"
        )

    def __str__(self) -> str:
        """Return the formatter's rendering, or iso8601() without one."""
        if self._formatter is not None:
            return self._formatter(self)
        return self.iso8601()


__all__ = ["CalendarDateTime"]
