"""Fixed-offset timezones.

A Timezone is nothing more than a signed offset from UTC in seconds
(east positive). There is no zone database and no daylight saving:
"+05:30" always means 19800 seconds ahead of UTC.

Values that carry no timezone at all are "floating". Everywhere a
timezone argument is accepted, None and the string "floating" ask for
that; see Timezone.coerce().
"""

from __future__ import annotations

import re
from typing import ClassVar, Union

from stillpoint._internal.constants import FLOATING_TIME_ZONE, SECONDS_PER_HOUR
from stillpoint.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")

# Pacific/Kiritimati sits at +14:00
_MAX_OFFSET = 14 * SECONDS_PER_HOUR


def _parse_offset(text: str) -> int:
    """Turn "+HH:MM", "-HHMM" or "+HH" into signed seconds."""
    match = _OFFSET_PATTERN.match(text)
    if match is None:
        raise TimezoneError(f"Cannot parse timezone string: {text!r}")

    sign, hh, mm = match.groups()
    hours = int(hh)
    minutes = int(mm) if mm else 0
    if minutes > 59:
        raise TimezoneError(f"Offset minutes out of range: {text!r}")

    offset = hours * SECONDS_PER_HOUR + minutes * 60
    if offset > _MAX_OFFSET:
        raise TimezoneError(f"Offset hours out of range: {text!r}")
    return -offset if sign == "-" else offset


class Timezone:
    """A UTC offset, optionally with a display name.

    Equality and hashing look only at the offset. Instances never change
    after construction.

    Examples:
        >>> Timezone.from_string("-0500").offset_seconds
        -18000
        >>> str(Timezone.from_hours(5, 30))
        '+05:30'
    """

    __slots__ = ("_offset_seconds", "_name")

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Timezone.

        Raises:
            TimezoneError: If offset_seconds is not an int or is more
                than 14 hours either side of UTC.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if not -_MAX_OFFSET <= offset_seconds <= _MAX_OFFSET:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside "
                f"[-{_MAX_OFFSET}, {_MAX_OFFSET}]"
            )
        self._offset_seconds = offset_seconds
        self._name = name

    @classmethod
    def utc(cls) -> Timezone:
        """The shared UTC instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Build an offset from hours and minutes; minutes follow the sign of hours.

        >>> Timezone.from_hours(-3, 30).offset_seconds
        -12600
        """
        if not 0 <= minutes <= 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        magnitude = abs(hours) * SECONDS_PER_HOUR + minutes * 60
        return cls(-magnitude if hours < 0 else magnitude)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse "Z", "UTC", "+HH:MM", "-HHMM" or "+HH".

        Raises:
            TimezoneError: On anything else.
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")
        text = s.strip()
        if text.upper() in ("Z", "UTC"):
            return cls.utc()
        return cls(_parse_offset(text))

    @classmethod
    def coerce(cls, value: TimezoneLike) -> Timezone | None:
        """Normalize a timezone argument; None means floating.

        >>> Timezone.coerce("floating") is None
        True
        >>> Timezone.coerce("UTC").is_utc
        True
        """
        if value is None or isinstance(value, Timezone):
            return value
        if not isinstance(value, str):
            raise TimezoneError(
                f"timezone must be a Timezone, a string or None, got {type(value).__name__}"
            )
        if value.strip().lower() == FLOATING_TIME_ZONE:
            return None
        return cls.from_string(value)

    @property
    def offset_seconds(self) -> int:
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_utc(self) -> bool:
        return self._offset_seconds == 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Timezone):
            return self._offset_seconds == other._offset_seconds
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        name = f", name={self._name!r}" if self._name else ""
        return f"Timezone(offset_seconds={self._offset_seconds}{name})"

    def __str__(self) -> str:
        if self._offset_seconds == 0:
            return self._name or "UTC"
        sign = "-" if self._offset_seconds < 0 else "+"
        hours, rest = divmod(abs(self._offset_seconds), SECONDS_PER_HOUR)
        return f"{sign}{hours:02d}:{rest // 60:02d}"


TimezoneLike = Union[Timezone, str, None]


__all__ = ["Timezone", "TimezoneLike"]
