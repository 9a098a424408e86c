"""Proleptic Gregorian day arithmetic.

Converts between (year, month, day) triples and day numbers counted
from the Unix epoch, using the civil-from-days method (March-based
years in 400-year eras).

Day 0 = 1970-01-01. Negative day numbers are dates before the epoch.

This module is not part of the public API.
"""

from __future__ import annotations

from stillpoint._internal.constants import DAYS_IN_MONTH, MAX_YEAR, MIN_YEAR
from stillpoint.errors import ValidationError

# Days in a full 400-year Gregorian cycle
_DAYS_PER_ERA = 146_097

# Shift between 0000-03-01 and 1970-01-01, in days
_CIVIL_SHIFT = 719_468


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years, including year 0 and negative years.

    >>> is_leap_year(2000), is_leap_year(1900)
    (True, False)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Length of a month, in days.

    Raises:
        ValidationError: If month is not in 1-12.
    """
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be 1-12, got {month}")
    leap_day = 1 if month == 2 and is_leap_year(year) else 0
    return DAYS_IN_MONTH[month] + leap_day


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01.

    The computation counts from a March-based year so that the leap day
    falls at the end of each cycle.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of month.

    Returns:
        Days since the Unix epoch (negative before it).

    Examples:
        >>> ymd_to_days(1970, 1, 1)
        0
        >>> ymd_to_days(2000, 3, 1)
        11017
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * _DAYS_PER_ERA + day_of_era - _CIVIL_SHIFT


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a (year, month, day) triple.

    Args:
        days: Days since the Unix epoch.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> days_to_ymd(0)
        (1970, 1, 1)
        >>> days_to_ymd(-1)
        (1969, 12, 31)
    """
    z = days + _CIVIL_SHIFT
    era = z // _DAYS_PER_ERA
    day_of_era = z - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return (year, month, day)


def day_of_week(days: int) -> int:
    """Return the weekday for a day count (Monday=0, Sunday=6).

    1970-01-01 was a Thursday.
    """
    return (days + 3) % 7


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValidationError: If the date is invalid.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )
    if month < 1 or month > 12:
        raise ValidationError(f"month must be 1-12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be 1-{max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_days",
    "days_to_ymd",
    "day_of_week",
    "validate_date",
]
