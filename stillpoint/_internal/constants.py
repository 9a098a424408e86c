"""Library defaults and fixed numbers.

There is no configuration file or environment lookup: every default
Stillpoint uses lives here.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
SECONDS_PER_WEEK: int = 7 * SECONDS_PER_DAY

NANOS_PER_DAY: int = SECONDS_PER_DAY * NANOS_PER_SECOND

# Supported calendar years (astronomical numbering)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Month lengths in a common year, indexed 1-12
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Library defaults
DEFAULT_TIME_ZONE: str = "UTC"
FLOATING_TIME_ZONE: str = "floating"
DEFAULT_LOCALE: str = "en-US"

# Immutability layer
MUTATION_FORBIDDEN_PREFIX: str = "Do not mutate Moment objects!"

MUTATOR_NAMES: tuple[str, ...] = (
    "add_duration",
    "subtract_duration",
    "truncate",
    "set",
    "set_year",
    "set_month",
    "set_day",
    "set_hour",
    "set_minute",
    "set_second",
    "set_nanosecond",
    "set_time_zone",
    "set_locale",
    "set_formatter",
)


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DEFAULT_TIME_ZONE",
    "FLOATING_TIME_ZONE",
    "DEFAULT_LOCALE",
    "MUTATION_FORBIDDEN_PREFIX",
    "MUTATOR_NAMES",
]
