"""Units for Stillpoint: timezones, calendar units and span helpers."""

from __future__ import annotations

from stillpoint.units.timeunit import TimeUnit, days, hours, minutes, seconds, weeks
from stillpoint.units.timezone import Timezone, TimezoneLike

__all__: list[str] = [
    "Timezone",
    "TimezoneLike",
    "TimeUnit",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
]
