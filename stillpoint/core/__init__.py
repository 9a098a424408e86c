"""Core types for Stillpoint.

This module exports the main value types:
    - Moment: Immutable point in time
    - CalendarDateTime: Mutable calendar engine value
    - Duration: Absolute span of time
"""

from __future__ import annotations

from stillpoint.core.calendar_datetime import CalendarDateTime
from stillpoint.core.duration import Duration
from stillpoint.core.moment import Moment, reject_mutation

__all__: list[str] = [
    "CalendarDateTime",
    "Duration",
    "Moment",
    "reject_mutation",
]
