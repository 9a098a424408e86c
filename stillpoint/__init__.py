"""Stillpoint: immutable points in time with unambiguous arithmetic.

Stillpoint wraps a mutable calendar engine (CalendarDateTime) in an
immutable value type (Moment). Every in-place mutator of the engine is
disabled on Moment, and ``+``/``-`` work in plain seconds with a fixed,
capability-based dispatch table.

Core Types:
    Moment: Immutable point in time
    CalendarDateTime: Mutable calendar engine value
    Duration: Absolute span of time (interval-like)

Units:
    Timezone: UTC offset-based timezone
    TimeUnit: Calendar units for truncation
    seconds, minutes, hours, days, weeks: second-count helpers

Arithmetic:
    add, subtract: The functions behind Moment's + and -
    precedes, follows: Strict ordering

Exceptions:
    StillpointError: Base exception
    MutationForbiddenError: In-place change of a Moment
    UnsupportedOperandError, ForbiddenOperandError, ForbiddenOrderError,
    NoCapabilityError: Rejected arithmetic operands

Example:
    >>> from stillpoint import Moment, hours
    >>> birthday = Moment(year=1969, month=4, day=2, hour=2, minute=38)
    >>> (birthday + hours(12)).st()
    '1969-04-02 14:38:00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Exceptions
from stillpoint.errors import (
    ForbiddenOperandError,
    ForbiddenOrderError,
    MutationForbiddenError,
    NoCapabilityError,
    OperandError,
    StillpointError,
    TimezoneError,
    UnsupportedOperandError,
    ValidationError,
)

# Core types
from stillpoint.core.calendar_datetime import CalendarDateTime
from stillpoint.core.duration import Duration
from stillpoint.core.moment import Moment

# Units
from stillpoint.units import TimeUnit, Timezone, days, hours, minutes, seconds, weeks

# Arithmetic
from stillpoint.arithmetic import add, follows, precedes, subtract

# Library logging: no output unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Moment",
    "CalendarDateTime",
    "Duration",
    # Units
    "Timezone",
    "TimeUnit",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    # Arithmetic
    "add",
    "subtract",
    "precedes",
    "follows",
    # Exceptions
    "StillpointError",
    "ValidationError",
    "TimezoneError",
    "MutationForbiddenError",
    "OperandError",
    "UnsupportedOperandError",
    "ForbiddenOperandError",
    "ForbiddenOrderError",
    "NoCapabilityError",
]
