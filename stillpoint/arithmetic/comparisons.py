"""Strict ordering helpers for points in time.

precedes() and follows() are built on CalendarDateTime.compare. For any
two values at most one of them is true, and both are false when the
values are the same instant.
"""

from __future__ import annotations

from stillpoint.core.calendar_datetime import CalendarDateTime


def precedes(left: CalendarDateTime, right: CalendarDateTime) -> bool:
    """Return True if left is strictly earlier than right.

    Raises:
        TypeError: If either argument is not a CalendarDateTime.

    Examples:
        >>> from stillpoint import Moment
        >>> precedes(Moment(0), Moment(1))
        True
    """
    return CalendarDateTime.compare(left, right) < 0


def follows(left: CalendarDateTime, right: CalendarDateTime) -> bool:
    """Return True if left is strictly later than right."""
    return CalendarDateTime.compare(left, right) > 0


__all__ = ["precedes", "follows"]
