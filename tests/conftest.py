"""Pytest configuration and fixtures for Stillpoint tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so stillpoint can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from stillpoint import Moment  # noqa: E402

# 1969-04-02 02:38:00 UTC
BIRTHDAY_EPOCH = -23_664_120

# 2009-02-13 23:31:30 UTC
FEB13_EPOCH = 1_234_567_890


class DaysInterval:
    """Interval-like test double: a whole number of days."""

    def __init__(self, days: int) -> None:
        self.days = days

    def as_seconds(self) -> int:
        return self.days * 86400


class Feb13:
    """Date-like test double that is not a CalendarDateTime."""

    def epoch(self) -> int:
        return FEB13_EPOCH


class Opaque:
    """An object with neither as_seconds() nor epoch()."""


@pytest.fixture
def birthday() -> Moment:
    """1969-04-02 02:38:00 UTC."""
    return Moment(year=1969, month=4, day=2, hour=2, minute=38)


@pytest.fixture
def three_days() -> DaysInterval:
    return DaysInterval(3)


@pytest.fixture
def feb13() -> Feb13:
    return Feb13()
