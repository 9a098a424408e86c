"""Moment arithmetic.

Arithmetic Operations (from stillpoint.arithmetic.ops):
    - add: Move a Moment forward by seconds or an interval
    - subtract: Move a Moment back, or measure the distance to a date

Operand Classification (from stillpoint.arithmetic.operands):
    - classify: Tag an operand as RawOffset, IntervalLike, DateLike
      or Unsupported
    - SupportsAsSeconds, SupportsEpoch: the capability protocols

Comparison Operations (from stillpoint.arithmetic.comparisons):
    - precedes, follows: strict ordering of two points in time
"""

from __future__ import annotations

from stillpoint.arithmetic.comparisons import follows, precedes
from stillpoint.arithmetic.operands import (
    DateLike,
    IntervalLike,
    Operand,
    RawOffset,
    SupportsAsSeconds,
    SupportsEpoch,
    Unsupported,
    UnsupportedReason,
    classify,
)
from stillpoint.arithmetic.ops import add, subtract

__all__: list[str] = [
    "add",
    "subtract",
    "classify",
    "Operand",
    "RawOffset",
    "IntervalLike",
    "DateLike",
    "Unsupported",
    "UnsupportedReason",
    "SupportsAsSeconds",
    "SupportsEpoch",
    "precedes",
    "follows",
]
