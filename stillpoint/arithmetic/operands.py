"""Operand classification for Moment arithmetic.

An operand is classified by what it can do, not by its type:

    RawOffset     a plain integer count of seconds
    IntervalLike  anything with an ``as_seconds()`` method
    DateLike      anything with an ``epoch()`` method
    Unsupported   everything else, split into raw aggregates (dict, list,
                  tuple, set, ...) and objects lacking both capabilities

The capabilities are the runtime-checkable protocols SupportsAsSeconds
and SupportsEpoch. An object may satisfy both; the caller picks which
one wins with ``date_first``.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, MutableSequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union, runtime_checkable

_RAW_AGGREGATES = (Mapping, MutableSequence, Set, tuple)


@runtime_checkable
class SupportsAsSeconds(Protocol):
    """An interval that can report itself as signed whole seconds."""

    def as_seconds(self) -> int: ...


@runtime_checkable
class SupportsEpoch(Protocol):
    """A point in time that can report its Unix epoch offset."""

    def epoch(self) -> int: ...


class UnsupportedReason(Enum):
    """Why an operand could not be classified."""

    RAW_AGGREGATE = "raw aggregate"
    NO_CAPABILITY = "no capability"


@dataclass(frozen=True)
class RawOffset:
    seconds: int


@dataclass(frozen=True)
class IntervalLike:
    value: SupportsAsSeconds

    def as_seconds(self) -> int:
        return self.value.as_seconds()


@dataclass(frozen=True)
class DateLike:
    value: SupportsEpoch

    def epoch(self) -> int:
        return self.value.epoch()


@dataclass(frozen=True)
class Unsupported:
    value: object
    reason: UnsupportedReason


Operand = Union[RawOffset, IntervalLike, DateLike, Unsupported]


def _has_capability(value: object, protocol: type, method: str) -> bool:
    # The protocol check is only hasattr(): a data attribute or an unbound
    # method on a class object must not count
    if isinstance(value, type) or not isinstance(value, protocol):
        return False
    return callable(getattr(value, method, None))


def classify(value: object, *, date_first: bool = False) -> Operand:
    """Classify an arithmetic operand.

    Args:
        value: The operand to inspect.
        date_first: When value has both capabilities, classify it as
            DateLike (subtraction) instead of IntervalLike (addition).

    Returns:
        One of RawOffset, IntervalLike, DateLike or Unsupported.

    Examples:
        >>> classify(10)
        RawOffset(seconds=10)
        >>> classify({}).reason
        <UnsupportedReason.RAW_AGGREGATE: 'raw aggregate'>
    """
    # bool is an Integral, but True seconds is never what the caller meant
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return RawOffset(int(value))

    is_interval = _has_capability(value, SupportsAsSeconds, "as_seconds")
    is_date = _has_capability(value, SupportsEpoch, "epoch")

    if is_date and (date_first or not is_interval):
        return DateLike(value)
    if is_interval:
        return IntervalLike(value)
    if isinstance(value, _RAW_AGGREGATES):
        return Unsupported(value, UnsupportedReason.RAW_AGGREGATE)
    return Unsupported(value, UnsupportedReason.NO_CAPABILITY)


__all__ = [
    "SupportsAsSeconds",
    "SupportsEpoch",
    "UnsupportedReason",
    "RawOffset",
    "IntervalLike",
    "DateLike",
    "Unsupported",
    "Operand",
    "classify",
]
