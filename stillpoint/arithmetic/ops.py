"""Addition and subtraction for Moment values.

This module is the canonical implementation of Moment arithmetic. The
operator methods on Moment (``+``, ``-`` and their reflected forms) and
Moment.plus/Moment.minus all delegate here.

All arithmetic is in absolute seconds, never calendar units. Neither
operand is ever modified.

Dispatch table for ``moment + x`` (and ``x + moment``):
    - integer n          -> n seconds later
    - interval-like      -> x.as_seconds() seconds later
    - date-like          -> UnsupportedOperandError
    - raw aggregate      -> UnsupportedOperandError (RAW_AGGREGATE)
    - other object       -> UnsupportedOperandError (NO_CAPABILITY)

Dispatch table for ``moment - x``:
    - date-like          -> moment.interval_factory(moment.epoch() - x.epoch())
    - raw aggregate      -> ForbiddenOperandError
    - integer n          -> n seconds earlier
    - interval-like      -> x.as_seconds() seconds earlier
    - other object       -> NoCapabilityError

and for ``x - moment`` (reflected):
    - date-like, integer or interval-like -> ForbiddenOrderError
    - raw aggregate      -> ForbiddenOperandError
    - other object       -> NoCapabilityError

An operand that is both date-like and interval-like counts as an
interval for addition and as a date for subtraction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NoReturn

from stillpoint.arithmetic.operands import (
    DateLike,
    IntervalLike,
    RawOffset,
    Unsupported,
    UnsupportedReason,
    classify,
)
from stillpoint.errors import (
    ForbiddenOperandError,
    ForbiddenOrderError,
    NoCapabilityError,
    OperandError,
    UnsupportedOperandError,
)

if TYPE_CHECKING:
    from stillpoint.core.moment import Moment

logger = logging.getLogger(__name__)

# Fixed message prefixes, so callers can match on them
ADD_POINT_TO_POINT = "Can't add a point in time to a point in time"
ADD_RAW_AGGREGATE = "Can't add a raw aggregate to a point in time"
ADD_NO_AS_SECONDS = "Can't add an object with no 'as_seconds' method to a point in time"
SUBTRACT_RAW_AGGREGATE = "Can't subtract a raw aggregate from a point in time"
SUBTRACT_FROM_NUMBER = "Subtracting a point in time from a number is forbidden"
SUBTRACT_FROM_OBJECT = "Subtracting a point in time from another object is forbidden"
NO_CAPABILITY = "Operand has neither 'as_seconds' nor 'epoch'"


def _fail(error: OperandError) -> NoReturn:
    logger.debug(
        "rejected operand of type %s: %s", type(error.operand).__name__, error
    )
    raise error


def _describe(moment: Moment, operand: object) -> str:
    return f"{type(operand).__name__} {operand!r} and {moment!r}"


def _shift(moment: Moment, seconds: int) -> Moment:
    """Build a new value of moment's type, seconds after moment."""
    return type(moment).from_epoch(
        moment.epoch() + seconds,
        timezone=moment.time_zone,
        locale=moment.locale,
        formatter=moment.formatter,
    )


def add(moment: Moment, operand: object) -> Moment:
    """Return moment moved forward by operand.

    Addition is symmetric: ``x + moment`` calls this with the same
    arguments as ``moment + x``.

    Args:
        moment: The point in time.
        operand: An integer number of seconds or an interval-like object.

    Returns:
        A new Moment (of moment's class).

    Raises:
        UnsupportedOperandError: If operand is a point in time, a raw
            aggregate, or an object without as_seconds().

    Examples:
        >>> from stillpoint import Moment
        >>> add(Moment(100), 20).epoch()
        120
    """
    kind = classify(operand)

    if isinstance(kind, RawOffset):
        return _shift(moment, kind.seconds)
    if isinstance(kind, IntervalLike):
        return _shift(moment, kind.as_seconds())
    if isinstance(kind, DateLike):
        _fail(
            UnsupportedOperandError(
                f"{ADD_POINT_TO_POINT}: {_describe(moment, operand)}", operand
            )
        )
    if kind.reason is UnsupportedReason.RAW_AGGREGATE:
        _fail(
            UnsupportedOperandError(
                f"{ADD_RAW_AGGREGATE}: {_describe(moment, operand)}",
                operand,
                kind.reason,
            )
        )
    _fail(
        UnsupportedOperandError(
            f"{ADD_NO_AS_SECONDS}: {_describe(moment, operand)}",
            operand,
            kind.reason,
        )
    )


def subtract(moment: Moment, operand: object, *, reflected: bool = False) -> Any:
    """Subtract operand from moment, or moment from operand if reflected.

    Args:
        moment: The point in time.
        operand: An integer, an interval-like or a date-like object.
        reflected: True when evaluating ``operand - moment``.

    Returns:
        A new Moment when operand is a number or an interval; the result
        of moment.interval_factory(seconds) when operand is date-like.

    Raises:
        ForbiddenOrderError: When reflected and operand is a number, an
            interval or a date: subtracting a point in time from those
            is meaningless.
        ForbiddenOperandError: If operand is a raw aggregate.
        NoCapabilityError: If operand has neither as_seconds nor epoch.

    Examples:
        >>> from stillpoint import Moment
        >>> subtract(Moment(100), Moment(40))
        60
        >>> subtract(Moment(100), 40).epoch()
        60
    """
    kind = classify(operand, date_first=True)

    if isinstance(kind, DateLike):
        if reflected:
            _fail(
                ForbiddenOrderError(
                    f"{SUBTRACT_FROM_OBJECT}: {_describe(moment, operand)}", operand
                )
            )
        return moment.interval_factory(moment.epoch() - kind.epoch())

    if isinstance(kind, Unsupported):
        if kind.reason is UnsupportedReason.RAW_AGGREGATE:
            _fail(
                ForbiddenOperandError(
                    f"{SUBTRACT_RAW_AGGREGATE}: {_describe(moment, operand)}", operand
                )
            )
        _fail(
            NoCapabilityError(f"{NO_CAPABILITY}: {_describe(moment, operand)}", operand)
        )

    if isinstance(kind, RawOffset):
        if reflected:
            _fail(
                ForbiddenOrderError(
                    f"{SUBTRACT_FROM_NUMBER}: {_describe(moment, operand)}", operand
                )
            )
        return add(moment, -kind.seconds)

    if reflected:
        _fail(
            ForbiddenOrderError(
                f"{SUBTRACT_FROM_OBJECT}: {_describe(moment, operand)}", operand
            )
        )
    return _shift(moment, -kind.as_seconds())


__all__ = [
    "add",
    "subtract",
    "ADD_POINT_TO_POINT",
    "ADD_RAW_AGGREGATE",
    "ADD_NO_AS_SECONDS",
    "SUBTRACT_RAW_AGGREGATE",
    "SUBTRACT_FROM_NUMBER",
    "SUBTRACT_FROM_OBJECT",
    "NO_CAPABILITY",
]
