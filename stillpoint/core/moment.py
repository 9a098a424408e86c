"""Moment, the immutable point-in-time value.

Moment is a CalendarDateTime that can never change after construction:

* every inherited mutator (add_duration, truncate, set_hour, ...) raises
  MutationForbiddenError;
* attribute assignment and deletion raise MutationForbiddenError;
* ``+`` and ``-`` never touch their operands and always build a new
  value. They work in absolute seconds and are dispatched by
  stillpoint.arithmetic.ops.

Examples:
    >>> birthday = Moment(year=1969, month=4, day=2, hour=2, minute=38)
    >>> (birthday + 10).st()
    '1969-04-02 02:38:10'
    >>> (birthday + 100) - birthday
    100
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Callable, NoReturn

from stillpoint._internal.constants import DEFAULT_TIME_ZONE
from stillpoint.core.calendar_datetime import CalendarDateTime
from stillpoint.errors import MutationForbiddenError, ValidationError

logger = logging.getLogger(__name__)


def reject_mutation(operation: str) -> NoReturn:
    """Refuse an in-place change to a Moment.

    Args:
        operation: Name of the attempted operation.

    Raises:
        MutationForbiddenError: Always.
    """
    logger.debug("rejected %s on an immutable Moment", operation)
    raise MutationForbiddenError(operation)


def _forbidden(operation: str) -> Callable[..., NoReturn]:
    def mutator(self: Moment, *args: Any, **kwargs: Any) -> NoReturn:
        reject_mutation(operation)

    mutator.__name__ = operation
    mutator.__qualname__ = f"Moment.{operation}"
    mutator.__doc__ = f"Not supported: Moment values are immutable ({operation})."
    return mutator


def _is_epoch_shorthand(args: tuple[Any, ...], fields: dict[str, Any]) -> bool:
    return (
        len(args) == 1
        and not fields
        and isinstance(args[0], numbers.Integral)
        and not isinstance(args[0], bool)
    )


class Moment(CalendarDateTime):
    """An immutable point in time.

    Moment(n) with a single integer is shorthand for Moment.from_epoch(n).
    Otherwise the arguments are calendar fields as for CalendarDateTime,
    except that the timezone defaults to UTC. Pass timezone="floating"
    (or None) for a value with no timezone.

    Addition and subtraction follow these rules:

    * moment + n, n + moment, moment - n: n seconds later/earlier
    * moment + interval, moment - interval: same, using as_seconds()
    * moment - other_date: moment.interval_factory(difference in seconds)
    * n - moment, interval - moment, other_date - moment: ForbiddenOrderError
    * anything else raises an OperandError subclass

    Examples:
        >>> Moment(0).st()
        '1970-01-01 00:00:00'
        >>> Moment(year=2024, month=2).number_of_days_in_month()
        29
    """

    __slots__ = ()

    def __init__(self, *args: Any, **fields: Any) -> None:
        if _is_epoch_shorthand(args, fields):
            self._store(*CalendarDateTime.from_epoch(args[0])._state())
            return
        fields.setdefault("timezone", DEFAULT_TIME_ZONE)
        super().__init__(*args, **fields)

    @classmethod
    def new(cls, *args: Any, **fields: Any) -> Moment:
        """Create a Moment; same arguments as the constructor.

        Calling it on an instance ignores that instance.
        """
        return cls(*args, **fields)

    @classmethod
    def from_datetime(cls, value: CalendarDateTime) -> Moment:
        """Wrap a copy of a CalendarDateTime as a Moment.

        The source is cloned first, so mutating it afterwards never
        affects the returned Moment.

        Raises:
            ValidationError: If value is not a CalendarDateTime.
        """
        if not isinstance(value, CalendarDateTime):
            raise ValidationError(
                f"from_datetime expects a CalendarDateTime, got {type(value).__name__}"
            )
        return cls._from_internal(*value.clone()._state())

    # Immutability

    def _store(self, *state: Any) -> None:
        # Every engine write ends here, including base-class mutators
        # called directly and a second __init__. Only the first is allowed.
        try:
            self._days
        except AttributeError:
            super()._store(*state)
            return
        reject_mutation("in-place change")

    def __hash__(self) -> int:
        return hash(self._utc_nanos())

    def __setattr__(self, name: str, value: object) -> NoReturn:
        reject_mutation(f"assignment to {name}")

    def __delattr__(self, name: str) -> NoReturn:
        reject_mutation(f"deletion of {name}")

    def __copy__(self) -> Moment:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Moment:
        return self

    def clone(self) -> Moment:
        """Return self; a Moment never needs copying."""
        return self

    add_duration = _forbidden("add_duration")
    subtract_duration = _forbidden("subtract_duration")
    truncate = _forbidden("truncate")
    set = _forbidden("set")
    set_year = _forbidden("set_year")
    set_month = _forbidden("set_month")
    set_day = _forbidden("set_day")
    set_hour = _forbidden("set_hour")
    set_minute = _forbidden("set_minute")
    set_second = _forbidden("set_second")
    set_nanosecond = _forbidden("set_nanosecond")
    set_time_zone = _forbidden("set_time_zone")
    set_locale = _forbidden("set_locale")
    set_formatter = _forbidden("set_formatter")

    # Arithmetic

    def interval_factory(self, seconds: int) -> Any:
        """Turn the second difference of a subtraction into its result.

        The default returns seconds unchanged. Override it to return a
        richer interval object.
        """
        return seconds

    def plus(self, other: object) -> Moment:
        """Return a Moment moved forward by other (seconds or interval)."""
        from stillpoint.arithmetic.ops import add

        return add(self, other)

    def minus(self, other: object, *, reflected: bool = False) -> Any:
        """Subtract other from this Moment, or this Moment from other.

        Args:
            other: A number of seconds, an interval, or a date-like value.
            reflected: If True, compute ``other - self`` instead.
        """
        from stillpoint.arithmetic.ops import subtract

        return subtract(self, other, reflected=reflected)

    def __add__(self, other: object) -> Moment:
        return self.plus(other)

    def __radd__(self, other: object) -> Moment:
        return self.plus(other)

    def __sub__(self, other: object) -> Any:
        return self.minus(other)

    def __rsub__(self, other: object) -> Any:
        return self.minus(other, reflected=True)

    # Convenience

    def precedes(self, other: CalendarDateTime) -> bool:
        """Return True if this Moment is strictly earlier than other."""
        from stillpoint.arithmetic.comparisons import precedes

        return precedes(self, other)

    def follows(self, other: CalendarDateTime) -> bool:
        """Return True if this Moment is strictly later than other."""
        from stillpoint.arithmetic.comparisons import follows

        return follows(self, other)

    def st(self) -> str:
        """Return "YYYY-MM-DD HH:MM:SS" (not ISO 8601; short for string)."""
        return f"{self.ymd('-')} {self.hms(':')}"

    def number_of_days_in_month(self) -> int:
        """Return how many days the month of this Moment has."""
        return type(self).last_day_of_month(
            self.year, self.month, timezone=self.time_zone
        ).day


__all__ = ["Moment", "reject_mutation"]
