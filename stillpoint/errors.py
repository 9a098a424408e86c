"""Stillpoint exception hierarchy.

All Stillpoint-specific exceptions inherit from StillpointError. The
arithmetic errors also inherit from TypeError, which is what Python code
expects from an operator applied to an unsupported operand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stillpoint._internal.constants import MUTATION_FORBIDDEN_PREFIX

if TYPE_CHECKING:
    from stillpoint.arithmetic.operands import UnsupportedReason


class StillpointError(Exception):
    """Base exception for all Stillpoint errors."""

    pass


class ValidationError(StillpointError):
    """Invalid input values.

    Raised when a calendar field or engine argument is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Truncation to an unknown unit
    """

    pass


class TimezoneError(StillpointError):
    """Invalid or unknown timezone.

    Examples:
        - Invalid UTC offset format
        - Offset outside valid range (-14h to +14h)
    """

    pass


class MutationForbiddenError(StillpointError):
    """An in-place mutation was attempted on an immutable value.

    The message always begins with MUTATION_FORBIDDEN_PREFIX. The
    receiver is left unchanged and remains valid.

    Attributes:
        operation: Name of the attempted operation (e.g. "set_hour").
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{MUTATION_FORBIDDEN_PREFIX} (attempted {operation})")


class OperandError(StillpointError, TypeError):
    """Base class for operands rejected by Moment arithmetic.

    Attributes:
        operand: The rejected right-hand (or reflected left-hand) value.
    """

    def __init__(self, message: str, operand: object = None) -> None:
        self.operand = operand
        super().__init__(message)


class UnsupportedOperandError(OperandError):
    """Addition with an operand that is not a number or an interval.

    Attributes:
        reason: The UnsupportedReason when the operand is a raw aggregate
            or lacks the as_seconds capability; None when the operand is
            itself a point in time.
    """

    def __init__(
        self,
        message: str,
        operand: object = None,
        reason: UnsupportedReason | None = None,
    ) -> None:
        self.reason = reason
        super().__init__(message, operand)


class ForbiddenOperandError(OperandError):
    """Subtraction of a raw aggregate (dict, list, set, ...)."""

    pass


class ForbiddenOrderError(OperandError):
    """Subtraction of a point in time from something that is not a date."""

    pass


class NoCapabilityError(OperandError):
    """Subtraction of an object with neither as_seconds nor epoch."""

    pass


__all__ = [
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
