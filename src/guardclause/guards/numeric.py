"""
Numeric guards: zero, sign and range checks.
"""

from collections.abc import Sequence
from numbers import Number
from typing import Any, TypeVar

from guardclause.domain.models import DEFAULT_PARAMETER_NAME, UNDEFINED, Bounds
from guardclause.guards.base import reject
from guardclause.guards.nullity import null

T = TypeVar("T")


def zero(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject numbers equal to zero.

    Booleans are not numbers here, so False passes.
    """
    if isinstance(value, Number) and not isinstance(value, bool) and value == 0:
        reject("zero", parameter_name, f"{parameter_name} cannot be zero.")
    return value


def negative_or_zero(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject values less than or equal to zero.

    None counts as non-positive.

    Raises:
        GuardValidationError: If value is None or value <= 0
        TypeError: If value cannot be ordered against 0
    """
    if value is None or value <= 0:  # type: ignore[operator]
        reject(
            "negative_or_zero",
            parameter_name,
            f"{parameter_name} must be greater than zero.",
        )
    return value


def out_of_range(
    value: T,
    bounds: Bounds | Sequence[Any],
    parameter_name: str = DEFAULT_PARAMETER_NAME,
) -> T:
    """
    Reject values outside the inclusive range [min, max].

    Args:
        value: Value to check; must not be None
        bounds: Ordered (min, max) pair or a Bounds instance
        parameter_name: Label used in the error message

    Returns:
        value, unchanged

    UNDEFINED lies in no range and is rejected as out of range. Inverted
    bounds (min > max) admit no value.

    Raises:
        GuardValidationError: If value is None, UNDEFINED, below min or above max
    """
    null(value, parameter_name)
    limits = Bounds.from_pair(bounds)
    if (
        value is UNDEFINED
        or value < limits.min  # type: ignore[operator]
        or value > limits.max  # type: ignore[operator]
    ):
        reject(
            "out_of_range",
            parameter_name,
            f"{parameter_name} is out of range. "
            f"Must be between {limits.min} and {limits.max}.",
        )
    return value
