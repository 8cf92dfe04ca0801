"""
Guards against absent values: None, UNDEFINED, NaN and falsy values.
"""

from typing import TypeVar

from guardclause.domain.models import DEFAULT_PARAMETER_NAME, UNDEFINED
from guardclause.guards.base import is_nan, reject

T = TypeVar("T")


def null_or_undefined(
    value: T,
    parameter_name: str = DEFAULT_PARAMETER_NAME,
    message: str = "cannot be null or undefined.",
) -> T:
    """
    Reject None and UNDEFINED.

    Args:
        value: Value to check
        parameter_name: Label used in the error message
        message: Text following the label, replacing the default reason

    Returns:
        value, unchanged

    Raises:
        GuardValidationError: If value is None or UNDEFINED
    """
    if value is None or value is UNDEFINED:
        reject("null_or_undefined", parameter_name, f"{parameter_name} {message}")
    return value


def null(
    value: T,
    parameter_name: str = DEFAULT_PARAMETER_NAME,
    message: str = "cannot be null.",
) -> T:
    """
    Reject None.

    UNDEFINED is not None and passes; use null_or_undefined to reject both.
    """
    if value is None:
        reject("null", parameter_name, f"{parameter_name} {message}")
    return value


def undefined_or_null_or_nan(
    value: T, parameter_name: str = DEFAULT_PARAMETER_NAME
) -> T:
    """Reject UNDEFINED, None and NaN."""
    if value is None or value is UNDEFINED or is_nan(value):
        reject(
            "undefined_or_null_or_nan",
            parameter_name,
            f"{parameter_name} cannot be undefined, null, or NaN.",
        )
    return value


def falsy(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject values that are false in a boolean context.

    NaN is truthy in Python but is rejected here as well, so that
    0, "", False, None, UNDEFINED, empty containers and NaN all fail.
    """
    if not value or is_nan(value):
        reject("falsy", parameter_name, f"{parameter_name} cannot be falsy.")
    return value
