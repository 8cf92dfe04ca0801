"""
Guards driven by a caller-supplied predicate.

The caller writes both the rule and the message; the guard only appends
the parameter label.
"""

import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from guardclause.domain.models import DEFAULT_PARAMETER_NAME
from guardclause.guards.base import reject

T = TypeVar("T")


def expression(
    value: T,
    predicate: Callable[[T], Any],
    message: str,
    parameter_name: str = DEFAULT_PARAMETER_NAME,
) -> T:
    """
    Reject values for which predicate returns a falsy result.

    Args:
        value: Value to check
        predicate: Called with value; a truthy result accepts it
        message: Reason shown in the error, before the parameter label
        parameter_name: Label used in the error message

    Returns:
        value, unchanged

    Raises:
        GuardValidationError: If predicate(value) is falsy
    """
    if not predicate(value):
        reject("expression", parameter_name, f"{message}. Parameter: {parameter_name}")
    return value


async def expression_async(
    value: T,
    predicate: Callable[[T], Any],
    message: str,
    parameter_name: str = DEFAULT_PARAMETER_NAME,
) -> T:
    """
    Awaitable variant of expression.

    predicate may be a coroutine function or a plain callable; its result
    is awaited only when it is awaitable.
    """
    outcome = predicate(value)
    if inspect.isawaitable(outcome):
        outcome = await outcome
    if not outcome:
        reject(
            "expression_async",
            parameter_name,
            f"{message}. Parameter: {parameter_name}",
        )
    return value
