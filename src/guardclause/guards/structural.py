"""
Type-category guards.

Unlike the value guards, these raise GuardTypeError.
"""

import inspect
from numbers import Number
from typing import TypeVar

from guardclause.domain.models import DEFAULT_PARAMETER_NAME, UNDEFINED
from guardclause.guards.base import reject_type

T = TypeVar("T")

# Scalars that carry a value rather than structure
_PRIMITIVE_TYPES = (str, bytes, Number)


def _is_object(value: object) -> bool:
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, _PRIMITIVE_TYPES):
        return False
    return not (inspect.isroutine(value) or inspect.isclass(value))


def not_object(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject values that are not structured objects.

    None, UNDEFINED, primitives (str, bytes, numbers, bool), functions and
    classes are rejected. Containers and instances pass.

    Raises:
        GuardTypeError: If value is not an object
    """
    if not _is_object(value):
        reject_type("not_object", parameter_name, f"{parameter_name} must be an object.")
    return value
