"""
Guards against empty values: empty strings, containers, mappings and objects.

null_or_empty and null_or_whitespace build on null; the null check always
runs first.
"""

from collections.abc import Sequence, Sized
from typing import TypeVar

from guardclause.domain.models import DEFAULT_PARAMETER_NAME
from guardclause.guards.base import reject
from guardclause.guards.nullity import null

T = TypeVar("T")

_TEXT_TYPES = (str, bytes, bytearray)


def _key_count(value: object) -> int:
    if isinstance(value, Sized):
        return len(value)
    attributes = set(getattr(value, "__dict__", ()))
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        attributes.update(
            name
            for name in slots
            if name not in ("__dict__", "__weakref__") and hasattr(value, name)
        )
    return len(attributes)


def null_or_empty(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject None and values of length zero.

    Values without a length (e.g. numbers) only go through the null check.

    Raises:
        GuardValidationError: If value is None or empty
    """
    null(value, parameter_name)
    if isinstance(value, Sized) and len(value) == 0:
        reject("null_or_empty", parameter_name, f"{parameter_name} cannot be empty.")
    return value


def null_or_whitespace(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject None, empty values and strings made only of whitespace.

    Raises:
        GuardValidationError: If value is None, empty or blank
    """
    null_or_empty(value, parameter_name)
    if isinstance(value, str) and not value.strip():
        reject(
            "null_or_whitespace",
            parameter_name,
            f"{parameter_name} cannot be whitespace.",
        )
    return value


def empty_object(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject key-value objects that hold no keys.

    Mappings and other sized containers are measured by their length,
    instances by the attributes they hold. Scalars such as 5 have no keys
    and are rejected. None is rejected by the null check first.
    """
    null(value, parameter_name)
    if _key_count(value) == 0:
        reject(
            "empty_object",
            parameter_name,
            f"{parameter_name} cannot be an empty object.",
        )
    return value


def empty_array(value: T, parameter_name: str = DEFAULT_PARAMETER_NAME) -> T:
    """
    Reject sequences with no elements.

    Only non-text sequences (list, tuple, range, deque, ...) are checked;
    any other value passes through untouched.
    """
    if (
        isinstance(value, Sequence)
        and not isinstance(value, _TEXT_TYPES)
        and len(value) == 0
    ):
        reject(
            "empty_array",
            parameter_name,
            f"{parameter_name} cannot be an empty array.",
        )
    return value
