"""
Shared failure path for all guards.

Each guard decides whether its value is acceptable; these helpers build
the exception, log the rejection and raise it.
"""

import logging
from numbers import Number
from typing import NoReturn

from guardclause.domain.exceptions import GuardTypeError, GuardValidationError

logger = logging.getLogger(__name__)


def reject(guard: str, parameter_name: str, message: str) -> NoReturn:
    """
    Raise a GuardValidationError for a failed guard.

    Args:
        guard: Name of the guard that rejected the value
        parameter_name: Label of the offending argument
        message: Complete message carried by the exception

    Raises:
        GuardValidationError: Always
    """
    logger.debug("%s rejected %s: %s", guard, parameter_name, message)
    raise GuardValidationError(message, parameter_name)


def reject_type(guard: str, parameter_name: str, message: str) -> NoReturn:
    """Raise a GuardTypeError for a failed guard."""
    logger.debug("%s rejected %s: %s", guard, parameter_name, message)
    raise GuardTypeError(message, parameter_name)


def is_nan(value: object) -> bool:
    """True for numbers that compare unequal to themselves."""
    return isinstance(value, Number) and value != value  # noqa: PLR0124
