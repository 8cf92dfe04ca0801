"""
guardclause: precondition checks for function arguments.

Each guard validates one assumption about a value and raises a descriptive
error when it does not hold. On success the value is returned unchanged, so
guards can be used inline at the top of a function.

Example:
    from guardclause import Guard, GuardValidationError

    def connect(host, port, retries):
        host = Guard.against.null_or_whitespace(host, "host")
        port = Guard.against.out_of_range(port, (1, 65535), "port")
        retries = Guard.against.negative_or_zero(retries, "retries")
        ...
"""

import logging

from guardclause import against

# Domain types
from guardclause.domain.exceptions import (
    GuardError,
    GuardTypeError,
    GuardValidationError,
)
from guardclause.domain.models import DEFAULT_PARAMETER_NAME, UNDEFINED, Bounds

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


class Guard:
    """
    Entry point grouping all guards under ``Guard.against``.

    Never instantiated; guards are plain functions.
    """

    against = against


__all__ = [
    # Version
    "__version__",
    # Namespace
    "Guard",
    "against",
    # Domain exceptions
    "GuardError",
    "GuardValidationError",
    "GuardTypeError",
    # Domain models
    "UNDEFINED",
    "Bounds",
    "DEFAULT_PARAMETER_NAME",
]
