"""
Domain layer for guardclause.

Pure types shared by every guard: error kinds and argument models.
Has no dependency on the guards themselves.
"""

from guardclause.domain.exceptions import (
    GuardError,
    GuardTypeError,
    GuardValidationError,
)
from guardclause.domain.models import DEFAULT_PARAMETER_NAME, UNDEFINED, Bounds

__all__ = [
    "DEFAULT_PARAMETER_NAME",
    "UNDEFINED",
    "Bounds",
    "GuardError",
    "GuardTypeError",
    "GuardValidationError",
]
