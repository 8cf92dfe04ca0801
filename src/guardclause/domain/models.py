"""
Domain models for guard clauses.

These are the argument types guards accept beyond the value itself.
All models are immutable.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

from guardclause.domain.exceptions import GuardValidationError

DEFAULT_PARAMETER_NAME: Final = "Value"


class _Undefined:
    """
    Marker for an absent value, distinct from None.

    Use UNDEFINED as a default for arguments the caller did not supply;
    null_or_undefined rejects it alongside None.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Undefined":
        return self


UNDEFINED: Final = _Undefined()


@dataclass(frozen=True)
class Bounds:
    """Inclusive [min, max] range used by out_of_range."""

    min: Any
    max: Any

    @classmethod
    def from_pair(cls, pair: "Bounds | Sequence[Any]") -> "Bounds":
        """
        Build Bounds from an ordered (min, max) pair.

        Args:
            pair: A two-element sequence or an existing Bounds

        Returns:
            The Bounds instance

        Raises:
            GuardValidationError: If pair does not hold exactly two elements
        """
        if isinstance(pair, Bounds):
            return pair
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence):
            raise GuardValidationError(
                f"bounds must be a (min, max) pair, got {type(pair).__name__}.",
                "bounds",
            )
        if len(pair) != 2:
            raise GuardValidationError(
                f"bounds must hold exactly two elements, got {len(pair)}.",
                "bounds",
            )
        low, high = pair
        return cls(min=low, max=high)
