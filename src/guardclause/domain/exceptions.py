"""
Domain exceptions for guard clauses.

Two kinds are raised: a value-category violation (GuardValidationError)
and a type-category violation (GuardTypeError). Both share GuardError so
callers can catch either with a single clause.
"""


class GuardError(Exception):
    """
    Base class for every guard failure.

    Guards never catch or retry; a GuardError always reaches the caller.
    """

    def __init__(self, message: str, parameter_name: str):
        """
        Args:
            message: Complete human-readable message
            parameter_name: Label of the argument that failed validation
        """
        super().__init__(message)
        self.message = message
        self.parameter_name = parameter_name


class GuardValidationError(GuardError, ValueError):
    """Raised when a value fails a guard's predicate."""


class GuardTypeError(GuardError, TypeError):
    """Raised when a value is of the wrong category (e.g. not an object)."""
