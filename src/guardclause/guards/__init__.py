"""
Guard clauses grouped by what they reject.

- nullity: None, UNDEFINED, NaN, falsy values
- emptiness: empty strings, containers, mappings and objects
- numeric: zero, sign and range
- expression: caller-supplied predicates (sync and async)
- structural: type-category checks

Every guard returns its value unchanged on success.
"""

from guardclause.guards.emptiness import (
    empty_array,
    empty_object,
    null_or_empty,
    null_or_whitespace,
)
from guardclause.guards.expression import expression, expression_async
from guardclause.guards.nullity import (
    falsy,
    null,
    null_or_undefined,
    undefined_or_null_or_nan,
)
from guardclause.guards.numeric import negative_or_zero, out_of_range, zero
from guardclause.guards.structural import not_object

__all__ = [
    # Nullity
    "null_or_undefined",
    "null",
    "undefined_or_null_or_nan",
    "falsy",
    # Emptiness
    "null_or_empty",
    "null_or_whitespace",
    "empty_object",
    "empty_array",
    # Numeric
    "zero",
    "negative_or_zero",
    "out_of_range",
    # Predicates
    "expression",
    "expression_async",
    # Structural
    "not_object",
]
