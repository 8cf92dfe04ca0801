"""
Flat namespace of every guard, exposed as ``Guard.against``.

    from guardclause import Guard

    port = Guard.against.out_of_range(port, (1, 65535), "port")
"""

from guardclause.guards import (
    empty_array,
    empty_object,
    expression,
    expression_async,
    falsy,
    negative_or_zero,
    not_object,
    null,
    null_or_empty,
    null_or_undefined,
    null_or_whitespace,
    out_of_range,
    undefined_or_null_or_nan,
    zero,
)

__all__ = [
    "empty_array",
    "empty_object",
    "expression",
    "expression_async",
    "falsy",
    "negative_or_zero",
    "not_object",
    "null",
    "null_or_empty",
    "null_or_undefined",
    "null_or_whitespace",
    "out_of_range",
    "undefined_or_null_or_nan",
    "zero",
]
