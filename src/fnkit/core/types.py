"""Reusable type definitions for the fnkit functional toolkit.

This module provides the type variables, callable aliases and constrained
scalar types shared by every operation in :mod:`fnkit.functional`.

Type Aliases:
    Predicate: A unary callable returning a truth value.
    KeyFn: A unary callable deriving a comparison or grouping key.
    PositiveInt: An integer strictly greater than zero (chunk sizes).
    NonNegativeInt: An integer greater than or equal to zero (flatten depth).
    NonZeroInt: Any integer except zero (range step).

Constrained aliases are validated through pydantic ``TypeAdapter`` objects
built once at import time, so the check itself holds no mutable state.
"""

import typing as tp

import annotated_types as at
import numpy as np
from pydantic import TypeAdapter, ValidationError

from fnkit.logger.logger import logger

__all__ = [
    "T",
    "U",
    "K",
    "V",
    "A",
    "Predicate",
    "KeyFn",
    "PositiveInt",
    "NonNegativeInt",
    "NonZeroInt",
    "POSITIVE_INT",
    "NON_NEGATIVE_INT",
    "NON_ZERO_INT",
    "validate_param",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
K = tp.TypeVar("K")
V = tp.TypeVar("V")
A = tp.TypeVar("A")

Predicate = tp.Callable[[T], tp.Any]
KeyFn = tp.Callable[[T], tp.Hashable]

# An integer strictly greater than zero
PositiveInt = tp.Annotated[int, at.Gt(0)]

# An integer greater than or equal to zero
NonNegativeInt = tp.Annotated[int, at.Ge(0)]


def _is_non_zero(value: int) -> bool:
    return value != 0


# Any integer except zero
NonZeroInt = tp.Annotated[int, at.Predicate(_is_non_zero)]

POSITIVE_INT: TypeAdapter[int] = TypeAdapter(PositiveInt)
NON_NEGATIVE_INT: TypeAdapter[int] = TypeAdapter(NonNegativeInt)
NON_ZERO_INT: TypeAdapter[int] = TypeAdapter(NonZeroInt)


def validate_param(adapter: TypeAdapter, value: tp.Any, func: str, name: str) -> int:
    """Validate a scalar parameter against a constrained type.

    Validation is strict: strings, floats and booleans are rejected instead
    of being coerced. NumPy integer scalars count as ints.

    Args:
        adapter: The ``TypeAdapter`` describing the accepted values.
        value: The value supplied by the caller.
        func: Name of the public function being called, used in the message.
        name: Name of the parameter being checked.

    Returns:
        int: The validated value.

    Raises:
        ValueError: If ``value`` does not satisfy the constraint.
    """
    if isinstance(value, np.integer):
        value = int(value)
    try:
        return adapter.validate_python(value, strict=True)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        message = f"{func}() got an invalid '{name}' ({value!r}): {reason}"
        logger.debug(message)
        raise ValueError(message) from e
