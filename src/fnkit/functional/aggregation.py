"""Aggregations over sequences.

This module reduces a sequence to a single scalar:
    - **sum / product**: Numeric folds that always return a ``float``
    - **mean**: Arithmetic mean, ``0.0`` for an empty sequence
    - **min / max**: Natural-order extremes
    - **min_by / max_by**: Extremes under a caller-supplied key

Numeric Contract:
    ``sum`` and ``product`` coerce every element to a 64-bit float through
    NumPy before folding, so the result is a ``float`` even when every input
    is an ``int`` and even for empty input (``sum([]) == 0.0``,
    ``product([]) == 1.0``). Booleans count as ``0.0``/``1.0``; anything that
    is not a real number (``None``, strings, complex) raises ``TypeError``.

Empty Input:
    ``min``, ``max``, ``min_by`` and ``max_by`` return ``None`` for an empty
    sequence instead of raising. On ties the first-encountered element wins.

Examples:
    >>> from fnkit.functional import aggregation as agg
    >>> agg.sum([1, 2, 3])
    6.0
    >>> agg.max_by(["bb", "a", "cc"], len)
    'bb'
"""

import builtins
import decimal
import numbers
import typing as tp

import numpy as np

from fnkit.core.types import T
from fnkit.logger.logger import logger

__all__ = [
    "sum",
    "product",
    "mean",
    "min",
    "max",
    "min_by",
    "max_by",
]


_REAL_TYPES = (numbers.Real, decimal.Decimal, np.bool_)


def _as_float_array(seq: tp.Iterable[tp.Any], func: str) -> np.ndarray:
    # None, strings and complex values are rejected before conversion.
    values = list(seq)
    for index, value in enumerate(values):
        if not isinstance(value, _REAL_TYPES):
            message = (
                f"{func}() requires real numbers, got {type(value).__name__} "
                f"{value!r} at index {index}"
            )
            logger.debug(message)
            raise TypeError(message)
    return np.fromiter(values, dtype=np.float64, count=len(values))


def sum(seq: tp.Sequence[tp.Any]) -> float:
    """Sum the elements as floats.

    Args:
        seq: Sequence of real numbers (ints, floats, bools, ``Decimal``,
            ``Fraction`` or NumPy scalars).

    Returns:
        The total as a ``float``; ``0.0`` for an empty sequence.

    Raises:
        TypeError: If an element is not a real number (``None``, strings,
            complex numbers ...).
    """
    return float(_as_float_array(seq, "sum").sum())


def product(seq: tp.Sequence[tp.Any]) -> float:
    """Multiply the elements as floats; ``1.0`` for an empty sequence."""
    return float(_as_float_array(seq, "product").prod())


def mean(seq: tp.Sequence[tp.Any]) -> float:
    """Arithmetic mean, ``sum / count``.

    Returns:
        The mean as a ``float``; ``0.0`` (not NaN) for an empty sequence.
    """
    values = _as_float_array(seq, "mean")
    if values.size == 0:
        return 0.0
    return float(values.sum() / values.size)


def min(seq: tp.Sequence[T]) -> tp.Optional[T]:
    """Smallest element, first one on ties, None when empty."""
    if len(seq) == 0:
        return None
    return builtins.min(seq)


def max(seq: tp.Sequence[T]) -> tp.Optional[T]:
    """Largest element, first one on ties, None when empty."""
    if len(seq) == 0:
        return None
    return builtins.max(seq)


def min_by(seq: tp.Sequence[T], key_fn: tp.Callable[[T], tp.Any]) -> tp.Optional[T]:
    """Element with the smallest ``key_fn`` value.

    ``key_fn`` is called once per element. Returns the first such element on
    ties, or None when ``seq`` is empty.
    """
    if len(seq) == 0:
        return None
    return builtins.min(seq, key=key_fn)


def max_by(seq: tp.Sequence[T], key_fn: tp.Callable[[T], tp.Any]) -> tp.Optional[T]:
    """Element with the largest ``key_fn`` value, first on ties, None when empty."""
    if len(seq) == 0:
        return None
    return builtins.max(seq, key=key_fn)
