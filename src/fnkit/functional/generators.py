"""Sequence generators: integer ranges, repeated values and n-times calls."""

import builtins
import typing as tp

from fnkit.core.types import NON_ZERO_INT, T, validate_param

__all__ = ["range", "repeat", "times"]


def range(start: int, end: tp.Optional[int] = None, step: int = 1) -> tp.List[int]:
    """Build a list of integers.

    With ``end`` omitted the result is ``[0, start)``; otherwise it is
    ``[start, end)`` advancing by ``step``. A negative ``step`` produces a
    descending list, and a ``step`` pointing away from ``end`` produces an
    empty one.

    Args:
        start: Exclusive upper bound when ``end`` is omitted, otherwise the
            first value.
        end: Exclusive bound, or None to count from zero up to ``start``.
            Negative bounds are ordinary values, so ``range(2, -1, -1)`` is
            ``[2, 1, 0]``.
        step: Increment between consecutive values. Must not be zero.

    Returns:
        A new list of ints.

    Raises:
        ValueError: If ``step`` is zero.

    Example:
        >>> range(0, 10, 2)
        [0, 2, 4, 6, 8]
        >>> range(5)
        [0, 1, 2, 3, 4]
    """
    step = validate_param(NON_ZERO_INT, step, "range", "step")
    if end is None:
        return list(builtins.range(0, start, step))
    return list(builtins.range(start, end, step))


def repeat(value: T, n: int) -> tp.List[T]:
    """Return ``n`` references to the same ``value`` (no copies)."""
    return [value] * builtins.max(n, 0)


def times(n: int, fn: tp.Callable[[int], T]) -> tp.List[T]:
    """Collect ``fn(index)`` for every index in ``[0, n)``."""
    return [fn(index) for index in builtins.range(n)]
