"""Sequence operations.

This module provides the list-processing half of the toolkit: transformation,
search, positional access, ordering, slicing, partitioning, set-style
operations and zipping. Every function is eager and pure. It reads its input
sequence, never mutates it, and returns a freshly built ``list`` (or a scalar).

Operation Groups:
    - **Transformation**: ``map``, ``map_indexed``, ``for_each``, ``reduce``,
      ``reduce_indexed``, ``flatten``, ``flat_map``
    - **Search**: ``filter``, ``reject``, ``some``, ``every``, ``find``,
      ``find_index``, ``includes``
    - **Positional access**: ``first``, ``last``, ``nth``, ``nth_last``
    - **Ordering**: ``reverse``, ``sort``, ``sort_by``
    - **Slicing**: ``take``, ``drop``, ``slice``, ``take_while``, ``drop_while``
    - **Partitioning & grouping**: ``split``, ``compact``, ``distinct``,
      ``distinct_by``, ``group_by``, ``partition``, ``partition_all``,
      ``count_by``
    - **Set-style**: ``union``, ``intersection``, ``difference``, ``concat``
    - **Zipping**: ``zip``, ``zip_with``, ``zip_with_index``

Lookups that can come up empty (``find``, ``first``, ``nth`` ...) return
``None`` instead of raising. Misuse, such as a non-positive chunk size or a
second ``zip`` argument shorter than the first, raises immediately.

Note:
    Several names shadow Python builtins (``map``, ``filter``, ``slice``,
    ``zip``). Import the module or use qualified access to keep both around::

        from fnkit.functional import sequences as seq

        seq.map([1, 2, 3], lambda x: x * 2)
"""

import itertools
import numbers
import typing as tp

import more_itertools as mit
import numpy as np
import toolz

from fnkit.core.types import (
    NON_NEGATIVE_INT,
    POSITIVE_INT,
    KeyFn,
    Predicate,
    T,
    U,
    A,
    validate_param,
)
from fnkit.logger.logger import logger

__all__ = [
    "map",
    "map_indexed",
    "for_each",
    "reduce",
    "reduce_indexed",
    "flatten",
    "flat_map",
    "filter",
    "reject",
    "some",
    "every",
    "find",
    "find_index",
    "includes",
    "first",
    "last",
    "nth",
    "nth_last",
    "reverse",
    "sort",
    "sort_by",
    "take",
    "drop",
    "slice",
    "take_while",
    "drop_while",
    "split",
    "compact",
    "distinct",
    "distinct_by",
    "group_by",
    "partition",
    "partition_all",
    "count_by",
    "union",
    "intersection",
    "difference",
    "concat",
    "zip",
    "zip_with",
    "zip_with_index",
]

# Containers that flatten and flat_map treat as nested; strings stay whole.
_NESTED_TYPES = (list, tuple)


# =============================================================================
# Transformation & Iteration
# =============================================================================


def map(seq: tp.Sequence[T], fn: tp.Callable[[T], U]) -> tp.List[U]:
    """Apply ``fn`` to every element, preserving order.

    Args:
        seq: Input sequence.
        fn: Unary callable applied to each element.

    Returns:
        A new list of the same length as ``seq``.
    """
    return [fn(item) for item in seq]


def map_indexed(seq: tp.Sequence[T], fn: tp.Callable[[int, T], U]) -> tp.List[U]:
    """Apply ``fn(index, element)`` to every element.

    The result follows input order, so ``result[i] == fn(i, seq[i])``.

    Args:
        seq: Input sequence.
        fn: Binary callable receiving the zero-based index and the element.

    Returns:
        A new list of the same length as ``seq``.
    """
    return [fn(index, item) for index, item in enumerate(seq)]


def for_each(seq: tp.Sequence[T], fn: tp.Callable[[T], tp.Any]) -> None:
    """Call ``fn`` on every element for its side effects."""
    for item in seq:
        fn(item)


def reduce(seq: tp.Sequence[T], fn: tp.Callable[[T, A], A], initial: A) -> A:
    """Fold the sequence from left to right.

    The callback receives ``(element, accumulator)``; note that the
    accumulator is the *second* argument. Whatever the callback returns
    becomes the next accumulator.

    Args:
        seq: Input sequence.
        fn: Callable ``fn(element, accumulator) -> accumulator``.
        initial: Starting accumulator, returned as-is for an empty sequence.

    Returns:
        The final accumulator.

    Example:
        >>> reduce([1, 2, 3], lambda x, acc: acc + x, 0)
        6
    """
    accumulator = initial
    for item in seq:
        accumulator = fn(item, accumulator)
    return accumulator


def reduce_indexed(
    seq: tp.Sequence[T], fn: tp.Callable[[int, T, A], A], initial: A
) -> A:
    """Fold from left to right with ``fn(index, element, accumulator)``."""
    accumulator = initial
    for index, item in enumerate(seq):
        accumulator = fn(index, item, accumulator)
    return accumulator


def _flatten_into(out: tp.List[tp.Any], seq: tp.Iterable[tp.Any], depth: int) -> None:
    for item in seq:
        if depth > 0 and isinstance(item, _NESTED_TYPES):
            _flatten_into(out, item, depth - 1)
        else:
            out.append(item)


def flatten(seq: tp.Sequence[tp.Any], depth: int = 1) -> tp.Sequence[tp.Any]:
    """Inline nested lists and tuples up to ``depth`` levels.

    Args:
        seq: Input sequence, possibly containing nested lists or tuples.
        depth: Number of nesting levels to remove. The depth is never
            auto-detected; pass a larger value to flatten deeper structures.

    Returns:
        A new flattened list. With ``depth == 0`` the input object itself is
        returned without copying.

    Raises:
        ValueError: If ``depth`` is negative.

    Example:
        >>> flatten([1, [2, [3, [4]]]], depth=2)
        [1, 2, 3, [4]]
    """
    depth = validate_param(NON_NEGATIVE_INT, depth, "flatten", "depth")
    if depth == 0:
        return seq

    out: tp.List[tp.Any] = []
    _flatten_into(out, seq, depth)
    return out


def flat_map(seq: tp.Sequence[T], fn: tp.Callable[[T], tp.Any]) -> tp.List[tp.Any]:
    """Map ``fn`` over ``seq`` and splice list/tuple results one level deep.

    Scalar results are appended as they are.
    """
    out: tp.List[tp.Any] = []
    for item in seq:
        result = fn(item)
        if isinstance(result, _NESTED_TYPES):
            out.extend(result)
        else:
            out.append(result)
    return out


# =============================================================================
# Predicate-Based Search & Test
# =============================================================================


def filter(seq: tp.Sequence[T], pred: Predicate) -> tp.List[T]:
    """Keep the elements for which ``pred`` is truthy."""
    return [item for item in seq if pred(item)]


def reject(seq: tp.Sequence[T], pred: Predicate) -> tp.List[T]:
    """Keep the elements for which ``pred`` is falsy."""
    return [item for item in seq if not pred(item)]


def some(seq: tp.Sequence[T], pred: Predicate) -> bool:
    """Return True as soon as one element satisfies ``pred``."""
    return any(pred(item) for item in seq)


def every(seq: tp.Sequence[T], pred: Predicate) -> bool:
    """Return False as soon as one element fails ``pred``."""
    return all(pred(item) for item in seq)


def find(seq: tp.Sequence[T], pred: Predicate) -> tp.Optional[T]:
    """Return the first element satisfying ``pred``, or None."""
    for item in seq:
        if pred(item):
            return item
    return None


def find_index(seq: tp.Sequence[T], pred: Predicate) -> tp.Optional[int]:
    """Return the index of the first element satisfying ``pred``.

    Returns:
        The zero-based index, or None when nothing matches. None rather than
        ``-1`` keeps a legitimate index ``0`` distinguishable.
    """
    for index, item in enumerate(seq):
        if pred(item):
            return index
    return None


def includes(seq: tp.Sequence[T], value: tp.Any) -> bool:
    """Return True if any element equals ``value``."""
    return any(item == value for item in seq)


# =============================================================================
# Positional Access
# =============================================================================


def first(seq: tp.Sequence[T]) -> tp.Optional[T]:
    return seq[0] if len(seq) > 0 else None


def last(seq: tp.Sequence[T]) -> tp.Optional[T]:
    return seq[-1] if len(seq) > 0 else None


def nth(seq: tp.Sequence[T], index: int) -> tp.Optional[T]:
    """Return ``seq[index]``, or None if ``index`` is negative or past the end."""
    if 0 <= index < len(seq):
        return seq[index]
    return None


def nth_last(seq: tp.Sequence[T], index: int) -> tp.Optional[T]:
    """Return the element ``index`` positions from the end (0 is the last)."""
    if 0 <= index < len(seq):
        return seq[len(seq) - 1 - index]
    return None


# =============================================================================
# Sorting & Ordering
# =============================================================================


def reverse(seq: tp.Sequence[T]) -> tp.List[T]:
    return list(reversed(seq))


def sort(seq: tp.Sequence[T]) -> tp.List[T]:
    """Return a new list in natural ascending order.

    Raises:
        TypeError: If the elements have no mutual ordering (e.g. ``[1, "a"]``).
    """
    return sorted(seq)


def sort_by(seq: tp.Sequence[T], key_fn: tp.Callable[[T], tp.Any]) -> tp.List[T]:
    """Stable sort by ``key_fn``.

    Each key is computed exactly once per element. Elements with equal keys
    keep their relative input order.
    """
    return sorted(seq, key=key_fn)


# =============================================================================
# Slicing
# =============================================================================


def take(seq: tp.Sequence[T], n: int) -> tp.List[T]:
    """Return the first ``n`` elements (none when ``n <= 0``)."""
    return list(seq[: max(n, 0)])


def drop(seq: tp.Sequence[T], n: int) -> tp.List[T]:
    """Return everything after the first ``n`` elements."""
    return list(seq[max(n, 0) :])


def slice(seq: tp.Sequence[T], start: int, end: tp.Optional[int] = -1) -> tp.List[T]:
    """Return the half-open range ``[start, end)``.

    Args:
        seq: Input sequence.
        start: First index included.
        end: First index excluded. ``-1`` (the default) or None means
            "through the last element"; any other negative value counts from
            the end as in regular Python slicing.

    Returns:
        A new list.
    """
    if end is None or end == -1:
        return list(seq[start:])
    return list(seq[start:end])


def take_while(seq: tp.Sequence[T], pred: Predicate) -> tp.List[T]:
    """Return the leading run of elements satisfying ``pred``."""
    return list(itertools.takewhile(pred, seq))


def drop_while(seq: tp.Sequence[T], pred: Predicate) -> tp.List[T]:
    """Return everything from the first element failing ``pred`` onward."""
    return list(itertools.dropwhile(pred, seq))


# =============================================================================
# Partitioning, Grouping & Deduplication
# =============================================================================


def split(seq: tp.Sequence[T], pred: Predicate) -> tp.Tuple[tp.List[T], tp.List[T]]:
    """Split into ``(matching, non_matching)``, each in input order.

    ``pred`` is called exactly once per element.
    """
    non_matching, matching = mit.partition(pred, seq)
    return list(matching), list(non_matching)


def _is_falsy(value: tp.Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, np.bool_)):
        return not value
    if isinstance(value, str):
        return value == ""
    if isinstance(value, numbers.Number):
        return value == 0
    return False


def compact(seq: tp.Sequence[T]) -> tp.List[T]:
    """Drop falsy elements.

    Falsy means exactly: ``None``, ``False`` (NumPy ``False_`` included),
    numeric zero of any numeric type (``0``, ``0.0``, ``0j``, ``Decimal(0)``,
    NumPy zero scalars ...) and the empty string. Empty containers such as
    ``[]`` or ``{}`` are kept.
    """
    return [item for item in seq if not _is_falsy(item)]


def distinct(seq: tp.Sequence[T]) -> tp.List[T]:
    """Remove duplicates, keeping the first occurrence of each value.

    Equality is structural. Hashable values are compared by hash and ``==``,
    unhashable values (lists, dicts) by ``==`` alone.

    Example:
        >>> distinct([1, 2, 2, 3, 1])
        [1, 2, 3]
    """
    return _unique(seq)


def distinct_by(seq: tp.Sequence[T], key_fn: tp.Callable[[T], tp.Any]) -> tp.List[T]:
    """Remove elements whose ``key_fn`` value was already seen."""
    return _unique(seq, key_fn)


def group_by(seq: tp.Sequence[T], key_fn: KeyFn) -> tp.Dict[tp.Hashable, tp.List[T]]:
    """Group elements by ``key_fn``.

    Returns:
        A dict from key to the list of elements with that key. Keys appear in
        first-seen order, and elements keep their input order within a group.

    Example:
        >>> group_by([1, 2, 3, 4], lambda x: x % 2 == 0)
        {False: [1, 3], True: [2, 4]}
    """
    return toolz.groupby(key_fn, seq)


def partition(seq: tp.Sequence[T], size: int) -> tp.List[tp.List[T]]:
    """Cut into chunks of ``size``, dropping a trailing partial chunk.

    The number of chunks is ``len(seq) // size``.

    Raises:
        ValueError: If ``size`` is not a positive integer.
    """
    size = validate_param(POSITIVE_INT, size, "partition", "size")
    return [list(chunk) for chunk in toolz.partition(size, seq)]


def partition_all(seq: tp.Sequence[T], size: int) -> tp.List[tp.List[T]]:
    """Cut into chunks of ``size``, keeping a trailing partial chunk.

    Raises:
        ValueError: If ``size`` is not a positive integer.
    """
    size = validate_param(POSITIVE_INT, size, "partition_all", "size")
    return [list(chunk) for chunk in toolz.partition_all(size, seq)]


def count_by(seq: tp.Sequence[T], key_fn: KeyFn) -> tp.Dict[tp.Hashable, int]:
    """Count elements per ``key_fn`` value, keys in first-seen order."""
    return toolz.countby(key_fn, seq)


# =============================================================================
# Set-Style Operations
# =============================================================================


def _membership(items: tp.Iterable[tp.Any]) -> tp.Callable[[tp.Any], bool]:
    # Hash lookup when possible, linear scan for unhashable members.
    items = list(items)
    try:
        lookup = set(items)
    except TypeError:
        return items.__contains__

    def contains(value: tp.Any) -> bool:
        try:
            return value in lookup
        except TypeError:
            return value in items

    return contains


def _unique(
    items: tp.Iterable[T], key_fn: tp.Optional[tp.Callable[[T], tp.Any]] = None
) -> tp.List[T]:
    # First occurrence wins. Hashable keys are tracked in a set, unhashable
    # keys (lists, dicts) in a list compared with ==.
    seen_hashable: tp.Set[tp.Any] = set()
    seen_unhashable: tp.List[tp.Any] = []
    out: tp.List[T] = []
    for item in items:
        key = item if key_fn is None else key_fn(item)
        try:
            if key in seen_hashable:
                continue
            seen_hashable.add(key)
        except TypeError:
            if key in seen_unhashable:
                continue
            seen_unhashable.append(key)
        out.append(item)
    return out


def union(a: tp.Sequence[T], b: tp.Sequence[T]) -> tp.List[T]:
    """Deduplicated concatenation in first-seen order across both inputs."""
    return _unique(itertools.chain(a, b))


def intersection(a: tp.Sequence[T], b: tp.Sequence[T]) -> tp.List[T]:
    """Elements of ``a`` also present in ``b``, deduplicated, in ``a``'s order."""
    in_b = _membership(b)
    return _unique(item for item in a if in_b(item))


def difference(a: tp.Sequence[T], b: tp.Sequence[T]) -> tp.List[T]:
    """Elements of ``a`` absent from ``b``, in ``a``'s order.

    Duplicates within ``a`` are kept.
    """
    in_b = _membership(b)
    return [item for item in a if not in_b(item)]


def concat(a: tp.Sequence[T], b: tp.Sequence[T]) -> tp.List[T]:
    return list(itertools.chain(a, b))


# =============================================================================
# Zipping
# =============================================================================


def _check_zip_lengths(func: str, a: tp.Sequence[tp.Any], b: tp.Sequence[tp.Any]) -> None:
    if len(b) < len(a):
        message = (
            f"{func}() requires the second sequence to be at least as long as the "
            f"first, got lengths {len(a)} and {len(b)}"
        )
        logger.debug(message)
        raise IndexError(message)


def zip(a: tp.Sequence[T], b: tp.Sequence[U]) -> tp.List[tp.Tuple[T, U]]:
    """Pair elements by index, driven by the length of ``a``.

    Extra elements at the end of ``b`` are ignored.

    Raises:
        IndexError: If ``b`` is shorter than ``a``.
    """
    _check_zip_lengths("zip", a, b)
    return [(a[index], b[index]) for index in range(len(a))]


def zip_with(
    a: tp.Sequence[T], b: tp.Sequence[U], fn: tp.Callable[[T, U], tp.Any]
) -> tp.List[tp.Any]:
    """Combine elements by index with ``fn(a[i], b[i])``.

    The lengths are checked before ``fn`` is ever called.

    Raises:
        IndexError: If ``b`` is shorter than ``a``.
    """
    _check_zip_lengths("zip_with", a, b)
    return [fn(a[index], b[index]) for index in range(len(a))]


def zip_with_index(seq: tp.Sequence[T]) -> tp.List[tp.Tuple[int, T]]:
    return list(enumerate(seq))
