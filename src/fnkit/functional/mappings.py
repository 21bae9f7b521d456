"""Mapping operations.

Functions in this module read key/value mappings and always build a new
``dict``; the input mapping is never modified. Enumeration follows the
mapping's own iteration order, which for ``dict`` is insertion order, and the
results keep that order unless a function documents otherwise (``pick``
follows the order of the requested keys).
"""

import typing as tp

import toolz

from fnkit.core.types import A, K, T, U, V

__all__ = [
    "map_kv",
    "reduce_kv",
    "filter_kv",
    "pick",
    "omit",
    "keys",
    "values",
    "entries",
    "from_entries",
    "merge",
]


def map_kv(mapping: tp.Mapping[K, V], fn: tp.Callable[[K, V], U]) -> tp.Dict[K, U]:
    """Replace every value with ``fn(key, value)``, keeping the keys.

    Args:
        mapping: Input mapping.
        fn: Binary callable receiving the key and the current value.

    Returns:
        A new dict with the same keys in the same order.
    """
    return toolz.itemmap(lambda item: (item[0], fn(item[0], item[1])), mapping)


def reduce_kv(
    mapping: tp.Mapping[K, V], fn: tp.Callable[[K, V, A], A], initial: A
) -> A:
    """Fold over the entries with ``fn(key, value, accumulator)``.

    Entries are visited in enumeration order. ``initial`` is returned as-is
    for an empty mapping.
    """
    accumulator = initial
    for key, value in mapping.items():
        accumulator = fn(key, value, accumulator)
    return accumulator


def filter_kv(
    mapping: tp.Mapping[K, V], pred: tp.Callable[[K, V], tp.Any]
) -> tp.Dict[K, V]:
    """Keep the entries for which ``pred(key, value)`` is truthy."""
    return toolz.itemfilter(lambda item: pred(item[0], item[1]), mapping)


def pick(mapping: tp.Mapping[K, V], keys: tp.Iterable[K]) -> tp.Dict[K, V]:
    """Project onto ``keys``.

    Requested keys missing from ``mapping`` are skipped. The result follows
    the order of ``keys``.
    """
    return {key: mapping[key] for key in keys if key in mapping}


def omit(mapping: tp.Mapping[K, V], keys: tp.Iterable[K]) -> tp.Dict[K, V]:
    """Drop ``keys`` from the mapping, keeping the rest in mapping order."""
    excluded = set(keys)
    return toolz.keyfilter(lambda key: key not in excluded, mapping)


def keys(mapping: tp.Mapping[K, tp.Any]) -> tp.List[K]:
    return list(mapping.keys())


def values(mapping: tp.Mapping[tp.Any, V]) -> tp.List[V]:
    return list(mapping.values())


def entries(mapping: tp.Mapping[K, V]) -> tp.List[tp.Tuple[K, V]]:
    """Return the ``(key, value)`` pairs as a list of tuples."""
    return list(mapping.items())


def from_entries(pairs: tp.Iterable[tp.Tuple[K, V]]) -> tp.Dict[K, V]:
    """Build a dict from ``(key, value)`` pairs.

    A later pair with a duplicate key overwrites the earlier value. The key
    keeps the position of its first occurrence.
    """
    return dict(pairs)


def merge(a: tp.Mapping[K, V], b: tp.Mapping[K, T]) -> tp.Dict[K, tp.Union[V, T]]:
    """Shallow merge into a new dict; values from ``b`` win on conflicts."""
    return toolz.merge(a, b)
