"""Functional primitives for fnkit.

This package provides the stateless list and mapping operations of the
toolkit. Every function is eager and side-effect-free, never mutates its
arguments, and can be chained with :func:`pipe` or :func:`compose`.
"""

from fnkit.functional.sequences import (
    map,
    map_indexed,
    for_each,
    reduce,
    reduce_indexed,
    flatten,
    flat_map,
    filter,
    reject,
    some,
    every,
    find,
    find_index,
    includes,
    first,
    last,
    nth,
    nth_last,
    reverse,
    sort,
    sort_by,
    take,
    drop,
    slice,
    take_while,
    drop_while,
    split,
    compact,
    distinct,
    distinct_by,
    group_by,
    partition,
    partition_all,
    count_by,
    union,
    intersection,
    difference,
    concat,
    zip,
    zip_with,
    zip_with_index,
)
from fnkit.functional.aggregation import sum, product, mean, min, max, min_by, max_by
from fnkit.functional.mappings import (
    map_kv,
    reduce_kv,
    filter_kv,
    pick,
    omit,
    keys,
    values,
    entries,
    from_entries,
    merge,
)
from fnkit.functional.generators import range, repeat, times
from fnkit.functional.combinators import identity, constant, tap, compose, pipe, partial
from fnkit.functional import (
    aggregation,
    combinators,
    generators,
    mappings,
    sequences,
)

__all__ = (
    sequences.__all__
    + aggregation.__all__
    + mappings.__all__
    + generators.__all__
    + combinators.__all__
)
