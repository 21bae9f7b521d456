"""Function combinators.

Small higher-order helpers for building pipelines out of the other fnkit
operations without intermediate variables. Each combinator returns an
ordinary closure over its construction-time arguments.

Example:
    Chain sequence operations left to right::

        from fnkit import functional as fk

        evens_doubled = fk.pipe([
            lambda xs: fk.filter(xs, lambda x: x % 2 == 0),
            lambda xs: fk.map(xs, lambda x: x * 2),
        ])
        evens_doubled([1, 2, 3, 4])  # [4, 8]
"""

import typing as tp

import toolz

from fnkit.core.types import T

__all__ = ["identity", "constant", "tap", "compose", "pipe", "partial"]


def identity(value: T) -> T:
    return value


def constant(value: T) -> tp.Callable[..., T]:
    """Return a callable that ignores its arguments and always yields ``value``."""

    def _constant(*args: tp.Any, **kwargs: tp.Any) -> T:
        return value

    return _constant


def tap(value: T, fn: tp.Callable[[T], tp.Any]) -> T:
    """Call ``fn(value)`` for its side effect and return ``value`` unchanged."""
    fn(value)
    return value


def compose(fns: tp.Sequence[tp.Callable[[tp.Any], tp.Any]]) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose unary callables from right to left.

    ``compose([f, g])(x) == f(g(x))``. An empty list composes to ``identity``.
    """
    if not fns:
        return identity
    return toolz.compose(*fns)


def pipe(fns: tp.Sequence[tp.Callable[[tp.Any], tp.Any]]) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose unary callables from left to right.

    ``pipe([f, g])(x) == g(f(x))``. An empty list pipes to ``identity``.
    """
    if not fns:
        return identity
    return toolz.compose_left(*fns)


def partial(fn: tp.Callable[..., T], bound_args: tp.Sequence[tp.Any]) -> tp.Callable[..., T]:
    """Bind leading positional arguments.

    Args:
        fn: Callable to wrap.
        bound_args: Arguments placed before any supplied at call time.

    Returns:
        A callable forwarding ``(*bound_args, *args, **kwargs)`` to ``fn``.
    """
    bound = tuple(bound_args)

    def _partial(*args: tp.Any, **kwargs: tp.Any) -> T:
        return fn(*bound, *args, **kwargs)

    return _partial
