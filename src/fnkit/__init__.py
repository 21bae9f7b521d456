"""fnkit: pure functional helpers for lists and dicts.

Example:
    >>> import fnkit as fk
    >>> fk.partition([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4]]
    >>> fk.pipe([lambda x: x + 1, lambda x: x * 2])(5)
    12
"""

from fnkit.functional import *  # noqa: F401,F403
from fnkit.functional import __all__ as _functional_all

__version__ = "0.1.0"

__all__ = list(_functional_all)
