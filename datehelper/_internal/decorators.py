"""Caching decorator for compiled patterns.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Cache a pure function's results by its (hashable) arguments.

    Pattern compilation depends only on the pattern text and the locale
    table, so each pair is compiled once per process. Concurrent first
    calls may both compute; they store equal values.

    The wrapper exposes ``_cache`` and ``_clear_cache`` for tests.

    Examples:
        >>> @memoize
        ... def square(n: int) -> int:
        ...     return n * n
        >>> square(4), square._cache
        (16, {((4,), ()): 16})
    """
    results: dict[tuple, T] = {}

    @functools.wraps(func)
    def cached(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        try:
            return results[key]
        except KeyError:
            value = results[key] = func(*args, **kwargs)
            return value

    cached._cache = results  # type: ignore[attr-defined]
    cached._clear_cache = results.clear  # type: ignore[attr-defined]
    return cached


__all__ = ["memoize"]
