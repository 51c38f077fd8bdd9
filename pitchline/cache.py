"""Memoizing cache for pure string parsers.

Each memoized parser owns a ParseCache. The cache is filled lazily on the
first parse of a given string and is never evicted, so every distinct input
is parsed at most once per cache (modulo a tolerated duplicate computation
when two threads race on the same new key).
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, MutableMapping, Optional

_LOG = logging.getLogger(__name__)


class Mutex[T]:
    """A thread-safe mutex wrapper that provides exclusive access to a value.

    Uses context manager protocol to automatically handle lock acquisition and release.
    """

    def __init__(self, value: T):
        self._lock = Lock()
        self._value = value

    def __enter__(self) -> T:
        self._lock.acquire()
        return self._value

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._lock.release()


class _Missing:
    pass


_MISSING = _Missing()


class ParseCache[V]:
    """A process-lifetime table from input string to parse result.

    The underlying mapping may be injected (e.g. a shared or pre-seeded dict);
    all access to it goes through a Mutex. Results are computed outside the
    lock and written first-writer-wins, so the stored value for a key never
    changes once set.
    """

    def __init__(self, table: Optional[MutableMapping[str, V]] = None) -> None:
        self._table: Mutex[MutableMapping[str, V]] = Mutex(
            table if table is not None else {}
        )

    def lookup(self, key: str, compute: Callable[[str], V]) -> V:
        """Return the cached result for key, computing and storing it on a miss.

        Args:
            key: The input string
            compute: Pure function producing the result for key

        Returns:
            The result stored for key
        """
        with self._table as table:
            found = table.get(key, _MISSING)
        if not isinstance(found, _Missing):
            return found
        _LOG.debug("Cache miss for %r", key)
        value = compute(key)
        with self._table as table:
            return table.setdefault(key, value)

    def contains(self, key: str) -> bool:
        with self._table as table:
            return key in table

    def size(self) -> int:
        with self._table as table:
            return len(table)


class Memoized[V]:
    """A pure string function paired with the cache that memoizes it."""

    def __init__(self, fn: Callable[[str], V], cache: ParseCache[V]) -> None:
        self._fn = fn
        self._cache = cache
        self.__doc__ = fn.__doc__
        self.__name__ = fn.__name__

    @property
    def cache(self) -> ParseCache[V]:
        return self._cache

    def __call__(self, text: str) -> V:
        # Only strings are cached; anything else goes straight to the function
        if not isinstance(text, str):
            return self._fn(text)
        return self._cache.lookup(text, self._fn)


def memoized_with[V](
    cache: ParseCache[V],
) -> Callable[[Callable[[str], V]], Memoized[V]]:
    """Decorator factory memoizing a parser in an explicit cache.

    Args:
        cache: The cache to fill

    Returns:
        A decorator wrapping a str -> V function
    """

    def decorate(fn: Callable[[str], V]) -> Memoized[V]:
        return Memoized(fn, cache)

    return decorate


def memoized[V](fn: Callable[[str], V]) -> Memoized[V]:
    """Decorator memoizing a parser in a fresh, empty cache."""
    return Memoized(fn, ParseCache())
