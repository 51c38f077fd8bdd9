"""Helpers for lists of pitches or intervals written as one string."""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable

_SEPARATORS = re.compile(r"[\s,|]+")


def split(source: str | Iterable[Any]) -> list[Any]:
    """Split a string on whitespace, commas and bars.

    Non-string iterables are returned as a list unchanged.

    Examples:
        >>> split("C4 E4, G4 | B4")
        ['C4', 'E4', 'G4', 'B4']
    """
    if isinstance(source, str):
        return [piece for piece in _SEPARATORS.split(source) if piece]
    return list(source)


def map_each[A, B](fn: Callable[[A], B], source: str | Iterable[A]) -> list[B]:
    """Apply fn to every element of split(source).

    Examples:
        >>> map_each(str.lower, "C D E")
        ['c', 'd', 'e']
    """
    return [fn(item) for item in split(source)]
