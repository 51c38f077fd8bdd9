"""Core types for pitchline."""

from __future__ import annotations

from enum import Enum, unique
from typing import NewType

Step = NewType("Step", int)
"""Letter or simple interval index (0-6)"""

Alteration = NewType("Alteration", int)
"""Signed count of sharps (+) or flats (-), or of augmentations/diminutions"""

Note = NewType("Note", int)
"""MIDI note number (0-127)"""

type Coord = tuple[int, ...]
"""Line-of-fifths vector: (fifths,), (fifths, octaves) or (fifths, octaves, direction)"""


@unique
class Direction(Enum):
    """Direction of an interval."""

    Up = 1
    """Ascending interval."""

    Down = -1
    """Descending interval."""

    @staticmethod
    def from_sign(sign: str) -> Direction:
        return Direction.Down if sign == "-" else Direction.Up
