"""Transposition and distance between pitches."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from pitchline.coord import (
    decode_interval,
    decode_pitch,
    displacement,
    encode,
    semitones,
    steps,
)
from pitchline.interval import (
    DirectedInterval,
    IntervalLike,
    as_interval,
    format_interval,
)
from pitchline.pitch import PitchLike, as_pitch, format_pitch
from pitchline.types import Coord, Direction

_LOG = logging.getLogger(__name__)


def _resolve(a: Any, b: Any) -> Optional[tuple[PitchLike, IntervalLike]]:
    # Pitch first, then interval first
    for p, i in ((a, b), (b, a)):
        pitch = as_pitch(p)
        ivl = as_interval(i)
        if pitch is not None and ivl is not None:
            return pitch, ivl
    _LOG.debug("No pitch and interval pair in %r, %r", a, b)
    return None


def transpose_pitch(pitch: PitchLike, ivl: IntervalLike) -> Optional[PitchLike]:
    """Transpose a pitch value by an interval value.

    The sum is truncated to the shorter vector, so a pitch class stays a pitch
    class even when the interval spans octaves.

    Args:
        pitch: The pitch to move
        ivl: The interval to move by (descending intervals move down)

    Returns:
        The transposed pitch
    """
    summed: Coord = tuple(x + y for x, y in zip(encode(pitch), displacement(ivl)))
    return decode_pitch(summed)


def transpose(a: Any, b: Any) -> Optional[str]:
    """Transpose a pitch by an interval, given in either order.

    Args:
        a: A pitch or interval (string or value)
        b: An interval or pitch (string or value)

    Returns:
        The transposed pitch in scientific notation, or None if the arguments
        are not one pitch and one interval

    Examples:
        >>> transpose("C4", "M3")
        'E4'
        >>> transpose("M3", "C4")
        'E4'
        >>> transpose("E", "-2M")
        'D'
    """
    resolved = _resolve(a, b)
    if resolved is None:
        return None
    result = transpose_pitch(*resolved)
    return None if result is None else format_pitch(result)


def transposer(ivl: Any) -> Callable[[Any], Optional[str]]:
    """Bind an interval, returning a function that transposes pitches by it.

    Examples:
        >>> up_a_fifth = transposer("P5")
        >>> [up_a_fifth(p) for p in ["C4", "D", "Bb2"]]
        ['G4', 'A', 'F3']
    """

    def transpose_by(pitch: Any) -> Optional[str]:
        return transpose(pitch, ivl)

    return transpose_by


def distance(a: Any, b: Any) -> Optional[DirectedInterval]:
    """The interval from pitch a to pitch b.

    Full pitches give the exact directed interval. If either pitch is a pitch
    class, the result is the ascending simple interval from a to b, so a
    lowered unison between pitch classes is "1d" rather than "-1A".

    Returns:
        The interval, or None if either argument is not a pitch
    """
    pa = as_pitch(a)
    pb = as_pitch(b)
    if pa is None or pb is None:
        return None
    diff: Coord = tuple(y - x for x, y in zip(encode(pa), encode(pb)))
    if len(diff) == 1:
        # Pick the octave that puts the interval within one ascending octave
        fifths = diff[0]
        diff = (fifths, -((4 * fifths) // 7))
        descending = False
    else:
        step_count = steps(diff)
        descending = step_count < 0 or (step_count == 0 and semitones(diff) < 0)
    if descending:
        direction = Direction.Down
        diff = (-diff[0], -diff[1])
    else:
        direction = Direction.Up
    ivl = decode_interval(diff)
    if ivl is None:
        return None
    return DirectedInterval(ivl.step, ivl.alteration, ivl.octaves, direction)


def interval_between(a: Any, b: Any) -> Optional[str]:
    """The interval from pitch a to pitch b in number-first notation.

    Examples:
        >>> interval_between("C4", "E4")
        '3M'
        >>> interval_between("C4", "A3")
        '-3m'
    """
    ivl = distance(a, b)
    return None if ivl is None else format_interval(ivl)
