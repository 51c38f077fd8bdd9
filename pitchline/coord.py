"""Line-of-fifths coordinates for pitches and intervals.

Each letter sits at a fixed place on the line of fifths (F C G D A E B), and
a sharp moves seven fifths to the right. A pitch or interval becomes a vector
of fifths and octaves whose semitone size is 7 * fifths + 12 * octaves, so
transposition is plain vector addition.

Vector length tracks specificity:
    (fifths,)                     pitch class
    (fifths, octaves)             pitch or undirected interval
    (fifths, octaves, direction)  directed interval
"""

from __future__ import annotations

from typing import Optional

from pitchline.common import PartialMatchException
from pitchline.constants import BASES, FIFTHS_TO_STEPS, NUM_SEMITONES, NUM_STEPS
from pitchline.interval import DirectedInterval, Interval, IntervalLike
from pitchline.pitch import Pitch, PitchClass, PitchLike
from pitchline.types import Alteration, Coord, Direction, Step

# Octaves spanned by seven fifths (one sharp): 7 * 7 = 49 = 4 * 12 + 1
_OCTAVES_PER_SHARP = 4


def _fifths(step: int, alt: int) -> int:
    return BASES[step][0] + NUM_STEPS * alt


def _octaves(step: int, alt: int, octave: int) -> int:
    return octave + BASES[step][1] - _OCTAVES_PER_SHARP * alt


def _step_alt(fifths: int) -> tuple[Step, Alteration]:
    shifted = fifths + 1
    return Step(FIFTHS_TO_STEPS[shifted % NUM_STEPS]), Alteration(shifted // NUM_STEPS)


def _octave(step: Step, alt: Alteration, octaves: int) -> int:
    return octaves - BASES[step][1] + _OCTAVES_PER_SHARP * alt


def encode(value: PitchLike | IntervalLike) -> Coord:
    """Convert a pitch or interval value to its coordinate vector."""
    match value:
        case PitchClass(step, alt):
            return (_fifths(step, alt),)
        case Pitch(step, alt, octave):
            return (_fifths(step, alt), _octaves(step, alt, octave))
        case Interval(step, alt, octaves):
            return (_fifths(step, alt), _octaves(step, alt, octaves))
        case DirectedInterval(step, alt, octaves, direction):
            return (
                _fifths(step, alt),
                _octaves(step, alt, octaves),
                direction.value,
            )
        case _:
            raise PartialMatchException(value)


def decode_pitch(coord: Coord) -> Optional[PitchLike]:
    """Convert a one or two element vector back to a pitch value."""
    match coord:
        case (fifths,):
            step, alt = _step_alt(fifths)
            return PitchClass(step, alt)
        case (fifths, octaves):
            step, alt = _step_alt(fifths)
            return Pitch(step, alt, _octave(step, alt, octaves))
        case _:
            return None


def decode_interval(coord: Coord) -> Optional[IntervalLike]:
    """Convert a two or three element vector back to an interval value."""
    match coord:
        case (fifths, octaves):
            step, alt = _step_alt(fifths)
            return Interval(step, alt, _octave(step, alt, octaves))
        case (fifths, octaves, 1 | -1 as sign):
            step, alt = _step_alt(fifths)
            return DirectedInterval(
                step, alt, _octave(step, alt, octaves), Direction(sign)
            )
        case _:
            return None


def displacement(ivl: IntervalLike) -> Coord:
    """The vector an interval adds to a pitch: its coordinate signed by direction."""
    match ivl:
        case DirectedInterval(step, alt, octaves, direction):
            sign = direction.value
        case Interval(step, alt, octaves):
            sign = 1
        case _:
            raise PartialMatchException(ivl)
    return (sign * _fifths(step, alt), sign * _octaves(step, alt, octaves))


def semitones(coord: Coord) -> int:
    """Semitone size of the fifths and octaves components."""
    match coord:
        case (fifths, octaves, *_):
            return 7 * fifths + NUM_SEMITONES * octaves
        case _:
            raise PartialMatchException(coord)


def steps(coord: Coord) -> int:
    """Diatonic step size of the fifths and octaves components (a fifth is 4 steps)."""
    match coord:
        case (fifths, octaves, *_):
            return 4 * fifths + NUM_STEPS * octaves
        case _:
            raise PartialMatchException(coord)
