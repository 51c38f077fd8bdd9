"""Pitch values and scientific pitch notation.

A pitch is either a PitchClass (letter and alteration only) or a Pitch (with
an octave). Octave-dependent properties such as height only exist for Pitch,
and a PitchClass formats without an octave.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pitchline.cache import memoized
from pitchline.common import PartialMatchException
from pitchline.constants import LETTERS, NUM_SEMITONES, SEMITONES
from pitchline.parser import parse_pitch_tokens
from pitchline.types import Alteration, Step


@dataclass(frozen=True)
class PitchClass:
    """A pitch without an octave, e.g. "C#"."""

    step: Step
    alteration: Alteration


@dataclass(frozen=True)
class Pitch:
    """A pitch bound to an octave, e.g. "C#4"."""

    step: Step
    alteration: Alteration
    octave: int


type PitchLike = PitchClass | Pitch


def accidental_to_alt(accidentals: str) -> Alteration:
    """Convert a run of accidentals to a signed alteration.

    Each "x" counts as two sharps. The run is negative iff it is made of flats.

    Examples:
        >>> accidental_to_alt("##")
        2
        >>> accidental_to_alt("x")
        2
        >>> accidental_to_alt("bbb")
        -3
    """
    expanded = accidentals.replace("x", "##")
    if expanded.startswith("b"):
        return Alteration(-len(expanded))
    return Alteration(len(expanded))


def alt_to_accidental(alt: int) -> str:
    """Render an alteration as repeated sharps or flats ("" for naturals)."""
    if alt < 0:
        return "b" * -alt
    return "#" * alt


@memoized
def parse_pitch(text: str) -> Optional[PitchLike]:
    """Parse scientific pitch notation.

    Args:
        text: A string like "C", "c#", "Bb3", "Fx-1"

    Returns:
        A Pitch if an octave is given, a PitchClass if not, or None if the
        string is not a pitch
    """
    tokens = parse_pitch_tokens(text) if isinstance(text, str) else None
    if tokens is None:
        return None
    step = Step(LETTERS.index(tokens.letter.upper()))
    alt = accidental_to_alt(tokens.accidentals)
    if tokens.octave is None:
        return PitchClass(step, alt)
    return Pitch(step, alt, tokens.octave)


def format_pitch(pitch: PitchLike) -> str:
    """Render a pitch value in scientific pitch notation."""
    match pitch:
        case Pitch(step, alt, n):
            return LETTERS[step] + alt_to_accidental(alt) + str(n)
        case PitchClass(step, alt):
            return LETTERS[step] + alt_to_accidental(alt)
        case _:
            raise PartialMatchException(pitch)


def as_pitch(value: Any) -> Optional[PitchLike]:
    """Resolve a string or pitch value to a pitch value (None if neither)."""
    if isinstance(value, (Pitch, PitchClass)):
        return value
    if isinstance(value, str):
        return parse_pitch(value)
    return None


def pitch_class(value: Any) -> Optional[PitchClass]:
    """Drop the octave of a pitch."""
    p = as_pitch(value)
    if p is None:
        return None
    return PitchClass(p.step, p.alteration)


def letter(value: Any) -> Optional[str]:
    p = as_pitch(value)
    return None if p is None else LETTERS[p.step]


def accidentals(value: Any) -> Optional[str]:
    p = as_pitch(value)
    return None if p is None else alt_to_accidental(p.alteration)


def alteration(value: Any) -> Optional[int]:
    p = as_pitch(value)
    return None if p is None else p.alteration


def octave(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Get the octave of a pitch.

    Args:
        value: A pitch string or value
        default: Returned for pitch classes

    Returns:
        The octave, the default for pitch classes, or None if value is not a pitch
    """
    match as_pitch(value):
        case Pitch(octave=n):
            return n
        case PitchClass():
            return default
        case _:
            return None


def chroma(value: Any) -> Optional[int]:
    """Semitones above the natural C of the same octave.

    The result is not folded into 0-11: "B#" gives 12 and "Cb" gives -1.
    """
    p = as_pitch(value)
    if p is None:
        return None
    return SEMITONES[p.step] + p.alteration


def height(value: Any) -> Optional[int]:
    """Absolute semitone height, with C0 at 0. None for pitch classes."""
    match as_pitch(value):
        case Pitch(step, alt, n):
            return SEMITONES[step] + alt + NUM_SEMITONES * n
        case _:
            return None
