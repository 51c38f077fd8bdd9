"""MIDI note numbers and equal-tempered frequencies.

MIDI numbering puts middle C (C4) at 60 and C-1 at 0.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pitchline.constants import (
    CHROMATIC_SPELLING,
    DEFAULT_REFERENCE_FREQ,
    LETTERS,
    MIDI_MAX,
    MIDI_MIN,
    MIDI_PASS_MAX,
    MIDI_PASS_MIN,
    NUM_SEMITONES,
    REFERENCE_MIDI,
)
from pitchline.pitch import (
    Pitch,
    PitchClass,
    accidental_to_alt,
    format_pitch,
    height,
)
from pitchline.types import Note, Step

# Pitch classes for each semitone above C, spelled with flats
_SPELLING = [
    PitchClass(Step(LETTERS.index(name[0])), accidental_to_alt(name[1:]))
    for name in CHROMATIC_SPELLING
]


def _as_midi_number(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def midi(value: Any) -> Optional[Note]:
    """Get the MIDI number of a pitch.

    Numbers (or digit strings) from 1 to 128 are taken as MIDI numbers already
    and returned unchanged.

    Args:
        value: A pitch string or value, or a MIDI number

    Returns:
        The MIDI number, or None for pitch classes and non-pitches

    Examples:
        >>> midi("C4")
        60
        >>> midi("C-1")
        0
        >>> midi(60)
        60
        >>> midi("C") is None
        True
    """
    num = _as_midi_number(value)
    if num is not None:
        return Note(num) if MIDI_PASS_MIN <= num <= MIDI_PASS_MAX else None
    h = height(value)
    return None if h is None else Note(h + NUM_SEMITONES)


def from_midi(note: int) -> Optional[Pitch]:
    """Spell a MIDI number as a pitch, using flats for black keys.

    Returns:
        The pitch, or None outside 0-127
    """
    if not MIDI_MIN <= note <= MIDI_MAX:
        return None
    pc = _SPELLING[note % NUM_SEMITONES]
    return Pitch(pc.step, pc.alteration, note // NUM_SEMITONES - 1)


def midi_to_name(note: int) -> Optional[str]:
    """Spell a MIDI number in scientific pitch notation ("C4" for 60)."""
    pitch = from_midi(note)
    return None if pitch is None else format_pitch(pitch)


def tuning(reference: float) -> Callable[[Any], Optional[float]]:
    """Build an equal-tempered frequency function.

    Args:
        reference: Frequency of A4 in Hz

    Returns:
        A function from pitch (or MIDI number) to frequency in Hz
    """

    def to_freq(value: Any) -> Optional[float]:
        m = midi(value)
        if m is None:
            return None
        return reference * 2 ** ((m - REFERENCE_MIDI) / NUM_SEMITONES)

    return to_freq


to_freq = tuning(DEFAULT_REFERENCE_FREQ)
"""Frequency of a pitch with A4 at 440 Hz."""
