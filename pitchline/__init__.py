"""Pitchline: pitch and interval notation with line-of-fifths arithmetic."""

from pitchline.collection import map_each, split
from pitchline.interval import (
    DirectedInterval,
    Interval,
    format_interval,
    parse_interval,
)
from pitchline.midi import from_midi, midi, to_freq, tuning
from pitchline.pitch import Pitch, PitchClass, format_pitch, parse_pitch
from pitchline.transpose import distance, interval_between, transpose, transposer
from pitchline.types import Direction

__all__ = [
    "parse_pitch",
    "format_pitch",
    "parse_interval",
    "format_interval",
    "transpose",
    "transposer",
    "distance",
    "interval_between",
    "midi",
    "from_midi",
    "to_freq",
    "tuning",
    "split",
    "map_each",
    "Pitch",
    "PitchClass",
    "Interval",
    "DirectedInterval",
    "Direction",
]
