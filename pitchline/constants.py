"""Constants for pitchline."""

from __future__ import annotations

# Natural letters in step order (C is step 0)
LETTERS = "CDEFGAB"

# Semitone offset of each natural letter above C
SEMITONES: list[int] = [0, 2, 4, 5, 7, 9, 11]

# Interval type of each simple interval step: perfectable or majorable
INTERVAL_TYPES = "PMMPPMM"

# Position of each step on the line of fifths and the octaves that position spans.
# Indexed by step: C D E F G A B
BASES: list[tuple[int, int]] = [
    (0, 0),
    (2, -1),
    (4, -2),
    (-1, 1),
    (1, 0),
    (3, -1),
    (5, -2),
]

# Steps in line-of-fifths order starting at F, indexed by (fifths + 1) mod 7
FIFTHS_TO_STEPS: list[int] = [3, 0, 4, 1, 5, 2, 6]

# Number of distinct letters and semitones per octave
NUM_STEPS = 7
NUM_SEMITONES = 12

# Longest run of augmentations or diminutions a quality may carry
MAX_QUALITY_RUN = 4

# Spelling used when converting MIDI numbers back to pitches
CHROMATIC_SPELLING: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Valid MIDI note numbers for conversion back to pitches
MIDI_MIN = 0
MIDI_MAX = 127

# Bare numbers in this range are taken as MIDI numbers already
MIDI_PASS_MIN = 1
MIDI_PASS_MAX = 128

# MIDI number of the tuning reference pitch (A4)
REFERENCE_MIDI = 69

# Default tuning reference frequency for A4, in Hz
DEFAULT_REFERENCE_FREQ = 440.0

DEFAULT_LOG_LEVEL = "INFO"
