"""Tests for pitch values and scientific pitch notation."""

from hypothesis import given
from hypothesis import strategies as st

from pitchline.pitch import (
    Pitch,
    PitchClass,
    PitchLike,
    accidental_to_alt,
    accidentals,
    alt_to_accidental,
    alteration,
    as_pitch,
    chroma,
    format_pitch,
    height,
    letter,
    octave,
    parse_pitch,
    pitch_class,
)
from pitchline.types import Alteration, Step
from tests.pitchline.hypo import configure_hypo
from tests.pitchline.strategies import pitch_strategy

configure_hypo()


def test_parse_pitch_class() -> None:
    """Test that pitches without an octave parse as pitch classes."""
    assert parse_pitch("C") == PitchClass(Step(0), Alteration(0))
    assert parse_pitch("f#") == PitchClass(Step(3), Alteration(1))
    assert parse_pitch("Bb") == PitchClass(Step(6), Alteration(-1))


def test_parse_full_pitch() -> None:
    """Test pitches with an octave, including octave 0 and negative octaves."""
    assert parse_pitch("C4") == Pitch(Step(0), Alteration(0), 4)
    assert parse_pitch("C0") == Pitch(Step(0), Alteration(0), 0)
    assert parse_pitch("a#-1") == Pitch(Step(5), Alteration(1), -1)
    assert parse_pitch("Ebb3") == Pitch(Step(2), Alteration(-2), 3)


def test_parse_double_sharps() -> None:
    """Test that each x counts as two sharps."""
    assert parse_pitch("Cx") == PitchClass(Step(0), Alteration(2))
    assert parse_pitch("Gxx5") == Pitch(Step(4), Alteration(4), 5)
    assert accidental_to_alt("x") == accidental_to_alt("##") == 2
    assert accidental_to_alt("") == 0
    assert accidental_to_alt("bbb") == -3


def test_parse_octave_digits() -> None:
    """Test single-digit octaves and the wider multi-digit octaves."""
    assert parse_pitch("D9") == Pitch(Step(1), Alteration(0), 9)
    assert parse_pitch("D10") == Pitch(Step(1), Alteration(0), 10)
    assert parse_pitch("D-12") == Pitch(Step(1), Alteration(0), -12)
    assert parse_pitch("D-") is None


def test_parse_invalid() -> None:
    """Test that invalid input yields None instead of raising."""
    assert parse_pitch("H4") is None
    assert parse_pitch("Z3") is None
    assert parse_pitch("") is None
    assert parse_pitch("C#b4") is None
    assert parse_pitch(60) is None  # type: ignore[arg-type]
    assert parse_pitch(["C4"]) is None  # type: ignore[arg-type]
    assert parse_pitch({}) is None  # type: ignore[arg-type]


def test_parse_ascii_octave_only() -> None:
    """Test that octaves are written with ASCII digits."""
    assert parse_pitch("C\N{ARABIC-INDIC DIGIT THREE}") is None
    assert parse_pitch("C\N{SUPERSCRIPT TWO}") is None
    assert parse_pitch("C3") is not None


def test_format_pitch() -> None:
    """Test rendering pitch values."""
    assert format_pitch(Pitch(Step(0), Alteration(1), 4)) == "C#4"
    assert format_pitch(Pitch(Step(6), Alteration(-2), 0)) == "Bbb0"
    assert format_pitch(PitchClass(Step(4), Alteration(0))) == "G"
    assert format_pitch(PitchClass(Step(3), Alteration(2))) == "F##"


def test_pitch_class_and_pitch_differ() -> None:
    """Test that octave absence is kept apart from octave zero."""
    assert parse_pitch("C") != parse_pitch("C0")
    assert format_pitch(PitchClass(Step(0), Alteration(0))) == "C"
    assert pitch_class("C0") == parse_pitch("C")


def test_properties() -> None:
    """Test derived properties of pitches."""
    assert letter("c#4") == "C"
    assert accidentals("Ebb") == "bb"
    assert accidentals("Fx") == "##"
    assert alteration("Ab3") == -1
    assert octave("A4") == 4
    assert octave("A") is None
    assert octave("A", 0) == 0
    assert octave("H") is None
    assert letter("H") is None


def test_chroma_is_not_folded() -> None:
    """Test that chroma can leave the 0-11 range."""
    assert chroma("C") == 0
    assert chroma("E4") == 4
    assert chroma("B#") == 12
    assert chroma("Cb") == -1
    assert chroma("nope") is None


def test_height() -> None:
    """Test heights of full pitches and absence for pitch classes."""
    assert height("C0") == 0
    assert height("C4") == 48
    assert height("B#3") == 48
    assert height("C-1") == -12
    assert height("C") is None


def test_as_pitch_accepts_values() -> None:
    """Test that pitch values pass through and other values do not resolve."""
    p = Pitch(Step(1), Alteration(0), 2)
    assert as_pitch(p) is p
    assert as_pitch(3.5) is None


@given(pitch_strategy())
def test_pitch_round_trip(p: PitchLike) -> None:
    """Formatting then parsing gives back the same pitch."""
    assert parse_pitch(format_pitch(p)) == p


@given(st.integers(min_value=0, max_value=8))
def test_alteration_symmetry(n: int) -> None:
    """Sharps and flats for opposite alterations differ only in symbol."""
    sharps = alt_to_accidental(n)
    flats = alt_to_accidental(-n)
    assert len(sharps) == len(flats) == n
    assert sharps == "#" * n
    assert flats == "b" * n
