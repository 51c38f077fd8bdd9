"""Parsers for pitch and interval notation using Lark.

The parsers only recognize the surface syntax and hand back the raw tokens.
Turning tokens into pitch and interval values (and rejecting tokens that are
well-formed but musically impossible) happens in pitchline.pitch and
pitchline.interval.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

_LOG = logging.getLogger(__name__)

# Scientific pitch notation: letter, a run of one kind of accidental, octave.
# Octaves may have any number of digits.
PITCH_GRAMMAR = r"""
start: LETTER ACCIDENTALS? OCTAVE?

LETTER: /[A-Ga-g]/
ACCIDENTALS: /#+|b+|x+/
OCTAVE: /-?[0-9]+/
"""

# Shorthand interval notation, either number-first (3M, -5P, 4AA) or
# quality-first (M3, P-5, AA4). Quality-first accepts a narrower set of qualities.
INTERVAL_GRAMMAR = r"""
start: number_first | quality_first

number_first: SIGN? NUMBER NUM_QUALITY
quality_first: STR_QUALITY SIGN? NUMBER

SIGN: /[-+]/
NUMBER: /[0-9]+/
NUM_QUALITY: /d{1,4}|m|M|P|A{1,4}/
STR_QUALITY: /AA|A|P|M|m|dd|d/
"""


@dataclass(frozen=True)
class PitchTokens:
    """Raw pieces of a pitch string."""

    letter: str
    accidentals: str  # Empty when natural
    octave: Optional[int]  # None when no octave was written


@dataclass(frozen=True)
class IntervalTokens:
    """Raw pieces of an interval string."""

    sign: str  # "-", "+" or empty
    number: int
    quality: str


class PitchTransformer(Transformer):
    """Transform a parsed pitch into PitchTokens."""

    def start(self, items: list[Token]) -> PitchTokens:
        letter = ""
        accidentals = ""
        octave: Optional[int] = None
        for tok in items:
            if tok.type == "LETTER":
                letter = str(tok)
            elif tok.type == "ACCIDENTALS":
                accidentals = str(tok)
            elif tok.type == "OCTAVE":
                octave = int(str(tok))
        return PitchTokens(letter, accidentals, octave)


class IntervalTransformer(Transformer):
    """Transform a parsed interval into IntervalTokens."""

    def start(self, items: list[IntervalTokens]) -> IntervalTokens:
        return items[0]

    def number_first(self, items: list[Token]) -> IntervalTokens:
        return _interval_tokens(items)

    def quality_first(self, items: list[Token]) -> IntervalTokens:
        return _interval_tokens(items)


def _interval_tokens(items: list[Token]) -> IntervalTokens:
    sign = ""
    number = 0
    quality = ""
    for tok in items:
        if tok.type == "SIGN":
            sign = str(tok)
        elif tok.type == "NUMBER":
            number = int(str(tok))
        else:
            quality = str(tok)
    return IntervalTokens(sign, number, quality)


_PITCH_PARSER = Lark(PITCH_GRAMMAR)
_INTERVAL_PARSER = Lark(INTERVAL_GRAMMAR)


def parse_pitch_tokens(text: str) -> Optional[PitchTokens]:
    """Split a pitch string into its tokens.

    Args:
        text: A string like "C#4", "bb", "Fx-1"

    Returns:
        The tokens, or None if the string is not pitch notation

    Examples:
        >>> parse_pitch_tokens("C#4")
        PitchTokens(letter='C', accidentals='#', octave=4)

        >>> parse_pitch_tokens("H4") is None
        True
    """
    try:
        tree = _PITCH_PARSER.parse(text)
    except UnexpectedInput:
        _LOG.debug("Not a pitch: %r", text)
        return None
    return PitchTransformer().transform(tree)


def parse_interval_tokens(text: str) -> Optional[IntervalTokens]:
    """Split an interval string into its tokens.

    Args:
        text: A string like "3M", "M3", "-5P", "P-5"

    Returns:
        The tokens, or None if the string is not interval notation
    """
    try:
        tree = _INTERVAL_PARSER.parse(text)
    except UnexpectedInput:
        _LOG.debug("Not an interval: %r", text)
        return None
    return IntervalTransformer().transform(tree)
