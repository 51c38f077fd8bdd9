"""Interval values and shorthand interval notation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pitchline.cache import memoized
from pitchline.common import PartialMatchException
from pitchline.constants import (
    INTERVAL_TYPES,
    MAX_QUALITY_RUN,
    NUM_SEMITONES,
    NUM_STEPS,
    SEMITONES,
)
from pitchline.parser import parse_interval_tokens
from pitchline.types import Alteration, Direction, Step


@dataclass(frozen=True)
class Interval:
    """An undirected interval: simple step, alteration and extra octaves."""

    step: Step  # 0 = unison ... 6 = seventh
    alteration: Alteration  # Relative to perfect or major
    octaves: int  # Extra octaves beyond the simple interval


@dataclass(frozen=True)
class DirectedInterval:
    """An interval with a direction, as written in notation ("M3", "-5P")."""

    step: Step
    alteration: Alteration
    octaves: int
    direction: Direction


type IntervalLike = Interval | DirectedInterval


def step_type(step: int) -> str:
    """Interval type of a simple step: "P" (perfectable) or "M" (majorable)."""
    return INTERVAL_TYPES[step]


def quality_to_alteration(itype: str, quality: str) -> Optional[Alteration]:
    """Convert a quality token to an alteration for the given interval type.

    Diminished majorable intervals start one below minor, so "d" is -2 for
    them but -1 for perfectable ones.

    Args:
        itype: "P" or "M"
        quality: One of "P", "M", "m", or a run of "A" or "d"

    Returns:
        The alteration, or None if the quality does not apply to the type
    """
    if quality in ("P", "M"):
        return Alteration(0) if quality == itype else None
    if quality == "m":
        return Alteration(-1) if itype == "M" else None
    if quality and quality == "A" * len(quality):
        return Alteration(len(quality))
    if quality and quality == "d" * len(quality):
        if itype == "P":
            return Alteration(-len(quality))
        return Alteration(-len(quality) - 1)
    return None


def alteration_to_quality(itype: str, alt: int) -> Optional[str]:
    """Inverse of quality_to_alteration.

    Returns None when the alteration needs more than four "A" or "d".
    """
    if alt == 0:
        return itype
    if alt == -1 and itype == "M":
        return "m"
    if alt > 0:
        symbol, run = "A", alt
    else:
        symbol, run = "d", -alt if itype == "P" else -alt - 1
    if run > MAX_QUALITY_RUN:
        return None
    return symbol * run


@memoized
def parse_interval(text: str) -> Optional[DirectedInterval]:
    """Parse shorthand interval notation.

    Both number-first ("3M", "-5P") and quality-first ("M3", "P-5") forms are
    accepted. A missing sign means ascending.

    Args:
        text: The interval string

    Returns:
        The interval, or None if the string is not an interval or names an
        impossible one (e.g. "P3", "M5", "0P")
    """
    tokens = parse_interval_tokens(text) if isinstance(text, str) else None
    if tokens is None or tokens.number < 1:
        return None
    step = Step((tokens.number - 1) % NUM_STEPS)
    octaves = (tokens.number - 1) // NUM_STEPS
    alt = quality_to_alteration(step_type(step), tokens.quality)
    if alt is None:
        return None
    return DirectedInterval(step, alt, octaves, Direction.from_sign(tokens.sign))


def format_interval(ivl: IntervalLike) -> Optional[str]:
    """Render an interval in number-first notation ("3M", "-5P").

    Returns:
        The string, or None if the alteration has no quality name
    """
    match ivl:
        case DirectedInterval(direction=Direction.Down):
            sign = "-"
        case DirectedInterval() | Interval():
            sign = ""
        case _:
            raise PartialMatchException(ivl)
    name = alteration_to_quality(step_type(ivl.step), ivl.alteration)
    if name is None:
        return None
    return f"{sign}{ivl.step + 1 + NUM_STEPS * ivl.octaves}{name}"


def as_interval(value: Any) -> Optional[IntervalLike]:
    """Resolve a string or interval value to an interval value (None if neither)."""
    if isinstance(value, (Interval, DirectedInterval)):
        return value
    if isinstance(value, str):
        return parse_interval(value)
    return None


def number(value: Any) -> Optional[int]:
    """Interval number counting extra octaves (a tenth is 10)."""
    ivl = as_interval(value)
    return None if ivl is None else ivl.step + 1 + NUM_STEPS * ivl.octaves


def interval_type(value: Any) -> Optional[str]:
    ivl = as_interval(value)
    return None if ivl is None else step_type(ivl.step)


def quality(value: Any) -> Optional[str]:
    ivl = as_interval(value)
    if ivl is None:
        return None
    return alteration_to_quality(step_type(ivl.step), ivl.alteration)


def direction(value: Any) -> Optional[int]:
    """1 for ascending, -1 for descending. Undirected intervals count as ascending."""
    match as_interval(value):
        case DirectedInterval(direction=d):
            return d.value
        case Interval():
            return Direction.Up.value
        case _:
            return None


def semitones(value: Any) -> Optional[int]:
    """Signed size of the interval in semitones."""
    ivl = as_interval(value)
    if ivl is None:
        return None
    size = SEMITONES[ivl.step] + ivl.alteration + NUM_SEMITONES * ivl.octaves
    if isinstance(ivl, DirectedInterval):
        return size * ivl.direction.value
    return size


def magnitude(value: Any) -> Optional[Interval]:
    """Drop the direction of an interval."""
    ivl = as_interval(value)
    if ivl is None:
        return None
    return Interval(ivl.step, ivl.alteration, ivl.octaves)


def simplify(value: Any) -> Optional[IntervalLike]:
    """Drop the extra octaves of an interval, keeping its direction."""
    match as_interval(value):
        case DirectedInterval(step, alt, _, d):
            return DirectedInterval(step, alt, 0, d)
        case Interval(step, alt, _):
            return Interval(step, alt, 0)
        case _:
            return None


def invert(value: Any) -> Optional[IntervalLike]:
    """Invert the simple part of an interval (M3 -> m6, A4 -> d5, P1 -> P1).

    Extra octaves and direction are kept.
    """
    ivl = as_interval(value)
    if ivl is None:
        return None
    step = Step((NUM_STEPS - ivl.step) % NUM_STEPS)
    if step_type(step) == "P":
        alt = Alteration(-ivl.alteration)
    else:
        alt = Alteration(-ivl.alteration - 1)
    match ivl:
        case DirectedInterval(_, _, octaves, d):
            return DirectedInterval(step, alt, octaves, d)
        case Interval(_, _, octaves):
            return Interval(step, alt, octaves)
        case _:
            raise PartialMatchException(ivl)
