"""Hypothesis strategies for pitch and interval values."""

from typing import Optional

from hypothesis import strategies as st

from pitchline.interval import DirectedInterval, Interval, step_type
from pitchline.pitch import Pitch, PitchClass, PitchLike
from pitchline.types import Alteration, Direction, Step


@st.composite
def pitch_strategy(
    draw: st.DrawFn, max_alt: int = 4, allow_class: bool = True
) -> PitchLike:
    step = Step(draw(st.integers(min_value=0, max_value=6)))
    alt = Alteration(draw(st.integers(min_value=-max_alt, max_value=max_alt)))
    octave_strategy = st.integers(min_value=-2, max_value=12)
    octave: Optional[int] = draw(
        st.one_of(st.none(), octave_strategy) if allow_class else octave_strategy
    )
    if octave is None:
        return PitchClass(step, alt)
    return Pitch(step, alt, octave)


@st.composite
def interval_strategy(draw: st.DrawFn) -> DirectedInterval:
    """Directed intervals whose quality can be written down."""
    step = Step(draw(st.integers(min_value=0, max_value=6)))
    lowest = -4 if step_type(step) == "P" else -5
    alt = Alteration(draw(st.integers(min_value=lowest, max_value=4)))
    octaves = draw(st.integers(min_value=0, max_value=3))
    direction = draw(st.sampled_from([Direction.Up, Direction.Down]))
    return DirectedInterval(step, alt, octaves, direction)


@st.composite
def undirected_interval_strategy(draw: st.DrawFn) -> Interval:
    ivl = draw(interval_strategy())
    return Interval(ivl.step, ivl.alteration, ivl.octaves)
