"""Configuration for pitchline.

Only the tuning reference is configurable; the notation tables themselves are
fixed in pitchline.constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pitchline import constants
from pitchline.midi import tuning


@dataclass(frozen=True)
class NotationConfig:
    """Settings for frequency conversion."""

    reference_freq: float  # Frequency of A4 in Hz

    def to_freq(self, value: Any) -> Optional[float]:
        """Frequency of a pitch (or MIDI number) under this tuning."""
        return tuning(self.reference_freq)(value)


def init_config(
    reference_freq: float = constants.DEFAULT_REFERENCE_FREQ,
) -> NotationConfig:
    """Create the configuration, validating the tuning reference.

    Args:
        reference_freq: Frequency of A4 in Hz

    Raises:
        ValueError: If the reference is not a positive frequency
    """
    if reference_freq <= 0:
        raise ValueError(f"Invalid reference frequency: {reference_freq}")
    return NotationConfig(reference_freq=reference_freq)
