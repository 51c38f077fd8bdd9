"""Common utilities for pitchline."""

from __future__ import annotations

from typing import Any


class PartialMatchException(Exception):
    def __init__(self, val: Any):
        super().__init__(f"Unmatched type: {type(val)}")
