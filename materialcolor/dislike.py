"""Detecting and fixing universally disliked colours.

Colour preference studies show a general distaste for dark yellow-greens,
associated with biological waste and rotting food.
"""

from __future__ import annotations

import math

from materialcolor.hct import Hct


def _round(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def is_disliked(hct: Hct) -> bool:
    """Whether the colour is a dark, non-neutral yellow-green."""
    hue_passes = 90.0 <= _round(hct.hue) <= 111.0
    chroma_passes = _round(hct.chroma) > 16.0
    tone_passes = _round(hct.tone) < 65.0
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Return the colour itself, or a lightened copy if it is disliked."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, 70.0)
    return hct