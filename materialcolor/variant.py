"""Scheme variants: the styles a dynamic colour scheme can be built in."""

from __future__ import annotations

import enum
from typing import Any


class Variant(enum.Enum):
    """The style of a dynamic colour scheme."""

    MONOCHROME = "MONOCHROME"
    NEUTRAL = "NEUTRAL"
    TONAL_SPOT = "TONALSPOT"
    VIBRANT = "VIBRANT"
    EXPRESSIVE = "EXPRESSIVE"
    FIDELITY = "FIDELITY"
    CONTENT = "CONTENT"
    RAINBOW = "RAINBOW"
    FRUIT_SALAD = "FRUITSALAD"

    def __str__(self) -> str:
        return self.value


def variant_to_string(variant: Any) -> str:
    """The upper-case name of ``variant``, or "UNKNOWN" if it is not a variant."""
    if isinstance(variant, Variant):
        return variant.value
    return "UNKNOWN"