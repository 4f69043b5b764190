"""Values that vary with the requested contrast level."""

from __future__ import annotations

from dataclasses import dataclass

from materialcolor.color_utils import lerp


@dataclass(frozen=True)
class ContrastCurve:
    """A value given at contrast levels -1.0, 0.0, 0.5 and 1.0.

    Between those levels the value is interpolated linearly; outside them it
    is held at the nearest end. Usually a contrast ratio, from 1.0 to 21.0.
    """

    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        """Return the value at ``contrast_level`` (-1.0 lowest, 0.0 normal, 1.0 highest)."""
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return lerp(self.low, self.normal, contrast_level + 1.0)
        if contrast_level < 0.5:
            return lerp(self.normal, self.medium, contrast_level / 0.5)
        if contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high