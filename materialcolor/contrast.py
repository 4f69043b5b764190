"""Contrast ratios between tones, and tones that reach a contrast ratio.

Contrast is computed from XYZ's Y; tone is L*, the perceptually linear form
of Y.
"""

from __future__ import annotations

from typing import Optional

from materialcolor.color_utils import lstar_from_y, y_from_lstar

# Largest shortfall from the requested ratio that is still accepted; keeps
# the resulting ratio rounding to the same tenth.
CONTRAST_RATIO_EPSILON = 0.04

# Margin added to returned tones so the ratio still holds after gamut mapping
# quantises the colour.
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_ys(y1: float, y2: float) -> float:
    """Contrast ratio of two relative luminances."""
    lighter_y = max(y1, y2)
    darker_y = y1 if lighter_y == y2 else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """Contrast ratio (1 to 21) of two tones, each clamped to 0..100."""
    tone_a = min(100.0, max(0.0, tone_a))
    tone_b = min(100.0, max(0.0, tone_b))
    return ratio_of_ys(y_from_lstar(tone_a), y_from_lstar(tone_b))


def lighter(tone: float, ratio: float) -> Optional[float]:
    """A tone >= ``tone`` reaching ``ratio`` with it, or None if there is none."""
    if tone < 0.0 or tone > 100.0:
        return None
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return None
    value = lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0 or value > 100:
        return None
    return value


def darker(tone: float, ratio: float) -> Optional[float]:
    """A tone <= ``tone`` reaching ``ratio`` with it, or None if there is none."""
    if tone < 0.0 or tone > 100.0:
        return None
    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return None
    value = lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0 or value > 100:
        return None
    return value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like :func:`lighter`, but 100 when the ratio cannot be reached."""
    result = lighter(tone, ratio)
    return 100.0 if result is None else result


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like :func:`darker`, but 0 when the ratio cannot be reached."""
    result = darker(tone, ratio)
    return 0.0 if result is None else result