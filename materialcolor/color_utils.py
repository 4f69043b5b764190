"""Colour-space helpers shared by the CAM16 and HCT code.

ARGB colours are plain integers of the form 0xAARRGGBB. Linear RGB values
are 3-tuples with components in the range 0..100.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]

WHITE_POINT_D65: Vec3 = (95.047, 100.0, 108.883)

_SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _clamp_int(low: int, high: int, value: int) -> int:
    return max(low, min(high, value))


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque red, green and blue components into an ARGB integer."""
    return 0xFF000000 | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def argb_from_linrgb(linrgb: Sequence[float]) -> int:
    """Convert linear RGB (0..100 per channel) to an opaque ARGB integer."""
    red, green, blue = (delinearized(component) for component in linrgb)
    return argb_from_rgb(red, green, blue)


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 0xFF


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 0xFF


def blue_from_argb(argb: int) -> int:
    return argb & 0xFF


def linearized(rgb_component: int) -> float:
    """Convert an sRGB channel (0..255) to a linear value (0..100)."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
    """Convert a linear channel (0..100) to an sRGB channel (0..255)."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return _clamp_int(0, 255, _round_half_away(value * 255.0))


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


def y_from_lstar(lstar: float) -> float:
    """Convert L* (0..100) to relative luminance Y (0..100)."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert relative luminance Y (0..100) to L* (0..100)."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


def lstar_from_argb(argb: int) -> float:
    """Return the L* of an ARGB colour."""
    red = linearized(red_from_argb(argb))
    green = linearized(green_from_argb(argb))
    blue = linearized(blue_from_argb(argb))
    kr, kg, kb = _SRGB_TO_XYZ[1]
    y = kr * red + kg * green + kb * blue
    return lstar_from_y(y)


def int_from_lstar(lstar: float) -> int:
    """Return the grey ARGB colour with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def sanitize_degrees_double(degrees: float) -> float:
    """Wrap an angle in degrees into the range [0, 360)."""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees


def diff_degrees(a: float, b: float) -> float:
    """Return the shortest distance in degrees between two angles."""
    return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(from_: float, to: float) -> float:
    """Return 1.0 to rotate counter-clockwise from ``from_`` to ``to``, else -1.0."""
    increasing_difference = sanitize_degrees_double(to - from_)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def signum(num: float) -> int:
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """Linearly interpolate between ``start`` and ``stop``."""
    return (1.0 - amount) * start + amount * stop


def matrix_multiply(vector: Sequence[float], matrix: Sequence[Sequence[float]]) -> Vec3:
    """Multiply a 3x3 matrix (given by rows) by a 3-vector."""
    a, b, c = (
        row[0] * vector[0] + row[1] * vector[1] + row[2] * vector[2]
        for row in matrix
    )
    return (a, b, c)