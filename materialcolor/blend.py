"""Blending colours in HCT and CAM16-UCS."""

from __future__ import annotations

from materialcolor.cam import cam_from_int, cam_from_ucs_and_viewing_conditions, int_from_cam
from materialcolor.color_utils import diff_degrees, rotation_direction, sanitize_degrees_double
from materialcolor.hct import Hct
from materialcolor.viewing_conditions import DEFAULT_VIEWING_CONDITIONS


def blend_harmonize(design_color: int, key_color: int) -> int:
    """Shift the hue of ``design_color`` towards ``key_color`` by at most 15 degrees."""
    from_hct = Hct.from_argb(design_color)
    to_hct = Hct.from_argb(key_color)
    difference_degrees = diff_degrees(from_hct.hue, to_hct.hue)
    rotation_degrees = min(difference_degrees * 0.5, 15.0)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation_degrees * rotation_direction(from_hct.hue, to_hct.hue)
    )
    from_hct.hue = output_hue
    return from_hct.to_int()


def blend_hct_hue(from_: int, to: int, amount: float) -> int:
    """Blend the hue of ``from_`` towards ``to``, keeping its chroma and tone."""
    ucs_hct = Hct.from_argb(blend_cam16_ucs(from_, to, amount))
    from_hct = Hct.from_argb(from_)
    from_hct.hue = ucs_hct.hue
    return from_hct.to_int()


def blend_cam16_ucs(from_: int, to: int, amount: float) -> int:
    """Interpolate linearly between two colours in CAM16-UCS."""
    from_cam = cam_from_int(from_)
    to_cam = cam_from_int(to)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    blended = cam_from_ucs_and_viewing_conditions(
        jstar, astar, bstar, DEFAULT_VIEWING_CONDITIONS
    )
    return int_from_cam(blended)