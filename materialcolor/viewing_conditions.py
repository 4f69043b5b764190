"""CAM16 viewing conditions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from materialcolor.color_utils import WHITE_POINT_D65, lerp, y_from_lstar

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class ViewingConditions:
    """Precomputed parameters describing the environment a colour is seen in."""

    adapting_luminance: float = 0.0
    background_lstar: float = 0.0
    surround: float = 0.0
    discounting_illuminant: bool = False
    background_y_to_white_point_y: float = 0.0
    aw: float = 0.0
    nbb: float = 0.0
    ncb: float = 0.0
    c: float = 0.0
    n_c: float = 0.0
    fl: float = 0.0
    fl_root: float = 0.0
    z: float = 0.0
    white_point: Vec3 = (0.0, 0.0, 0.0)
    rgb_d: Vec3 = (0.0, 0.0, 0.0)


def create_viewing_conditions(
    white_point: Sequence[float],
    adapting_luminance: float,
    background_lstar: float,
    surround: float,
    discounting_illuminant: bool,
) -> ViewingConditions:
    """Compute viewing conditions from their physical description."""
    background_lstar_corrected = max(background_lstar, 30.0)
    wx, wy, wz = white_point
    rgb_w = (
        0.401288 * wx + 0.650173 * wy - 0.051461 * wz,
        -0.250268 * wx + 1.204414 * wy + 0.045854 * wz,
        -0.002079 * wx + 0.048952 * wy + 0.953127 * wz,
    )
    f = 0.8 + surround / 10.0
    c = lerp(0.59, 0.69, (f - 0.9) * 10.0) if f >= 0.9 else lerp(0.525, 0.59, (f - 0.8) * 10.0)
    if discounting_illuminant:
        d = 1.0
    else:
        d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
    d = min(1.0, max(0.0, d))
    nc = f
    rgb_d = tuple(d * (100.0 / w) + 1.0 - d for w in rgb_w)

    k = 1.0 / (5.0 * adapting_luminance + 1.0)
    k4 = k * k * k * k
    k4f = 1.0 - k4
    fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.pow(5.0 * adapting_luminance, 1.0 / 3.0)
    fl_root = math.pow(fl, 0.25)
    n = y_from_lstar(background_lstar_corrected) / wy
    z = 1.48 + math.sqrt(n)
    nbb = 0.725 / math.pow(n, 0.2)
    ncb = nbb
    factors = [math.pow(fl * dd * w / 100.0, 0.42) for dd, w in zip(rgb_d, rgb_w)]
    rgb_a = [400.0 * factor / (factor + 27.13) for factor in factors]
    aw = (40.0 * rgb_a[0] + 20.0 * rgb_a[1] + rgb_a[2]) / 20.0 * nbb
    return ViewingConditions(
        adapting_luminance=adapting_luminance,
        background_lstar=background_lstar_corrected,
        surround=surround,
        discounting_illuminant=bool(discounting_illuminant),
        background_y_to_white_point_y=n,
        aw=aw,
        nbb=nbb,
        ncb=ncb,
        c=c,
        n_c=nc,
        fl=fl,
        fl_root=fl_root,
        z=z,
        white_point=(float(wx), float(wy), float(wz)),
        rgb_d=(rgb_d[0], rgb_d[1], rgb_d[2]),
    )


def default_with_background_lstar(background_lstar: float) -> ViewingConditions:
    """Standard sRGB viewing conditions with a chosen background L*."""
    return create_viewing_conditions(
        WHITE_POINT_D65,
        200.0 / math.pi * y_from_lstar(50.0) / 100.0,
        background_lstar,
        2.0,
        False,
    )


def format_default_frame() -> str:
    """Render the default viewing conditions as a literal frame listing."""
    frame = default_with_background_lstar(50.0)
    return (
        "(Frame){%0.9f,\n %0.9f,\n %0.9f,\n %s\n, %0.9f,\n "
        "%0.9f,\n%0.9f,\n%0.9f,\n%0.9f,\n%0.9f,\n"
        "%0.9f,\n%0.9f,\n%0.9f,\n%0.9f,\n"
        "%0.9f,\n%0.9f\n};"
    ) % (
        frame.adapting_luminance,
        frame.background_lstar,
        frame.surround,
        "true" if frame.discounting_illuminant else "false",
        frame.background_y_to_white_point_y,
        frame.aw,
        frame.nbb,
        frame.ncb,
        frame.c,
        frame.n_c,
        frame.fl,
        frame.fl_root,
        frame.z,
        frame.rgb_d[0],
        frame.rgb_d[1],
        frame.rgb_d[2],
    )


DEFAULT_VIEWING_CONDITIONS = ViewingConditions(
    adapting_luminance=11.725676537,
    background_lstar=50.000000000,
    surround=2.000000000,
    discounting_illuminant=False,
    background_y_to_white_point_y=0.184186503,
    aw=29.981000900,
    nbb=1.016919255,
    ncb=1.016919255,
    c=0.689999998,
    n_c=1.000000000,
    fl=0.388481468,
    fl_root=0.789482653,
    z=1.909169555,
    white_point=(95.047, 100.0, 108.883),
    rgb_d=(1.021177769, 0.986307740, 0.933960497),
)