"""CAM16 colour appearance model."""

from __future__ import annotations

import math
from dataclasses import dataclass

from materialcolor.color_utils import (
    argb_from_rgb,
    blue_from_argb,
    delinearized,
    green_from_argb,
    linearized,
    red_from_argb,
    sanitize_degrees_double,
    signum,
)
from materialcolor.viewing_conditions import DEFAULT_VIEWING_CONDITIONS, ViewingConditions


@dataclass(frozen=True)
class Cam:
    """A colour described by CAM16 appearance correlates and UCS coordinates."""

    hue: float = 0.0
    chroma: float = 0.0
    j: float = 0.0
    q: float = 0.0
    m: float = 0.0
    s: float = 0.0
    jstar: float = 0.0
    astar: float = 0.0
    bstar: float = 0.0


def cam_from_xyz_and_viewing_conditions(
    x: float, y: float, z: float, viewing_conditions: ViewingConditions
) -> Cam:
    """Convert XYZ seen in the given viewing conditions to CAM16."""
    vc = viewing_conditions
    r_c = 0.401288 * x + 0.650173 * y - 0.051461 * z
    g_c = -0.250268 * x + 1.204414 * y + 0.045854 * z
    b_c = -0.002079 * x + 0.048952 * y + 0.953127 * z

    r_d, g_d, b_d = (d * comp for d, comp in zip(vc.rgb_d, (r_c, g_c, b_c)))

    def adapt(component: float) -> float:
        af = math.pow(vc.fl * abs(component) / 100.0, 0.42)
        return signum(component) * 400.0 * af / (af + 27.13)

    r_a, g_a, b_a = adapt(r_d), adapt(g_d), adapt(b_d)

    a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
    p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

    hue = sanitize_degrees_double(math.atan2(b, a) * 180.0 / math.pi)
    hue_radians = hue * math.pi / 180.0
    ac = p2 * vc.nbb

    j = 100.0 * math.pow(ac / vc.aw, vc.c * vc.z)
    q = (4.0 / vc.c) * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
    hue_prime = hue + 360 if hue < 20.14 else hue
    e_hue = 0.25 * (math.cos(hue_prime * math.pi / 180.0 + 2.0) + 3.8)
    p1 = 50000.0 / 13.0 * e_hue * vc.n_c * vc.ncb
    t = p1 * math.sqrt(a * a + b * b) / (u + 0.305)
    alpha = math.pow(t, 0.9) * math.pow(
        1.64 - math.pow(0.29, vc.background_y_to_white_point_y), 0.73
    )
    c = alpha * math.sqrt(j / 100.0)
    m = c * vc.fl_root
    s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))
    jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
    mstar = 1.0 / 0.0228 * math.log(1.0 + 0.0228 * m)
    astar = mstar * math.cos(hue_radians)
    bstar = mstar * math.sin(hue_radians)
    return Cam(hue, c, j, q, m, s, jstar, astar, bstar)


def cam_from_int_and_viewing_conditions(argb: int, viewing_conditions: ViewingConditions) -> Cam:
    """Convert an ARGB colour seen in the given viewing conditions to CAM16."""
    red_l = linearized(red_from_argb(argb))
    green_l = linearized(green_from_argb(argb))
    blue_l = linearized(blue_from_argb(argb))
    x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
    y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
    z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l
    return cam_from_xyz_and_viewing_conditions(x, y, z, viewing_conditions)


def cam_from_int(argb: int) -> Cam:
    """Convert an ARGB colour to CAM16 under default viewing conditions."""
    return cam_from_int_and_viewing_conditions(argb, DEFAULT_VIEWING_CONDITIONS)


def cam_from_jch_and_viewing_conditions(
    j: float, c: float, h: float, viewing_conditions: ViewingConditions
) -> Cam:
    """Build a CAM16 colour from lightness J, chroma C and hue h (degrees)."""
    vc = viewing_conditions
    q = (4.0 / vc.c) * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
    m = c * vc.fl_root
    alpha = c / math.sqrt(j / 100.0)
    s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))
    hue_radians = h * math.pi / 180.0
    jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
    mstar = 1.0 / 0.0228 * math.log(1.0 + 0.0228 * m)
    astar = mstar * math.cos(hue_radians)
    bstar = mstar * math.sin(hue_radians)
    return Cam(h, c, j, q, m, s, jstar, astar, bstar)


def cam_from_ucs_and_viewing_conditions(
    jstar: float, astar: float, bstar: float, viewing_conditions: ViewingConditions
) -> Cam:
    """Build a CAM16 colour from CAM16-UCS coordinates J*, a*, b*."""
    m = math.sqrt(astar * astar + bstar * bstar)
    m_2 = (math.exp(m * 0.0228) - 1.0) / 0.0228
    c = m_2 / viewing_conditions.fl_root
    h = math.atan2(bstar, astar) * (180.0 / math.pi)
    if h < 0.0:
        h += 360.0
    j = jstar / (1 - (jstar - 100) * 0.007)
    return cam_from_jch_and_viewing_conditions(j, c, h, viewing_conditions)


def int_from_cam_and_viewing_conditions(cam: Cam, viewing_conditions: ViewingConditions) -> int:
    """Convert a CAM16 colour seen in the given viewing conditions to ARGB."""
    vc = viewing_conditions
    alpha = 0.0 if cam.chroma == 0.0 or cam.j == 0.0 else cam.chroma / math.sqrt(cam.j / 100.0)
    t = math.pow(
        alpha / math.pow(1.64 - math.pow(0.29, vc.background_y_to_white_point_y), 0.73),
        1.0 / 0.9,
    )
    h_rad = cam.hue * math.pi / 180.0
    e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
    ac = vc.aw * math.pow(cam.j / 100.0, 1.0 / vc.c / vc.z)
    p1 = e_hue * (50000.0 / 13.0) * vc.n_c * vc.ncb
    p2 = ac / vc.nbb
    h_sin = math.sin(h_rad)
    h_cos = math.cos(h_rad)
    gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
    a = gamma * h_cos
    b = gamma * h_sin
    r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
    g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
    b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

    def unadapt(adapted: float) -> float:
        base = max(0.0, (27.13 * abs(adapted)) / (400.0 - abs(adapted)))
        return signum(adapted) * (100.0 / vc.fl) * math.pow(base, 1.0 / 0.42)

    r_x, g_x, b_x = (
        unadapt(comp) / d for comp, d in zip((r_a, g_a, b_a), vc.rgb_d)
    )
    x = 1.86206786 * r_x - 1.01125463 * g_x + 0.14918677 * b_x
    y = 0.38752654 * r_x + 0.62144744 * g_x - 0.00897398 * b_x
    z = -0.01584150 * r_x - 0.03412294 * g_x + 1.04996444 * b_x

    r_l = 3.2406 * x - 1.5372 * y - 0.4986 * z
    g_l = -0.9689 * x + 1.8758 * y + 0.0415 * z
    b_l = 0.0557 * x - 0.2040 * y + 1.0570 * z
    return argb_from_rgb(delinearized(r_l), delinearized(g_l), delinearized(b_l))


def int_from_cam(cam: Cam) -> int:
    """Convert a CAM16 colour to ARGB under default viewing conditions."""
    return int_from_cam_and_viewing_conditions(cam, DEFAULT_VIEWING_CONDITIONS)


def cam_distance(a: Cam, b: Cam) -> float:
    """Perceptual distance between two CAM16 colours in CAM16-UCS."""
    d_j = a.jstar - b.jstar
    d_a = a.astar - b.astar
    d_b = a.bstar - b.bstar
    d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
    return 1.41 * math.pow(d_e_prime, 0.63)