"""Solve for an sRGB colour with a requested HCT hue, chroma and tone."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from materialcolor.cam import Cam, cam_from_int
from materialcolor.color_utils import (
    Vec3,
    argb_from_linrgb,
    int_from_lstar,
    linearized,
    matrix_multiply,
    sanitize_degrees_double,
    signum,
    y_from_lstar,
)
from materialcolor.viewing_conditions import DEFAULT_VIEWING_CONDITIONS

_SCALED_DISCOUNT_FROM_LINRGB = (
    (0.001200833568784504, 0.002389694492170889, 0.0002795742885861124),
    (0.0005891086651375999, 0.0029785502573438758, 0.0003270666104008398),
    (0.00010146692491640572, 0.0005364214359186694, 0.0032979401770712076),
)

_LINRGB_FROM_SCALED_DISCOUNT = (
    (1373.2198709594231, -1100.4251190754821, -7.278681089101213),
    (-271.815969077903, 559.6580465940733, -32.46047482791194),
    (1.9622899599665666, -57.173814538844006, 308.7233197812385),
)

_Y_FROM_LINRGB = (0.2126, 0.7152, 0.0722)

# Linear values halfway between consecutive 8-bit sRGB channel values.
_CRITICAL_PLANES: Tuple[float, ...] = tuple(linearized(i + 0.5) for i in range(255))

_NO_VERTEX: Vec3 = (-1.0, -1.0, -1.0)


def _sanitize_radians(angle: float) -> float:
    return math.fmod(angle + math.pi * 8, math.pi * 2)


def _true_delinearized(rgb_component: float) -> float:
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized = normalized * 12.92
    else:
        delinearized = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return delinearized * 255.0


def _chromatic_adaptation(component: float) -> float:
    af = math.pow(abs(component), 0.42)
    return signum(component) * 400.0 * af / (af + 27.13)


def _hue_of(linrgb: Vec3) -> float:
    """CAM16 hue, in radians, of a linear RGB colour."""
    scaled = matrix_multiply(linrgb, _SCALED_DISCOUNT_FROM_LINRGB)
    r_a, g_a, b_a = (_chromatic_adaptation(component) for component in scaled)
    a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    return _sanitize_radians(b - a) < _sanitize_radians(c - a)


def _lerp_point(source: Vec3, t: float, target: Vec3) -> Vec3:
    return (
        source[0] + (target[0] - source[0]) * t,
        source[1] + (target[1] - source[1]) * t,
        source[2] + (target[2] - source[2]) * t,
    )


def _set_coordinate(source: Vec3, coordinate: float, target: Vec3, axis: int) -> Vec3:
    """Intersect segment source-target with the plane where ``axis`` equals ``coordinate``."""
    t = (coordinate - source[axis]) / (target[axis] - source[axis])
    return _lerp_point(source, t, target)


def _is_bounded(x: float) -> bool:
    return 0.0 <= x <= 100.0


def _nth_vertex(y: float, n: int) -> Optional[Vec3]:
    """The nth possible vertex of the intersection of the Y plane and the RGB cube."""
    k_r, k_g, k_b = _Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g, b = coord_a, coord_b
        r = (y - g * k_g - b * k_b) / k_r
        return (r, g, b) if _is_bounded(r) else None
    if n < 8:
        b, r = coord_a, coord_b
        g = (y - r * k_r - b * k_b) / k_g
        return (r, g, b) if _is_bounded(g) else None
    r, g = coord_a, coord_b
    b = (y - r * k_r - g * k_g) / k_b
    return (r, g, b) if _is_bounded(b) else None


def _bisect_to_segment(y: float, target_hue: float) -> Tuple[Vec3, Vec3]:
    """Endpoints of the polygon edge whose hues bracket ``target_hue``."""
    left = right = _NO_VERTEX
    left_hue = right_hue = 0.0
    initialized = False
    uncut = True
    vertices: List[Vec3] = [v for v in (_nth_vertex(y, n) for n in range(12)) if v is not None]
    for mid in vertices:
        mid_hue = _hue_of(mid)
        if not initialized:
            left = right = mid
            left_hue = right_hue = mid_hue
            initialized = True
            continue
        if uncut or _are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right, right_hue = mid, mid_hue
            else:
                left, left_hue = mid, mid_hue
    return left, right


def _critical_plane_below(x: float) -> int:
    return math.floor(x - 0.5)


def _critical_plane_above(x: float) -> int:
    return math.ceil(x - 0.5)


def _midpoint(a: Vec3, b: Vec3) -> Vec3:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2, (a[2] + b[2]) / 2)


def _bisect_to_limit(y: float, target_hue: float) -> Vec3:
    """A linear RGB colour on the cube boundary with the given Y and hue."""
    left, right = _bisect_to_segment(y, target_hue)
    left_hue = _hue_of(left)
    for axis in range(3):
        if left[axis] == right[axis]:
            continue
        if left[axis] < right[axis]:
            l_plane = _critical_plane_below(_true_delinearized(left[axis]))
            r_plane = _critical_plane_above(_true_delinearized(right[axis]))
        else:
            l_plane = _critical_plane_above(_true_delinearized(left[axis]))
            r_plane = _critical_plane_below(_true_delinearized(right[axis]))
        for _ in range(8):
            if abs(r_plane - l_plane) <= 1:
                break
            m_plane = math.floor((l_plane + r_plane) / 2.0)
            mid = _set_coordinate(left, _CRITICAL_PLANES[m_plane], right, axis)
            mid_hue = _hue_of(mid)
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                r_plane = m_plane
            else:
                left = mid
                left_hue = mid_hue
                l_plane = m_plane
    return _midpoint(left, right)


def _inverse_chromatic_adaptation(adapted: float) -> float:
    adapted_abs = abs(adapted)
    denominator = 400.0 - adapted_abs
    if denominator == 0.0:
        base = math.inf
    else:
        base = max(0.0, 27.13 * adapted_abs / denominator)
    return signum(adapted) * math.pow(base, 1.0 / 0.42)


def _find_result_by_j(hue_radians: float, chroma: float, y: float) -> Optional[int]:
    """Newton iteration on J for an exact in-gamut solution, or None."""
    j = math.sqrt(y) * 11.0
    vc = DEFAULT_VIEWING_CONDITIONS
    t_inner_coeff = 1 / math.pow(
        1.64 - math.pow(0.29, vc.background_y_to_white_point_y), 0.73
    )
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * vc.n_c * vc.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)
    k_r, k_g, k_b = _Y_FROM_LINRGB
    for iteration_round in range(5):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = math.pow(alpha * t_inner_coeff, 1.0 / 0.9)
        ac = vc.aw * math.pow(j_normalized, 1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
        scaled = (
            _inverse_chromatic_adaptation(r_a),
            _inverse_chromatic_adaptation(g_a),
            _inverse_chromatic_adaptation(b_a),
        )
        linrgb = matrix_multiply(scaled, _LINRGB_FROM_SCALED_DISCOUNT)
        if min(linrgb) < 0:
            return None
        fnj = k_r * linrgb[0] + k_g * linrgb[1] + k_b * linrgb[2]
        if fnj <= 0:
            return None
        if iteration_round == 4 or abs(fnj - y) < 0.002:
            if max(linrgb) > 100.01:
                return None
            return argb_from_linrgb(linrgb)
        # Newton step, approximating fn'(j) by 2 * fn(j) / j.
        j = j - (fnj - y) * j / (2 * fnj)
    return None


def solve_to_int(hue_degrees: float, chroma: float, lstar: float) -> int:
    """Find an sRGB colour with the given hue, chroma and L*.

    When the exact chroma is out of gamut, hue and L* are kept and chroma is
    maximised.
    """
    if chroma < 0.0001 or lstar < 0.0001 or lstar > 99.9999:
        return int_from_lstar(lstar)
    hue_degrees = sanitize_degrees_double(hue_degrees)
    hue_radians = hue_degrees / 180 * math.pi
    y = y_from_lstar(lstar)
    exact_answer = _find_result_by_j(hue_radians, chroma, y)
    if exact_answer is not None and exact_answer != 0:
        return exact_answer
    return argb_from_linrgb(_bisect_to_limit(y, hue_radians))


def solve_to_cam(hue_degrees: float, chroma: float, lstar: float) -> Cam:
    """Like :func:`solve_to_int`, returning the CAM16 form of the colour."""
    return cam_from_int(solve_to_int(hue_degrees, chroma, lstar))


def int_from_hcl(hue: float, chroma: float, lstar: float) -> int:
    """ARGB colour for a CAM16 hue and chroma and an L* tone."""
    return solve_to_int(hue, chroma, lstar)