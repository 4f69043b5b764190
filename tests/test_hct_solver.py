import pytest

from materialcolor.cam import cam_from_int
from materialcolor.color_utils import (
    blue_from_argb,
    diff_degrees,
    green_from_argb,
    int_from_lstar,
    lstar_from_argb,
    red_from_argb,
)
from materialcolor.hct_solver import int_from_hcl, solve_to_cam, solve_to_int


@pytest.mark.parametrize("hue", range(15, 360, 30))
@pytest.mark.parametrize("chroma", range(0, 101, 20))
@pytest.mark.parametrize("tone", range(20, 81, 10))
def test_solution_is_sufficiently_close(hue, chroma, tone):
    argb = solve_to_int(hue, chroma, tone)
    cam = cam_from_int(argb)
    assert abs(lstar_from_argb(argb) - tone) < 0.5
    assert cam.chroma <= chroma + 2.5
    if chroma > 0 and cam.chroma > 2.5:
        assert diff_degrees(cam.hue, hue) < 4.0


@pytest.mark.parametrize("tone", [0.0, 0.00001, 50.0, 99.99999, 100.0])
def test_zero_chroma_or_extreme_tone_gives_grey(tone):
    assert solve_to_int(200.0, 0.0, tone) == int_from_lstar(tone)


def test_extreme_tones():
    assert solve_to_int(120.0, 50.0, 0.0) == 0xFF000000
    assert solve_to_int(120.0, 50.0, 100.0) == 0xFFFFFFFF


def test_result_is_opaque():
    for hue in (0.0, 90.0, 180.0, 270.0):
        assert solve_to_int(hue, 200.0, 50.0) >> 24 == 0xFF


def test_hue_is_wrapped():
    assert solve_to_int(400.0, 40.0, 60.0) == solve_to_int(40.0, 40.0, 60.0)
    assert solve_to_int(-30.0, 40.0, 60.0) == solve_to_int(330.0, 40.0, 60.0)


def test_out_of_gamut_chroma_keeps_tone():
    argb = solve_to_int(270.0, 300.0, 50.0)
    cam = cam_from_int(argb)
    assert abs(lstar_from_argb(argb) - 50.0) < 0.5
    assert cam.chroma < 300.0
    assert diff_degrees(cam.hue, 270.0) < 4.0


@pytest.mark.parametrize("argb", [0xFF4285F4, 0xFFEA4335, 0xFF34A853, 0xFF808080, 0xFF6750A4])
def test_round_trip_from_srgb(argb):
    cam = cam_from_int(argb)
    solved = solve_to_int(cam.hue, cam.chroma, lstar_from_argb(argb))
    for channel in (red_from_argb, green_from_argb, blue_from_argb):
        assert abs(channel(solved) - channel(argb)) <= 2


def test_solve_to_cam_matches_solve_to_int():
    assert solve_to_cam(210.0, 30.0, 45.0) == cam_from_int(solve_to_int(210.0, 30.0, 45.0))


def test_int_from_hcl_matches_solve_to_int():
    assert int_from_hcl(33.0, 60.0, 70.0) == solve_to_int(33.0, 60.0, 70.0)


def test_higher_tone_is_lighter():
    dark = solve_to_int(150.0, 30.0, 30.0)
    light = solve_to_int(150.0, 30.0, 70.0)
    assert lstar_from_argb(light) > lstar_from_argb(dark)