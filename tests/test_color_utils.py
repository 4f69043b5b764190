import pytest

from materialcolor import color_utils as cu


def test_argb_from_rgb_packs_opaque_channels():
    assert cu.argb_from_rgb(255, 0, 0) == 0xFFFF0000
    assert cu.argb_from_rgb(0x12, 0x34, 0x56) == 0xFF123456


def test_channel_extraction_round_trip():
    argb = cu.argb_from_rgb(17, 200, 99)
    assert cu.red_from_argb(argb) == 17
    assert cu.green_from_argb(argb) == 200
    assert cu.blue_from_argb(argb) == 99


@pytest.mark.parametrize("component", range(256))
def test_linearize_delinearize_round_trip(component):
    assert cu.delinearized(cu.linearized(component)) == component


def test_linearized_bounds():
    assert cu.linearized(0) == 0.0
    assert cu.linearized(255) == pytest.approx(100.0)


def test_delinearized_clamps():
    assert cu.delinearized(-10.0) == 0
    assert cu.delinearized(150.0) == 255


def test_argb_from_linrgb_extremes():
    assert cu.argb_from_linrgb((0.0, 0.0, 0.0)) == 0xFF000000
    assert cu.argb_from_linrgb((100.0, 100.0, 100.0)) == 0xFFFFFFFF


@pytest.mark.parametrize("lstar", [0.0, 5.0, 8.0, 25.5, 50.0, 73.2, 100.0])
def test_lstar_y_round_trip(lstar):
    assert cu.lstar_from_y(cu.y_from_lstar(lstar)) == pytest.approx(lstar, abs=1e-9)


def test_y_from_lstar_is_monotonic():
    values = [cu.y_from_lstar(x) for x in range(0, 101, 5)]
    assert values == sorted(values)


def test_int_from_lstar_extremes():
    assert cu.int_from_lstar(0.0) == 0xFF000000
    assert cu.int_from_lstar(100.0) == 0xFFFFFFFF


def test_int_from_lstar_is_grey():
    argb = cu.int_from_lstar(50.0)
    assert cu.red_from_argb(argb) == cu.green_from_argb(argb) == cu.blue_from_argb(argb)
    assert cu.lstar_from_argb(argb) == pytest.approx(50.0, abs=0.5)


def test_lstar_from_argb_extremes():
    assert cu.lstar_from_argb(0xFFFFFFFF) == pytest.approx(100.0, abs=1e-4)
    assert cu.lstar_from_argb(0xFF000000) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    "degrees, expected",
    [(30.0, 30.0), (240.0, 240.0), (360.0, 0.0), (-30.0, 330.0), (-750.0, 330.0), (1000.0, 280.0)],
)
def test_sanitize_degrees_double(degrees, expected):
    assert cu.sanitize_degrees_double(degrees) == pytest.approx(expected)


def test_diff_degrees_is_symmetric_and_short():
    assert cu.diff_degrees(10.0, 350.0) == pytest.approx(20.0)
    assert cu.diff_degrees(350.0, 10.0) == pytest.approx(20.0)
    assert cu.diff_degrees(0.0, 180.0) == pytest.approx(180.0)


def test_rotation_direction():
    assert cu.rotation_direction(10.0, 20.0) == 1.0
    assert cu.rotation_direction(20.0, 10.0) == -1.0
    assert cu.rotation_direction(350.0, 10.0) == 1.0


def test_signum():
    assert cu.signum(-2.5) == -1
    assert cu.signum(0.0) == 0
    assert cu.signum(3.0) == 1


def test_lerp_endpoints_and_middle():
    assert cu.lerp(2.0, 4.0, 0.0) == 2.0
    assert cu.lerp(2.0, 4.0, 1.0) == 4.0
    assert cu.lerp(2.0, 4.0, 0.5) == pytest.approx(3.0)


def test_matrix_multiply_identity_and_rows():
    identity = ((1, 0, 0), (0, 1, 0), (0, 0, 1))
    assert cu.matrix_multiply((1.0, 2.0, 3.0), identity) == (1.0, 2.0, 3.0)
    swap = ((0, 1, 0), (1, 0, 0), (0, 0, 2))
    assert cu.matrix_multiply((1.0, 2.0, 3.0), swap) == (2.0, 1.0, 6.0)