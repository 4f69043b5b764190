import pytest

from materialcolor.contrast_curve import ContrastCurve


@pytest.fixture
def curve():
    return ContrastCurve(3.0, 4.5, 7.0, 11.0)


@pytest.mark.parametrize(
    "level, attr",
    [(-1.0, "low"), (0.0, "normal"), (0.5, "medium"), (1.0, "high")],
)
def test_anchor_levels(curve, level, attr):
    assert curve.get(level) == pytest.approx(getattr(curve, attr))


def test_clamps_outside_range(curve):
    assert curve.get(-5.0) == curve.low
    assert curve.get(3.0) == curve.high


def test_midpoints_interpolate(curve):
    assert curve.get(-0.5) == pytest.approx((curve.low + curve.normal) / 2)
    assert curve.get(0.25) == pytest.approx((curve.normal + curve.medium) / 2)
    assert curve.get(0.75) == pytest.approx((curve.medium + curve.high) / 2)


def test_monotonic_for_increasing_curve(curve):
    levels = [i / 20 for i in range(-25, 26)]
    values = [curve.get(level) for level in levels]
    assert values == sorted(values)


def test_decreasing_curve():
    dim = ContrastCurve(87.0, 87.0, 80.0, 75.0)
    assert dim.get(0.0) == 87.0
    assert dim.get(1.0) == 75.0
    assert 80.0 < dim.get(0.25) < 87.0