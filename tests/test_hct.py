import pytest

from materialcolor.color_utils import blue_from_argb, green_from_argb, red_from_argb
from materialcolor.hct import Hct


@pytest.mark.parametrize("argb", [0xFF123456, 0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF808080])
def test_from_argb_keeps_argb(argb):
    assert Hct.from_argb(argb).to_int() == argb


def test_from_argb_and_constructor_agree():
    a = Hct(0xFF336699)
    b = Hct.from_argb(0xFF336699)
    assert (a.hue, a.chroma, a.tone) == (b.hue, b.chroma, b.tone)


def test_default_is_black_zero():
    hct = Hct()
    assert hct.to_int() == 0
    assert hct.tone == pytest.approx(0.0)
    assert hct.chroma == pytest.approx(0.0)


def test_white_and_black_from_tone_extremes():
    assert Hct.from_hct(0.0, 0.0, 100.0).to_int() == 0xFFFFFFFF
    assert Hct.from_hct(0.0, 0.0, 0.0).to_int() == 0xFF000000


def test_white_tone_is_100():
    assert Hct.from_argb(0xFFFFFFFF).tone == pytest.approx(100.0, abs=1e-6)


def test_zero_chroma_is_grey():
    argb = Hct.from_hct(200.0, 0.0, 50.0).to_int()
    assert red_from_argb(argb) == green_from_argb(argb) == blue_from_argb(argb)


@pytest.mark.parametrize("hue", [0.0, 90.0, 180.0, 270.0])
def test_from_hct_preserves_tone(hue):
    hct = Hct.from_hct(hue, 20.0, 50.0)
    assert hct.tone == pytest.approx(50.0, abs=1.0)


def test_from_hct_preserves_hue_when_in_gamut():
    hct = Hct.from_hct(120.0, 20.0, 60.0)
    assert hct.hue == pytest.approx(120.0, abs=2.0)
    assert hct.chroma == pytest.approx(20.0, abs=2.0)


def test_set_tone_changes_tone_keeps_hue():
    hct = Hct.from_hct(250.0, 20.0, 40.0)
    hct.tone = 80.0
    assert hct.tone == pytest.approx(80.0, abs=1.0)
    assert hct.hue == pytest.approx(250.0, abs=3.0)


def test_set_hue_changes_hue():
    hct = Hct.from_hct(30.0, 20.0, 50.0)
    hct.hue = 210.0
    assert hct.hue == pytest.approx(210.0, abs=3.0)
    assert hct.tone == pytest.approx(50.0, abs=1.0)


def test_set_chroma_lowers_chroma():
    hct = Hct.from_hct(30.0, 40.0, 50.0)
    hct.chroma = 5.0
    assert hct.chroma == pytest.approx(5.0, abs=1.5)
    assert hct.to_int() == Hct.from_argb(hct.to_int()).to_int()


def test_requested_chroma_above_gamut_is_reduced():
    hct = Hct.from_hct(120.0, 500.0, 50.0)
    assert hct.chroma < 500.0
    assert hct.tone == pytest.approx(50.0, abs=1.0)


def test_ordering_by_hue():
    colors = [Hct.from_hct(h, 20.0, 50.0) for h in (300.0, 20.0, 150.0)]
    ordered = sorted(colors)
    hues = [c.hue for c in ordered]
    assert hues == sorted(hues)
    assert ordered[0] < ordered[-1]