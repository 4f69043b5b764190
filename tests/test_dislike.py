import pytest

from materialcolor.dislike import fix_if_disliked, is_disliked
from materialcolor.hct import Hct


def _dark_yellow_green():
    return Hct.from_hct(100.0, 20.0, 40.0)


def test_dark_yellow_green_is_disliked():
    assert is_disliked(_dark_yellow_green()) is True


def test_light_yellow_green_is_liked():
    assert is_disliked(Hct.from_hct(100.0, 20.0, 80.0)) is False


def test_other_hue_is_liked():
    assert is_disliked(Hct.from_hct(200.0, 20.0, 40.0)) is False


def test_neutral_is_liked():
    assert is_disliked(Hct.from_hct(100.0, 0.0, 40.0)) is False


def test_fix_lightens_disliked_colour():
    original = _dark_yellow_green()
    fixed = fix_if_disliked(original)
    assert fixed.tone == pytest.approx(70.0, abs=1.0)
    assert is_disliked(fixed) is False


def test_fix_does_not_modify_original():
    original = _dark_yellow_green()
    before = original.to_int()
    fix_if_disliked(original)
    assert original.to_int() == before


def test_fix_returns_liked_colour_unchanged():
    liked = Hct.from_hct(250.0, 30.0, 40.0)
    assert fix_if_disliked(liked) is liked