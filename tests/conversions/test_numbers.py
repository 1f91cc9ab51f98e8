import math

import pytest

from huewheel.conversions import clamp01, round_channel, unit_to_channel, validate_rgb, wrap_hue


@pytest.mark.parametrize("hue, expected", [
    (0, 0.0),
    (370, 10.0),
    (-10, 350.0),
    (360, 0.0),
    (-360, 0.0),
    (719.5, 359.5),
])
def test_wrap_hue(hue, expected):
    assert math.isclose(wrap_hue(hue), expected)


def test_wrap_hue_tiny_negative_stays_below_360():
    assert 0.0 <= wrap_hue(-1e-20) < 360.0


def test_clamp01():
    assert clamp01(1.5) == 1.0
    assert clamp01(-0.2) == 0.0
    assert clamp01(0.25) == 0.25


def test_round_channel():
    assert round_channel(127.5) == 128
    assert round_channel(127.49) == 127
    assert round_channel(300) == 255
    assert round_channel(-4) == 0


def test_unit_to_channel():
    assert unit_to_channel(0.5) == 128
    assert unit_to_channel(1.0) == 255


def test_validate_rgb():
    assert validate_rgb(300, -1, 12.6) == (255, 0, 13)
