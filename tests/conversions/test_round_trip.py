import numpy as np
import pytest

from huewheel.conversions import hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv


def _grid(step):
    values = list(range(0, 256, step))
    if values[-1] != 255:
        values.append(255)
    return values


@pytest.mark.parametrize("forward, backward", [
    (rgb_to_hsl, hsl_to_rgb),
    (rgb_to_hsv, hsv_to_rgb),
])
def test_round_trip_integer_rgb(forward, backward):
    channels = _grid(5)
    for r in channels:
        for g in channels:
            for b in channels:
                assert backward(*forward(r, g, b)) == (r, g, b)


@pytest.mark.parametrize("forward, backward", [
    (rgb_to_hsl, hsl_to_rgb),
    (rgb_to_hsv, hsv_to_rgb),
])
def test_round_trip_random_rgb(forward, backward):
    rng = np.random.default_rng(1234)
    for r, g, b in rng.integers(0, 256, size=(2000, 3)):
        rgb = (int(r), int(g), int(b))
        assert backward(*forward(*rgb)) == rgb


def test_achromatic_round_trip_ignores_hue():
    for v in range(0, 256, 17):
        _, s, l = rgb_to_hsl(v, v, v)
        assert s == 0.0
        for hue in (0, 90, 359.9):
            assert hsl_to_rgb(hue, s, l) == (v, v, v)
