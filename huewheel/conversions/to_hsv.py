from typing import Tuple

from .numbers import CHANNEL_MAX, wrap_hue


def hue_from_unit_rgb(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue angle (degrees, [0, 360)) shared by the HSL and HSV forward conversions."""
    if r == max_c:
        h = (g - b) / delta
    elif g == max_c:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta
    return wrap_hue(h * 60.0)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB (0..1) to HSV.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    if max_c == min_c:
        return 0.0, 0.0, max_c

    delta = max_c - min_c
    return hue_from_unit_rgb(r, g, b, max_c, delta), delta / max_c, max_c


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB channels in ``[0, 255]`` (not necessarily integers) to HSV."""
    return unit_rgb_to_hsv(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)

