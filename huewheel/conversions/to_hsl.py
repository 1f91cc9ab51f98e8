from typing import Tuple

from .numbers import CHANNEL_MAX
from .to_hsv import hue_from_unit_rgb


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB (0..1) to HSL with the standard min/max-channel algorithm.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        l ∈ [0, 1]

    Achromatic input (all channels equal) yields ``h = 0`` and ``s = 0``.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) * 0.5

    if max_c == min_c:
        return 0.0, 0.0, lightness

    delta = max_c - min_c
    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2.0 - max_c - min_c)

    return hue_from_unit_rgb(r, g, b, max_c, delta), saturation, lightness


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB channels in ``[0, 255]`` (not necessarily integers) to HSL."""
    return unit_rgb_to_hsl(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)

