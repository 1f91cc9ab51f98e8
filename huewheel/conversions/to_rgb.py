import math
from typing import Tuple

from ..types.color_types import RGBTuple
from .numbers import HUE_360, unit_to_channel, wrap_hue

_ONE_SIXTH = 1.0 / 6.0
_TWO_THIRDS = 2.0 / 3.0


def _hue_to_channel(p: float, q: float, t: float) -> float:
    t %= 1.0
    if t < _ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < _TWO_THIRDS:
        return p + (q - p) * (_TWO_THIRDS - t) * 6.0
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to unit RGB (0..1).

    ``h`` may be any real (taken modulo 360); ``s`` and ``l`` are used as given,
    clamping is the caller's job.
    """
    if s == 0:
        return l, l, l

    hue = wrap_hue(h) / HUE_360
    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q

    return (
        _hue_to_channel(p, q, hue + 1.0 / 3.0),
        _hue_to_channel(p, q, hue),
        _hue_to_channel(p, q, hue - 1.0 / 3.0),
    )


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to unit RGB (0..1) using the sextant formula."""
    sector = wrap_hue(h) / 60.0
    i = int(math.floor(sector)) % 6
    f = sector - math.floor(sector)

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTuple:
    """HSL to 8-bit RGB; each channel is ``floor(x*255 + 0.5)`` clamped to [0, 255]."""
    r, g, b = hsl_to_unit_rgb(h, s, l)
    return unit_to_channel(r), unit_to_channel(g), unit_to_channel(b)


def hsv_to_rgb(h: float, s: float, v: float) -> RGBTuple:
    """HSV to 8-bit RGB; each channel is ``floor(x*255 + 0.5)`` clamped to [0, 255]."""
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return unit_to_channel(r), unit_to_channel(g), unit_to_channel(b)
