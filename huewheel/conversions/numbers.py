import math

from boundednumbers import clamp

from ..types.color_types import RGBTuple, Scalar

HUE_360 = 360.0
CHANNEL_MAX = 255


def clamp01(value: Scalar) -> float:
    """Clamp ``value`` to the inclusive range ``[0, 1]``."""
    return float(clamp(float(value), 0.0, 1.0))


def wrap_hue(hue: Scalar) -> float:
    """Normalize a hue angle (degrees) into ``[0, 360)``."""
    wrapped = float(hue) % HUE_360
    # -1e-20 % 360.0 rounds up to 360.0
    if wrapped >= HUE_360:
        wrapped = 0.0
    return wrapped


def round_channel(value: Scalar) -> int:
    """Round half up and clamp to ``[0, 255]``."""
    rounded = math.floor(float(value) + 0.5)
    return int(clamp(rounded, 0, CHANNEL_MAX))


def unit_to_channel(value: Scalar) -> int:
    """Scale a unit float to an 8-bit channel: ``floor(x*255 + 0.5)``, clamped."""
    return round_channel(float(value) * CHANNEL_MAX)


def validate_rgb(r: Scalar, g: Scalar, b: Scalar) -> RGBTuple:
    return round_channel(r), round_channel(g), round_channel(b)
