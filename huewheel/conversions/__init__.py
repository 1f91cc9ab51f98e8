"""
Hue Wheel Color Model
=====================

Pure, stateless conversions between 8-bit RGB and the two hue spaces the
control can operate in (HSL and HSV).

Features
--------
- Bidirectional conversions: RGB ↔ HSL, RGB ↔ HSV
- Unit-float variants (0.0-1.0 channels) and 8-bit variants (0-255 channels)
- Hue output always normalized into [0, 360)
- Achromatic input yields hue 0 and saturation 0 (no division by zero)

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Channels in [0, 255], need not be integers
    unit_rgb_to_hsl(r, g, b)
        Channels in [0, 1]

RGB → HSV:
    rgb_to_hsv(r, g, b)
    unit_rgb_to_hsv(r, g, b)

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Rounds each channel with floor(x*255 + 0.5) and clamps to [0, 255]
    hsl_to_unit_rgb(h, s, l)

HSV → RGB:
    hsv_to_rgb(h, s, v)
    hsv_to_unit_rgb(h, s, v)

High-Level API
-------------
    convert(color, from_space, to_space)
        Re-express a triple in another hue space through an RGB round trip
    to_rgb(color, space) / from_rgb(rgb, space)

Round Trip
----------
For every integer triple in [0, 255]³, ``hsl_to_rgb(*rgb_to_hsl(r, g, b))``
and ``hsv_to_rgb(*rgb_to_hsv(r, g, b))`` reproduce ``(r, g, b)`` exactly.

Examples
--------
>>> from huewheel.conversions import rgb_to_hsl, hsl_to_rgb
>>> h, s, l = rgb_to_hsl(255, 128, 0)
>>> hsl_to_rgb(h, s, l)
(255, 128, 0)
"""

# RGB → HSL
from .to_hsl import rgb_to_hsl, unit_rgb_to_hsl

# RGB → HSV
from .to_hsv import rgb_to_hsv, unit_rgb_to_hsv

# HSL/HSV → RGB
from .to_rgb import hsl_to_rgb, hsv_to_rgb, hsl_to_unit_rgb, hsv_to_unit_rgb

# High-level API
from .wrapper import convert, to_rgb, from_rgb

# Scalar helpers
from .numbers import clamp01, wrap_hue, round_channel, unit_to_channel, validate_rgb

__all__ = [
    # RGB → HSL
    'rgb_to_hsl',
    'unit_rgb_to_hsl',

    # RGB → HSV
    'rgb_to_hsv',
    'unit_rgb_to_hsv',

    # → RGB
    'hsl_to_rgb',
    'hsv_to_rgb',
    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',

    # High-level API
    'convert',
    'to_rgb',
    'from_rgb',

    # Helpers
    'clamp01',
    'wrap_hue',
    'round_channel',
    'unit_to_channel',
    'validate_rgb',
]
