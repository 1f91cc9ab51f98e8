"""
Huewheel: an embeddable hue ring color picker.

The control is a circular hue ring, optionally paired with a lightness (or
value) ring, with a center swatch showing the current color. It is driven by
pointer samples and key commands and renders to Pillow images.

Quick start
-----------
>>> from huewheel import HueWheel
>>> wheel = HueWheel(diameter=250, color_space="hsv", on_change=print)
>>> wheel.on_pointer_down((200, 125))
>>> wheel.get_rgb()
>>> wheel.image.save("wheel.png")

Layers
------
- ``conversions``: pure RGB/HSL/HSV math
- ``gradients``: precomputed ring ramps
- ``geometry``: polar math, ring radii and knob shapes
- ``interaction``: the pointer/keyboard state machine
- ``render``: background cache and per-frame drawing
- ``notify``: debounced change delivery
"""

from .wheel import HueWheel
from .options import WheelOptions

from .colors import ColorState, ChangeEvent
from .types import ColorSpace, RGBTuple, ColorTriple, Point
from .interaction import HitRegion, KeyCommand, Mode, InteractionController, InteractionState
from .gradients import GradientTable
from .geometry import GeometryConfig
from .render import Renderer
from .notify import ChangeNotifier, Debouncer

from .conversions import (
    rgb_to_hsl,
    rgb_to_hsv,
    hsl_to_rgb,
    hsv_to_rgb,
    convert,
)

__all__ = [
    # Control
    "HueWheel",
    "WheelOptions",

    # State
    "ColorState",
    "ChangeEvent",
    "ColorSpace",
    "RGBTuple",
    "ColorTriple",
    "Point",

    # Components
    "InteractionController",
    "InteractionState",
    "HitRegion",
    "KeyCommand",
    "Mode",
    "GradientTable",
    "GeometryConfig",
    "Renderer",
    "ChangeNotifier",
    "Debouncer",

    # Conversions
    "rgb_to_hsl",
    "rgb_to_hsv",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "convert",
]
