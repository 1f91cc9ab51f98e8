from typing import Callable, Dict

from ..types.color_types import ColorSpace, ColorTriple, RGBTuple
from .to_rgb import hsl_to_rgb, hsv_to_rgb
from .to_hsl import rgb_to_hsl
from .to_hsv import rgb_to_hsv

# Hue space -> 8-bit RGB
CONVERT_TO_RGB: Dict[ColorSpace, Callable[[float, float, float], RGBTuple]] = {
    ColorSpace.HSL: hsl_to_rgb,
    ColorSpace.HSV: hsv_to_rgb,
}

# 8-bit RGB -> hue space
CONVERT_FROM_RGB: Dict[ColorSpace, Callable[[float, float, float], ColorTriple]] = {
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.HSV: rgb_to_hsv,
}


def to_rgb(color: ColorTriple, space: ColorSpace) -> RGBTuple:
    h, s, t = color
    return CONVERT_TO_RGB[ColorSpace(space)](h, s, t)


def from_rgb(rgb: RGBTuple, space: ColorSpace) -> ColorTriple:
    r, g, b = rgb
    return CONVERT_FROM_RGB[ColorSpace(space)](r, g, b)


def convert(color: ColorTriple, from_space: ColorSpace, to_space: ColorSpace) -> ColorTriple:
    """
    Re-express a hue/saturation/third triple in another hue space.

    The conversion always goes through 8-bit RGB, so the result is exactly the
    color the control would display. Same-space calls return the input unchanged.
    """
    from_space, to_space = ColorSpace(from_space), ColorSpace(to_space)
    if from_space == to_space:
        return color
    return from_rgb(to_rgb(color, from_space), to_space)
