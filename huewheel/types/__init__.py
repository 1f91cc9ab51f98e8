from .color_types import ColorSpace, RGBTuple, ColorTriple, Scalar
from .geometry_types import Point

__all__ = [
    "ColorSpace",
    "RGBTuple",
    "ColorTriple",
    "Scalar",
    "Point",
]
