"""
Polar geometry for the hue wheel: ring radii, knob shapes and hit-testing.
"""

from .config import (
    GeometryConfig,
    clamp_hue_thickness,
    clamp_lightness_thickness,
    default_hue_thickness,
    default_lightness_thickness,
)
from .polar import (
    PolarSample,
    polar,
    in_ring,
    normalize_angle,
    angle_to_hue,
    angle_to_third,
    third_to_angle,
    distance_to_saturation,
    rotate_point,
    point_in_polygon,
    point_in_disc,
    centroid,
)
from .polar_grid import CoordinateGridCache

__all__ = [
    "GeometryConfig",
    "clamp_hue_thickness",
    "clamp_lightness_thickness",
    "default_hue_thickness",
    "default_lightness_thickness",
    "PolarSample",
    "polar",
    "in_ring",
    "normalize_angle",
    "angle_to_hue",
    "angle_to_third",
    "third_to_angle",
    "distance_to_saturation",
    "rotate_point",
    "point_in_polygon",
    "point_in_disc",
    "centroid",
    "CoordinateGridCache",
]
