from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..types.geometry_types import Point
from .polar import (
    in_ring,
    rotate_point,
    third_to_angle,
)

logger = logging.getLogger(__name__)

MIN_RING_THICKNESS = 3.0
MAX_HUE_THICKNESS_RATIO = 0.3
MAX_LIGHTNESS_THICKNESS_RATIO = 0.2
MIN_KNOB_SIZE = 5.0

Triangle = Tuple[Point, Point, Point]
Segment = Tuple[Point, Point]


def default_hue_thickness(diameter: float) -> float:
    return max(diameter * 0.12, MIN_RING_THICKNESS)


def default_lightness_thickness(diameter: float) -> float:
    return max(diameter * 0.05, MIN_RING_THICKNESS)


def _clamp_thickness(thickness: float, diameter: float, ratio: float) -> float:
    # The 3px floor takes precedence over the ceiling.
    limit = diameter * ratio
    if thickness > limit:
        thickness = float(math.floor(limit))
    if thickness < MIN_RING_THICKNESS:
        thickness = MIN_RING_THICKNESS
    return thickness


def clamp_hue_thickness(thickness: float, diameter: float) -> float:
    """Ceiling of 30% of the diameter (truncated to whole pixels), then a floor of 3px."""
    return _clamp_thickness(thickness, diameter, MAX_HUE_THICKNESS_RATIO)


def clamp_lightness_thickness(thickness: float, diameter: float) -> float:
    """Ceiling of 20% of the diameter (truncated to whole pixels), then a floor of 3px."""
    return _clamp_thickness(thickness, diameter, MAX_LIGHTNESS_THICKNESS_RATIO)


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """
    Derived sizes of the control, in pixels.

    Rebuilt with :meth:`build` whenever a sizing option changes; never patched.
    All knob shapes are produced here from the current color so that drawing and
    hit-testing share one set of coordinates.
    """

    diameter: float
    hue_thickness: float
    lightness_thickness: float
    shadow_blur: float
    hue_radius: float
    lightness_radius: float
    knob_half_size: float

    @classmethod
    def build(
        cls,
        diameter: float,
        hue_thickness: Optional[float] = None,
        lightness_thickness: Optional[float] = None,
        shadow_blur: float = 0.0,
        use_lightness: bool = True,
        knob_size: float = 0.1,
    ) -> GeometryConfig:
        """
        Compute ring radii and knob sizes.

        Args:
            diameter: Overall size of the (square) control
            hue_thickness: Hue ring width, or None for max(12% of diameter, 3)
            lightness_thickness: Lightness ring width, or None for max(5% of diameter, 3).
                Ignored (treated as 0) when ``use_lightness`` is False.
            shadow_blur: Shadow blur radius reserved around the rings
            use_lightness: Whether the lightness ring is present
            knob_size: Hue knob size as a fraction of the diameter
        """
        w = float(diameter)
        th = default_hue_thickness(w) if hue_thickness is None else clamp_hue_thickness(hue_thickness, w)
        if use_lightness:
            tl = default_lightness_thickness(w) if lightness_thickness is None else clamp_lightness_thickness(lightness_thickness, w)
        else:
            tl = 0.0

        hr = (w - th - tl * 3 - shadow_blur * (1 if use_lightness else 2)) * 0.5 + 1
        lr = (w - tl - shadow_blur) * 0.5 + 1
        knob = max(w * knob_size, MIN_KNOB_SIZE)

        logger.debug("Geometry: D=%.1f hr=%.2f lr=%.2f Th=%.1f Tl=%.1f l=%.1f", w, hr, lr, th, tl, knob)
        return cls(
            diameter=w,
            hue_thickness=th,
            lightness_thickness=tl,
            shadow_blur=float(shadow_blur),
            hue_radius=hr,
            lightness_radius=lr,
            knob_half_size=knob,
        )

    # ------------------ DERIVED ------------------
    @property
    def size(self) -> int:
        """Pixel size of the square drawing surface."""
        return max(int(math.ceil(self.diameter)), 1)

    @property
    def center(self) -> Point:
        return (self.diameter * 0.5, self.diameter * 0.5)

    @property
    def has_lightness_ring(self) -> bool:
        return self.lightness_thickness > 0

    @property
    def hue_inner_radius(self) -> float:
        return self.hue_radius - self.hue_thickness * 0.5

    @property
    def saturation_travel(self) -> float:
        """Pointer distance that maps to full saturation while dragging the hue knob."""
        return self.hue_radius - self.knob_half_size

    @property
    def lightness_knob_radius(self) -> float:
        return self.lightness_thickness * 0.5

    @property
    def lightness_knob_rest(self) -> Point:
        """Lightness knob centre at lightness 0 (bottom of the ring)."""
        cx, cy = self.center
        return (cx - 1, cy + self.lightness_radius)

    def swatch_radius(self, fraction: float) -> float:
        return self.hue_inner_radius * fraction

    # ------------------ HIT REGIONS ------------------
    def in_hue_ring(self, distance: float) -> bool:
        return in_ring(distance, self.hue_radius, self.hue_thickness)

    def in_lightness_ring(self, distance: float) -> bool:
        return self.has_lightness_ring and in_ring(distance, self.lightness_radius, self.lightness_thickness)

    # ------------------ KNOB SHAPES ------------------
    def hue_knob_polygon(self, hue: float, saturation: float, use_saturation: bool) -> Triangle:
        """
        Arrow-shaped hue knob pointing outwards, rotated to ``hue`` degrees.

        With saturation control the tip travels from near the centre (s=0) to
        the inner edge of the hue ring (s=1); without it the knob stays at the edge.
        """
        cx, cy = self.center
        l = self.knob_half_size
        reach = saturation if use_saturation else 1.0
        kx = cx + l + (self.hue_inner_radius - l) * reach

        angle = math.radians(hue)
        return (
            rotate_point((kx - 1, cy), self.center, angle),
            rotate_point((kx - l, cy - l * 0.7), self.center, angle),
            rotate_point((kx - l, cy + l * 0.7), self.center, angle),
        )

    def lightness_knob_disc(self, third: float) -> Tuple[Point, float]:
        """Centre and radius of the lightness knob for a lightness/value fraction."""
        center = rotate_point(self.lightness_knob_rest, self.center, third_to_angle(third))
        return center, self.lightness_knob_radius

    def saturation_guide(self, hue: float) -> Tuple[Segment, Segment]:
        """Dark and light guide lines from the centre to the hue ring, offset by half a pixel."""
        cx, cy = self.center
        end_x = cx + self.hue_inner_radius
        angle = math.radians(hue)
        dark = (
            rotate_point((cx, cy - 0.5), self.center, angle),
            rotate_point((end_x, cy - 0.5), self.center, angle),
        )
        light = (
            rotate_point((cx, cy + 0.5), self.center, angle),
            rotate_point((end_x, cy + 0.5), self.center, angle),
        )
        return dark, light
