from __future__ import annotations

import math
from typing import NamedTuple, Sequence

from boundednumbers import clamp

from ..types.geometry_types import Point

TWO_PI = 2.0 * math.pi
HALF_PI = 0.5 * math.pi


class PolarSample(NamedTuple):
    distance: float
    angle: float  # radians, atan2 convention (-π, π]


def polar(center: Point, point: Point) -> PolarSample:
    """Distance and angle of ``point`` as seen from ``center`` (y grows downwards)."""
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return PolarSample(math.sqrt(dx * dx + dy * dy), math.atan2(dy, dx))


def in_ring(distance: float, radius: float, thickness: float) -> bool:
    """True when ``distance`` falls strictly inside the annulus of the given centre-line radius."""
    half = thickness * 0.5
    return radius - half < distance < radius + half


def normalize_angle(angle: float) -> float:
    """Normalize angle (degrees) to [0, 360) range."""
    angle = angle % 360.0
    return 0.0 if angle >= 360.0 else angle


def angle_to_hue(angle: float) -> float:
    """Pointer angle (radians) to hue in degrees, [0, 360)."""
    degrees = math.degrees(angle)
    if degrees < 0:
        degrees += 360.0
    return normalize_angle(degrees)


def angle_to_third(angle: float) -> float:
    """
    Pointer angle (radians) to a lightness/value fraction in [0, 1).

    Angle π/2 (straight down, where the lightness knob rests at 0) maps to 0;
    the fraction grows clockwise on screen.
    """
    return ((angle + HALF_PI) / TWO_PI + 0.5) % 1.0


def third_to_angle(third: float) -> float:
    """Rotation (radians) applied to the lightness knob's rest position."""
    return TWO_PI * third


def distance_to_saturation(distance: float, travel: float) -> float:
    """Linear map of ``[0, travel]`` onto ``[0, 1]``, clamped at both ends."""
    if travel <= 0:
        return 1.0
    return float(clamp(distance, 0.0, travel)) / travel


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotate ``point`` about ``center`` by ``angle`` radians (clockwise on screen)."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return (
        center[0] + dx * cos_a - dy * sin_a,
        center[1] + dx * sin_a + dy * cos_a,
    )


def point_in_polygon(point: Point, vertices: Sequence[Point]) -> bool:
    """Inclusive point-in-convex-polygon test (vertices in either winding order)."""
    x, y = point
    sign = 0
    n = len(vertices)
    for i in range(n):
        x0, y0 = vertices[i]
        x1, y1 = vertices[(i + 1) % n]
        cross = (x1 - x0) * (y - y0) - (y1 - y0) * (x - x0)
        if cross == 0:
            continue
        side = 1 if cross > 0 else -1
        if sign == 0:
            sign = side
        elif side != sign:
            return False
    return True


def point_in_disc(point: Point, center: Point, radius: float) -> bool:
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return dx * dx + dy * dy <= radius * radius


def centroid(vertices: Sequence[Point]) -> Point:
    n = len(vertices)
    return (
        sum(v[0] for v in vertices) / n,
        sum(v[1] for v in vertices) / n,
    )
