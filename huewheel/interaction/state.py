from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..types.geometry_types import Point


class Mode(str, Enum):
    IDLE = "idle"
    DRAGGING_HUE = "dragging_hue"
    DRAGGING_LIGHTNESS = "dragging_lightness"

    @property
    def is_dragging(self) -> bool:
        return self is not Mode.IDLE


class HitRegion(str, Enum):
    """What lies under a pointer sample, in hit-test priority order."""
    HUE_KNOB = "hue_knob"
    LIGHTNESS_KNOB = "lightness_knob"
    HUE_RING = "hue_ring"
    LIGHTNESS_RING = "lightness_ring"
    NONE = "none"


@dataclass
class InteractionState:
    """Transient per-gesture state; reset to IDLE on release."""

    mode: Mode = Mode.IDLE
    x: Optional[float] = None
    y: Optional[float] = None
    is_touch: bool = False

    @property
    def pointer(self) -> Optional[Point]:
        if self.x is None or self.y is None:
            return None
        return (self.x, self.y)

    def track(self, point: Point, is_touch: bool) -> None:
        self.x, self.y = float(point[0]), float(point[1])
        self.is_touch = bool(is_touch)

    def release(self) -> None:
        self.mode = Mode.IDLE
