from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..types.geometry_types import Point
from .color_state import ColorState


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """Snapshot delivered to the change callback.

    ``lightness`` and ``value`` both carry the control's third channel so a
    handler can read whichever name matches the active color space.
    """

    hue: float
    saturation: float
    lightness: float
    value: float
    red: int
    green: int
    blue: int
    x: Optional[float] = None
    y: Optional[float] = None
    is_touch: bool = False

    @classmethod
    def capture(cls, color: ColorState, pointer: Optional[Point] = None, is_touch: bool = False) -> "ChangeEvent":
        x, y = pointer if pointer is not None else (None, None)
        r, g, b = color.rgb
        return cls(
            hue=color.hue,
            saturation=color.saturation,
            lightness=color.third,
            value=color.third,
            red=r,
            green=g,
            blue=b,
            x=x,
            y=y,
            is_touch=is_touch,
        )

    @property
    def rgb(self):
        return (self.red, self.green, self.blue)

    def as_dict(self) -> Dict[str, Any]:
        """Short-key mapping (``h, s, l, v, r, g, b, x, y, is_touch``)."""
        return {
            "h": self.hue,
            "s": self.saturation,
            "l": self.lightness,
            "v": self.value,
            "r": self.red,
            "g": self.green,
            "b": self.blue,
            "x": self.x,
            "y": self.y,
            "is_touch": self.is_touch,
        }
