from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
RGBTuple = Tuple[int, int, int]
ColorTriple = Tuple[float, float, float]


class ColorSpace(str, Enum):
    HSL = "hsl"
    HSV = "hsv"

    @classmethod
    def parse(cls, token: object) -> "ColorSpace | None":
        """Return the matching space for ``token``, or None if it is not recognised."""
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            try:
                return cls(token.lower())
            except ValueError:
                return None
        return None
