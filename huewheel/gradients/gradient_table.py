from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import RGBTuple

logger = logging.getLogger(__name__)

ColorStop = Tuple[float, RGBTuple]

# red → yellow → green → cyan → blue → magenta → red
HUE_STOPS: Tuple[ColorStop, ...] = (
    (0.0, (255, 0, 0)),
    (1.0 / 6.0, (255, 255, 0)),
    (2.0 / 6.0, (0, 255, 0)),
    (3.0 / 6.0, (0, 255, 255)),
    (4.0 / 6.0, (0, 0, 255)),
    (5.0 / 6.0, (255, 0, 255)),
    (1.0, (255, 0, 0)),
)

LIGHTNESS_STOPS: Tuple[ColorStop, ...] = (
    (0.0, (0, 0, 0)),
    (1.0, (255, 255, 255)),
)


def sample_ramp(stops: Sequence[ColorStop], steps: int) -> NDArray[np.uint8]:
    """
    Sample a piecewise-linear RGB ramp at ``steps`` evenly spaced positions.

    Sample ``i`` sits at position ``i / steps`` so that the ramp can be wrapped
    around a full circle without duplicating the first color at the end.

    Args:
        stops: (position, rgb) pairs with positions ascending in [0, 1]
        steps: Number of samples

    Returns:
        uint8 array of shape (steps, 3)
    """
    if steps < 1:
        raise ValueError("steps must be >= 1")
    if len(stops) < 2:
        raise ValueError("At least 2 stops are required for a ramp")

    positions = np.array([p for p, _ in stops], dtype=float)
    colors = np.array([c for _, c in stops], dtype=float)
    u = np.arange(steps, dtype=float) / steps

    channels = [np.interp(u, positions, colors[:, ch]) for ch in range(3)]
    ramp = np.floor(np.stack(channels, axis=-1) + 0.5)
    return np.clip(ramp, 0, 255).astype(np.uint8)


class GradientTable:
    """
    Precomputed color lookup for the hue ring and the lightness ring.

    The hue ramp holds ``360 * quality`` samples of the pure spectrum; the
    optional lightness ramp holds the same number of grayscale samples from
    black to white. Both arrays are read-only once built; a new configuration
    means a new table.

    ``quality`` should be a power of two for exact one-degree step alignment;
    other positive integers still give a valid, less evenly stepped ramp.
    """
    __slots__ = ('quality', 'hue', 'lightness')

    def __init__(self, quality: int = 2, include_lightness: bool = True) -> None:
        if isinstance(quality, bool) or not isinstance(quality, (int, np.integer)):
            raise TypeError(f"quality must be an integer, got {type(quality).__name__}")
        if quality < 1:
            raise ValueError("quality must be a positive integer")

        self.quality = int(quality)
        size = 360 * self.quality

        self.hue: NDArray[np.uint8] = sample_ramp(HUE_STOPS, size)
        self.hue.setflags(write=False)

        self.lightness: Optional[NDArray[np.uint8]] = None
        if include_lightness:
            self.lightness = sample_ramp(LIGHTNESS_STOPS, size)
            self.lightness.setflags(write=False)

        logger.debug("Built gradient table: %d samples (lightness=%s)", size, include_lightness)

    @property
    def size(self) -> int:
        return len(self.hue)

    @property
    def step(self) -> float:
        """Angular distance (degrees) between neighbouring samples."""
        return 360.0 / self.size

    @property
    def has_lightness(self) -> bool:
        return self.lightness is not None

    # ------------------ LOOKUPS ------------------
    def index_for_angle(self, degrees: float) -> int:
        """Nearest sample index for an angle; any real wraps onto the table."""
        return int(math.floor(degrees / self.step + 0.5)) % self.size

    def index_for_fraction(self, fraction: float) -> int:
        """Nearest sample index for a position in [0, 1) around the ring."""
        return int(math.floor(fraction * self.size + 0.5)) % self.size

    def hue_at(self, degrees: float) -> RGBTuple:
        r, g, b = self.hue[self.index_for_angle(degrees)]
        return int(r), int(g), int(b)

    def lightness_at(self, fraction: float) -> RGBTuple:
        if self.lightness is None:
            raise ValueError("gradient table was built without a lightness ramp")
        r, g, b = self.lightness[self.index_for_fraction(fraction)]
        return int(r), int(g), int(b)

    def np_hue_at(self, degrees: NDArray) -> NDArray[np.uint8]:
        """Vectorized: colors for an array of angles, shape ``degrees.shape + (3,)``."""
        idx = np.floor(np.asarray(degrees, dtype=float) / self.step + 0.5).astype(np.int64) % self.size
        return self.hue[idx]

    def np_lightness_at(self, fractions: NDArray) -> NDArray[np.uint8]:
        """Vectorized: grayscale samples for an array of ring positions in [0, 1)."""
        if self.lightness is None:
            raise ValueError("gradient table was built without a lightness ramp")
        idx = np.floor(np.asarray(fractions, dtype=float) * self.size + 0.5).astype(np.int64) % self.size
        return self.lightness[idx]

    def __repr__(self) -> str:
        return f"GradientTable(quality={self.quality}, size={self.size}, lightness={self.has_lightness})"
