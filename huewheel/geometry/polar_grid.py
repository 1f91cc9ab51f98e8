from __future__ import annotations
from typing import Dict, Tuple

import numpy as np
from numpy.typing import NDArray


class CoordinateGridCache:
    """Lightweight per-pixel polar grid cache to avoid recomputation."""

    def __init__(self, max_entries: int = 10) -> None:
        self._cache: Dict[Tuple[int, int, Tuple[float, float]], Tuple[NDArray, NDArray]] = {}
        self._max_entries = max_entries

    def get_grid(self, width: int, height: int, center: Tuple[float, float]) -> Tuple[NDArray, NDArray]:
        """
        Distance and angle of every pixel centre relative to ``center``.

        Returns:
            (distances, theta) float32 arrays of shape (height, width); theta in
            degrees, [0, 360), measured clockwise from the positive x axis.
        """
        key = (width, height, center)
        if key not in self._cache:
            indices_matrix = np.indices((height, width), dtype=np.float32) + 0.5
            y_indices = indices_matrix[0] - center[1]
            x_indices = indices_matrix[1] - center[0]
            distances = np.sqrt(x_indices**2 + y_indices**2)
            theta = (np.degrees(np.arctan2(y_indices, x_indices)) + 360.0) % 360.0
            self._cache[key] = (distances, theta)

            if len(self._cache) > self._max_entries:
                oldest_key = next(iter(self._cache))
                del self._cache[oldest_key]

        return self._cache[key]

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
