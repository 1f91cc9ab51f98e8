from __future__ import annotations

import logging
from typing import Hashable, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageColor, ImageDraw, ImageFilter

from ..colors import ColorState
from ..geometry import CoordinateGridCache, GeometryConfig
from ..gradients import GradientTable
from ..interaction.state import Mode
from ..options import WheelOptions
from ..types.geometry_types import Point

logger = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]

GUIDE_DARK: RGBA = (0, 0, 0, 255)
GUIDE_LIGHT: RGBA = (255, 255, 255, 255)
KNOB_OUTLINE: RGBA = (0, 0, 0, 255)


def rgba(color: str) -> RGBA:
    """CSS color string to an RGBA tuple."""
    return ImageColor.getcolor(color, "RGBA")  # type: ignore[return-value]


def ring_mask(distances: NDArray, radius: float, thickness: float) -> NDArray[np.bool_]:
    """Pixels strictly inside the annulus, as a boolean array."""
    half = thickness * 0.5
    return (distances > radius - half) & (distances < radius + half)


def theta_to_third(theta: NDArray) -> NDArray:
    """Vectorized angle (degrees, clockwise from +x) to lightness fraction; 0 at the bottom."""
    return (np.asarray(theta, dtype=float) / 360.0 + 0.75) % 1.0


def _bbox(center: Point, radius: float) -> Tuple[float, float, float, float]:
    cx, cy = center
    return (cx - radius, cy - radius, cx + radius, cy + radius)


def _shadow_layer(size: int, alpha: NDArray[np.uint8], color: RGBA, blur: float) -> Image.Image:
    layer = np.zeros((size, size, 4), dtype=np.uint8)
    layer[..., :3] = color[:3]
    layer[..., 3] = (alpha.astype(np.uint16) * color[3] // 255).astype(np.uint8)
    return Image.fromarray(layer).filter(ImageFilter.GaussianBlur(blur))


class Renderer:
    """
    Two-tier drawing of the control onto Pillow RGBA images.

    The static background (hue ring, optional lightness ring and shadow) is
    built from a :class:`GradientTable` and cached per configuration; each
    frame is a copy of it with the swatch, saturation guide and knobs drawn
    on top. Changing the color never rebuilds the background.
    """

    def __init__(self, grid_cache: Optional[CoordinateGridCache] = None) -> None:
        self._grid_cache = grid_cache if grid_cache is not None else CoordinateGridCache(max_entries=4)
        self._background: Optional[Image.Image] = None
        self._background_key: Optional[Hashable] = None
        self.rebuilds = 0

    # ------------------ BACKGROUND ------------------
    def background(self, geometry: GeometryConfig, table: GradientTable, shadow_color: str = "black") -> Image.Image:
        """The cached ring image for this configuration, built on first use."""
        key = (geometry, table.quality, table.has_lightness, shadow_color)
        if self._background is None or self._background_key != key:
            self._background = self._build_background(geometry, table, shadow_color)
            self._background_key = key
            self.rebuilds += 1
            logger.debug("Rebuilt ring background #%d (%dpx)", self.rebuilds, geometry.size)
        return self._background

    def invalidate(self) -> None:
        self._background = None
        self._background_key = None

    def _build_background(self, geometry: GeometryConfig, table: GradientTable, shadow_color: str) -> Image.Image:
        size = geometry.size
        distances, theta = self._grid_cache.get_grid(size, size, geometry.center)

        pixels = np.zeros((size, size, 4), dtype=np.uint8)

        hue_mask = ring_mask(distances, geometry.hue_radius, geometry.hue_thickness)
        pixels[hue_mask, :3] = table.np_hue_at(theta[hue_mask])
        pixels[hue_mask, 3] = 255

        if geometry.has_lightness_ring and table.has_lightness:
            light_mask = ring_mask(distances, geometry.lightness_radius, geometry.lightness_thickness)
            pixels[light_mask, :3] = table.np_lightness_at(theta_to_third(theta[light_mask]))
            pixels[light_mask, 3] = 255

        image = Image.fromarray(pixels)
        if geometry.shadow_blur > 0:
            alpha = hue_mask.astype(np.uint8) * 255
            shadow = _shadow_layer(size, alpha, rgba(shadow_color), geometry.shadow_blur)
            # Shadow only shows outside the ring.
            shadow_pixels = np.array(shadow)
            shadow_pixels[hue_mask, 3] = 0
            image = Image.alpha_composite(Image.fromarray(shadow_pixels), image)
        return image

    # ------------------ FRAME ------------------
    def render_frame(
        self,
        color: ColorState,
        geometry: GeometryConfig,
        table: GradientTable,
        settings: WheelOptions,
        mode: Mode = Mode.IDLE,
    ) -> Image.Image:
        """Compose the background with the swatch and knobs for ``color``."""
        frame = self.background(geometry, table, settings.shadow_color).copy()
        draw = ImageDraw.Draw(frame)

        if settings.show_color_spot:
            self._draw_swatch(draw, color, geometry, settings)

        if settings.change_saturation:
            dark, light = geometry.saturation_guide(color.hue)
            draw.line(dark, fill=GUIDE_DARK, width=1)
            draw.line(light, fill=GUIDE_LIGHT, width=1)

        polygon = geometry.hue_knob_polygon(color.hue, color.saturation, settings.change_saturation)
        if settings.hue_knob_shadow and geometry.shadow_blur > 0:
            frame = self._cast_shadow(frame, polygon, geometry, settings.shadow_color)
            draw = ImageDraw.Draw(frame)
        knob_color = settings.hue_knob_color_selected if mode is Mode.DRAGGING_HUE else settings.hue_knob_color
        draw.polygon(polygon, fill=rgba(knob_color), outline=KNOB_OUTLINE)

        if settings.change_lightness and geometry.has_lightness_ring:
            center, radius = geometry.lightness_knob_disc(color.third)
            selected = mode is Mode.DRAGGING_LIGHTNESS
            knob_color = settings.lightness_knob_color_selected if selected else settings.lightness_knob_color
            draw.ellipse(_bbox(center, radius), fill=KNOB_OUTLINE)
            if radius > 1:
                draw.ellipse(_bbox(center, radius - 1), fill=rgba(knob_color))

        return frame

    def _draw_swatch(
        self,
        draw: ImageDraw.ImageDraw,
        color: ColorState,
        geometry: GeometryConfig,
        settings: WheelOptions,
    ) -> None:
        radius = geometry.swatch_radius(settings.color_spot_width)
        if radius <= 0:
            return
        border = int(round(settings.color_spot_border))
        draw.ellipse(
            _bbox(geometry.center, radius),
            fill=color.rgb + (255,),
            outline=rgba(settings.color_spot_border_color) if border > 0 else None,
            width=max(border, 1),
        )

    def _cast_shadow(
        self,
        frame: Image.Image,
        polygon: Sequence[Point],
        geometry: GeometryConfig,
        shadow_color: str,
    ) -> Image.Image:
        mask = Image.new("L", frame.size, 0)
        ImageDraw.Draw(mask).polygon(list(polygon), fill=255)
        shadow = _shadow_layer(geometry.size, np.array(mask), rgba(shadow_color), geometry.shadow_blur)
        return Image.alpha_composite(frame, shadow)
