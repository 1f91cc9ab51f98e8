from __future__ import annotations

import logging
import math
import numbers
import time
from typing import Any, Callable, Mapping, Optional, Union

from PIL import Image

from .colors import ChangeEvent, ColorState
from .conversions import clamp01, to_rgb, wrap_hue
from .geometry import (
    GeometryConfig,
    clamp_hue_thickness,
    clamp_lightness_thickness,
    default_lightness_thickness,
)
from .gradients import GradientTable
from .interaction import HitRegion, InteractionController, KeyCommand, Mode
from .notify import CallLater, ChangeCallback, ChangeNotifier, Debouncer
from .options import WheelOptions
from .render import Renderer
from .types.color_types import ColorSpace, ColorTriple, RGBTuple
from .types.geometry_types import Point

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def _all_numbers(*values: Any) -> bool:
    return all(_is_number(v) for v in values)


class HueWheel:
    """
    Interactive hue ring color picker.

    Owns the color state, the derived geometry, the gradient table, the
    renderer and the debounced change notifier. Host code feeds it pointer
    samples and key commands and displays :attr:`image`.

    Nothing here raises for malformed input: out-of-range values are clamped
    or wrapped, and values of the wrong type are ignored.

    Example:
        >>> wheel = HueWheel(diameter=200, on_change=print)
        >>> wheel.set_color(120, 1, 0.5)
        True
        >>> wheel.flush()  # deliver the pending change now
        True
    """

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        call_later: Optional[CallLater] = None,
        clock: Callable[[], float] = time.monotonic,
        **kwargs: Any,
    ) -> None:
        self.settings = WheelOptions.parse(options, **kwargs)
        settings = self.settings

        if settings.rgb is not None:
            self.color = ColorState.from_rgb(settings.rgb, settings.color_space)
        else:
            self.color = ColorState(settings.hue, settings.saturation, settings.lightness, settings.color_space)

        if settings.thickness_hue is not None:
            settings.thickness_hue = clamp_hue_thickness(settings.thickness_hue, settings.diameter)
        if settings.thickness_lightness is not None:
            settings.thickness_lightness = clamp_lightness_thickness(settings.thickness_lightness, settings.diameter)

        self.table = GradientTable(settings.quality, include_lightness=settings.change_lightness)
        self.geometry = self._build_geometry()
        self.renderer = Renderer()
        self.notifier = ChangeNotifier(settings.on_change, Debouncer(call_later=call_later, clock=clock))
        self.controller = InteractionController(
            self.color, self.geometry, settings, redraw=self.redraw, notify=self.notifier.notify
        )

        self._image: Optional[Image.Image] = None
        self.redraw()
        self.notifier.notify(ChangeEvent.capture(self.color))
        logger.debug("Created %r", self)

    # ------------------ INTERNALS ------------------
    def _build_geometry(self) -> GeometryConfig:
        settings = self.settings
        return GeometryConfig.build(
            settings.diameter,
            hue_thickness=settings.thickness_hue,
            lightness_thickness=settings.thickness_lightness,
            shadow_blur=settings.shadow_blur,
            use_lightness=settings.change_lightness,
            knob_size=settings.hue_knob_size,
        )

    def _rebuild(self) -> None:
        """Recompute geometry (and the table if the lightness ramp changed), then redraw."""
        if self.table.has_lightness != self.settings.change_lightness:
            self.table = GradientTable(self.settings.quality, include_lightness=self.settings.change_lightness)
        self.geometry = self._build_geometry()
        self.controller.geometry = self.geometry
        self.redraw()

    def _commit(self) -> None:
        self.redraw()
        state = self.controller.state
        self.notifier.notify(ChangeEvent.capture(self.color, state.pointer, state.is_touch))

    def _ignore(self, name: str, value: Any) -> None:
        logger.warning("Ignoring invalid value %r for %s", value, name)

    def redraw(self, mode: Optional[Mode] = None) -> None:
        """Compose a new frame from the current color; the ring background is reused."""
        if mode is None:
            mode = self.controller.mode
        self._image = self.renderer.render_frame(self.color, self.geometry, self.table, self.settings, mode)

    # ------------------ IMAGES ------------------
    @property
    def image(self) -> Image.Image:
        """Latest composed frame (RGBA)."""
        if self._image is None:
            self.redraw()
        return self._image

    @property
    def background(self) -> Image.Image:
        """Cached ring background (RGBA)."""
        return self.renderer.background(self.geometry, self.table, self.settings.shadow_color)

    @property
    def size(self) -> int:
        return self.geometry.size

    # ------------------ COLOR ------------------
    def get_color(self) -> ColorTriple:
        """``(hue, saturation, lightness-or-value)`` in the active color space."""
        return self.color.triple

    def set_color(self, hue: float, saturation: float, third: float) -> bool:
        """
        Set the color in the active color space, clamping/wrapping as needed.

        Returns:
            False (and nothing changes) if any argument is not a finite number.
        """
        if not _all_numbers(hue, saturation, third):
            self._ignore("color", (hue, saturation, third))
            return False
        self.color.set(hue, saturation, third)
        self._commit()
        return True

    def get_rgb(self) -> RGBTuple:
        return self.color.rgb

    def set_rgb(self, r: float, g: float, b: float) -> bool:
        """Set the color from RGB; channels are rounded and clamped to [0, 255]."""
        if not _all_numbers(r, g, b):
            self._ignore("rgb", (r, g, b))
            return False
        self.color.set_rgb(r, g, b)
        self._commit()
        return True

    def _space_accessor(self, space: ColorSpace, values: tuple) -> ColorTriple:
        if all(v is None for v in values):
            return self.color.expressed_in(space)
        if not _all_numbers(*values):
            self._ignore(space.value, values)
            return self.color.expressed_in(space)
        h, s, t = values
        if space == self.color.space:
            self.color.set(h, s, t)
        else:
            self.color.set_rgb(*to_rgb((wrap_hue(h), clamp01(s), clamp01(t)), space))
        self._commit()
        return self.color.expressed_in(space)

    def hsl(self, hue: Optional[float] = None, saturation: Optional[float] = None,
            lightness: Optional[float] = None) -> ColorTriple:
        """Read the color as HSL, or set it from an HSL triple (any active space)."""
        return self._space_accessor(ColorSpace.HSL, (hue, saturation, lightness))

    def hsv(self, hue: Optional[float] = None, saturation: Optional[float] = None,
            value: Optional[float] = None) -> ColorTriple:
        """Read the color as HSV, or set it from an HSV triple (any active space)."""
        return self._space_accessor(ColorSpace.HSV, (hue, saturation, value))

    @property
    def color_space(self) -> ColorSpace:
        return self.color.space

    def set_color_space(self, space: Union[ColorSpace, str]) -> ColorSpace:
        """
        Switch between ``'hsl'`` and ``'hsv'``.

        Returns:
            The active space afterwards; an unknown token changes nothing.
        """
        parsed = ColorSpace.parse(space)
        if parsed is None:
            self._ignore("color space", space)
            return self.color.space
        if self.color.to_space(parsed):
            self.settings.color_space = parsed
            self._commit()
        return self.color.space

    # ------------------ TOGGLES ------------------
    def _set_flag(self, name: str, value: Any) -> bool:
        if not isinstance(value, bool):
            self._ignore(name, value)
            return False
        if getattr(self.settings, name) == value:
            return False
        setattr(self.settings, name, value)
        return True

    @property
    def show_color_spot(self) -> bool:
        return self.settings.show_color_spot

    @show_color_spot.setter
    def show_color_spot(self, value: bool) -> None:
        if self._set_flag("show_color_spot", value):
            self.redraw()

    @property
    def change_saturation(self) -> bool:
        return self.settings.change_saturation

    @change_saturation.setter
    def change_saturation(self, value: bool) -> None:
        if self._set_flag("change_saturation", value):
            self.redraw()

    @property
    def change_lightness(self) -> bool:
        return self.settings.change_lightness

    @change_lightness.setter
    def change_lightness(self, value: bool) -> None:
        if self._set_flag("change_lightness", value):
            if not value and self.controller.mode is Mode.DRAGGING_LIGHTNESS:
                self.controller.state.release()
            self._rebuild()

    @property
    def lightness_clickable(self) -> bool:
        return self.settings.lightness_ring_clickable

    @lightness_clickable.setter
    def lightness_clickable(self, value: bool) -> None:
        self._set_flag("lightness_ring_clickable", value)

    # ------------------ SIZES ------------------
    @property
    def thickness_hue(self) -> float:
        return self.geometry.hue_thickness

    @thickness_hue.setter
    def thickness_hue(self, value: float) -> None:
        if not _is_number(value):
            self._ignore("thickness_hue", value)
            return
        self.settings.thickness_hue = clamp_hue_thickness(float(value), self.settings.diameter)
        self._rebuild()

    @property
    def thickness_lightness(self) -> float:
        """Lightness ring thickness, also reported while the ring is hidden."""
        if self.geometry.has_lightness_ring:
            return self.geometry.lightness_thickness
        if self.settings.thickness_lightness is not None:
            return self.settings.thickness_lightness
        return default_lightness_thickness(self.settings.diameter)

    @thickness_lightness.setter
    def thickness_lightness(self, value: float) -> None:
        if not _is_number(value):
            self._ignore("thickness_lightness", value)
            return
        self.settings.thickness_lightness = clamp_lightness_thickness(float(value), self.settings.diameter)
        self._rebuild()

    @property
    def color_spot_radius(self) -> float:
        """Swatch radius as a fraction of the hue ring's inner radius."""
        return self.settings.color_spot_width

    @color_spot_radius.setter
    def color_spot_radius(self, value: float) -> None:
        if not _is_number(value):
            self._ignore("color_spot_radius", value)
            return
        self.settings.color_spot_width = clamp01(value)
        self.redraw()

    # ------------------ CALLBACK ------------------
    @property
    def on_change(self) -> Optional[ChangeCallback]:
        return self.notifier.callback

    @on_change.setter
    def on_change(self, callback: Optional[ChangeCallback]) -> None:
        if callback is not None and not callable(callback):
            self._ignore("on_change", callback)
            return
        self.notifier.callback = callback

    def poll(self) -> bool:
        """Deliver the pending change if its debounce delay has elapsed."""
        return self.notifier.poll()

    def flush(self) -> bool:
        """Deliver the pending change immediately."""
        return self.notifier.flush()

    # ------------------ INPUT ------------------
    @property
    def mode(self) -> Mode:
        return self.controller.mode

    def on_pointer_down(self, point: Point, is_touch: bool = False) -> HitRegion:
        return self.controller.on_pointer_down(point, is_touch)

    def on_pointer_move(self, point: Point, is_touch: bool = False) -> bool:
        return self.controller.on_pointer_move(point, is_touch)

    def on_pointer_up(self) -> None:
        self.controller.on_pointer_up()

    def on_pointer_cancel(self) -> None:
        self.controller.on_pointer_cancel()

    def on_key(self, command: Union[KeyCommand, int], modifier: bool = False) -> bool:
        return self.controller.on_key(command, modifier)

    def hit_test(self, point: Point) -> HitRegion:
        return self.controller.hit_test(point)

    def cursor_for(self, point: Point) -> str:
        return self.controller.cursor_for(point)

    def __repr__(self) -> str:
        return f"HueWheel(diameter={self.settings.diameter:g}, {self.color!r})"
