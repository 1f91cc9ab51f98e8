from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Union

from ..colors import ChangeEvent, ColorState
from ..geometry import (
    GeometryConfig,
    angle_to_hue,
    angle_to_third,
    distance_to_saturation,
    point_in_disc,
    point_in_polygon,
    polar,
)
from ..options import WheelOptions
from ..types.geometry_types import Point
from .keys import KeyCommand, key_bindings
from .state import HitRegion, InteractionState, Mode

logger = logging.getLogger(__name__)

Redraw = Callable[[Mode], None]
Notify = Callable[[ChangeEvent], None]

CURSORS = {
    HitRegion.HUE_KNOB: "pointer",
    HitRegion.LIGHTNESS_KNOB: "pointer",
    HitRegion.HUE_RING: "crosshair",
    HitRegion.NONE: "default",
}


def _finite_point(point: Point) -> bool:
    try:
        return math.isfinite(point[0]) and math.isfinite(point[1])
    except (TypeError, IndexError):
        return False


class InteractionController:
    """
    Pointer/keyboard state machine driving a :class:`ColorState`.

    States are ``IDLE``, ``DRAGGING_HUE`` and ``DRAGGING_LIGHTNESS``. Every
    transition that changes the color runs, in order: validate (inside
    :class:`ColorState`), ``redraw(mode)``, then ``notify(event)``. Pressing
    or releasing a knob only redraws (the selected-knob highlight changes,
    the color does not).

    ``geometry`` is replaced by the owner whenever sizing changes; knob shapes
    are recomputed from it and the current color on every hit-test, the same
    way the renderer computes them for drawing.
    """

    def __init__(
        self,
        color: ColorState,
        geometry: GeometryConfig,
        settings: WheelOptions,
        redraw: Redraw,
        notify: Notify,
    ) -> None:
        self.color = color
        self.geometry = geometry
        self.settings = settings
        self.state = InteractionState()
        self._redraw = redraw
        self._notify = notify

    @property
    def mode(self) -> Mode:
        return self.state.mode

    # ------------------ HIT TESTING ------------------
    def hit_test(self, point: Point) -> HitRegion:
        """Classify ``point``: knobs first (hue, then lightness), then rings."""
        geometry = self.geometry
        settings = self.settings

        hue_knob = geometry.hue_knob_polygon(self.color.hue, self.color.saturation, settings.change_saturation)
        if point_in_polygon(point, hue_knob):
            return HitRegion.HUE_KNOB

        if settings.change_lightness and geometry.has_lightness_ring:
            center, radius = geometry.lightness_knob_disc(self.color.third)
            if point_in_disc(point, center, radius):
                return HitRegion.LIGHTNESS_KNOB

        distance = polar(geometry.center, point).distance
        if geometry.in_hue_ring(distance):
            return HitRegion.HUE_RING
        if settings.change_lightness and geometry.in_lightness_ring(distance):
            return HitRegion.LIGHTNESS_RING
        return HitRegion.NONE

    def cursor_for(self, point: Point) -> str:
        """Cursor hint for an idle pointer hovering at ``point``."""
        if not _finite_point(point):
            return CURSORS[HitRegion.NONE]
        region = self.hit_test(point)
        if region is HitRegion.LIGHTNESS_RING:
            return "crosshair" if self.settings.lightness_ring_clickable else "default"
        return CURSORS[region]

    # ------------------ POINTER ------------------
    def on_pointer_down(self, point: Point, is_touch: bool = False) -> HitRegion:
        """
        Start a drag on a knob, or set hue/lightness directly from a ring click.

        Returns:
            The region that was hit.
        """
        if not _finite_point(point):
            return HitRegion.NONE
        self.state.track(point, is_touch)
        region = self.hit_test(point)

        if region is HitRegion.HUE_KNOB:
            self.state.mode = Mode.DRAGGING_HUE
            self._redraw(self.state.mode)
        elif region is HitRegion.LIGHTNESS_KNOB:
            self.state.mode = Mode.DRAGGING_LIGHTNESS
            self._redraw(self.state.mode)
        elif region is HitRegion.HUE_RING:
            sample = polar(self.geometry.center, point)
            self.color.set(hue=angle_to_hue(sample.angle))
            self._commit()
        elif region is HitRegion.LIGHTNESS_RING and self.settings.lightness_ring_clickable:
            sample = polar(self.geometry.center, point)
            self.color.set(third=angle_to_third(sample.angle))
            self._commit()

        logger.debug("pointer down at (%.1f, %.1f): %s -> %s", point[0], point[1], region.value, self.mode.value)
        return region

    def on_pointer_move(self, point: Point, is_touch: bool = False) -> bool:
        """
        Update the dragged channel(s) from ``point``.

        Returns:
            True if the color was updated (only while dragging).
        """
        if not _finite_point(point):
            return False
        self.state.track(point, is_touch)
        mode = self.state.mode
        if not mode.is_dragging:
            return False

        sample = polar(self.geometry.center, point)
        if mode is Mode.DRAGGING_HUE:
            saturation = None
            if self.settings.change_saturation:
                saturation = distance_to_saturation(sample.distance, self.geometry.saturation_travel)
            self.color.set(hue=angle_to_hue(sample.angle), saturation=saturation)
        else:
            if not self.settings.change_lightness:
                return False
            self.color.set(third=angle_to_third(sample.angle))

        self._commit()
        return True

    def on_pointer_up(self) -> None:
        """End any drag; later moves are ignored until the next press."""
        was_dragging = self.state.mode.is_dragging
        self.state.release()
        if was_dragging:
            self._redraw(self.state.mode)

    def on_pointer_cancel(self) -> None:
        """Pointer capture lost; same as a release."""
        self.on_pointer_up()

    # ------------------ KEYBOARD ------------------
    def on_key(self, command: Union[KeyCommand, int], modifier: bool = False) -> bool:
        """
        Apply a key command (or a raw key code looked up in the bindings).

        Returns:
            True if the color changed and a notification was sent.
        """
        settings = self.settings
        if not settings.use_keys:
            return False

        if not isinstance(command, KeyCommand):
            if not isinstance(command, int) or isinstance(command, bool):
                logger.debug("Ignoring key %r", command)
                return False
            command = key_bindings(settings).get(command)
            if command is None:
                return False

        factor = settings.key_shift_factor if modifier else 1.0
        axis = command.axis
        if axis == "hue":
            self.color.nudge(hue=command.sign * settings.hue_key_delta * factor)
        elif axis == "saturation":
            if not settings.change_saturation:
                return False
            self.color.nudge(saturation=command.sign * settings.saturation_key_delta * factor * 0.01)
        else:
            if not settings.change_lightness:
                return False
            self.color.nudge(third=command.sign * settings.lightness_key_delta * factor * 0.01)

        self._commit()
        return True

    # ------------------ COMMIT ------------------
    def _commit(self) -> None:
        self._redraw(self.state.mode)
        self._notify(ChangeEvent.capture(self.color, self.state.pointer, self.state.is_touch))

    def __repr__(self) -> str:
        return f"InteractionController(mode={self.mode.value}, color={self.color!r})"
