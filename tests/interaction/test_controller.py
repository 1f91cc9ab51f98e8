import math

import pytest

from huewheel.colors import ColorState
from huewheel.geometry import GeometryConfig, centroid
from huewheel.interaction import HitRegion, InteractionController, KeyCommand, Mode
from huewheel.options import WheelOptions
from ..utils import on_circle


class Recorder:
    def __init__(self):
        self.log = []

    def redraw(self, mode):
        self.log.append(("redraw", mode))

    def notify(self, event):
        self.log.append(("notify", event))

    @property
    def events(self):
        return [item for kind, item in self.log if kind == "notify"]


def make_controller(color=None, **options):
    settings = WheelOptions.parse(**options)
    geometry = GeometryConfig.build(
        settings.diameter,
        shadow_blur=settings.shadow_blur,
        use_lightness=settings.change_lightness,
        knob_size=settings.hue_knob_size,
    )
    recorder = Recorder()
    controller = InteractionController(
        color or ColorState(), geometry, settings, redraw=recorder.redraw, notify=recorder.notify
    )
    return controller, recorder


def hue_knob_point(controller):
    color = controller.color
    return centroid(controller.geometry.hue_knob_polygon(color.hue, color.saturation, True))


def test_drag_session_sets_hue_and_returns_to_idle():
    controller, recorder = make_controller()
    center = controller.geometry.center

    assert controller.on_pointer_down(hue_knob_point(controller)) is HitRegion.HUE_KNOB
    assert controller.mode is Mode.DRAGGING_HUE

    assert controller.on_pointer_move(on_circle(center, 50, 90))
    controller.on_pointer_up()

    assert controller.color.hue == pytest.approx(90.0)
    assert controller.mode is Mode.IDLE

    before = (controller.color.triple, len(recorder.log))
    assert not controller.on_pointer_move(on_circle(center, 50, 200))
    assert (controller.color.triple, len(recorder.log)) == before


def test_knob_press_redraws_without_notifying():
    controller, recorder = make_controller()
    controller.on_pointer_down(hue_knob_point(controller))
    assert recorder.log == [("redraw", Mode.DRAGGING_HUE)]

    controller.on_pointer_up()
    assert recorder.log[-1] == ("redraw", Mode.IDLE)
    assert recorder.events == []


def test_move_commits_redraw_then_notify():
    controller, recorder = make_controller()
    center = controller.geometry.center
    controller.on_pointer_down(hue_knob_point(controller), is_touch=True)
    recorder.log.clear()

    point = on_circle(center, 30, 45)
    controller.on_pointer_move(point, is_touch=True)

    assert [kind for kind, _ in recorder.log] == ["redraw", "notify"]
    assert recorder.log[0][1] is Mode.DRAGGING_HUE
    event = recorder.events[0]
    assert event.hue == pytest.approx(45.0)
    assert event.rgb == controller.color.rgb
    assert (event.x, event.y) == pytest.approx(point)
    assert event.is_touch is True


def test_drag_maps_distance_to_saturation():
    controller, _ = make_controller()
    center = controller.geometry.center
    travel = controller.geometry.saturation_travel
    controller.on_pointer_down(hue_knob_point(controller))

    controller.on_pointer_move(on_circle(center, travel / 2, 10))
    assert controller.color.saturation == pytest.approx(0.5)

    controller.on_pointer_move(on_circle(center, travel * 3, 10))
    assert controller.color.saturation == 1.0

    controller.on_pointer_move(center)
    assert controller.color.saturation == 0.0


def test_drag_keeps_saturation_when_disabled():
    controller, _ = make_controller(color=ColorState(saturation=0.6), change_saturation=False)
    center = controller.geometry.center
    polygon = controller.geometry.hue_knob_polygon(0, 0.6, False)

    assert controller.on_pointer_down(centroid(polygon)) is HitRegion.HUE_KNOB
    controller.on_pointer_move(on_circle(center, 5, 120))
    assert controller.color.hue == pytest.approx(120.0)
    assert controller.color.saturation == 0.6


def test_ring_click_sets_hue_without_drag():
    controller, recorder = make_controller()
    geometry = controller.geometry

    region = controller.on_pointer_down(on_circle(geometry.center, geometry.hue_radius, 180))
    assert region is HitRegion.HUE_RING
    assert controller.mode is Mode.IDLE
    assert controller.color.hue == pytest.approx(180.0)
    assert len(recorder.events) == 1


def test_lightness_knob_drag():
    controller, recorder = make_controller()
    geometry = controller.geometry
    knob_center, _ = geometry.lightness_knob_disc(controller.color.third)

    assert controller.on_pointer_down(knob_center) is HitRegion.LIGHTNESS_KNOB
    assert controller.mode is Mode.DRAGGING_LIGHTNESS

    # Straight down is lightness 0, distance is irrelevant.
    controller.on_pointer_move((geometry.center[0], geometry.center[1] + 10))
    assert controller.color.third == pytest.approx(0.0)
    controller.on_pointer_move(on_circle(geometry.center, 200, 180))
    assert controller.color.third == pytest.approx(0.25)
    assert controller.color.hue == 0.0

    controller.on_pointer_cancel()
    assert controller.mode is Mode.IDLE
    assert recorder.log[-1] == ("redraw", Mode.IDLE)


def test_lightness_ring_click_requires_opt_in():
    controller, recorder = make_controller()
    geometry = controller.geometry
    point = on_circle(geometry.center, geometry.lightness_radius, 0)

    assert controller.on_pointer_down(point) is HitRegion.LIGHTNESS_RING
    assert controller.color.third == 0.5
    assert recorder.log == []

    controller.settings.lightness_ring_clickable = True
    controller.on_pointer_down(point)
    assert controller.color.third == pytest.approx(0.75)
    assert len(recorder.events) == 1


def test_no_lightness_knob_without_ring():
    controller, _ = make_controller(change_lightness=False)
    geometry = controller.geometry
    assert not geometry.has_lightness_ring
    point = on_circle(geometry.center, geometry.lightness_radius + 2, 270)
    assert controller.hit_test(point) is HitRegion.NONE


def test_background_press_is_noop():
    controller, recorder = make_controller()
    assert controller.on_pointer_down(controller.geometry.center) is HitRegion.NONE
    assert controller.on_pointer_down((1, 1)) is HitRegion.NONE
    assert recorder.log == []


def test_non_finite_pointer_is_ignored():
    controller, recorder = make_controller()
    assert controller.on_pointer_down((math.nan, 10)) is HitRegion.NONE
    assert not controller.on_pointer_move((math.inf, 10))
    assert recorder.log == []


def test_cursor_hints():
    controller, _ = make_controller()
    geometry = controller.geometry
    assert controller.cursor_for(hue_knob_point(controller)) == "pointer"
    assert controller.cursor_for(on_circle(geometry.center, geometry.hue_radius, 100)) == "crosshair"
    assert controller.cursor_for(geometry.center) == "default"
    assert controller.cursor_for((math.nan, 0)) == "default"

    lightness_ring = on_circle(geometry.center, geometry.lightness_radius, 0)
    assert controller.cursor_for(lightness_ring) == "default"
    controller.settings.lightness_ring_clickable = True
    assert controller.cursor_for(lightness_ring) == "crosshair"


# ------------------ KEYBOARD ------------------
@pytest.mark.parametrize("code, modifier, expected_hue", [
    (33, False, 359.0),  # page up turns hue backwards
    (34, False, 1.0),
    (33, True, 350.0),
    (34, True, 10.0),
])
def test_hue_keys(code, modifier, expected_hue):
    controller, recorder = make_controller()
    assert controller.on_key(code, modifier)
    assert controller.color.hue == pytest.approx(expected_hue)
    assert [kind for kind, _ in recorder.log] == ["redraw", "notify"]


def test_saturation_and_lightness_keys():
    controller, _ = make_controller(color=ColorState(saturation=0.5, third=0.5))
    controller.on_key(37)
    assert controller.color.saturation == pytest.approx(0.49)
    controller.on_key(39, modifier=True)
    assert controller.color.saturation == pytest.approx(0.59)
    controller.on_key(38)
    assert controller.color.third == pytest.approx(0.51)
    controller.on_key(40, modifier=True)
    assert controller.color.third == pytest.approx(0.41)


def test_key_commands_clamp():
    controller, _ = make_controller()
    for _ in range(5):
        controller.on_key(KeyCommand.SATURATION_INCREASE, modifier=True)
    assert controller.color.saturation == 1.0


def test_custom_deltas_and_bindings():
    controller, _ = make_controller(hueKeyDelta=5, shiftKeyFactor=3, hueKeyCodeDown=68)
    assert controller.on_key(68, modifier=True)
    assert controller.color.hue == pytest.approx(15.0)
    assert not controller.on_key(34)


def test_lightness_drag_stops_once_lightness_is_disabled():
    controller, recorder = make_controller()
    knob_center, _ = controller.geometry.lightness_knob_disc(controller.color.third)
    controller.on_pointer_down(knob_center)
    controller.settings.change_lightness = False

    cx, cy = controller.geometry.center
    assert controller.on_pointer_move((cx, cy + 10)) is False
    assert controller.color.third == 0.5
    assert recorder.events == []


def test_disabled_axes_and_unknown_keys_are_ignored():
    controller, recorder = make_controller(change_saturation=False, change_lightness=False)
    assert not controller.on_key(37)
    assert not controller.on_key(KeyCommand.LIGHTNESS_INCREASE)
    assert not controller.on_key(999)
    assert recorder.log == []


def test_keys_can_be_disabled():
    controller, recorder = make_controller(use_keys=False)
    assert not controller.on_key(KeyCommand.HUE_INCREASE)
    assert controller.color.hue == 0.0
    assert recorder.log == []
