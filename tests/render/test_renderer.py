import numpy as np
import pytest

from huewheel.colors import ColorState
from huewheel.geometry import GeometryConfig, centroid
from huewheel.gradients import GradientTable
from huewheel.interaction import Mode
from huewheel.options import WheelOptions
from huewheel.render import Renderer, rgba, ring_mask, theta_to_third
from ..utils import get_pixel


@pytest.fixture
def geometry():
    return GeometryConfig.build(250)


@pytest.fixture
def table():
    return GradientTable(quality=2)


def _close(pixel, expected, tol=5):
    return all(abs(int(a) - int(b)) <= tol for a, b in zip(pixel, expected))


def test_background_hue_ring(geometry, table):
    image = Renderer().background(geometry, table)
    assert image.mode == "RGBA"
    assert image.size == (250, 250)

    center, r = geometry.center, geometry.hue_radius
    assert _close(get_pixel(image, center, r, 0), (255, 0, 0, 255))
    assert _close(get_pixel(image, center, r, 120), (0, 255, 0, 255))
    assert _close(get_pixel(image, center, r, 240), (0, 0, 255, 255))


def test_background_lightness_ring(geometry, table):
    image = Renderer().background(geometry, table)
    center, r = geometry.center, geometry.lightness_radius

    top = get_pixel(image, center, r, 270)
    assert top[0] == top[1] == top[2]
    assert _close(top, (128, 128, 128, 255), tol=2)

    left = get_pixel(image, center, r, 180)
    assert _close(left, (64, 64, 64, 255), tol=2)


def test_background_is_transparent_off_the_rings(geometry, table):
    image = Renderer().background(geometry, table)
    assert image.getpixel((0, 0))[3] == 0
    assert image.getpixel((125, 125))[3] == 0


def test_background_without_lightness_ring():
    geometry = GeometryConfig.build(250, use_lightness=False)
    image = Renderer().background(geometry, GradientTable(include_lightness=False))
    # Just outside the (larger) hue ring.
    outer = geometry.hue_radius + geometry.hue_thickness / 2 + 4
    assert get_pixel(image, geometry.center, outer, 45)[3] == 0


def test_background_is_cached_per_configuration(geometry, table):
    renderer = Renderer()
    settings = WheelOptions()
    color = ColorState()

    renderer.render_frame(color, geometry, table, settings)
    color.set(hue=200)
    renderer.render_frame(color, geometry, table, settings)
    assert renderer.rebuilds == 1

    renderer.render_frame(color, GeometryConfig.build(250, hue_thickness=40), table, settings)
    assert renderer.rebuilds == 2

    renderer.invalidate()
    renderer.background(geometry, table)
    assert renderer.rebuilds == 3


def test_frame_does_not_modify_background(geometry, table):
    renderer = Renderer()
    before = np.array(renderer.background(geometry, table))
    renderer.render_frame(ColorState(hue=90), geometry, table, WheelOptions())
    assert np.array_equal(np.array(renderer.background(geometry, table)), before)


def test_swatch(geometry, table):
    renderer = Renderer()
    settings = WheelOptions()

    frame = renderer.render_frame(ColorState(hue=120), geometry, table, settings)
    assert frame.getpixel((125, 100)) == (0, 255, 0, 255)

    # Swatch border, on the swatch's own circle.
    radius = geometry.swatch_radius(settings.color_spot_width)
    top = int(125 - radius)
    assert any(frame.getpixel((125, y)) == (0, 0, 0, 255) for y in range(top - 1, top + 4))

    settings.show_color_spot = False
    frame = renderer.render_frame(ColorState(hue=120), geometry, table, settings)
    assert frame.getpixel((125, 100))[3] == 0


def test_hue_knob_highlight(geometry, table):
    renderer = Renderer()
    settings = WheelOptions()
    color = ColorState()
    x, y = centroid(geometry.hue_knob_polygon(color.hue, color.saturation, True))

    idle = renderer.render_frame(color, geometry, table, settings, Mode.IDLE)
    assert idle.getpixel((int(x), int(y))) == rgba("white")

    dragging = renderer.render_frame(color, geometry, table, settings, Mode.DRAGGING_HUE)
    assert dragging.getpixel((int(x), int(y))) == rgba("#777")


def test_lightness_knob_highlight(geometry, table):
    renderer = Renderer()
    settings = WheelOptions(lightness_knob_color_selected="red")
    color = ColorState(third=0.5)
    (x, y), _ = geometry.lightness_knob_disc(color.third)

    idle = renderer.render_frame(color, geometry, table, settings)
    assert idle.getpixel((int(x), int(y))) == (255, 255, 255, 255)

    dragging = renderer.render_frame(color, geometry, table, settings, Mode.DRAGGING_LIGHTNESS)
    assert dragging.getpixel((int(x), int(y))) == (255, 0, 0, 255)


def test_shadow_outside_hue_ring(table):
    plain = GeometryConfig.build(250, shadow_blur=0)
    shadowed = GeometryConfig.build(250, shadow_blur=8)

    with_shadow = Renderer().background(shadowed, table)
    without = Renderer().background(plain, table)

    outer = shadowed.hue_radius + shadowed.hue_thickness / 2 + 3
    assert get_pixel(with_shadow, shadowed.center, outer, 45)[3] > 0
    outer = plain.hue_radius + plain.hue_thickness / 2 + 3
    assert get_pixel(without, plain.center, outer, 45)[3] == 0


def test_hue_knob_shadow_changes_frame(table):
    geometry = GeometryConfig.build(250, shadow_blur=6)
    color = ColorState()
    renderer = Renderer()
    plain = np.array(renderer.render_frame(color, geometry, table, WheelOptions()))
    casting = np.array(renderer.render_frame(color, geometry, table, WheelOptions(hue_knob_shadow=True)))
    assert not np.array_equal(plain, casting)


def test_helpers():
    assert rgba("#777") == (119, 119, 119, 255)
    assert np.allclose(theta_to_third(np.array([90.0, 180.0, 270.0, 0.0])), [0.0, 0.25, 0.5, 0.75])
    mask = ring_mask(np.array([9.0, 10.0, 11.0, 12.0]), 10.5, 2)
    assert mask.tolist() == [False, True, True, False]
