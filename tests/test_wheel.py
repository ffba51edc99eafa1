import math

import pytest

from huepicker.color import Color
from huepicker.wheel import ColorWheel


def make_wheel(color=None, radius=100):
    color = color if color is not None else Color(255, 0, 0)
    return color, ColorWheel(color, radius)


def test_default_geometry():
    _, wheel = make_wheel()
    assert wheel.size() == (220, 220)
    cx, cy = wheel.center()
    assert cx == cy
    assert wheel.size()[0] == 2 * cx


def test_red_target_on_positive_x_edge():
    _, wheel = make_wheel()
    cx, cy = wheel.center()
    assert wheel.target() == pytest.approx((cx + wheel.radius, cy))


def test_grey_target_at_center():
    _, wheel = make_wheel(Color(100, 100, 100))
    assert wheel.target() == pytest.approx(wheel.center())


def test_is_in_wheel():
    _, wheel = make_wheel()
    cx, cy = wheel.center()
    assert wheel.is_in_wheel(cx, cy)
    assert wheel.is_in_wheel(cx + wheel.radius, cy)
    assert not wheel.is_in_wheel(0, 0)


def test_press_outside_is_ignored():
    color, wheel = make_wheel()
    received = []
    wheel.color_changed.connect(received.append)
    assert wheel.press(0, 0) is False
    assert not wheel.grabbed
    assert received == []
    assert color.rgb() == (255, 0, 0)


def test_press_above_center_gives_quarter_hue():
    color, wheel = make_wheel()
    received = []
    wheel.color_changed.connect(received.append)
    cx, cy = wheel.center()
    value_before = color.value_f()
    assert wheel.press(cx, cy - wheel.radius / 2) is True
    assert wheel.grabbed
    assert color.hue_f() == pytest.approx(0.25)
    assert color.saturation_f() == pytest.approx(0.5, abs=1e-4)
    assert color.value_f() == value_before
    assert received == [color]


def test_press_center_desaturates():
    color, wheel = make_wheel()
    cx, cy = wheel.center()
    wheel.press(cx, cy)
    assert color.saturation() == 0
    assert color.red() == color.green() == color.blue()


def test_move_clamps_to_rim():
    color, wheel = make_wheel(Color(10, 120, 30))
    cx, cy = wheel.center()
    wheel.press(cx, cy)
    wheel.move(cx + 1000, cy + 1000)
    tx, ty = wheel.target()
    assert math.hypot(tx - cx, ty - cy) == pytest.approx(wheel.radius)
    assert color.saturation_f() == pytest.approx(1.0)


def test_move_without_grab_does_nothing():
    color, wheel = make_wheel()
    before = wheel.target()
    wheel.move(0, 0)
    assert wheel.target() == before
    assert color.rgb() == (255, 0, 0)


def test_release_clears_grab_and_stops_moves():
    color, wheel = make_wheel()
    cx, cy = wheel.center()
    wheel.press(cx, cy)
    wheel.release()
    assert not wheel.grabbed
    wheel.move(cx + 50, cy)
    assert color.saturation() == 0


def test_sync_follows_external_change():
    color, wheel = make_wheel()
    color.set_hsv_f(0.5, 1.0, 1.0)
    wheel.sync_with_color(color)
    cx, cy = wheel.center()
    assert wheel.target() == pytest.approx((cx - wheel.radius, cy))


def test_render_shape_and_pixels():
    _, wheel = make_wheel(radius=30)
    image = wheel.render()
    assert image.size == wheel.size()
    assert image.getpixel((0, 0))[3] == 0
    cx, cy = wheel.center()
    r, g, b, a = image.getpixel((int(cx), int(cy)))
    assert a == 255
    assert min(r, g, b) >= 245