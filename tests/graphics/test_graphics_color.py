from __future__ import annotations

import pytest

from graphics import (
    Color,
    ColorMode,
    alpha,
    blue,
    brightness,
    color,
    color_mode,
    green,
    hex_byte,
    lerp_color,
    red,
)


def test_color_from_hex_variants() -> None:
    assert color("#336699") == Color(51.0, 102.0, 153.0, 255.0)
    assert color("336699") == color("#336699")
    assert color("0x336699") == color("#336699")
    assert color("#abc") == Color(170.0, 187.0, 204.0)
    assert color("#33669980").a == 128.0


def test_color_from_packed_int_and_passthrough() -> None:
    assert color(0x336699) == Color(51.0, 102.0, 153.0)
    c = Color(1.0, 2.0, 3.0, 4.0)
    assert color(c) is c


def test_color_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        color("#12345")
    with pytest.raises(ValueError):
        color("#GGHHII")
    with pytest.raises(ValueError):
        color(0x1000000)
    with pytest.raises(ValueError):
        color(-1)
    with pytest.raises(TypeError):
        color(True)
    with pytest.raises(TypeError):
        color(1.5)
    with pytest.raises(TypeError):
        color(1, 2)
    with pytest.raises(TypeError):
        color("1", 2, 3)


def test_color_three_numbers_rgb_and_clamp() -> None:
    assert color(10, 20, 30) == Color(10.0, 20.0, 30.0, 255.0)
    assert color(10, 20, 30, 40).a == 40.0
    assert color(-5, 300, 12.5) == Color(0.0, 255.0, 12.5)


def test_color_three_numbers_hsb() -> None:
    with color_mode(ColorMode.HSB):
        r = color(0, 100, 100)
        g = color(120, 100, 100)
        gray = color(200, 0, 50)
    assert r.rgba == pytest.approx((255.0, 0.0, 0.0, 255.0))
    assert g.rgba == pytest.approx((0.0, 255.0, 0.0, 255.0))
    assert gray.rgba == pytest.approx((127.5, 127.5, 127.5, 255.0))


def test_channel_readers_and_brightness() -> None:
    c = Color(10.0, 200.0, 30.0, 40.0)
    assert (red(c), green(c), blue(c), alpha(c)) == (10.0, 200.0, 30.0, 40.0)
    assert brightness(c) == 200.0


def test_lerp_color_blends_all_channels_and_clamps_amount() -> None:
    a = Color(0.0, 0.0, 0.0, 0.0)
    b = Color(255.0, 100.0, 50.0, 255.0)
    assert lerp_color(a, b, 0.5).rgba == pytest.approx((127.5, 50.0, 25.0, 127.5))
    assert lerp_color(a, b, 2.0) == b
    assert lerp_color(a, b, -1.0) == a


def test_with_alpha_and_levels() -> None:
    c = Color(12.4, 12.6, 300.0)
    assert c.with_alpha(128).a == 128.0
    assert c.a == 255.0
    assert c.levels == (12, 13, 255, 255)
    assert str(Color(1.0, 2.0, 3.0)) == "rgba(1, 2, 3, 255)"


def test_hex_byte() -> None:
    assert hex_byte(0) == "00"
    assert hex_byte(128) == "80"
    assert hex_byte(10.6) == "0B"
    assert hex_byte(999) == "FF"
