from __future__ import annotations

import pytest

from util.color import is_hex_color_str, parse_hex_color_str, unpack_rgb_int


def test_parse_hex_color_valid_variants() -> None:
    assert parse_hex_color_str("#112233") == (0x11, 0x22, 0x33, 255)
    assert parse_hex_color_str("0x112233CC") == (0x11, 0x22, 0x33, 0xCC)
    assert parse_hex_color_str("112233") == (0x11, 0x22, 0x33, 255)
    assert parse_hex_color_str(" #aBc ") == (0xAA, 0xBB, 0xCC, 255)


def test_parse_hex_color_invalid() -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str("#1234")
    with pytest.raises(ValueError):
        parse_hex_color_str("not-a-color")
    with pytest.raises(ValueError):
        parse_hex_color_str("#12345g")


def test_unpack_rgb_int() -> None:
    assert unpack_rgb_int(0xFF8000) == (255, 128, 0, 255)
    assert unpack_rgb_int(0) == (0, 0, 0, 255)
    with pytest.raises(ValueError):
        unpack_rgb_int(0x1000000)
    with pytest.raises(TypeError):
        unpack_rgb_int(False)


def test_is_hex_color_str() -> None:
    assert is_hex_color_str("#8386f5")
    assert not is_hex_color_str("#8386f")
    assert not is_hex_color_str(0x8386F5)
