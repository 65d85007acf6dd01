"""
どこで: `util.color`。
何を: 色指定の受理形式（Hex 文字列, packed int）を RGBA(0–255) へ変換・検証する。
なぜ: `graphics.color` と設定ファイルのパレット検証（`PaletteManager.from_config`）で同一の受理仕様を使うため。
"""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _strip_prefix(s: str) -> str:
    t = s.strip()
    if t.startswith("#"):
        return t[1:]
    if t.lower().startswith("0x"):
        return t[2:]
    return t


def parse_hex_color_str(s: str) -> tuple[int, int, int, int]:
    """Hex 文字列から RGBA(0–255) を返す。

    受理形式: "#RGB", "#RRGGBB", "#RRGGBBAA"（接頭辞は "#", "0x", 無しのいずれも可）。
    大文字/小文字は不問。
    """
    t = _strip_prefix(s)
    if len(t) == 3:
        t = "".join(ch * 2 for ch in t)
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RGB, RRGGBB or RRGGBBAA)")
    if not set(t) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex color: '{s}'")
    r = int(t[0:2], 16)
    g = int(t[2:4], 16)
    b = int(t[4:6], 16)
    a = int(t[6:8], 16) if len(t) == 8 else 255
    return (r, g, b, a)


def unpack_rgb_int(value: int) -> tuple[int, int, int, int]:
    """packed int (0xRRGGBB) から RGBA(0–255) を返す（alpha は 255）。"""
    if isinstance(value, bool):
        raise TypeError("bool is not a color value")
    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"packed color out of range: {value!r} (expected 0..0xFFFFFF)")
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)


def is_hex_color_str(s: object) -> bool:
    """`parse_hex_color_str` が受理できる文字列なら True。"""
    if not isinstance(s, str):
        return False
    try:
        parse_hex_color_str(s)
    except ValueError:
        return False
    return True


__all__ = [
    "parse_hex_color_str",
    "unpack_rgb_int",
    "is_hex_color_str",
]
