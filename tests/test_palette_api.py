from __future__ import annotations

"""palette API (`api.C`) の基本動作テスト。"""

import pytest

from api import C, PaletteManager, use_palette
from util.palette_state import get_palette, set_palette


def test_C_empty_when_unset():
    """共有パレット未設定時の挙動。"""
    set_palette(None)
    assert len(C) == 0
    assert C.fg is None and C.bg is None
    assert C.hex() == []
    with pytest.raises(IndexError):
        _ = C[0]
    with pytest.raises(IndexError):
        C.random()


def test_C_ignores_foreign_objects():
    """PaletteManager 以外が登録されていても空として扱う。"""
    set_palette(object())
    assert len(C) == 0


def test_C_len_getitem_and_derived_colors():
    pm = use_palette(PaletteManager(seed=1))
    assert get_palette() is pm
    assert len(C) == 5
    assert C[0] == pm.palette[0]
    assert C[-1] == pm.palette[-1]
    assert C.fg == pm.fg and C.bg == pm.bg
    with pytest.raises(IndexError):
        _ = C[5]
    with pytest.raises(IndexError):
        _ = C["a"]  # type: ignore[index]


def test_C_hex_and_random():
    pm = use_palette(PaletteManager([["#112233", "#445566"]]))
    assert C.hex() == ["#112233", "#445566"]
    assert C.random() in pm.palette


def test_use_palette_from_config_defaults():
    pm = use_palette()
    assert isinstance(pm, PaletteManager)
    assert len(C) == len(pm.palette)
