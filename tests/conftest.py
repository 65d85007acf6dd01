"""共通フィクスチャ。

- 既定乱数ジェネレータのシード固定
- カラーモード/共有パレットの初期化
"""

from __future__ import annotations

from typing import Iterator

import pytest

from graphics import Color, ColorMode, random_seed, set_color_mode
from util.palette_state import clear_palette


@pytest.fixture(autouse=True)
def host_state() -> Iterator[None]:
    """乱数・カラーモード・共有パレットをテスト毎に初期状態へ戻す。"""
    random_seed(12345)
    set_color_mode(ColorMode.RGB)
    clear_palette()
    yield
    set_color_mode(ColorMode.RGB)
    clear_palette()


@pytest.fixture()
def five_reds() -> list[str]:
    return ["#000000", "#400000", "#800000", "#C00000", "#FF0000"]


@pytest.fixture()
def steel() -> Color:
    return Color(51.0, 102.0, 153.0)
