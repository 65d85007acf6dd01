"""
どこで: `api` 入口（スケッチ向け公開 API）。
何を: 共有パレットのプロキシ `C`、登録ヘルパ `use_palette`、`PaletteManager` と色型を再輸出。
なぜ: スケッチ側が単一名前空間から「パレット選択 → 色の取得/変換」まで完結できるようにするため。

Usage:
    from api import C, use_palette

    pm = use_palette()          # configs/default.yaml + PXC_* から生成して共有
    background = C.bg
    stroke = C[0]
    mid = pm.lerp_from_palette(0.5)
"""

from graphics import Color, ColorMode, color, color_mode, random_seed  # type: ignore[import]
from palette import PaletteManager  # type: ignore[import]

from .palette import C, PaletteAPI, use_palette

__all__ = [
    "C",
    "PaletteAPI",
    "use_palette",
    "PaletteManager",
    "Color",
    "ColorMode",
    "color",
    "color_mode",
    "random_seed",
]
