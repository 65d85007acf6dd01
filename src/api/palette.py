from __future__ import annotations

"""パレット API（公開 `C` オブジェクト）。

どこで: `api.palette`。
何を: `util.palette_state` に登録された現在の `PaletteManager` に対して、
      `C[i]` / `C.fg` / `C.bg` で色を取り出すための薄いプロキシを提供する。
なぜ: `draw(t)` 内でシンプルに `from api import C; C[0]` のように
      パレットカラーへアクセスできるようにするため。
"""

from typing import List, Optional

from graphics import Color  # type: ignore[import]
from palette import PaletteManager  # type: ignore[import]
from util.palette_state import get_palette, set_palette


class PaletteAPI:
    """現在のパレットに対する読み取り専用ビュー。

    - `C[i]` で i 番目の色（`graphics.Color`）を返す。
    - `len(C)` は現在の色数を返す（パレット未設定時は 0）。
    - `C.fg` / `C.bg` は前景/背景色（未設定時は None）。
    - `hex()` は全色を HEX 文字列リストとして返す。
    """

    __slots__ = ()

    def _current(self) -> PaletteManager | None:
        obj = get_palette()
        if isinstance(obj, PaletteManager):
            return obj
        return None

    # --- Python 互換インタフェース ---
    def __len__(self) -> int:
        pm = self._current()
        return len(pm.palette) if pm is not None else 0

    def __getitem__(self, index: int) -> Color:
        pm = self._current()
        if pm is None or not pm.palette:
            raise IndexError("palette is empty")
        # list と同じインデックス規約を保つ（負インデックス対応）。
        try:
            return pm.palette[index]
        except (IndexError, TypeError) as exc:
            raise IndexError("palette index out of range") from exc

    # --- 補助 API ---
    @property
    def fg(self) -> Optional[Color]:
        pm = self._current()
        return pm.fg if pm is not None else None

    @property
    def bg(self) -> Optional[Color]:
        pm = self._current()
        return pm.bg if pm is not None else None

    def hex(self) -> List[str]:
        """現在のパレットを HEX 文字列のリストとして返す。"""
        pm = self._current()
        if pm is None:
            return []
        return pm.hex_palette()

    def random(self) -> Color:
        """現在のパレットからランダムに 1 色返す。"""
        pm = self._current()
        if pm is None:
            raise IndexError("palette is empty")
        return pm.pick_random_color()


def use_palette(manager: PaletteManager | None = None) -> PaletteManager:
    """`manager`（省略時は設定から生成）を共有パレットとして登録し、返す。"""
    pm = manager if manager is not None else PaletteManager.from_config()
    set_palette(pm)
    return pm


# 公開インスタンス
C = PaletteAPI()


__all__ = ["C", "PaletteAPI", "use_palette"]
