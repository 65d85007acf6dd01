from __future__ import annotations

"""スケッチ共有の PaletteManager を保持する。

どこで: `util` 層。
何を: 初期化側（`setup`）で作った `PaletteManager` を `draw(t)` 側の `api.C` から引けるようにする。
なぜ: palette パッケージを util へ import させず、依存方向を util ← palette ← api に保つため。

`PaletteManager` 型には依存しない（`object` として保持し、解釈は `api.palette` が担う）。
"""

from typing import Any

_current: Any | None = None


def set_palette(manager: Any | None) -> None:
    """共有マネージャを差し替える（`None` で解除）。"""
    global _current
    _current = manager


def get_palette() -> Any | None:
    """共有マネージャを返す（未設定時は None）。"""
    return _current


def clear_palette() -> None:
    """共有マネージャを解除する（テスト/スケッチ再起動用）。"""
    set_palette(None)


__all__ = ["set_palette", "get_palette", "clear_palette"]
