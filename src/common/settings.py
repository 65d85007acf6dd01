"""
どこで: `common.settings`
何を: `PXC_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: 乱数シードやログレベルの既定値を CLI/スケッチ間で揃え、テストで差し替えやすくするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # 乱数（None は非決定的）
    SEED: int | None = None
    RANDOMIZE: bool | None = None

    # Logging
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `PXC_SEED`: int（負値は 0 に丸める）
    - `PXC_RANDOMIZE`: bool（パレット内の色順もシャッフルするか。未設定は None で設定ファイルに委ねる）
    - `PXC_LOG_LEVEL`: ログレベル名
    """
    _settings.SEED = env_int("PXC_SEED", None, min_value=0)
    _settings.RANDOMIZE = env_bool("PXC_RANDOMIZE", None)
    _settings.LOG_LEVEL = env_str("PXC_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
