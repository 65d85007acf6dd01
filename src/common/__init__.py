"""
どこで: `common` パッケージ。
何を: ロギング初期化と環境変数ベースの設定（settings/env）。
なぜ: palette/graphics 層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
