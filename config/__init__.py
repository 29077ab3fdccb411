# config/__init__.py
# -*- coding: utf-8 -*-
"""
config パッケージ初期化モジュール（完全版）

このファイルは Django プロジェクト設定モジュールの名前空間。

- base.py          : 環境に依存しないプロジェクト共通の設定（上書きソース）
- settings.py      : defaults() → base → 環境変数 の順に重ねた結果を Django に渡す
- test_overrides.py: テスト実行時だけ重ねる設定
- test_settings.py : settings の結果に test_overrides を重ねたもの

例:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
"""

__all__ = [
    "base",
    "settings",
    "test_overrides",
    "test_settings",
]
