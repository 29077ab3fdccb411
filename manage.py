# manage.py
# -*- coding: utf-8 -*-
"""
Django の管理スクリプト（完全版）

- 設定の差分表示:      python manage.py compare_settings config.base config.test_settings
- テスト実行:          python manage.py test --settings config.test_settings

DJANGO_SETTINGS_MODULE は 'config.settings' に固定。
"""

from __future__ import annotations

import os
import sys


def main() -> None:
    """管理コマンドのエントリポイント。"""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:  # noqa: BLE001
        raise ImportError(
            "Django がインポートできませんでした。環境に Django がインストールされているか、"
            "仮想環境が有効になっているかを確認してください。"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
