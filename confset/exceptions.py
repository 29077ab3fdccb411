# confset/exceptions.py
# -*- coding: utf-8 -*-
"""
confset.exceptions

設定解決で発生する例外。

すべて ConfigurationError（= Django の ImproperlyConfigured）を継承するので、
呼び出し側は種類ごとに捕まえることも、まとめて捕まえることもできる。
黙ってデフォルト値に戻すことはしない（テスト中に本物のメールを送る、
といった「静かな設定ミス」を防ぐため）。
"""

from __future__ import annotations

from typing import Any, Optional

from django.core.exceptions import ImproperlyConfigured


class ConfigurationError(ImproperlyConfigured):
    """設定解決エラーの基底クラス。"""


class SourceNotFoundError(ConfigurationError):
    """上書きソース（モジュール / ファイル）が見つからない・読めない。"""

    def __init__(self, locator: str, reason: str = "") -> None:
        self.locator = locator
        self.reason = reason
        message = f"設定ソース {locator!r} が見つかりません"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CoercionError(ConfigurationError):
    """文字列の生値を宣言された型に変換できない。"""

    def __init__(self, key: Optional[str], raw: Any, type_: Any, reason: str = "") -> None:
        self.key = key
        self.raw = raw
        self.type = type_
        type_name = getattr(type_, "__name__", repr(type_))
        target = f"{key} の値 " if key else ""
        message = f"{target}{raw!r} を {type_name} に変換できません"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DuplicateKeyError(ConfigurationError):
    """KEY=value ファイルの中で同じキーが 2 回定義されている。"""

    def __init__(self, key: str, locator: str) -> None:
        self.key = key
        self.locator = locator
        super().__init__(f"{locator!r} でキー {key} が重複して定義されています")


class SourceFormatError(ConfigurationError):
    """KEY=value ファイルに解釈できない行がある。"""

    def __init__(self, locator: str, line: str) -> None:
        self.locator = locator
        self.line = line
        super().__init__(f"{locator!r} の行を解釈できません: {line.strip()!r}")
