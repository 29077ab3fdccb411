# confset/__init__.py
# -*- coding: utf-8 -*-
"""
confset パッケージ初期化（完全版）

Django の設定解決手順（global_settings → DJANGO_SETTINGS_MODULE の上書き）を
明示的な関数合成として扱うための小さなアプリ。

- defaults()       : Django 標準の既定値を ConfigSet で返す
- resolve()        : 上書きソース + 環境変数を重ねた新しい ConfigSet を返す
- resolve_chain()  : 複数ソースを左から順に重ねる
- diff()           : 2 つの ConfigSet の差分 (diffsettings 風)

settings.INSTALLED_APPS に "confset" を入れると
manage.py compare_settings が使えるようになる。
"""

from __future__ import annotations

from .coercion import coerce, coerce_bool
from .configset import ConfigSet
from .defaults import defaults, empty
from .exceptions import (
    CoercionError,
    ConfigurationError,
    DuplicateKeyError,
    SourceFormatError,
    SourceNotFoundError,
)
from .inspector import MISSING, DiffEntry, diff, render
from .resolver import resolve, resolve_chain

__all__ = [
    "ConfigSet",
    "ConfigurationError",
    "CoercionError",
    "DiffEntry",
    "DuplicateKeyError",
    "MISSING",
    "SourceFormatError",
    "SourceNotFoundError",
    "coerce",
    "coerce_bool",
    "defaults",
    "diff",
    "empty",
    "render",
    "resolve",
    "resolve_chain",
]
