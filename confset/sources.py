# confset/sources.py
# -*- coding: utf-8 -*-
"""
confset.sources（完全版）

上書きソースの読み込み。

ロケータの解釈順:
    1. environ に同名の変数があれば、その値を対象にする
       （DJANGO_SETTINGS_MODULE と同じ間接参照）
    2. 既存ファイルで .py で終わる   → settings モジュールとして実行
    3. それ以外の既存ファイル       → KEY=value 形式として読む（python-dotenv の文法）
    4. どれでもなければ             → ドット区切りのモジュールパスとして import

モジュールからは Django と同じく大文字の名前だけを拾う。
KEY=value ファイルの値は文字列のまま返す（型変換は resolver 側の仕事）。
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

from dotenv.parser import parse_stream

from .exceptions import DuplicateKeyError, SourceFormatError, SourceNotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ロケータ解決
# ---------------------------------------------------------------------------


def locate(locator: str, environ: Mapping[str, str]) -> str:
    """ロケータを実際の読み込み対象（ファイルパス or モジュールパス）に変換する。"""
    if not locator or not locator.strip():
        raise SourceNotFoundError(locator, "ロケータが空です")
    target = environ.get(locator)
    if target is None:
        return locator
    if not target.strip():
        raise SourceNotFoundError(locator, f"環境変数 {locator} が空です")
    logger.debug("環境変数 %s -> %s", locator, target)
    return target


def _looks_like_path(target: str) -> bool:
    return "/" in target or os.sep in target or target.endswith((".py", ".env", ".txt"))


# ---------------------------------------------------------------------------
# 読み込み
# ---------------------------------------------------------------------------


def _module_settings(module: Any) -> Dict[str, Any]:
    return {name: getattr(module, name) for name in dir(module) if name.isupper()}


def _load_module(target: str, locator: str) -> Dict[str, Any]:
    try:
        module = importlib.import_module(target)
    except ModuleNotFoundError as exc:
        # settings モジュール内部の import 失敗はそのまま上げる
        if exc.name and (target == exc.name or target.startswith(exc.name + ".")):
            raise SourceNotFoundError(locator, f"モジュール {target} を import できません") from exc
        raise
    except (TypeError, ValueError) as exc:
        raise SourceNotFoundError(locator, str(exc)) from exc
    return _module_settings(module)


def _load_python_file(path: Path, locator: str) -> Dict[str, Any]:
    spec = importlib.util.spec_from_file_location(f"confset_source_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise SourceNotFoundError(locator, f"{path} を読み込めません")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except FileNotFoundError as exc:
        raise SourceNotFoundError(locator, str(exc)) from exc
    return _module_settings(module)


def _load_key_value_file(path: Path, locator: str) -> Dict[str, str]:
    try:
        with path.open(encoding="utf-8") as stream:
            bindings = list(parse_stream(stream))
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceNotFoundError(locator, str(exc)) from exc

    values: Dict[str, str] = {}
    for binding in bindings:
        if binding.error:
            raise SourceFormatError(locator, binding.original.string)
        if binding.key is None:
            # 空行・コメント
            continue
        if binding.value is None:
            raise SourceFormatError(locator, binding.original.string)
        if binding.key in values:
            raise DuplicateKeyError(binding.key, locator)
        values[binding.key] = binding.value
    return values


def load(locator: str, environ: Mapping[str, str]) -> Tuple[str, Dict[str, Any]]:
    """
    ロケータが指すソースを読み、(実際の対象, {KEY: 値}) を返す。

    見つからなければ SourceNotFoundError。途中まで読んだ結果は返さない。
    """
    target = locate(locator, environ)
    path = Path(target).expanduser()

    if path.is_file():
        if path.suffix == ".py":
            values = _load_python_file(path, locator)
        else:
            values = _load_key_value_file(path, locator)
    elif _looks_like_path(target):
        raise SourceNotFoundError(locator, f"ファイル {target} がありません")
    else:
        values = _load_module(target, locator)

    logger.debug("%s から %d 件の設定を読み込みました", target, len(values))
    return target, values
