# confset/resolver.py
# -*- coding: utf-8 -*-
"""
confset.resolver（完全版）

上書きリゾルバ。

    resolve(base, "DJANGO_SETTINGS_MODULE", {"DEBUG": (bool, False)})

のように呼ぶと、

1. ロケータが指すソースを読み、base の上に重ねる（同名キーはソース優先）
2. type_hints にあるキーは環境変数 (env_prefix + KEY) から文字列を読み、型変換して重ねる
   - 環境変数が無ければソースの値（文字列なら型変換）
   - ソースにも無ければ宣言されたデフォルト値（None 以外は同じく型変換）
3. 新しい ConfigSet を返す。base は変更しない

settings モジュール同士の `from .base import *` の代わりに、
resolve_chain(base, ["config.base", "config.local"]) のように関数合成で重ねる。
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from . import sources
from .coercion import DEFAULT_DELIMITER, coerce
from .configset import ConfigSet

logger = logging.getLogger(__name__)

TypeHint = Union[type, Tuple[type, Any]]


def _split_hint(hint: TypeHint) -> Tuple[type, Any]:
    if isinstance(hint, tuple):
        type_, default = hint
        return type_, default
    return hint, None


def _apply_type_hints(
    merged: Dict[str, Any],
    provided: Mapping[str, Any],
    type_hints: Mapping[str, TypeHint],
    environ: Mapping[str, str],
    env_prefix: str,
    delimiter: str,
) -> Dict[str, Any]:
    typed: Dict[str, Any] = {}
    for key, hint in type_hints.items():
        type_, default = _split_hint(hint)
        env_name = f"{env_prefix}{key}"
        if env_name in environ:
            logger.debug("%s を環境変数 %s から読み込みます", key, env_name)
            typed[key] = coerce(environ[env_name], type_, key=key, delimiter=delimiter)
        elif key in provided:
            typed[key] = coerce(merged[key], type_, key=key, delimiter=delimiter)
        elif default is not None:
            typed[key] = coerce(default, type_, key=key, delimiter=delimiter)
        else:
            typed[key] = None
    return typed


def resolve_chain(
    base: Mapping[str, Any],
    locators: Iterable[str],
    type_hints: Optional[Mapping[str, TypeHint]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    env_prefix: str = "",
    delimiter: str = DEFAULT_DELIMITER,
) -> ConfigSet:
    """
    locators を左から順に base へ重ね、最後に型ヒント付きの環境変数を重ねる。

    どこかで例外が出たら ConfigSet は返さない（途中結果も返さない）。
    """
    if environ is None:
        environ = os.environ
    if isinstance(locators, str):
        locators = [locators]

    merged: Dict[str, Any] = dict(base)
    provided: Dict[str, Any] = {}
    for locator in locators:
        target, values = sources.load(locator, environ)
        logger.debug("%s (%s) を重ねます", locator, target)
        provided.update(values)
        merged.update(values)

    if type_hints:
        merged.update(
            _apply_type_hints(merged, provided, type_hints, environ, env_prefix, delimiter)
        )
    return ConfigSet(merged)


def resolve(
    base: Mapping[str, Any],
    source_locator: Optional[str],
    type_hints: Optional[Mapping[str, TypeHint]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    env_prefix: str = "",
    delimiter: str = DEFAULT_DELIMITER,
) -> ConfigSet:
    """
    1 つのソースを base に重ねた新しい ConfigSet を返す。

    source_locator が None のときはソースを読まず、環境変数だけを重ねる。
    """
    locators = [] if source_locator is None else [source_locator]
    return resolve_chain(
        base,
        locators,
        type_hints,
        environ=environ,
        env_prefix=env_prefix,
        delimiter=delimiter,
    )
