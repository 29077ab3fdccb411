# confset/coercion.py
# -*- coding: utf-8 -*-
"""
confset.coercion

環境変数などの「文字列の生値」を型ヒントに従って変換する。

ルール:
    bool        : "true" / "yes" / "on" / "1"（大文字小文字無視）だけが True。
                  それ以外は "banana" のような空でない文字列も含めて False。
    int / float : 数値として解釈できなければ CoercionError
    list / tuple: delimiter で分割し、前後の空白を除いて空要素は捨てる
    dict        : JSON オブジェクトとして解釈
    str         : そのまま
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .exceptions import CoercionError

TRUTHY = frozenset({"true", "yes", "on", "1"})

DEFAULT_DELIMITER = ","


def coerce_bool(raw: str) -> bool:
    return raw.strip().lower() in TRUTHY


def _split(raw: str, delimiter: str) -> list:
    return [item.strip() for item in raw.split(delimiter) if item.strip()]


def coerce(
    raw: Any,
    type_: type,
    *,
    key: Optional[str] = None,
    delimiter: str = DEFAULT_DELIMITER,
) -> Any:
    """
    raw を type_ に変換して返す。

    文字列以外が渡された場合は、すでに type_ のインスタンスならそのまま返す
    （settings モジュール側で list などを直接書いたケース）。
    int → float と list ⇔ tuple は値を失わないので変換する。
    """
    if not isinstance(raw, str):
        if isinstance(raw, type_):
            return raw
        if type_ is float and isinstance(raw, int) and not isinstance(raw, bool):
            return float(raw)
        if type_ in (list, tuple) and isinstance(raw, (list, tuple)):
            return type_(raw)
        raise CoercionError(key, raw, type_, "文字列でも宣言型でもありません")

    if type_ is bool:
        return coerce_bool(raw)
    if type_ is int:
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise CoercionError(key, raw, type_) from exc
    if type_ is float:
        try:
            return float(raw.strip())
        except ValueError as exc:
            raise CoercionError(key, raw, type_) from exc
    if type_ is list:
        return _split(raw, delimiter)
    if type_ is tuple:
        return tuple(_split(raw, delimiter))
    if type_ is dict:
        try:
            value = json.loads(raw)
        except ValueError as exc:
            raise CoercionError(key, raw, type_, "JSON として解釈できません") from exc
        if not isinstance(value, dict):
            raise CoercionError(key, raw, type_, "JSON オブジェクトではありません")
        return value
    if type_ is str:
        return raw

    raise CoercionError(key, raw, type_, "未対応の型です")
