# confset/configset.py
# -*- coding: utf-8 -*-
"""
confset.configset

ConfigSet: 設定キー → 値 の読み取り専用マッピング。

- 一度組み立てたら変更しない（__setitem__ / __delitem__ / 属性代入はすべて拒否）
- 上書きは overlay() で「新しい ConfigSet」を返す
- django.conf.settings と同じく cs.DEBUG のような属性アクセスもできる

値そのもの（list など）は凍結しないので、受け取った側で書き換えないこと。
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional


class ConfigSet(Mapping):
    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        object.__setattr__(self, "_data", MappingProxyType(dict(data or {})))

    # --- Mapping インターフェース ---
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ConfigSet は読み取り専用です")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ConfigSet は読み取り専用です")

    def __reduce__(self):
        return (ConfigSet, (dict(self._data),))

    def __repr__(self) -> str:
        return f"<ConfigSet {len(self)} keys>"

    # --- 組み立て ---
    def overlay(self, overrides: Mapping[str, Any]) -> "ConfigSet":
        """overrides を上に重ねた新しい ConfigSet を返す（キーが衝突したら overrides 優先）。"""
        return ConfigSet({**self._data, **overrides})

    def as_dict(self) -> Dict[str, Any]:
        """settings モジュールへ書き出す用の浅いコピー。"""
        return dict(self._data)
