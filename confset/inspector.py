# confset/inspector.py
# -*- coding: utf-8 -*-
"""
confset.inspector

2 つの ConfigSet を比較する読み取り専用の差分ツール（diffsettings 風）。

モード:
    "default" : 値が変わったキーを changed=True で返す。
                show_all=True のときは同じ値のキーも changed=False で返す。
                行の形式は diffsettings と同じ:
                    KEY = 値            a と b で値が違う
                    KEY = 値  ###       a に無いキー
                    ### KEY = 値        変わっていないキー (show_all)
                    KEY = <unset>       b から消えたキー
    "unified" : 値が違うキーだけを "- KEY = a" / "+ KEY = b" の組で返す。

どちらのモードもキー名の昇順。diff(A, A, mode) は常に [] になる。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple

MODES = ("default", "unified")


class _Missing:
    """片方の ConfigSet にキーが無いことを表す番兵。"""

    def __repr__(self) -> str:
        return "<unset>"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class DiffEntry:
    key: str
    value_a: Any
    value_b: Any
    changed: bool
    lines: Tuple[str, ...] = ()


def _default_lines(key: str, value_a: Any, value_b: Any, changed: bool) -> Tuple[str, ...]:
    if not changed:
        return (f"### {key} = {value_b!r}",)
    if value_a is MISSING:
        return (f"{key} = {value_b!r}  ###",)
    if value_b is MISSING:
        return (f"{key} = <unset>",)
    return (f"{key} = {value_b!r}",)


def _unified_lines(key: str, value_a: Any, value_b: Any) -> Tuple[str, ...]:
    lines = []
    if value_a is not MISSING:
        lines.append(f"- {key} = {value_a!r}")
    if value_b is not MISSING:
        lines.append(f"+ {key} = {value_b!r}")
    return tuple(lines)


def diff(
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    mode: str = "default",
    *,
    show_all: bool = False,
) -> List[DiffEntry]:
    if mode not in MODES:
        raise ValueError(f"未対応のモードです: {mode!r} ({', '.join(MODES)} のどれか)")

    entries: List[DiffEntry] = []
    for key in sorted(set(a) | set(b)):
        value_a = a.get(key, MISSING)
        value_b = b.get(key, MISSING)
        changed = key not in a or key not in b or (value_a is not value_b and value_a != value_b)

        if mode == "unified":
            if changed:
                entries.append(
                    DiffEntry(key, value_a, value_b, True, _unified_lines(key, value_a, value_b))
                )
            continue

        if changed or show_all:
            entries.append(
                DiffEntry(key, value_a, value_b, changed, _default_lines(key, value_a, value_b, changed))
            )
    return entries


def render(entries: Sequence[DiffEntry]) -> List[str]:
    """DiffEntry の列を表示用の行のリストに平たくする。"""
    return [line for entry in entries for line in entry.lines]
