# confset/defaults.py
# -*- coding: utf-8 -*-
"""
confset.defaults

既定値プロバイダ。

Django 自身が LazySettings の初期化で使うのと同じく、
django.conf.global_settings の大文字の名前だけを既定値として拾う。
"""

from __future__ import annotations

from django.conf import global_settings

from .configset import ConfigSet


def defaults() -> ConfigSet:
    return ConfigSet(
        {
            name: getattr(global_settings, name)
            for name in dir(global_settings)
            if name.isupper()
        }
    )


def empty() -> ConfigSet:
    """Django の既定値を使わずに重ねたいとき用の空の ConfigSet。"""
    return ConfigSet()
