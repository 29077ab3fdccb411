# confset/apps.py
# -*- coding: utf-8 -*-
"""
confset.apps

Django に 'confset' アプリを認識させるための AppConfig 定義。
モデルは持たないので、管理コマンド (compare_settings) の登録だけが目的。
"""

from __future__ import annotations

from django.apps import AppConfig


class ConfsetConfig(AppConfig):
    name = "confset"
    verbose_name = "設定レイヤー解決"
