# config/settings.py
# -*- coding: utf-8 -*-
"""
Django settings（完全版）

ここでは os.environ を直接読まず、confset で 1 つの ConfigSet を組み立てて
その中身をモジュールの名前空間に書き出すだけにする。

    defaults()                     Django の global_settings
      └ config.base                プロジェクト共通の設定
          └ CONFSET_LOCAL_SETTINGS 環境変数で指定したローカル上書き（任意）
              └ DJANGO_*           型ヒント付きの環境変数

環境変数（.env など）で優先的に読む値:

    DJANGO_SECRET_KEY
    DJANGO_DEBUG
    DJANGO_ALLOWED_HOSTS
    DJANGO_CSRF_TRUSTED_ORIGINS

"""

from __future__ import annotations

import os

from confset import defaults, diff, resolve_chain


# ---------------------------------------------------------------------------
# 環境変数の型ヒント
# ---------------------------------------------------------------------------

env_type_hints = {
    "SECRET_KEY": (str, "!!!CHANGE_ME_IN_PRODUCTION!!!"),
    "DEBUG": (bool, True),
    # 例: "127.0.0.1,localhost"
    "ALLOWED_HOSTS": (list, ["127.0.0.1", "localhost"]),
    # 例: "http://127.0.0.1:8000,http://localhost:8000"
    "CSRF_TRUSTED_ORIGINS": (list, ["http://127.0.0.1:8000", "http://localhost:8000"]),
}

layers = ["config.base"]
if os.environ.get("CONFSET_LOCAL_SETTINGS"):
    layers.append("CONFSET_LOCAL_SETTINGS")


# ---------------------------------------------------------------------------
# ロギング（必要最低限）
# ---------------------------------------------------------------------------

def logging_config(debug: bool) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "[{levelname}] {name}: {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": True,
            },
            "confset": {
                "handlers": ["console"],
                "level": "DEBUG" if debug else "INFO",
                "propagate": False,
            },
        },
    }


# ---------------------------------------------------------------------------
# 解決して Django に渡す
# ---------------------------------------------------------------------------

django_defaults = defaults()


def publish(config, namespace: dict) -> None:
    """Django の既定値と違うキーだけを settings モジュールの名前空間に書き出す。"""
    for entry in diff(django_defaults, config):
        namespace[entry.key] = entry.value_b


resolved = resolve_chain(django_defaults, layers, env_type_hints, env_prefix="DJANGO_")
resolved = resolved.overlay({"LOGGING": logging_config(resolved.DEBUG)})

publish(resolved, globals())
