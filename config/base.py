# config/base.py
# -*- coding: utf-8 -*-
"""
プロジェクト共通の設定（上書きソース）

confset.resolve_chain() が大文字の名前だけを拾って
django.conf.global_settings の上に重ねる。

環境変数で変える値（SECRET_KEY / DEBUG / ALLOWED_HOSTS / CSRF_TRUSTED_ORIGINS）は
settings.py の型ヒント側で既定値を持つので、ここには書かない。
"""

from __future__ import annotations

from pathlib import Path


# ---------------------------------------------------------------------------
# ベースパス
# ---------------------------------------------------------------------------

BASE_DIR = Path(__file__).resolve().parent.parent


# ---------------------------------------------------------------------------
# アプリケーション
# ---------------------------------------------------------------------------

INSTALLED_APPS = [
    "confset",
]

MIDDLEWARE = []


# ---------------------------------------------------------------------------
# データベース
# ---------------------------------------------------------------------------

# 開発時は SQLite、必要に応じて本番では別DBに差し替える
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# ---------------------------------------------------------------------------
# 国際化
# ---------------------------------------------------------------------------

LANGUAGE_CODE = "ja"

TIME_ZONE = "Asia/Tokyo"

USE_I18N = True
USE_TZ = True


# ---------------------------------------------------------------------------
# メール
# ---------------------------------------------------------------------------

# 本番は SMTP。テストでは test_overrides.py で locmem に差し替える
EMAIL_BACKEND = "django.core.mail.backends.smtp.EmailBackend"
DEFAULT_FROM_EMAIL = "noreply@localhost"
