# confset/management/commands/compare_settings.py
# -*- coding: utf-8 -*-
"""
manage.py compare_settings

2 つの設定ソースをそれぞれ Django の既定値の上に解決し、差分を表示する。

例:
    python manage.py compare_settings config.base config.test_settings
    python manage.py compare_settings DJANGO_SETTINGS_MODULE local.env --output unified

ロケータが解決できなければエラーメッセージを出して終了コード 1 で終わる。
"""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from confset.defaults import defaults, empty
from confset.exceptions import ConfigurationError
from confset.inspector import MODES, diff, render
from confset.resolver import resolve


class Command(BaseCommand):
    help = "2 つの設定ソースを解決して差分を表示します。"

    requires_system_checks = []

    def add_arguments(self, parser) -> None:
        parser.add_argument("first", help="比較元のロケータ（モジュールパス / ファイル / 環境変数名）")
        parser.add_argument("second", help="比較先のロケータ")
        parser.add_argument(
            "--output",
            default="default",
            choices=MODES,
            help="出力形式。'unified' は - / + の組で差分だけを表示します。",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="'default' 形式で値が同じ設定も ### を付けて表示します。",
        )
        parser.add_argument(
            "--no-defaults",
            action="store_true",
            help="Django の global_settings を下敷きにせず、ソースの中身だけを比較します。",
        )

    def handle(self, *args, **options) -> None:
        base = empty() if options["no_defaults"] else defaults()
        try:
            first = resolve(base, options["first"])
            second = resolve(base, options["second"])
        except ConfigurationError as exc:
            raise CommandError(str(exc)) from exc

        entries = diff(first, second, options["output"], show_all=options["all"])
        for line in render(entries):
            self.stdout.write(line)
