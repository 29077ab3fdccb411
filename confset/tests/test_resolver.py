# confset/tests/test_resolver.py
# -*- coding: utf-8 -*-
"""
confset.resolver / confset.sources のテスト（完全版）

ポイント:
- 環境変数は os.environ を触らず environ= に dict を渡して与える
- KEY=value ファイルは一時ディレクトリに書き出して使う
- エラー時は ConfigSet を返さず、種類ごとに区別できる例外が上がること
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from django.test import SimpleTestCase

from confset.configset import ConfigSet
from confset.defaults import defaults
from confset.exceptions import (
    CoercionError,
    DuplicateKeyError,
    SourceFormatError,
    SourceNotFoundError,
)
from confset.inspector import diff
from confset.resolver import resolve, resolve_chain


class SourceFileMixin:
    def setUp(self) -> None:
        super().setUp()
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmp_dir = Path(tmp.name)

    def write(self, name: str, content: str) -> str:
        path = self.tmp_dir / name
        path.write_text(content, encoding="utf-8")
        return str(path)


class ResolveTest(SourceFileMixin, SimpleTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.base = ConfigSet({"DEBUG": False, "EMAIL_PORT": 25, "TIME_ZONE": "UTC"})

    def test_debug_on_from_environment(self) -> None:
        resolved = resolve(
            defaults(), None, {"DEBUG": (bool, False)}, environ={"DEBUG": "on"}
        )
        self.assertIs(resolved["DEBUG"], True)

    def test_returns_config_set_and_keeps_base(self) -> None:
        path = self.write("local.env", "TIME_ZONE=Asia/Tokyo\n")
        resolved = resolve(self.base, path, environ={})
        self.assertIsInstance(resolved, ConfigSet)
        self.assertEqual(resolved["TIME_ZONE"], "Asia/Tokyo")
        self.assertEqual(self.base["TIME_ZONE"], "UTC")

    def test_keys_absent_from_source_keep_base_value(self) -> None:
        path = self.write("local.env", "TIME_ZONE=Asia/Tokyo\n")
        resolved = resolve(self.base, path, environ={})
        self.assertIs(resolved["DEBUG"], False)
        self.assertEqual(resolved["EMAIL_PORT"], 25)

    def test_unhinted_override_keeps_raw_value(self) -> None:
        path = self.write("local.env", "EMAIL_PORT=8025\nDEBUG=banana\n")
        resolved = resolve(self.base, path, {"TIME_ZONE": (str, "UTC")}, environ={})
        self.assertEqual(resolved["EMAIL_PORT"], "8025")
        self.assertEqual(resolved["DEBUG"], "banana")

    def test_hinted_source_string_is_coerced(self) -> None:
        path = self.write("local.env", "EMAIL_PORT=8025\nDEBUG=yes\n")
        resolved = resolve(
            self.base, path, {"EMAIL_PORT": (int, 25), "DEBUG": (bool, False)}, environ={}
        )
        self.assertEqual(resolved["EMAIL_PORT"], 8025)
        self.assertIs(resolved["DEBUG"], True)

    def test_environment_wins_over_source(self) -> None:
        path = self.write("local.env", "EMAIL_PORT=8025\n")
        resolved = resolve(
            self.base, path, {"EMAIL_PORT": (int, 25)}, environ={"EMAIL_PORT": "2525"}
        )
        self.assertEqual(resolved["EMAIL_PORT"], 2525)

    def test_declared_default_when_absent_everywhere(self) -> None:
        resolved = resolve(
            self.base, None, {"CACHE_TIMEOUT": (int, 300), "OPTIONAL": str}, environ={}
        )
        self.assertEqual(resolved["CACHE_TIMEOUT"], 300)
        self.assertIsNone(resolved["OPTIONAL"])

    def test_declared_default_is_coerced(self) -> None:
        resolved = resolve(
            self.base, None, {"CACHE_TIMEOUT": (int, "300"), "HOSTS": (list, "a,b")}, environ={}
        )
        self.assertEqual(resolved["CACHE_TIMEOUT"], 300)
        self.assertEqual(resolved["HOSTS"], ["a", "b"])

    def test_mistyped_declared_default_fails(self) -> None:
        with self.assertRaises(CoercionError) as ctx:
            resolve(self.base, None, {"CACHE_TIMEOUT": (int, "five minutes")}, environ={})
        self.assertEqual(ctx.exception.key, "CACHE_TIMEOUT")
        with self.assertRaises(CoercionError):
            resolve(self.base, None, {"ADMINS": (list, 5)}, environ={})

    def test_nan_from_environment_diffs_clean(self) -> None:
        resolved = resolve(
            ConfigSet(), None, {"RATE": (float, 1.0)}, environ={"RATE": "nan"}
        )
        self.assertEqual(diff(resolved, resolved, "unified"), [])

    def test_env_prefix(self) -> None:
        resolved = resolve(
            self.base,
            None,
            {"ALLOWED_HOSTS": (list, [])},
            environ={"DJANGO_ALLOWED_HOSTS": "a.example, b.example", "ALLOWED_HOSTS": "x"},
            env_prefix="DJANGO_",
        )
        self.assertEqual(resolved["ALLOWED_HOSTS"], ["a.example", "b.example"])

    def test_delimiter(self) -> None:
        resolved = resolve(
            self.base, None, {"ADMINS": (tuple, ())}, environ={"ADMINS": "a|b"}, delimiter="|"
        )
        self.assertEqual(resolved["ADMINS"], ("a", "b"))

    def test_coercion_failure_raises(self) -> None:
        with self.assertRaises(CoercionError) as ctx:
            resolve(self.base, None, {"EMAIL_PORT": (int, 25)}, environ={"EMAIL_PORT": "smtp"})
        self.assertEqual(ctx.exception.key, "EMAIL_PORT")

    def test_dotenv_quoting_and_comments(self) -> None:
        path = self.write(
            "local.env",
            '# コメント\n\nexport SITE_NAME="hello world"\nTAG=\'x\'  # 行末コメント\nEMPTY=\n',
        )
        resolved = resolve(ConfigSet(), path, environ={})
        self.assertEqual(
            dict(resolved), {"SITE_NAME": "hello world", "TAG": "x", "EMPTY": ""}
        )


class SourceLocatorTest(SourceFileMixin, SimpleTestCase):
    def test_dotted_module_path_takes_upper_case_names(self) -> None:
        resolved = resolve(ConfigSet(), "confset.tests.sample_settings", environ={})
        self.assertEqual(
            dict(resolved),
            {"DEBUG": True, "SECURE_HSTS_SECONDS": 3600, "ALLOWED_HOSTS": ["example.com"]},
        )

    def test_environment_indirection_to_module(self) -> None:
        resolved = resolve(
            defaults(),
            "APP_SETTINGS_MODULE",
            environ={"APP_SETTINGS_MODULE": "confset.tests.sample_settings"},
        )
        self.assertIs(resolved["DEBUG"], True)

    def test_environment_indirection_to_file(self) -> None:
        path = self.write("prod.env", "SECURE_HSTS_SECONDS=31536000\n")
        resolved = resolve(ConfigSet(), "APP_ENV_FILE", environ={"APP_ENV_FILE": path})
        self.assertEqual(resolved["SECURE_HSTS_SECONDS"], "31536000")

    def test_python_file(self) -> None:
        path = self.write("local_settings.py", "DEBUG = True\nINTERNAL_IPS = ['127.0.0.1']\nx = 1\n")
        resolved = resolve(ConfigSet(), path, environ={})
        self.assertEqual(dict(resolved), {"DEBUG": True, "INTERNAL_IPS": ["127.0.0.1"]})

    def test_python_file_values_widen_to_hinted_type(self) -> None:
        path = self.write("local_settings.py", "TIMEOUT = 5\nADMINS = [\"a\", \"b\"]\n")
        resolved = resolve(
            ConfigSet(), path, {"TIMEOUT": (float, 1.0), "ADMINS": (tuple, ())}, environ={}
        )
        self.assertEqual(resolved["TIMEOUT"], 5.0)
        self.assertIsInstance(resolved["TIMEOUT"], float)
        self.assertEqual(resolved["ADMINS"], ("a", "b"))

    def test_unknown_module(self) -> None:
        with self.assertRaises(SourceNotFoundError) as ctx:
            resolve(defaults(), "confset.tests.no_such_settings", environ={})
        self.assertEqual(ctx.exception.locator, "confset.tests.no_such_settings")

    def test_unset_indirection_variable(self) -> None:
        with self.assertRaises(SourceNotFoundError):
            resolve(defaults(), "APP_SETTINGS_MODULE", environ={})

    def test_empty_indirection_variable(self) -> None:
        with self.assertRaises(SourceNotFoundError):
            resolve(defaults(), "APP_SETTINGS_MODULE", environ={"APP_SETTINGS_MODULE": " "})

    def test_missing_file(self) -> None:
        with self.assertRaises(SourceNotFoundError):
            resolve(defaults(), str(self.tmp_dir / "missing.env"), environ={})

    def test_empty_locator(self) -> None:
        with self.assertRaises(SourceNotFoundError):
            resolve(defaults(), "", environ={})

    def test_import_error_inside_settings_module_propagates(self) -> None:
        with self.assertRaises(ModuleNotFoundError) as ctx:
            resolve(defaults(), "confset.tests.broken_settings", environ={})
        self.assertNotIsInstance(ctx.exception, SourceNotFoundError)
        self.assertEqual(ctx.exception.name, "confset_missing_dependency")

    def test_duplicate_key(self) -> None:
        path = self.write("dup.env", "DEBUG=on\nDEBUG=off\n")
        with self.assertRaises(DuplicateKeyError) as ctx:
            resolve(defaults(), path, environ={})
        self.assertEqual(ctx.exception.key, "DEBUG")

    def test_line_without_value(self) -> None:
        path = self.write("bad.env", "DEBUG\n")
        with self.assertRaises(SourceFormatError):
            resolve(defaults(), path, environ={})

    def test_unparsable_line(self) -> None:
        path = self.write("bad.env", "=oops\n")
        with self.assertRaises(SourceFormatError):
            resolve(defaults(), path, environ={})

    def test_file_that_is_not_utf8(self) -> None:
        path = self.tmp_dir / "binary.env"
        path.write_bytes(b"DEBUG=\xff\xfe\n")
        with self.assertRaises(SourceNotFoundError) as ctx:
            resolve(ConfigSet(), str(path), environ={})
        self.assertEqual(ctx.exception.locator, str(path))


class ResolveChainTest(SourceFileMixin, SimpleTestCase):
    def test_later_sources_win(self) -> None:
        common = self.write("common.env", "TIME_ZONE=UTC\nLANGUAGE_CODE=en\n")
        local = self.write("local.env", "TIME_ZONE=Asia/Tokyo\n")
        resolved = resolve_chain(ConfigSet(), [common, local], environ={})
        self.assertEqual(resolved["TIME_ZONE"], "Asia/Tokyo")
        self.assertEqual(resolved["LANGUAGE_CODE"], "en")

    def test_same_as_nested_resolve(self) -> None:
        common = self.write("common.env", "TIME_ZONE=UTC\nEMAIL_PORT=25\n")
        local = self.write("local.env", "TIME_ZONE=Asia/Tokyo\n")
        nested = resolve(resolve(defaults(), common, environ={}), local, environ={})
        chained = resolve_chain(defaults(), [common, local], environ={})
        self.assertEqual(nested, chained)

    def test_type_hints_see_any_layer(self) -> None:
        common = self.write("common.env", "EMAIL_PORT=25\n")
        local = self.write("local.env", "TIME_ZONE=Asia/Tokyo\n")
        resolved = resolve_chain(
            ConfigSet(), [common, local], {"EMAIL_PORT": (int, 0)}, environ={}
        )
        self.assertEqual(resolved["EMAIL_PORT"], 25)

    def test_single_string_locator(self) -> None:
        path = self.write("local.env", "TIME_ZONE=Asia/Tokyo\n")
        resolved = resolve_chain(ConfigSet(), path, environ={})
        self.assertEqual(resolved["TIME_ZONE"], "Asia/Tokyo")

    def test_no_partial_result_on_failure(self) -> None:
        common = self.write("common.env", "TIME_ZONE=UTC\n")
        with self.assertRaises(SourceNotFoundError):
            resolve_chain(ConfigSet(), [common, "confset.tests.no_such_settings"], environ={})
