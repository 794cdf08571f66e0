"""Tests for view config sanitization and preference persistence."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filetree import config
from filetree.config import TreeViewConfig


class TreeViewConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        default = TreeViewConfig()
        self.assertEqual(default.base_path, "")
        self.assertEqual(default.default_expand_depth, 2)
        self.assertFalse(default.expand_all)
        self.assertIsNone(default.max_width)

    def test_from_mapping_sanitizes_invalid_values(self) -> None:
        loaded = TreeViewConfig.from_mapping(
            {"base_path": 7, "default_expand_depth": True, "expand_all": "yes", "max_width": -3}
        )
        self.assertEqual(loaded, TreeViewConfig())

    def test_from_mapping_keeps_valid_values(self) -> None:
        loaded = TreeViewConfig.from_mapping(
            {"base_path": "apps/web", "default_expand_depth": 0, "expand_all": True, "max_width": 60}
        )
        self.assertEqual(loaded, TreeViewConfig("apps/web", 0, True, 60))

    def test_with_overrides_skips_none(self) -> None:
        base = TreeViewConfig(default_expand_depth=4)
        self.assertEqual(base.with_overrides(default_expand_depth=None, base_path="x").default_expand_depth, 4)
        self.assertEqual(base.with_overrides(default_expand_depth=0).default_expand_depth, 0)


class PreferencePersistenceTests(unittest.TestCase):
    def test_view_defaults_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("filetree.config.CONFIG_PATH", config_path):
                self.assertTrue(config.save_view_defaults(TreeViewConfig(default_expand_depth=5, expand_all=True)))
                self.assertTrue(config.save_theme_name(" ocean "))

                loaded = config.load_view_config()
                self.assertEqual(loaded.default_expand_depth, 5)
                self.assertTrue(loaded.expand_all)
                self.assertEqual(config.load_theme_name(), "ocean")

    def test_view_config_ignores_per_view_keys_in_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filetree.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config(
                    {"default_expand_depth": 3, "expand_all": True, "base_path": "apps/web", "max_width": 40}
                )
                loaded = config.load_view_config()

        self.assertEqual(loaded, TreeViewConfig(default_expand_depth=3, expand_all=True))

    def test_malformed_file_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2", encoding="utf-8")
            with mock.patch("filetree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_view_config(), TreeViewConfig())
                self.assertIsNone(config.load_theme_name())

    def test_non_object_json_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]\n", encoding="utf-8")
            with mock.patch("filetree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_save_failure_returns_false(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("filetree.config.CONFIG_PATH", blocker / "config.json"):
                self.assertFalse(config.save_config({"theme": "ocean"}))

    def test_blank_theme_is_not_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filetree.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertFalse(config.save_theme_name("   "))
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
