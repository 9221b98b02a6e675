"""Tests for persisted picker preferences."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fuzzypick.runtime import config


class ConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.config_path = self.root / "nested" / "config.json"
        patcher = mock.patch.object(config, "CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_config_yields_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertFalse(config.load_show_hidden())
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_last_directory())

    def test_malformed_or_non_object_config_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})
        self.config_path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_show_hidden_round_trip_keeps_other_keys(self) -> None:
        config.save_config({"theme": "ocean"})
        config.save_show_hidden(True)

        data = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(data, {"theme": "ocean", "show_hidden": True})
        self.assertTrue(config.load_show_hidden())
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_non_boolean_show_hidden_is_false(self) -> None:
        config.save_config({"show_hidden": "yes"})
        self.assertFalse(config.load_show_hidden())

    def test_blank_theme_is_unset(self) -> None:
        config.save_config({"theme": "   "})
        self.assertIsNone(config.load_theme_name())

    def test_last_directory_must_still_exist(self) -> None:
        existing = self.root / "project"
        existing.mkdir()
        config.save_last_directory(existing)
        self.assertEqual(config.load_last_directory(), existing)

        existing.rmdir()
        self.assertIsNone(config.load_last_directory())

    def test_relative_last_directory_is_ignored(self) -> None:
        config.save_config({"last_directory": "relative/dir"})
        self.assertIsNone(config.load_last_directory())

    def test_save_failure_is_silent(self) -> None:
        blocker = self.root / "blocker"
        blocker.write_text("", encoding="utf-8")
        with mock.patch.object(config, "CONFIG_PATH", blocker / "config.json"):
            config.save_config({"theme": "ocean"})
            self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
