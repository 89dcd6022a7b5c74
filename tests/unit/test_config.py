"""Tests for persisted CLI defaults and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from buildsizes import config
from buildsizes.config import CliDefaults


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("buildsizes.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_cli_defaults(), CliDefaults())

    def test_defaults_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            expected = CliDefaults(filetype="css", decimals=1, binary=True, theme="ocean", style="native")
            with mock.patch("buildsizes.config.CONFIG_PATH", config_path):
                config.save_cli_defaults(expected)
                self.assertEqual(config.load_cli_defaults(), expected)

    def test_save_defaults_keeps_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("buildsizes.config.CONFIG_PATH", config_path):
                config.save_config({"other": 1})
                config.save_cli_defaults(CliDefaults())
                saved = config.load_config()

            self.assertEqual(saved["other"], 1)
            self.assertEqual(saved["filetype"], "js")

    def test_invalid_values_fall_back_individually(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("buildsizes.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "filetype": "  ",
                        "decimals": True,
                        "binary": "yes",
                        "theme": 7,
                        "style": " friendly ",
                    }
                )
                loaded = config.load_cli_defaults()

            self.assertEqual(loaded, CliDefaults(style="friendly"))

    def test_negative_decimals_are_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("buildsizes.config.CONFIG_PATH", config_path):
                config.save_config({"decimals": -3})
                self.assertEqual(config.load_cli_defaults().decimals, 2)

    def test_malformed_json_and_non_object_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("buildsizes.config.CONFIG_PATH", config_path):
                config_path.write_text("{broken", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
