from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from moontree import config
from moontree.errors import ConfigError


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.config_path = self.root / "config.json"
        patcher = mock.patch("moontree.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_repo_env_is_fatal(self) -> None:
        with self.assertRaises(ConfigError) as ctx:
            config.resolve_settings({})

        self.assertIn("MOON", ctx.exception.message)

    def test_repo_root_must_be_a_directory(self) -> None:
        with self.assertRaises(ConfigError):
            config.resolve_settings({"MOON": str(self.root / "missing")})

    def test_repo_root_comes_from_env_with_defaults(self) -> None:
        settings = config.resolve_settings({"MOON": str(self.root)})

        self.assertEqual(settings, config.Settings(repo_root=self.root, moon_bin="moon", theme=None))

    def test_repo_flag_overrides_env(self) -> None:
        other = self.root / "other"
        other.mkdir()

        settings = config.resolve_settings({"MOON": str(self.root)}, repo=str(other))

        self.assertEqual(settings.repo_root, other)

    def test_config_file_supplies_moon_bin_and_theme(self) -> None:
        self.config_path.write_text(json.dumps({"moon_bin": "/opt/moon", "theme": "ocean"}), encoding="utf-8")

        settings = config.resolve_settings({"MOON": str(self.root)})

        self.assertEqual(settings.moon_bin, "/opt/moon")
        self.assertEqual(settings.theme, "ocean")

    def test_flags_and_env_take_precedence_over_config_file(self) -> None:
        self.config_path.write_text(json.dumps({"moon_bin": "/opt/moon", "theme": "ocean"}), encoding="utf-8")

        from_env = config.resolve_settings({"MOON": str(self.root), "MOONTREE_MOON_BIN": "envmoon"})
        from_flags = config.resolve_settings(
            {"MOON": str(self.root), "MOONTREE_MOON_BIN": "envmoon"},
            moon_bin="flagmoon",
            theme="default",
        )

        self.assertEqual(from_env.moon_bin, "envmoon")
        self.assertEqual(from_flags.moon_bin, "flagmoon")
        self.assertEqual(from_flags.theme, "default")

    def test_malformed_config_falls_back_to_defaults(self) -> None:
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

        self.config_path.write_text(json.dumps(["list"]), encoding="utf-8")
        self.assertEqual(config.load_config(), {})

        self.config_path.write_text(json.dumps({"moon_bin": 3, "theme": "  "}), encoding="utf-8")
        settings = config.resolve_settings({"MOON": str(self.root)})
        self.assertEqual(settings.moon_bin, "moon")
        self.assertIsNone(settings.theme)

    def test_resolving_settings_never_writes_config(self) -> None:
        config.resolve_settings({"MOON": str(self.root)})

        self.assertFalse(self.config_path.exists())


if __name__ == "__main__":
    unittest.main()
