import sys
import tempfile
import tomllib
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from panefetch_core.config import (
    DEFAULT_CONFIG_TOML,
    DEFAULT_INCLUDES,
    DEFAULT_LAYOUT,
    AppConfig,
    load_config,
    parse_config,
    save_default_config,
)


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.toml")
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.includes, DEFAULT_INCLUDES)
            self.assertEqual(cfg.source_path, "os")
            self.assertEqual(cfg.offset, 5)
            self.assertFalse(cfg.gui.enable)

    def test_generated_file_matches_builtin_defaults(self):
        cfg = parse_config(tomllib.loads(DEFAULT_CONFIG_TOML))
        self.assertEqual(cfg.layout, DEFAULT_LAYOUT)
        self.assertEqual(cfg.includes, DEFAULT_INCLUDES)
        self.assertEqual(cfg.offset, 5)
        self.assertEqual(cfg.source_path, "os")
        self.assertEqual(cfg.colors["red"], "\\e[1;91m")
        self.assertEqual(cfg.gui.colors["blue"], "!#00aaff")

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.toml"
            save_default_config(path)
            self.assertEqual(load_config(path).layout, DEFAULT_LAYOUT)
            with self.assertRaises(FileExistsError):
                save_default_config(path)
            path.write_text("[config]\noffset = 2\n", encoding="utf-8")
            save_default_config(path, force=True)
            self.assertEqual(load_config(path).offset, 5)

    def test_invalid_toml_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.toml"
            path.write_text("[config\nlayout = ", encoding="utf-8")
            with self.assertLogs("panefetch.config", level="WARNING"):
                cfg = load_config(path)
            self.assertEqual(cfg.layout, DEFAULT_LAYOUT)

    def test_non_table_sections_fall_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.toml"
            path.write_text('config = "oops"\ngui = 3\n', encoding="utf-8")
            with self.assertLogs("panefetch.config", level="WARNING") as logs:
                cfg = load_config(path)
            self.assertEqual(len(logs.output), 2)
            self.assertEqual(cfg.layout, DEFAULT_LAYOUT)
            self.assertEqual(cfg.includes, DEFAULT_INCLUDES)
            self.assertFalse(cfg.gui.enable)

    def test_partial_config_is_normalized(self):
        cfg = parse_config(
            {
                "config": {
                    "layout": ["$<os.name>"],
                    "includes": "os",
                    "offset": -3,
                    "source-path": "$HOME/logo.txt",
                    "red": "#ff0000",
                    "orange": "#ffa500",
                    "blue": 4,
                },
                "gui": {"enable": True},
            }
        )
        self.assertEqual(cfg.layout, ["$<os.name>"])
        self.assertEqual(cfg.includes, DEFAULT_INCLUDES)
        self.assertEqual(cfg.offset, 0)
        self.assertFalse(cfg.source_path.startswith("$HOME"))
        self.assertEqual(cfg.colors, {"red": "#ff0000"})
        self.assertTrue(cfg.gui.enable)
        self.assertEqual(cfg.gui.colors, {})

    def test_bad_offset_uses_default(self):
        self.assertEqual(parse_config({"config": {"offset": "wide"}}).offset, 5)


if __name__ == "__main__":
    unittest.main()
