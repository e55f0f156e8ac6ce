"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchBox.config import load_config, load_config_with_defaults, merge_config_dicts, parse_config_dict
from SearchBox.core.options import SearchBoxOptions


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "parser": {"keywords": ["status", "author"]},
        "output": {"base_dir": "output", "formats": ["console"]},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.parser.keywords, ("status", "author"))
        self.assertEqual(cfg.output.formats, ("console",))
        self.assertEqual(cfg.options(), SearchBoxOptions(keywords=("status", "author")))

    def test_all_sections_optional(self) -> None:
        cfg = parse_config_dict({})
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.parser.keywords, ())
        self.assertEqual(cfg.output.formats, ("console",))
        self.assertEqual(load_config(None), cfg)

    def test_keywords_normalization(self) -> None:
        raw = _base_raw_config()
        raw["parser"]["keywords"] = [" status ", "status", "  ", "tag"]
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.parser.keywords, ("status", "tag"))

    def test_single_keyword_string(self) -> None:
        raw = _base_raw_config()
        raw["parser"]["keywords"] = "status"
        self.assertEqual(parse_config_dict(raw).parser.keywords, ("status",))

    def test_keyword_with_separator_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["parser"]["keywords"] = ["a:b"]
        with self.assertRaisesRegex(ValueError, "parser\\.keywords"):
            parse_config_dict(raw)

    def test_keywords_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["parser"]["keywords"] = 5
        with self.assertRaisesRegex(TypeError, "parser\\.keywords"):
            parse_config_dict(raw)
        raw["parser"]["keywords"] = ["ok", 5]
        with self.assertRaisesRegex(TypeError, "parser\\.keywords\\[1\\]"):
            parse_config_dict(raw)

    def test_log_level_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "loud"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_log_to_file_type_error(self) -> None:
        raw = _base_raw_config()
        raw["log"]["to_file"] = "yes"
        with self.assertRaisesRegex(TypeError, "log\\.to_file"):
            parse_config_dict(raw)

    def test_output_unknown_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["console", "xml"]
        with self.assertRaisesRegex(ValueError, "output\\.formats"):
            parse_config_dict(raw)

    def test_output_formats_normalized(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["JSON", "json", "Console"]
        self.assertEqual(parse_config_dict(raw).output.formats, ("json", "console"))

    def test_section_must_be_mapping(self) -> None:
        raw = _base_raw_config()
        raw["parser"] = ["status"]
        with self.assertRaisesRegex(TypeError, "parser"):
            parse_config_dict(raw)

    def test_overrides(self) -> None:
        cfg = parse_config_dict(_base_raw_config()).with_overrides(keywords=["tag", "tag"], formats=["JSON"])
        self.assertEqual(cfg.parser.keywords, ("tag",))
        self.assertEqual(cfg.output.formats, ("json",))
        self.assertEqual(cfg.runtime.level, "INFO")

    def test_overrides_are_validated(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        with self.assertRaisesRegex(ValueError, "parser\\.keywords"):
            cfg.with_overrides(keywords=["bad key"])
        with self.assertRaisesRegex(ValueError, "output\\.formats"):
            cfg.with_overrides(formats=["xml"])

    def test_merge_config_dicts(self) -> None:
        merged = merge_config_dicts(
            {"log": {"level": "INFO", "dir": "log"}, "parser": {"keywords": ["a"]}},
            {"log": {"level": "DEBUG"}, "parser": {"keywords": ["b"]}},
        )
        self.assertEqual(merged, {"log": {"level": "DEBUG", "dir": "log"}, "parser": {"keywords": ["b"]}})


class TestConfigFiles(unittest.TestCase):
    def test_repo_default_config(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.parser.keywords, ("status", "author", "tag"))
        self.assertEqual(cfg.output.formats, ("console",))

    def test_override_file_merges_over_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override = Path(tmp) / "override.yml"
            override.write_text("log:\n  level: debug\nparser:\n  keywords: [label]\n", encoding="utf-8")
            cfg = load_config_with_defaults(override, default_path=REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.parser.keywords, ("label",))
        self.assertEqual(cfg.output.base_dir, "output")

    def test_no_override_uses_defaults_file(self) -> None:
        cfg = load_config_with_defaults(None, default_path=REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.parser.keywords, ("status", "author", "tag"))

    def test_missing_defaults_file_falls_back_to_built_ins(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override = Path(tmp) / "override.yml"
            override.write_text("parser:\n  keywords: [label]\n", encoding="utf-8")
            missing = Path(tmp) / "missing.yml"
            cfg = load_config_with_defaults(override, default_path=missing)
            builtin = load_config_with_defaults(None, default_path=missing)
        self.assertEqual(cfg.parser.keywords, ("label",))
        self.assertEqual(cfg.output, builtin.output)
        self.assertEqual(builtin, load_config(None))

    def test_non_mapping_root_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "mapping"):
                load_config(path)


if __name__ == "__main__":
    unittest.main()
