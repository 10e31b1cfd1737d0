"""Tests for config override behavior with defaults."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.config import load_config_with_defaults


_BASE_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

search:
  case_sensitive: false
  truthy_values: ["true", "yes"]
  falsy_values: ["false", "no"]

fields:
  - name: name
    label: Name
  - name: favoriteColor
    label: Favorite Color
    show_suggestions: true

output:
  base_dir: output
  formats: [console]
"""


class TestConfigOverride(unittest.TestCase):
    def _load(self, override_yaml: str):
        with tempfile.TemporaryDirectory() as tmp:
            base_path = Path(tmp) / "default.yml"
            base_path.write_text(_BASE_YAML, encoding="utf-8")
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")
            return load_config_with_defaults(override_path, base_path)

    def test_override_merges_with_defaults(self) -> None:
        cfg = self._load(
            """
log:
  level: DEBUG

search:
  case_sensitive: true
"""
        )
        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.runtime.dir, "log")
        self.assertTrue(cfg.search.case_sensitive)
        self.assertEqual(cfg.search.truthy_values, ("true", "yes"))
        self.assertEqual(cfg.fields.names(), ("name", "favoriteColor"))

    def test_override_replaces_lists(self) -> None:
        cfg = self._load(
            """
fields:
  - name: city
    label: City

output:
  formats: [console, json]
"""
        )
        self.assertEqual(cfg.fields.names(), ("city",))
        self.assertEqual(cfg.output.formats, ("console", "json"))
        self.assertEqual(cfg.output.base_dir, "output")

    def test_empty_override_keeps_defaults(self) -> None:
        cfg = self._load("")
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.fields.names(), ("name", "favoriteColor"))

    def test_override_is_validated_after_merge(self) -> None:
        with self.assertRaisesRegex(ValueError, "search\\.global_search_replacement"):
            self._load(
                """
search:
  global_search_replacement: city
"""
            )

    def test_repo_defaults_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("search:\n  global_search_replacement: name\n", encoding="utf-8")
            cfg = load_config_with_defaults(override_path, REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.search.global_search_replacement, "name")
        self.assertEqual(len(cfg.fields.descriptors), 5)


if __name__ == "__main__":
    unittest.main()
