"""Tests for layered config parsing and validation."""

import os
import sys
import unittest
from copy import deepcopy
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RestaurantSearch.config import load_config, load_config_with_defaults, parse_config_dict

DEFAULT_PATH = REPO_ROOT / "config" / "default.yml"
OVERRIDE_PATH = REPO_ROOT / "config" / "test" / "override.yml"

_CLEAN_ENV = {key: value for key, value in os.environ.items() if key not in ("ELASTICSEARCH_URL", "RESTAURANT_SEARCH_ENV")}


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "backend": {
            "url": "http://localhost:9200",
            "timeout": 10,
            "index_prefix": "restaurant_search",
            "environment": "development",
            "shards": None,
            "replicas": None,
        },
        "search": {"per_page": 25, "sortable_fields": ["id", "created_on"], "default_sort": "relevancy"},
        "output": {"format": "console"},
    }


@patch.dict(os.environ, _CLEAN_ENV, clear=True)
class TestConfigLayering(unittest.TestCase):
    def test_default_file_parses(self) -> None:
        cfg = load_config(DEFAULT_PATH)

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.backend.url, "http://localhost:9200")
        self.assertEqual(cfg.backend.index, "restaurant_search_development")
        self.assertIsNone(cfg.backend.shards)
        self.assertEqual(cfg.search.per_page, 25)
        self.assertEqual(cfg.search.sortable_fields, ("id", "created_on"))
        self.assertEqual(cfg.search.default_sort, "relevancy")
        self.assertEqual(cfg.output.format, "console")

    def test_override_is_merged_over_defaults(self) -> None:
        cfg = load_config_with_defaults(OVERRIDE_PATH, default_path=DEFAULT_PATH)

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.backend.index, "restaurant_search_test")
        self.assertEqual(cfg.backend.shards, 1)
        self.assertEqual(cfg.backend.replicas, 0)
        self.assertEqual(cfg.backend.url, "http://localhost:9200")
        self.assertEqual(cfg.search.per_page, 10)
        self.assertEqual(cfg.search.sortable_fields, ("id", "created_on"))
        self.assertEqual(cfg.output.format, "json")

    def test_environment_variables_override_backend(self) -> None:
        with patch.dict(os.environ, {"ELASTICSEARCH_URL": "https://es.example:9243", "RESTAURANT_SEARCH_ENV": "production"}):
            cfg = parse_config_dict(_base_raw_config())

        self.assertEqual(cfg.backend.url, "https://es.example:9243")
        self.assertEqual(cfg.backend.index, "restaurant_search_production")

    def test_optional_sections_use_defaults(self) -> None:
        raw = _base_raw_config()
        del raw["search"]
        del raw["output"]

        cfg = parse_config_dict(raw)

        self.assertEqual(cfg.search.per_page, 25)
        self.assertEqual(cfg.search.default_sort, "relevancy")
        self.assertEqual(cfg.output.format, "console")

    def test_missing_backend_section_raises(self) -> None:
        raw = _base_raw_config()
        del raw["backend"]
        with self.assertRaisesRegex(ValueError, "Missing required config: backend"):
            parse_config_dict(raw)

    def test_invalid_values_raise(self) -> None:
        cases = [
            (("log", "level"), "VERBOSE", ValueError, "log.level"),
            (("backend", "url"), "localhost:9200", ValueError, "backend.url"),
            (("backend", "timeout"), 0, ValueError, "backend.timeout"),
            (("backend", "environment"), "  ", ValueError, "backend.environment"),
            (("backend", "shards"), "1", TypeError, "backend.shards"),
            (("search", "per_page"), 0, ValueError, "search.per_page"),
            (("search", "per_page"), True, TypeError, "search.per_page"),
            (("search", "sortable_fields"), ["id", "relevancy"], ValueError, "search.sortable_fields"),
            (("search", "default_sort"), "rating", ValueError, "search.default_sort"),
            (("output", "format"), "html", ValueError, "output.format"),
        ]
        for (section, key), value, error, message in cases:
            with self.subTest(key=f"{section}.{key}", value=value):
                raw = deepcopy(_base_raw_config())
                raw[section][key] = value
                with self.assertRaisesRegex(error, message):
                    parse_config_dict(raw)


if __name__ == "__main__":
    unittest.main()
