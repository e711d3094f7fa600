"""Tests for index definition, record loading and the restaurant indexer."""

from __future__ import annotations

import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, call

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RestaurantSearch.backend.client import ElasticsearchClient
from RestaurantSearch.backend.mapping import index_definition, index_mappings, index_name
from RestaurantSearch.backend.query import FIELD_WEIGHTS
from RestaurantSearch.services.indexing import RestaurantIndexer, as_indexed_document
from RestaurantSearch.storage import load_records


class TestIndexDefinition(unittest.TestCase):
    def test_index_name_includes_environment(self) -> None:
        self.assertEqual(index_name("restaurant_search", "test"), "restaurant_search_test")
        with self.assertRaises(ValueError):
            index_name(" ", "test")
        with self.assertRaisesRegex(ValueError, "environment"):
            index_name("restaurant_search", "  ")

    def test_mapping_disables_dynamic_fields(self) -> None:
        mappings = index_mappings()
        self.assertEqual(mappings["dynamic"], "false")

    def test_weighted_fields_are_mapped_as_text(self) -> None:
        properties = index_mappings()["properties"]
        for field, _ in FIELD_WEIGHTS:
            with self.subTest(field=field):
                self.assertEqual(properties[field]["type"], "text")
        self.assertEqual(properties["address"]["analyzer"], "kuromoji")
        self.assertNotIn("analyzer", properties["alphabet"])

    def test_exact_and_date_fields(self) -> None:
        properties = index_mappings()["properties"]
        self.assertEqual(properties["id"], {"type": "integer"})
        self.assertEqual(properties["created_on"], {"type": "date", "format": "date_time"})
        self.assertEqual(properties["pref"]["properties"]["name"], {"type": "keyword"})
        self.assertEqual(properties["category1"]["properties"]["name"], {"type": "keyword"})

    def test_settings_only_when_configured(self) -> None:
        self.assertNotIn("settings", index_definition())
        body = index_definition(shards=1, replicas=0)
        self.assertEqual(body["settings"], {"index": {"number_of_shards": 1, "number_of_replicas": 0}})


class TestAsIndexedDocument(unittest.TestCase):
    def test_projects_known_fields(self) -> None:
        record = {
            "id": 3,
            "name": "麺屋 一",
            "alphabet": "Menya Ichi",
            "address": "東京都新宿区",
            "created_on": "2014-09-01T10:00:00.000+09:00",
            "pref": {"id": 13, "name": "東京都"},
            "category1": "ラーメン",
            "updated_on": "ignored",
            "description": None,
        }

        document = as_indexed_document(record)

        self.assertEqual(
            document,
            {
                "id": 3,
                "name": "麺屋 一",
                "alphabet": "Menya Ichi",
                "address": "東京都新宿区",
                "created_on": "2014-09-01T10:00:00.000+09:00",
                "pref": {"name": "東京都"},
                "category1": {"name": "ラーメン"},
            },
        )


class TestLoadRecords(unittest.TestCase):
    def test_accepts_list_and_wrapped_forms(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            plain = Path(tmp) / "plain.json"
            wrapped = Path(tmp) / "wrapped.json"
            plain.write_text(json.dumps([{"id": 1}]), encoding="utf-8")
            wrapped.write_text(json.dumps({"restaurants": [{"id": 2}]}), encoding="utf-8")

            self.assertEqual(load_records(plain), [{"id": 1}])
            self.assertEqual(load_records(wrapped), [{"id": 2}])

    def test_rejects_other_shapes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.json"
            path.write_text(json.dumps([{"id": 1}, "oops"]), encoding="utf-8")
            with self.assertRaisesRegex(ValueError, r"restaurants\[1\]"):
                load_records(path)

            path.write_text(json.dumps({"items": []}), encoding="utf-8")
            with self.assertRaises(ValueError):
                load_records(path)


class TestRestaurantIndexer(unittest.TestCase):
    def _indexer(self) -> tuple[RestaurantIndexer, MagicMock]:
        client = MagicMock(spec=ElasticsearchClient)
        return RestaurantIndexer(client=client, index="restaurant_search_test", shards=1, replicas=0), client

    def test_create_index_when_missing(self) -> None:
        indexer, client = self._indexer()
        client.index_exists.return_value = False

        self.assertTrue(indexer.create_index())

        client.delete_index.assert_not_called()
        client.create_index.assert_called_once_with(
            "restaurant_search_test",
            index_definition(shards=1, replicas=0),
        )

    def test_existing_index_is_kept_without_force(self) -> None:
        indexer, client = self._indexer()
        client.index_exists.return_value = True

        self.assertFalse(indexer.create_index())

        client.create_index.assert_not_called()
        client.delete_index.assert_not_called()

    def test_force_recreates_existing_index(self) -> None:
        indexer, client = self._indexer()
        client.index_exists.return_value = True

        self.assertTrue(indexer.create_index(force=True))

        client.delete_index.assert_called_once_with("restaurant_search_test")
        client.create_index.assert_called_once()

    def test_index_and_delete_single_restaurant(self) -> None:
        indexer, client = self._indexer()

        indexer.index_restaurant({"id": 5, "name": "鮨", "phone": "000"})
        indexer.delete_restaurant(5)

        client.index_document.assert_called_once_with("restaurant_search_test", "5", {"id": 5, "name": "鮨"})
        client.delete_document.assert_called_once_with("restaurant_search_test", "5")

    def test_import_in_batches_then_refresh(self) -> None:
        indexer, client = self._indexer()
        records = [{"id": i, "name": f"r{i}"} for i in range(1, 6)]

        count = indexer.import_restaurants(records, batch_size=2)

        self.assertEqual(count, 5)
        self.assertEqual(
            client.bulk_index.call_args_list,
            [
                call("restaurant_search_test", [("1", {"id": 1, "name": "r1"}), ("2", {"id": 2, "name": "r2"})]),
                call("restaurant_search_test", [("3", {"id": 3, "name": "r3"}), ("4", {"id": 4, "name": "r4"})]),
                call("restaurant_search_test", [("5", {"id": 5, "name": "r5"})]),
            ],
        )
        client.refresh.assert_called_once_with("restaurant_search_test")

    def test_import_rejects_records_without_id_before_sending(self) -> None:
        indexer, client = self._indexer()

        with self.assertRaisesRegex(ValueError, "no id"):
            indexer.import_restaurants([{"id": 1}, {"name": "missing"}])

        client.bulk_index.assert_not_called()

    def test_import_nothing_skips_refresh(self) -> None:
        indexer, client = self._indexer()

        self.assertEqual(indexer.import_restaurants([]), 0)

        client.bulk_index.assert_not_called()
        client.refresh.assert_not_called()

    def test_import_rejects_bad_batch_size(self) -> None:
        indexer, _ = self._indexer()
        with self.assertRaises(ValueError):
            indexer.import_restaurants([{"id": 1}], batch_size=0)


if __name__ == "__main__":
    unittest.main()
