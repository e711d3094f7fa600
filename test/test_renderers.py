"""Tests for console and JSON rendering of result pages."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RestaurantSearch.core.models import SearchHit, SearchPage
from RestaurantSearch.core.query import SearchParameters
from RestaurantSearch.renderers import JsonOutputWriter, create_output_writer, render_json, render_text


def _page() -> SearchPage:
    return SearchPage(
        page=2,
        per_page=10,
        total=11,
        hits=(
            SearchHit(
                id="11",
                score=0.5,
                source={"name": "Sushi Jiro", "name_kana": "すしじろう", "address": "Ginza", "pref": {"name": "Tokyo"}},
            ),
        ),
        max_score=2.0,
        took=4,
    )


class TestRenderText(unittest.TestCase):
    def test_lists_hits_with_absolute_numbering(self) -> None:
        text = render_text(_page())

        self.assertIn("Page 2/2 (11 matches)", text)
        self.assertIn("11. Sushi Jiro (すしじろう)", text)
        self.assertIn("Address: Tokyo / Ginza", text)
        self.assertIn("Id: 11  Score: 0.500", text)

    def test_empty_page(self) -> None:
        text = render_text(SearchPage(page=1, per_page=25, total=0))
        self.assertIn("No restaurants found.", text)


class TestRenderJson(unittest.TestCase):
    def test_includes_paging_hits_and_params(self) -> None:
        params = SearchParameters(query="sushi", sort_field="id", sort_order="desc", page=2)

        out = render_json(_page(), params)

        self.assertEqual(out["total"], 11)
        self.assertEqual(out["total_pages"], 2)
        self.assertEqual(out["hits"][0], {"id": "11", "score": 0.5, "source": dict(_page().hits[0].source)})
        self.assertEqual(out["params"], {"query": "sushi", "sort": "id", "order": "desc", "page": 2})

    def test_writer_echoes_json(self) -> None:
        printed: list[str] = []
        JsonOutputWriter(echo=printed.append).write_page(_page(), SearchParameters())
        self.assertEqual(len(printed), 1)
        self.assertIn('"took": 4', printed[0])


class TestCreateOutputWriter(unittest.TestCase):
    def test_unknown_format_raises(self) -> None:
        with self.assertRaises(ValueError):
            create_output_writer("html")

    def test_format_is_case_insensitive(self) -> None:
        self.assertIsInstance(create_output_writer("JSON"), JsonOutputWriter)


if __name__ == "__main__":
    unittest.main()
