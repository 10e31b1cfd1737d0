"""Tests for console and JSON result rendering."""

import json
import sys
import tempfile
import unittest
from datetime import date, datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.core.models import FieldDescriptor
from MultiSearch.core.query import SearchClause
from MultiSearch.renderers import JsonFileWriter, MultiOutputWriter, render_json, render_text
from MultiSearch.renderers.console import render_clauses


class TestRenderers(unittest.TestCase):
    def test_render_text_list(self) -> None:
        text = render_text([{"name": "Bob", "born": date(1991, 11, 4), "team": None}])
        self.assertEqual(text, "1. name=Bob, born=1991-11-04, team=-\n")

    def test_render_text_categories(self) -> None:
        text = render_text({"Blue": [{"name": "Bob"}], "": [{"name": "Eve"}]})
        self.assertIn("Blue (1)", text)
        self.assertIn("(none) (1)", text)
        self.assertIn("   1. name=Eve", text)

    def test_render_text_empty(self) -> None:
        self.assertEqual(render_text([]), "(no matches)\n")

    def test_render_clauses(self) -> None:
        clauses = [
            SearchClause(field="name", field_label="Name", query_text="bob"),
            SearchClause(field="_default", field_label="", query_text="blue"),
        ]
        self.assertEqual(render_clauses(clauses), "[Name: bob]  [blue]")
        self.assertEqual(render_clauses([]), "(no filters)")

    def test_render_json(self) -> None:
        data = render_json({"Blue": [{"born": datetime(1991, 11, 4, 8, 30), "tags": ("a",)}]})
        self.assertEqual(data, {"Blue": [{"born": "1991-11-04T08:30:00", "tags": ["a"]}]})

    def test_json_writer_accumulates_results_and_suggestions(self) -> None:
        field = FieldDescriptor(name="favoriteColor", label="Favorite Color", show_suggestions=True)
        clause = SearchClause(field="name", field_label="Name", query_text="bob")
        with tempfile.TemporaryDirectory() as tmp:
            writer = JsonFileWriter(tmp, indent=0)
            MultiOutputWriter([writer]).write_result([{"name": "Bob"}], [clause])
            writer.write_suggestions(field, ["Blue", "Red"])
            writer.finalize("suggest")
            (path,) = (Path(tmp) / "json").glob("suggest_*.json")
            text = path.read_text(encoding="utf-8")
        self.assertEqual(len(text.splitlines()), 1)
        self.assertEqual(
            json.loads(text),
            [
                {"clauses": [{"field": "name", "label": "Name", "query": "bob"}], "result": [{"name": "Bob"}]},
                {"field": "favoriteColor", "label": "Favorite Color", "suggestions": ["Blue", "Red"]},
            ],
        )


if __name__ == "__main__":
    unittest.main()
