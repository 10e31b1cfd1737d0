"""Tests for the search box input adapter."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.adapters import FIELDS_MENU, SUGGESTIONS_MENU, SearchInput
from MultiSearch.core.models import ALL_FIELDS, FieldDescriptor
from MultiSearch.services import MultiSearch

FIELDS = (
    FieldDescriptor(name="name", label="Name"),
    FieldDescriptor(name="favoriteColor", label="Favorite Color", show_suggestions=True, strict_suggestions=True),
)

RECORDS = [
    {"name": "Bob", "favoriteColor": "Blue"},
    {"name": "Eve", "favoriteColor": "Light Blue"},
]


class TestSearchInput(unittest.TestCase):
    def setUp(self) -> None:
        self.search = MultiSearch(FIELDS, RECORDS)
        self.input = SearchInput(self.search)

    def _type(self, text: str) -> None:
        for char in text:
            self.input.key(char)

    def test_typed_label_colon_selects_field(self) -> None:
        self._type("name:eve")
        self.assertEqual(self.search.selected_field.name, "name")
        self.assertEqual(self.input.text, "eve")
        clause = self.input.submit()
        self.assertEqual(clause.field, "name")
        self.assertEqual(self.search.result, [RECORDS[1]])

    def test_unknown_label_keeps_colon(self) -> None:
        self._type("note:x")
        self.assertEqual(self.input.text, "note:x")
        self.assertFalse(self.input.has_field)

    def test_colon_after_field_is_text(self) -> None:
        self._type("name:a:b")
        self.assertEqual(self.input.text, "a:b")

    def test_paste_shorthand(self) -> None:
        self.assertTrue(self.input.paste("Favorite Color:blue"))
        self.assertEqual(self.search.selected_field.name, "favoriteColor")
        self.assertEqual(self.input.text, "blue")
        self.assertTrue(self.input.is_menu_open)
        self.assertEqual(self.input.shown_menu, SUGGESTIONS_MENU)

    def test_paste_without_known_label(self) -> None:
        self.assertFalse(self.input.paste("plain text"))
        self.assertFalse(self.input.paste("Other:value"))
        self.assertEqual(self.input.shown_menu, FIELDS_MENU)

    def test_submit_empty_text(self) -> None:
        self.assertIsNone(self.input.submit())
        self.assertEqual(self.search.clauses, ())

    def test_backspace_on_empty_text_resets_field(self) -> None:
        self._type("name:x")
        self.input.backspace()
        self.assertEqual(self.input.text, "")
        self.assertTrue(self.input.has_field)
        self.input.backspace()
        self.assertEqual(self.search.selected_field.name, ALL_FIELDS)

    def test_escape_closes_menu_then_resets_field(self) -> None:
        self.input.paste("Favorite Color:")
        self.assertTrue(self.input.is_menu_open)
        self.input.escape()
        self.assertFalse(self.input.is_menu_open)
        self.assertTrue(self.input.has_field)
        self.input.escape()
        self.assertFalse(self.input.has_field)

    def test_pick_suggestion(self) -> None:
        self.input.paste("Favorite Color:")
        clause = self.input.pick_suggestion("Blue")
        self.assertEqual(clause.query_text, '"Blue"')
        self.assertEqual(self.search.result, [RECORDS[0]])
        self.assertFalse(self.input.is_menu_open)

    def test_clear(self) -> None:
        self._type("name:bo")
        self.input.clear()
        self.assertEqual(self.input.text, "")
        self.assertFalse(self.input.has_field)


if __name__ == "__main__":
    unittest.main()
