"""Tests for the ordered clause store."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.core.models import ALL_FIELDS
from MultiSearch.core.query import SearchClause
from MultiSearch.services.clauses import ClauseStore


def _clause(field: str, text: str) -> SearchClause:
    return SearchClause(field=field, field_label=field.title(), query_text=text)


class TestClauseStore(unittest.TestCase):
    def test_add_keeps_order(self) -> None:
        store = ClauseStore()
        store.add(_clause("name", "bob"))
        store.add(_clause("name", "eve"))
        self.assertEqual([c.query_text for c in store], ["bob", "eve"])
        self.assertEqual(len(store), 2)

    def test_clauses_is_a_snapshot(self) -> None:
        store = ClauseStore()
        store.add(_clause("name", "bob"))
        snapshot = store.clauses
        store.add(_clause("name", "eve"))
        self.assertEqual(len(snapshot), 1)

    def test_replace_field_keeps_one_clause_per_field(self) -> None:
        store = ClauseStore()
        store.add(_clause("name", "bob"))
        store.add(_clause("favoriteNumber", ">5"))
        store.replace_field(_clause("name", "eve"))
        self.assertEqual([c.key for c in store], [("favoriteNumber", ">5"), ("name", "eve")])

    def test_replace_field_does_not_touch_global_clauses(self) -> None:
        store = ClauseStore()
        store.add(_clause(ALL_FIELDS, "bob"))
        store.replace_field(_clause(ALL_FIELDS, "eve"))
        self.assertEqual([c.query_text for c in store], ["bob", "eve"])

    def test_delete(self) -> None:
        store = ClauseStore()
        store.add(_clause("name", "bob"))
        store.add(_clause("name", "eve"))
        self.assertTrue(store.delete(0))
        self.assertEqual([c.query_text for c in store], ["eve"])

    def test_delete_out_of_range_is_ignored(self) -> None:
        store = ClauseStore()
        store.add(_clause("name", "bob"))
        self.assertFalse(store.delete(1))
        self.assertFalse(store.delete(-1))
        self.assertEqual(len(store), 1)

    def test_clear(self) -> None:
        store = ClauseStore()
        self.assertFalse(store.clear())
        store.add(_clause("name", "bob"))
        self.assertTrue(store.clear())
        self.assertEqual(store.clauses, ())


if __name__ == "__main__":
    unittest.main()
