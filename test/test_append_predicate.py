"""Tests for the clause sequence append predicate."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.core.query import SearchClause
from MultiSearch.services.filter import is_append_of

A = SearchClause(field="name", field_label="Name", query_text="bob")
B = SearchClause(field="favoriteNumber", field_label="Favorite Number", query_text="<=9")
C = SearchClause(field="_default", field_label="", query_text="blue")


class TestIsAppendOf(unittest.TestCase):
    def test_append_to_empty(self) -> None:
        self.assertTrue(is_append_of([], [A]))

    def test_append_one_or_more(self) -> None:
        self.assertTrue(is_append_of([A], [A, B]))
        self.assertTrue(is_append_of([A], [A, B, C]))

    def test_equal_sequences_are_not_appends(self) -> None:
        self.assertFalse(is_append_of([], []))
        self.assertFalse(is_append_of([A, B], [A, B]))

    def test_removal_is_not_an_append(self) -> None:
        self.assertFalse(is_append_of([A, B], [A]))
        self.assertFalse(is_append_of([A], []))

    def test_reorder_is_not_an_append(self) -> None:
        self.assertFalse(is_append_of([A, B], [B, A, C]))

    def test_changed_clause_is_not_an_append(self) -> None:
        changed = SearchClause(field="name", field_label="Name", query_text="eve")
        self.assertFalse(is_append_of([A], [changed, B]))

    def test_labels_are_ignored(self) -> None:
        relabeled = SearchClause(field="name", field_label="Full Name", query_text="bob")
        self.assertTrue(is_append_of([A], [relabeled, B]))


if __name__ == "__main__":
    unittest.main()
