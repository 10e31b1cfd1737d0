"""Tests for boolean query matching."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.matchers.boolean import (
    DEFAULT_FALSY_VALUES,
    DEFAULT_TRUTHY_VALUES,
    is_boolean_query_match,
)


class TestBooleanQueryMatch(unittest.TestCase):
    def test_true_value_matches_truthy_tokens(self) -> None:
        for token in DEFAULT_TRUTHY_VALUES:
            with self.subTest(token=token):
                self.assertTrue(is_boolean_query_match(True, token))

    def test_false_value_matches_falsy_tokens(self) -> None:
        for token in DEFAULT_FALSY_VALUES:
            with self.subTest(token=token):
                self.assertTrue(is_boolean_query_match(False, token))

    def test_tokens_of_the_other_value_do_not_match(self) -> None:
        self.assertFalse(is_boolean_query_match(True, "no"))
        self.assertFalse(is_boolean_query_match(False, "yes"))

    def test_unknown_token_never_matches(self) -> None:
        self.assertFalse(is_boolean_query_match(True, "maybe"))
        self.assertFalse(is_boolean_query_match(False, "maybe"))
        self.assertFalse(is_boolean_query_match(True, ""))

    def test_comparison_is_exact(self) -> None:
        self.assertFalse(is_boolean_query_match(True, "YES"))
        self.assertFalse(is_boolean_query_match(True, " yes"))

    def test_custom_tokens(self) -> None:
        self.assertTrue(is_boolean_query_match(True, "yay", truthy_values=["yay"]))
        self.assertTrue(is_boolean_query_match(False, "nay", falsy_values=["nay"]))
        self.assertFalse(is_boolean_query_match(True, "yes", truthy_values=["yay"]))


if __name__ == "__main__":
    unittest.main()
