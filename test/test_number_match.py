"""Tests for number query matching."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.matchers.number import is_number_query_match, parse_number


class TestNumberQueryMatch(unittest.TestCase):
    def test_exact_number(self) -> None:
        self.assertTrue(is_number_query_match(123, "123"))
        self.assertTrue(is_number_query_match(123, " 123.0 "))
        self.assertTrue(is_number_query_match(1.5, "1.5"))
        self.assertFalse(is_number_query_match(123, "12"))

    def test_relational_operators(self) -> None:
        self.assertTrue(is_number_query_match(123, ">100"))
        self.assertTrue(is_number_query_match(123, ">=123"))
        self.assertTrue(is_number_query_match(123, "<200"))
        self.assertTrue(is_number_query_match(123, "<=123"))
        self.assertFalse(is_number_query_match(123, ">123"))
        self.assertFalse(is_number_query_match(123, "<123"))

    def test_not_equal(self) -> None:
        self.assertTrue(is_number_query_match(123, "!=100"))
        self.assertFalse(is_number_query_match(123, "!=123"))

    def test_operator_result_follows_the_relation(self) -> None:
        cases = {">": int.__gt__, ">=": int.__ge__, "<": int.__lt__, "<=": int.__le__, "!=": int.__ne__}
        for operator, relation in cases.items():
            for value in (5, 10, 15):
                with self.subTest(operator=operator, value=value):
                    self.assertEqual(is_number_query_match(value, f"{operator}10"), relation(value, 10))

    def test_spaces_between_operator_and_operand(self) -> None:
        self.assertTrue(is_number_query_match(123, ">   100"))
        self.assertTrue(is_number_query_match(123, "  <= 123  "))

    def test_invalid_range(self) -> None:
        self.assertFalse(is_number_query_match(123, "100-200"))

    def test_invalid_operator(self) -> None:
        self.assertFalse(is_number_query_match(123, "><100"))
        self.assertFalse(is_number_query_match(123, "==100"))
        self.assertFalse(is_number_query_match(123, "!100"))
        self.assertFalse(is_number_query_match(123, "=>100"))

    def test_invalid_operand(self) -> None:
        self.assertFalse(is_number_query_match(123, ">abc"))
        self.assertFalse(is_number_query_match(123, ">"))
        self.assertFalse(is_number_query_match(123, ">nan"))

    def test_invalid_number(self) -> None:
        self.assertFalse(is_number_query_match(123, "abc"))
        self.assertFalse(is_number_query_match(0, ""))

    def test_parse_number(self) -> None:
        self.assertEqual(parse_number(" 42 "), 42.0)
        self.assertEqual(parse_number("1e3"), 1000.0)
        self.assertIsNone(parse_number(""))
        self.assertIsNone(parse_number("4 2"))


if __name__ == "__main__":
    unittest.main()
