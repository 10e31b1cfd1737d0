"""Typed query matchers.

Each matcher decides whether one field value satisfies one textual query.
`is_query_match` picks the matcher from the runtime kind of the value.
"""

from __future__ import annotations

from MultiSearch.matchers.boolean import (
    DEFAULT_FALSY_VALUES,
    DEFAULT_TRUTHY_VALUES,
    is_boolean_query_match,
)
from MultiSearch.matchers.date import is_date_query_match
from MultiSearch.matchers.dispatch import MatchOptions, ValueKind, is_query_match, value_kind
from MultiSearch.matchers.number import is_number_query_match
from MultiSearch.matchers.string import is_string_query_match

__all__ = [
    "DEFAULT_FALSY_VALUES",
    "DEFAULT_TRUTHY_VALUES",
    "MatchOptions",
    "ValueKind",
    "is_boolean_query_match",
    "is_date_query_match",
    "is_number_query_match",
    "is_query_match",
    "is_string_query_match",
    "value_kind",
]
