"""MultiSearch: incremental multi-clause filtering of in-memory records.

Records pass when every search clause matches. Values are matched by kind:
strings (substring or `"exact"`), booleans (truthy/falsy tokens), numbers and
dates (`>`, `>=`, `<`, `<=`, `!=`).
"""

from __future__ import annotations

__version__ = "0.1.0"

from MultiSearch.core.models import ALL_FIELDS, MISSING, FieldDescriptor, Record
from MultiSearch.core.query import SearchClause
from MultiSearch.matchers import MatchOptions, ValueKind, is_query_match, value_kind
from MultiSearch.services import (
    ClauseStore,
    FilterEngine,
    MultiSearch,
    SuggestionCache,
    create_multi_search,
    is_append_of,
    make_field_categorizer,
)

__all__ = [
    "__version__",
    "ALL_FIELDS",
    "MISSING",
    "ClauseStore",
    "FieldDescriptor",
    "FilterEngine",
    "MatchOptions",
    "MultiSearch",
    "Record",
    "SearchClause",
    "SuggestionCache",
    "ValueKind",
    "create_multi_search",
    "is_append_of",
    "is_query_match",
    "make_field_categorizer",
    "value_kind",
]
