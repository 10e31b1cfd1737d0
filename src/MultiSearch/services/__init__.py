"""Filtering services for MultiSearch.

Provides the clause store, suggestion cache, filter engine and the controller
combining them, plus a factory building the controller from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from MultiSearch.core.models import Record
from MultiSearch.services.clauses import ClauseStore
from MultiSearch.services.filter import (
    Categorizer,
    FilterEngine,
    FilterResult,
    is_append_of,
    make_field_categorizer,
    record_matches,
)
from MultiSearch.services.search import MultiSearch, ResultSink
from MultiSearch.services.suggestions import SuggestionCache

if TYPE_CHECKING:
    from MultiSearch.config import AppConfig


def create_multi_search(
    config: AppConfig,
    records: Sequence[Record] | None = None,
    *,
    categorize_by: str | None = None,
    on_result: ResultSink | None = None,
) -> MultiSearch:
    """Create a controller with the configured fields and options.

    Args:
        config: Application configuration.
        records: Source records; None delays initialization.
        categorize_by: Optional field used to group the results.
        on_result: Called with every newly computed result.

    Returns:
        Configured MultiSearch instance.
    """
    categorizer = make_field_categorizer(categorize_by) if categorize_by else None
    return MultiSearch(
        config.fields.descriptors,
        records,
        categorizer=categorizer,
        config=config.search,
        on_result=on_result,
    )


__all__ = [
    "Categorizer",
    "ClauseStore",
    "FilterEngine",
    "FilterResult",
    "MultiSearch",
    "SuggestionCache",
    "create_multi_search",
    "is_append_of",
    "make_field_categorizer",
    "record_matches",
]
