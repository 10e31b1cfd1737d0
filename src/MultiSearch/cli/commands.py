"""Command implementations for MultiSearch CLI.

Encapsulates business logic for the filter and suggest commands, separated
from CLI parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from MultiSearch.adapters.search_input import SearchInput
from MultiSearch.renderers import OutputWriter
from MultiSearch.services.filter import FilterResult
from MultiSearch.services.search import MultiSearch
from MultiSearch.utils.log import log


@dataclass(slots=True)
class FilterCommand:
    """Apply queries one by one and write the final result.

    Each query is read like text pasted into a search box: `Label:value` or
    `field:value` targets one field, anything else searches all fields.
    """

    search: MultiSearch
    queries: Sequence[str]
    output_writer: OutputWriter

    def execute(self) -> FilterResult:
        """Add a clause per query and write the resulting records."""
        search_input = SearchInput(self.search)
        for idx, query in enumerate(self.queries, start=1):
            if not search_input.paste(query):
                search_input.type_text(query)
            clause = search_input.submit()
            if clause is None:
                log.warning("Skipping empty query %d/%d", idx, len(self.queries))
                search_input.clear()
                continue
            log.debug("Clause %d/%d field=%s query=%r", idx, len(self.queries), clause.field, clause.query_text)

        result = self.search.result
        if result is None:
            raise RuntimeError("Search is not initialized")
        log.info("Matched %s", _count(result))
        self.output_writer.write_result(result, self.search.clauses)
        return result


@dataclass(slots=True)
class SuggestCommand:
    """Write the suggestions of one field."""

    search: MultiSearch
    field: str
    output_writer: OutputWriter

    def execute(self) -> list[str]:
        """Compute the suggestions of the field and hand them to the writer.

        Raises:
            ValueError: If the field is unknown or offers no suggestions.
        """
        descriptor = self.search.field_by_label(self.field)
        if descriptor is None:
            raise ValueError(f"Unknown field: {self.field}")
        suggestions = self.search.select_field(descriptor)
        if suggestions is None:
            raise ValueError(f"Field does not offer suggestions: {descriptor.name}")
        self.output_writer.write_suggestions(descriptor, suggestions)
        return suggestions


def _count(result: FilterResult) -> str:
    if isinstance(result, dict):
        return f"{sum(len(records) for records in result.values())} records in {len(result)} categories"
    return f"{len(result)} records"
