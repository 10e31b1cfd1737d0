"""Search controller tying clauses, suggestions and filtering together."""

from __future__ import annotations

from typing import Callable, Sequence, Union

from MultiSearch.config.search import SearchConfig
from MultiSearch.core.models import ALL_FIELDS, ALL_FIELDS_DESCRIPTOR, FieldDescriptor, Record
from MultiSearch.core.query import SearchClause
from MultiSearch.services.clauses import ClauseStore
from MultiSearch.services.filter import Categorizer, FilterEngine, FilterResult
from MultiSearch.services.suggestions import SuggestionCache
from MultiSearch.utils.log import engine_log as log

FieldRef = Union[FieldDescriptor, str]
ResultSink = Callable[[FilterResult], None]


class MultiSearch:
    """Filter records with multiple search clauses (AND).

    Supported value kinds:

    - strings: case-insensitive by default, `"exact"` matches, optional
      suggestion picklists;
    - booleans: configurable truthy and falsy tokens (`yes`, `1`, `on`, ...);
    - numbers: `>`, `>=`, `<`, `<=` and `!=` comparisons;
    - dates: same operators, time of day and timezone ignored.

    Everything else is matched as text.

    Every change to the clauses or the records bumps `generation`. The result
    is recomputed synchronously, at most once per generation, and pushed to
    `on_result`.
    """

    def __init__(
        self,
        fields: Sequence[FieldDescriptor],
        records: Sequence[Record] | None = None,
        *,
        categorizer: Categorizer | None = None,
        config: SearchConfig | None = None,
        on_result: ResultSink | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            fields: Declared searchable fields.
            records: Source records. When None the controller stays
                uninitialized until `set_records` is called.
            categorizer: Optional function grouping records into categories.
            config: Matching and clause options.
            on_result: Called with every newly computed result.
        """
        self.fields = tuple(fields)
        self.config = config or SearchConfig()
        self.categorizer = categorizer
        self.on_result = on_result

        self._fields_by_name = {descriptor.name: descriptor for descriptor in self.fields}
        self._match_options = self.config.match_options()
        self._store = ClauseStore()
        self._engine = FilterEngine()
        self._records: Sequence[Record] | None = None
        self._suggestions = self._new_suggestion_cache(())
        self._selected: FieldDescriptor = ALL_FIELDS_DESCRIPTOR
        self._result: FilterResult | None = None
        self._generation = 0
        self._filtered_generation = -1
        self._initialized = False

        if records is not None:
            self.set_records(records)

    # Output surface

    @property
    def result(self) -> FilterResult | None:
        """Last published result, None before initialization."""
        return self._result

    @property
    def records(self) -> Sequence[Record] | None:
        return self._records

    @property
    def clauses(self) -> tuple[SearchClause, ...]:
        return self._store.clauses

    @property
    def selected_field(self) -> FieldDescriptor:
        return self._selected

    @property
    def suggestions(self) -> dict[str, list[str]]:
        """Suggestion lists computed so far, by field name."""
        return self._suggestions.snapshot()

    @property
    def current_suggestions(self) -> list[str] | None:
        """Suggestions for the selected field, if it offers any.

        Computed on first access, so a field selected before the records
        arrived, or kept across a record change, reflects the current records.
        """
        if not self._selected.show_suggestions or self._records is None:
            return None
        return self._suggestions.suggestions_for(self._selected)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_filtered(self) -> bool:
        """True when the published result reflects the current generation."""
        return self._records is not None and self._filtered_generation == self._generation

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    # Ingest

    def set_records(self, records: Sequence[Record] | None) -> None:
        """Replace the source records.

        Suggestions are derived again for the new records. Passing the same
        object again is a no-op.
        """
        if records is self._records:
            return
        self._records = records
        self._suggestions = self._new_suggestion_cache(records or ())
        self._initialized = False
        if records is None:
            log.debug("Records cleared, waiting for initialization")
            self._generation += 1
            return
        log.debug("Records replaced: count=%d", len(records))
        if self._selected.show_suggestions:
            self._suggestions.suggestions_for(self._selected)
        self._touch()

    # Control surface

    def add_clause(self, query_text: str, field: FieldRef | None = None) -> SearchClause | None:
        """Add a clause for `field`, or for the selected field.

        Blank query text is ignored. A clause over all fields targets
        `global_search_replacement` instead when it is configured.

        Args:
            query_text: Query text; surrounding whitespace is removed.
            field: Descriptor, field name or `ALL_FIELDS`.

        Returns:
            The stored clause, or None when nothing was added.
        """
        text = query_text.strip()
        if not text:
            log.debug("Ignoring blank query")
            return None

        descriptor = self._resolve(field) if field is not None else self._selected
        replacement = self.config.global_search_replacement
        if descriptor.name == ALL_FIELDS and replacement:
            descriptor = self._fields_by_name.get(replacement) or FieldDescriptor(name=replacement, label="")

        clause = SearchClause(field=descriptor.name, field_label=descriptor.label, query_text=text)
        self._store_clause(clause)
        return clause

    def delete_clause(self, index: int) -> bool:
        """Delete the clause at `index`. Out of range positions are ignored."""
        if not self._store.delete(index):
            log.debug("No clause at index %d", index)
            return False
        self._touch()
        return True

    def delete_all_clauses(self) -> None:
        """Delete every clause and show all records again."""
        if self._store.clear():
            self._touch()

    def select_field(self, field: FieldRef) -> list[str] | None:
        """Select the field used by the next clause.

        Suggestions for the field are computed the first time it is selected.

        Returns:
            The suggestions for the field, or None if it offers none.
        """
        self._selected = self._resolve(field)
        if self._selected.show_suggestions and self._records is not None:
            return self._suggestions.suggestions_for(self._selected)
        return None

    def select_all_fields(self) -> None:
        """Select the "all fields" pseudo field."""
        self._selected = ALL_FIELDS_DESCRIPTOR

    def select_suggestion(self, value: str) -> SearchClause:
        """Add a clause from a picked suggestion of the selected field.

        Strict fields quote the value so that it is matched exactly.
        """
        descriptor = self._selected
        text = f'"{value}"' if descriptor.is_strict else value
        clause = SearchClause(field=descriptor.name, field_label=descriptor.label, query_text=text)
        self._store_clause(clause)
        return clause

    def refresh(self) -> bool:
        """Recompute the result if the current generation is not filtered yet.

        Returns:
            True if a new result was published.
        """
        if self._records is None:
            return False
        if self._filtered_generation == self._generation:
            log.debug("Generation %d already filtered", self._generation)
            return False

        result = self._engine.recompute(
            self._records,
            self._store.clauses,
            self.fields,
            self.categorizer,
            self._match_options,
            show_empty_categories=self.config.show_empty_categories,
        )
        self._result = result
        self._filtered_generation = self._generation
        self._initialized = True
        log.debug("Published generation %d: %s", self._generation, _describe(result))
        if self.on_result is not None:
            self.on_result(result)
        return True

    def field_by_label(self, label: str) -> FieldDescriptor | None:
        """Find a declared field by label or name, ignoring case."""
        wanted = label.strip().casefold()
        for descriptor in self.fields:
            if descriptor.label.casefold() == wanted:
                return descriptor
        for descriptor in self.fields:
            if descriptor.name.casefold() == wanted:
                return descriptor
        return None

    def _store_clause(self, clause: SearchClause) -> None:
        if self.config.override_existing_queries_with_same_field:
            self._store.replace_field(clause)
        else:
            self._store.add(clause)
        log.debug("Clause added: field=%s query=%r", clause.field, clause.query_text)
        self._selected = ALL_FIELDS_DESCRIPTOR
        self._touch()

    def _touch(self) -> None:
        self._generation += 1
        self.refresh()

    def _resolve(self, field: FieldRef) -> FieldDescriptor:
        if isinstance(field, FieldDescriptor):
            return field
        if field == ALL_FIELDS:
            return ALL_FIELDS_DESCRIPTOR
        return self._fields_by_name.get(field) or FieldDescriptor(name=field, label=field)

    def _new_suggestion_cache(self, records: Sequence[Record]) -> SuggestionCache:
        return SuggestionCache(
            records,
            true_label=self.config.true_label,
            false_label=self.config.false_label,
        )


def _describe(result: FilterResult) -> str:
    if isinstance(result, dict):
        return f"categories={len(result)} records={sum(len(v) for v in result.values())}"
    return f"records={len(result)}"
