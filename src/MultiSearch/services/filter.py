"""Incremental filter engine.

Records pass when every clause matches (AND). When the new clause sequence only
appends clauses to the previous one, the previous result is filtered again
instead of the whole source: adding a clause can only shrink the result, so
both paths give the same records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence, Union

from MultiSearch.core.models import FieldDescriptor, Record, field_value
from MultiSearch.core.query import SearchClause
from MultiSearch.matchers.dispatch import DEFAULT_OPTIONS, MatchOptions, fold_query, match_folded
from MultiSearch.matchers.string import canonical_text
from MultiSearch.utils.log import engine_log as log

Categorizer = Callable[[Sequence[Record]], Mapping[str, Sequence[Record]]]
CategorizedRecords = dict[str, list[Record]]
FilterResult = Union[list[Record], CategorizedRecords]


def is_append_of(previous: Sequence[SearchClause], current: Sequence[SearchClause]) -> bool:
    """Return True if `current` is `previous` with clauses appended at the end.

    Clauses are compared by field and query text, position by position. An
    equal sequence is not an append.
    """
    if len(previous) >= len(current):
        return False
    return all(old.key == new.key for old, new in zip(previous, current))


def make_field_categorizer(field: str, *, missing_label: str = "") -> Categorizer:
    """Build a categorizer grouping records by the text of one field.

    Categories appear in order of first occurrence.

    Args:
        field: Record field to group by.
        missing_label: Category used for records without the field.
    """

    def categorize(records: Sequence[Record]) -> dict[str, list[Record]]:
        groups: dict[str, list[Record]] = {}
        for record in records:
            value = record.get(field)
            key = missing_label if value is None else canonical_text(value)
            groups.setdefault(key, []).append(record)
        return groups

    categorize.__name__ = f"categorize_by_{field}"
    return categorize


@dataclass(frozen=True, slots=True)
class _PreparedClause:
    field: str
    is_global: bool
    query: str


@dataclass(slots=True)
class _LastRun:
    source: Sequence[Record]
    categorizer: Categorizer | None
    fields: tuple[FieldDescriptor, ...]
    options: MatchOptions
    show_empty_categories: bool
    clauses: tuple[SearchClause, ...]
    result: FilterResult


class FilterEngine:
    """Recompute filter results, reusing the previous result when possible."""

    def __init__(self) -> None:
        self._last: _LastRun | None = None
        self._categorized: tuple[Sequence[Record], Categorizer, CategorizedRecords] | None = None

    def reset(self) -> None:
        """Forget the previous run; the next recompute scans the source."""
        self._last = None
        self._categorized = None

    def recompute(
        self,
        source: Sequence[Record],
        clauses: Sequence[SearchClause],
        fields: Sequence[FieldDescriptor],
        categorizer: Categorizer | None = None,
        options: MatchOptions | None = None,
        *,
        show_empty_categories: bool = False,
    ) -> FilterResult:
        """Compute the records matching every clause.

        Args:
            source: Source records, in display order.
            clauses: Active clauses.
            fields: Declared fields, scanned by clauses over all fields.
            categorizer: Optional function grouping records into categories.
            options: Matching options.
            show_empty_categories: Keep categories left without records.

        Returns:
            A new list of records, or a new mapping of category to records
            when a categorizer is given.
        """
        options = options or DEFAULT_OPTIONS
        clauses = tuple(clauses)
        fields = tuple(fields)
        last = self._last
        same_inputs = (
            last is not None
            and last.source is source
            and last.categorizer is categorizer
            and last.fields == fields
            and last.options == options
            and last.show_empty_categories == show_empty_categories
        )

        if same_inputs and last.clauses == clauses:
            log.debug("Inputs unchanged, reusing result of %d clauses", len(clauses))
            result = _copy_result(last.result)
        elif not clauses:
            result = self._unfiltered(source, categorizer)
        else:
            prepared = [_prepare(clause, options) for clause in clauses]
            if same_inputs and is_append_of(last.clauses, clauses):
                base = last.result
                log.debug("Refining previous result with %d clauses", len(clauses))
            else:
                base = self._categorize(source, categorizer) if categorizer else source
                log.debug("Scanning source with %d clauses", len(clauses))

            if isinstance(base, Mapping):
                result = {}
                for key, records in base.items():
                    kept = _filter_records(records, prepared, fields, options)
                    if kept or show_empty_categories:
                        result[key] = kept
            else:
                result = _filter_records(base, prepared, fields, options)

        self._last = _LastRun(
            source=source,
            categorizer=categorizer,
            fields=fields,
            options=options,
            show_empty_categories=show_empty_categories,
            clauses=clauses,
            result=result,
        )
        return _copy_result(result)

    def _unfiltered(self, source: Sequence[Record], categorizer: Categorizer | None) -> FilterResult:
        if categorizer is None:
            return list(source)
        return _copy_result(self._categorize(source, categorizer))

    def _categorize(self, source: Sequence[Record], categorizer: Categorizer) -> CategorizedRecords:
        cached = self._categorized
        if cached is not None and cached[0] is source and cached[1] is categorizer:
            return cached[2]
        categorized = {key: list(records) for key, records in categorizer(source).items()}
        log.debug("Categorized %d records into %d categories", len(source), len(categorized))
        self._categorized = (source, categorizer, categorized)
        return categorized


def record_matches(
    record: Record,
    clauses: Sequence[SearchClause],
    fields: Sequence[FieldDescriptor],
    options: MatchOptions | None = None,
) -> bool:
    """Return True if the record satisfies every clause."""
    options = options or DEFAULT_OPTIONS
    prepared = [_prepare(clause, options) for clause in clauses]
    return _matches(record, prepared, fields, options)


def _prepare(clause: SearchClause, options: MatchOptions) -> _PreparedClause:
    return _PreparedClause(
        field=clause.field,
        is_global=clause.is_global,
        query=fold_query(clause.query_text, options),
    )


def _filter_records(
    records: Sequence[Record],
    clauses: Sequence[_PreparedClause],
    fields: Sequence[FieldDescriptor],
    options: MatchOptions,
) -> list[Record]:
    return [record for record in records if _matches(record, clauses, fields, options)]


def _matches(
    record: Record,
    clauses: Sequence[_PreparedClause],
    fields: Sequence[FieldDescriptor],
    options: MatchOptions,
) -> bool:
    for clause in clauses:
        if clause.is_global:
            if not any(match_folded(field_value(record, f.name), clause.query, options) for f in fields):
                return False
        elif not match_folded(field_value(record, clause.field), clause.query, options):
            return False
    return True


def _copy_result(result: Any) -> FilterResult:
    if isinstance(result, Mapping):
        return {key: list(records) for key, records in result.items()}
    return list(result)
