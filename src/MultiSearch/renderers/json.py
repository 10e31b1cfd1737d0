"""JSON output renderers.

Renders filter results into JSON-serializable objects.
Provides JsonFileWriter implementation for command output.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Sequence

from MultiSearch.core.models import FieldDescriptor, Record
from MultiSearch.core.query import SearchClause
from MultiSearch.renderers.base import OutputWriter
from MultiSearch.services.filter import FilterResult
from MultiSearch.utils.log import log


def _jsonable(value: Any) -> Any:
    """Convert a record value into a JSON-compatible value."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def render_record(record: Record) -> dict[str, Any]:
    return {str(key): _jsonable(value) for key, value in record.items()}


def render_json(result: FilterResult) -> list[dict[str, Any]] | dict[str, list[dict[str, Any]]]:
    """Render a filter result into JSON-serializable Python objects.

    Args:
        result: Records, or records by category.

    Returns:
        A list of record dicts, or a dict of category to record dicts.
    """
    if isinstance(result, dict):
        return {category: [render_record(r) for r in records] for category, records in result.items()}
    return [render_record(r) for r in result]


def render_clauses_json(clauses: Sequence[SearchClause]) -> list[dict[str, str]]:
    return [
        {"field": clause.field, "label": clause.field_label, "query": clause.query_text}
        for clause in clauses
    ]


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str, indent: int = 2) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
            indent: JSON indentation, 0 for a single line.
        """
        self.output_dir = Path(base_dir) / "json"
        self.indent = indent or None
        self.all_results: list[dict[str, Any]] = []

    def write_result(self, result: FilterResult, clauses: Sequence[SearchClause]) -> None:
        """Accumulate a filter result for later writing."""
        self.all_results.append(
            {
                "clauses": render_clauses_json(clauses),
                "result": render_json(result),
            }
        )

    def write_suggestions(self, field: FieldDescriptor, suggestions: Sequence[str]) -> None:
        """Accumulate the suggestions of one field."""
        self.all_results.append({"field": field.name, "label": field.label, "suggestions": list(suggestions)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=self.indent)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
