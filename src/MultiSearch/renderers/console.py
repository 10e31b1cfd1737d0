"""Console text output renderers.

Renders filter results into human-friendly text.
Provides ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Sequence

from MultiSearch.core.models import FieldDescriptor, Record
from MultiSearch.core.query import SearchClause
from MultiSearch.matchers.string import canonical_text
from MultiSearch.renderers.base import OutputWriter
from MultiSearch.services.filter import FilterResult
from MultiSearch.utils.log import log


def _fmt_value(value: Any) -> str:
    """Format one record value for console output."""
    if value is None:
        return "-"
    if isinstance(value, datetime) and value.time() != datetime.min.time():
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return canonical_text(value)


def render_clauses(clauses: Sequence[SearchClause]) -> str:
    """Render active clauses as `Label: query` chips."""
    if not clauses:
        return "(no filters)"
    return "  ".join(
        f"[{clause.field_label}: {clause.query_text}]" if clause.field_label else f"[{clause.query_text}]"
        for clause in clauses
    )


def render_records(records: Iterable[Record], *, indent: str = "") -> list[str]:
    """Render records as numbered `key=value` lines."""
    lines: list[str] = []
    for idx, record in enumerate(records, start=1):
        pairs = ", ".join(f"{key}={_fmt_value(value)}" for key, value in record.items())
        lines.append(f"{indent}{idx}. {pairs}")
    return lines


def render_text(result: FilterResult) -> str:
    """Render a filter result into a human-readable text block.

    Args:
        result: Records, or records by category.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    if isinstance(result, dict):
        for category, records in result.items():
            lines.append(f"{category or '(none)'} ({len(records)})")
            lines.extend(render_records(records, indent="   "))
            lines.append("")
    else:
        lines.extend(render_records(result))
    if not lines:
        return "(no matches)\n"
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_result(self, result: FilterResult, clauses: Sequence[SearchClause]) -> None:
        """Write a filter result to console."""
        log.info("Filters: %s", render_clauses(clauses))
        for line in render_text(result).splitlines():
            log.info(line)

    def write_suggestions(self, field: FieldDescriptor, suggestions: Sequence[str]) -> None:
        log.info("%s: %d suggestions", field.label or field.name, len(suggestions))
        for value in suggestions:
            log.info("  %s", value)
