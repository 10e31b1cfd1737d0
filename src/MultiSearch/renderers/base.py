"""Writer interface shared by the console and file outputs.

Commands hand finished results to a writer and never format anything
themselves, so adding an output format does not touch command code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from MultiSearch.core.models import FieldDescriptor
from MultiSearch.core.query import SearchClause
from MultiSearch.services.filter import FilterResult


class OutputWriter(ABC):
    """Receives command results, then is finalized once per command."""

    @abstractmethod
    def write_result(self, result: FilterResult, clauses: Sequence[SearchClause]) -> None:
        """Write the result of filtering with `clauses`.

        Args:
            result: Records, or records by category.
            clauses: Active clauses, oldest first.
        """

    @abstractmethod
    def write_suggestions(self, field: FieldDescriptor, suggestions: Sequence[str]) -> None:
        """Write the suggestion list of one field."""

    def finalize(self, action: str) -> None:
        """Flush accumulated output. Streaming writers have nothing to do.

        Args:
            action: CLI command name, e.g. `filter`.
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Fan every call out to several writers, in order."""

    writers: Sequence[OutputWriter]

    def write_result(self, result: FilterResult, clauses: Sequence[SearchClause]) -> None:
        for writer in self.writers:
            writer.write_result(result, clauses)

    def write_suggestions(self, field: FieldDescriptor, suggestions: Sequence[str]) -> None:
        for writer in self.writers:
            writer.write_suggestions(field, suggestions)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
