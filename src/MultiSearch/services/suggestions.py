"""Per-field value suggestions, computed lazily and memoized."""

from __future__ import annotations

from typing import Sequence

from MultiSearch.core.models import MISSING, FieldDescriptor, Record
from MultiSearch.utils.log import engine_log as log


class SuggestionCache:
    """Suggestion lists for the fields of one source collection.

    A cache is bound to one collection; a new collection needs a new cache.
    """

    def __init__(
        self,
        records: Sequence[Record],
        *,
        true_label: str = "Yes",
        false_label: str = "No",
    ) -> None:
        self.records = records
        self.true_label = true_label
        self.false_label = false_label
        self._cache: dict[str, list[str]] = {}

    def suggestions_for(self, descriptor: FieldDescriptor) -> list[str] | None:
        """Return suggestions for a field, computing them on first request.

        Args:
            descriptor: Field to suggest values for.

        Returns:
            The suggestion list, or None when the field does not offer
            suggestions.
        """
        if not descriptor.show_suggestions:
            return None
        cached = self._cache.get(descriptor.name)
        if cached is None:
            cached = self._derive(descriptor)
            self._cache[descriptor.name] = cached
        return list(cached)

    def is_cached(self, name: str) -> bool:
        return name in self._cache

    def snapshot(self) -> dict[str, list[str]]:
        """Copy of every suggestion list computed so far."""
        return {name: list(values) for name, values in self._cache.items()}

    def _derive(self, descriptor: FieldDescriptor) -> list[str]:
        if descriptor.suggestions is not None:
            return list(descriptor.suggestions)

        values = [record.get(descriptor.name, MISSING) for record in self.records]
        if any(isinstance(value, bool) for value in values):
            suggestions = [self.true_label, self.false_label]
        else:
            suggestions = list(dict.fromkeys(value for value in values if isinstance(value, str) and value))
        log.debug("Built %d suggestions for field=%s", len(suggestions), descriptor.name)
        return suggestions
