from __future__ import annotations

from dataclasses import dataclass

from MultiSearch.core.models import ALL_FIELDS


@dataclass(frozen=True, slots=True)
class SearchClause:
    """One active search condition.

    Attributes:
        field: Record field to test, or `ALL_FIELDS` to test every declared
            field and accept the record when any of them matches.
        field_label: Label shown next to the clause. Kept on the clause to
            avoid looking it up again when rendering.
        query_text: Raw query text, e.g. `bob`, `"Blue"`, `>=10`, `<2021-06`.
    """

    field: str
    field_label: str
    query_text: str

    @property
    def key(self) -> tuple[str, str]:
        """Identity used when comparing clause sequences."""
        return (self.field, self.query_text)

    @property
    def is_global(self) -> bool:
        return self.field == ALL_FIELDS
