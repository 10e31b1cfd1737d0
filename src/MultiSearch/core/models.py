from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

Record = Mapping[str, Any]

ALL_FIELDS = "_default"


class _Missing:
    """Placeholder for a field that is absent from a record."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Declares a searchable record field.

    Every declared field takes part in "search all fields" clauses. Fields
    that are not declared can still be targeted by a concrete clause.

    Attributes:
        name: Key of the field in each record.
        label: Human readable name, also used for "Label:value" shorthand.
        show_suggestions: Offer a picklist of candidate values for this field.
        strict_suggestions: Quote a picked suggestion so that it is matched
            exactly. Only honoured together with `show_suggestions`.
        suggestions: Caller provided picklist used instead of deriving one
            from the records.
    """

    name: str
    label: str
    show_suggestions: bool = False
    strict_suggestions: bool = False
    suggestions: Optional[Sequence[str]] = None

    @property
    def is_strict(self) -> bool:
        return self.show_suggestions and self.strict_suggestions


ALL_FIELDS_DESCRIPTOR = FieldDescriptor(name=ALL_FIELDS, label="")


def field_value(record: Record, name: str) -> Any:
    """Return the value stored under `name`, or `MISSING` when absent."""
    return record.get(name, MISSING)
