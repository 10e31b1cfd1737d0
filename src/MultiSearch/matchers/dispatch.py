"""Route a `(value, query)` pair to the matcher for the value's kind."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from numbers import Real
from typing import Any, Sequence

from MultiSearch.matchers.boolean import is_boolean_query_match
from MultiSearch.matchers.date import is_date_query_match
from MultiSearch.matchers.number import is_number_query_match
from MultiSearch.matchers.string import is_string_query_match
from MultiSearch.utils.log import engine_log as log


class ValueKind(Enum):
    """Closed set of value kinds with a dedicated matcher."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Options shared by every clause evaluation.

    Attributes:
        case_sensitive: Disable case folding of values and queries.
        truthy_values: Tokens matching True booleans (None: defaults).
        falsy_values: Tokens matching False booleans (None: defaults).
    """

    case_sensitive: bool = False
    truthy_values: Sequence[str] | None = None
    falsy_values: Sequence[str] | None = None


DEFAULT_OPTIONS = MatchOptions()


def value_kind(value: Any) -> ValueKind:
    """Classify a value. Everything unknown falls back to STRING."""
    # bool is a subclass of int, check it first.
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Real):
        return ValueKind.NUMBER
    if isinstance(value, date):
        return ValueKind.DATE
    return ValueKind.STRING


def fold_query(q: str, options: MatchOptions = DEFAULT_OPTIONS) -> str:
    """Apply the case folding policy to a query."""
    return q if options.case_sensitive else q.casefold()


def is_query_match(value: Any, q: str, options: MatchOptions | None = None) -> bool:
    """Check if the value matches the query.

    Rules for each kind are defined in the respective matcher modules. This
    never raises: a malformed query is simply not a match.

    Args:
        value: The value to check against the query.
        q: The query string to match.
        options: Case sensitivity and boolean tokens.

    Returns:
        True on match.
    """
    options = options or DEFAULT_OPTIONS
    return match_folded(value, fold_query(q, options), options)


def match_folded(value: Any, q: str, options: MatchOptions) -> bool:
    """Same as `is_query_match` for a query already folded by `fold_query`."""
    kind = value_kind(value)
    try:
        if kind is ValueKind.BOOLEAN:
            return is_boolean_query_match(
                value,
                q,
                truthy_values=options.truthy_values,
                falsy_values=options.falsy_values,
            )
        if kind is ValueKind.NUMBER:
            return is_number_query_match(value, q)
        if kind is ValueKind.DATE:
            return is_date_query_match(value, q)
        return is_string_query_match(value, q, case_sensitive=options.case_sensitive)
    except Exception as error:  # noqa: BLE001 - a clause must never abort filtering
        log.debug("Query match failed: kind=%s query=%r error=%s", kind.value, q, error)
        return False
