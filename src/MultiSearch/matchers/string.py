from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from MultiSearch.core.models import MISSING


def _json_default(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


def canonical_text(value: Any) -> str:
    """Serialize any value into the text searched by the string matcher.

    Strings are returned unchanged. A missing field becomes `undefined`, other
    values use compact JSON (`null`, `[1,2,3]`, `{"a":1}`).
    """
    if isinstance(value, str):
        return value
    if value is MISSING:
        return "undefined"
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=_json_default)
    except (TypeError, ValueError):
        return str(value)


def is_string_query_match(value: Any, q: str, *, case_sensitive: bool = False) -> bool:
    """Check if a value matches a query as text.

    Also used as the fallback for every type without a dedicated matcher.

    - `"text"`: the whole value must equal `text`.
    - `\\"text\\"`: the value must contain `"text"`, quotes included.
    - anything else: the value must contain the query.

    The value is case folded unless `case_sensitive`; the query is expected to
    be folded by the caller already.

    Args:
        value: Value to check.
        q: Query text.
        case_sensitive: Compare without case folding.

    Returns:
        True if the value matches.
    """
    text = canonical_text(value)
    if not case_sensitive:
        text = text.casefold()

    # A lone `"` is an exact match against the empty string.
    if q.startswith('"') and q.endswith('"'):
        return text == q[1:-1]

    if q.startswith('\\"') and q.endswith('\\"'):
        return f'"{q[2:-2]}"' in text

    return q in text
