from __future__ import annotations

import math
from numbers import Real
from typing import Optional

from MultiSearch.matchers.operators import compare, split_operator


def parse_number(text: str) -> Optional[float]:
    """Parse `text` as a whole number literal, or return None.

    Surrounding whitespace is allowed; empty text is not a number.
    """
    stripped = text.strip()
    if not stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None


def is_number_query_match(value: Real, q: str) -> bool:
    """Check if a number matches the query.

    The query is either a number (exact match) or one operator among
    `>`, `>=`, `<`, `<=`, `!=` followed by a number. Whitespace between the
    operator and the number is ignored. Anything else never matches.

    Args:
        value: Number to check.
        q: Query text.

    Returns:
        True if `value` satisfies the query.
    """
    exact = parse_number(q)
    if exact is not None:
        return value == exact

    parts = split_operator(q)
    if parts is None:
        return False
    operator, operand_text = parts

    operand = parse_number(operand_text)
    if operand is None or math.isnan(operand):
        return False
    return compare(value, operator, operand)
