"""Relational operator extraction shared by the number and date matchers."""

from __future__ import annotations

import re
from typing import Optional

OPERATORS = frozenset({">", ">=", "<", "<=", "!="})

# One or two relational/negation symbols followed by the operand. `!` alone is
# captured so that it can be rejected as an unknown operator.
_OPERATOR_RE = re.compile(r"^\s*([<>]=?|!=?)\s*(.*?)\s*$", re.DOTALL)
_OPERATOR_HINT_RE = re.compile(r"[<>]|!=")


def split_operator(q: str) -> Optional[tuple[str, str]]:
    """Split `q` into a supported operator and its stripped operand.

    Args:
        q: Query text such as `>= 10` or `<2021-01-01`.

    Returns:
        `(operator, operand)` or None when `q` does not start with one of
        `>`, `>=`, `<`, `<=`, `!=`.
    """
    match = _OPERATOR_RE.match(q)
    if not match:
        return None
    operator, operand = match.groups()
    if operator not in OPERATORS:
        return None
    return operator, operand


def has_operator(q: str) -> bool:
    """Return True if `q` contains any relational operator anywhere."""
    return _OPERATOR_HINT_RE.search(q) is not None


def compare(left, operator: str, right) -> bool:
    """Apply a supported relational operator to two comparable values."""
    if operator == ">":
        return left > right
    if operator == ">=":
        return left >= right
    if operator == "<":
        return left < right
    if operator == "<=":
        return left <= right
    if operator == "!=":
        return left != right
    return False
