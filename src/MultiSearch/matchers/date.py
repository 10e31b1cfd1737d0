"""Date matcher.

Time of day and timezone are ignored: both the value and the query operand are
reduced to their calendar day before comparing. Only ISO-8601 like forms are
understood (`2021`, `2021-01`, `2021-01-01`, `2021-01-01T12:34:56Z`).
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

from dateutil.parser import isoparse

from MultiSearch.matchers.operators import compare, has_operator, split_operator

_ISO_DATE_RE = re.compile(
    r"""
    ^\d{4}
    (?:-\d{2}
      (?:-\d{2}
        (?:[t\ ]\d{2}(?::\d{2}(?::\d{2}(?:[.,]\d+)?)?)?
          (?:z|[+-]\d{2}(?::?\d{2})?)?
        )?
      )?
    )?$
    """,
    re.IGNORECASE | re.VERBOSE,
)


def parse_day(text: str) -> Optional[date]:
    """Parse an ISO-like date string into its calendar day.

    Args:
        text: Date text; surrounding whitespace is ignored.

    Returns:
        The calendar day, or None when the text is not a valid ISO-like date.
    """
    stripped = text.strip()
    if not _ISO_DATE_RE.match(stripped):
        return None
    try:
        return isoparse(stripped.upper()).date()
    except (ValueError, OverflowError):
        return None


def to_day(value: Union[date, datetime, str]) -> Optional[date]:
    """Reduce a date, datetime or ISO string to a calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_day(value)
    return None


def is_date_query_match(value: Union[date, datetime, str], q: str) -> bool:
    """Check if a date matches the query.

    Supported queries:

    - a date, matching the same calendar day, or any partial date contained in
      the value's `YYYY-MM-DD` form (`2021`, `2021-01`);
    - one of `>`, `>=`, `<`, `<=`, `!=` followed by a date.

    Args:
        value: Date, datetime or ISO date string to check.
        q: Query text.

    Returns:
        True if the value satisfies the query; False for anything malformed.
    """
    day = to_day(value)
    if day is None:
        return False

    if not has_operator(q):
        query_day = parse_day(q)
        if query_day is None:
            return False
        return day == query_day or q.strip() in day.isoformat()

    parts = split_operator(q)
    if parts is None:
        return False
    operator, operand_text = parts

    operand = parse_day(operand_text)
    if operand is None:
        return False
    return compare(day, operator, operand)
