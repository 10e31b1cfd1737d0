"""Ordered store of active search clauses."""

from __future__ import annotations

from typing import Iterator

from MultiSearch.core.query import SearchClause


class ClauseStore:
    """Ordered sequence of active clauses.

    Clauses are never merged automatically. `replace_field` keeps at most one
    clause per concrete field; clauses over all fields are exempt.
    """

    def __init__(self) -> None:
        self._clauses: list[SearchClause] = []

    @property
    def clauses(self) -> tuple[SearchClause, ...]:
        """Snapshot of the current clauses, oldest first."""
        return tuple(self._clauses)

    def add(self, clause: SearchClause) -> None:
        """Append a clause."""
        self._clauses.append(clause)

    def replace_field(self, clause: SearchClause) -> None:
        """Drop existing clauses for the clause's field, then append it."""
        if not clause.is_global:
            self._clauses = [existing for existing in self._clauses if existing.field != clause.field]
        self._clauses.append(clause)

    def delete(self, index: int) -> bool:
        """Delete the clause at `index`.

        Args:
            index: Zero-based position. Negative positions are not accepted.

        Returns:
            True if a clause was removed, False if `index` is out of range.
        """
        if index < 0 or index >= len(self._clauses):
            return False
        del self._clauses[index]
        return True

    def clear(self) -> bool:
        """Delete every clause. Returns True if anything was removed."""
        had_clauses = bool(self._clauses)
        self._clauses = []
        return had_clauses

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[SearchClause]:
        return iter(tuple(self._clauses))
