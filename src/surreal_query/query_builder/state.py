"""Clause ordering for SELECT statements.

SurrealQL is strict about where each clause may appear. Builders accept
their inputs in any order; rendering always walks ``ClauseType`` in
declaration order.
"""

from enum import Enum


class ClauseType(Enum):
    """SELECT clauses, declared in the order they are emitted."""

    SELECT = "SELECT"
    FROM = "FROM"
    WHERE = "WHERE"
    FETCH = "FETCH"
    ORDER_BY = "ORDER BY"
    LIMIT = "LIMIT"
    START = "START"

    @property
    def keyword(self) -> str:
        return self.value

    def render(self, body: str) -> str:
        """Prefix ``body`` with this clause's keyword."""
        return f"{self.keyword} {body}"
