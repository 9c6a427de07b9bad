"""Main SurrealQL SELECT builder.

This module provides the QueryBuilder class with a fluent interface for
assembling a single SELECT statement.
"""

from typing import Any, Self

from structlog.typing import FilteringBoundLogger

from surreal_query.core.base import ErrorCode, QueryErrorDetails
from surreal_query.core.decorators import with_error_handling
from surreal_query.core.errors import MissingTargetError, QueryBuildError
from surreal_query.core.logging import get_logger
from surreal_query.query_builder.conditions import (
    Condition,
    Simple,
    combine_conditions,
    render_condition,
)
from surreal_query.query_builder.graph import GraphExpandParams, render_graph_traversal
from surreal_query.query_builder.state import ClauseType

logger: FilteringBoundLogger = get_logger(name=__name__)


def _check_unsigned(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise QueryBuildError(
            f"{name} must be a non-negative integer, got {value!r}",
            code=ErrorCode.INVALID_INPUT,
            details=QueryErrorDetails(
                source="query_builder",
                operation=name.lower(),
                builder="QueryBuilder",
                clause=name.upper(),
            ),
        )
    return value


class QueryBuilder:
    """Fluent SurrealQL SELECT builder.

    Every setter mutates one field and returns the builder, so calls can be
    chained in any order. ``build`` only reads the accumulated state; the
    builder can be built again or modified further afterwards.

    Example:
        ```python
        QueryBuilder().select("id, name").from_("user").add_where("age > 18").limit(10).build()
        # "SELECT id, name FROM user WHERE age > 18 LIMIT 10"
        ```
    """

    def __init__(self) -> None:
        """Initialize an empty builder; every clause starts unset."""
        self._select_items: list[str] = []
        self._graph_expansions: list[str] = []
        self._distinct: bool = False
        self._table: str | None = None
        self._condition: Condition | None = None
        self._fetch_items: list[str] = []
        self._order_items: list[str] = []
        self._limit: int | None = None
        self._start: int | None = None
        self._graph: GraphExpandParams | None = None

    @classmethod
    def new(cls) -> Self:
        """Create an empty builder."""
        return cls()

    @property
    def condition(self) -> Condition | None:
        """The combined WHERE condition tree, if any."""
        return self._condition

    def select(self, fields: str, alias: str | None = None) -> Self:
        """Add an item to the SELECT field list. Can be called multiple times.

        Args:
            fields: Projection text, e.g. ``"id, name"`` or ``"count()"``
            alias: Optional alias, rendered as ``fields AS alias``

        Returns:
            Self for method chaining

        Example:
            ```python
            query.select("id").select("count()", alias="total")
            # SELECT id, count() AS total ...
            ```
        """
        if fields:
            self._select_items.append(fields if alias is None else f"{fields} AS {alias}")
        return self

    def graph_expand(self, expansion: str) -> Self:
        """Add a raw projection such as ``->purchased->product.*`` after the field list.

        Unlike ``graph_traverse`` this keeps the field list (``*`` when none
        was selected) and appends to it.
        """
        if expansion:
            self._graph_expansions.append(expansion)
        return self

    def distinct(self) -> Self:
        """Emit ``SELECT DISTINCT`` instead of ``SELECT``."""
        self._distinct = True
        return self

    def from_(self, table: str) -> Self:
        """Set the FROM target. This clause is required.

        Args:
            table: Table, record id or subquery text

        Returns:
            Self for method chaining
        """
        self._table = table
        return self

    def add_where(self, condition: str) -> Self:
        """AND a raw condition fragment into the WHERE clause.

        Equivalent to ``add_condition(Simple(condition))``.

        Args:
            condition: Condition text, inserted verbatim

        Returns:
            Self for method chaining
        """
        return self.add_condition(Simple(condition))

    def add_condition(self, condition: Condition) -> Self:
        """AND a condition tree into the WHERE clause.

        Args:
            condition: Condition to combine with anything added before

        Returns:
            Self for method chaining
        """
        self._condition = combine_conditions(self._condition, condition)
        return self

    def fetch(self, fields: str) -> Self:
        """Add a field to the FETCH clause. Can be called multiple times."""
        if fields:
            self._fetch_items.append(fields)
        return self

    def order_by(self, ordering: str) -> Self:
        """Add an ordering to the ORDER BY clause. Can be called multiple times.

        Args:
            ordering: Ordering text, e.g. ``"age DESC"``

        Returns:
            Self for method chaining
        """
        if ordering:
            self._order_items.append(ordering)
        return self

    def limit(self, count: int) -> Self:
        """Set the LIMIT clause.

        Raises:
            QueryBuildError: If count is negative
        """
        self._limit = _check_unsigned("LIMIT", count)
        return self

    def start(self, offset: int) -> Self:
        """Set the START (offset) clause.

        Raises:
            QueryBuildError: If offset is negative
        """
        self._start = _check_unsigned("START", offset)
        return self

    def graph_traverse(self, params: GraphExpandParams) -> Self:
        """Project a two-hop graph traversal instead of the field list.

        When set, the traversal replaces the whole selection: ``select`` items
        and ``graph_expand`` projections are ignored.

        Args:
            params: Traversal description

        Returns:
            Self for method chaining
        """
        self._graph = params
        return self

    def _selection(self) -> str:
        if self._graph is not None:
            return render_graph_traversal(self._graph)
        items = self._select_items or ["*"]
        return ", ".join([*items, *self._graph_expansions])

    def _state(self) -> dict[str, Any]:
        return {
            "select": list(self._select_items),
            "graph_expansions": list(self._graph_expansions),
            "distinct": self._distinct,
            "table": self._table,
            "has_condition": self._condition is not None,
            "fetch": list(self._fetch_items),
            "order_by": list(self._order_items),
            "limit": self._limit,
            "start": self._start,
            "has_graph": self._graph is not None,
        }

    def clauses(self) -> list[str]:
        """Render every present clause, in emission order.

        Returns:
            Clause fragments such as ``["SELECT *", "FROM user", "LIMIT 5"]``

        Raises:
            MissingTargetError: If no FROM target was set, or it is empty
        """
        if not self._table:
            raise MissingTargetError(
                details=QueryErrorDetails(
                    source="query_builder",
                    operation="build",
                    builder=type(self).__name__,
                    clause=ClauseType.FROM.keyword,
                    state=self._state(),
                )
            )

        selection = self._selection()
        if self._distinct:
            selection = f"DISTINCT {selection}"

        # Empty groups render to "" and emit no WHERE; empty fragments never reach the other clauses
        where = render_condition(self._condition) if self._condition is not None else None

        bodies: dict[ClauseType, str | None] = {
            ClauseType.SELECT: selection,
            ClauseType.FROM: self._table,
            ClauseType.WHERE: where or None,
            ClauseType.FETCH: ", ".join(self._fetch_items) or None,
            ClauseType.ORDER_BY: ", ".join(self._order_items) or None,
            ClauseType.LIMIT: str(self._limit) if self._limit is not None else None,
            ClauseType.START: str(self._start) if self._start is not None else None,
        }

        return [clause.render(bodies[clause]) for clause in ClauseType if bodies[clause] is not None]

    @with_error_handling()
    def build(self) -> str:
        """Build the final SELECT statement.

        Returns:
            The query text

        Raises:
            MissingTargetError: If no FROM target was set, or it is empty
        """
        query = " ".join(self.clauses())
        logger.debug("Built SurrealQL query", query=query)
        return query
