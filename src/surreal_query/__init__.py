"""SurrealQL query construction.

Fluent builders that assemble SurrealQL text from structured inputs.
Nothing here talks to a database; the only output is the query string.
"""

from .core.errors import MissingReturnError, MissingTargetError, QueryBuildError
from .query_builder import (
    And,
    Condition,
    Direction,
    GraphExpandParams,
    Or,
    QueryBuilder,
    ScriptBuilder,
    Simple,
    TransactionBuilder,
    combine_conditions,
    render_condition,
    render_graph_traversal,
)

__all__ = [
    # Conditions
    "And",
    "Condition",
    # Graph traversal
    "Direction",
    "GraphExpandParams",
    # Errors
    "MissingReturnError",
    "MissingTargetError",
    "Or",
    "QueryBuildError",
    # Builders
    "QueryBuilder",
    "ScriptBuilder",
    "Simple",
    "TransactionBuilder",
    "combine_conditions",
    "render_condition",
    "render_graph_traversal",
]
