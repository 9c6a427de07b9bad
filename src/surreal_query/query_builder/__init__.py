"""SurrealQL query builder framework.

This package provides a fluent interface for building SurrealQL SELECT
statements, LET/RETURN scripts and transactions.
"""

from .builder import QueryBuilder
from .conditions import And, Condition, Or, Simple, combine_conditions, render_condition
from .graph import Direction, GraphExpandParams, render_graph_traversal
from .script import ScriptBuilder
from .state import ClauseType
from .transaction import TransactionBuilder

__all__ = [
    # Conditions
    "And",
    "ClauseType",
    "Condition",
    # Graph traversal
    "Direction",
    "GraphExpandParams",
    "Or",
    # Builders
    "QueryBuilder",
    "ScriptBuilder",
    "Simple",
    "TransactionBuilder",
    "combine_conditions",
    "render_condition",
    "render_graph_traversal",
]
