"""Graph traversal projections.

SurrealQL walks record links with arrow syntax: ``->edge`` follows outgoing
edges, ``<-edge`` follows incoming ones. A two-hop traversal such as
``->friends<-posts.* AS friend_posts`` replaces the plain field list in the
SELECT clause.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Arrow orientation for one traversal step.

    The value is the arrow itself. ``Direction.Out`` and ``Direction.In`` are
    aliases of ``OUT`` and ``IN``.
    """

    OUT = "->"
    IN = "<-"

    # Aliases
    Out = "->"
    In = "<-"


class GraphExpandParams(BaseModel):
    """A two-hop graph traversal with an optional result alias.

    ``from_`` is the first hop and ``to`` the second; each is a
    ``(Direction, edge_name)`` pair. ``from`` is accepted as an alias when
    validating from a mapping.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: tuple[Direction, str] = Field(alias="from")
    to: tuple[Direction, str]
    alias: str | None = None


def _render_step(step: tuple[Direction, str]) -> str:
    direction, edge = step
    return f"{direction.value}{edge}"


def render_graph_traversal(params: GraphExpandParams) -> str:
    """Render a traversal into a SELECT projection.

    Edge names and alias are inserted verbatim. An empty alias is treated
    as no alias.

    Args:
        params: Traversal to render

    Returns:
        Projection text like ``->friends<-posts.* AS friend_posts``
    """
    projection = f"{_render_step(params.from_)}{_render_step(params.to)}.*"
    if params.alias:
        projection = f"{projection} AS {params.alias}"
    return projection
