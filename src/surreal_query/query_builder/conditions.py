"""Boolean condition trees for WHERE clauses.

A condition is one of three shapes: a ``Simple`` opaque text fragment, or an
``And`` / ``Or`` group over a list of nested conditions. Rendering is a plain
structural recursion; every group with more than one member wraps itself in
parentheses, so mixing AND and OR at different depths never changes meaning.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BaseCondition(BaseModel):
    """Shared composition helpers for all condition shapes."""

    model_config = ConfigDict(frozen=True)

    def and_(self, other: "Condition") -> "And":
        """Combine with another condition using AND logic."""
        return And([self, other])

    def or_(self, other: "Condition") -> "Or":
        """Combine with another condition using OR logic."""
        return Or([self, other])

    def render(self) -> str:
        """Render this condition as SurrealQL text."""
        return render_condition(self)  # type: ignore[arg-type]


class Simple(BaseCondition):
    """A raw condition fragment such as ``age > 18``, rendered verbatim."""

    type: Literal["simple"] = "simple"
    text: str

    def __init__(self, text: str | None = None, /, **data: Any) -> None:
        if text is not None:
            data["text"] = text
        super().__init__(**data)


class And(BaseCondition):
    """Conditions joined by AND."""

    type: Literal["and"] = "and"
    items: tuple["Condition", ...] = ()

    def __init__(self, items: "list[Condition] | tuple[Condition, ...]" = (), /, **data: Any) -> None:
        data.setdefault("items", tuple(items))
        super().__init__(**data)


class Or(BaseCondition):
    """Conditions joined by OR."""

    type: Literal["or"] = "or"
    items: tuple["Condition", ...] = ()

    def __init__(self, items: "list[Condition] | tuple[Condition, ...]" = (), /, **data: Any) -> None:
        data.setdefault("items", tuple(items))
        super().__init__(**data)


# Discriminated union of all condition shapes
Condition = Annotated[Simple | And | Or, Field(discriminator="type")]

And.model_rebuild()
Or.model_rebuild()

condition_adapter: TypeAdapter[Condition] = TypeAdapter(Condition)


def _render_group(items: tuple[Condition, ...], operator: str) -> str:
    rendered = [render_condition(item) for item in items]
    if len(rendered) == 1:
        return rendered[0]
    if not rendered:
        return ""
    return f"({f' {operator} '.join(rendered)})"


def render_condition(condition: Condition) -> str:
    """Render a condition tree into WHERE clause text.

    Args:
        condition: Root of the condition tree

    Returns:
        The rendered text. Empty groups render as an empty string.

    Example:
        ```python
        render_condition(And([Simple("a"), Or([Simple("b"), Simple("c")])]))
        # "(a AND (b OR c))"
        ```
    """
    if isinstance(condition, Simple):
        return condition.text
    if isinstance(condition, And):
        return _render_group(condition.items, "AND")
    if isinstance(condition, Or):
        return _render_group(condition.items, "OR")
    raise TypeError(f"Unsupported condition type: {type(condition).__name__}")


def combine_conditions(existing: Condition | None, new: Condition) -> Condition:
    """Fold a new condition into an existing tree with AND.

    Each call adds one level of nesting rather than flattening into an
    existing And group.

    Args:
        existing: Current condition, or None if nothing was added yet
        new: Condition to add

    Returns:
        ``new`` when there is no existing condition, otherwise ``And([existing, new])``
    """
    if existing is None:
        return new
    return And([existing, new])
