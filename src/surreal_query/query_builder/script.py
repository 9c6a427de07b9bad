"""SurrealQL script builder.

Scripts are a run of ``LET`` assignments followed by a single ``RETURN``
object, e.g.::

    LET $widgets = (SELECT * FROM widget WHERE active = true);
    RETURN { items: $widgets }
"""

from collections.abc import Iterable, Mapping
from typing import Self

from structlog.typing import FilteringBoundLogger

from surreal_query.core.decorators import with_error_handling
from surreal_query.core.errors import MissingReturnError
from surreal_query.core.logging import get_logger
from surreal_query.query_builder.builder import QueryBuilder

logger: FilteringBoundLogger = get_logger(name=__name__)


class ScriptBuilder:
    """Builder for ``LET ...; RETURN { ... }`` scripts."""

    def __init__(self) -> None:
        self._statements: list[str] = []
        self._return_map: list[tuple[str, str]] | None = None

    @classmethod
    def new(cls) -> Self:
        return cls()

    def let_raw(self, name: str, expr: str) -> Self:
        """Add ``LET $name = (expr);``.

        Args:
            name: Variable name without the ``$`` sigil
            expr: Expression text, wrapped in parentheses

        Returns:
            Self for method chaining
        """
        self._statements.append(f"LET ${name} = ({expr});")
        return self

    def let_raw_with_suffix(self, name: str, expr: str, suffix: str) -> Self:
        """Add ``LET $name = (expr)suffix;``.

        The suffix lands outside the parentheses, which is how SurrealQL
        indexes into a subquery result, e.g. ``[0].count``.
        """
        self._statements.append(f"LET ${name} = ({expr}){suffix};")
        return self

    def let_query(self, name: str, query: QueryBuilder) -> Self:
        """Build ``query`` and assign it with ``let_raw``.

        Raises:
            MissingTargetError: If the inner query has no FROM target
        """
        return self.let_raw(name, query.build())

    def let_query_with_suffix(self, name: str, query: QueryBuilder, suffix: str) -> Self:
        """Build ``query`` and assign it with ``let_raw_with_suffix``.

        Raises:
            MissingTargetError: If the inner query has no FROM target
        """
        return self.let_raw_with_suffix(name, query.build(), suffix)

    def returning(self, pairs: Mapping[str, str] | Iterable[tuple[str, str]]) -> Self:
        """Set the RETURN object.

        Args:
            pairs: Keys and verbatim value expressions (``"$widgets"``, ``"count()"``, ...)

        Returns:
            Self for method chaining
        """
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        self._return_map = [(key, value) for key, value in items]
        return self

    @with_error_handling()
    def build(self) -> str:
        """Build the script.

        Raises:
            MissingReturnError: If no RETURN object was set, or it is empty
        """
        if not self._return_map:
            raise MissingReturnError()

        lines = list(self._statements)
        pairs = ", ".join(f"{key}: {value}" for key, value in self._return_map)
        lines.append(f"RETURN {{ {pairs} }}")

        script = "\n".join(lines)
        logger.debug("Built SurrealQL script", statements=len(self._statements))
        return script
