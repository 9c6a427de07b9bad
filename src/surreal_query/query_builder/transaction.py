"""SurrealQL transaction builder.

Create a TransactionBuilder, call ``begin()``, add statements (raw text,
built queries or whole scripts), finish with ``commit()`` or ``cancel()``
and call ``build()`` for the final transaction text.
"""

from typing import Self

from surreal_query.query_builder.builder import QueryBuilder
from surreal_query.query_builder.script import ScriptBuilder


class TransactionBuilder:
    """Builder for ``BEGIN TRANSACTION; ... COMMIT TRANSACTION;`` blocks."""

    def __init__(self) -> None:
        self._statements: list[str] = []

    @classmethod
    def new(cls) -> Self:
        return cls()

    def begin(self) -> Self:
        self._statements.append("BEGIN TRANSACTION;")
        return self

    def add_statement(self, statement: str) -> Self:
        """Add a raw statement, terminating it with ``;`` if needed."""
        statement = statement.strip()
        if not statement.endswith(";"):
            statement = f"{statement};"
        self._statements.append(statement)
        return self

    def add_query(self, query: QueryBuilder) -> Self:
        """Add a built query as a statement.

        Raises:
            MissingTargetError: If the query has no FROM target
        """
        return self.add_statement(query.build())

    def add_query_with_suffix(self, query: QueryBuilder, suffix: str) -> Self:
        """Add ``(query)suffix;``, e.g. ``(SELECT count() FROM t GROUP ALL)[0].count;``.

        Raises:
            MissingTargetError: If the query has no FROM target
        """
        return self.add_statement(f"({query.build()}){suffix}")

    def add_script(self, script: str | ScriptBuilder) -> Self:
        """Add a whole script verbatim. ScriptBuilders are built first.

        Raises:
            MissingReturnError: If a ScriptBuilder without a RETURN object is given
        """
        if isinstance(script, ScriptBuilder):
            script = script.build()
        self._statements.append(script)
        return self

    def commit(self) -> Self:
        self._statements.append("COMMIT TRANSACTION;")
        return self

    def cancel(self) -> Self:
        self._statements.append("CANCEL TRANSACTION;")
        return self

    def build(self) -> str:
        """Join all statements, one per line."""
        return "\n".join(self._statements)
