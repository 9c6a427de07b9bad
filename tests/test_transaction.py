"""TransactionBuilder statement blocks."""

import pytest

from surreal_query import MissingReturnError, MissingTargetError, QueryBuilder, ScriptBuilder, TransactionBuilder


class TestTransactionBuilder:
    def test_commit_block(self):
        tx = (
            TransactionBuilder()
            .begin()
            .add_statement("CREATE account:one SET balance = 100")
            .add_query(QueryBuilder().from_("account").add_where("balance > 0"))
            .commit()
        )
        assert tx.build() == (
            "BEGIN TRANSACTION;\n"
            "CREATE account:one SET balance = 100;\n"
            "SELECT * FROM account WHERE balance > 0;\n"
            "COMMIT TRANSACTION;"
        )

    def test_cancel_block(self):
        tx = TransactionBuilder.new().begin().add_statement("DELETE account").cancel()
        assert tx.build() == "BEGIN TRANSACTION;\nDELETE account;\nCANCEL TRANSACTION;"

    def test_statement_terminator_not_doubled(self):
        tx = TransactionBuilder().add_statement("  UPDATE t SET x = 1;  ")
        assert tx.build() == "UPDATE t SET x = 1;"

    def test_query_with_suffix(self):
        query = QueryBuilder().select("count()").from_("user")
        assert TransactionBuilder().add_query_with_suffix(query, "[0].count").build() == (
            "(SELECT count() FROM user)[0].count;"
        )

    def test_script_is_verbatim(self):
        script = ScriptBuilder().let_raw("a", "1").returning({"a": "$a"})
        tx = TransactionBuilder().begin().add_script(script).add_script("LET $b = 2;\nRETURN $b").commit()
        assert tx.build() == (
            "BEGIN TRANSACTION;\n"
            "LET $a = (1);\n"
            "RETURN { a: $a }\n"
            "LET $b = 2;\n"
            "RETURN $b\n"
            "COMMIT TRANSACTION;"
        )

    def test_empty(self):
        assert TransactionBuilder().build() == ""

    def test_query_without_target(self):
        with pytest.raises(MissingTargetError):
            TransactionBuilder().add_query(QueryBuilder())

    def test_script_without_return(self):
        with pytest.raises(MissingReturnError):
            TransactionBuilder().add_script(ScriptBuilder())
