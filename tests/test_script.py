"""ScriptBuilder LET/RETURN scripts."""

import pytest

from surreal_query import MissingReturnError, MissingTargetError, QueryBuilder, ScriptBuilder
from surreal_query.core.base import ErrorCode


class TestScriptBuilder:
    def test_let_query_and_return(self):
        script = (
            ScriptBuilder()
            .let_query("widgets", QueryBuilder().from_("widget").add_where("active = true"))
            .returning([("items", "$widgets")])
            .build()
        )
        assert script == "LET $widgets = (SELECT * FROM widget WHERE active = true);\nRETURN { items: $widgets }"

    def test_suffix_goes_outside_parentheses(self):
        script = (
            ScriptBuilder.new()
            .let_query_with_suffix("total", QueryBuilder().select("count()").from_("order"), "[0].count")
            .let_raw("now", "time::now()")
            .returning({"total": "$total", "at": "$now"})
            .build()
        )
        assert script.splitlines() == [
            "LET $total = (SELECT count() FROM order)[0].count;",
            "LET $now = (time::now());",
            "RETURN { total: $total, at: $now }",
        ]

    def test_raw_with_suffix(self):
        script = ScriptBuilder().let_raw_with_suffix("first", "SELECT * FROM t", "[0]").returning({"x": "$first"})
        assert script.build() == "LET $first = (SELECT * FROM t)[0];\nRETURN { x: $first }"

    def test_return_only(self):
        assert ScriptBuilder().returning({"ok": "true"}).build() == "RETURN { ok: true }"

    def test_missing_return(self):
        with pytest.raises(MissingReturnError) as exc_info:
            ScriptBuilder().let_raw("a", "1").build()
        assert exc_info.value.code == ErrorCode.QUERY_MISSING_RETURN

    def test_empty_return(self):
        with pytest.raises(MissingReturnError):
            ScriptBuilder().returning([]).build()

    def test_inner_query_without_target(self):
        with pytest.raises(MissingTargetError):
            ScriptBuilder().let_query("x", QueryBuilder().select("id"))

    def test_returning_replaces_previous(self):
        script = ScriptBuilder().returning({"a": "1"}).returning({"b": "2"})
        assert script.build() == "RETURN { b: 2 }"
