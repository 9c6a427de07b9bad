"""Graph traversal rendering."""

import pytest
from pydantic import ValidationError

from surreal_query.query_builder.graph import Direction, GraphExpandParams, render_graph_traversal


class TestDirection:
    def test_arrows(self):
        assert Direction.OUT.value == "->"
        assert Direction.IN.value == "<-"

    def test_aliases(self):
        assert Direction.Out is Direction.OUT
        assert Direction.In is Direction.IN
        assert list(Direction) == [Direction.OUT, Direction.IN]


class TestRenderGraphTraversal:
    """Arrow rendering for every direction pairing."""

    def test_out_in_with_alias(self):
        params = GraphExpandParams(
            from_=(Direction.OUT, "friends"), to=(Direction.IN, "posts"), alias="friend_posts"
        )
        assert render_graph_traversal(params) == "->friends<-posts.* AS friend_posts"

    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [
            (Direction.OUT, Direction.OUT, "->a->b.*"),
            (Direction.OUT, Direction.IN, "->a<-b.*"),
            (Direction.IN, Direction.OUT, "<-a->b.*"),
            (Direction.IN, Direction.IN, "<-a<-b.*"),
        ],
    )
    def test_each_hop_uses_its_own_direction(self, first, second, expected):
        params = GraphExpandParams(from_=(first, "a"), to=(second, "b"))
        assert render_graph_traversal(params) == expected

    def test_no_alias(self):
        params = GraphExpandParams(from_=(Direction.IN, "wrote"), to=(Direction.OUT, "likes"))
        assert render_graph_traversal(params) == "<-wrote->likes.*"

    def test_names_are_verbatim(self):
        params = GraphExpandParams(
            from_=(Direction.OUT, "knows WHERE since > 2020"), to=(Direction.OUT, "person"), alias="`x y`"
        )
        assert render_graph_traversal(params) == "->knows WHERE since > 2020->person.* AS `x y`"


class TestGraphExpandParams:
    def test_from_alias_accepted(self):
        params = GraphExpandParams.model_validate(
            {"from": ("->", "friends"), "to": ("<-", "posts"), "alias": None}
        )
        assert params.from_ == (Direction.OUT, "friends")
        assert params.to == (Direction.IN, "posts")

    def test_frozen(self):
        params = GraphExpandParams(from_=(Direction.OUT, "a"), to=(Direction.OUT, "b"))
        with pytest.raises(ValidationError):
            params.alias = "c"  # type: ignore[misc]

    def test_invalid_direction(self):
        with pytest.raises(ValidationError):
            GraphExpandParams(from_=("=>", "a"), to=(Direction.OUT, "b"))


class TestAliasRendering:
    def test_empty_alias_is_dropped(self):
        params = GraphExpandParams(from_=(Direction.Out, "a"), to=(Direction.In, "b"), alias="")
        assert render_graph_traversal(params) == "->a<-b.*"
