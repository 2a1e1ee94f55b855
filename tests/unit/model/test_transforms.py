#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for block tree compaction."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from textview.model import Break, Divider, Ignore, Paragraph, Root, Unknown, compact

leaves = st.sampled_from([Ignore(), Divider(), Break(), Unknown()]) | st.builds(
    Paragraph.from_text, st.text(max_size=5)
)
trees = st.recursive(leaves, lambda children: st.builds(Root, st.lists(children, max_size=4)), max_leaves=12)


@pytest.mark.unit
class TestCompact:
    """Test root collapsing and Ignore filtering."""

    def test_ignore_then_block_collapses_to_block(self) -> None:
        assert compact(Root(children=[Ignore(), Divider()])) == Divider()

    def test_nested_single_child_roots_collapse(self) -> None:
        paragraph = Paragraph.from_text("x")
        assert compact(Root(children=[Root(children=[paragraph])])) == paragraph

    def test_multiple_children_kept_in_order(self) -> None:
        tree = Root(children=[Divider(), Ignore(), Paragraph.from_text("a"), Break()])
        assert compact(tree) == Root(children=[Divider(), Paragraph.from_text("a"), Break()])

    def test_all_ignore_becomes_empty_root(self) -> None:
        assert compact(Root(children=[Ignore(), Ignore()])) == Root(children=[])

    def test_non_root_returned_as_copy(self) -> None:
        paragraph = Paragraph.from_text("x")
        result = compact(paragraph)
        assert result == paragraph
        assert result is not paragraph

    def test_input_not_modified(self) -> None:
        tree = Root(children=[Ignore(), Root(children=[Divider()]), Divider()])
        compact(tree)
        assert tree == Root(children=[Ignore(), Root(children=[Divider()]), Divider()])

    @given(trees)
    def test_idempotent(self, tree) -> None:
        once = compact(tree)
        assert compact(once) == once

    @given(trees)
    def test_result_has_no_direct_ignore_children(self, tree) -> None:
        result = compact(tree)
        if isinstance(result, Root):
            assert not any(isinstance(child, Ignore) for child in result.children)
