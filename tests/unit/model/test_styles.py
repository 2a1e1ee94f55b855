#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for inline styles, resolved styles and style-range merging."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from textview.model.styles import (
    ColorRole,
    FontStyle,
    FontWeight,
    InlineTextStyle,
    LinkMark,
    ResolvedStyle,
    TextRange,
    merge_ranges,
    normalize_ranges,
)


@pytest.mark.unit
class TestTextRange:
    """Test the half-open range value type."""

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError):
            TextRange(-1, 2)

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            TextRange(3, 2)

    def test_coerce_accepts_tuple_and_range(self) -> None:
        assert TextRange.coerce((1, 4)) == TextRange(1, 4)
        assert TextRange.coerce(range(2, 5)) == TextRange(2, 5)
        rng = TextRange(0, 1)
        assert TextRange.coerce(rng) is rng

    def test_contains_is_half_open(self) -> None:
        rng = TextRange(4, 7)
        assert not rng.contains(3)
        assert rng.contains(4)
        assert rng.contains(6)
        assert not rng.contains(7)

    def test_shift_and_length(self) -> None:
        assert TextRange(1, 3).shift(10) == TextRange(11, 13)
        assert TextRange(1, 3).length == 2
        assert TextRange(5, 5).is_empty


@pytest.mark.unit
class TestInlineTextStyle:
    """Test inline style combination and resolution."""

    def test_combine_ors_flags(self) -> None:
        combined = InlineTextStyle(bold=True).combine(InlineTextStyle(italic=True, code=True))
        assert combined == InlineTextStyle(bold=True, italic=True, code=True)

    def test_combine_keeps_left_link(self) -> None:
        inner = InlineTextStyle(link=LinkMark("https://inner.example"))
        outer = InlineTextStyle(link=LinkMark("https://outer.example"))
        assert inner.combine(outer).link.url == "https://inner.example"
        assert InlineTextStyle().combine(outer).link.url == "https://outer.example"

    def test_is_plain(self) -> None:
        assert InlineTextStyle().is_plain
        assert not InlineTextStyle(strikethrough=True).is_plain

    def test_resolve_maps_every_flag(self) -> None:
        resolved = InlineTextStyle(
            bold=True, italic=True, strikethrough=True, code=True, link=LinkMark("https://example.com")
        ).resolve()
        assert resolved == ResolvedStyle(
            font_weight=FontWeight.BOLD,
            font_style=FontStyle.ITALIC,
            strikethrough=True,
            background=ColorRole.ACCENT,
            color=ColorRole.LINK,
            underline=True,
        )

    def test_resolve_plain_is_empty_highlight(self) -> None:
        assert InlineTextStyle().resolve() == ResolvedStyle()


@pytest.mark.unit
class TestResolvedStyleCombine:
    """Test resolved style combination."""

    def test_left_optional_values_win(self) -> None:
        left = ResolvedStyle(font_weight=FontWeight.SEMIBOLD)
        right = ResolvedStyle(font_weight=FontWeight.BOLD, font_style=FontStyle.ITALIC)
        combined = left.combine(right)
        assert combined.font_weight is FontWeight.SEMIBOLD
        assert combined.font_style is FontStyle.ITALIC

    def test_booleans_are_ored(self) -> None:
        combined = ResolvedStyle(strikethrough=True).combine(ResolvedStyle(underline=True))
        assert combined.strikethrough and combined.underline

    def test_font_weight_from_name(self) -> None:
        assert FontWeight.from_name("semibold") is FontWeight.SEMIBOLD


BOLD = InlineTextStyle(bold=True)
ITALIC = InlineTextStyle(italic=True)


@pytest.mark.unit
class TestMergeRanges:
    """Test the sorted-range merge."""

    def test_empty_left_returns_right_unchanged(self) -> None:
        b = [(TextRange(0, 3), BOLD)]
        assert merge_ranges([], b) == b

    def test_empty_right_returns_left_unchanged(self) -> None:
        a = [(TextRange(2, 4), ITALIC)]
        assert merge_ranges(a, []) == a

    def test_partial_overlap_splits_into_three_segments(self) -> None:
        merged = merge_ranges([(TextRange(0, 4), BOLD)], [(TextRange(2, 6), ITALIC)])
        assert merged == [
            (TextRange(0, 2), BOLD),
            (TextRange(2, 4), InlineTextStyle(bold=True, italic=True)),
            (TextRange(4, 6), ITALIC),
        ]

    def test_disjoint_ranges_keep_gap(self) -> None:
        merged = merge_ranges([(TextRange(0, 2), BOLD)], [(TextRange(5, 7), ITALIC)])
        assert merged == [(TextRange(0, 2), BOLD), (TextRange(5, 7), ITALIC)]

    def test_zero_length_ranges_dropped(self) -> None:
        merged = merge_ranges([(TextRange(0, 2), BOLD)], [(TextRange(1, 1), ITALIC), (TextRange(3, 4), ITALIC)])
        assert merged == [(TextRange(0, 2), BOLD), (TextRange(3, 4), ITALIC)]

    def test_touching_equal_segments_coalesced(self) -> None:
        merged = merge_ranges([(TextRange(0, 2), BOLD)], [(TextRange(2, 5), BOLD)])
        assert merged == [(TextRange(0, 5), BOLD)]

    def test_left_has_precedence_for_links(self) -> None:
        a = [(TextRange(0, 4), InlineTextStyle(link=LinkMark("a")))]
        b = [(TextRange(0, 4), InlineTextStyle(link=LinkMark("b")))]
        assert merge_ranges(a, b)[0][1].link.url == "a"

    def test_custom_combine(self) -> None:
        merged = merge_ranges([(TextRange(0, 2), 1)], [(TextRange(1, 3), 10)], combine=lambda x, y: x + y)
        assert merged == [(TextRange(0, 1), 1), (TextRange(1, 2), 11), (TextRange(2, 3), 10)]


@pytest.mark.unit
class TestNormalizeRanges:
    """Test folding an arbitrary range list."""

    def test_nested_ranges(self) -> None:
        normalized = normalize_ranges([(TextRange(0, 10), BOLD), (TextRange(3, 5), ITALIC)])
        assert normalized == [
            (TextRange(0, 3), BOLD),
            (TextRange(3, 5), InlineTextStyle(bold=True, italic=True)),
            (TextRange(5, 10), BOLD),
        ]

    def test_unsorted_input(self) -> None:
        normalized = normalize_ranges([(TextRange(6, 8), ITALIC), (TextRange(0, 2), BOLD)])
        assert [rng for rng, _ in normalized] == [TextRange(0, 2), TextRange(6, 8)]


FLAGS = ("bold", "italic", "strikethrough", "code")


@st.composite
def styled_ranges(draw, max_end: int = 30) -> list:
    """Draw an arbitrary (possibly overlapping) list of single-flag ranges."""
    items = []
    for _ in range(draw(st.integers(min_value=0, max_value=6))):
        start = draw(st.integers(min_value=0, max_value=max_end))
        end = draw(st.integers(min_value=start, max_value=max_end))
        flag = draw(st.sampled_from(FLAGS))
        items.append((TextRange(start, end), InlineTextStyle(**{flag: True})))
    return items


def _style_at(ranges: list, offset: int) -> InlineTextStyle:
    """Union of the flags of every range covering ``offset``."""
    style = InlineTextStyle()
    for rng, item_style in ranges:
        if rng.contains(offset):
            style = style.combine(item_style)
    return style


@pytest.mark.unit
class TestMergeProperties:
    """Property-based tests for merge correctness."""

    @given(styled_ranges(), styled_ranges())
    def test_merge_output_sorted_and_non_overlapping(self, raw_a, raw_b) -> None:
        merged = merge_ranges(normalize_ranges(raw_a), normalize_ranges(raw_b))
        for (first, _), (second, _) in zip(merged, merged[1:]):
            assert first.end <= second.start
        assert all(not rng.is_empty for rng, _ in merged)

    @given(styled_ranges(), styled_ranges())
    def test_merge_style_at_every_offset_is_union(self, raw_a, raw_b) -> None:
        merged = merge_ranges(normalize_ranges(raw_a), normalize_ranges(raw_b))
        for offset in range(31):
            expected = _style_at(raw_a + raw_b, offset)
            covering = [style for rng, style in merged if rng.contains(offset)]
            if expected.is_plain:
                assert all(style.is_plain for style in covering)
            else:
                assert covering == [expected]

    @given(styled_ranges())
    def test_merge_with_itself_is_identity_for_flags(self, raw) -> None:
        normalized = normalize_ranges(raw)
        assert merge_ranges(normalized, normalized) == normalized

    @given(styled_ranges())
    def test_merge_with_empty_is_identity(self, raw) -> None:
        normalized = normalize_ranges(raw)
        assert merge_ranges(normalized, []) == normalized
        assert merge_ranges([], normalized) == normalized
