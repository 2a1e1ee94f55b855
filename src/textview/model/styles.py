#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/model/styles.py
"""Inline style attributes and style-range merging.

This module holds the value types that describe how a run of text looks:

- :class:`InlineTextStyle` is what a parser attaches to a text run (bold,
  italic, strikethrough, code and an optional :class:`LinkMark`).
- :class:`ResolvedStyle` is the render-agnostic highlight descriptor the
  paragraph compositor derives from it (weight, slant, strikethrough,
  background, color and underline).
- :class:`TextRange` is a half-open ``[start, end)`` range of string offsets.

The merge functions work on lists of ``(TextRange, style)`` pairs and only
require that the style objects implement ``combine(other)``, so the same
sweep serves both style types.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple, TypeVar, Union

S = TypeVar("S")


@dataclass(frozen=True)
class TextRange:
    """Half-open range of string offsets.

    Parameters
    ----------
    start : int
        First offset covered by the range
    end : int
        Offset one past the last covered position

    Raises
    ------
    ValueError
        If ``start`` is negative or greater than ``end``

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate range bounds."""
        if self.start < 0:
            raise ValueError(f"Range start must be non-negative, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def coerce(cls, value: Union["TextRange", Tuple[int, int], range]) -> "TextRange":
        """Build a range from a ``TextRange``, ``(start, end)`` tuple or ``range``."""
        if isinstance(value, TextRange):
            return value
        if isinstance(value, range):
            return cls(value.start, value.stop)
        start, end = value
        return cls(start, end)

    @property
    def length(self) -> int:
        """Number of positions covered."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Whether the range covers no positions."""
        return self.start == self.end

    def shift(self, offset: int) -> "TextRange":
        """Return the range moved right by ``offset``."""
        return TextRange(self.start + offset, self.end + offset)

    def contains(self, offset: int) -> bool:
        """Whether ``offset`` falls inside the half-open range."""
        return self.start <= offset < self.end


StyledRange = Tuple[TextRange, S]


@dataclass(frozen=True)
class LinkMark:
    """Link target attached to a text run."""

    url: str
    title: Optional[str] = None


@dataclass(frozen=True)
class InlineTextStyle:
    """Inline style flags a parser attaches to a run of text.

    Parameters
    ----------
    bold, italic, strikethrough, code : bool, default False
        Independent style flags
    link : LinkMark or None, default None
        At most one link per style value

    """

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    code: bool = False
    link: Optional[LinkMark] = None

    @property
    def is_plain(self) -> bool:
        """Whether no flag and no link is set."""
        return self == _PLAIN_STYLE

    def combine(self, other: "InlineTextStyle") -> "InlineTextStyle":
        """Combine two styles attribute-wise.

        Flags are OR-ed. When both sides carry a link, this side's link wins.
        """
        return InlineTextStyle(
            bold=self.bold or other.bold,
            italic=self.italic or other.italic,
            strikethrough=self.strikethrough or other.strikethrough,
            code=self.code or other.code,
            link=self.link if self.link is not None else other.link,
        )

    def resolve(self) -> "ResolvedStyle":
        """Derive the render-agnostic highlight for these flags."""
        return ResolvedStyle(
            font_weight=FontWeight.BOLD if self.bold else None,
            font_style=FontStyle.ITALIC if self.italic else None,
            strikethrough=self.strikethrough,
            background=ColorRole.ACCENT if self.code else None,
            color=ColorRole.LINK if self.link is not None else None,
            underline=self.link is not None,
        )


_PLAIN_STYLE = InlineTextStyle()


class FontWeight(Enum):
    """Font weights used by resolved styles and heading styles."""

    NORMAL = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700

    @classmethod
    def from_name(cls, name: str) -> "FontWeight":
        """Look up a weight by its lowercase name."""
        return cls[name.upper()]


class FontStyle(Enum):
    """Font slant."""

    NORMAL = "normal"
    ITALIC = "italic"


class ColorRole(Enum):
    """Theme color slots a resolved style can refer to.

    The concrete colors belong to whoever paints the text; the model only
    names the slot.
    """

    ACCENT = "accent"
    LINK = "link"


@dataclass(frozen=True)
class ResolvedStyle:
    """Render-agnostic highlight descriptor for a text range."""

    font_weight: Optional[FontWeight] = None
    font_style: Optional[FontStyle] = None
    strikethrough: bool = False
    background: Optional[ColorRole] = None
    color: Optional[ColorRole] = None
    underline: bool = False

    def combine(self, other: "ResolvedStyle") -> "ResolvedStyle":
        """Combine two highlights; this side's optional values take precedence."""
        return ResolvedStyle(
            font_weight=self.font_weight if self.font_weight is not None else other.font_weight,
            font_style=self.font_style if self.font_style is not None else other.font_style,
            strikethrough=self.strikethrough or other.strikethrough,
            background=self.background if self.background is not None else other.background,
            color=self.color if self.color is not None else other.color,
            underline=self.underline or other.underline,
        )


def _combine_styles(left: Any, right: Any) -> Any:
    return left.combine(right)


def merge_ranges(
    a: Sequence[StyledRange],
    b: Sequence[StyledRange],
    combine: Optional[Callable[[Any, Any], Any]] = None,
) -> list[StyledRange]:
    """Merge two sorted, non-overlapping style-range lists.

    The result is sorted and non-overlapping and covers the union of both
    inputs. Wherever an ``a`` range and a ``b`` range overlap, the output
    segment carries ``combine(a_style, b_style)``, so ``a`` has precedence
    for anything ``combine`` resolves by side.

    Parameters
    ----------
    a, b : sequence of (TextRange, style)
        Each list sorted by offset and free of overlaps
    combine : callable, optional
        Binary style combinator; defaults to ``a_style.combine(b_style)``

    Returns
    -------
    list of (TextRange, style)
        Merged segments. Zero-length ranges are dropped and touching
        segments with equal styles are coalesced.

    """
    if not a:
        return list(b)
    if not b:
        return list(a)

    combine = combine or _combine_styles
    left = [item for item in a if not item[0].is_empty]
    right = [item for item in b if not item[0].is_empty]

    boundaries = sorted({point for rng, _ in left + right for point in (rng.start, rng.end)})

    merged: list[StyledRange] = []
    i = j = 0
    for lo, hi in zip(boundaries, boundaries[1:]):
        while i < len(left) and left[i][0].end <= lo:
            i += 1
        while j < len(right) and right[j][0].end <= lo:
            j += 1

        style_a = left[i][1] if i < len(left) and left[i][0].start <= lo else None
        style_b = right[j][1] if j < len(right) and right[j][0].start <= lo else None

        if style_a is None and style_b is None:
            continue
        if style_a is not None and style_b is not None:
            style = combine(style_a, style_b)
        else:
            style = style_a if style_a is not None else style_b

        if merged and merged[-1][0].end == lo and merged[-1][1] == style:
            merged[-1] = (TextRange(merged[-1][0].start, hi), style)
        else:
            merged.append((TextRange(lo, hi), style))

    return merged


def normalize_ranges(
    ranges: Iterable[StyledRange],
    combine: Optional[Callable[[Any, Any], Any]] = None,
) -> list[StyledRange]:
    """Fold an arbitrary, possibly overlapping range list into merged form.

    Ranges are layered in the order given; earlier ranges have precedence
    over later ones wherever ``combine`` picks a side.
    """
    result: list[StyledRange] = []
    for rng, style in ranges:
        if rng.is_empty:
            continue
        result = merge_ranges(result, [(rng, style)], combine)
    return result
