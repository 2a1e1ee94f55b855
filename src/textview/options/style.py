#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/options/style.py
"""Block spacing configuration shared by every renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from textview.constants import DEFAULT_PARAGRAPH_GAP
from textview.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class TextViewStyle(CloneFrozenMixin):
    """Spacing applied between blocks of a text view.

    Parameters
    ----------
    paragraph_gap : float, default 1.0
        Space below a block, in rem for pixel painters and in blank lines
        for text renderers. Blocks inside lists and the last child of a
        container get no gap.

    Examples
    --------
        >>> TextViewStyle.inline().paragraph_gap
        0.0

    """

    paragraph_gap: float = field(
        default=DEFAULT_PARAGRAPH_GAP,
        metadata={"help": "Space below each block (rem, or blank lines in text output)", "type": float},
    )

    def __post_init__(self) -> None:
        """Validate the gap is not negative."""
        if self.paragraph_gap < 0:
            raise ValueError(f"paragraph_gap must be non-negative, got {self.paragraph_gap}")

    @classmethod
    def inline(cls) -> "TextViewStyle":
        """Style for inline text: no paragraph gap."""
        return cls(paragraph_gap=0.0)

    def with_paragraph_gap(self, gap: float) -> "TextViewStyle":
        return self.create_updated(paragraph_gap=gap)
