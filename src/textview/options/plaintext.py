#  Copyright (c) 2025 Tom Villani, Ph.D.
# textview/options/plaintext.py
"""Configuration options for plain text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from textview.constants import (
    DEFAULT_CHECKED_GLYPH,
    DEFAULT_DIVIDER_CHAR,
    DEFAULT_DIVIDER_WIDTH,
    DEFAULT_TABLE_CELL_SEPARATOR,
    DEFAULT_UNCHECKED_GLYPH,
)
from textview.options.base import BaseRendererOptions
from textview.options.style import TextViewStyle


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    """Configuration options for plain text rendering.

    Parameters
    ----------
    style : TextViewStyle
        Block spacing; the paragraph gap is rounded to whole blank lines
    table_cell_separator : str, default " | "
        Separator between cells of a row
    checked_glyph, unchecked_glyph : str
        Checkbox prefixes for checklist items
    divider_char : str, default "─"
        Character repeated for a divider
    divider_width : int, default 40
        Length of a divider

    """

    style: TextViewStyle = field(default_factory=TextViewStyle, metadata={"help": "Block spacing"})
    table_cell_separator: str = field(
        default=DEFAULT_TABLE_CELL_SEPARATOR, metadata={"help": "Separator between table cells"}
    )
    checked_glyph: str = field(default=DEFAULT_CHECKED_GLYPH, metadata={"help": "Prefix of a checked item"})
    unchecked_glyph: str = field(default=DEFAULT_UNCHECKED_GLYPH, metadata={"help": "Prefix of an unchecked item"})
    divider_char: str = field(default=DEFAULT_DIVIDER_CHAR, metadata={"help": "Divider character"})
    divider_width: int = field(default=DEFAULT_DIVIDER_WIDTH, metadata={"help": "Divider length"})

    def __post_init__(self) -> None:
        """Validate divider settings."""
        if self.divider_width < 0:
            raise ValueError(f"divider_width must be non-negative, got {self.divider_width}")
        if len(self.divider_char) != 1:
            raise ValueError(f"divider_char must be a single character, got {self.divider_char!r}")
