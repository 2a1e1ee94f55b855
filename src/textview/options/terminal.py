#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/options/terminal.py
"""Configuration options for terminal rendering with rich."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from textview.constants import (
    DEFAULT_CHECKED_GLYPH,
    DEFAULT_CODE_THEME,
    DEFAULT_TERMINAL_WIDTH,
    DEFAULT_UNCHECKED_GLYPH,
)
from textview.options.base import BaseRendererOptions, CloneFrozenMixin
from textview.options.style import TextViewStyle


@dataclass(frozen=True)
class TerminalTheme(CloneFrozenMixin):
    """Concrete paint attributes for the color roles of the model.

    Values are rich color or style strings. The renderer only reads the
    theme.
    """

    link: str = field(default="bright_blue", metadata={"help": "Foreground of link text"})
    accent: str = field(default="grey23", metadata={"help": "Background of inline code"})
    muted_foreground: str = field(default="grey62", metadata={"help": "Foreground of quoted text"})
    border: str = field(default="grey37", metadata={"help": "Table borders, quote bar and dividers"})
    primary: str = field(default="green", metadata={"help": "Checkbox color"})
    code_background: Optional[str] = field(default=None, metadata={"help": "Code block background"})


@dataclass(frozen=True)
class TerminalRendererOptions(BaseRendererOptions):
    """Configuration options for the rich terminal renderer.

    Parameters
    ----------
    style : TextViewStyle
        Block spacing; the gap is rounded to whole blank lines
    width : int or None, default 100
        Console width used by ``render_to_string``; None lets rich decide
    theme : TerminalTheme
        Colors for links, code, quotes and borders
    code_theme : str, default "monokai"
        Pygments theme for code blocks
    hyperlinks : bool, default True
        Emit terminal hyperlinks for link ranges
    checked_glyph, unchecked_glyph : str
        Checkbox prefixes for checklist items

    """

    style: TextViewStyle = field(default_factory=TextViewStyle, metadata={"help": "Block spacing"})
    width: Optional[int] = field(default=DEFAULT_TERMINAL_WIDTH, metadata={"help": "Console width"})
    theme: TerminalTheme = field(default_factory=TerminalTheme, metadata={"help": "Color theme"})
    code_theme: str = field(default=DEFAULT_CODE_THEME, metadata={"help": "Syntax theme for code blocks"})
    hyperlinks: bool = field(default=True, metadata={"help": "Emit terminal hyperlinks"})
    checked_glyph: str = field(default=DEFAULT_CHECKED_GLYPH, metadata={"help": "Prefix of a checked item"})
    unchecked_glyph: str = field(default=DEFAULT_UNCHECKED_GLYPH, metadata={"help": "Prefix of an unchecked item"})

    def __post_init__(self) -> None:
        """Validate the console width."""
        if self.width is not None and self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
