#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for textview.

This module centralizes the magic numbers and default configuration values
used across the rendering model, the layout helpers and the renderers.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Table Layout - Column sizing limits
3. Lists - Bullet and checkbox glyphs
4. Headings - Per-level text size and weight
5. Parsers - Dependency specifications and tag tables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

SourceAlignment = Literal["none", "left", "center", "right"]
FontWeightName = Literal["normal", "medium", "semibold", "bold"]

# =============================================================================
# Table Layout
# =============================================================================

# Floor for a column's width when no cell in it is wider
DEFAULT_COLUMN_WIDTH = 5

# Ceiling applied when a stored column width is turned into a layout value
MAX_COLUMN_WIDTH = 150

# =============================================================================
# Lists
# =============================================================================

UNORDERED_BULLETS: tuple[str, ...] = ("• ", "◦ ", "▪ ")

DEFAULT_CHECKED_GLYPH = "☑ "
DEFAULT_UNCHECKED_GLYPH = "☐ "

# =============================================================================
# Paragraphs and Headings
# =============================================================================

DEFAULT_PARAGRAPH_GAP = 1.0

# level -> (text size in rem, font weight)
HEADING_STYLES: dict[int, tuple[float, FontWeightName]] = {
    1: (2.0, "bold"),
    2: (1.5, "semibold"),
    3: (1.25, "semibold"),
    4: (1.125, "semibold"),
    5: (1.0, "semibold"),
    6: (1.0, "medium"),
}
DEFAULT_HEADING_STYLE: tuple[float, FontWeightName] = (1.0, "normal")

# =============================================================================
# Renderers
# =============================================================================

DEFAULT_TABLE_CELL_SEPARATOR = " | "
DEFAULT_DIVIDER_CHAR = "─"
DEFAULT_DIVIDER_WIDTH = 40
DEFAULT_TERMINAL_WIDTH = 100
DEFAULT_CODE_THEME = "monokai"

# =============================================================================
# Parsers
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_TERMINAL = [("rich", "rich", ">=13.0.0")]

HTML_HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

HTML_SKIPPED_TAGS = frozenset({"script", "style", "head", "title", "meta", "link", "noscript", "template"})

HTML_BLOCK_TAGS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "details",
        "div",
        "dl",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "html",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "summary",
        "table",
        "ul",
    }
)
