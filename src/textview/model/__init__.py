#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/model/__init__.py
"""Block tree and inline style model.

Re-exports the node variants, the style value types and the structural
transforms so callers can ``from textview.model import Paragraph, compact``.
"""

from textview.model.nodes import (
    Blockquote,
    Break,
    CodeBlock,
    Divider,
    Heading,
    Ignore,
    ImageNode,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Span,
    Table,
    TableCell,
    TableColumnAlign,
    TableRow,
    TextNode,
    Unknown,
)
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
from textview.model.transforms import compact
from textview.model.visitors import NodeVisitor

__all__ = [
    "Blockquote",
    "Break",
    "CodeBlock",
    "ColorRole",
    "Divider",
    "FontStyle",
    "FontWeight",
    "Heading",
    "Ignore",
    "ImageNode",
    "InlineTextStyle",
    "LinkMark",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "ResolvedStyle",
    "Root",
    "Span",
    "Table",
    "TableCell",
    "TableColumnAlign",
    "TableRow",
    "TextNode",
    "TextRange",
    "Unknown",
    "compact",
    "merge_ranges",
    "normalize_ranges",
]
