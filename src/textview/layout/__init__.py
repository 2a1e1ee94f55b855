#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/layout/__init__.py
"""Pure layout helpers that resolve the block tree for a renderer.

- :mod:`textview.layout.paragraph`: flat text, merged highlights, links
- :mod:`textview.layout.lists`: list state threading and numbering
- :mod:`textview.layout.tables`: column widths and borders
"""

from textview.layout.lists import (
    ListItemPart,
    ListState,
    PrefixKind,
    list_item_parts,
    list_item_prefix,
    number_list_items,
)
from textview.layout.paragraph import ClickEvent, ComposedParagraph, compose, compose_paragraph
from textview.layout.tables import TableLayout, compute_column_widths

__all__ = [
    "ClickEvent",
    "ComposedParagraph",
    "ListItemPart",
    "ListState",
    "PrefixKind",
    "TableLayout",
    "compose",
    "compose_paragraph",
    "compute_column_widths",
    "list_item_parts",
    "list_item_prefix",
    "number_list_items",
]
