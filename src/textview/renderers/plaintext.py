#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/renderers/plaintext.py
"""Plain text rendering of the block tree.

This module provides the PlainTextRenderer class which renders the block
tree to unformatted text. Inline styles are dropped; what remains is the
composed text of each paragraph laid out with the same block rules every
renderer follows: list prefixes and indentation, checkbox glyphs, paragraph
gaps and table columns sized from :class:`~textview.layout.tables.TableLayout`.

"""

from __future__ import annotations

from typing import Optional

from textview.layout.lists import PrefixKind
from textview.layout.paragraph import compose_paragraph
from textview.layout.tables import TableLayout
from textview.model.nodes import (
    Blockquote,
    CodeBlock,
    Divider,
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Table,
    TableColumnAlign,
)
from textview.options.plaintext import PlainTextOptions
from textview.renderers.base import BaseRenderer, RenderContext

_INDENT = "  "


class PlainTextRenderer(BaseRenderer):
    """Render the block tree to plain, unformatted text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text rendering options

    Examples
    --------
        >>> from textview.model import Paragraph, Root
        >>> root = Root(children=[Paragraph.from_text("one"), Paragraph.from_text("two")])
        >>> PlainTextRenderer().render_to_string(root)
        'one\\n\\ntwo'

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "plaintext")
        options = options or PlainTextOptions()
        super().__init__(options)
        self.options: PlainTextOptions = options

    def render_to_string(self, root: Node) -> str:
        """Render a tree to plain text without a trailing newline."""
        return self.render_node(root)

    def empty(self) -> str:
        return ""

    def _gap_lines(self, margin: float) -> str:
        return "\n" * int(round(margin))

    def visit_root(self, node: Root, context: Optional[RenderContext] = None) -> str:
        parts = []
        for output, margin in self.iter_blocks(node, context):
            parts.append(output + "\n" + self._gap_lines(margin))
        return "".join(parts).rstrip("\n")

    def visit_paragraph(self, node: Paragraph, context: Optional[RenderContext] = None) -> str:
        if node.image is not None:
            return node.image.alt or node.image.url
        return compose_paragraph(node).text

    def visit_heading(self, node: Heading, context: Optional[RenderContext] = None) -> str:
        return compose_paragraph(node.children).text

    def visit_blockquote(self, node: Blockquote, context: Optional[RenderContext] = None) -> str:
        return compose_paragraph(node.children).text

    def visit_list(self, node: List, context: Optional[RenderContext] = None) -> str:
        context = context or RenderContext()
        lines = [self.render_node(item, item_context) for item, item_context in self.iter_list_items(node, context)]
        return "\n".join(line for line in lines if line)

    def visit_list_item(self, node: ListItem, context: Optional[RenderContext] = None) -> str:
        """Render a list item's paragraphs after their prefix and its nested lists below them."""
        context = context or RenderContext()
        depth = context.list_state.depth if context.list_state is not None else 0
        indent = _INDENT * depth

        lines: list[str] = [""] if node.spread else []
        for part in self.item_parts(node, context):
            if part.is_nested_list:
                nested = self.render_node(part.node, self.nested_context(part))
                if nested:
                    lines.append(nested)
                continue

            if part.prefix_kind is PrefixKind.CHECKBOX:
                prefix = self.options.checked_glyph if part.checked else self.options.unchecked_glyph
            elif part.prefix_kind is PrefixKind.MARKER:
                prefix = part.marker or ""
            else:
                prefix = ""

            text = self.render_node(part.node, self.nested_context(part))
            hanging = "\n" + indent + " " * len(prefix)
            lines.append(indent + prefix + text.replace("\n", hanging))

        return "\n".join(lines)

    def visit_code_block(self, node: CodeBlock, context: Optional[RenderContext] = None) -> str:
        return node.code

    def visit_table(self, node: Table, context: Optional[RenderContext] = None) -> str:
        """Render rows of padded cells; a divider line separates consecutive rows."""
        layout = TableLayout.from_table(node)
        separator = self.options.table_cell_separator

        rows: list[str] = []
        for row in node.children:
            cells = []
            for ix, cell in enumerate(row.children):
                text = compose_paragraph(cell.children).text.replace("\n", " ")
                cells.append(_align(text, layout.rendered_width(ix), layout.column_align(ix)))
            rows.append(separator.join(cells).rstrip())

        width = max((len(row) for row in rows), default=0)
        lines: list[str] = []
        for row_ix, row_text in enumerate(rows):
            lines.append(row_text)
            if layout.has_row_border(row_ix):
                lines.append(self.options.divider_char * width)
        return "\n".join(lines)

    def visit_divider(self, node: Divider, context: Optional[RenderContext] = None) -> str:
        return self.options.divider_char * self.options.divider_width


def _align(text: str, width: int, align: TableColumnAlign) -> str:
    if align is TableColumnAlign.RIGHT:
        return text.rjust(width)
    if align is TableColumnAlign.CENTER:
        return text.center(width)
    return text.ljust(width)


def render_to_string(root: Node, options: PlainTextOptions | None = None) -> str:
    """Render a tree to plain text in one step."""
    return PlainTextRenderer(options).render_to_string(root)
