#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/model/visitors.py
"""Visitor base class for the block tree.

:class:`NodeVisitor` declares one abstract ``visit_*`` method per block
variant. A subclass that does not handle every variant cannot be
instantiated, which keeps render dispatch exhaustive when a variant is
added. Visitors that want a fallback for some variants implement those
methods explicitly and route them to their own default.

Every method receives the node and the ``context`` value that was passed to
``Node.accept``. Renderers use it to thread list state and sibling position
down the tree by value.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from textview.model.nodes import (
    Blockquote,
    Break,
    CodeBlock,
    Divider,
    Heading,
    Ignore,
    List,
    ListItem,
    Paragraph,
    Root,
    Table,
    Unknown,
)


class NodeVisitor(ABC):
    """Abstract base class for block tree visitors.

    Examples
    --------
    Counting paragraphs:

        >>> class ParagraphCounter(NodeVisitor):
        ...     def visit_root(self, node, context):
        ...         return sum(child.accept(self) for child in node.children)
        ...     def visit_paragraph(self, node, context):
        ...         return 1
        ...     # ... every other visit_* returns 0

    """

    @abstractmethod
    def visit_root(self, node: Root, context: Any) -> Any:
        """Visit a Root node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, context: Any) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_heading(self, node: Heading, context: Any) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_blockquote(self, node: Blockquote, context: Any) -> Any:
        """Visit a Blockquote node."""

    @abstractmethod
    def visit_list(self, node: List, context: Any) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, context: Any) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, context: Any) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_table(self, node: Table, context: Any) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_break(self, node: Break, context: Any) -> Any:
        """Visit a Break node."""

    @abstractmethod
    def visit_divider(self, node: Divider, context: Any) -> Any:
        """Visit a Divider node."""

    @abstractmethod
    def visit_ignore(self, node: Ignore, context: Any) -> Any:
        """Visit an Ignore node."""

    @abstractmethod
    def visit_unknown(self, node: Unknown, context: Any) -> Any:
        """Visit an Unknown node."""
