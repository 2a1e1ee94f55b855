#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/renderers/base.py
"""Base classes for block tree renderers.

This module defines the render-dispatch skeleton shared by every renderer.
:class:`BaseRenderer` is a :class:`~textview.model.visitors.NodeVisitor`:
each block variant has its own ``visit_*`` method and the visitor context is
a :class:`RenderContext` carrying list state and sibling position down the
tree by value.

The rules common to every renderer live here:

- a block gets the paragraph gap below it unless it is inside a list or is
  the last child of its parent (:func:`block_margin`);
- list items are numbered locally per list and resolved into prefixed parts
  by :mod:`textview.layout.lists`;
- ``Break`` and ``Ignore`` render as nothing, ``Unknown`` renders as nothing
  and leaves a DEBUG record.

"""

from __future__ import annotations

import logging
from abc import abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional

from textview.constants import DEFAULT_HEADING_STYLE, HEADING_STYLES
from textview.exceptions import InvalidOptionsError
from textview.layout.lists import ListItemPart, ListState, list_item_parts, number_list_items
from textview.model.nodes import Break, Ignore, List, ListItem, Node, Root, Unknown
from textview.model.styles import FontWeight
from textview.model.visitors import NodeVisitor
from textview.options.base import BaseRendererOptions
from textview.options.style import TextViewStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Per-node rendering context passed down the tree.

    Parameters
    ----------
    list_state : ListState or None
        State of the enclosing list item; None outside lists
    item_index : int
        Ordinal of the list item being rendered
    is_last_child : bool
        Whether the node is the last child of its parent

    """

    list_state: Optional[ListState] = None
    item_index: int = 0
    is_last_child: bool = True

    @property
    def in_list(self) -> bool:
        return self.list_state is not None

    def for_child(self, is_last_child: bool) -> "RenderContext":
        return replace(self, is_last_child=is_last_child)


def block_margin(style: TextViewStyle, context: RenderContext) -> float:
    """Space below a block: the paragraph gap, or 0 inside lists and after the last child."""
    if context.in_list or context.is_last_child:
        return 0.0
    return style.paragraph_gap


def heading_style(level: int) -> tuple[float, FontWeight]:
    """Text scale (rem) and font weight of a heading level; levels above 6 are body text."""
    scale, weight = HEADING_STYLES.get(level, DEFAULT_HEADING_STYLE)
    return scale, FontWeight.from_name(weight)


class BaseRenderer(NodeVisitor):
    """Abstract base class for all block tree renderers.

    Subclasses implement the ``visit_*`` methods for the content variants
    and :meth:`empty`, the value a block with no output renders to. The
    methods for ``Break``, ``Ignore`` and ``Unknown`` are provided.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @property
    def style(self) -> TextViewStyle:
        """Block spacing; renderer options that carry no style use the default."""
        return getattr(self.options, "style", None) or TextViewStyle()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def empty(self) -> Any:
        """Output of a block that renders nothing."""

    @abstractmethod
    def render_to_string(self, root: Node) -> str:
        """Render a tree to a string."""

    def render_node(self, node: Node, context: Optional[RenderContext] = None) -> Any:
        """Dispatch ``node`` to its ``visit_*`` method."""
        return node.accept(self, context if context is not None else RenderContext())

    def is_empty_output(self, output: Any) -> bool:
        return output is None or output == self.empty()

    def iter_blocks(self, root: Root, context: Optional[RenderContext] = None) -> Iterator[tuple[Any, float]]:
        """Render the children of ``root`` and pair each output with its margin.

        Children rendering to nothing are skipped.
        """
        context = context if context is not None else RenderContext()
        last = len(root.children) - 1
        for ix, child in enumerate(root.children):
            child_context = context.for_child(is_last_child=ix == last)
            output = self.render_node(child, child_context)
            if self.is_empty_output(output):
                continue
            yield output, block_margin(self.style, child_context)

    def iter_list_items(self, node: List, context: RenderContext) -> Iterator[tuple[ListItem, RenderContext]]:
        """Yield the items of a list with the context to render each one.

        Non-item children do not take an ordinal and are skipped.
        """
        for child, ix, state in number_list_items(node, context.list_state):
            if isinstance(child, ListItem):
                yield child, RenderContext(list_state=state, item_index=ix, is_last_child=True)

    @staticmethod
    def item_parts(node: ListItem, context: RenderContext) -> list[ListItemPart]:
        """Resolve the prefixed parts of a list item; an item outside a list counts as a top-level first item."""
        state = context.list_state if context.list_state is not None else ListState()
        return list_item_parts(node, context.item_index, state)

    @staticmethod
    def nested_context(part: ListItemPart) -> RenderContext:
        return RenderContext(list_state=part.child_state, is_last_child=True)

    def visit_break(self, node: Break, context: Any = None) -> Any:
        return self.empty()

    def visit_ignore(self, node: Ignore, context: Any = None) -> Any:
        return self.empty()

    def visit_unknown(self, node: Unknown, context: Any = None) -> Any:
        logger.debug("Unknown implementation: %r", node)
        return self.empty()
