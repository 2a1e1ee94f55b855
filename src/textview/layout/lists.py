#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/layout/lists.py
"""List state threading and list item numbering.

List rendering is the one stateful walk in the model. A :class:`ListState`
is created when a list is entered, a copy with ``depth + 1`` is handed to
each nested list and it is dropped when the subtree returns. Nothing is
shared between sibling subtrees: states are frozen values passed down, and
ordinals are counted locally per list.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Optional

from textview.constants import UNORDERED_BULLETS
from textview.model.nodes import List, ListItem, Node, Paragraph


@dataclass(frozen=True)
class ListState:
    """State carried from a list into its items.

    Parameters
    ----------
    ordered : bool, default False
        Whether the enclosing list is numbered
    depth : int, default 0
        Nesting depth of the enclosing list
    todo : bool, default False
        Whether the enclosing item was a checklist item

    """

    ordered: bool = False
    depth: int = 0
    todo: bool = False

    def for_list(self, ordered: bool) -> "ListState":
        """State for the items of a list entered with this state."""
        return replace(self, ordered=ordered)

    def nested(self, checked: Optional[bool]) -> "ListState":
        """State handed to the children of an item with the given ``checked`` value."""
        return ListState(ordered=self.ordered, depth=self.depth + 1, todo=checked is not None)


def list_item_prefix(ix: int, ordered: bool, depth: int) -> str:
    """Marker shown before a list item.

    Ordered items are numbered from 1; unordered items cycle through the
    bullet glyphs by depth.
    """
    if ordered:
        return f"{ix + 1}. "
    return UNORDERED_BULLETS[depth % len(UNORDERED_BULLETS)]


def number_list_items(node: List, parent_state: Optional[ListState] = None) -> Iterator[tuple[Node, int, ListState]]:
    """Yield each child of a list with its ordinal and item state.

    Every child is yielded, list item or not, with the current ordinal.
    The ordinal only advances after a :class:`ListItem`, so a stray child
    between items does not consume a number.

    Parameters
    ----------
    node : List
        The list being rendered
    parent_state : ListState or None
        State of the enclosing item, None for a top-level list

    Yields
    ------
    tuple of (Node, int, ListState)
        Child, 0-based ordinal, state for rendering the child

    """
    state = (parent_state or ListState()).for_list(node.ordered)
    ix = 0
    for child in node.children:
        yield child, ix, state
        if isinstance(child, ListItem):
            ix += 1


class PrefixKind(Enum):
    """What is shown before an item's paragraph."""

    NONE = "none"
    MARKER = "marker"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class ListItemPart:
    """One renderable child of a list item.

    Parameters
    ----------
    node : Node
        A Paragraph (rendered inline after the prefix) or a nested List
        (rendered indented)
    prefix_kind : PrefixKind
        NONE for nested lists
    marker : str or None
        Ordinal or bullet text when ``prefix_kind`` is MARKER
    checked : bool or None
        Checkbox state when ``prefix_kind`` is CHECKBOX
    child_state : ListState
        State to render ``node`` with

    """

    node: Node
    prefix_kind: PrefixKind
    marker: Optional[str]
    checked: Optional[bool]
    child_state: ListState

    @property
    def is_nested_list(self) -> bool:
        return isinstance(self.node, List)


def list_item_parts(item: ListItem, ix: int, state: ListState) -> list[ListItemPart]:
    """Resolve the renderable children of a list item.

    A paragraph child gets a checkbox when the item is a checklist item,
    otherwise the ordinal/bullet marker unless the enclosing list is itself
    inside a checklist item. A nested list child is rendered with
    ``depth + 1``. Other children are skipped.

    Parameters
    ----------
    item : ListItem
        The item
    ix : int
        Its ordinal in the enclosing list
    state : ListState
        State of the enclosing list

    Returns
    -------
    list of ListItemPart
        Parts in child order

    """
    child_state = state.nested(item.checked)
    parts = []
    for child in item.children:
        if isinstance(child, Paragraph):
            if item.checked is not None:
                parts.append(ListItemPart(child, PrefixKind.CHECKBOX, None, item.checked, child_state))
            elif not state.todo:
                marker = list_item_prefix(ix, state.ordered, state.depth)
                parts.append(ListItemPart(child, PrefixKind.MARKER, marker, None, child_state))
            else:
                parts.append(ListItemPart(child, PrefixKind.NONE, None, None, child_state))
        elif isinstance(child, List):
            parts.append(ListItemPart(child, PrefixKind.NONE, None, None, child_state))
    return parts
