#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/model/transforms.py
"""Structural reductions over the block tree."""

from __future__ import annotations

import copy

from textview.model.nodes import Ignore, Node, Root


def compact(node: Node) -> Node:
    """Collapse roots that wrap a single meaningful child.

    Every child of a :class:`Root` is compacted first and :class:`Ignore`
    children are dropped. If exactly one child remains, its compaction is
    returned in place of the root; otherwise a new ``Root`` with the
    filtered children is returned. Any other node is returned as a shallow
    copy. The input is never modified and ``compact(compact(n)) ==
    compact(n)``.

    Parameters
    ----------
    node : Node
        Tree to reduce

    Returns
    -------
    Node
        The reduced tree

    Examples
    --------
        >>> compact(Root(children=[Ignore(), Divider()]))
        Divider()

    """
    if not isinstance(node, Root):
        return copy.copy(node)

    children = [child for child in (compact(child) for child in node.children) if not isinstance(child, Ignore)]
    if len(children) == 1:
        return compact(children[0])
    return Root(children=children)
