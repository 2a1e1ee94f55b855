#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/layout/paragraph.py
"""Paragraph composition and link hit-testing.

:func:`compose` reduces a paragraph's text runs to the shape a text painter
needs: one flat string, a sorted non-overlapping list of highlights and a
separate list of link ranges. Links are kept apart from the highlights so a
click at some offset can be mapped back to a URL without looking at visual
styles.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from textview.model.nodes import Paragraph, TextNode
from textview.model.styles import LinkMark, ResolvedStyle, TextRange, merge_ranges, normalize_ranges

logger = logging.getLogger(__name__)


@dataclass
class ClickEvent:
    """Pointer click delivered to a paragraph and then to its ancestors.

    A handler that consumes the click calls :meth:`stop_propagation`; the
    host must not deliver the event to enclosing handlers afterwards (for
    example the checkbox toggle of a checklist item whose label holds the
    link).
    """

    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass
class ComposedParagraph:
    """Flat text of a paragraph with its merged highlights and links.

    Parameters
    ----------
    text : str
        Concatenation of all runs
    highlights : list of (TextRange, ResolvedStyle)
        Sorted, non-overlapping highlight segments
    links : list of (TextRange, LinkMark)
        Link ranges in run order; the index into this list is what a hit
        test reports

    """

    text: str = ""
    highlights: list[tuple[TextRange, ResolvedStyle]] = field(default_factory=list)
    links: list[tuple[TextRange, LinkMark]] = field(default_factory=list)

    def link_ranges(self) -> list[TextRange]:
        """Ranges to register with the hit tester, index-aligned with ``links``."""
        return [rng for rng, _ in self.links]

    def link_index_at(self, offset: int) -> Optional[int]:
        """Index of the first link range containing ``offset``."""
        for ix, (rng, _) in enumerate(self.links):
            if rng.contains(offset):
                return ix
        return None

    def link_at(self, offset: int) -> Optional[LinkMark]:
        ix = self.link_index_at(offset)
        return self.links[ix][1] if ix is not None else None

    def handle_click(self, offset: int, event: ClickEvent, open_url: Callable[[str], object]) -> bool:
        """Activate the link under ``offset``, if any.

        Parameters
        ----------
        offset : int
            Offset into :attr:`text` that was hit
        event : ClickEvent
            The click; its propagation is stopped when a link is activated
        open_url : callable
            Receives the link URL

        Returns
        -------
        bool
            True when a link was activated

        """
        ix = self.link_index_at(offset)
        if ix is None:
            return False

        link = self.links[ix][1]
        event.stop_propagation()
        logger.debug("Opening link %s from range %d", link.url, ix)
        open_url(link.url)
        return True


def compose(children: Iterable[TextNode]) -> ComposedParagraph:
    """Concatenate text runs into one string with global style ranges.

    Each run's local marks are shifted by the run's offset, turned into
    :class:`ResolvedStyle` highlights and folded into the accumulated list
    one run at a time with :func:`merge_ranges`. Marks that carry a link
    also add ``(range, link)`` to the link list.

    Parameters
    ----------
    children : iterable of TextNode
        Runs in reading order

    Returns
    -------
    ComposedParagraph
        ``len(text)`` equals the sum of the run lengths and every range
        lies within ``[0, len(text)]``

    """
    parts: list[str] = []
    highlights: list[tuple[TextRange, ResolvedStyle]] = []
    links: list[tuple[TextRange, LinkMark]] = []
    offset = 0

    for text_node in children:
        parts.append(text_node.text)

        node_highlights = []
        for rng, style in text_node.marks:
            inner_range = rng.shift(offset)
            node_highlights.append((inner_range, style.resolve()))
            if style.link is not None:
                links.append((inner_range, style.link))

        highlights = merge_ranges(highlights, normalize_ranges(node_highlights))
        offset += len(text_node.text)

    return ComposedParagraph(text="".join(parts), highlights=highlights, links=links)


def compose_paragraph(paragraph: Paragraph) -> ComposedParagraph:
    """Compose a paragraph's runs; an image paragraph composes to empty text."""
    if paragraph.is_image():
        return ComposedParagraph()
    return compose(paragraph.children)
