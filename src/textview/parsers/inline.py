#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/parsers/inline.py
"""Shared helper for lowering inline markup into text runs.

Both parsers walk nested inline markup (``**a *b* c**``, ``<b>a <i>b</i></b>``).
:class:`InlineBuilder` keeps the style of the enclosing markup on a stack and
appends one :class:`~textview.model.nodes.TextNode` per text leaf, marked
with the combined style of everything around it.

"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

from textview.model.nodes import Paragraph, TextNode
from textview.model.styles import InlineTextStyle, LinkMark


class InlineBuilder:
    """Accumulate styled text runs into a paragraph.

    Parameters
    ----------
    paragraph : Paragraph or None
        Target paragraph; a new empty one is created when omitted

    """

    def __init__(self, paragraph: Optional[Paragraph] = None):
        self.paragraph = paragraph if paragraph is not None else Paragraph()
        self._styles: list[InlineTextStyle] = [InlineTextStyle()]

    @property
    def style(self) -> InlineTextStyle:
        """Style of the innermost open markup."""
        return self._styles[-1]

    @contextmanager
    def styled(
        self,
        bold: bool = False,
        italic: bool = False,
        strikethrough: bool = False,
        code: bool = False,
        link: Optional[LinkMark] = None,
    ) -> Generator[None, None, None]:
        """Apply extra style flags to text pushed inside the block.

        An inner link replaces an outer one.
        """
        inner = InlineTextStyle(bold=bold, italic=italic, strikethrough=strikethrough, code=code, link=link)
        self._styles.append(inner.combine(self.style))
        try:
            yield
        finally:
            self._styles.pop()

    def push_text(self, text: str) -> None:
        """Append ``text`` with the current style; empty text is skipped."""
        if not text:
            return
        if self.style.is_plain:
            self.paragraph.push_str(text)
        else:
            self.paragraph.push(TextNode.styled(text, self.style))

    def ends_with_whitespace(self) -> bool:
        children = self.paragraph.children
        return not children or not children[-1].text or children[-1].text[-1].isspace()

    def has_text(self) -> bool:
        return any(node.text.strip() for node in self.paragraph.children)

    def ends_with_newline(self) -> bool:
        children = self.paragraph.children
        return bool(children) and children[-1].text.endswith("\n")
