#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/api.py
"""Public entry points: parse functions and the :class:`TextView` facade.

A :class:`TextView` couples an identifier, a source string and its syntax
with block spacing. The parsed and compacted tree is cached per source
string; replacing the source returns a new view and the tree is rebuilt
wholesale on the next access.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Literal, Optional, Union

from textview.exceptions import InvalidOptionsError
from textview.model.nodes import Node
from textview.model.transforms import compact
from textview.options.html import HtmlParserOptions
from textview.options.markdown import MarkdownParserOptions
from textview.options.plaintext import PlainTextOptions
from textview.options.style import TextViewStyle
from textview.options.terminal import TerminalRendererOptions
from textview.parsers.base import SourceInput
from textview.parsers.html import HtmlParser
from textview.parsers.markdown import MarkdownParser
from textview.renderers.plaintext import PlainTextRenderer
from textview.renderers.terminal import TerminalRenderer

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)

SourceSyntax = Literal["markdown", "html"]


def parse_markdown(raw: SourceInput, options: MarkdownParserOptions | None = None) -> Node:
    """Parse markdown and return the compacted block tree.

    Parameters
    ----------
    raw : str, bytes, Path or file-like
        Markdown source
    options : MarkdownParserOptions, optional
        Parser options

    Returns
    -------
    Node
        A Root, or its single remaining child after compaction

    Examples
    --------
        >>> type(parse_markdown("Hello *world*")).__name__
        'Paragraph'

    """
    return compact(MarkdownParser(options).parse(raw))


def parse_html(raw: SourceInput, options: HtmlParserOptions | None = None) -> Node:
    """Parse HTML and return the compacted block tree."""
    return compact(HtmlParser(options).parse(raw))


def render_to_string(node: Node, options: PlainTextOptions | None = None) -> str:
    """Render a block tree to plain text."""
    return PlainTextRenderer(options).render_to_string(node)


@dataclass
class TextView:
    """A markdown or HTML text view.

    Parameters
    ----------
    id : str
        Identifier of the view
    raw : str
        Source text
    syntax : {"markdown", "html"}
        Syntax of ``raw``
    view_style : TextViewStyle
        Block spacing
    parser_options : MarkdownParserOptions or HtmlParserOptions, optional
        Options for the parser matching ``syntax``

    Examples
    --------
        >>> view = TextView.markdown("intro", "# Title\\n\\nBody")
        >>> view.render_to_string()
        'Title\\n\\nBody'
        >>> view.inline().render_to_string()
        'Title\\nBody'

    """

    id: str
    raw: str
    syntax: SourceSyntax = "markdown"
    view_style: TextViewStyle = field(default_factory=TextViewStyle)
    parser_options: Optional[Union[MarkdownParserOptions, HtmlParserOptions]] = None
    _cached_source: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _cached_document: Optional[Node] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the parser options against the syntax."""
        if self.syntax not in ("markdown", "html"):
            raise ValueError(f"syntax must be 'markdown' or 'html', got {self.syntax!r}")
        expected = MarkdownParserOptions if self.syntax == "markdown" else HtmlParserOptions
        if self.parser_options is not None and not isinstance(self.parser_options, expected):
            raise InvalidOptionsError(
                component_name=self.syntax,
                expected_type=expected,
                received_type=type(self.parser_options),
            )

    @classmethod
    def markdown(cls, id: str, raw: str, options: MarkdownParserOptions | None = None) -> "TextView":
        return cls(id=id, raw=raw, syntax="markdown", parser_options=options)

    @classmethod
    def html(cls, id: str, raw: str, options: HtmlParserOptions | None = None) -> "TextView":
        return cls(id=id, raw=raw, syntax="html", parser_options=options)

    def text(self, raw: str) -> "TextView":
        """View of the same kind over new source text."""
        return replace(self, raw=raw)

    def style(self, style: TextViewStyle) -> "TextView":
        return replace(self, view_style=style)

    def inline(self) -> "TextView":
        """View without paragraph gaps, for text embedded in a line of other content."""
        return self.style(TextViewStyle.inline())

    def document(self) -> Node:
        """Parsed and compacted tree of the current source."""
        if self._cached_document is None or self._cached_source != self.raw:
            logger.debug("Parsing %s view %r", self.syntax, self.id)
            if self.syntax == "markdown":
                document = parse_markdown(self.raw, self.parser_options)  # type: ignore[arg-type]
            else:
                document = parse_html(self.raw, self.parser_options)  # type: ignore[arg-type]
            self._cached_source = self.raw
            self._cached_document = document
        return self._cached_document

    def render_to_string(self, options: PlainTextOptions | None = None) -> str:
        """Render the view as plain text with the view's block spacing."""
        options = (options or PlainTextOptions()).create_updated(style=self.view_style)
        return PlainTextRenderer(options).render_to_string(self.document())

    def render(self, console: Optional["Console"] = None, options: TerminalRendererOptions | None = None) -> None:
        """Print the view to a terminal with rich."""
        options = (options or TerminalRendererOptions()).create_updated(style=self.view_style)
        TerminalRenderer(options).render(self.document(), console)
