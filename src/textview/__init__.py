"""textview - styled text rendering model for markdown and HTML.

textview lowers markdown (mistune) and HTML (BeautifulSoup) into a small
block tree, and resolves each paragraph's nested inline markup into one
flat string with non-overlapping style ranges and clickable link ranges.
List numbering, checklist prefixes and table column widths are computed
by the layout layer; renderers for plain text and rich terminals paint
the result.

Examples
--------
Parse and inspect a paragraph:

    >>> from textview import compose, parse_markdown
    >>> paragraph = parse_markdown("Read **the docs** at [example](https://example.com).")
    >>> composed = compose(paragraph.children)
    >>> composed.text
    'Read the docs at example.'
    >>> [(r.start, r.end) for r, _ in composed.links]
    [(17, 24)]

Render a view:

    >>> from textview import TextView
    >>> print(TextView.markdown("todo", "- [x] done\\n- [ ] next").render_to_string())
    ☑ done
    ☐ next

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import logging

__version__ = "0.1.0"

from textview.api import TextView, parse_html, parse_markdown, render_to_string
from textview.exceptions import (
    DependencyError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    TextViewError,
    ValidationError,
)
from textview.layout import ClickEvent, ComposedParagraph, ListState, TableLayout, compose, compose_paragraph
from textview.logging_utils import configure_logging, reset_logging
from textview.model import (
    InlineTextStyle,
    Node,
    NodeVisitor,
    Paragraph,
    ResolvedStyle,
    Root,
    TextNode,
    TextRange,
    compact,
    merge_ranges,
)
from textview.options import (
    HtmlParserOptions,
    MarkdownParserOptions,
    PlainTextOptions,
    TerminalRendererOptions,
    TerminalTheme,
    TextViewStyle,
)
from textview.renderers import PlainTextRenderer, TerminalRenderer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "ClickEvent",
    "ComposedParagraph",
    "DependencyError",
    "HtmlParserOptions",
    "InlineTextStyle",
    "InvalidOptionsError",
    "ListState",
    "MarkdownParserOptions",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "ParsingError",
    "PlainTextOptions",
    "PlainTextRenderer",
    "RenderingError",
    "ResolvedStyle",
    "Root",
    "TableLayout",
    "TerminalRendererOptions",
    "TerminalRenderer",
    "TerminalTheme",
    "TextNode",
    "TextRange",
    "TextView",
    "TextViewError",
    "TextViewStyle",
    "ValidationError",
    "compact",
    "compose",
    "compose_paragraph",
    "configure_logging",
    "merge_ranges",
    "parse_html",
    "parse_markdown",
    "render_to_string",
    "reset_logging",
]
