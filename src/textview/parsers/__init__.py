#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/parsers/__init__.py
"""Parsers lowering markdown and HTML into the block tree."""

from textview.parsers.base import BaseParser, SourceInput
from textview.parsers.html import HtmlParser, html_to_tree
from textview.parsers.inline import InlineBuilder
from textview.parsers.markdown import MarkdownParser, markdown_to_tree

__all__ = [
    "BaseParser",
    "HtmlParser",
    "InlineBuilder",
    "MarkdownParser",
    "SourceInput",
    "html_to_tree",
    "markdown_to_tree",
]
