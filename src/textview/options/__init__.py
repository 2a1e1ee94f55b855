#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for textview parsers and renderers."""

from textview.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from textview.options.html import HtmlParserOptions
from textview.options.markdown import MarkdownParserOptions
from textview.options.plaintext import PlainTextOptions
from textview.options.style import TextViewStyle
from textview.options.terminal import TerminalRendererOptions, TerminalTheme

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlParserOptions",
    "MarkdownParserOptions",
    "PlainTextOptions",
    "TerminalRendererOptions",
    "TerminalTheme",
    "TextViewStyle",
]
