#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/options/html.py
"""Configuration options for HTML lowering."""

from __future__ import annotations

from dataclasses import dataclass, field

from textview.options.base import BaseParserOptions


@dataclass(frozen=True)
class HtmlParserOptions(BaseParserOptions):
    """Configuration options for HTML parsing.

    Parameters
    ----------
    collapse_whitespace : bool, default True
        Collapse runs of whitespace in text outside ``<pre>`` the way a
        browser does
    strip_comments : bool, default True
        Drop HTML comments; when False they lower to Ignore placeholders

    """

    collapse_whitespace: bool = field(default=True, metadata={"help": "Collapse whitespace outside <pre>"})
    strip_comments: bool = field(default=True, metadata={"help": "Drop HTML comments"})
