#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/options/markdown.py
"""Configuration options for markdown lowering."""

from __future__ import annotations

from dataclasses import dataclass, field

from textview.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for markdown parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Enable GFM pipe tables
    parse_strikethrough : bool, default True
        Enable ``~~strikethrough~~``
    parse_task_lists : bool, default True
        Enable ``- [x]`` checklist items
    parse_html_blocks : bool, default True
        Lower raw HTML blocks through the HTML parser instead of marking
        them unknown

    """

    parse_tables: bool = field(default=True, metadata={"help": "Parse GFM tables"})
    parse_strikethrough: bool = field(default=True, metadata={"help": "Parse ~~strikethrough~~ spans"})
    parse_task_lists: bool = field(default=True, metadata={"help": "Parse task list checkboxes"})
    parse_html_blocks: bool = field(default=True, metadata={"help": "Lower raw HTML blocks with the HTML parser"})
