#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/renderers/__init__.py
"""Renderers walking the block tree."""

from textview.renderers.base import BaseRenderer, RenderContext, block_margin, heading_style
from textview.renderers.plaintext import PlainTextRenderer
from textview.renderers.terminal import TerminalRenderer, Theme

__all__ = [
    "BaseRenderer",
    "PlainTextRenderer",
    "RenderContext",
    "TerminalRenderer",
    "Theme",
    "block_margin",
    "heading_style",
]
