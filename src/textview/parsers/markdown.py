#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/parsers/markdown.py
"""Markdown to block tree lowering.

This module parses markdown with mistune and lowers its token tree into the
block tree: block tokens map one-to-one onto node variants, inline tokens
become styled text runs of a :class:`~textview.model.nodes.Paragraph`.

"""

from __future__ import annotations

import logging
import re
from typing import Any

from textview.constants import DEPS_MARKDOWN
from textview.exceptions import ParsingError
from textview.model.nodes import (
    Blockquote,
    CodeBlock,
    Divider,
    Heading,
    Ignore,
    ImageNode,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Table,
    TableCell,
    TableColumnAlign,
    TableRow,
    Unknown,
)
from textview.model.styles import LinkMark
from textview.options.markdown import MarkdownParserOptions
from textview.parsers.base import BaseParser, SourceInput
from textview.parsers.inline import InlineBuilder
from textview.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

_BR_TAG = re.compile(r"^<br\s*/?>$", re.IGNORECASE)

_BREAK_TOKENS = frozenset({"softbreak", "linebreak"})


class MarkdownParser(BaseParser):
    r"""Lower markdown source into the block tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> root = parser.parse("# Hello\n\nThis is **bold**.")
        >>> [type(child).__name__ for child in root.children]
        ['Heading', 'Ignore', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: SourceInput) -> Root:
        """Parse markdown into an uncompacted block tree.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            Markdown source

        Returns
        -------
        Root
            Block tree with one child per top-level block token

        """
        import mistune

        content = self._load_text_content(input_data)

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        markdown = mistune.create_markdown(renderer=None, plugins=plugins)

        with debug_timer(logger, "Parsing (markdown)"):
            try:
                tokens, _state = markdown.parse(content)
            except Exception as e:
                raise ParsingError(f"Failed to parse markdown: {e}", parsing_stage="tokenize", original_error=e) from e

            if not isinstance(tokens, list):
                raise ParsingError("Unexpected token stream from mistune", parsing_stage="tokenize")

            return Root(children=self._process_tokens(tokens))

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node]:
        """Lower a single block token.

        Returns
        -------
        Node or list of Node
            A list only for image-only paragraphs and HTML blocks

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return self._process_block_quote(token)
        elif token_type == "list":
            return self._process_list(token)
        elif token_type in ("list_item", "task_list_item"):
            return self._process_list_item(token, tight=True)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return Divider()
        elif token_type == "blank_line":
            return Ignore()
        elif token_type == "block_html":
            return self._process_html_block(token)

        logger.debug("Unsupported markdown token: %s", token_type)
        return Unknown()

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        if not isinstance(level, int) or level < 1:
            level = 1

        builder = InlineBuilder()
        self._process_inline_tokens(token.get("children", []), builder)
        return Heading(level=level, children=builder.paragraph)

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph | list[Node]:
        """Lower a paragraph; a paragraph made only of images becomes image paragraphs."""
        children = token.get("children", [])

        images = self._image_only_children(children)
        if images:
            paragraphs: list[Node] = [Paragraph.from_image(self._image_node(image)) for image in images]
            return paragraphs[0] if len(paragraphs) == 1 else paragraphs

        builder = InlineBuilder()
        self._process_inline_tokens(children, builder)
        return builder.paragraph

    @staticmethod
    def _image_only_children(children: list[dict[str, Any]]) -> list[dict[str, Any]]:
        images = []
        for child in children:
            child_type = child.get("type")
            if child_type == "image":
                images.append(child)
            elif child_type in _BREAK_TOKENS or (child_type == "text" and not child.get("raw", "").strip()):
                continue
            else:
                return []
        return images

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        code = token.get("raw", "")
        if code.endswith("\n"):
            code = code[:-1]

        attrs = token.get("attrs") or {}
        info = (attrs.get("info") or "").strip()
        lang = info.split(maxsplit=1)[0] if info else None
        return CodeBlock(code=code, lang=lang)

    def _process_block_quote(self, token: dict[str, Any]) -> Blockquote:
        """Lower a quote into a single paragraph, one line per quoted block."""
        builder = InlineBuilder()
        self._collect_quoted_blocks(token.get("children", []), builder)
        return Blockquote(children=builder.paragraph)

    def _collect_quoted_blocks(self, tokens: list[dict[str, Any]], builder: InlineBuilder) -> None:
        for token in tokens:
            token_type = token.get("type", "")
            if token_type == "blank_line":
                continue

            if builder.paragraph.children:
                builder.push_text("\n")

            if token_type in ("paragraph", "block_text", "heading"):
                self._process_inline_tokens(token.get("children", []), builder)
            elif token_type == "block_code":
                with builder.styled(code=True):
                    builder.push_text(self._process_code_block(token).code)
            elif "children" in token:
                self._collect_quoted_blocks(token["children"], builder)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs") or {}
        ordered = bool(attrs.get("ordered", False))
        tight = bool(token.get("tight", attrs.get("tight", True)))

        items: list[Node] = []
        for child in token.get("children", []):
            if child.get("type") in ("list_item", "task_list_item"):
                items.append(self._process_list_item(child, tight))
            else:
                node = self._process_token(child)
                items.extend(n for n in (node if isinstance(node, list) else [node]) if not isinstance(n, Ignore))
        return List(children=items, ordered=ordered)

    def _process_list_item(self, token: dict[str, Any], tight: bool) -> ListItem:
        checked = None
        attrs = token.get("attrs") or {}
        if token.get("type") == "task_list_item" or "checked" in attrs:
            checked = bool(attrs.get("checked", False))

        children = [child for child in self._process_tokens(token.get("children", [])) if not isinstance(child, Ignore)]
        return ListItem(children=children, spread=not tight, checked=checked)

    def _process_table(self, token: dict[str, Any]) -> Table:
        rows: list[TableRow] = []
        aligns: list[TableColumnAlign] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = []
                for cell_token in section.get("children", []):
                    cell_attrs = cell_token.get("attrs") or {}
                    aligns.append(TableColumnAlign.from_source(cell_attrs.get("align")))
                    cells.append(self._process_table_cell(cell_token))
                rows.append(TableRow(children=cells))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(children=[self._process_table_cell(c) for c in row_token.get("children", [])]))

        return Table(children=rows, column_aligns=aligns)

    def _process_table_cell(self, token: dict[str, Any]) -> TableCell:
        builder = InlineBuilder()
        self._process_inline_tokens(token.get("children", []), builder)
        return TableCell(children=builder.paragraph)

    def _process_html_block(self, token: dict[str, Any]) -> Node | list[Node]:
        raw = token.get("raw", "")
        if not self.options.parse_html_blocks:
            return Unknown()

        from textview.parsers.html import HtmlParser

        root = HtmlParser().parse(raw)
        if not root.children:
            return Ignore()
        return root.children

    def _process_inline_tokens(self, tokens: list[dict[str, Any]], builder: InlineBuilder) -> None:
        for token in tokens:
            self._process_inline_token(token, builder)

    def _process_inline_token(self, token: dict[str, Any], builder: InlineBuilder) -> None:
        """Append the runs of one inline token to ``builder``."""
        token_type = token.get("type", "")
        children = token.get("children", [])

        if token_type == "text":
            builder.push_text(token.get("raw", ""))
        elif token_type == "strong":
            with builder.styled(bold=True):
                self._process_inline_tokens(children, builder)
        elif token_type == "emphasis":
            with builder.styled(italic=True):
                self._process_inline_tokens(children, builder)
        elif token_type == "strikethrough":
            with builder.styled(strikethrough=True):
                self._process_inline_tokens(children, builder)
        elif token_type == "codespan":
            with builder.styled(code=True):
                builder.push_text(token.get("raw", ""))
        elif token_type == "link":
            attrs = token.get("attrs") or {}
            with builder.styled(link=LinkMark(url=attrs.get("url", ""), title=attrs.get("title"))):
                self._process_inline_tokens(children, builder)
        elif token_type == "image":
            image = self._image_node(token)
            with builder.styled(link=LinkMark(url=image.url, title=image.title)):
                builder.push_text(image.alt or image.url)
        elif token_type == "linebreak":
            builder.push_text("\n")
        elif token_type == "softbreak":
            builder.push_text(" ")
        elif token_type == "inline_html":
            if _BR_TAG.match(token.get("raw", "").strip()):
                builder.push_text("\n")
        elif children:
            self._process_inline_tokens(children, builder)
        elif "raw" in token:
            builder.push_text(token["raw"])

    def _image_node(self, token: dict[str, Any]) -> ImageNode:
        attrs = token.get("attrs") or {}
        alt = "".join(self._plain_text(child) for child in token.get("children", []))
        return ImageNode(url=attrs.get("url", ""), title=attrs.get("title"), alt=alt or None)

    def _plain_text(self, token: dict[str, Any]) -> str:
        if "children" in token:
            return "".join(self._plain_text(child) for child in token["children"])
        return token.get("raw", "")


def markdown_to_tree(markdown_content: SourceInput, options: MarkdownParserOptions | None = None) -> Root:
    """Lower markdown into an uncompacted block tree in one step."""
    return MarkdownParser(options).parse(markdown_content)
