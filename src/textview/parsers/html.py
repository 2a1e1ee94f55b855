#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/parsers/html.py
"""HTML to block tree lowering.

This module parses HTML fragments with BeautifulSoup and lowers the element
tree into the block tree. Block-level elements map onto node variants;
inline elements (``<b>``, ``<em>``, ``<a>``, ``<code>`` ...) become styled
text runs. Unknown block containers contribute their children, unknown
inline elements contribute their text.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from textview.constants import DEPS_HTML, HTML_BLOCK_TAGS, HTML_HEADING_TAGS, HTML_SKIPPED_TAGS
from textview.exceptions import ParsingError
from textview.model.nodes import (
    Blockquote,
    Break,
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
    TextNode,
)
from textview.model.styles import LinkMark, TextRange
from textview.options.html import HtmlParserOptions
from textview.parsers.base import BaseParser, SourceInput
from textview.parsers.inline import InlineBuilder
from textview.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_EDGE_WHITESPACE = " \n"
_STYLE_SIZE = re.compile(r"(?:^|;)\s*(width|height)\s*:\s*([^;]+)", re.IGNORECASE)
_TEXT_ALIGN = re.compile(r"text-align\s*:\s*(left|center|right)", re.IGNORECASE)
_LANG_CLASS = re.compile(r"^(?:language|lang)-(.+)$")

_BOLD_TAGS = frozenset({"b", "strong"})
_ITALIC_TAGS = frozenset({"i", "em", "cite", "var"})
_STRIKE_TAGS = frozenset({"s", "del", "strike"})
_CODE_TAGS = frozenset({"code", "kbd", "samp", "tt"})


class HtmlParser(BaseParser):
    """Lower HTML source into the block tree.

    Parameters
    ----------
    options : HtmlParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> root = HtmlParser().parse("<p>Hello <b>world</b></p><hr>")
        >>> [type(child).__name__ for child in root.children]
        ['Paragraph', 'Divider']

    """

    def __init__(self, options: HtmlParserOptions | None = None):
        """Initialize the HTML parser with options."""
        BaseParser._validate_options_type(options, HtmlParserOptions, "html")
        options = options or HtmlParserOptions()
        super().__init__(options)
        self.options: HtmlParserOptions = options

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, input_data: SourceInput) -> Root:
        """Parse HTML into an uncompacted block tree.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            HTML document or fragment

        Returns
        -------
        Root
            Block tree of the document body

        """
        from bs4 import BeautifulSoup

        content = self._load_text_content(input_data)

        with debug_timer(logger, "Parsing (html)"):
            try:
                soup = BeautifulSoup(content, "html.parser")
            except Exception as e:
                raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="tokenize", original_error=e) from e

            return Root(children=self._process_block_container(soup))

    # ------------------------------------------------------------------
    # Element classification
    # ------------------------------------------------------------------

    @staticmethod
    def _tag_name(node: Any) -> Optional[str]:
        name = getattr(node, "name", None)
        return name.lower() if isinstance(name, str) else None

    def _is_block_element(self, node: Any) -> bool:
        name = self._tag_name(node)
        return name is not None and (name in HTML_BLOCK_TAGS or name == "img" and self._is_standalone_image(node))

    @staticmethod
    def _is_standalone_image(node: Any) -> bool:
        """An ``<img>`` with no inline siblings other than images and whitespace."""
        from bs4.element import NavigableString

        parent = node.parent
        if parent is None:
            return False
        for sibling in parent.children:
            if isinstance(sibling, NavigableString):
                if str(sibling).strip():
                    return False
            elif getattr(sibling, "name", None) != "img" and getattr(sibling, "name", None) not in HTML_BLOCK_TAGS:
                return False
        return True

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _process_block_container(self, node: Any) -> list[Node]:
        """Lower the children of a container, wrapping inline runs in paragraphs."""
        from bs4.element import Comment

        children: list[Node] = []
        builder = InlineBuilder()

        for child in node.children:
            if isinstance(child, Comment):
                if not self.options.strip_comments:
                    children.append(Ignore())
            elif self._tag_name(child) == "br" and not builder.has_text():
                children.append(Break())
            elif self._is_block_element(child):
                self._flush(builder, children)
                builder = InlineBuilder()
                children.extend(self._process_block(child))
            else:
                self._process_inline(child, builder)

        self._flush(builder, children)
        return children

    def _flush(self, builder: InlineBuilder, children: list[Node]) -> None:
        if builder.has_text():
            children.append(self._finish_paragraph(builder))

    def _finish_paragraph(self, builder: InlineBuilder) -> Paragraph:
        paragraph = builder.paragraph
        if self.options.collapse_whitespace:
            _trim_paragraph(paragraph)
        return paragraph

    def _push_newline(self, builder: InlineBuilder) -> None:
        if self.options.collapse_whitespace:
            _trim_trailing(builder.paragraph)
        builder.push_text("\n")

    def _process_block(self, node: Any) -> list[Node]:
        """Lower one block-level element to zero or more nodes."""
        name = self._tag_name(node)

        if name in HTML_SKIPPED_TAGS:
            return []
        if name in HTML_HEADING_TAGS:
            return [self._process_heading(node)]
        if name == "p":
            return self._process_paragraph(node)
        if name in ("ul", "ol"):
            return [self._process_list(node)]
        if name == "li":
            return [self._process_list_item(node)]
        if name == "pre":
            return [self._process_code_block(node)]
        if name == "blockquote":
            return [self._process_blockquote(node)]
        if name == "table":
            return [self._process_table(node)]
        if name == "hr":
            return [Divider()]
        if name == "img":
            return [Paragraph.from_image(self._image_node(node))]

        return self._process_block_container(node)

    def _process_heading(self, node: Any) -> Heading:
        builder = InlineBuilder()
        self._process_inline_children(node, builder)
        return Heading(level=int(node.name[1]), children=self._finish_paragraph(builder))

    def _process_paragraph(self, node: Any) -> list[Node]:
        if any(self._tag_name(child) in HTML_BLOCK_TAGS for child in node.children):
            return self._process_block_container(node)

        images = [child for child in node.children if self._tag_name(child) == "img"]
        if images and all(self._is_standalone_image(image) for image in images):
            return [Paragraph.from_image(self._image_node(image)) for image in images]

        builder = InlineBuilder()
        self._process_inline_children(node, builder)
        if not builder.has_text():
            return [Ignore()]
        return [self._finish_paragraph(builder)]

    def _process_list(self, node: Any) -> List:
        """Lower ``<ul>``/``<ol>``; non-``<li>`` children are kept for the renderer to skip."""
        items: list[Node] = []
        for child in node.children:
            if self._tag_name(child) == "li":
                items.append(self._process_list_item(child))
            elif self._tag_name(child) is not None:
                items.extend(self._process_block(child))
        return List(children=items, ordered=node.name.lower() == "ol")

    def _process_list_item(self, node: Any) -> ListItem:
        checked: Optional[bool] = None
        checkbox = node.find("input", attrs={"type": "checkbox"})
        if checkbox is not None and checkbox.find_parent("li") is node:
            checked = checkbox.has_attr("checked")

        children: list[Node] = []
        builder = InlineBuilder()
        for child in node.children:
            if self._is_block_element(child):
                self._flush(builder, children)
                builder = InlineBuilder()
                children.extend(n for n in self._process_block(child) if not isinstance(n, Ignore))
            else:
                self._process_inline(child, builder)
        self._flush(builder, children)

        spread = any(self._tag_name(child) == "p" for child in node.children)
        return ListItem(children=children, spread=spread, checked=checked)

    def _process_code_block(self, node: Any) -> CodeBlock:
        code = node.get_text()
        if code.startswith("\n"):
            code = code[1:]
        if code.endswith("\n"):
            code = code[:-1]

        lang = None
        code_tag = node.find("code")
        for candidate in (code_tag, node):
            if candidate is None:
                continue
            for css_class in candidate.get("class", []):
                match = _LANG_CLASS.match(css_class)
                if match:
                    lang = match.group(1)
                    break
            if lang:
                break

        return CodeBlock(code=code, lang=lang)

    def _process_blockquote(self, node: Any) -> Blockquote:
        """Lower a quote into one paragraph, one line per quoted block."""
        builder = InlineBuilder()
        self._collect_quoted(node, builder)
        return Blockquote(children=self._finish_paragraph(builder))

    def _collect_quoted(self, node: Any, builder: InlineBuilder) -> None:
        for child in node.children:
            if self._is_block_element(child):
                if self._tag_name(child) in HTML_SKIPPED_TAGS:
                    continue
                if builder.has_text() and not builder.ends_with_newline():
                    self._push_newline(builder)
                if self._tag_name(child) == "pre":
                    with builder.styled(code=True):
                        builder.push_text(self._process_code_block(child).code)
                else:
                    self._collect_quoted(child, builder)
            else:
                self._process_inline(child, builder)

    def _process_table(self, node: Any) -> Table:
        rows: list[TableRow] = []
        aligns: list[TableColumnAlign] = []

        for tr in self._table_rows(node):
            cells = []
            for cell in tr.find_all(["th", "td"], recursive=False):
                if not rows:
                    aligns.append(TableColumnAlign.from_source(self._get_alignment(cell)))
                builder = InlineBuilder()
                self._process_inline_children(cell, builder)
                cells.append(TableCell(children=self._finish_paragraph(builder), width=cell.get("width")))
            rows.append(TableRow(children=cells))

        return Table(children=rows, column_aligns=aligns)

    def _table_rows(self, node: Any) -> list[Any]:
        rows = []
        for child in node.children:
            name = self._tag_name(child)
            if name == "tr":
                rows.append(child)
            elif name in ("thead", "tbody", "tfoot"):
                rows.extend(child.find_all("tr", recursive=False))
        return rows

    @staticmethod
    def _get_alignment(cell: Any) -> Optional[str]:
        align = (cell.get("align") or "").lower()
        if align in ("left", "center", "right"):
            return align

        match = _TEXT_ALIGN.search(cell.get("style") or "")
        if match:
            return match.group(1).lower()
        return None

    def _image_node(self, node: Any) -> ImageNode:
        width = node.get("width")
        height = node.get("height")
        for prop, value in _STYLE_SIZE.findall(node.get("style") or ""):
            if prop.lower() == "width":
                width = value.strip()
            else:
                height = value.strip()

        return ImageNode(
            url=node.get("src", ""),
            title=node.get("title"),
            alt=node.get("alt"),
            width=_normalize_length(width),
            height=_normalize_length(height),
        )

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def _process_inline_children(self, node: Any, builder: InlineBuilder) -> None:
        for child in node.children:
            self._process_inline(child, builder)

    def _process_inline(self, node: Any, builder: InlineBuilder) -> None:
        """Append the runs of one inline node (or text) to ``builder``."""
        from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction

        if isinstance(node, (Comment, Declaration, Doctype, ProcessingInstruction)):
            return
        if isinstance(node, NavigableString):
            text = str(node)
            if self.options.collapse_whitespace:
                text = _WHITESPACE.sub(" ", text)
                if builder.ends_with_whitespace():
                    text = text.lstrip(" ")
            builder.push_text(text)
            return

        name = self._tag_name(node)
        if name is None or name in HTML_SKIPPED_TAGS or name == "input":
            return

        if name == "br":
            self._push_newline(builder)
        elif name == "img":
            image = self._image_node(node)
            with builder.styled(link=LinkMark(url=image.url, title=image.title)):
                builder.push_text(image.alt or image.url)
        elif name in _BOLD_TAGS:
            with builder.styled(bold=True):
                self._process_inline_children(node, builder)
        elif name in _ITALIC_TAGS:
            with builder.styled(italic=True):
                self._process_inline_children(node, builder)
        elif name in _STRIKE_TAGS:
            with builder.styled(strikethrough=True):
                self._process_inline_children(node, builder)
        elif name in _CODE_TAGS:
            with builder.styled(code=True):
                builder.push_text(node.get_text())
        elif name == "a" and node.get("href"):
            with builder.styled(link=LinkMark(url=node["href"], title=node.get("title"))):
                self._process_inline_children(node, builder)
        elif name in HTML_BLOCK_TAGS:
            # block element nested in inline context: keep its text on a new line
            if builder.has_text() and not builder.ends_with_newline():
                self._push_newline(builder)
            self._process_inline_children(node, builder)
        else:
            self._process_inline_children(node, builder)


def _normalize_length(value: Optional[str]) -> Optional[str]:
    """Bare numbers are pixel counts; other lengths are kept as written."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if value.isdigit():
        return f"{value}px"
    return value


def _trim_paragraph(paragraph: Paragraph) -> None:
    """Strip spaces and line breaks at the start of the first run and the end of the last run."""
    children = paragraph.children
    while children and not children[0].text.strip(_EDGE_WHITESPACE):
        children.pop(0)
    if children:
        first = children[0]
        lead = len(first.text) - len(first.text.lstrip(_EDGE_WHITESPACE))
        if lead:
            children[0] = _slice_run(first, lead, len(first.text))
    _trim_trailing(paragraph, _EDGE_WHITESPACE)


def _trim_trailing(paragraph: Paragraph, chars: str = " ") -> None:
    children = paragraph.children
    while children and not children[-1].text.strip(chars):
        children.pop()
    if children:
        last = children[-1]
        trail = len(last.text) - len(last.text.rstrip(chars))
        if trail:
            children[-1] = _slice_run(last, 0, len(last.text) - trail)


def _slice_run(node: TextNode, start: int, end: int) -> TextNode:
    """Cut ``node`` to ``[start, end)``, clipping its marks."""
    marks = []
    for rng, style in node.marks:
        lo, hi = max(rng.start, start), min(rng.end, end)
        if lo < hi:
            marks.append((TextRange(lo - start, hi - start), style))
    return TextNode(text=node.text[start:end], marks=marks)


def html_to_tree(html_content: SourceInput, options: HtmlParserOptions | None = None) -> Root:
    """Lower HTML into an uncompacted block tree in one step."""
    return HtmlParser(options).parse(html_content)
