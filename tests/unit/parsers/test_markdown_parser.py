#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for lowering markdown into the block tree."""
from pathlib import Path

import pytest

from textview.api import parse_markdown
from textview.exceptions import InvalidOptionsError, ValidationError
from textview.model import (
    Blockquote,
    CodeBlock,
    Divider,
    Heading,
    Ignore,
    ImageNode,
    InlineTextStyle,
    LinkMark,
    List,
    ListItem,
    Paragraph,
    Root,
    Table,
    TableColumnAlign,
    TextRange,
    Unknown,
)
from textview.options import HtmlParserOptions, MarkdownParserOptions
from textview.parsers.markdown import MarkdownParser, markdown_to_tree


def blocks(markdown: str, options: MarkdownParserOptions | None = None) -> list:
    """Top-level blocks without blank-line placeholders."""
    root = MarkdownParser(options).parse(markdown)
    assert isinstance(root, Root)
    return [child for child in root.children if not isinstance(child, Ignore)]


def runs(paragraph: Paragraph) -> list[tuple[str, InlineTextStyle]]:
    """(text, style) per run, for runs marked with a single whole-run style."""
    result = []
    for node in paragraph.children:
        styles = [style for rng, style in node.marks if rng == TextRange(0, len(node.text))]
        result.append((node.text, styles[0] if styles else InlineTextStyle()))
    return result


@pytest.mark.unit
class TestMarkdownBlocks:
    """Test block token lowering."""

    def test_heading(self) -> None:
        [heading] = blocks("## Section")
        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert heading.children.plain_text() == "Section"

    def test_blank_lines_become_ignore(self) -> None:
        root = MarkdownParser().parse("# Title\n\nBody")
        assert [type(child) for child in root.children] == [Heading, Ignore, Paragraph]

    def test_fenced_code_block(self) -> None:
        [code] = blocks("```python extra\nprint(1)\n```")
        assert code == CodeBlock(code="print(1)", lang="python")

    def test_code_block_without_info(self) -> None:
        [code] = blocks("```\nx = 1\ny = 2\n```")
        assert code == CodeBlock(code="x = 1\ny = 2", lang=None)

    def test_thematic_break(self) -> None:
        assert blocks("a\n\n---\n\nb")[1] == Divider()

    def test_blockquote_joins_paragraphs_with_newline(self) -> None:
        [quote] = blocks("> first\n>\n> second")
        assert isinstance(quote, Blockquote)
        assert quote.children.plain_text() == "first\nsecond"

    def test_unordered_list(self) -> None:
        [node] = blocks("- one\n- two")
        assert isinstance(node, List)
        assert not node.ordered
        assert [item.children[0].plain_text() for item in node.children] == ["one", "two"]
        assert all(item.checked is None and not item.spread for item in node.children)

    def test_ordered_list(self) -> None:
        [node] = blocks("1. one\n2. two")
        assert node.ordered

    def test_loose_list_items_are_spread(self) -> None:
        [node] = blocks("- one\n\n- two")
        assert all(item.spread for item in node.children)

    def test_task_list(self) -> None:
        [node] = blocks("- [x] done\n- [ ] todo\n- plain")
        assert [item.checked for item in node.children] == [True, False, None]
        assert node.children[0].children[0].plain_text() == "done"

    def test_task_list_disabled(self) -> None:
        [node] = blocks("- [x] done", MarkdownParserOptions(parse_task_lists=False))
        assert node.children[0].checked is None

    def test_nested_list(self) -> None:
        [node] = blocks("- outer\n  - inner")
        outer = node.children[0]
        assert isinstance(outer, ListItem)
        assert isinstance(outer.children[1], List)
        assert outer.children[1].children[0].children[0].plain_text() == "inner"

    def test_table_with_alignment(self) -> None:
        [table] = blocks("| a | b | c |\n|:--|:-:|--:|\n| 1 | 2 | 3 |")
        assert isinstance(table, Table)
        assert table.column_aligns == [TableColumnAlign.LEFT, TableColumnAlign.CENTER, TableColumnAlign.RIGHT]
        assert [[cell.children.plain_text() for cell in row.children] for row in table.children] == [
            ["a", "b", "c"],
            ["1", "2", "3"],
        ]

    def test_table_without_alignment_is_left(self) -> None:
        [table] = blocks("| a |\n|---|\n| 1 |")
        assert table.column_aligns == [TableColumnAlign.LEFT]

    def test_image_only_paragraph(self) -> None:
        [paragraph] = blocks('![a cat](cat.png "Cat")')
        assert paragraph.is_image()
        assert paragraph.image == ImageNode(url="cat.png", title="Cat", alt="a cat")

    def test_paragraph_of_several_images(self) -> None:
        nodes = blocks("![a](a.png) ![b](b.png)")
        assert [node.image.url for node in nodes] == ["a.png", "b.png"]

    def test_html_block_lowered_through_html_parser(self) -> None:
        [node] = blocks("<div><p>inside</p></div>\n")
        assert isinstance(node, Paragraph)
        assert node.plain_text() == "inside"

    def test_html_block_disabled(self) -> None:
        [node] = blocks("<div><p>inside</p></div>\n", MarkdownParserOptions(parse_html_blocks=False))
        assert node == Unknown()


@pytest.mark.unit
class TestMarkdownInline:
    """Test inline token lowering."""

    def test_nested_emphasis(self) -> None:
        [paragraph] = blocks("a **b *c* d** e")
        assert runs(paragraph) == [
            ("a ", InlineTextStyle()),
            ("b ", InlineTextStyle(bold=True)),
            ("c", InlineTextStyle(bold=True, italic=True)),
            (" d", InlineTextStyle(bold=True)),
            (" e", InlineTextStyle()),
        ]

    def test_code_and_strikethrough(self) -> None:
        [paragraph] = blocks("`x` and ~~gone~~")
        assert runs(paragraph)[0] == ("x", InlineTextStyle(code=True))
        assert runs(paragraph)[-1] == ("gone", InlineTextStyle(strikethrough=True))

    def test_link(self) -> None:
        [paragraph] = blocks('[**docs**](https://example.com "Docs")')
        [(text, style)] = runs(paragraph)
        assert text == "docs"
        assert style == InlineTextStyle(bold=True, link=LinkMark(url="https://example.com", title="Docs"))

    def test_softbreak_and_linebreak(self) -> None:
        [paragraph] = blocks("one\ntwo  \nthree")
        assert paragraph.plain_text() == "one two\nthree"

    def test_image_mixed_with_text_becomes_linked_alt(self) -> None:
        [paragraph] = blocks("see ![diagram](d.png) here")
        assert paragraph.plain_text() == "see diagram here"
        assert runs(paragraph)[1] == ("diagram", InlineTextStyle(link=LinkMark(url="d.png")))

    def test_inline_br_tag(self) -> None:
        [paragraph] = blocks("one<br>two")
        assert paragraph.plain_text() == "one\ntwo"

    def test_plain_text_has_plain_run(self) -> None:
        [paragraph] = blocks("just text")
        assert runs(paragraph) == [("just text", InlineTextStyle())]


@pytest.mark.unit
class TestMarkdownInput:
    """Test input handling and options validation."""

    def test_bytes_input(self) -> None:
        assert markdown_to_tree("# T".encode("utf-8")).children[0].level == 1

    def test_path_input(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("Body", encoding="utf-8")
        assert markdown_to_tree(path).children[0].plain_text() == "Body"

    def test_invalid_bytes(self) -> None:
        with pytest.raises(ValidationError):
            markdown_to_tree(b"\xff\xfe\xfa")

    def test_unsupported_input_type(self) -> None:
        with pytest.raises(ValidationError):
            markdown_to_tree(42)  # type: ignore[arg-type]

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(HtmlParserOptions())  # type: ignore[arg-type]

    def test_empty_document(self) -> None:
        assert all(isinstance(node, Ignore) for node in MarkdownParser().parse("").children)
        assert parse_markdown("") == Root(children=[])
