#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the rich terminal renderer."""
import logging

import pytest
from rich.console import Console

from textview.exceptions import RenderingError
from textview.model import (
    Blockquote,
    CodeBlock,
    ColorRole,
    Divider,
    FontWeight,
    Heading,
    InlineTextStyle,
    LinkMark,
    List,
    ListItem,
    Paragraph,
    ResolvedStyle,
    Root,
    Table,
    TextNode,
    Unknown,
)
from textview.options import TerminalRendererOptions, TerminalTheme, TextViewStyle
from textview.renderers.terminal import TerminalRenderer, Theme


def lines(node, **options) -> list[str]:
    output = TerminalRenderer(TerminalRendererOptions(width=40, **options)).render_to_string(node)
    return [line.rstrip() for line in output.splitlines()]


def linked_paragraph() -> Paragraph:
    paragraph = Paragraph()
    paragraph.push_str("go to ")
    paragraph.push(TextNode.styled("site", InlineTextStyle(link=LinkMark(url="https://example.com"))))
    return paragraph


@pytest.mark.unit
class TestTheme:
    """Test mapping resolved styles onto rich styles."""

    def test_bold_and_link_color(self) -> None:
        theme = Theme(TerminalTheme())
        style = theme.style_for(ResolvedStyle(font_weight=FontWeight.BOLD, color=ColorRole.LINK, underline=True))
        assert style.bold is True
        assert style.underline is True
        assert style.color.name == "bright_blue"

    def test_code_background(self) -> None:
        style = Theme(TerminalTheme(accent="grey11")).style_for(ResolvedStyle(background=ColorRole.ACCENT))
        assert style.bgcolor.name == "grey11"

    def test_plain_highlight_is_null_style(self) -> None:
        assert not Theme(TerminalTheme()).style_for(ResolvedStyle())

    def test_invalid_color(self) -> None:
        with pytest.raises(RenderingError):
            Theme(TerminalTheme(link="not-a-color")).style_for(ResolvedStyle(color=ColorRole.LINK))

    def test_invalid_named_style(self) -> None:
        with pytest.raises(RenderingError):
            Theme(TerminalTheme()).named("bogus-style")

    def test_invalid_border_style_fails_render(self) -> None:
        options = TerminalRendererOptions(theme=TerminalTheme(border="bogus-style"))
        root = Root(children=[Paragraph.from_text("a"), Divider(), Paragraph.from_text("b")])
        with pytest.raises(RenderingError) as exc_info:
            TerminalRenderer(options).render_to_string(root)
        assert exc_info.value.rendering_stage == "style"


@pytest.mark.unit
class TestTerminalRenderer:
    """Test rendered terminal output."""

    def test_paragraph_gap(self) -> None:
        root = Root(children=[Paragraph.from_text("a"), Paragraph.from_text("b")])
        assert lines(root) == ["a", "", "b"]

    def test_inline_has_no_gap(self) -> None:
        root = Root(children=[Paragraph.from_text("a"), Paragraph.from_text("b")])
        assert lines(root, style=TextViewStyle.inline()) == ["a", "b"]

    def test_heading_text(self) -> None:
        assert lines(Heading(level=2, children=Paragraph.from_text("Title"))) == ["Title"]

    def test_list_prefixes(self) -> None:
        node = List(
            children=[
                ListItem(children=[Paragraph.from_text("a")]),
                ListItem(children=[Paragraph.from_text("b"), List(children=[ListItem([Paragraph.from_text("c")])])]),
            ],
            ordered=True,
        )
        assert lines(node) == ["1. a", "2. b", "  ◦ c"]

    def test_checklist(self) -> None:
        node = List(children=[ListItem(children=[Paragraph.from_text("done")], checked=True)])
        assert lines(node) == ["☑ done"]

    def test_checklist_custom_glyphs(self) -> None:
        node = List(
            children=[
                ListItem(children=[Paragraph.from_text("done")], checked=True),
                ListItem(children=[Paragraph.from_text("next")], checked=False),
            ]
        )
        assert lines(node, checked_glyph="[x] ", unchecked_glyph="[ ] ") == ["[x] done", "[ ] next"]

    def test_quote_has_bar(self) -> None:
        output = lines(Blockquote(Paragraph.from_text("quoted")))
        assert output[0].startswith("▌")
        assert output[0].endswith("quoted")

    def test_table_cells_and_borders(self) -> None:
        output = "\n".join(lines(Table.from_rows([["name", "value"], ["a", "1"]])))
        assert "┌" in output
        assert "name" in output and "value" in output
        assert "├" in output

    def test_short_rows_are_padded(self) -> None:
        output = "\n".join(lines(Table.from_rows([["a", "b"], ["only"]])))
        assert "only" in output

    def test_code_block(self) -> None:
        assert any("print(1)" in line for line in lines(CodeBlock(code="print(1)", lang="python")))

    def test_divider_spans_width(self) -> None:
        assert lines(Divider()) == ["─" * 40]

    def test_hyperlinks_emitted_with_ansi(self) -> None:
        renderer = TerminalRenderer(TerminalRendererOptions(width=40))
        assert "\x1b]8;" in renderer.render_to_string(linked_paragraph(), ansi=True)

    def test_hyperlinks_disabled(self) -> None:
        renderer = TerminalRenderer(TerminalRendererOptions(width=40, hyperlinks=False))
        assert "\x1b]8;" not in renderer.render_to_string(linked_paragraph(), ansi=True)

    def test_plain_output_has_no_escape_codes(self) -> None:
        output = TerminalRenderer(TerminalRendererOptions(width=40)).render_to_string(linked_paragraph())
        assert "\x1b" not in output
        assert output.rstrip() == "go to site"

    def test_unknown_renders_nothing(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="textview.renderers"):
            assert lines(Root(children=[Unknown(), Paragraph.from_text("x")])) == ["x"]
        assert "Unknown implementation" in caplog.text

    def test_render_to_console(self) -> None:
        console = Console(width=40, color_system=None, record=True)
        TerminalRenderer().render(Paragraph.from_text("printed"), console)
        assert "printed" in console.export_text()
