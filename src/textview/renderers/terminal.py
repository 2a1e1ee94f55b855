#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/renderers/terminal.py
"""Terminal rendering of the block tree with rich.

The terminal renderer is the styled painter of the model. Each visit
returns a rich renderable: paragraphs become :class:`rich.text.Text` with
one span per composed highlight, tables become :class:`rich.table.Table`
with proportional columns, code blocks become :class:`rich.syntax.Syntax`.
Color roles of :class:`~textview.model.styles.ResolvedStyle` are mapped to
concrete colors by :class:`Theme`.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from textview.constants import DEPS_TERMINAL
from textview.exceptions import RenderingError
from textview.layout.lists import PrefixKind
from textview.layout.paragraph import ComposedParagraph, compose_paragraph
from textview.layout.tables import TableLayout
from textview.model.nodes import (
    Blockquote,
    CodeBlock,
    Divider,
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Table,
)
from textview.model.styles import ColorRole, FontStyle, FontWeight, ResolvedStyle
from textview.options.terminal import TerminalRendererOptions, TerminalTheme
from textview.renderers.base import BaseRenderer, RenderContext, heading_style
from textview.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from rich.console import Console, RenderableType
    from rich.style import Style
    from rich.text import Text

_QUOTE_BAR = "▌"
_INDENT_WIDTH = 2


class Theme:
    """Map resolved styles onto rich styles.

    Parameters
    ----------
    theme : TerminalTheme
        Colors for the color roles

    """

    def __init__(self, theme: TerminalTheme):
        self.theme = theme

    def color(self, role: Optional[ColorRole]) -> Optional[str]:
        if role is ColorRole.LINK:
            return self.theme.link
        if role is ColorRole.ACCENT:
            return self.theme.accent
        return None

    def style_for(self, resolved: ResolvedStyle) -> "Style":
        """Rich style for a highlight.

        Raises
        ------
        RenderingError
            If a theme color is not a valid rich color

        """
        from rich.color import ColorParseError
        from rich.style import Style

        weight = resolved.font_weight
        try:
            return Style(
                bold=weight is not None and weight.value >= FontWeight.SEMIBOLD.value or None,
                italic=resolved.font_style is FontStyle.ITALIC or None,
                strike=resolved.strikethrough or None,
                underline=resolved.underline or None,
                color=self.color(resolved.color),
                bgcolor=self.color(resolved.background),
            )
        except ColorParseError as e:
            raise RenderingError(f"Invalid theme color: {e}", rendering_stage="style", original_error=e) from e

    def named(self, value: Optional[str]) -> "Style":
        """Parse a theme style string such as ``"grey37"`` or ``"bold green"``."""
        from rich.errors import StyleSyntaxError
        from rich.style import Style

        if not value:
            return Style.null()
        try:
            return Style.parse(value)
        except StyleSyntaxError as e:
            raise RenderingError(f"Invalid theme style {value!r}: {e}", rendering_stage="style", original_error=e) from e


class TerminalRenderer(BaseRenderer):
    """Render the block tree to rich renderables.

    Parameters
    ----------
    options : TerminalRendererOptions or None, default = None
        Terminal rendering options

    Examples
    --------
    Print a parsed document:

        >>> from textview import parse_markdown
        >>> TerminalRenderer().render(parse_markdown("# Title\\n\\n- [x] done"))

    """

    def __init__(self, options: TerminalRendererOptions | None = None):
        """Initialize the terminal renderer with options."""
        BaseRenderer._validate_options_type(options, TerminalRendererOptions, "terminal")
        options = options or TerminalRendererOptions()
        super().__init__(options)
        self.options: TerminalRendererOptions = options
        self.theme = Theme(options.theme)

    @requires_dependencies("terminal", DEPS_TERMINAL)
    def to_renderable(self, root: Node) -> "RenderableType":
        """Build the rich renderable for a tree."""
        from rich.text import Text

        output = self.render_node(root)
        return Text("") if output is None else output

    def render(self, root: Node, console: Optional["Console"] = None) -> None:
        """Print a tree to ``console`` (a new default console when omitted)."""
        from rich.console import Console

        renderable = self.to_renderable(root)
        (console or Console()).print(renderable)

    def render_to_string(self, root: Node, ansi: bool = False) -> str:
        """Render a tree to text at the configured width.

        Parameters
        ----------
        root : Node
            Tree to render
        ansi : bool, default False
            Keep terminal escape codes for styles and hyperlinks

        """
        from rich.console import Console

        renderable = self.to_renderable(root)
        console = Console(
            width=self.options.width,
            force_terminal=ansi,
            color_system="truecolor" if ansi else None,
            highlight=False,
        )
        with console.capture() as capture:
            console.print(renderable)
        return capture.get()

    def empty(self) -> None:
        return None

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def _styled_text(self, composed: ComposedParagraph, base: Optional["Style"] = None) -> "Text":
        from rich.style import Style
        from rich.text import Text

        text = Text(composed.text, style=base or "")
        for rng, resolved in composed.highlights:
            style = self.theme.style_for(resolved)
            if style:
                text.stylize(style, rng.start, rng.end)
        if self.options.hyperlinks:
            for rng, link in composed.links:
                text.stylize(Style(link=link.url), rng.start, rng.end)
        return text

    def _paragraph_text(self, node: Paragraph, base: Optional["Style"] = None) -> "Text":
        from rich.style import Style
        from rich.text import Text

        if node.image is not None:
            image = node.image
            style = self.theme.named(self.theme.theme.link)
            if self.options.hyperlinks and image.url:
                style += Style(link=image.url)
            return Text(image.alt or image.url, style=style)
        return self._styled_text(compose_paragraph(node), base)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_root(self, node: Root, context: Optional[RenderContext] = None) -> "RenderableType":
        from rich.console import Group
        from rich.padding import Padding

        blocks = []
        for output, margin in self.iter_blocks(node, context):
            gap = int(round(margin))
            blocks.append(Padding(output, (0, 0, gap, 0)) if gap else output)
        return Group(*blocks)

    def visit_paragraph(self, node: Paragraph, context: Optional[RenderContext] = None) -> "Text":
        return self._paragraph_text(node)

    def visit_heading(self, node: Heading, context: Optional[RenderContext] = None) -> "Text":
        from rich.style import Style

        _scale, weight = heading_style(node.level)
        base = Style(bold=weight.value >= FontWeight.SEMIBOLD.value, underline=node.level == 1)
        return self._paragraph_text(node.children, base)

    def visit_blockquote(self, node: Blockquote, context: Optional[RenderContext] = None) -> "RenderableType":
        from rich.table import Table as RichTable
        from rich.text import Text

        grid = RichTable.grid(padding=(0, 1))
        grid.add_column(width=1, style=self.theme.named(self.options.theme.border))
        grid.add_column(style=self.theme.named(self.options.theme.muted_foreground), ratio=1)

        content = self._paragraph_text(node.children)
        bar = Text("\n".join(_QUOTE_BAR for _ in range(content.plain.count("\n") + 1)))
        grid.add_row(bar, content)
        return grid

    def visit_list(self, node: List, context: Optional[RenderContext] = None) -> "RenderableType":
        from rich.console import Group

        context = context or RenderContext()
        items = [self.render_node(item, item_context) for item, item_context in self.iter_list_items(node, context)]
        return Group(*(item for item in items if item is not None))

    def visit_list_item(self, node: ListItem, context: Optional[RenderContext] = None) -> "RenderableType":
        """Render a list item as prefix/content rows indented by depth, nested lists below."""
        from rich.console import Group
        from rich.padding import Padding
        from rich.table import Table as RichTable
        from rich.text import Text

        context = context or RenderContext()
        depth = context.list_state.depth if context.list_state is not None else 0

        rows: list[Any] = [Text("")] if node.spread else []
        for part in self.item_parts(node, context):
            if part.is_nested_list:
                nested = self.render_node(part.node, self.nested_context(part))
                if nested is not None:
                    rows.append(nested)
                continue

            if part.prefix_kind is PrefixKind.CHECKBOX:
                glyph = self.options.checked_glyph if part.checked else self.options.unchecked_glyph
                prefix = Text(glyph, style=self.theme.named(self.options.theme.primary))
            elif part.prefix_kind is PrefixKind.MARKER:
                prefix = Text(part.marker or "")
            else:
                prefix = Text("")

            grid = RichTable.grid()
            grid.add_column(no_wrap=True)
            grid.add_column(ratio=1)
            grid.add_row(prefix, self.render_node(part.node, self.nested_context(part)))
            rows.append(Padding(grid, (0, 0, 0, _INDENT_WIDTH * depth)) if depth else grid)

        return Group(*rows)

    def visit_code_block(self, node: CodeBlock, context: Optional[RenderContext] = None) -> "RenderableType":
        from rich.syntax import Syntax

        return Syntax(
            node.code,
            node.lang or "text",
            theme=self.options.code_theme,
            background_color=self.options.theme.code_background,
            word_wrap=True,
        )

    def visit_table(self, node: Table, context: Optional[RenderContext] = None) -> "RenderableType":
        """Render a table with columns proportional to their rendered widths.

        Every row is separated by a rule; short rows are padded with empty
        cells.
        """
        from rich import box
        from rich.table import Table as RichTable
        from rich.text import Text

        layout = TableLayout.from_table(node)
        table = RichTable(
            box=box.SQUARE,
            show_header=False,
            show_lines=True,
            expand=True,
            border_style=self.theme.named(self.options.theme.border),
        )
        for ix in range(layout.column_count):
            table.add_column(justify=layout.column_align(ix).value, ratio=layout.rendered_width(ix))

        for row in node.children:
            cells: list[Any] = [self._paragraph_text(cell.children) for cell in row.children]
            cells.extend(Text("") for _ in range(layout.column_count - len(cells)))
            table.add_row(*cells)
        return table

    def visit_divider(self, node: Divider, context: Optional[RenderContext] = None) -> "RenderableType":
        from rich.rule import Rule

        return Rule(style=self.theme.named(self.options.theme.border))
