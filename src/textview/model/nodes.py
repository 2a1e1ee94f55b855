#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/model/nodes.py
"""Block tree node classes for the styled rendering model.

The block tree is what parsers produce and renderers consume. It is a closed
set of variants; every variant supports the visitor pattern through
``accept`` and :class:`~textview.model.visitors.NodeVisitor` declares one
abstract method per variant, so a renderer that forgets a variant cannot be
instantiated.

Node Hierarchy
--------------
Block variants (all subclasses of :class:`Node`):
    - Root, Paragraph, Heading, Blockquote
    - List, ListItem, CodeBlock, Table
    - Break, Divider, Ignore, Unknown

Leaf value types (not nodes):
    - Span, ImageNode, TextNode
    - TableRow, TableCell, TableColumnAlign

A tree is built once by a parser and treated as immutable afterwards; the
only reduction applied to it is :func:`~textview.model.transforms.compact`.
``Paragraph`` is mutable while a parser fills it in.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence, Tuple, Union

from textview.model.styles import InlineTextStyle, TextRange

MarkInput = Union[TextRange, Tuple[int, int], range]


@dataclass(frozen=True)
class Span:
    """Offsets locating a block in the source document.

    Spans are only used as identity keys, never for layout.

    Parameters
    ----------
    start : int
        Start offset in the source text
    end : int
        End offset in the source text

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate that the span is not inverted."""
        if self.start > self.end:
            raise ValueError(f"Span start {self.start} is after end {self.end}")

    @property
    def element_id(self) -> str:
        """Stable identifier derived from the span."""
        return f"md-{self.start}:{self.end}"


@dataclass
class ImageNode:
    """Embedded image.

    Equality only considers ``url``, ``title`` and ``alt``; the size hints
    do not change an image's identity.

    Parameters
    ----------
    url : str
        Image source
    title : str or None, default None
        Optional title
    alt : str or None, default None
        Alternative text
    width, height : str or None, default None
        Size hints such as ``"120px"`` or ``"50%"``

    """

    url: str
    title: Optional[str] = None
    alt: Optional[str] = None
    width: Optional[str] = field(default=None, compare=False)
    height: Optional[str] = field(default=None, compare=False)


@dataclass
class TextNode:
    """A run of text with style marks local to the run.

    Parameters
    ----------
    text : str
        The text content
    marks : list of (TextRange, InlineTextStyle)
        Ranges are 0-based offsets into ``text``; they may overlap each
        other. Tuples and ``range`` objects are accepted and converted.

    Raises
    ------
    ValueError
        If a mark reaches past the end of ``text``

    """

    text: str = ""
    marks: list[tuple[TextRange, InlineTextStyle]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Coerce mark ranges and check they lie within the text."""
        coerced = []
        for rng, style in self.marks:
            text_range = TextRange.coerce(rng)
            if text_range.end > len(self.text):
                raise ValueError(f"Mark {text_range} extends past text of length {len(self.text)}")
            coerced.append((text_range, style))
        self.marks = coerced

    @classmethod
    def styled(cls, text: str, style: InlineTextStyle) -> "TextNode":
        """Create a run whose whole text carries one style."""
        return cls(text=text, marks=[(TextRange(0, len(text)), style)])


class Node(ABC):
    """Base class for all block tree nodes."""

    @abstractmethod
    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to the visitor method for this variant.

        Parameters
        ----------
        visitor : NodeVisitor
            Visitor with one ``visit_*`` method per variant
        context : Any, optional
            Value passed through unchanged to the visitor method

        Returns
        -------
        Any
            Result of the visitor method

        """


@dataclass
class Root(Node):
    """Container for a sequence of blocks."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_root``."""
        return visitor.visit_root(self, context)


@dataclass
class Paragraph(Node):
    """Inline content: either a sequence of text runs or a single image.

    The two shapes are mutually exclusive. Once a paragraph holds an image,
    :meth:`push` and :meth:`push_str` do nothing; :meth:`set_image` discards
    any text runs.

    Parameters
    ----------
    span : Span or None, default None
        Source location of the paragraph
    children : list of TextNode, default empty
        Text runs, concatenated left to right
    image : ImageNode or None, default None
        The image, when this paragraph is an image paragraph

    """

    span: Optional[Span] = None
    children: list[TextNode] = field(default_factory=list)
    image: Optional[ImageNode] = None

    def __post_init__(self) -> None:
        """Reject a paragraph that holds both text runs and an image."""
        if self.image is not None and self.children:
            raise ValueError("A paragraph holds either text runs or an image, not both")

    @classmethod
    def from_text(cls, text: str) -> "Paragraph":
        """Create a paragraph with a single unstyled run."""
        return cls(children=[TextNode(text=text)])

    @classmethod
    def from_image(cls, image: ImageNode, span: Optional[Span] = None) -> "Paragraph":
        """Create an image paragraph."""
        return cls(span=span, image=image)

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, context)

    def is_image(self) -> bool:
        """Whether this paragraph holds an image."""
        return self.image is not None

    def clear(self) -> None:
        """Remove all text runs; an image paragraph becomes an empty text paragraph."""
        if self.image is not None:
            self.span = None
            self.image = None
        self.children.clear()

    def set_span(self, span: Span) -> None:
        self.span = span

    @property
    def element_id(self) -> str:
        """Identity key of the paragraph; ``Span(0, 0)`` stands in for a missing span."""
        return (self.span or Span(0, 0)).element_id

    def push_str(self, text: str) -> None:
        """Append an unstyled run covering ``text``; no-op for an image paragraph."""
        if self.image is None:
            self.children.append(TextNode(text=text, marks=[(TextRange(0, len(text)), InlineTextStyle())]))

    def push(self, node: TextNode) -> None:
        """Append a run; no-op for an image paragraph."""
        if self.image is None:
            self.children.append(node)

    def set_image(self, image: ImageNode) -> None:
        """Turn this paragraph into an image paragraph, dropping text and span."""
        self.span = None
        self.children = []
        self.image = image

    def is_empty(self) -> bool:
        if self.image is not None:
            return False
        return self.text_len() == 0

    def text_len(self) -> int:
        """Length of the longest single run.

        This is a "widest line" estimate used for table column sizing, not
        the total text length. An image counts as 1.
        """
        if self.image is not None:
            return 1
        return max((len(node.text) for node in self.children), default=0)

    def plain_text(self) -> str:
        """Concatenated text of all runs."""
        return "".join(node.text for node in self.children)


@dataclass
class Heading(Node):
    """Heading with a level of 1 or more; levels above 6 render as body text."""

    level: int
    children: Paragraph = field(default_factory=Paragraph)

    def __post_init__(self) -> None:
        """Validate heading level."""
        if self.level < 1:
            raise ValueError(f"Heading level must be at least 1, got {self.level}")

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, context)


@dataclass
class Blockquote(Node):
    """Quoted inline content."""

    children: Paragraph = field(default_factory=Paragraph)

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_blockquote``."""
        return visitor.visit_blockquote(self, context)


@dataclass
class List(Node):
    """Ordered or unordered list.

    Children are expected to be :class:`ListItem` nodes. Other nodes are
    accepted here and skipped when the list is rendered.
    """

    children: list[Node] = field(default_factory=list)
    ordered: bool = False

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, context)


@dataclass
class ListItem(Node):
    """Item of a list.

    Parameters
    ----------
    children : list of Node
        Usually paragraphs and nested lists
    spread : bool, default False
        Whether the item is separated from its siblings by blank lines
    checked : bool or None, default None
        ``None`` for a plain item, ``True``/``False`` for a checklist item

    """

    children: list[Node] = field(default_factory=list)
    spread: bool = False
    checked: Optional[bool] = None

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, context)


@dataclass
class CodeBlock(Node):
    """Literal code with an optional language tag."""

    code: str
    lang: Optional[str] = None

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, context)


class TableColumnAlign(Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def from_source(cls, value: Optional[str]) -> "TableColumnAlign":
        """Map a parser's alignment value; ``None``, ``"none"`` and unknown values map to LEFT."""
        if value is None:
            return cls.LEFT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.LEFT


@dataclass
class TableCell:
    """Table cell holding a single paragraph."""

    children: Paragraph = field(default_factory=Paragraph)
    width: Optional[str] = None


@dataclass
class TableRow:
    """Row of cells; rows of one table may have different lengths."""

    children: list[TableCell] = field(default_factory=list)


@dataclass
class Table(Node):
    """Table; the first row is the header row when the source had one."""

    children: list[TableRow] = field(default_factory=list)
    column_aligns: list[TableColumnAlign] = field(default_factory=list)

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self, context)

    def column_align(self, index: int) -> TableColumnAlign:
        """Alignment of column ``index``, LEFT when out of range."""
        if 0 <= index < len(self.column_aligns):
            return self.column_aligns[index]
        return TableColumnAlign.LEFT

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], aligns: Sequence[Optional[str]] = ()) -> "Table":
        """Build a table of plain-text cells."""
        return cls(
            children=[TableRow(children=[TableCell(Paragraph.from_text(text)) for text in row]) for row in rows],
            column_aligns=[TableColumnAlign.from_source(align) for align in aligns],
        )


@dataclass
class Break(Node):
    """Block-level line break."""

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_break``."""
        return visitor.visit_break(self, context)


@dataclass
class Divider(Node):
    """Horizontal rule."""

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_divider``."""
        return visitor.visit_divider(self, context)


@dataclass
class Ignore(Node):
    """Placeholder for source constructs that produce nothing (blank lines, comments)."""

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_ignore``."""
        return visitor.visit_ignore(self, context)


@dataclass
class Unknown(Node):
    """Placeholder for source constructs the lowering does not support."""

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_unknown``."""
        return visitor.visit_unknown(self, context)
