#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/layout/tables.py
"""Table column sizing.

Column widths are estimated from text length: each column starts at
:data:`~textview.constants.DEFAULT_COLUMN_WIDTH` and grows to the longest
``Paragraph.text_len()`` of any of its cells. Stored widths are not clamped;
:meth:`TableLayout.rendered_width` applies the ceiling when the width is
turned into a proportional layout value.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from textview.constants import DEFAULT_COLUMN_WIDTH, MAX_COLUMN_WIDTH
from textview.model.nodes import Table, TableColumnAlign, TableRow


def compute_column_widths(table: Table) -> list[int]:
    """Compute one width per column observed in any row.

    Rows may have different lengths; the result has as many entries as the
    longest row.
    """
    widths: list[int] = []
    for row in table.children:
        for ix, cell in enumerate(row.children):
            if len(widths) <= ix:
                widths.append(DEFAULT_COLUMN_WIDTH)
            widths[ix] = max(widths[ix], cell.children.text_len())
    return widths


@dataclass
class TableLayout:
    """Layout facts for a table that a painter needs.

    Parameters
    ----------
    table : Table
        The table being laid out
    column_widths : list of int
        Unclamped widths from :func:`compute_column_widths`

    """

    table: Table
    column_widths: list[int] = field(default_factory=list)

    @classmethod
    def from_table(cls, table: Table) -> "TableLayout":
        return cls(table=table, column_widths=compute_column_widths(table))

    @property
    def row_count(self) -> int:
        return len(self.table.children)

    @property
    def column_count(self) -> int:
        return len(self.column_widths)

    def rendered_width(self, ix: int) -> int:
        """Width of column ``ix`` clamped to the ceiling; the ceiling for unknown columns."""
        if 0 <= ix < len(self.column_widths):
            return min(self.column_widths[ix], MAX_COLUMN_WIDTH)
        return MAX_COLUMN_WIDTH

    def ratios(self) -> list[float]:
        """Rendered widths as fractions of their sum."""
        rendered = [self.rendered_width(ix) for ix in range(self.column_count)]
        total = sum(rendered)
        if not total:
            return []
        return [width / total for width in rendered]

    def column_align(self, ix: int) -> TableColumnAlign:
        return self.table.column_align(ix)

    def has_row_border(self, row_ix: int) -> bool:
        """Whether a divider is drawn below row ``row_ix``; none after the last row."""
        return row_ix < self.row_count - 1

    @staticmethod
    def has_column_border(row: TableRow, col_ix: int) -> bool:
        """Whether a divider is drawn right of cell ``col_ix``; none after the row's last cell."""
        return col_ix < len(row.children) - 1
