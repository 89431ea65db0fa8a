#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/renderers/tables.py
"""Column negotiation for markdown tables.

A padded markdown table cannot be written cell by cell: every cell of a column
must be as wide as the widest one, and the header's delimiter row has to know
every column's width and alignment. The markdown renderer therefore folds each
node into a :class:`TableInfo`, a pair of

- ``info``: what the subtree learned about the columns so far, keyed by
  column index, and
- ``render``: a closure that produces the final text once it is handed the
  table's complete column map.

Cells report their own width, rows move their cells' reports to the right
column indices, and sections and tables merge the reports. Only when a
:class:`~mdfold.ast.nodes.Table` has been reached is the merged map final;
the table then calls ``render`` once, and the map flows back down to every
captured cell closure. Both passes happen within a single fold.

Styles
------
DEFAULT_STYLE : pads every column to its widest cell (at least 3 wide) and
    writes alignment colons into the delimiter row
COMPACT_STYLE : writes cells as they are with a minimal delimiter row
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Mapping, Optional, Sequence, TypeVar

from mdfold.ast.nodes import Alignment
from mdfold.constants import MIN_TABLE_COLUMN_WIDTH, TABLE_STYLE_NAMES
from mdfold.exceptions import ValidationError

V = TypeVar("V")
W = TypeVar("W")

ColumnMap = Mapping[int, "ColumnInfo"]


@dataclass(frozen=True)
class ColumnInfo:
    """What is known about one table column.

    Parameters
    ----------
    size : int, default = 0
        Width of the widest cell seen so far
    alignment : Alignment or None, default = None
        Column alignment, if any cell declared one

    """

    size: int = 0
    alignment: Optional[Alignment] = None


def combine_column_info(left: ColumnInfo, right: ColumnInfo) -> ColumnInfo:
    """Merge two reports about the same column.

    The wider size wins. For alignment the left report wins whenever it has
    one, so the first aligned cell of a column decides.
    """
    return ColumnInfo(
        size=max(left.size, right.size),
        alignment=left.alignment if left.alignment is not None else right.alignment,
    )


def merge_column_maps(maps: Sequence[ColumnMap]) -> dict[int, ColumnInfo]:
    """Merge column maps key by key with :func:`combine_column_info`."""
    merged: dict[int, ColumnInfo] = {}
    for column_map in maps:
        for index, info in column_map.items():
            merged[index] = combine_column_info(merged[index], info) if index in merged else info
    return merged


@dataclass(frozen=True)
class TableInfo(Generic[V]):
    """A subtree's column report together with its deferred rendering.

    Parameters
    ----------
    info : Mapping[int, ColumnInfo]
        Column reports of the subtree, keyed by column index
    render : callable
        Produces the subtree's value from the complete column map of the
        enclosing table

    """

    info: Mapping[int, ColumnInfo]
    render: Callable[[ColumnMap], V]

    @classmethod
    def pure(cls, value: W) -> TableInfo[W]:
        """Wrap a value that does not depend on any table layout."""
        return cls(info={}, render=lambda _columns: value)

    def finalize(self) -> V:
        """Render with this subtree's own report taken as the complete map."""
        return self.render(self.info)

    def shift(self, offset: int) -> TableInfo[V]:
        """Move this report ``offset`` columns to the right.

        The render closure keeps seeing the columns at the indices it
        reported, so a cell always finds itself at column 0.
        """
        if offset == 0:
            return self
        render = self.render

        def shifted_render(columns: ColumnMap) -> V:
            return render({index - offset: info for index, info in columns.items() if index >= offset})

        return TableInfo(info={index + offset: info for index, info in self.info.items()}, render=shifted_render)


# ============================================================================
# Styles
# ============================================================================


@dataclass(frozen=True)
class TableStyle:
    """How cells, delimiter rows and rows of a table are written.

    Parameters
    ----------
    render_cell : callable
        ``(content, column) -> str`` for one cell
    render_delimiter : callable
        ``columns -> str`` for the row between header and body
    render_row : callable
        ``cells -> str`` joining already rendered cells

    """

    render_cell: Callable[[str, ColumnInfo], str]
    render_delimiter: Callable[[Sequence[ColumnInfo]], str]
    render_row: Callable[[Sequence[str]], str]


def _padded_width(column: ColumnInfo) -> int:
    return max(column.size, MIN_TABLE_COLUMN_WIDTH)


def _padded_cell(content: str, column: ColumnInfo) -> str:
    width = _padded_width(column)
    if column.alignment is Alignment.RIGHT:
        return content.rjust(width)
    if column.alignment is Alignment.CENTER:
        return content.center(width)
    return content.ljust(width)


def _padded_delimiter_cell(column: ColumnInfo) -> str:
    width = _padded_width(column)
    if column.alignment is Alignment.LEFT:
        return ":" + "-" * (width - 1)
    if column.alignment is Alignment.RIGHT:
        return "-" * (width - 1) + ":"
    if column.alignment is Alignment.CENTER:
        return ":" + "-" * (width - 2) + ":"
    return "-" * width


def _padded_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _compact_delimiter_cell(column: ColumnInfo) -> str:
    if column.alignment is Alignment.LEFT:
        return ":--"
    if column.alignment is Alignment.RIGHT:
        return "--:"
    if column.alignment is Alignment.CENTER:
        return ":-:"
    return "---"


def _compact_row(cells: Sequence[str]) -> str:
    return "|" + "|".join(cells) + "|"


DEFAULT_STYLE = TableStyle(
    render_cell=_padded_cell,
    render_delimiter=lambda columns: _padded_row([_padded_delimiter_cell(column) for column in columns]),
    render_row=_padded_row,
)

COMPACT_STYLE = TableStyle(
    render_cell=lambda content, _column: content,
    render_delimiter=lambda columns: _compact_row([_compact_delimiter_cell(column) for column in columns]),
    render_row=_compact_row,
)

_STYLES: dict[str, TableStyle] = {
    "default": DEFAULT_STYLE,
    "compact": COMPACT_STYLE,
}


def get_table_style(name: str) -> TableStyle:
    """Look up a built-in table style by name.

    Raises
    ------
    ValidationError
        If ``name`` is not one of the built-in styles

    """
    try:
        return _STYLES[name]
    except KeyError as e:
        raise ValidationError(
            f"Unknown table style '{name}'. Choose one of: {', '.join(TABLE_STYLE_NAMES)}",
            parameter_name="table_style",
            parameter_value=name,
        ) from e


def columns_in_order(columns: ColumnMap) -> list[ColumnInfo]:
    """List column reports by index, filling gaps with empty reports."""
    if not columns:
        return []
    return [columns.get(index, ColumnInfo()) for index in range(max(columns) + 1)]
