#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for table column negotiation and table styles."""
import pytest

from mdfold.ast.nodes import Alignment, Table, TableBody, TableCell, TableHeader, TableHeaderCell, TableRow, Text
from mdfold.exceptions import ValidationError
from mdfold.options.markdown import MarkdownRendererOptions
from mdfold.renderers.markdown import render_markdown
from mdfold.renderers.tables import (
    COMPACT_STYLE,
    DEFAULT_STYLE,
    ColumnInfo,
    TableInfo,
    columns_in_order,
    combine_column_info,
    get_table_style,
    merge_column_maps,
)


@pytest.mark.unit
class TestColumnInfo:
    """Test merging of column reports."""

    def test_combine_takes_widest(self) -> None:
        """Test that the wider size wins."""
        assert combine_column_info(ColumnInfo(3), ColumnInfo(7)).size == 7

    def test_combine_alignment_left_biased(self) -> None:
        """Test that the first declared alignment wins."""
        left = ColumnInfo(1, Alignment.RIGHT)
        assert combine_column_info(left, ColumnInfo(1, Alignment.LEFT)).alignment is Alignment.RIGHT
        assert combine_column_info(ColumnInfo(1), ColumnInfo(1, Alignment.LEFT)).alignment is Alignment.LEFT

    def test_merge_column_maps(self) -> None:
        """Test key-wise merging."""
        merged = merge_column_maps([{0: ColumnInfo(3)}, {0: ColumnInfo(5), 1: ColumnInfo(2, Alignment.CENTER)}])
        assert merged == {0: ColumnInfo(5), 1: ColumnInfo(2, Alignment.CENTER)}

    def test_columns_in_order_fills_gaps(self) -> None:
        """Test that missing indices become empty reports."""
        assert columns_in_order({2: ColumnInfo(4)}) == [ColumnInfo(), ColumnInfo(), ColumnInfo(4)]
        assert columns_in_order({}) == []


@pytest.mark.unit
class TestTableInfo:
    """Test the two-phase table value."""

    def test_pure_ignores_columns(self) -> None:
        """Test that pure values report nothing and render constantly."""
        value = TableInfo.pure("x")
        assert value.info == {}
        assert value.render({0: ColumnInfo(9)}) == "x"
        assert value.finalize() == "x"

    def test_shift(self) -> None:
        """Test that shifting moves reports and keeps the closure's view."""
        seen = []
        cell = TableInfo(info={0: ColumnInfo(3)}, render=lambda columns: seen.append(dict(columns)) or "ok")
        shifted = cell.shift(2)

        assert shifted.info == {2: ColumnInfo(3)}
        assert shifted.render({0: ColumnInfo(1), 2: ColumnInfo(8)}) == "ok"
        assert seen == [{0: ColumnInfo(8)}]

    def test_shift_zero_is_same(self) -> None:
        """Test that a zero shift returns the same value."""
        cell = TableInfo.pure("x")
        assert cell.shift(0) is cell


@pytest.mark.unit
class TestTableStyles:
    """Test cell, delimiter and row writers."""

    def test_default_cell_padding(self) -> None:
        """Test padding according to alignment, at least three wide."""
        assert DEFAULT_STYLE.render_cell("a", ColumnInfo(1)) == "a  "
        assert DEFAULT_STYLE.render_cell("ab", ColumnInfo(5, Alignment.RIGHT)) == "   ab"
        assert DEFAULT_STYLE.render_cell("ok", ColumnInfo(6, Alignment.CENTER)) == "  ok  "

    def test_default_delimiter(self) -> None:
        """Test delimiter cells for each alignment."""
        columns = [ColumnInfo(4), ColumnInfo(4, Alignment.LEFT), ColumnInfo(4, Alignment.CENTER), ColumnInfo(1, Alignment.RIGHT)]
        assert DEFAULT_STYLE.render_delimiter(columns) == "| ---- | :--- | :--: | --: |"

    def test_compact(self) -> None:
        """Test the unpadded style."""
        assert COMPACT_STYLE.render_cell("a", ColumnInfo(9)) == "a"
        assert COMPACT_STYLE.render_row(["a", "b"]) == "|a|b|"
        columns = [ColumnInfo(9), ColumnInfo(1, Alignment.LEFT), ColumnInfo(1, Alignment.CENTER), ColumnInfo(1, Alignment.RIGHT)]
        assert COMPACT_STYLE.render_delimiter(columns) == "|---|:--|:-:|--:|"

    def test_get_table_style(self) -> None:
        """Test style lookup by name."""
        assert get_table_style("default") is DEFAULT_STYLE
        assert get_table_style("compact") is COMPACT_STYLE
        with pytest.raises(ValidationError, match="Unknown table style 'fancy'"):
            get_table_style("fancy")


@pytest.mark.unit
class TestTableRendering:
    """Test whole tables through the markdown renderer."""

    def test_foo_bar(self, foo_bar_table) -> None:
        """Test a table whose cells are all three wide."""
        assert render_markdown([foo_bar_table]) == "| foo | bar |\n| --- | --- |\n| baz | bim |\n"

    def test_foo_bar_compact(self, foo_bar_table) -> None:
        """Test the compact style on the same table."""
        options = MarkdownRendererOptions(table_style="compact")
        assert render_markdown([foo_bar_table], options) == "|foo|bar|\n|---|---|\n|baz|bim|\n"

    def test_aligned(self, aligned_table) -> None:
        """Test padding and delimiter colons for aligned columns."""
        assert render_markdown([aligned_table]) == (
            "| Name  | Status | Count |\n"
            "| :---- | :----: | ----: |\n"
            "| alpha |   ok   |     7 |\n"
        )

    def test_widest_cell_in_body(self) -> None:
        """Test that a wide body cell widens the header."""
        table = Table(
            [
                TableHeader([TableRow([TableHeaderCell([Text("h")])])]),
                TableBody([TableRow([TableCell([Text("long value")])]), TableRow([TableCell([Text("x")])])]),
            ]
        )
        assert render_markdown([table]) == "| h          |\n| ---------- |\n| long value |\n| x          |\n"

    def test_ragged_rows_kept(self) -> None:
        """Test that short rows are not padded with extra cells."""
        table = Table(
            [
                TableHeader([TableRow([TableHeaderCell([Text("a")]), TableHeaderCell([Text("b")])])]),
                TableBody([TableRow([TableCell([Text("only")])])]),
            ]
        )
        assert render_markdown([table]) == "| a    | b   |\n| ---- | --- |\n| only |\n"

    def test_pipes_escaped(self) -> None:
        """Test that pipes inside cells are escaped and measured escaped."""
        table = Table([TableHeader([TableRow([TableHeaderCell([Text("a|b")])])])])
        assert render_markdown([table]) == "| a\\|b |\n| ---- |\n"

    def test_empty_table(self) -> None:
        """Test that a table without sections renders as nothing."""
        assert render_markdown([Table([])]) == "\n"
