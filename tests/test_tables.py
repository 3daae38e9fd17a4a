import pytest

from typing import List, Optional

from mdpreview.lines import RenderedBlock

from mdpreview.tables import (
    Alignment,
    split_table_row,
    is_delimiter_row,
    cell_alignment,
    render_table_at,
)


@pytest.mark.parametrize(
    "line, exp",
    [
        ("| a | b |", ["a", "b"]),
        ("a|b", ["a", "b"]),
        ("  | a |  ", ["a"]),
        ("|a||", ["a", ""]),
        ("| `x` | **y** |", ["`x`", "**y**"]),
    ],
)
def test_split_table_row(line: str, exp: List[str]) -> None:
    assert split_table_row(line) == exp


@pytest.mark.parametrize(
    "line, exp",
    [
        ("| :--- | ---: |", True),
        ("---|---", True),
        ("| :-: | - | --- |", True),
        # Single cell
        ("| --- |", False),
        # Not dashes
        ("| --- | abc |", False),
        ("| --- | |", False),
        # No pipes
        ("---", False),
    ],
)
def test_is_delimiter_row(line: str, exp: bool) -> None:
    assert is_delimiter_row(line) == exp


@pytest.mark.parametrize(
    "cell, exp",
    [
        (":-:", Alignment.center),
        (":---:", Alignment.center),
        ("--:", Alignment.right),
        (":--", Alignment.left),
        (": --", Alignment.left),
        ("---", None),
        ("abc", None),
        ("", None),
    ],
)
def test_cell_alignment(cell: str, exp: Optional[Alignment]) -> None:
    assert cell_alignment(cell) == exp


class TestRenderTableAt:
    def test_aligned_with_short_row(self) -> None:
        lines = ["| a | b |", "| :-- | --: |", "| 1 | 2 |", "| 3 |", "", "after"]
        assert render_table_at(lines, 0) == RenderedBlock(
            '<div class="md-table-wrap"><table class="md-table">'
            "<thead><tr>"
            '<th style="text-align:left;">a</th>'
            '<th style="text-align:right;">b</th>'
            "</tr></thead>"
            "<tbody>"
            "<tr>"
            '<td style="text-align:left;">1</td>'
            '<td style="text-align:right;">2</td>'
            "</tr>"
            "<tr>"
            '<td style="text-align:left;">3</td>'
            '<td style="text-align:right;"></td>'
            "</tr>"
            "</tbody>"
            "</table></div>",
            4,
        )

    def test_no_data_rows(self) -> None:
        assert render_table_at(["a | b", "--- | ---"], 0) == RenderedBlock(
            '<div class="md-table-wrap"><table class="md-table">'
            "<thead><tr><th>a</th><th>b</th></tr></thead>"
            "</table></div>",
            2,
        )

    def test_delimiter_has_more_columns(self) -> None:
        block = render_table_at(["a |", "--- | :-: | ---"], 0)
        assert block is not None
        assert (
            "<thead><tr><th>a</th>"
            '<th style="text-align:center;"></th>'
            "<th></th></tr></thead>"
        ) in block.html

    def test_header_has_more_columns(self) -> None:
        block = render_table_at(["a | b | c", ":-- | ---", "1 | 2 | 3 | 4"], 0)
        assert block is not None
        assert (
            '<thead><tr><th style="text-align:left;">a</th><th>b</th><th>c</th></tr></thead>'
            in block.html
        )
        # Excess cells are dropped
        assert (
            '<tbody><tr><td style="text-align:left;">1</td><td>2</td><td>3</td></tr></tbody>'
            in block.html
        )

    def test_inline_formatting_in_cells(self) -> None:
        block = render_table_at(["| **a** | `b` |", "| - | - |", "| *c* | d |"], 0)
        assert block is not None
        assert "<th><strong>a</strong></th><th><code>b</code></th>" in block.html
        assert "<td><em>c</em></td><td>d</td>" in block.html

    def test_rows_end_at_non_table_line(self) -> None:
        lines = ["a | b", "- | -", "1 | 2", "not a row", "3 | 4"]
        block = render_table_at(lines, 0)
        assert block is not None
        assert block.lines_consumed == 3

    def test_rows_end_at_code_placeholder(self) -> None:
        lines = ["a | b", "- | -", "1 | 2", "@@CODEBLOCK_0@@"]
        block = render_table_at(lines, 0)
        assert block is not None
        assert block.lines_consumed == 3

    def test_start_offset(self) -> None:
        block = render_table_at(["intro", "a | b", "- | -"], 1)
        assert block is not None
        assert block.lines_consumed == 2

    @pytest.mark.parametrize(
        "lines",
        [
            # No delimiter row at all
            ["a | b"],
            # Invalid delimiter row
            ["a | b", "c | d"],
            ["a | b", ""],
            # Header isn't a row
            ["a b", "--- | ---"],
        ],
    )
    def test_not_a_table(self, lines: List[str]) -> None:
        assert render_table_at(lines, 0) is None
