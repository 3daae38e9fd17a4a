"""
GFM-style pipe tables.

A table is a header row immediately followed by a delimiter row, then any
number of data rows::

    | Step | Time |
    | :--- | ---: |
    | Boil | 10m  |

The delimiter row confirms the table and sets each column's alignment:

* ``:---:`` -- centered
* ``---:`` -- right aligned
* ``:---`` -- left aligned
* ``---`` -- no alignment given

Rows with fewer cells than the table has columns are padded with empty cells.
"""

from typing import List, Optional, Sequence

import re

from enum import Enum

from mdpreview.html import t

from mdpreview.inline import render_inline

from mdpreview.fences import code_placeholder_index

from mdpreview.lines import RenderedBlock, is_blank


DELIMITER_CELL_RE = re.compile(r":?-+:?")


class Alignment(Enum):
    left = "left"
    right = "right"
    center = "center"


def split_table_row(line: str) -> List[str]:
    """
    Split a table row into its (whitespace-trimmed) cells. A single leading
    and trailing pipe are optional.
    """
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def is_delimiter_row(line: str) -> bool:
    if "|" not in line:
        return False
    cells = split_table_row(line)
    return len(cells) >= 2 and all(
        DELIMITER_CELL_RE.fullmatch(cell) is not None for cell in cells
    )


def cell_alignment(cell: str) -> Optional[Alignment]:
    """Determine the alignment specified by a delimiter row cell."""
    cell = re.sub(r"\s+", "", cell)
    if DELIMITER_CELL_RE.fullmatch(cell) is None:
        return None

    left = cell.startswith(":")
    right = cell.endswith(":")
    if left and right:
        return Alignment.center
    elif right:
        return Alignment.right
    elif left:
        return Alignment.left
    else:
        return None


def render_cell(tag: str, cell: str, alignment: Optional[Alignment]) -> str:
    return t(
        tag,
        render_inline(cell),
        style=f"text-align:{alignment.value};" if alignment is not None else None,
    )


def render_row(
    tag: str, cells: Sequence[str], alignments: Sequence[Optional[Alignment]]
) -> str:
    return t(
        "tr",
        "".join(
            render_cell(tag, cells[column] if column < len(cells) else "", alignment)
            for column, alignment in enumerate(alignments)
        ),
    )


def is_table_row(line: str) -> bool:
    return not is_blank(line) and "|" in line and code_placeholder_index(line) is None


def render_table_at(lines: Sequence[str], start: int) -> Optional[RenderedBlock]:
    """
    Attempt to render a table whose header row is ``lines[start]``.

    Returns None (having consumed nothing) if no valid table starts here.
    """
    if start + 1 >= len(lines):
        return None

    header = lines[start]
    delimiter = lines[start + 1]
    if (
        "|" not in header
        or not is_delimiter_row(delimiter)
        or code_placeholder_index(header) is not None
        or code_placeholder_index(delimiter) is not None
    ):
        return None

    header_cells = split_table_row(header)
    delimiter_cells = split_table_row(delimiter)
    num_columns = max(len(header_cells), len(delimiter_cells))
    alignments = [
        cell_alignment(delimiter_cells[column])
        if column < len(delimiter_cells)
        else None
        for column in range(num_columns)
    ]

    end = start + 2
    rows: List[str] = []
    while end < len(lines) and is_table_row(lines[end]):
        rows.append(render_row("td", split_table_row(lines[end]), alignments))
        end += 1

    body = t("thead", render_row("th", header_cells, alignments))
    if rows:
        body += t("tbody", "".join(rows))

    return RenderedBlock(
        t("div", t("table", body, class_="md-table"), class_="md-table-wrap"),
        end - start,
    )
