"""
The (recursive) block-level renderer.

The escaped markdown source is processed one line at a time. At each line the
following kinds of block are tried in turn, the first to match being rendered:

1. Blank lines are skipped.
2. Code block placeholder lines (see :py:mod:`mdpreview.fences`) are replaced
   with the corresponding pre-rendered code block.
3. ATX headings (``#`` to ``######``).
4. Blockquotes: a run of lines starting with ``>``. Each line of the quote
   becomes a line break within a single ``<blockquote>``; nested blocks (lists
   etc.) are not supported within quotes.
5. Tables (see :py:mod:`mdpreview.tables`).
6. Lists.
7. Paragraphs: everything else, up to the next blank line.

Lists
=====

A list is a run of items sharing the same 'signature': the indentation of the
marker and the marker type (``-`` or ``*`` for unordered lists, ``1.`` etc.
for ordered lists). A line with a different signature ends the list.

The lines following an item's marker which are indented further than the
marker belong to that item. These are dedented by the marker indentation plus
two and rendered recursively as blocks in their own right, which is how nested
lists (and paragraphs, tables etc.) within list items are supported. For
example::

    1. First
       - Sub A
       - Sub B
    2. Second

Produces an ordered list whose first item contains a nested unordered list.

A blank line within an item only continues the item when the next non-blank
line is still indented further than the marker and isn't the next item of the
list.

Lists may be nested up to :py:data:`MAX_NESTING_DEPTH` deep; the contents of
items nested any deeper are rendered as a single paragraph.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

import re

from enum import Enum

from mdpreview.html import t

from mdpreview.inline import render_inline

from mdpreview.fences import CodeFragment, code_placeholder_index

from mdpreview.tables import render_table_at

from mdpreview.lines import (
    RenderedBlock,
    is_blank,
    leading_spaces,
    dedent_lines,
)


HEADING_RE = re.compile(r"(#{1,6})\s+(.+)")

# NB: The source is escaped before block parsing so the '>' quote marker
# appears as '&gt;'.
BLOCKQUOTE_RE = re.compile(r"\s*&gt;\s?")

LIST_ITEM_RE = re.compile(r"(\s*)([-*]|\d+\.)\s+(.+)")

MAX_NESTING_DEPTH = 100
"""
Lists nested within more than this many list items have the content of their
innermost items rendered as a single paragraph.
"""


class ListType(Enum):
    ordered = "ol"
    unordered = "ul"


class ListMarker(NamedTuple):
    indent: int
    type: ListType
    text: str
    """The text following the marker."""


class ListItem(NamedTuple):
    indent: int
    type: ListType
    head_text: str
    """The text on the same line as the item's marker."""

    child_lines: List[str]
    """The (not yet dedented) lines nested within this item."""


def match_list_item(line: str) -> Optional[ListMarker]:
    match = LIST_ITEM_RE.fullmatch(line)
    if match is None:
        return None
    indent, marker, text = match.groups()
    return ListMarker(
        len(indent),
        ListType.ordered if marker.endswith(".") else ListType.unordered,
        text,
    )


def is_sibling_item(line: str, indent: int, type: ListType) -> bool:
    marker = match_list_item(line)
    return marker is not None and marker.indent == indent and marker.type == type


def collect_list_item(
    lines: Sequence[str], start: int, marker: ListMarker
) -> Tuple[ListItem, int]:
    """
    Collect the list item whose marker is at ``lines[start]``.

    Returns the item and the index of the first line after it.
    """
    end = start + 1
    child_lines: List[str] = []
    while end < len(lines):
        line = lines[end]
        if is_blank(line):
            # Only keep blank lines within the item when the next non-blank
            # line is still part of it.
            next_non_blank = end + 1
            while next_non_blank < len(lines) and is_blank(lines[next_non_blank]):
                next_non_blank += 1
            if (
                next_non_blank >= len(lines)
                or is_sibling_item(lines[next_non_blank], marker.indent, marker.type)
                or leading_spaces(lines[next_non_blank]) <= marker.indent
            ):
                end = next_non_blank
                break
            child_lines.append("")
            end += 1
            continue

        if is_sibling_item(line, marker.indent, marker.type):
            break
        if leading_spaces(line) <= marker.indent:
            break
        child_lines.append(line)
        end += 1

    return (ListItem(marker.indent, marker.type, marker.text, child_lines), end)


def render_flattened_children(child_lines: Sequence[str]) -> str:
    """
    Render the children of an item nested beyond :py:data:`MAX_NESTING_DEPTH`
    as a single paragraph.
    """
    return t(
        "p",
        render_inline(
            "<br/>".join(line.strip() for line in child_lines if not is_blank(line))
        ),
    )


def render_list_item(
    item: ListItem, fragments: Sequence[CodeFragment], depth: int = 0
) -> str:
    head = render_inline(item.head_text)
    children = ""
    if item.child_lines:
        if depth >= MAX_NESTING_DEPTH:
            children = render_flattened_children(item.child_lines)
        else:
            children = render_blocks(
                dedent_lines(item.child_lines, item.indent + 2),
                fragments,
                depth + 1,
            )
    if children:
        return t("li", f"{head}\n{children}")
    else:
        return t("li", head)


def render_list_at(
    lines: Sequence[str],
    start: int,
    fragments: Sequence[CodeFragment],
    depth: int = 0,
) -> Optional[RenderedBlock]:
    """
    Attempt to render a list whose first item marker is at ``lines[start]``.

    Returns None (having consumed nothing) if that line isn't a list item.
    The ``depth`` gives the number of enclosing list items.
    """
    first = match_list_item(lines[start])
    if first is None:
        return None

    items: List[str] = []
    end = start
    while end < len(lines):
        marker = match_list_item(lines[end])
        if (
            marker is None
            or marker.indent != first.indent
            or marker.type != first.type
        ):
            break
        item, end = collect_list_item(lines, end, marker)
        items.append(render_list_item(item, fragments, depth))

    return RenderedBlock(t(first.type.value, "".join(items)), end - start)


def render_code_placeholder_at(
    lines: Sequence[str], start: int, fragments: Sequence[CodeFragment]
) -> Optional[RenderedBlock]:
    index = code_placeholder_index(lines[start])
    if index is None:
        return None
    # NB: A placeholder with no corresponding fragment renders as nothing.
    html = fragments[index].html if index < len(fragments) else ""
    return RenderedBlock(html, 1)


def render_heading_at(lines: Sequence[str], start: int) -> Optional[RenderedBlock]:
    match = HEADING_RE.fullmatch(lines[start])
    if match is None:
        return None
    hashes, text = match.groups()
    return RenderedBlock(t(f"h{len(hashes)}", render_inline(text)), 1)


def render_blockquote_at(
    lines: Sequence[str], start: int
) -> Optional[RenderedBlock]:
    end = start
    quoted: List[str] = []
    while end < len(lines):
        match = BLOCKQUOTE_RE.match(lines[end])
        if match is None:
            break
        quoted.append(lines[end][match.end() :])
        end += 1

    if not quoted:
        return None
    return RenderedBlock(
        t("blockquote", render_inline("<br/>".join(quoted))), end - start
    )


def render_paragraph_at(lines: Sequence[str], start: int) -> RenderedBlock:
    end = start
    while end < len(lines) and not is_blank(lines[end]):
        end += 1
    return RenderedBlock(
        t("p", render_inline("<br/>".join(lines[start:end]))), end - start
    )


def render_block_at(
    lines: Sequence[str],
    start: int,
    fragments: Sequence[CodeFragment],
    depth: int = 0,
) -> RenderedBlock:
    """
    Render the (non-blank) block starting at ``lines[start]``.
    """
    return (
        render_code_placeholder_at(lines, start, fragments)
        or render_heading_at(lines, start)
        or render_blockquote_at(lines, start)
        or render_table_at(lines, start)
        or render_list_at(lines, start, fragments, depth)
        or render_paragraph_at(lines, start)
    )


def render_blocks(
    lines: Sequence[str], fragments: Sequence[CodeFragment], depth: int = 0
) -> str:
    """
    Render a series of escaped markdown lines into a HTML fragment, one block
    per line of output.

    Parameters
    ==========
    lines : [str, ...]
        The escaped markdown source, one string per line.
    fragments : [CodeFragment, ...]
        The rendered code blocks referenced by any placeholders in the
        source, as produced by
        :py:func:`mdpreview.fences.extract_code_fences`.
    depth : int
        The number of list items enclosing these lines.
    """
    blocks: List[str] = []
    position = 0
    while position < len(lines):
        if is_blank(lines[position]):
            position += 1
            continue

        block = render_block_at(lines, position, fragments, depth)
        blocks.append(block.html)
        position += block.lines_consumed

    return "\n".join(blocks)
