"""
Utilities shared by the line-oriented block renderers.

Block renderers are pure functions over an immutable sequence of (escaped)
lines. A renderer which recognises a block starting at a given index returns a
:py:class:`RenderedBlock` giving the generated HTML and the number of lines
consumed; the caller is responsible for advancing past them.
"""

from typing import List, NamedTuple, Sequence

import re


LINE_BREAK_RE = re.compile(r"\r?\n")

LEADING_WHITESPACE_RE = re.compile(r"\s*")


class RenderedBlock(NamedTuple):
    html: str
    """The rendered HTML fragment."""

    lines_consumed: int
    """The number of source lines (always at least one) making up the block."""


def split_lines(text: str) -> List[str]:
    """Split on line boundaries, accepting both ``\\n`` and ``\\r\\n``."""
    return LINE_BREAK_RE.split(text)


def is_blank(line: str) -> bool:
    return not line.strip()


def leading_spaces(line: str) -> int:
    """Count the leading whitespace characters of a line."""
    match = LEADING_WHITESPACE_RE.match(line)
    assert match is not None  # Always matches (possibly empty)
    return len(match.group(0))


def dedent_lines(lines: Sequence[str], count: int) -> List[str]:
    """
    Remove up to ``count`` leading whitespace characters from each line. Lines
    with less indentation than this have all of it removed.
    """
    return [line[min(count, leading_spaces(line)) :] for line in lines]
