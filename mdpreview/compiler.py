"""
The markdown to HTML compiler.

.. autofunction:: mdpreview.compiler.convert

.. autofunction:: mdpreview.compiler.render_markdown

Neither function ever raises an exception: malformed markdown is always
rendered as *something* (typically as a plain paragraph). Specifically:

* An unterminated code fence is left as literal text.
* A table without a valid delimiter row is rendered as a paragraph.
* List items with inconsistent indentation end the list, with the remaining
  lines rendered as whatever block they form on their own.
* Links with ``javascript:`` targets are given the target ``#``.
"""

from typing import Optional

import logging

from mdpreview.fences import extract_code_fences

from mdpreview.escape import escape_html

from mdpreview.lines import split_lines

from mdpreview.blocks import render_blocks

from mdpreview.document import assemble_document, DEFAULT_TITLE


logger = logging.getLogger(__name__)


def render_markdown(source_text: Optional[str]) -> str:
    """
    Render a markdown document into a HTML fragment (i.e. the contents of the
    ``<body>`` only).
    """
    source = (source_text or "").replace("\r\n", "\n")

    source, fragments = extract_code_fences(source)
    lines = split_lines(escape_html(source))
    logger.debug(
        "Rendering %d lines with %d fenced code block(s)", len(lines), len(fragments)
    )

    return render_blocks(lines, fragments)


def convert(source_text: Optional[str], title: Optional[str] = DEFAULT_TITLE) -> str:
    """
    Compile a markdown document into a complete, standalone HTML document.

    Parameters
    ==========
    source_text : str
        The markdown source. Both ``\\n`` and ``\\r\\n`` line endings are
        accepted.
    title : str
        The document title (escaped automatically). Defaults to "Preview".
    """
    return assemble_document(render_markdown(source_text), title)
