"""
Wrapping of a rendered HTML fragment into a complete, standalone document.

The generated document contains a fixed stylesheet which expects the embedding
context to define the following CSS custom properties:

``--text``
    The body text colour.
``--card``
    The page background colour.
``--border``
    The colour of table, blockquote and code block borders.
``--accent``
    The link colour.
"""

from typing import Optional

from mdpreview.templates import document_template


DEFAULT_TITLE = "Preview"


def assemble_document(body: str, title: Optional[str] = DEFAULT_TITLE) -> str:
    """
    Produce a complete HTML document with the supplied body fragment inserted
    verbatim. The title is escaped; when empty or None, ``"Preview"`` is used.
    """
    return document_template.render(title=title or DEFAULT_TITLE, body=body)
