"""
A lightweight markdown to HTML compiler for rendering short, user-authored
instructions (recipes, procedure notes, help text) as a standalone, previewable
HTML document.

Supported syntax
================

* Headings (``#`` to ``######``)
* Paragraphs (single newlines become line breaks)
* Blockquotes (``> ...``)
* Ordered (``1.``) and unordered (``-`` or ``*``) lists, nested by indentation
* GFM-style pipe tables with column alignment
* Fenced code blocks (with an optional language tag)
* Inline code spans, links, ``**bold**`` and ``*italic*`` text

All other text, including any HTML, is escaped.

API
===

.. autofunction:: convert

.. autofunction:: render_markdown
"""

from mdpreview.compiler import convert, render_markdown

__all__ = ["convert", "render_markdown"]
