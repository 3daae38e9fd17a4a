"""
HTML escaping of raw source text.

All prose in a markdown document is escaped exactly once, before any block or
inline parsing takes place. Later stages therefore only ever see (and emit)
escaped text and must never escape it a second time.
"""

ESCAPES = [
    # NB: '&' must come first so that the entities introduced by the later
    # replacements are not themselves escaped.
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
]


def escape_html(raw: str) -> str:
    """
    Escape the HTML special characters ``& < > " '`` in a string.

    Examples::

        >>> escape_html("<b>Fish & chips</b>")
        '&lt;b&gt;Fish &amp; chips&lt;/b&gt;'
    """
    for char, entity in ESCAPES:
        raw = raw.replace(char, entity)
    return raw


def unescape_html(escaped: str) -> str:
    """
    The exact inverse of :py:func:`escape_html`.

    Only the entities produced by :py:func:`escape_html` are recognised, so
    any other entity-like text in the original string survives a round trip.
    """
    for char, entity in reversed(ESCAPES):
        escaped = escaped.replace(entity, char)
    return escaped
