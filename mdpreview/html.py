"""
A tiny helper for generating HTML tags.
"""

from typing import Optional

from xml.sax.saxutils import quoteattr


def t(tag: str, body: Optional[str] = None, **attrs: Optional[str]) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("br")
        '<br/>'
        >>> t("a", "Click here", href="elsewhere.html")
        '<a href="elsewhere.html">Click here</a>'
        >>> t("td", "Hiya", class_="fancy")
        '<td class="fancy">Hiya</td>'
        >>> t("code", "x = 1", data__lang="python")
        '<code data-lang="python">x = 1</code>'

    Note that trailing underscores (``_``) are trimmed from attribute names and
    double underscores (``__``) are replaced with hyphens. Attributes whose
    value is None are omitted entirely.

    Attribute values are quoted and escaped; the body is inserted verbatim and
    so must already be valid (escaped) HTML.
    """
    attrs_str = "".join(
        " " + name.rstrip("_").replace("__", "-") + "=" + quoteattr(value)
        for name, value in attrs.items()
        if value is not None
    )

    if body is None:
        return f"<{tag}{attrs_str}/>"
    else:
        return f"<{tag}{attrs_str}>{body}</{tag}>"
