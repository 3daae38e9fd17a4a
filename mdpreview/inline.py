"""
Rendering of inline markdown spans (code, links, bold and italic text).

Every function in this module operates on *already escaped* text and is
applied to one logical span of text at a time (a heading, a paragraph, a list
item's first line, a table cell...).

The stages of :py:func:`render_inline` must run in the following order:

1. :py:func:`extract_code_spans` -- code spans are swapped for placeholders so
   that their contents are protected from all of the following stages.
2. :py:func:`render_links`
3. :py:func:`render_bold`
4. :py:func:`render_italic` -- after bold, so the asterisks of a ``**bold**``
   span are already consumed.
5. :py:func:`restore_code_spans`
"""

from typing import List, Tuple

import re

import logging

from mdpreview.escape import unescape_html

from mdpreview.html import t


logger = logging.getLogger(__name__)


CODE_SPAN_RE = re.compile(r"`([^`]+)`")

CODE_SPAN_PLACEHOLDER_RE = re.compile(r"@@CODESPAN_(\d+)@@")

LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

UNSAFE_HREF_RE = re.compile(r"javascript:", re.IGNORECASE)

# Browsers ignore tabs and newlines anywhere within a URL and strip leading
# control characters and spaces before interpreting its scheme.
URL_IGNORED_CHARS_RE = re.compile(r"[\t\r\n]")

URL_LEADING_CONTROL_RE = re.compile(r"\A[\x00-\x20]+")

BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")

ITALIC_RE = re.compile(r"\*([^*]+)\*")


def extract_code_spans(text: str) -> Tuple[str, List[str]]:
    """
    Replace every inline code span with a ``@@CODESPAN_<n>@@`` placeholder.

    Returns the modified text and the list of rendered ``<code>`` elements,
    indexed by placeholder number.
    """
    spans: List[str] = []

    def substitute(match: "re.Match[str]") -> str:
        spans.append(t("code", match.group(1)))
        return f"@@CODESPAN_{len(spans) - 1}@@"

    return (CODE_SPAN_RE.sub(substitute, text), spans)


def restore_code_spans(text: str, spans: List[str]) -> str:
    """
    Inverse of :py:func:`extract_code_spans`. Placeholder-like text with no
    corresponding span (e.g. typed by the author) is left untouched.
    """

    def substitute(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        return spans[index] if index < len(spans) else match.group(0)

    return CODE_SPAN_PLACEHOLDER_RE.sub(substitute, text)


def safe_href(url: str) -> str:
    """
    Sanitise an (escaped) link target: empty and ``javascript:`` URLs are
    replaced by ``#``. The scheme is checked the way a browser would read it,
    so ``java<tab>script:`` and ``\\x01javascript:`` are caught too.
    """
    href = url.strip()
    scheme_text = URL_LEADING_CONTROL_RE.sub(
        "", URL_IGNORED_CHARS_RE.sub("", href)
    )
    if not href or UNSAFE_HREF_RE.match(scheme_text):
        if href:
            logger.debug("Replaced unsafe link target %r with '#'", href)
        return "#"
    return href


def render_links(text: str) -> str:
    """
    Replace ``[label](url)`` with an anchor which opens in a new window.
    """
    return LINK_RE.sub(
        lambda match: t(
            "a",
            match.group(1),
            # NB: the URL is already escaped; unescape it so that quoteattr
            # doesn't escape it a second time.
            href=unescape_html(safe_href(match.group(2))),
            target="_blank",
            rel="noopener noreferrer",
        ),
        text,
    )


def render_bold(text: str) -> str:
    return BOLD_RE.sub(lambda match: t("strong", match.group(1)), text)


def render_italic(text: str) -> str:
    return ITALIC_RE.sub(lambda match: t("em", match.group(1)), text)


def render_inline(text: str) -> str:
    """
    Render the inline markdown within a single span of escaped text into HTML.

    Examples::

        >>> render_inline("Use `**x**` or **y**")
        'Use <code>**x**</code> or <strong>y</strong>'
    """
    text, spans = extract_code_spans(text)
    text = render_links(text)
    text = render_bold(text)
    text = render_italic(text)
    return restore_code_spans(text, spans)
