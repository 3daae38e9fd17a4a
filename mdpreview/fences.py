"""
Extraction of fenced code blocks.

Fenced code blocks are removed from the raw (unescaped) markdown source before
anything else happens so that their contents are never interpreted as
markdown. Each block is rendered to HTML immediately and replaced in the
source by a placeholder line of the form ``@@CODEBLOCK_<n>@@`` which the block
renderer later substitutes back.

For example::

    Before

    ```python
    print("**hi**")
    ```

Becomes the source text::

    Before

    <blank line>
    @@CODEBLOCK_0@@
    <blank line>

Along with the code fragment
``<pre class="md-code"><code data-lang="python">print(&quot;**hi**&quot;)
</code></pre>``.

A fence which is never closed is not treated as a code block: the backticks
are left in the text as-is.
"""

from typing import List, NamedTuple, Optional, Tuple

import re

import logging

from mdpreview.escape import escape_html

from mdpreview.html import t


logger = logging.getLogger(__name__)


FENCE_RE = re.compile(r"```([^\n]*)\n(.*?)```", re.DOTALL)
"""
A fence: three backticks, an optional language tag on the rest of the line,
then everything (non-greedily) up to the next three backticks.
"""

CODE_PLACEHOLDER_RE = re.compile(r"@@CODEBLOCK_(\d+)@@")


class CodeFragment(NamedTuple):
    index: int
    """The index used in this fragment's placeholder token."""

    html: str
    """The rendered ``<pre>`` block."""


def code_placeholder(index: int) -> str:
    return f"@@CODEBLOCK_{index}@@"


def code_placeholder_index(line: str) -> Optional[int]:
    """
    If the supplied line consists only of a code block placeholder (optionally
    surrounded by whitespace), return the fragment index it refers to.
    Otherwise returns None.
    """
    match = CODE_PLACEHOLDER_RE.fullmatch(line.strip())
    if match is None:
        return None
    return int(match.group(1))


def render_code_fragment(code: str, lang: str = "") -> str:
    """
    Render a (raw, unescaped) code listing as a ``<pre>`` block. The
    ``data-lang`` attribute is only included when a language is given.
    """
    return t(
        "pre",
        t("code", escape_html(code), data__lang=lang or None),
        class_="md-code",
    )


def extract_code_fences(source: str) -> Tuple[str, List[CodeFragment]]:
    """
    Extract and render all fenced code blocks from a raw markdown source.

    Returns
    =======
    (source, fragments)
        The source with each fenced block replaced by a placeholder line
        (surrounded by newlines so that it forms a block of its own), and the
        rendered fragments in the order they were found.
    """
    fragments: List[CodeFragment] = []

    def substitute(match: "re.Match[str]") -> str:
        lang, code = match.groups()
        fragment = CodeFragment(
            len(fragments), render_code_fragment(code, lang.strip())
        )
        fragments.append(fragment)
        return f"\n{code_placeholder(fragment.index)}\n"

    source = FENCE_RE.sub(substitute, source)

    if "```" in source:
        logger.debug("Unterminated code fence left as literal text")

    return (source, fragments)
