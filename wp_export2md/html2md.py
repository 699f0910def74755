"""
HTML to Markdown conversion for post bodies and excerpts.

The conversion is a fixed, ordered list of regex substitutions applied to
the whole string. Order matters: later rules see the output of earlier
ones, generic tag removal runs after every structural rule, and entities
are decoded only once no tags are left.
"""

import html
import re
from typing import List, Tuple

_I = re.IGNORECASE
_IS = re.IGNORECASE | re.DOTALL


def _heading(level: int) -> Tuple[re.Pattern, str]:
    return (
        re.compile(rf"<h{level}\b[^>]*>(.*?)</h{level}>", _I),
        "\n" + "#" * level + r" \1" + "\n",
    )


CONVERSION_RULES: List[Tuple[re.Pattern, str]] = [
    # Script and style blocks, content included
    (re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", _I), ""),
    (re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", _I), ""),
    # Headings
    *[_heading(level) for level in range(1, 7)],
    # Bold and italic
    (re.compile(r"<(strong|b)>(.*?)</(strong|b)>", _I), r"**\2**"),
    (re.compile(r"<(em|i)>(.*?)</(em|i)>", _I), r"*\2*"),
    # Links
    (
        re.compile(r"""<a\b[^>]*href=["']([^"']*)["'][^>]*>(.*?)</a>""", _I),
        r"[\2](\1)",
    ),
    # Images: src before alt, alt before src, src only
    (
        re.compile(
            r"""<img\b[^>]*src=["']([^"']*)["'][^>]*alt=["']([^"']*)["'][^>]*/?>""",
            _I,
        ),
        r"![\2](\1)",
    ),
    (
        re.compile(
            r"""<img\b[^>]*alt=["']([^"']*)["'][^>]*src=["']([^"']*)["'][^>]*/?>""",
            _I,
        ),
        r"![\1](\2)",
    ),
    (re.compile(r"""<img\b[^>]*src=["']([^"']*)["'][^>]*/?>""", _I), r"![](\1)"),
    # Lists
    (re.compile(r"<ul\b[^>]*>", _I), "\n"),
    (re.compile(r"</ul>", _I), "\n"),
    (re.compile(r"<ol\b[^>]*>", _I), "\n"),
    (re.compile(r"</ol>", _I), "\n"),
    (re.compile(r"<li\b[^>]*>(.*?)</li>", _I), r"- \1" + "\n"),
    # Blockquotes
    (re.compile(r"<blockquote\b[^>]*>(.*?)</blockquote>", _IS), "\n" + r"> \1" + "\n"),
    # Code
    (re.compile(r"<code\b[^>]*>(.*?)</code>", _I), r"`\1`"),
    (re.compile(r"<pre\b[^>]*>(.*?)</pre>", _IS), "\n```\n" + r"\1" + "\n```\n"),
    # Paragraphs and line breaks
    (re.compile(r"<p\b[^>]*>", _I), "\n"),
    (re.compile(r"</p>", _I), "\n"),
    (re.compile(r"<br\s*/?>", _I), "\n"),
    (re.compile(r"<hr\s*/?>", _I), "\n---\n"),
    # Whatever is left
    (re.compile(r"<[^>]+>"), ""),
]

EXCESS_NEWLINES = re.compile(r"\n{3,}")


def convert_html_to_markdown(html_content: str) -> str:
    """
    Converts an HTML fragment to Markdown.

    Args:
        html_content: The HTML content to convert (may be empty or None)

    Returns:
        The converted Markdown content
    """
    if not html_content:
        return ""

    md = html_content
    for pattern, replacement in CONVERSION_RULES:
        md = pattern.sub(replacement, md)

    md = html.unescape(md)

    md = EXCESS_NEWLINES.sub("\n\n", md)
    return md.strip()
