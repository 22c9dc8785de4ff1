"""HTML to plain text reduction for prompt context."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment

# Elements whose contents are never prose.
_DROP_TAGS = ["script", "style", "noscript", "template"]

_WHITESPACE_RE = re.compile(r"\s+")


def html_to_text(markup: str, max_chars: int) -> str:
    """Strip markup from an HTML document and bound the result.

    Script, style, noscript and template elements are dropped with their
    contents, as are comments. The remaining text has entities decoded and
    whitespace runs collapsed to a single space, and is cut to exactly
    ``max_chars`` characters when longer.
    """
    if max_chars <= 0:
        raise ValueError(f"max_chars must be positive, got {max_chars}")

    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup(_DROP_TAGS):
        tag.decompose()
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    text = soup.get_text(" ")
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return text[:max_chars]
