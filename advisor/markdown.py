"""Minimal markdown-to-HTML rendering for chat bubbles.

The renderer is a fixed sequence of regex substitutions, not a parser. Each
rule sees the output of the previous one, so the order below is part of the
output format:

1. ``**bold**``      -> ``<strong>``
2. ``*italic*``      -> ``<em>``
3. ``- item`` lines  -> ``<li>``
4. runs of ``<li>``  -> wrapped in ``<ul>``
5. ``> quote`` lines -> ``<blockquote>`` (one per line, never merged)
6. newlines          -> ``<br/>``

Nothing is escaped; callers inject the result as trusted HTML.
"""

from __future__ import annotations

import re

from advisor.config import settings

LIST_CLASS = "list-disc pl-4 space-y-1"
BLOCKQUOTE_CLASS = "border-l-2 border-navy-light pl-3 italic opacity-80"

# Matches stop at "\r" as well as "\n", so CRLF text keeps "\r" outside the tags.
_BOLD = re.compile(r"\*\*([^\r\n]*?)\*\*")
_ITALIC = re.compile(r"\*([^\r\n]*?)\*")
_LIST_ITEM = re.compile(r"^- ([^\r\n]*)", re.MULTILINE)
_BLOCKQUOTE = re.compile(r"^> ([^\r\n]*)", re.MULTILINE)

# Greedy and dot-all: first <li> through last </li>, whatever lies between.
_SINGLE_LIST = re.compile(r"(<li>.*</li>)", re.DOTALL)
# One match per block of consecutive list-item lines.
_LIST_RUN = re.compile(r"^<li>.*</li>(?:\r?\n<li>.*</li>)*(?=\r?$)", re.MULTILINE)

_INLINE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_BOLD, r"<strong>\1</strong>"),
    (_ITALIC, r"<em>\1</em>"),
    (_LIST_ITEM, r"<li>\1</li>"),
)


def wrap_lists(html: str, single_list: bool = False) -> str:
    """Wrap ``<li>`` lines in ``<ul>`` containers.

    With ``single_list`` only one container is emitted, spanning from the
    first item to the last one in the text.
    """
    if single_list:
        return _SINGLE_LIST.sub(rf"<ul class='{LIST_CLASS}'>\1</ul>", html, count=1)
    return _LIST_RUN.sub(lambda m: f"<ul class='{LIST_CLASS}'>{m.group(0)}</ul>", html)


def render(text: str, *, single_list: bool | None = None) -> str:
    """Render constrained markdown into an HTML string. Never raises."""
    if single_list is None:
        single_list = settings.MARKDOWN_SINGLE_LIST

    html = text
    for pattern, replacement in _INLINE_RULES:
        html = pattern.sub(replacement, html)
    html = wrap_lists(html, single_list=single_list)
    html = _BLOCKQUOTE.sub(rf"<blockquote class='{BLOCKQUOTE_CLASS}'>\1</blockquote>", html)
    return html.replace("\n", "<br/>")
