# canonical_tagger/utils/html.py
"""
Lightweight HTML helpers for canonical-tagger.

String-based (regex) utilities to:
- Detect a <link rel="canonical"> element
- Strip every canonical element without leaving blank lines behind
- Insert a fresh canonical element after the first </title>
- Strip only the exact tag shape this tool inserts (undo)

No DOM is built here; untouched regions of the document keep their bytes,
including line endings.
"""

from __future__ import annotations

from typing import List
import re

from .. import constants
from ..errors import MissingTitleError

_CANONICAL_RX = re.compile(constants.CANONICAL_TAG_PATTERN, re.IGNORECASE)

# Tag alone on its line: drop indentation and the line break with it
_CANONICAL_LINE_RX = re.compile(
    r"^[ \t]*" + _CANONICAL_RX.pattern + r"[ \t]*(?:\r\n|\n|\r)",
    re.IGNORECASE | re.MULTILINE,
)

_HREF_RX = re.compile(r"""\bhref\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)


def detect_newline(text: str) -> str:
    if "\r\n" in text:
        return "\r\n"
    if "\r" in text and "\n" not in text:
        return "\r"
    return "\n"


def canonical_tag(url: str) -> str:
    return constants.CANONICAL_TEMPLATE.format(url=url)


def has_canonical(html: str) -> bool:
    return _CANONICAL_RX.search(html) is not None


def count_canonical(html: str) -> int:
    return sum(1 for _ in _CANONICAL_RX.finditer(html))


def canonical_hrefs(html: str) -> List[str]:
    """href values of every canonical element, in document order."""
    out: List[str] = []
    for m in _CANONICAL_RX.finditer(html):
        h = _HREF_RX.search(m.group(0))
        out.append(h.group(2).strip() if h else "")
    return out


def strip_canonical(html: str) -> str:
    """
    Remove every canonical <link>, whatever the attribute order or quoting.

    Whole-line tags go first so repeated runs do not pile up blank lines;
    anything left is an inline tag and is cut out in place.
    """
    html = _CANONICAL_LINE_RX.sub("", html)
    return _CANONICAL_RX.sub("", html)


def insert_canonical(html: str, url: str) -> str:
    """
    Put <link rel="canonical" href="url"> on its own indented line right after
    the first </title>. Raises MissingTitleError when there is no anchor.
    """
    m = constants.TITLE_CLOSE_RX.search(html)
    if not m:
        raise MissingTitleError()
    nl = detect_newline(html)
    ins = f"{nl}{constants.CANONICAL_INDENT}{canonical_tag(url)}"
    return html[:m.end()] + ins + html[m.end():]


def _inserted_rx(domain: str) -> re.Pattern[str]:
    esc = re.escape(domain)
    return re.compile(
        rf'(?:\r\n|\n|\r)?[ \t]*<link rel="canonical" href="{constants.URL_SCHEME}://{esc}/[^"]*">'
    )


def strip_inserted(html: str, domain: str) -> str:
    """
    Undo helper: remove only tags that look exactly like the ones
    insert_canonical() writes for this domain, together with the line break
    that was added in front of them.
    """
    return _inserted_rx(domain).sub("", html)
