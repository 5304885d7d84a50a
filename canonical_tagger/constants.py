# canonical_tagger/constants.py
"""
Centralized constants for canonical-tagger.

This module is the single source of truth for:
- Which files are scanned
- How a canonical <link> is detected, stripped and inserted
- What a valid domain looks like
- Default run options

If the tag shape changes, update this file and utils/html.py plus
services/rewriter.py will follow.
"""

from __future__ import annotations

from typing import Final, Dict, Any
import re

APP_NAME: Final[str] = "canonical-tagger"
LOGGER_NAME: Final[str] = "canonical_tagger"

# ---- File discovery --------------------------------------------------------

HTML_GLOB: Final[str] = "*.html"
HTML_SUFFIX: Final[str] = ".html"

# ---- URL construction ------------------------------------------------------

URL_SCHEME: Final[str] = "https"

# label(.label)+.tld, scheme and trailing slash already removed
DOMAIN_RX: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
SCHEME_PREFIX_RX: Final[re.Pattern[str]] = re.compile(r"^https?://", re.IGNORECASE)

# ---- Canonical tag ---------------------------------------------------------

# <link ... rel="canonical" ...> in any attribute order, single or double quotes.
# The attribute name must stand alone (not data-rel) and the value is case-sensitive.
CANONICAL_TAG_PATTERN: Final[str] = (
    r"""<\s*link\b[^>]*?(?<=\s)rel\s*=\s*(?P<q>["'])(?-i:canonical)(?P=q)[^>]*>"""
)

CANONICAL_TEMPLATE: Final[str] = '<link rel="canonical" href="{url}">'

# Inserted tag lives on its own line under </title>
CANONICAL_INDENT: Final[str] = "    "

TITLE_CLOSE_RX: Final[re.Pattern[str]] = re.compile(r"</\s*title\s*>", re.IGNORECASE)

# ---- Defaults --------------------------------------------------------------

DEFAULT_ENCODING: Final[str] = "utf-8"

DEFAULT_OPTIONS: Final[Dict[str, Any]] = {
    "include_base_path": False,
    "dry_run": False,
    "backup": False,
    "encoding": DEFAULT_ENCODING,
}

POLICY_DESCRIPTIONS: Final[Dict[str, str]] = {
    "Skip": "Skip files that already have a canonical tag",
    "Replace": "Replace existing canonical tags with a fresh one",
    "Remove": "Remove canonical tags without adding new ones",
}
