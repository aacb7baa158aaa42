# src/ogmeta/escaping.py
"""Escaping of values written into HTML attributes."""

import re
from typing import Iterable, Optional

from markupsafe import escape

from ogmeta.constants import ALLOWED_URL_PROTOCOLS

# Characters kept by esc_url; anything else is dropped
_URL_DISALLOWED = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\U0010ffff]", re.IGNORECASE)

# Encoded CR/LF, removed repeatedly so nested sequences cannot survive
_ENCODED_NEWLINE = re.compile(r"%0[ad]", re.IGNORECASE)

# Bare ampersands, i.e. not already starting an entity
_BARE_AMPERSAND = re.compile(r"&(?!(?:#\d+|#x[0-9a-f]+|[a-z][a-z0-9]*);)", re.IGNORECASE)

_SCHEME = re.compile(r"^([a-z][a-z0-9+.\-]*):", re.IGNORECASE)

_PHP_PATH = re.compile(r"^[a-z0-9-]+?\.php", re.IGNORECASE)


def esc_attr(value) -> str:
    """Escape ``value`` for use inside a double-quoted HTML attribute."""
    if value is None:
        return ""
    return str(escape(str(value)))


def esc_url(url: Optional[str], protocols: Optional[Iterable[str]] = None) -> str:
    """Sanitize and escape a URL for display in an HTML attribute.

    Returns an empty string when nothing usable is left or the URL uses a
    scheme outside ``protocols``.
    """
    if not url:
        return ""

    allowed = frozenset(p.lower() for p in protocols) if protocols else ALLOWED_URL_PROTOCOLS

    url = str(url).lstrip().replace(" ", "%20")
    url = _URL_DISALLOWED.sub("", url)
    if not url:
        return ""

    if not url.lower().startswith("mailto:"):
        while _ENCODED_NEWLINE.search(url):
            url = _ENCODED_NEWLINE.sub("", url)

    url = url.replace(";//", "://")
    if not url:
        return ""

    # No scheme and not relative: assume a bare host
    if ":" not in url and url[0] not in "/#?" and not _PHP_PATH.match(url):
        url = "http://" + url

    url = _BARE_AMPERSAND.sub("&amp;", url)
    url = url.replace("&amp;", "&#038;").replace("'", "&#039;")

    if url[0] != "/":
        match = _SCHEME.match(url)
        if match and match.group(1).lower() not in allowed:
            return ""

    return url
