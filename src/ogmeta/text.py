# src/ogmeta/text.py
"""Markup helpers: tag stripping, excerpt trimming and avatar parsing."""

import logging
import warnings
from typing import Optional

from bs4 import BeautifulSoup, FeatureNotFound

from ogmeta.constants import (
    DEFAULT_EXCERPT_LENGTH,
    DEFAULT_EXCERPT_MORE,
    DEFAULT_HTML_PARSER,
    FALLBACK_HTML_PARSER,
    STRIP_WITH_CONTENT_TAGS,
)

logger = logging.getLogger(__name__)


def _soup(markup: str, parser: str) -> BeautifulSoup:
    # Short strings that look like URLs or paths make bs4 warn
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        return BeautifulSoup(markup, parser)


def strip_all_tags(text: Optional[str]) -> str:
    """Remove all markup, including script and style contents.

    Entities are decoded and surrounding whitespace is trimmed.
    """
    if not text:
        return ""

    soup = _soup(text, FALLBACK_HTML_PARSER)
    for element in soup.find_all(list(STRIP_WITH_CONTENT_TAGS)):
        element.decompose()

    return soup.get_text().strip()


def trim_words(
    text: Optional[str],
    num_words: int = DEFAULT_EXCERPT_LENGTH,
    more: str = DEFAULT_EXCERPT_MORE,
) -> str:
    """Strip markup and cut ``text`` to ``num_words`` words.

    ``more`` is appended only when words were dropped.
    """
    words = strip_all_tags(text).split()
    if len(words) > num_words:
        return " ".join(words[:num_words]) + more
    return " ".join(words)


def html_parser_available(parser: str = DEFAULT_HTML_PARSER) -> bool:
    """Whether BeautifulSoup can build trees with ``parser``."""
    try:
        _soup("", parser)
    except FeatureNotFound:
        return False
    return True


def extract_single_img_src(markup: Optional[str], parser: str = DEFAULT_HTML_PARSER) -> Optional[str]:
    """Return the ``src`` of the only ``<img>`` in ``markup``.

    Returns None when the parser is not installed, when there is no image
    or more than one, or when the image has no ``src``.
    """
    if not markup:
        return None

    if not html_parser_available(parser):
        logger.debug(f"HTML parser '{parser}' unavailable, skipping image extraction")
        return None

    images = _soup(markup, parser).find_all("img")
    if len(images) != 1:
        logger.debug(f"Expected exactly one <img>, found {len(images)}")
        return None

    return images[0].get("src") or None
