"""Main-article extraction with a readability heuristic and a full-body fallback."""

from __future__ import annotations

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from readability import Document
from readability.readability import Unparseable

from models import ExtractedContent

LOGGER = logging.getLogger(__name__)

_LINK_ATTRS = ("href", "src")


def extract_article(html: str, base_url: str) -> ExtractedContent:
    """Return the article title and HTML for a page.

    The readability heuristic runs first. When it yields nothing, the raw
    document title and full body are used instead, so extraction never
    fails on odd markup; degraded output beats no output.
    """
    result = _extract_readable(html, base_url)
    if result is not None:
        return result

    LOGGER.warning("Readability found no article in %s, using full page body", base_url)
    return _extract_full_body(html, base_url)


def _extract_readable(html: str, base_url: str) -> ExtractedContent | None:
    try:
        doc = Document(html, url=base_url)
        content_html = doc.summary(html_partial=True)
        title = doc.short_title()
    except Unparseable as exc:
        LOGGER.warning("Readability could not parse %s: %s", base_url, exc)
        return None

    if not _has_text(content_html):
        return None

    return ExtractedContent(title=(title or "").strip(), content_html=content_html)


def _extract_full_body(html: str, base_url: str) -> ExtractedContent:
    """Raw document title and body, with relative links made absolute."""
    soup = BeautifulSoup(html, "html.parser")

    title = ""
    if soup.title is not None and soup.title.string:
        title = soup.title.string.strip()

    for attr in _LINK_ATTRS:
        for tag in soup.find_all(attrs={attr: True}):
            tag[attr] = urljoin(base_url, tag[attr])

    body = soup.body
    content_html = body.decode_contents() if body is not None else ""
    return ExtractedContent(title=title, content_html=content_html)


def _has_text(content_html: str | None) -> bool:
    if not content_html:
        return False
    return bool(BeautifulSoup(content_html, "html.parser").get_text(strip=True))
