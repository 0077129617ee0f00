"""One capture run: fetch, extract, convert, slug, write."""

from __future__ import annotations

import logging
from pathlib import Path

from document_writer import write_document
from fetcher import fetch_html
from markdown_converter import convert_article
from models import CaptureResult
from slugs import make_slug

DEFAULT_TARGET_LANG = "zh"


def capture_url(url: str, lang: str = DEFAULT_TARGET_LANG, content_root: Path | None = None) -> CaptureResult:
    """Capture url as a translation-ready document directory.

    Stages run strictly in sequence and any failure aborts the run. Nothing
    touches the filesystem until the page has been fetched and converted.
    """
    html = fetch_html(url)

    article = convert_article(html, url)
    if not article.title:
        logging.warning("No title found for %s, deriving slug from the URL", url)

    slug = make_slug(article.title or url)
    logging.info("Capturing %s as slug=%s lang=%s", url, slug, lang)

    result = write_document(
        slug=slug,
        title=article.title,
        markdown=article.markdown,
        source_url=url,
        target_lang=lang,
        root=content_root,
    )
    logging.info("Capture complete. dir=%s prompt=%s", result.dir, result.prompt_path)
    return result
