"""Per-article document directory: source.md, meta.json and the translation prompt."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml

from models import CaptureResult
from prompt_builder import build_translate_prompt

DEFAULT_CONTENT_ROOT = os.path.join("content", "articles")

SOURCE_FILENAME = "source.md"
META_FILENAME = "meta.json"

LOGGER = logging.getLogger(__name__)


def content_root() -> Path:
    """Directory holding one sub-directory per article slug."""
    return Path(os.getenv("CONTENT_ROOT", DEFAULT_CONTENT_ROOT))


def prompt_filename(lang: str) -> str:
    return f"translate.{lang}.prompt.txt"


def write_document(
    slug: str,
    title: str,
    markdown: str,
    source_url: str,
    target_lang: str,
    root: Path | None = None,
    now: Callable[[], datetime] | None = None,
) -> CaptureResult:
    """Write the three artifacts for one article under <root>/<slug>/.

    Files are written in order source.md, meta.json, prompt. An existing
    directory for the same slug is overwritten file by file; prompts for
    other languages already there are left alone. A failure part-way
    leaves whatever was already written.

    Args:
        slug:        Directory name for the article.
        title:       Article title; the slug is used when empty.
        markdown:    Converted article body.
        source_url:  URL the article was captured from.
        target_lang: Language code the prompt asks to translate into.
        root:        Content root; defaults to content_root().
        now:         Clock override, returns an aware UTC datetime.
    """
    root = root if root is not None else content_root()
    directory = root / slug
    directory.mkdir(parents=True, exist_ok=True)

    captured_at = (now or _utc_now)()
    date = captured_at.date().isoformat()
    display_title = title or slug

    source_path = directory / SOURCE_FILENAME
    source_path.write_text(
        render_frontmatter(
            markdown,
            {
                "title": display_title,
                "date": date,
                "sourceUrl": source_url,
                "lang": "source",
            },
        ),
        encoding="utf-8",
    )

    meta = {
        "slug": slug,
        "title": display_title,
        "date": date,
        "sourceUrl": source_url,
        "targetLang": target_lang,
        "createdAt": _iso_timestamp(captured_at),
    }
    meta_path = directory / META_FILENAME
    meta_path.write_text(json.dumps(meta, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    prompt_path = directory / prompt_filename(target_lang)
    prompt_path.write_text(build_translate_prompt(markdown, target_lang) + "\n", encoding="utf-8")

    LOGGER.info("Wrote %s, %s and %s to %s", SOURCE_FILENAME, META_FILENAME, prompt_path.name, directory)
    return CaptureResult(slug=slug, dir=str(directory), lang=target_lang, prompt_path=str(prompt_path))


def render_frontmatter(body: str, data: dict[str, Any]) -> str:
    """Prefix body with a YAML frontmatter block, keeping key order."""
    header = yaml.safe_dump(data, allow_unicode=True, sort_keys=False, width=4096)
    if not body.endswith("\n"):
        body += "\n"
    return f"---\n{header}---\n{body}"


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _iso_timestamp(value: datetime) -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2026-10-17T08:30:00.123Z."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
