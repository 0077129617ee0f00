"""HTML to Markdown conversion that keeps code-block languages.

Docs sites mark a code block's language in different places, e.g.

    <pre class="language-csharp"><code>...</code></pre>
    <pre><code class="lang-js">...</code></pre>
    <div class="language-csharp ext-cs"><pre>...</pre></div>

and readability may drop some wrappers, so the <pre>, its <code> and the
immediate parent are all checked.
"""

from __future__ import annotations

import logging
import re

from markdownify import ASTERISK, ATX, MarkdownConverter

from extractor import extract_article
from models import Article

LOGGER = logging.getLogger(__name__)

_LANG_CLASS_RE = re.compile(r"\b(?:language|lang)-([a-z0-9_+#-]+)", re.IGNORECASE)
_EXT_CLASS_RE = re.compile(r"\bext-([a-z0-9_+#-]+)", re.IGNORECASE)
_TRAILING_NEWLINES_RE = re.compile(r"\n+$")

LANGUAGE_ALIASES: dict[str, str] = {
    "cs": "csharp",
    "c#": "csharp",
    "js": "javascript",
    "ts": "typescript",
    "sh": "bash",
    "shell": "bash",
    "py": "python",
    "kt": "kotlin",
}

FENCE = "```"


def normalize_language(lang: str) -> str:
    """Map common short names to the identifiers highlighters expect."""
    lowered = lang.lower()
    return LANGUAGE_ALIASES.get(lowered, lowered)


def pick_language(class_sources: list[str]) -> str | None:
    """Return the normalized language named by any of the class strings.

    language-<id> / lang-<id> tokens win over ext-<id> tokens, whichever
    source they appear in.
    """
    joined = " ".join(source for source in class_sources if source)
    for pattern in (_LANG_CLASS_RE, _EXT_CLASS_RE):
        match = pattern.search(joined)
        if match:
            return normalize_language(match.group(1))
    return None


def _class_string(tag) -> str:
    if tag is None:
        return ""
    value = tag.get("class")
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return " ".join(value)


class CodeBlockConverter(MarkdownConverter):
    """markdownify converter emitting language-tagged fenced code blocks."""

    def convert_pre(self, el, text, parent_tags):
        if not el.get_text().strip():
            return super().convert_pre(el, text, parent_tags)

        code_el = el.find("code")
        lang = pick_language([
            _class_string(el),
            _class_string(code_el),
            _class_string(el.parent),
        ])

        raw = (code_el or el).get_text()
        code = _TRAILING_NEWLINES_RE.sub("", raw)
        return f"\n\n{FENCE}{lang or ''}\n{code}\n{FENCE}\n\n"


def html_to_markdown(content_html: str) -> str:
    """Convert article HTML to Markdown ending in exactly one newline."""
    converter = CodeBlockConverter(
        heading_style=ATX,
        strong_em_symbol=ASTERISK,
        bullets="*",
    )
    return converter.convert(content_html).strip() + "\n"


def convert_article(html: str, url: str) -> Article:
    """Extract the main article from a page and convert it to Markdown."""
    content = extract_article(html, url)
    markdown = html_to_markdown(content.content_html)
    LOGGER.info(
        "Converted article title=%r markdown_chars=%s",
        content.title,
        len(markdown),
    )
    return Article(title=content.title.strip(), markdown=markdown, source_url=url)
