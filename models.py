"""Shared typed models for the capture pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExtractedContent:
    """Main-article HTML isolated from page chrome."""

    title: str
    content_html: str


@dataclass(frozen=True, slots=True)
class Article:
    """Converted article, produced once per run and never persisted directly."""

    title: str
    markdown: str
    source_url: str


@dataclass(frozen=True, slots=True)
class CaptureResult:
    """Where one run wrote its artifacts."""

    slug: str
    dir: str
    lang: str
    prompt_path: str

    def to_summary(self) -> dict[str, object]:
        """Machine-readable summary printed for wrapper scripts."""
        return {
            "ok": True,
            "slug": self.slug,
            "dir": self.dir,
            "lang": self.lang,
            "promptPath": self.prompt_path,
        }
