"""Filesystem-safe slugs for article directories."""

from __future__ import annotations

import re
import time
import unicodedata

# Symbols that carry meaning in titles ("Q&A", "100%") are spelled out
# instead of being dropped.
_SYMBOL_WORDS: dict[str, str] = {
    "&": " and ",
    "%": " percent ",
    "$": " dollar ",
    "<": " less ",
    ">": " greater ",
    "|": " or ",
}

# Latin letters NFKD does not decompose into ASCII.
_TRANSLITERATIONS = str.maketrans({
    "ß": "ss",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "đ": "d",
    "Đ": "D",
    "ł": "l",
    "Ł": "L",
    "þ": "th",
    "Þ": "TH",
})

_PUNCTUATION_RE = re.compile(r"[^a-z0-9\s_-]+")
_SEPARATOR_RE = re.compile(r"[\s_-]+")


def make_slug(title: str) -> str:
    """Return a lowercase, hyphen-delimited ASCII slug for title.

    Punctuation inside a word is dropped ("don't" -> "dont"); whitespace,
    hyphens and underscores separate tokens. Falls back to
    article-<epoch ms> when nothing ASCII survives, e.g. for an empty or
    purely non-Latin title.
    """
    return _slugify(title) or f"article-{int(time.time() * 1000)}"


def _slugify(text: str) -> str:
    text = text.translate(_TRANSLITERATIONS)
    for symbol, word in _SYMBOL_WORDS.items():
        text = text.replace(symbol, word)

    # "Café" -> "Cafe"; anything without an ASCII decomposition is dropped,
    # except non-ASCII punctuation and spaces, which still split words
    decomposed = "".join(
        " " if ord(ch) > 127 and unicodedata.category(ch)[0] in "PZ" else ch
        for ch in unicodedata.normalize("NFKD", text)
    )
    ascii_text = decomposed.encode("ascii", "ignore").decode("ascii").lower()

    cleaned = _PUNCTUATION_RE.sub("", ascii_text)
    return _SEPARATOR_RE.sub("-", cleaned).strip("-")
