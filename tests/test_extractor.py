from unittest.mock import MagicMock, patch

from readability.readability import Unparseable

from extractor import extract_article
from markdown_converter import html_to_markdown

BASE_URL = "https://example.com/blog/post"

_PARAGRAPH = (
    "Readable content is the part of the page a person actually came for, and it "
    "usually lives in a single container surrounded by menus, banners and footers. "
    "This paragraph is long enough, with enough commas, to look like real prose."
)

ARTICLE_HTML = f"""<!DOCTYPE html>
<html>
<head><title>Finding The Main Content Of A Web Page</title></head>
<body>
  <div class="nav menu">
    <a href="/">Home</a> <a href="/about">About</a> <a href="/contact">Contact</a>
  </div>
  <div id="article" class="post-content">
    <h1>Finding The Main Content Of A Web Page</h1>
    <p>{_PARAGRAPH}</p>
    <p>{_PARAGRAPH} See <a href="/docs/intro">the intro</a> for details.</p>
    <p>{_PARAGRAPH}</p>
    <p>{_PARAGRAPH}</p>
  </div>
  <div class="sidebar ad-banner">
    <a href="/shop">Buy now</a>
  </div>
</body>
</html>
"""

BODY_INNER = '<h1>Landing</h1><p>Short <a href="https://example.com/x">link</a></p>'
NO_ARTICLE_HTML = f"<html><head><title> Landing Page </title></head><body>{BODY_INNER}</body></html>"


def test_extract_article_finds_main_content() -> None:
    result = extract_article(ARTICLE_HTML, BASE_URL)

    assert result.title == "Finding The Main Content Of A Web Page"
    assert "Readable content is the part of the page" in result.content_html
    assert "Buy now" not in result.content_html


def test_extract_article_makes_links_absolute() -> None:
    result = extract_article(ARTICLE_HTML, BASE_URL)

    assert "https://example.com/docs/intro" in result.content_html


def test_extract_article_falls_back_to_full_body_when_unparseable() -> None:
    with patch("extractor.Document", side_effect=Unparseable("boom")):
        result = extract_article(NO_ARTICLE_HTML, BASE_URL)

    assert result.title == "Landing Page"
    assert result.content_html == BODY_INNER


def test_extract_article_falls_back_when_readability_finds_no_text() -> None:
    doc = MagicMock()
    doc.summary.return_value = "<div><div>  </div></div>"
    doc.short_title.return_value = "Ignored"

    with patch("extractor.Document", return_value=doc):
        result = extract_article(NO_ARTICLE_HTML, BASE_URL)

    assert result.title == "Landing Page"
    assert result.content_html == BODY_INNER


def test_fallback_markdown_equals_full_body_conversion() -> None:
    with patch("extractor.Document", side_effect=Unparseable("boom")):
        result = extract_article(NO_ARTICLE_HTML, BASE_URL)

    markdown = html_to_markdown(result.content_html)
    assert markdown.strip()
    assert markdown == html_to_markdown(BODY_INNER)


def test_fallback_resolves_relative_links_and_images() -> None:
    html = '<html><body><p><a href="/a">A</a><img src="img/b.png" alt="b"></p></body></html>'

    with patch("extractor.Document", side_effect=Unparseable("boom")):
        result = extract_article(html, BASE_URL)

    assert 'href="https://example.com/a"' in result.content_html
    assert 'src="https://example.com/blog/img/b.png"' in result.content_html


def test_extract_article_never_raises_on_empty_document() -> None:
    result = extract_article("", BASE_URL)

    assert result.title == ""
    assert result.content_html == ""
