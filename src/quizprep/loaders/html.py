# src/quizprep/loaders/html.py
"""HTML article extraction - readable text out of raw page HTML."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4 import BeautifulSoup
from markdownify import markdownify

from quizprep.loaders.base import ArticleExtractor, ArticleResult

if TYPE_CHECKING:
    from bs4 import Tag

# Tags to remove entirely (including their content)
REMOVE_TAGS = ["script", "style", "nav", "footer", "header", "aside", "noscript", "form"]

# Containers that usually hold the main article, most specific first
ARTICLE_SELECTORS = ["article", "main", '[role="main"]']

BYLINE_SELECTORS = ['[rel="author"]', ".byline", ".author", 'meta[name="author"]']


def _document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def document_title(html: str) -> str:
    """Return the ``<title>`` of a document, or an empty string."""
    soup = _document(html)
    if soup.title and soup.title.string:
        return soup.title.string.strip()
    return ""


def _find_byline(soup: BeautifulSoup) -> str:
    for selector in BYLINE_SELECTORS:
        node = soup.select_one(selector)
        if node is None:
            continue
        value = node.get("content") if node.name == "meta" else node.get_text(" ", strip=True)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def _collapse_blank_lines(text: str) -> str:
    """Remove runs of blank lines left behind by markdown conversion."""
    lines = text.split("\n")
    cleaned = []
    prev_blank = False

    for line in lines:
        is_blank = not line.strip()
        if is_blank and prev_blank:
            continue
        cleaned.append(line)
        prev_blank = is_blank

    return "\n".join(cleaned)


class HTMLArticleExtractor(ArticleExtractor):
    """Readability-style extractor built on BeautifulSoup and markdownify.

    Strips scripts, styles and navigation chrome, picks the main article
    container and converts it to markdown so headings and lists survive as
    paragraph structure for the chunker. Returns None when the document has
    no article container or the container is shorter than ``min_length``.
    """

    def __init__(self, min_length: int = 200) -> None:
        self.min_length = min_length

    def extract(self, html: str, url: str = "") -> ArticleResult | None:
        if not html or not html.strip():
            return None

        soup = _document(html)
        title = soup.title.string.strip() if soup.title and soup.title.string else ""
        byline = _find_byline(soup)

        for tag in soup(REMOVE_TAGS):
            tag.decompose()

        container = self._find_container(soup)
        if container is None:
            return None

        text = _collapse_blank_lines(markdownify(str(container), heading_style="ATX")).strip()
        if len(text) < self.min_length:
            return None

        heading = container.find("h1")
        if heading is not None and heading.get_text(strip=True):
            title = heading.get_text(strip=True)

        return ArticleResult(text=text, title=title, byline=byline, excerpt=text[:240])

    def _find_container(self, soup: BeautifulSoup) -> Tag | None:
        for selector in ARTICLE_SELECTORS:
            node = soup.select_one(selector)
            if node is not None and node.get_text(strip=True):
                return node
        return None


def extract_body_text(html: str) -> str:
    """Plain-text fallback: visible text of the main container or the body."""
    soup = _document(html)
    for tag in soup(["script", "style", "noscript", "template"]):
        tag.decompose()

    node: Tag | BeautifulSoup | None = None
    for selector in ARTICLE_SELECTORS:
        node = soup.select_one(selector)
        if node is not None:
            break
    if node is None:
        node = soup.body or soup

    return node.get_text("\n", strip=True)
