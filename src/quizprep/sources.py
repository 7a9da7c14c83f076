# src/quizprep/sources.py
"""Source normalization: every ingestion path converges on ``finalize_source``.

The normalizer never raises on empty content. A source whose text is empty
after cleaning comes back with empty ``text`` and ``chunks``; callers decide
whether that is an extraction failure (see ``quizprep.pipeline``).
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse

from quizprep.loaders import ArticleExtractor, HTMLArticleExtractor, document_title
from quizprep.loaders.html import extract_body_text
from quizprep.models import ExtractedSource, SourceType
from quizprep.settings import Settings
from quizprep.text import Chunker, clean, excerpt

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


def domain_of(url: str) -> str:
    """Hostname of ``url``, or an empty string when it has none."""
    if not url:
        return ""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def finalize_source(
    source_type: SourceType | str,
    raw_text: str | None,
    title: str = "",
    url: str = "",
    meta: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> ExtractedSource:
    """Clean, preview and chunk raw text into an :class:`ExtractedSource`."""
    settings = settings or Settings()
    text = clean(raw_text)
    chunker = Chunker(
        max_chars=settings.max_chars,
        min_chars=settings.min_chars,
        overlap=settings.overlap,
    )
    chunks = chunker.split(text)

    logger.debug(
        "Finalized %s source: %d raw chars -> %d clean chars, %d chunks",
        SourceType(source_type).value,
        len(raw_text or ""),
        len(text),
        len(chunks),
    )

    return ExtractedSource(
        source_type=SourceType(source_type),
        title=title or "",
        url=url or "",
        domain=domain_of(url),
        text=text,
        excerpt=excerpt(text, settings.excerpt_length),
        chunks=tuple(chunks),
        meta=dict(meta or {}),
    )


def extract_from_page(
    html: str,
    title: str = "",
    url: str = "",
    extractor: ArticleExtractor | None = None,
    settings: Settings | None = None,
    source_type: SourceType = SourceType.PAGE,
) -> ExtractedSource:
    """Normalize raw page HTML.

    The readability extractor runs first; when it yields no text the visible
    body text is used instead. Title preference: extractor title, document
    title, then ``"Untitled"``.
    """
    extractor = extractor or HTMLArticleExtractor()
    article = extractor.extract(html, url)

    if article is not None and article.text.strip():
        raw_text = article.text
        meta = {"byline": article.byline, "length": article.length, "extractor": "readability"}
        extracted_title = article.title
    else:
        logger.info("Readability extraction yielded no text for %s, using body text", url or "page")
        raw_text = extract_body_text(html)
        meta = {"byline": "", "length": len(raw_text), "extractor": "fallback"}
        extracted_title = ""

    resolved_title = extracted_title or title or document_title(html) or UNTITLED
    return finalize_source(
        source_type,
        raw_text,
        title=resolved_title,
        url=url,
        meta=meta,
        settings=settings,
    )


def extract_from_url(
    html: str,
    url: str,
    extractor: ArticleExtractor | None = None,
    settings: Settings | None = None,
) -> ExtractedSource:
    """Normalize HTML fetched for an explicit URL."""
    return extract_from_page(
        html, url=url, extractor=extractor, settings=settings, source_type=SourceType.URL
    )


def extract_from_selection(
    text: str,
    title: str = "",
    url: str = "",
    settings: Settings | None = None,
) -> ExtractedSource:
    """Normalize a user text selection."""
    return finalize_source(
        SourceType.SELECTION,
        text,
        title=title or "Selection",
        url=url,
        settings=settings,
    )


def extract_from_pdf(
    text: str,
    file_name: str = "",
    page_count: int = 0,
    settings: Settings | None = None,
) -> ExtractedSource:
    """Normalize text already pulled from a PDF's text layer."""
    return finalize_source(
        SourceType.PDF,
        text,
        title=file_name or "PDF Document",
        meta={"page_count": page_count, "file_name": file_name},
        settings=settings,
    )


def normalize_manual_topic(
    topic: str,
    context: str = "",
    settings: Settings | None = None,
) -> ExtractedSource:
    """Normalize a typed topic; the topic itself is the body when context is empty."""
    body = context if context and context.strip() else topic
    return finalize_source(
        SourceType.MANUAL,
        body,
        title=topic or "Custom Topic",
        meta={"topic": topic, "has_context": bool(context and context.strip())},
        settings=settings,
    )
