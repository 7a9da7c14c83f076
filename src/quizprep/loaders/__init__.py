# src/quizprep/loaders/__init__.py
"""Source extractors for quizprep."""

from quizprep.loaders.base import ArticleExtractor, ArticleResult, PdfText, PdfTextReader
from quizprep.loaders.html import HTMLArticleExtractor, document_title, extract_body_text

# Optional readers - imported lazily to avoid ImportError when deps not installed
__all__ = [
    "ArticleExtractor",
    "ArticleResult",
    "HTMLArticleExtractor",
    "PdfText",
    "PdfTextReader",
    "document_title",
    "extract_body_text",
]


def __getattr__(name: str) -> type:
    """Lazy import optional readers."""
    if name == "PyPDFTextReader":
        from quizprep.loaders.pypdf_reader import PyPDFTextReader

        return PyPDFTextReader
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
