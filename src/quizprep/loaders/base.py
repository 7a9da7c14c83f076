# src/quizprep/loaders/base.py
"""Extractor abstract base classes and result types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ArticleResult:
    """Readable content pulled out of a page.

    ``text`` is raw (uncleaned) text; cleaning happens once, downstream.
    """

    text: str
    title: str = ""
    byline: str = ""
    excerpt: str = ""

    @property
    def length(self) -> int:
        return len(self.text)


class ArticleExtractor(ABC):
    """Abstract base class for readability-style article extraction."""

    @abstractmethod
    def extract(self, html: str, url: str = "") -> ArticleResult | None:
        """Extract the main readable content of an HTML document.

        Args:
            html: Raw page HTML
            url: Page URL, for resolving relative references

        Returns:
            ArticleResult, or None when no article could be identified
        """
        ...


@dataclass
class PdfText:
    """Text layer of a PDF document, pages joined by blank lines."""

    text: str
    page_count: int
    file_name: str = ""


class PdfTextReader(ABC):
    """Abstract base class for reading the text layer of a PDF file."""

    @abstractmethod
    def read(self, path: str) -> PdfText:
        """Read all page text from the PDF at ``path``."""
        ...
