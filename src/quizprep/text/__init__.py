# src/quizprep/text/__init__.py
"""Text cleaning and chunking."""

from quizprep.text.chunker import Chunker, chunk_text, estimate_tokens, should_summarize
from quizprep.text.cleaner import clean, excerpt, normalize_whitespace, word_count

__all__ = [
    "Chunker",
    "chunk_text",
    "estimate_tokens",
    "should_summarize",
    "clean",
    "excerpt",
    "normalize_whitespace",
    "word_count",
]
