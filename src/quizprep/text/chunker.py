# src/quizprep/text/chunker.py
"""Paragraph-aware text chunking with bounded overlap."""

from quizprep.models import Chunk
from quizprep.text.cleaner import word_count

PARAGRAPH_BREAK = "\n\n"

# Rough words-to-tokens ratio; only used for progress and cost estimates
TOKENS_PER_WORD = 1.3


def estimate_tokens(text: str) -> int:
    """Heuristic token estimate for ``text``."""
    return round(word_count(text) * TOKENS_PER_WORD)


class Chunker:
    """Split canonical text into bounded chunks.

    Each chunk is at most ``max_chars`` long. Inside a window the chunker cuts
    at the last paragraph break when that break lies at least ``min_chars``
    into the window, so paragraphs are not severed needlessly. Consecutive
    chunks share up to ``overlap`` characters.

    Example:
        chunker = Chunker(max_chars=8000, min_chars=2000, overlap=100)
        chunks = chunker.split(text)
    """

    def __init__(
        self,
        max_chars: int = 12000,
        min_chars: int = 4000,
        overlap: int = 200,
    ) -> None:
        """Initialize the chunker.

        Args:
            max_chars: Maximum characters per chunk
            min_chars: Minimum distance into a window for a paragraph cut
            overlap: Characters shared between adjacent chunks

        Raises:
            ValueError: If the sizes are inconsistent
        """
        if max_chars <= 0:
            raise ValueError(f"max_chars must be positive, got {max_chars}")
        if not 0 <= min_chars <= max_chars:
            raise ValueError(
                f"min_chars ({min_chars}) must be between 0 and max_chars ({max_chars})"
            )
        if overlap < 0:
            raise ValueError(f"overlap must be non-negative, got {overlap}")
        self.max_chars = max_chars
        self.min_chars = min_chars
        self.overlap = overlap

    def split(self, text: str) -> list[Chunk]:
        """Split ``text`` into chunks covering ``[0, len(text))``."""
        if not text:
            return []

        length = len(text)
        chunks: list[Chunk] = []
        offset = 0

        while True:
            candidate_end = min(offset + self.max_chars, length)
            cut = candidate_end

            # Only a non-final window is worth cutting short
            if candidate_end < length:
                last_break = text.rfind(PARAGRAPH_BREAK, offset, candidate_end)
                if last_break >= 0 and last_break - offset >= max(self.min_chars, 1):
                    cut = last_break

            chunks.append(self._create_chunk(text, offset, cut, len(chunks) + 1))

            if cut >= length:
                break

            # Always advance by at least one character
            offset = max(cut - self.overlap, offset + 1, 0)

        return chunks

    def _create_chunk(self, text: str, start: int, end: int, ordinal: int) -> Chunk:
        part = text[start:end]
        return Chunk(
            id=f"chunk_{ordinal}",
            text=part,
            start=start,
            end=end,
            token_estimate=estimate_tokens(part),
            needs_summarization=len(part) > self.min_chars,
        )


def chunk_text(
    text: str,
    max_chars: int = 12000,
    min_chars: int = 4000,
    overlap: int = 200,
) -> list[Chunk]:
    """Split ``text`` with a one-off :class:`Chunker`."""
    return Chunker(max_chars=max_chars, min_chars=min_chars, overlap=overlap).split(text)


def should_summarize(chunks: list[Chunk] | tuple[Chunk, ...], min_chars: int = 4000) -> bool:
    """Decide whether chunked content is large enough to compress first."""
    if not chunks:
        return False
    if len(chunks) == 1 and len(chunks[0].text) < min_chars:
        return False
    return any(chunk.needs_summarization for chunk in chunks)
