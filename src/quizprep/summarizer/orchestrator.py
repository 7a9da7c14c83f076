# src/quizprep/summarizer/orchestrator.py
"""Sequential chunk summarization with per-chunk fallback."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from quizprep.models import AssembledSummary, Chunk, ProgressEvent, SummaryMeta, SummaryResult
from quizprep.summarizer.base import SummarizerSession
from quizprep.text import estimate_tokens, word_count

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressEvent], None]


@dataclass
class SummarizeOptions:
    """Per-call summarization options.

    Attributes:
        context: Guidance passed to the session with every chunk
        fallback_chars: Length of original text kept when a chunk fails
    """

    context: str = "Extract key educational concepts and facts"
    fallback_chars: int = 2000


async def summarize_chunk(
    chunk: Chunk, session: SummarizerSession, context: str = ""
) -> SummaryResult:
    """Summarize one chunk.

    Raises:
        ValueError: If the chunk is empty or the session returns no text.
    """
    if not chunk.text:
        raise ValueError(f"Chunk {chunk.id} has no text")

    summary = (await session.summarize(chunk.text, context)).strip()
    if not summary:
        raise ValueError(f"Summarizer returned empty text for {chunk.id}")

    return SummaryResult(
        id=chunk.id,
        summary=summary,
        original_length=len(chunk.text),
        summary_length=len(summary),
        token_estimate=estimate_tokens(summary),
    )


def _fallback_result(chunk: Chunk, error: BaseException, fallback_chars: int) -> SummaryResult:
    truncated = chunk.text[:fallback_chars]
    return SummaryResult(
        id=chunk.id,
        summary=truncated,
        original_length=len(chunk.text),
        summary_length=len(truncated),
        token_estimate=estimate_tokens(truncated),
        error=str(error) or type(error).__name__,
        fallback=True,
    )


async def process_chunks(
    chunks: Sequence[Chunk],
    session: SummarizerSession,
    options: SummarizeOptions | None = None,
    on_progress: ProgressCallback | None = None,
) -> list[SummaryResult]:
    """Summarize chunks one at a time, in order.

    A failing chunk does not abort the batch: its result carries the
    truncated original text with ``fallback=True``. The session is claimed
    for the duration of the call and released exactly once on every exit
    path.

    Args:
        chunks: Chunks to summarize
        session: Exclusively owned summarizer session
        options: Summarization options
        on_progress: Called before and after each chunk

    Returns:
        One SummaryResult per chunk, in input order.

    Raises:
        SessionInUseError: If the session is already claimed by another call.
        ValueError: If there are no chunks to process.
    """
    options = options or SummarizeOptions()
    session.acquire()
    try:
        if not chunks:
            raise ValueError("No chunks to process")

        total = len(chunks)
        results: list[SummaryResult] = []

        for index, chunk in enumerate(chunks, start=1):
            if on_progress:
                on_progress(
                    ProgressEvent(
                        current=index, total=total, chunk_id=chunk.id, status="processing"
                    )
                )

            try:
                result = await summarize_chunk(chunk, session, options.context)
            except Exception as e:
                logger.warning("Failed to summarize %s, using truncated text: %s", chunk.id, e)
                result = _fallback_result(chunk, e, options.fallback_chars)

            results.append(result)

            if on_progress:
                on_progress(
                    ProgressEvent(
                        current=index,
                        total=total,
                        chunk_id=chunk.id,
                        status="completed",
                        result=result,
                    )
                )

        return results
    finally:
        try:
            await session.release()
        except Exception as e:
            logger.warning("Failed to release summarizer session: %s", e)


def assemble_summaries(results: Sequence[SummaryResult]) -> AssembledSummary:
    """Join chunk summaries and compute compression statistics.

    Never fails; returns an empty result when no summary has text.
    """
    if not results:
        return AssembledSummary()

    valid = [r for r in results if r.summary and r.summary.strip()]
    text = "\n\n".join(r.summary.strip() for r in valid if r.summary)

    total_original = sum(r.original_length for r in results)
    total_summary = sum(r.summary_length for r in valid)

    meta = SummaryMeta(
        summaries=len(valid),
        total_original_length=total_original,
        total_summary_length=total_summary,
        compression_ratio=total_original / max(1, total_summary),
        fallbacks=sum(1 for r in results if r.fallback),
        errors=sum(1 for r in results if r.error),
    )

    return AssembledSummary(text=text, word_count=word_count(text), meta=meta)
