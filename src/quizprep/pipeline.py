# src/quizprep/pipeline.py
"""Caller-side orchestration around the ingestion and repair components.

The core components degrade instead of failing: the normalizer returns
empty sources, the summarizer falls back per chunk, the transformer never
raises. This module is where those signals become decisions: empty
sources raise ``ExtractionError``, large sources are compressed, and model
output is recovered, repaired and then strictly validated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from quizprep.exceptions import ExtractionError, QuizValidationError
from quizprep.models import ExtractedSource, ProgressEvent, QuizResponse, parse_quiz
from quizprep.quiz import DEFAULT_POLICY, CorrectAnswerPolicy, transform_quiz_response
from quizprep.recovery import RepairFn, recover
from quizprep.settings import Settings
from quizprep.sources import finalize_source
from quizprep.summarizer import (
    QuizContext,
    SummarizerSession,
    SummarizeOptions,
    assemble_summaries,
    process_chunks,
)
from quizprep.text import should_summarize

logger = logging.getLogger(__name__)

SessionFactory = Callable[[QuizContext], SummarizerSession]


def ensure_extracted(source: ExtractedSource) -> ExtractedSource:
    """Return ``source`` unchanged, or raise if extraction produced nothing.

    Raises:
        ExtractionError: If the source has no text after cleaning.
    """
    if source.is_empty:
        raise ExtractionError(
            f"No readable text could be extracted from this {source.source_type.value}",
            source_type=source.source_type.value,
        )
    return source


def _processing_meta(source: ExtractedSource, **extra: Any) -> dict[str, Any]:
    meta = {
        "chunks_created": len(source.chunks),
        "original_word_count": source.word_count,
        "summarization_attempted": False,
        "summarization_succeeded": False,
    }
    meta.update(extra)
    return meta


def _refinalize(
    source: ExtractedSource, text: str, processing: dict[str, Any], settings: Settings
) -> ExtractedSource:
    return finalize_source(
        source.source_type,
        text,
        title=source.title,
        url=source.url,
        meta={**source.meta, "processing": processing},
        settings=settings,
    )


async def prepare_source(
    source: ExtractedSource,
    session_factory: SessionFactory | None = None,
    quiz_context: QuizContext | None = None,
    settings: Settings | None = None,
    on_progress: Callable[[ProgressEvent], None] | None = None,
) -> ExtractedSource:
    """Make an extracted source ready for prompt assembly.

    Small sources pass through. Large sources are summarized chunk by chunk
    when a session factory is available; if compression is unavailable or
    too lossy, the first chunk stands in for the whole text.

    Raises:
        ExtractionError: If the source has no text.
    """
    settings = settings or Settings()
    ensure_extracted(source)

    if not should_summarize(source.chunks, settings.min_chars):
        logger.debug("Source is small enough, no summarization needed")
        return source.model_copy(
            update={"meta": {**source.meta, "processing": _processing_meta(source)}}
        )

    first_chunk = source.chunks[0].text

    if session_factory is None:
        logger.info("No summarizer available, using first chunk of %d", len(source.chunks))
        processing = _processing_meta(source, fallback="first_chunk")
        return _refinalize(source, first_chunk, processing, settings)

    quiz_context = quiz_context or QuizContext(topic=source.title)
    session = session_factory(quiz_context)
    options = SummarizeOptions(
        context=f"Educational content for {quiz_context.subject.lower()} quiz",
        fallback_chars=settings.fallback_summary_chars,
    )
    results = await process_chunks(source.chunks, session, options, on_progress)
    assembled = assemble_summaries(results)

    if assembled.text and assembled.word_count > settings.min_summary_words:
        processing = _processing_meta(
            source,
            summarization_attempted=True,
            summarization_succeeded=True,
            final_word_count=assembled.word_count,
            **assembled.meta.model_dump(),
        )
        logger.info(
            "Summarized %d chunks to %d words (%.1fx compression)",
            len(results),
            assembled.word_count,
            assembled.meta.compression_ratio,
        )
        return _refinalize(source, assembled.text, processing, settings)

    logger.warning(
        "Summary too short (%d words), falling back to first chunk", assembled.word_count
    )
    processing = _processing_meta(
        source,
        summarization_attempted=True,
        fallback="first_chunk",
        **assembled.meta.model_dump(),
    )
    return _refinalize(source, first_chunk, processing, settings)


def looks_like_quiz(value: Any) -> bool:
    """Structural pre-check used during recovery: a dict with a questions list."""
    return isinstance(value, dict) and isinstance(value.get("questions"), list)


async def parse_quiz_output(
    raw_text: str,
    repair_fn: RepairFn | None = None,
    policy: CorrectAnswerPolicy = DEFAULT_POLICY,
    settings: Settings | None = None,
) -> QuizResponse:
    """Recover, repair and validate a quiz from raw model output.

    Raises:
        JSONRecoveryError: If no JSON payload could be recovered.
        QuizValidationError: If the repaired payload violates the schema.
    """
    settings = settings or Settings()
    value = await recover(
        raw_text,
        validate=looks_like_quiz,
        repair_fn=repair_fn,
        preview_chars=settings.preview_chars,
    )
    repaired = transform_quiz_response(value, policy)

    try:
        return parse_quiz(repaired)
    except ValidationError as e:
        raise QuizValidationError(
            f"Quiz failed validation with {e.error_count()} error(s)",
            errors=[dict(err) for err in e.errors(include_url=False)],
        ) from e
