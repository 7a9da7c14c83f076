# src/quizprep/summarizer/__init__.py
"""Optional compression stage: per-chunk summarization."""

from quizprep.summarizer.base import QuizContext, SummarizerSession
from quizprep.summarizer.llm import LLMSummarizerSession
from quizprep.summarizer.orchestrator import (
    ProgressCallback,
    SummarizeOptions,
    assemble_summaries,
    process_chunks,
    summarize_chunk,
)

__all__ = [
    "QuizContext",
    "SummarizerSession",
    "LLMSummarizerSession",
    "ProgressCallback",
    "SummarizeOptions",
    "assemble_summaries",
    "process_chunks",
    "summarize_chunk",
]
