# src/quizprep/models/summary.py
"""Summarization result models."""

from typing import Literal

from pydantic import BaseModel, Field


class SummaryResult(BaseModel):
    """Per-chunk outcome of the optional compression stage.

    ``fallback`` is True when truncated original text stands in for a failed
    summarization; ``error`` then carries the failure reason.
    """

    id: str
    summary: str | None = None
    original_length: int = 0
    summary_length: int = 0
    token_estimate: int = 0
    error: str | None = None
    fallback: bool = False


class SummaryMeta(BaseModel):
    """Aggregate compression statistics for a batch of summaries."""

    summaries: int = 0
    total_original_length: int = 0
    total_summary_length: int = 0
    compression_ratio: float = 0.0
    fallbacks: int = 0
    errors: int = 0


class AssembledSummary(BaseModel):
    """Joined summary text plus compression metadata."""

    text: str = ""
    word_count: int = 0
    meta: SummaryMeta = Field(default_factory=SummaryMeta)


class ProgressEvent(BaseModel):
    """Progress notification emitted while chunks are summarized."""

    current: int
    total: int
    chunk_id: str
    status: Literal["processing", "completed"]
    result: SummaryResult | None = None

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100)."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)
