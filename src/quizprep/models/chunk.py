# src/quizprep/models/chunk.py
"""Chunk data model."""

from pydantic import BaseModel, ConfigDict


class Chunk(BaseModel):
    """A bounded slice of canonical source text, sized for prompt consumption.

    ``start`` and ``end`` are half-open offsets into the cleaned text the chunk
    was cut from. Consecutive chunks may share up to the configured overlap.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    start: int
    end: int
    token_estimate: int = 0
    needs_summarization: bool = False

    @property
    def length(self) -> int:
        return self.end - self.start
