# src/quizprep/models/source.py
"""Extracted source data model."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from quizprep.models.chunk import Chunk


class SourceType(str, Enum):
    """Where an extracted source came from."""

    PAGE = "page"
    SELECTION = "selection"
    PDF = "pdf"
    MANUAL = "manual"
    URL = "url"


class ExtractedSource(BaseModel):
    """Canonical representation of any ingestion source.

    ``text`` is the cleaned canonical text and the only input to chunking.
    ``word_count`` is always derived from ``text``.
    """

    model_config = ConfigDict(frozen=True)

    source_type: SourceType
    title: str = ""
    url: str = ""
    domain: str = ""
    text: str = ""
    excerpt: str = ""
    chunks: tuple[Chunk, ...] = ()
    meta: dict[str, Any] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @property
    def is_empty(self) -> bool:
        """True when extraction produced no usable text."""
        return not self.text
