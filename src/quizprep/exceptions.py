# src/quizprep/exceptions.py
"""Exceptions raised by quizprep."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class QuizPrepError(Exception):
    """Base class for all quizprep errors."""


class ExtractionError(QuizPrepError):
    """Raised when a source yields no usable text after cleaning."""

    def __init__(self, message: str, source_type: str | None = None) -> None:
        super().__init__(message)
        self.source_type = source_type


@dataclass
class RecoveryAttempt:
    """One step of the JSON recovery cascade and how it went."""

    method: str
    success: bool
    error: str | None = None

    def __str__(self) -> str:
        status = "OK" if self.success else "FAILED"
        suffix = f" ({self.error})" if self.error else ""
        return f"{self.method}: {status}{suffix}"


class JSONRecoveryError(QuizPrepError):
    """Raised when every JSON recovery strategy has been exhausted.

    Attributes:
        attempts: Ordered record of the strategies that were tried.
        preview: Bounded prefix of the offending raw text.
    """

    def __init__(
        self,
        message: str,
        attempts: list[RecoveryAttempt] | None = None,
        preview: str = "",
    ) -> None:
        self.attempts = attempts or []
        self.preview = preview
        details = [message]
        if self.attempts:
            details.append("Attempts:\n" + "\n".join(f"  - {a}" for a in self.attempts))
        if preview:
            details.append(f"Preview of raw data:\n{preview}")
        super().__init__("\n\n".join(details))


class QuizValidationError(QuizPrepError):
    """Raised when a repaired payload still violates the quiz schema."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class SessionInUseError(QuizPrepError):
    """Raised when a summarizer session is used by two overlapping calls."""
