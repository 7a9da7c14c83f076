# src/quizprep/summarizer/base.py
"""Summarizer session abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from quizprep.exceptions import SessionInUseError


@dataclass
class QuizContext:
    """What the generated quiz is about; steers summaries toward quiz needs."""

    topic: str = ""
    subject: str = "General"
    difficulty: str = "medium"
    question_types: list[str] = field(default_factory=list)

    def shared_context(self) -> str:
        """Render a one-line instruction describing the quiz focus."""
        parts = ["Focus on key concepts for educational quizzes"]
        if self.topic:
            parts.append(f"Topic: {self.topic}")
        if self.subject != "General":
            parts.append(f"Subject: {self.subject}")
        if self.difficulty != "medium":
            parts.append(f"Difficulty: {self.difficulty}")
        if self.question_types:
            parts.append(f"Question types: {', '.join(self.question_types)}")
        return ". ".join(parts)


class SummarizerSession(ABC):
    """An exclusively owned summarization session.

    A session carries serialized state, so it is used by one
    ``process_chunks`` call at a time and released exactly once. Subclasses
    that override ``__init__`` must call ``super().__init__()``.
    """

    def __init__(self) -> None:
        self._in_use = False
        self._closed = False

    @abstractmethod
    async def summarize(self, text: str, context: str = "") -> str:
        """Summarize ``text``, optionally steered by ``context``."""
        ...

    async def close(self) -> None:
        """Release underlying resources. Default implementation does nothing."""
        return None

    @property
    def closed(self) -> bool:
        return self._closed

    def acquire(self) -> None:
        """Claim exclusive use of the session.

        Raises:
            SessionInUseError: If the session is already in use or released.
        """
        if self._closed:
            raise SessionInUseError("Summarizer session has already been released")
        if self._in_use:
            raise SessionInUseError("Summarizer session is in use by another call")
        self._in_use = True

    async def release(self) -> None:
        """Close the session. Subsequent calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self._in_use = False
        await self.close()
