"""Shared pytest fixtures."""

import pytest

from quizprep.models import Chunk
from quizprep.providers.base import LLMClient
from quizprep.summarizer import SummarizerSession


class ScriptedLLMClient(LLMClient):
    """LLM client that replays canned responses and records every call."""

    def __init__(self, responses: list[str] | None = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[dict] = []

    def complete(self, messages: list[dict], temperature: float | None = None) -> str:
        self.calls.append({"messages": messages, "temperature": temperature})
        if not self.responses:
            raise RuntimeError("No scripted response left")
        return self.responses.pop(0)


class RecordingSession(SummarizerSession):
    """Summarizer session that fails on selected chunk texts."""

    def __init__(self, fail_on: set[str] | None = None, summary: str | None = None) -> None:
        super().__init__()
        self.fail_on = fail_on or set()
        self.summary = summary
        self.summarized: list[str] = []
        self.contexts: list[str] = []
        self.close_calls = 0

    async def summarize(self, text: str, context: str = "") -> str:
        self.summarized.append(text)
        self.contexts.append(context)
        if text in self.fail_on:
            raise RuntimeError("model crashed")
        if self.summary is not None:
            return self.summary
        return f"Summary of {text}"

    async def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def scripted_client():
    """Factory for LLM clients with canned responses."""
    return ScriptedLLMClient


@pytest.fixture
def session_class():
    """The recording summarizer session class."""
    return RecordingSession


@pytest.fixture
def make_chunks():
    """Build contiguous chunks from literal texts."""

    def _make(*texts: str, min_chars: int = 4000) -> list[Chunk]:
        chunks = []
        offset = 0
        for i, text in enumerate(texts, start=1):
            chunks.append(
                Chunk(
                    id=f"chunk_{i}",
                    text=text,
                    start=offset,
                    end=offset + len(text),
                    needs_summarization=len(text) > min_chars,
                )
            )
            offset += len(text)
        return chunks

    return _make


@pytest.fixture
def article_html():
    """A page with navigation chrome around a long article."""
    paragraphs = "".join(
        f"<p>Paragraph {i} explains how chlorophyll absorbs light to drive photosynthesis "
        f"in the leaves of green plants.</p>"
        for i in range(1, 6)
    )
    return (
        "<html><head><title>Biology Notes</title>"
        '<meta name="author" content="Ada Lovelace"></head>'
        "<body><nav>Home | About | Contact</nav>"
        f"<article><h1>Photosynthesis</h1>{paragraphs}</article>"
        "<script>trackVisitor();</script>"
        "<footer>Copyright 2024</footer></body></html>"
    )
