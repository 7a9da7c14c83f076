# tests/summarizer/test_session.py
"""Tests for summarizer sessions."""

import pytest

from quizprep.exceptions import SessionInUseError
from quizprep.summarizer import LLMSummarizerSession, QuizContext, SummarizerSession


class TestQuizContext:
    def test_default_context(self):
        assert QuizContext().shared_context() == "Focus on key concepts for educational quizzes"

    def test_full_context(self):
        context = QuizContext(
            topic="Photosynthesis",
            subject="Biology",
            difficulty="hard",
            question_types=["MCQ", "True/False"],
        )
        rendered = context.shared_context()
        assert "Topic: Photosynthesis" in rendered
        assert "Subject: Biology" in rendered
        assert "Difficulty: hard" in rendered
        assert "Question types: MCQ, True/False" in rendered


class TestSessionLifecycle:
    def test_acquire_twice_raises(self, session_class):
        session = session_class()
        session.acquire()
        with pytest.raises(SessionInUseError):
            session.acquire()

    @pytest.mark.asyncio
    async def test_release_is_idempotent(self, session_class):
        session = session_class()
        session.acquire()
        await session.release()
        await session.release()
        assert session.close_calls == 1
        assert session.closed

    @pytest.mark.asyncio
    async def test_acquire_after_release_raises(self, session_class):
        session = session_class()
        await session.release()
        with pytest.raises(SessionInUseError, match="released"):
            session.acquire()

    def test_abstract(self):
        with pytest.raises(TypeError):
            SummarizerSession()


class TestLLMSummarizerSession:
    def test_is_summarizer_session(self, scripted_client):
        assert isinstance(LLMSummarizerSession(scripted_client()), SummarizerSession)

    @pytest.mark.asyncio
    async def test_summarize_builds_prompt(self, scripted_client):
        client = scripted_client(["  - Plants make sugar from light.  "])
        session = LLMSummarizerSession(
            client, QuizContext(topic="Photosynthesis"), temperature=0.3
        )

        summary = await session.summarize("Plants use light...", context="Biology quiz")

        assert summary == "- Plants make sugar from light."
        assert len(client.calls) == 1
        call = client.calls[0]
        assert call["temperature"] == 0.3
        prompt = call["messages"][0]["content"]
        assert call["messages"][0]["role"] == "user"
        assert "Topic: Photosynthesis" in prompt
        assert "Biology quiz" in prompt
        assert "Plants use light..." in prompt

    @pytest.mark.asyncio
    async def test_default_guidance(self, scripted_client):
        client = scripted_client(["ok"])
        await LLMSummarizerSession(client).summarize("text")
        assert "Extract key educational concepts and facts" in client.calls[0]["messages"][0][
            "content"
        ]

    @pytest.mark.asyncio
    async def test_custom_prompt_template(self, scripted_client):
        client = scripted_client(["ok"])
        session = LLMSummarizerSession(
            client, prompt_template="{shared_context}|{context}|{text}"
        )
        await session.summarize("body", context="ctx")
        assert client.calls[0]["messages"][0]["content"] == (
            "Focus on key concepts for educational quizzes|ctx|body"
        )

    @pytest.mark.asyncio
    async def test_client_error_propagates(self, scripted_client):
        session = LLMSummarizerSession(scripted_client([]))
        with pytest.raises(RuntimeError):
            await session.summarize("text")
