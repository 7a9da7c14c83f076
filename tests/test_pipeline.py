# tests/test_pipeline.py
"""Tests for source preparation and quiz output parsing."""

import json

import pytest

from quizprep.exceptions import ExtractionError, JSONRecoveryError, QuizValidationError
from quizprep.models import QuizResponse, SourceType
from quizprep.pipeline import ensure_extracted, looks_like_quiz, parse_quiz_output, prepare_source
from quizprep.recovery import LLMJsonRepairer
from quizprep.settings import Settings
from quizprep.sources import extract_from_selection, finalize_source

SMALL = Settings(max_chars=200, min_chars=50, overlap=10, min_summary_words=5)


def _large_text(paragraphs: int = 8) -> str:
    return "\n\n".join(
        f"Paragraph {i} describes the light reactions and the Calvin cycle in detail."
        for i in range(paragraphs)
    )


class TestEnsureExtracted:
    def test_passes_through(self):
        source = extract_from_selection("Some text")
        assert ensure_extracted(source) is source

    def test_raises_on_empty(self):
        source = finalize_source(SourceType.PAGE, "")
        with pytest.raises(ExtractionError) as exc_info:
            ensure_extracted(source)
        assert exc_info.value.source_type == "page"


class TestPrepareSource:
    @pytest.mark.asyncio
    async def test_small_source_passes_through(self):
        source = extract_from_selection("Short text about cells.")
        prepared = await prepare_source(source)
        assert prepared.text == source.text
        assert prepared.meta["processing"]["summarization_attempted"] is False

    @pytest.mark.asyncio
    async def test_empty_source_raises(self):
        with pytest.raises(ExtractionError):
            await prepare_source(finalize_source(SourceType.SELECTION, "  "))

    @pytest.mark.asyncio
    async def test_without_summarizer_uses_first_chunk(self):
        source = extract_from_selection(_large_text(), settings=SMALL)
        assert len(source.chunks) > 1

        prepared = await prepare_source(source, settings=SMALL)

        assert prepared.text == source.chunks[0].text
        assert prepared.meta["processing"]["fallback"] == "first_chunk"
        assert prepared.title == source.title

    @pytest.mark.asyncio
    async def test_summarizes_large_source(self, session_class):
        source = extract_from_selection(_large_text(), settings=SMALL)
        sessions = []

        def factory(quiz_context):
            session = session_class(summary="Light reactions make ATP and NADPH for sugar.")
            sessions.append((quiz_context, session))
            return session

        events = []
        prepared = await prepare_source(
            source, session_factory=factory, settings=SMALL, on_progress=events.append
        )

        quiz_context, session = sessions[0]
        assert quiz_context.topic == "Selection"
        assert session.closed
        assert len(session.summarized) == len(source.chunks)
        processing = prepared.meta["processing"]
        assert processing["summarization_succeeded"] is True
        assert processing["fallbacks"] == 0
        assert "Light reactions make ATP" in prepared.text
        assert len(events) == 2 * len(source.chunks)

    @pytest.mark.asyncio
    async def test_short_summary_falls_back_to_first_chunk(self, session_class):
        source = extract_from_selection(_large_text(), settings=SMALL)
        settings = SMALL.model_copy(update={"min_summary_words": 10_000})

        prepared = await prepare_source(
            source, session_factory=lambda ctx: session_class(), settings=settings
        )

        assert prepared.text == source.chunks[0].text
        assert prepared.meta["processing"]["summarization_attempted"] is True
        assert prepared.meta["processing"]["fallback"] == "first_chunk"


def _payload(questions):
    return json.dumps({"questions": questions})


class TestParseQuizOutput:
    def test_looks_like_quiz(self):
        assert looks_like_quiz({"questions": []})
        assert not looks_like_quiz({"questions": "none"})
        assert not looks_like_quiz([])

    @pytest.mark.asyncio
    async def test_repairs_and_validates(self):
        raw = "Here you go:\n```json\n" + _payload(
            [
                {"type": "true/false", "question": "Sun is a star.", "answer": "True"},
                {
                    "type": "mcq",
                    "question": "Largest planet?",
                    "answer": "Jupiter",
                    "options": [{"text": "Mars"}, {"text": "Jupiter", "correct": True}],
                },
            ]
        ) + "\n```"

        quiz = await parse_quiz_output(raw)

        assert isinstance(quiz, QuizResponse)
        payload = quiz.to_payload()
        assert payload["questions"][0]["options"][0] == {"text": "True", "isCorrect": True}
        assert payload["questions"][1]["options"][1]["isCorrect"] is True

    @pytest.mark.asyncio
    async def test_unrecoverable_raises(self):
        with pytest.raises(JSONRecoveryError):
            await parse_quiz_output("I could not make a quiz, sorry.")

    @pytest.mark.asyncio
    async def test_structure_check_uses_repair(self, scripted_client):
        client = scripted_client([_payload([{"type": "Short Answer", "answer": "42"}])])
        quiz = await parse_quiz_output('{"quiz": []}', repair_fn=LLMJsonRepairer(client))
        assert quiz.questions[0].answer == "42"

    @pytest.mark.asyncio
    async def test_schema_violation_raises(self):
        raw = _payload([{"type": "Matching", "question": "Pair them"}])
        with pytest.raises(QuizValidationError) as exc_info:
            await parse_quiz_output(raw)
        assert exc_info.value.errors

    @pytest.mark.asyncio
    async def test_preview_uses_settings(self):
        with pytest.raises(JSONRecoveryError) as exc_info:
            await parse_quiz_output("nothing" * 10, settings=Settings(preview_chars=7))
        assert exc_info.value.preview == "nothing..."
