# tests/text/test_chunker.py
"""Tests for the Chunker."""

import pytest

from quizprep.text import Chunker, chunk_text, estimate_tokens, should_summarize


def _paragraphs(count: int, size: int = 70) -> str:
    return "\n\n".join(f"{i:03d} " + "x" * (size - 4) for i in range(count))


def _assert_covers(text, chunks, max_chars, overlap):
    assert chunks[0].start == 0
    assert chunks[-1].end == len(text)
    for chunk in chunks:
        assert 0 < chunk.end - chunk.start <= max_chars
        assert chunk.text == text[chunk.start : chunk.end]
    for prev, nxt in zip(chunks, chunks[1:], strict=False):
        assert nxt.start <= prev.end
        assert prev.end - nxt.start <= overlap
        assert nxt.start > prev.start


class TestChunkerInit:
    def test_defaults(self):
        chunker = Chunker()
        assert chunker.max_chars == 12000
        assert chunker.min_chars == 4000
        assert chunker.overlap == 200

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_chars": 0},
            {"max_chars": 100, "min_chars": 200},
            {"max_chars": 100, "min_chars": -1},
            {"max_chars": 100, "min_chars": 10, "overlap": -5},
        ],
    )
    def test_invalid_sizes(self, kwargs):
        with pytest.raises(ValueError):
            Chunker(**kwargs)


class TestChunkerSplit:
    def test_empty_text(self):
        assert Chunker().split("") == []

    def test_short_text_single_chunk(self):
        text = "A short paragraph.\n\nAnother one."
        chunks = Chunker(max_chars=100, min_chars=10, overlap=5).split(text)
        assert len(chunks) == 1
        assert chunks[0].id == "chunk_1"
        assert chunks[0].start == 0
        assert chunks[0].end == len(text)
        assert chunks[0].text == text

    def test_text_exactly_max_chars(self):
        text = "y" * 100
        chunks = Chunker(max_chars=100, min_chars=10, overlap=5).split(text)
        assert len(chunks) == 1

    def test_covers_text_with_bounded_overlap(self):
        text = _paragraphs(40)
        chunks = Chunker(max_chars=300, min_chars=100, overlap=30).split(text)
        assert len(chunks) > 1
        _assert_covers(text, chunks, max_chars=300, overlap=30)

    def test_covers_text_without_paragraph_breaks(self):
        text = "z" * 1050
        chunks = Chunker(max_chars=200, min_chars=50, overlap=20).split(text)
        _assert_covers(text, chunks, max_chars=200, overlap=20)

    def test_cuts_at_paragraph_break(self):
        text = "a" * 60 + "\n\n" + "b" * 100
        chunks = Chunker(max_chars=100, min_chars=30, overlap=0).split(text)
        assert chunks[0].end == 60
        assert chunks[0].text == "a" * 60

    def test_ignores_paragraph_break_too_early_in_window(self):
        text = "a" * 10 + "\n\n" + "b" * 200
        chunks = Chunker(max_chars=100, min_chars=30, overlap=0).split(text)
        assert chunks[0].end == 100

    def test_always_makes_progress(self):
        text = "q" * 25
        chunks = Chunker(max_chars=10, min_chars=0, overlap=50).split(text)
        assert chunks[-1].end == 25
        starts = [chunk.start for chunk in chunks]
        assert starts == sorted(set(starts))

    def test_sequential_ids(self):
        chunks = Chunker(max_chars=100, min_chars=10, overlap=0).split("w" * 350)
        assert [c.id for c in chunks] == ["chunk_1", "chunk_2", "chunk_3", "chunk_4"]

    def test_needs_summarization_flag(self):
        chunks = Chunker(max_chars=100, min_chars=40, overlap=0).split("w" * 130)
        assert chunks[0].needs_summarization is True
        assert chunks[1].needs_summarization is False

    def test_token_estimate(self):
        chunks = Chunker().split("one two three four five six seven eight nine ten")
        assert chunks[0].token_estimate == 13


class TestHelpers:
    def test_chunk_text_matches_chunker(self):
        text = _paragraphs(10)
        assert chunk_text(text, 200, 50, 10) == Chunker(200, 50, 10).split(text)

    def test_estimate_tokens(self):
        assert estimate_tokens("") == 0
        assert estimate_tokens("one two three") == 4

    def test_should_summarize_empty(self):
        assert should_summarize([]) is False

    def test_should_summarize_single_small_chunk(self):
        chunks = chunk_text("Just a little text.")
        assert should_summarize(chunks) is False

    def test_should_summarize_large_content(self):
        chunks = chunk_text("word " * 3000)
        assert should_summarize(chunks) is True

    def test_should_summarize_respects_min_chars(self):
        chunks = chunk_text("word " * 100, min_chars=50)
        assert should_summarize(chunks, min_chars=50) is True
