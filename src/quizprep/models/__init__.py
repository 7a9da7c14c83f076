# src/quizprep/models/__init__.py
"""Data models for quizprep."""

from quizprep.models.chunk import Chunk
from quizprep.models.quiz import (
    FillInBlankQuestion,
    MCQQuestion,
    QuestionType,
    QuizOption,
    QuizQuestion,
    QuizResponse,
    ShortAnswerQuestion,
    TrueFalseQuestion,
    parse_quiz,
    validate_quiz,
)
from quizprep.models.source import ExtractedSource, SourceType
from quizprep.models.summary import AssembledSummary, ProgressEvent, SummaryMeta, SummaryResult

__all__ = [
    "Chunk",
    "ExtractedSource",
    "SourceType",
    "SummaryResult",
    "SummaryMeta",
    "AssembledSummary",
    "ProgressEvent",
    "QuestionType",
    "QuizOption",
    "QuizQuestion",
    "QuizResponse",
    "MCQQuestion",
    "TrueFalseQuestion",
    "FillInBlankQuestion",
    "ShortAnswerQuestion",
    "parse_quiz",
    "validate_quiz",
]
