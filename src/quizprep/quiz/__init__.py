# src/quizprep/quiz/__init__.py
"""Quiz payload repair."""

from quizprep.quiz.policy import DEFAULT_POLICY, CorrectAnswerPolicy, first_option_policy
from quizprep.quiz.transformer import (
    TYPE_SYNONYMS,
    fix_free_text,
    fix_mcq,
    fix_true_false,
    normalize_question_type,
    transform_question,
    transform_quiz_response,
)

__all__ = [
    "DEFAULT_POLICY",
    "CorrectAnswerPolicy",
    "first_option_policy",
    "TYPE_SYNONYMS",
    "fix_free_text",
    "fix_mcq",
    "fix_true_false",
    "normalize_question_type",
    "transform_question",
    "transform_quiz_response",
]
