# src/quizprep/quiz/policy.py
"""Policies for choosing a correct option when the model gave no signal."""

from collections.abc import Callable
from typing import Any

# Receives the question's options, returns the index to mark correct
CorrectAnswerPolicy = Callable[[list[dict[str, Any]]], int]


def first_option_policy(options: list[dict[str, Any]]) -> int:
    """Mark the first option correct.

    Never leaves a question answerless, at the cost of guessing.
    """
    return 0


DEFAULT_POLICY: CorrectAnswerPolicy = first_option_policy
