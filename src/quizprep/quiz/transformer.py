# src/quizprep/quiz/transformer.py
"""Best-effort structural repair of model-generated quiz payloads.

The transformer fixes the malformations models commonly produce (type name
variants, ``correct`` instead of ``isCorrect``, True/False questions without
options, multiple-choice questions without a marked answer). It is pure and
total: the input is never mutated and nothing is raised. Acceptance is a
separate step (``quizprep.models.parse_quiz``).
"""

from __future__ import annotations

import copy
from typing import Any

from quizprep.models import QuestionType
from quizprep.quiz.policy import DEFAULT_POLICY, CorrectAnswerPolicy

TYPE_SYNONYMS: dict[str, str] = {
    "mcq": QuestionType.MCQ.value,
    "multiple choice": QuestionType.MCQ.value,
    "multiplechoice": QuestionType.MCQ.value,
    "true/false": QuestionType.TRUE_FALSE.value,
    "truefalse": QuestionType.TRUE_FALSE.value,
    "boolean": QuestionType.TRUE_FALSE.value,
    "tf": QuestionType.TRUE_FALSE.value,
    "fill in blank": QuestionType.FILL_IN_BLANK.value,
    "fill in the blank": QuestionType.FILL_IN_BLANK.value,
    "fillinblank": QuestionType.FILL_IN_BLANK.value,
    "fillup": QuestionType.FILL_IN_BLANK.value,
    "fill-up": QuestionType.FILL_IN_BLANK.value,
    "blanks": QuestionType.FILL_IN_BLANK.value,
    "short answer": QuestionType.SHORT_ANSWER.value,
    "shortanswer": QuestionType.SHORT_ANSWER.value,
    "subjective": QuestionType.SHORT_ANSWER.value,
    "essay": QuestionType.SHORT_ANSWER.value,
    "text": QuestionType.SHORT_ANSWER.value,
}

_TRUTHY_STRINGS = {"true", "yes", "1", "correct"}

_INDEX_KEYS = ("correctAnswer", "correct_answer", "correctIndex")


def normalize_question_type(value: Any) -> Any:
    """Map a type name variant onto the closed set of question types.

    Non-string values default to MCQ. Unrecognized strings pass through
    unchanged so schema validation can reject them.
    """
    if not isinstance(value, str):
        return QuestionType.MCQ.value
    return TYPE_SYNONYMS.get(value.lower(), value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    return bool(value)


def _answer_is_true(answer: Any) -> bool:
    if isinstance(answer, bool):
        return answer
    return isinstance(answer, str) and answer.strip().lower() == "true"


def _normalize_option(option: Any) -> dict[str, Any] | None:
    """Coerce one option into ``{text, isCorrect, ...}`` form."""
    if option is None:
        return None
    if not isinstance(option, dict):
        return {"text": str(option), "isCorrect": False}

    fixed = dict(option)
    if "correct" in fixed and "isCorrect" not in fixed:
        fixed["isCorrect"] = _as_bool(fixed.pop("correct"))
    elif "isCorrect" in fixed:
        fixed["isCorrect"] = _as_bool(fixed["isCorrect"])
    else:
        fixed["isCorrect"] = False
    return fixed


def _normalize_options(options: Any) -> list[dict[str, Any]] | None:
    if not isinstance(options, list):
        return None
    normalized = (_normalize_option(option) for option in options)
    return [option for option in normalized if option is not None]


def _keep_first_correct(options: list[dict[str, Any]]) -> None:
    seen = False
    for option in options:
        if option["isCorrect"]:
            option["isCorrect"] = not seen
            seen = True


def _text_matches(option: dict[str, Any], answer: Any) -> bool:
    text = option.get("text")
    if text == answer:
        return True
    return (
        isinstance(text, str)
        and isinstance(answer, str)
        and text.strip().lower() == answer.strip().lower()
    )


def fix_true_false(question: dict[str, Any]) -> dict[str, Any]:
    """Guarantee exactly two options with exactly one marked correct."""
    fixed = dict(question)
    options = fixed.get("options")
    is_true = _answer_is_true(fixed.get("answer"))

    if not isinstance(options, list) or len(options) != 2:
        fixed["options"] = [
            {"text": "True", "isCorrect": is_true},
            {"text": "False", "isCorrect": not is_true},
        ]
        return fixed

    if not any(option["isCorrect"] for option in options):
        labels = [str(option.get("text", "")).strip().lower() for option in options]
        if labels == ["false", "true"]:
            options[0]["isCorrect"], options[1]["isCorrect"] = not is_true, is_true
        else:
            options[0]["isCorrect"], options[1]["isCorrect"] = is_true, not is_true
    else:
        _keep_first_correct(options)

    return fixed


def fix_mcq(
    question: dict[str, Any], policy: CorrectAnswerPolicy = DEFAULT_POLICY
) -> dict[str, Any]:
    """Make sure exactly one option is marked correct.

    Without a marked option the ``answer`` text is matched against option
    text; failing that, an index field (``correctAnswer``) is honored, and as
    a last resort ``policy`` picks the option.
    """
    fixed = dict(question)
    options = fixed.get("options")
    if not isinstance(options, list):
        options = fixed["options"] = []

    if not options:
        return fixed

    if any(option["isCorrect"] for option in options):
        _keep_first_correct(options)
        return fixed

    answer = fixed.get("answer")
    match = -1
    if answer not in (None, ""):
        match = next((i for i, option in enumerate(options) if _text_matches(option, answer)), -1)

    if match < 0:
        for key in _INDEX_KEYS:
            index = fixed.get(key)
            if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(options):
                match = index
                break

    if match < 0:
        match = policy(options)
        if not 0 <= match < len(options):
            match = 0

    options[match]["isCorrect"] = True
    return fixed


def fix_free_text(question: dict[str, Any]) -> dict[str, Any]:
    """Free-text questions carry answers, not options."""
    fixed = dict(question)
    if "correct_answers" in fixed and "correctAnswers" not in fixed:
        fixed["correctAnswers"] = fixed.pop("correct_answers")

    options = fixed.pop("options", None)
    if isinstance(options, list) and fixed.get("answer") in (None, ""):
        correct = next((o for o in options if o.get("isCorrect")), None)
        if correct is not None and correct.get("text"):
            fixed["answer"] = correct["text"]
    return fixed


def transform_question(question: Any, policy: CorrectAnswerPolicy = DEFAULT_POLICY) -> Any:
    """Repair a single question; non-dict values are returned unchanged."""
    if not isinstance(question, dict):
        return question

    fixed = dict(question)
    fixed["type"] = normalize_question_type(fixed.get("type"))

    options = _normalize_options(fixed.get("options"))
    if options is not None:
        fixed["options"] = options

    if fixed["type"] == QuestionType.TRUE_FALSE.value:
        return fix_true_false(fixed)
    if fixed["type"] == QuestionType.MCQ.value:
        return fix_mcq(fixed, policy)
    if fixed["type"] in (QuestionType.FILL_IN_BLANK.value, QuestionType.SHORT_ANSWER.value):
        return fix_free_text(fixed)
    return fixed


def transform_quiz_response(
    ai_response: Any, policy: CorrectAnswerPolicy = DEFAULT_POLICY
) -> Any:
    """Repair every question in a ``{"questions": [...]}`` payload.

    Works on a deep copy; question order is preserved. Non-dict payloads are
    returned unchanged.
    """
    if not isinstance(ai_response, dict):
        return ai_response

    transformed = copy.deepcopy(ai_response)
    questions = transformed.get("questions")
    if isinstance(questions, list):
        transformed["questions"] = [transform_question(q, policy) for q in questions]
    return transformed
