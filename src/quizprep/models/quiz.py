# src/quizprep/models/quiz.py
"""Canonical quiz question schema.

Questions form a tagged union keyed on ``type``; each variant carries its own
validation rules. Unknown keys emitted by the model (``question``,
``explanation``, ``tags`` ...) are preserved.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator


class QuestionType(str, Enum):
    """The closed set of question types the renderer understands."""

    MCQ = "MCQ"
    TRUE_FALSE = "True/False"
    FILL_IN_BLANK = "Fill in Blank"
    SHORT_ANSWER = "Short Answer"


class QuizOption(BaseModel):
    """A selectable answer option."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    text: str
    is_correct: bool = Field(alias="isCorrect")


class _QuestionBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    answer: Any = None


class _ChoiceQuestion(_QuestionBase):
    options: list[QuizOption]

    @property
    def correct_option(self) -> QuizOption:
        return next(option for option in self.options if option.is_correct)

    def _check_single_correct(self) -> None:
        correct = sum(1 for option in self.options if option.is_correct)
        if correct != 1:
            raise ValueError(f"exactly one option must be correct, found {correct}")


class MCQQuestion(_ChoiceQuestion):
    type: Literal["MCQ"]

    @model_validator(mode="after")
    def _check_options(self) -> "MCQQuestion":
        if not self.options:
            raise ValueError("MCQ question requires at least one option")
        self._check_single_correct()
        return self


class TrueFalseQuestion(_ChoiceQuestion):
    type: Literal["True/False"]

    @model_validator(mode="after")
    def _check_options(self) -> "TrueFalseQuestion":
        if len(self.options) != 2:
            raise ValueError(f"True/False question requires 2 options, got {len(self.options)}")
        self._check_single_correct()
        return self


class _FreeTextQuestion(_QuestionBase):
    correct_answers: list[str] | None = Field(default=None, alias="correctAnswers")

    @model_validator(mode="before")
    @classmethod
    def _reject_options(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("options"):
            raise ValueError("free-text questions do not take options")
        return data


class FillInBlankQuestion(_FreeTextQuestion):
    type: Literal["Fill in Blank"]
    blanks: list[str] | None = None

    @model_validator(mode="after")
    def _check_answer(self) -> "FillInBlankQuestion":
        if not (self.blanks or self.correct_answers or self.answer):
            raise ValueError("Fill in Blank question requires blanks or an answer")
        return self


class ShortAnswerQuestion(_FreeTextQuestion):
    type: Literal["Short Answer"]

    @model_validator(mode="after")
    def _check_answer(self) -> "ShortAnswerQuestion":
        if not (self.correct_answers or self.answer):
            raise ValueError("Short Answer question requires an answer")
        return self


QuizQuestion = Annotated[
    MCQQuestion | TrueFalseQuestion | FillInBlankQuestion | ShortAnswerQuestion,
    Field(discriminator="type"),
]


class QuizResponse(BaseModel):
    """A validated batch of quiz questions."""

    model_config = ConfigDict(extra="allow", frozen=True)

    questions: list[QuizQuestion]

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the wire shape (camelCase keys, no nulls)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


_quiz_adapter: TypeAdapter[QuizResponse] = TypeAdapter(QuizResponse)


def parse_quiz(obj: Any) -> QuizResponse:
    """Validate a decoded payload against the canonical schema.

    Raises:
        pydantic.ValidationError: If any question violates its variant rules.
    """
    return _quiz_adapter.validate_python(obj)


def validate_quiz(obj: Any) -> bool:
    """Return True if ``obj`` satisfies the canonical quiz schema."""
    try:
        parse_quiz(obj)
    except ValidationError:
        return False
    return True
