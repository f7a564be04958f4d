"""
Quiz domain model.

Question variants:
- MultipleChoiceQuestion ("mcq"): options + correct_option_index
- TrueFalseQuestion ("true_false"): correct_answer
- ShortTextQuestion ("text"): reference_answer, graded by shallow text match

Each variant carries only its own fields. Answers mirror the variants:
OptionAnswer, BooleanAnswer and TextAnswer, each referencing a question id.
BlankAnswer stands for an entry that named a question but gave no value.

Instances are frozen; a quiz and its questions never change after creation.
Wire dictionaries use the camelCase keys of the HTTP API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Union
from uuid import uuid4

from .errors import QuizValidationError


class QuestionType(str, Enum):
    """Supported question variants, valued by their wire tag."""
    MCQ = "mcq"
    TRUE_FALSE = "true_false"
    TEXT = "text"


def new_id() -> str:
    """Generate an identifier for a quiz or question."""
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_common(text: str, marks: int) -> None:
    if not isinstance(text, str) or not text.strip():
        raise QuizValidationError("questionText is required")
    if isinstance(marks, bool) or not isinstance(marks, int) or marks < 1:
        raise QuizValidationError(f"marks must be a positive integer, got {marks!r}")


# ========================================
# Questions
# ========================================


@dataclass(frozen=True)
class MultipleChoiceQuestion:
    """Single-answer multiple choice question."""

    text: str
    options: tuple[str, ...]
    correct_option_index: int
    marks: int = 1
    id: str = field(default_factory=new_id)

    question_type: ClassVar[QuestionType] = QuestionType.MCQ

    def __post_init__(self):
        _check_common(self.text, self.marks)
        # Accept any sequence but store a tuple so the question stays immutable
        object.__setattr__(self, "options", tuple(self.options))
        if len(self.options) < 2:
            raise QuizValidationError("mcq questions need at least 2 options")
        index = self.correct_option_index
        if isinstance(index, bool) or not isinstance(index, int):
            raise QuizValidationError("correctOptionIndex must be an integer")
        if not 0 <= index < len(self.options):
            raise QuizValidationError(
                f"correctOptionIndex {index} out of range for {len(self.options)} options"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "questionType": self.question_type.value,
            "questionText": self.text,
            "options": list(self.options),
            "correctOptionIndex": self.correct_option_index,
            "marks": self.marks,
        }


@dataclass(frozen=True)
class TrueFalseQuestion:
    """Statement the taker marks true or false."""

    text: str
    correct_answer: bool
    marks: int = 1
    id: str = field(default_factory=new_id)

    question_type: ClassVar[QuestionType] = QuestionType.TRUE_FALSE

    def __post_init__(self):
        _check_common(self.text, self.marks)
        if not isinstance(self.correct_answer, bool):
            raise QuizValidationError("correctBoolean must be true or false")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "questionType": self.question_type.value,
            "questionText": self.text,
            "correctBoolean": self.correct_answer,
            "marks": self.marks,
        }


@dataclass(frozen=True)
class ShortTextQuestion:
    """
    Free-text question graded against a reference answer.

    An empty reference answer is allowed; it can never be matched.
    """

    text: str
    reference_answer: str = ""
    marks: int = 1
    id: str = field(default_factory=new_id)

    question_type: ClassVar[QuestionType] = QuestionType.TEXT

    def __post_init__(self):
        _check_common(self.text, self.marks)
        if self.reference_answer is None:
            object.__setattr__(self, "reference_answer", "")
        elif not isinstance(self.reference_answer, str):
            raise QuizValidationError("correctTextAnswer must be a string")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "questionType": self.question_type.value,
            "questionText": self.text,
            "correctTextAnswer": self.reference_answer,
            "marks": self.marks,
        }


Question = Union[MultipleChoiceQuestion, TrueFalseQuestion, ShortTextQuestion]

QUESTION_CLASSES: dict[QuestionType, type] = {
    QuestionType.MCQ: MultipleChoiceQuestion,
    QuestionType.TRUE_FALSE: TrueFalseQuestion,
    QuestionType.TEXT: ShortTextQuestion,
}


# ========================================
# Quiz
# ========================================


@dataclass(frozen=True)
class Quiz:
    """An ordered set of questions under a title."""

    title: str
    questions: tuple[Question, ...]
    description: str | None = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise QuizValidationError("Title and at least one question are required")
        object.__setattr__(self, "questions", tuple(self.questions))
        if not self.questions:
            raise QuizValidationError("Title and at least one question are required")

        seen: set[str] = set()
        for question in self.questions:
            if question.id in seen:
                raise QuizValidationError(f"Duplicate question id: {question.id}")
            seen.add(question.id)

        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)

    @property
    def max_score(self) -> int:
        """Sum of marks over all questions."""
        return sum(q.marks for q in self.questions)

    def to_summary_dict(self) -> dict[str, Any]:
        """Listing form: no questions, so no answer keys."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    def to_dict(self) -> dict[str, Any]:
        """Full form, answer keys included."""
        data = self.to_summary_dict()
        data["questions"] = [q.to_dict() for q in self.questions]
        return data


@dataclass(frozen=True)
class QuizSummary:
    """Quiz metadata as returned by listings."""

    id: str
    title: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


# ========================================
# Answers
# ========================================
#
# Answer values are kept as submitted. Graders compare them strictly, so a
# string "2" or a null never counts as a correct option index.


@dataclass(frozen=True)
class OptionAnswer:
    """Chosen option index for a multiple choice question."""
    question_id: str
    option_index: Any


@dataclass(frozen=True)
class BooleanAnswer:
    """True/false answer."""
    question_id: str
    value: Any


@dataclass(frozen=True)
class TextAnswer:
    """Free-text answer."""
    question_id: str
    text: Any


@dataclass(frozen=True)
class BlankAnswer:
    """An answer entry that carried no answer value."""
    question_id: str


Answer = Union[OptionAnswer, BooleanAnswer, TextAnswer, BlankAnswer]


# ========================================
# Score report
# ========================================


@dataclass(frozen=True)
class QuestionResult:
    """Grading outcome for one question."""

    question_id: str
    question_text: str
    question_type: QuestionType
    marks: int
    is_correct: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "questionId": self.question_id,
            "questionText": self.question_text,
            "questionType": self.question_type.value,
            "marks": self.marks,
            "isCorrect": self.is_correct,
        }


@dataclass(frozen=True)
class ScoreReport:
    """Full breakdown of a graded submission, details in quiz order."""

    quiz_id: str
    title: str
    score: int
    max_score: int
    correct_count: int
    total_questions: int
    details: tuple[QuestionResult, ...]

    @property
    def percentage(self) -> float:
        if self.max_score == 0:
            return 0.0
        return round(self.score / self.max_score * 100.0, 2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "quizId": self.quiz_id,
            "title": self.title,
            "score": self.score,
            "maxScore": self.max_score,
            "correctCount": self.correct_count,
            "totalQuestions": self.total_questions,
            "details": [d.to_dict() for d in self.details],
        }
