"""
Quiz model and scoring.

This module provides:
- Question variants (mcq, true_false, text) and the Quiz container
- build_quiz / parse_answers: wire payloads to domain objects
- score_quiz: grade a submission into a ScoreReport
"""

from .authoring import build_quiz, parse_answers, quiz_from_dict
from .errors import QuizError, QuizNotFoundError, QuizValidationError, UnknownQuestionTypeError
from .models import (
    Answer,
    BlankAnswer,
    BooleanAnswer,
    MultipleChoiceQuestion,
    OptionAnswer,
    Question,
    QuestionResult,
    QuestionType,
    Quiz,
    QuizSummary,
    ScoreReport,
    ShortTextQuestion,
    TextAnswer,
    TrueFalseQuestion,
)
from .scoring import score_quiz

__all__ = [
    "Answer",
    "BlankAnswer",
    "BooleanAnswer",
    "MultipleChoiceQuestion",
    "OptionAnswer",
    "Question",
    "QuestionResult",
    "QuestionType",
    "Quiz",
    "QuizError",
    "QuizNotFoundError",
    "QuizSummary",
    "QuizValidationError",
    "ScoreReport",
    "ShortTextQuestion",
    "TextAnswer",
    "TrueFalseQuestion",
    "UnknownQuestionTypeError",
    "build_quiz",
    "parse_answers",
    "quiz_from_dict",
    "score_quiz",
]
