"""
Build quiz and answer objects from wire payloads.

Authoring payload:
    {
        "title": "JS Basics",
        "description": "Simple quiz",
        "questions": [
            {"questionType": "mcq", "questionText": "2 + 2 = ?",
             "options": ["1", "2", "4", "5"], "correctOptionIndex": 2, "marks": 1},
            {"questionType": "true_false", "questionText": "React is a library.",
             "correctBoolean": true},
            {"questionType": "text", "questionText": "Capital of India?",
             "correctTextAnswer": "New Delhi", "marks": 2}
        ]
    }

Submission payload:
    {"answers": [{"questionId": "<id>", "answerOptionIndex": 2}, ...]}
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from loguru import logger

from .errors import QuizValidationError, UnknownQuestionTypeError
from .models import (
    Answer,
    BlankAnswer,
    BooleanAnswer,
    MultipleChoiceQuestion,
    OptionAnswer,
    Question,
    QuestionType,
    Quiz,
    ShortTextQuestion,
    TextAnswer,
    TrueFalseQuestion,
    new_id,
)

QUIZ_REQUIRED_MESSAGE = "Title and at least one question are required"
ANSWERS_REQUIRED_MESSAGE = "answers array is required"

ANSWER_FIELDS = ("answerOptionIndex", "answerBoolean", "answerText")


def _marks(payload: Mapping[str, Any]) -> int:
    marks = payload.get("marks")
    return 1 if marks is None else marks


def question_from_dict(payload: Mapping[str, Any], keep_id: bool = False) -> Question:
    """
    Build one question from its wire form.

    Args:
        payload: Question dictionary with a questionType tag
        keep_id: Reuse payload["id"] (decoding a stored quiz) instead of
            generating a fresh identifier (authoring)

    Raises:
        UnknownQuestionTypeError: questionType is not mcq, true_false or text
        QuizValidationError: variant fields are missing or invalid
    """
    if not isinstance(payload, Mapping):
        raise QuizValidationError("Each question must be an object")

    raw_type = payload.get("questionType")
    try:
        question_type = QuestionType(raw_type)
    except ValueError:
        raise UnknownQuestionTypeError(raw_type) from None

    question_id = payload.get("id") if keep_id and payload.get("id") else new_id()
    text = payload.get("questionText")
    marks = _marks(payload)

    if question_type is QuestionType.MCQ:
        options = payload.get("options")
        if not isinstance(options, (list, tuple)) or not all(isinstance(o, str) for o in options):
            raise QuizValidationError("mcq questions need a list of string options")
        return MultipleChoiceQuestion(
            id=str(question_id),
            text=text,
            options=tuple(options),
            correct_option_index=payload.get("correctOptionIndex"),
            marks=marks,
        )

    if question_type is QuestionType.TRUE_FALSE:
        return TrueFalseQuestion(
            id=str(question_id),
            text=text,
            correct_answer=payload.get("correctBoolean"),
            marks=marks,
        )

    return ShortTextQuestion(
        id=str(question_id),
        text=text,
        reference_answer=payload.get("correctTextAnswer") or "",
        marks=marks,
    )


def build_quiz(payload: Mapping[str, Any]) -> Quiz:
    """
    Create a new quiz from an authoring payload.

    All identifiers and timestamps are generated here. An unknown
    questionType is reported as a validation failure.
    """
    if not isinstance(payload, Mapping):
        raise QuizValidationError(QUIZ_REQUIRED_MESSAGE)

    title = payload.get("title")
    questions = payload.get("questions")
    if not title or not isinstance(title, str) or not isinstance(questions, list) or not questions:
        raise QuizValidationError(QUIZ_REQUIRED_MESSAGE)

    description = payload.get("description")
    if description is not None and not isinstance(description, str):
        raise QuizValidationError("description must be a string")

    built = []
    for position, item in enumerate(questions, start=1):
        try:
            built.append(question_from_dict(item))
        except (UnknownQuestionTypeError, QuizValidationError) as e:
            raise QuizValidationError(f"Question {position}: {e}") from e

    return Quiz(title=title, description=description, questions=tuple(built))


def quiz_from_dict(document: Mapping[str, Any]) -> Quiz:
    """Rebuild a stored quiz, keeping its identifiers and timestamps."""
    timestamps = {}
    for key, field_name in (("createdAt", "created_at"), ("updatedAt", "updated_at")):
        value = document.get(key)
        if value is not None:
            timestamps[field_name] = datetime.fromisoformat(value) if isinstance(value, str) else value

    return Quiz(
        id=document["id"],
        title=document["title"],
        description=document.get("description"),
        questions=tuple(question_from_dict(q, keep_id=True) for q in document.get("questions", [])),
        **timestamps,
    )


def answer_from_dict(payload: Any) -> Answer | None:
    """
    Build one answer from a submission entry.

    Entries that are not objects or carry no questionId reference no
    question and come back as None. Values are not type-checked here: a
    null, a wrongly typed value or a missing answer field only makes that
    question incorrect when it is graded.

    When several answer fields are present, the first non-null one in
    ANSWER_FIELDS order is used.
    """
    if not isinstance(payload, Mapping):
        return None

    question_id = payload.get("questionId")
    if question_id is None or question_id == "":
        return None
    question_id = str(question_id)

    present = [name for name in ANSWER_FIELDS if name in payload]
    if not present:
        return BlankAnswer(question_id=question_id)
    name = next((n for n in present if payload[n] is not None), present[0])
    value = payload[name]

    if name == "answerOptionIndex":
        return OptionAnswer(question_id=question_id, option_index=value)
    if name == "answerBoolean":
        return BooleanAnswer(question_id=question_id, value=value)
    return TextAnswer(question_id=question_id, text=value)


def parse_answers(payload: Any) -> list[Answer]:
    """
    Parse a submission payload into answers, preserving submission order.

    Raises:
        QuizValidationError: answers is missing or not a list
    """
    answers = payload.get("answers") if isinstance(payload, Mapping) else None
    if not isinstance(answers, list):
        raise QuizValidationError(ANSWERS_REQUIRED_MESSAGE)

    parsed = []
    for position, item in enumerate(answers, start=1):
        answer = answer_from_dict(item)
        if answer is None:
            logger.debug(f"Skipping answer {position}: no questionId")
            continue
        parsed.append(answer)
    return parsed
