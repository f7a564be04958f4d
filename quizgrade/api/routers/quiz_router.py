"""
Quiz router for authoring and taking quizzes.

Endpoints for:
- Listing quizzes (metadata only, no answer keys)
- Fetching a single quiz with its questions
- Creating a quiz (admin)
- Submitting answers and receiving a score report
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from config import get_settings
from quizgrade.db.database import get_session
from quizgrade.db.repository import QuizRepository
from quizgrade.quiz import (
    QuizNotFoundError,
    QuizValidationError,
    build_quiz,
    parse_answers,
    score_quiz,
)

router = APIRouter()


# ========================================
# Response Models
# ========================================


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class QuizSummaryResponse(CamelModel):
    """Quiz metadata for listings."""

    id: str
    title: str
    description: Optional[str] = None
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")


class QuestionResultResponse(CamelModel):
    """Grading outcome for one question."""

    question_id: str = Field(..., alias="questionId")
    question_text: str = Field(..., alias="questionText")
    question_type: str = Field(..., alias="questionType", description="mcq, true_false or text")
    marks: int
    is_correct: bool = Field(..., alias="isCorrect")


class ScoreReportResponse(CamelModel):
    """Score breakdown for a submission."""

    quiz_id: str = Field(..., alias="quizId")
    title: str
    score: int
    max_score: int = Field(..., alias="maxScore")
    correct_count: int = Field(..., alias="correctCount")
    total_questions: int = Field(..., alias="totalQuestions")
    details: List[QuestionResultResponse]


# ========================================
# Endpoints
# ========================================


@router.get("", response_model=List[QuizSummaryResponse], summary="List quizzes")
def list_quizzes(session: Session = Depends(get_session)) -> List[Dict[str, Any]]:
    """List all quizzes. Questions are left out so answer keys stay hidden."""
    try:
        return [s.to_dict() for s in QuizRepository(session).list_summaries()]
    except Exception:
        logger.exception("Failed to list quizzes")
        raise HTTPException(status_code=500, detail="Server error while fetching quizzes")


@router.get("/{quiz_id}", summary="Get a quiz")
def get_quiz(quiz_id: str, session: Session = Depends(get_session)) -> Dict[str, Any]:
    """
    Get a single quiz with all of its questions.

    The response includes correctOptionIndex, correctBoolean and
    correctTextAnswer for every question.
    """
    try:
        return QuizRepository(session).get(quiz_id).to_dict()
    except QuizNotFoundError:
        raise HTTPException(status_code=404, detail="Quiz not found")
    except Exception:
        logger.exception(f"Failed to fetch quiz {quiz_id}")
        raise HTTPException(status_code=500, detail="Server error while fetching quiz")


@router.post("", status_code=201, summary="Create a quiz")
def create_quiz(
    payload: Any = Body(None, examples=[{
        "title": "JS Basics",
        "description": "Simple quiz",
        "questions": [
            {"questionType": "mcq", "questionText": "2 + 2 = ?",
             "options": ["1", "2", "4", "5"], "correctOptionIndex": 2, "marks": 1},
            {"questionType": "true_false", "questionText": "React is a library.",
             "correctBoolean": True, "marks": 1},
            {"questionType": "text", "questionText": "Capital of India?",
             "correctTextAnswer": "New Delhi", "marks": 2},
        ],
    }]),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Create a quiz. Requires a title and at least one question."""
    try:
        quiz = build_quiz(payload)
    except QuizValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return QuizRepository(session).create(quiz).to_dict()
    except Exception:
        logger.exception("Failed to create quiz")
        raise HTTPException(status_code=500, detail="Server error while creating quiz")


@router.post("/{quiz_id}/submit", response_model=ScoreReportResponse, summary="Submit answers")
def submit_quiz(
    quiz_id: str,
    payload: Any = Body(None, examples=[{
        "answers": [
            {"questionId": "<qid1>", "answerOptionIndex": 2},
            {"questionId": "<qid2>", "answerBoolean": True},
            {"questionId": "<qid3>", "answerText": "new delhi"},
        ],
    }]),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """
    Submit answers for a quiz and get the score.

    Each answer carries questionId and exactly one of answerOptionIndex,
    answerBoolean or answerText. Unanswered questions and answers with a
    null or wrongly typed value count as incorrect; entries without a
    questionId and answers for unknown questions are ignored.
    """
    try:
        answers = parse_answers(payload)
    except QuizValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        quiz = QuizRepository(session).get(quiz_id)
        report = score_quiz(quiz, answers, min_ratio=get_settings().text_match_min_ratio)
        return report.to_dict()
    except QuizNotFoundError:
        raise HTTPException(status_code=404, detail="Quiz not found")
    except Exception:
        logger.exception(f"Failed to submit quiz {quiz_id}")
        raise HTTPException(status_code=500, detail="Server error while submitting quiz")
