"""
Quiz repository over the document table.

Handles:
- Persisting newly authored quizzes
- Listing quiz metadata without questions
- Loading a full quiz back into its domain form
"""
from __future__ import annotations

from datetime import datetime, timezone

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from quizgrade.db.models import QuizRecord
from quizgrade.quiz.authoring import quiz_from_dict
from quizgrade.quiz.errors import QuizNotFoundError
from quizgrade.quiz.models import Quiz, QuizSummary


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class QuizRepository:
    """Store and load quizzes through a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, quiz: Quiz) -> Quiz:
        """
        Persist a quiz built by the authoring layer.

        Args:
            quiz: Quiz with generated ids and timestamps

        Returns:
            The same quiz, now stored
        """
        record = QuizRecord(
            id=quiz.id,
            title=quiz.title,
            description=quiz.description,
            document=quiz.to_dict(),
            created_at=quiz.created_at,
            updated_at=quiz.updated_at,
        )
        self.session.add(record)
        self.session.flush()
        logger.info(f"Created quiz {quiz.id} ({len(quiz.questions)} questions): {quiz.title}")
        return quiz

    def list_summaries(self) -> list[QuizSummary]:
        """List all quizzes, newest first, without their questions."""
        rows = self.session.execute(
            select(
                QuizRecord.id,
                QuizRecord.title,
                QuizRecord.description,
                QuizRecord.created_at,
                QuizRecord.updated_at,
            ).order_by(QuizRecord.created_at.desc())
        ).all()

        return [
            QuizSummary(
                id=row.id,
                title=row.title,
                description=row.description,
                created_at=_as_utc(row.created_at),
                updated_at=_as_utc(row.updated_at),
            )
            for row in rows
        ]

    def get(self, quiz_id: str) -> Quiz:
        """
        Load a full quiz.

        Raises:
            QuizNotFoundError: No quiz has this id
            UnknownQuestionTypeError: The stored document holds an unknown variant
        """
        record = self.session.get(QuizRecord, quiz_id)
        if record is None:
            raise QuizNotFoundError(quiz_id)
        return quiz_from_dict(record.document)
