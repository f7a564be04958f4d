"""
Integration tests for the quiz document store.

Runs against a fresh in-memory SQLite database per test.
"""

from datetime import datetime, timedelta, timezone

import pytest

from quizgrade.db.models import QuizRecord
from quizgrade.db.repository import QuizRepository
from quizgrade.quiz import QuizNotFoundError, UnknownQuestionTypeError, build_quiz

pytestmark = pytest.mark.integration


class TestQuizRepository:
    """Test QuizRepository create/list/get."""

    def test_create_and_get(self, db_session, sample_quiz):
        repo = QuizRepository(db_session)
        repo.create(sample_quiz)
        db_session.commit()

        loaded = QuizRepository(db_session).get(sample_quiz.id)
        assert loaded == sample_quiz
        assert [q.id for q in loaded.questions] == [q.id for q in sample_quiz.questions]

    def test_get_missing(self, db_session):
        with pytest.raises(QuizNotFoundError) as exc_info:
            QuizRepository(db_session).get("does-not-exist")
        assert exc_info.value.quiz_id == "does-not-exist"

    def test_list_summaries_newest_first(self, db_session, quiz_payload):
        repo = QuizRepository(db_session)
        older = build_quiz({**quiz_payload, "title": "Older"})
        newer = build_quiz({**quiz_payload, "title": "Newer"})
        object.__setattr__(older, "created_at", datetime.now(timezone.utc) - timedelta(days=1))

        repo.create(older)
        repo.create(newer)
        db_session.commit()

        summaries = repo.list_summaries()
        assert [s.title for s in summaries] == ["Newer", "Older"]
        assert summaries[0].id == newer.id
        assert summaries[0].created_at.tzinfo is not None
        assert "questions" not in summaries[0].to_dict()

    def test_list_empty(self, db_session):
        assert QuizRepository(db_session).list_summaries() == []

    def test_stored_unknown_variant_raises(self, db_session, sample_quiz):
        document = sample_quiz.to_dict()
        document["questions"][0]["questionType"] = "essay"
        now = datetime.now(timezone.utc)
        db_session.add(QuizRecord(
            id=sample_quiz.id,
            title=sample_quiz.title,
            description=None,
            document=document,
            created_at=now,
            updated_at=now,
        ))
        db_session.commit()

        with pytest.raises(UnknownQuestionTypeError):
            QuizRepository(db_session).get(sample_quiz.id)
