"""
Quiz storage model.

A quiz is stored as one document: listing columns (title, description,
timestamps) sit beside a JSON column holding the full quiz, questions and
answer keys included.

document structure:
    {
        "id": "9f1c...",
        "title": "JS Basics",
        "description": "Simple quiz",
        "questions": [
            {"id": "...", "questionType": "mcq", "questionText": "2 + 2 = ?",
             "options": ["1", "2", "4", "5"], "correctOptionIndex": 2, "marks": 1}
        ],
        "createdAt": "2024-01-01T00:00:00+00:00",
        "updatedAt": "2024-01-01T00:00:00+00:00"
    }
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class QuizRecord(Base):
    """Stored quiz document keyed by its generated id."""

    __tablename__ = "quizzes"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    document: Mapped[dict] = mapped_column(JSON, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<QuizRecord(id={self.id}, title={self.title!r})>"
