# SQLAlchemy models
from .base import Base
from .quiz import QuizRecord

__all__ = [
    "Base",
    "QuizRecord",
]
