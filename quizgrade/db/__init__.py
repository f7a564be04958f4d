"""Quiz document store: engine, sessions and repository."""

from .database import get_engine, get_session, init_db, session_scope
from .repository import QuizRepository

__all__ = [
    "QuizRepository",
    "get_engine",
    "get_session",
    "init_db",
    "session_scope",
]
