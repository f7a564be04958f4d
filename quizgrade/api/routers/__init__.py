"""API routers for quizgrade."""

from quizgrade.api.routers import quiz_router

__all__ = [
    "quiz_router",
]
