"""
quizgrade: quiz authoring and automatic answer scoring.

Subpackages:
- grading: text normalization and shallow text matching
- quiz: question variants, authoring payloads and the scoring engine
- db: quiz document store (SQLAlchemy)
- api: FastAPI application
- cli: Typer command line
"""

__version__ = "1.0.0"
