"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import os
import sys
from pathlib import Path

import pytest

# Tests run against an in-memory database; must be set before config is loaded
os.environ["QUIZGRADE_DATABASE_URL"] = "sqlite://"
os.environ["QUIZGRADE_LOG_LEVEL"] = "WARNING"
# Wide Rich tables so CLI output is not wrapped
os.environ["COLUMNS"] = "200"

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (database, HTTP)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def quiz_payload():
    """Authoring payload: one mcq, one true/false and one text question."""
    return {
        "title": "General Knowledge",
        "description": "Capitals and basics",
        "questions": [
            {
                "questionType": "mcq",
                "questionText": "2 + 2 = ?",
                "options": ["1", "2", "4", "5"],
                "correctOptionIndex": 2,
                "marks": 1,
            },
            {
                "questionType": "true_false",
                "questionText": "Python is a programming language.",
                "correctBoolean": True,
                "marks": 1,
            },
            {
                "questionType": "text",
                "questionText": "Capital of India?",
                "correctTextAnswer": "New Delhi",
                "marks": 2,
            },
        ],
    }


@pytest.fixture
def sample_quiz(quiz_payload):
    """A built quiz from quiz_payload."""
    from quizgrade.quiz import build_quiz

    return build_quiz(quiz_payload)


@pytest.fixture
def db_session():
    """Session on a fresh in-memory database, rolled back after the test."""
    from sqlalchemy.orm import sessionmaker

    from quizgrade.db.database import create_db_engine, init_db

    engine = create_db_engine("sqlite://")
    init_db(bind=engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
