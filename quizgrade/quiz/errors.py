"""Exceptions raised by quiz authoring, storage and scoring."""


class QuizError(Exception):
    """Base class for quiz errors."""
    pass


class QuizValidationError(QuizError):
    """Raised when an authoring or submission payload is rejected."""
    pass


class UnknownQuestionTypeError(QuizError):
    """Raised when a question is not one of the known variants."""

    def __init__(self, question_type: object):
        self.question_type = question_type
        super().__init__(f"Unknown question type: {question_type!r}")


class QuizNotFoundError(QuizError):
    """Raised when a quiz id does not resolve to a stored quiz."""

    def __init__(self, quiz_id: str):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz not found: {quiz_id}")
