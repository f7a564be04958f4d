"""
Scoring engine for quiz submissions.

score_quiz() walks the quiz in question order, looks up the taker's answer
for each question and dispatches to the grader registered for the
question's variant:

- mcq        -> chosen option index vs correct_option_index
- true_false -> chosen boolean vs correct_answer
- text       -> shallow word-overlap match against reference_answer

An answer of another variant, a BlankAnswer or a wrongly typed value is
graded incorrect; it never fails the submission.

Graders are pure functions. The whole module keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from loguru import logger

from quizgrade.grading import DEFAULT_MIN_MATCH_RATIO, shallow_text_match

from .errors import UnknownQuestionTypeError
from .models import (
    Answer,
    BooleanAnswer,
    MultipleChoiceQuestion,
    OptionAnswer,
    Question,
    QuestionResult,
    Quiz,
    ScoreReport,
    ShortTextQuestion,
    TextAnswer,
    TrueFalseQuestion,
)

Grader = Callable[[Question, Answer, float], bool]

# Grader registry - populated by @register decorator
GRADERS: dict[type, Grader] = {}


def register(question_class: type):
    """Decorator to register the grader for a question class."""
    def decorator(func: Grader) -> Grader:
        GRADERS[question_class] = func
        return func
    return decorator


@register(MultipleChoiceQuestion)
def grade_multiple_choice(question: MultipleChoiceQuestion, answer: Answer, min_ratio: float) -> bool:
    if not isinstance(answer, OptionAnswer):
        return False
    index = answer.option_index
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return index == question.correct_option_index


@register(TrueFalseQuestion)
def grade_true_false(question: TrueFalseQuestion, answer: Answer, min_ratio: float) -> bool:
    if not isinstance(answer, BooleanAnswer) or not isinstance(answer.value, bool):
        return False
    return answer.value is question.correct_answer


@register(ShortTextQuestion)
def grade_short_text(question: ShortTextQuestion, answer: Answer, min_ratio: float) -> bool:
    if not isinstance(answer, TextAnswer):
        return False
    if answer.text is not None and not isinstance(answer.text, str):
        return False
    return shallow_text_match(question.reference_answer or "", answer.text or "", min_ratio)


def get_grader(question: Question) -> Grader:
    """Return the grader for a question, refusing unknown variants."""
    grader = GRADERS.get(type(question))
    if grader is None:
        raise UnknownQuestionTypeError(getattr(question, "question_type", type(question).__name__))
    return grader


def find_answer(question_id: str, answers: Sequence[Answer]) -> Answer | None:
    """
    First answer referencing `question_id`, or None.

    Later duplicates are ignored. Which duplicate wins follows submission
    order only because that is the search order.
    """
    return next((a for a in answers if a.question_id == question_id), None)


def score_quiz(
    quiz: Quiz,
    answers: Sequence[Answer],
    min_ratio: float = DEFAULT_MIN_MATCH_RATIO,
) -> ScoreReport:
    """
    Grade a full submission.

    Args:
        quiz: Quiz to grade against
        answers: Submitted answers in submission order; answers referencing
            unknown question ids are ignored
        min_ratio: Word coverage required for text answers

    Returns:
        ScoreReport with one detail entry per question, in quiz order

    Raises:
        UnknownQuestionTypeError: a question is not a known variant. Checked
            for every question before any grading happens.
    """
    graders = [get_grader(question) for question in quiz.questions]

    score = 0
    max_score = 0
    correct_count = 0
    details = []

    for question, grader in zip(quiz.questions, graders):
        marks = question.marks or 1
        max_score += marks

        answer = find_answer(question.id, answers)
        is_correct = answer is not None and grader(question, answer, min_ratio)

        if is_correct:
            score += marks
            correct_count += 1

        details.append(QuestionResult(
            question_id=question.id,
            question_text=question.text,
            question_type=question.question_type,
            marks=marks,
            is_correct=is_correct,
        ))

    logger.debug(
        f"Scored quiz {quiz.id}: {score}/{max_score} "
        f"({correct_count}/{len(quiz.questions)} correct, {len(answers)} answers)"
    )

    return ScoreReport(
        quiz_id=quiz.id,
        title=quiz.title,
        score=score,
        max_score=max_score,
        correct_count=correct_count,
        total_questions=len(quiz.questions),
        details=tuple(details),
    )
