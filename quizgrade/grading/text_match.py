"""
Shallow text matching for free-text answers.

A candidate answer is judged against a reference answer by word overlap:
- normalize_text(): lower-case, strip punctuation, collapse whitespace
- extract_important_words(): drop stopwords and short tokens
- shallow_text_match(): fraction of reference words covered by the candidate

No semantic understanding is attempted. "Paris is the capital" covers
"capital paris" fully; "Lyon" covers nothing.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_MIN_MATCH_RATIO = 0.6
DEFAULT_MIN_WORD_LENGTH = 3

STOPWORDS: frozenset[str] = frozenset({
    "the", "is", "am", "are", "a", "an",
    "of", "to", "in", "on", "and", "or",
    "for", "with", "by", "at", "from",
    "that", "this", "it", "as",
    "be", "was", "were", "has", "have", "had",
})

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RUNS = re.compile(r"\s+")


def normalize_text(value: str | None) -> str:
    """Lower-case, replace punctuation with spaces, collapse whitespace."""
    if not value:
        return ""
    text = _NON_WORD_CHARS.sub(" ", value.lower())
    return _WHITESPACE_RUNS.sub(" ", text).strip()


def extract_important_words(
    value: str | None,
    stopwords: Iterable[str] = STOPWORDS,
    min_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> list[str]:
    """
    Return the words of `value` that carry meaning for matching.

    Order is preserved and duplicates are kept.

    Args:
        value: Raw answer text
        stopwords: Words never counted as important
        min_length: Shortest token length that can be important

    Returns:
        List of important words (empty when nothing survives)
    """
    normalized = normalize_text(value)
    if not normalized:
        return []

    excluded = stopwords if isinstance(stopwords, (set, frozenset)) else set(stopwords)
    return [
        word for word in normalized.split(" ")
        if len(word) >= min_length and word not in excluded
    ]


def _coverage(reference_words: list[str], candidate_words: list[str]) -> float:
    if not reference_words or not candidate_words:
        return 0.0
    candidate_set = set(candidate_words)
    # Each reference occurrence counts, so repeated words weigh more
    matched = sum(1 for word in reference_words if word in candidate_set)
    return matched / len(reference_words)


def match_ratio(
    reference: str | None,
    candidate: str | None,
    stopwords: Iterable[str] = STOPWORDS,
) -> float:
    """Fraction of the reference's important words found in the candidate (0.0-1.0)."""
    return _coverage(
        extract_important_words(reference, stopwords),
        extract_important_words(candidate, stopwords),
    )


def shallow_text_match(
    reference: str | None,
    candidate: str | None,
    min_ratio: float = DEFAULT_MIN_MATCH_RATIO,
    stopwords: Iterable[str] = STOPWORDS,
) -> bool:
    """
    Decide whether `candidate` covers enough of `reference`.

    Returns False when either side has no important words, so an answer key
    made only of stopwords can never be matched.
    """
    reference_words = extract_important_words(reference, stopwords)
    candidate_words = extract_important_words(candidate, stopwords)

    if not reference_words or not candidate_words:
        return False

    return _coverage(reference_words, candidate_words) >= min_ratio
