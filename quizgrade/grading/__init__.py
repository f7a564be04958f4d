"""
Answer grading helpers.

- normalize_text: canonical comparable form of an answer
- extract_important_words: words that count for matching
- shallow_text_match: word-overlap decision for free-text answers
"""

from .text_match import (
    DEFAULT_MIN_MATCH_RATIO,
    STOPWORDS,
    extract_important_words,
    match_ratio,
    normalize_text,
    shallow_text_match,
)

__all__ = [
    "DEFAULT_MIN_MATCH_RATIO",
    "STOPWORDS",
    "extract_important_words",
    "match_ratio",
    "normalize_text",
    "shallow_text_match",
]
