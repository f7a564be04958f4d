"""
Unit tests for shallow text matching.

Tests the normalization, important-word extraction and word-overlap match
used to grade free-text answers.

Run: pytest tests/unit/test_text_match.py -v
"""

import pytest

from quizgrade.grading import (
    STOPWORDS,
    extract_important_words,
    match_ratio,
    normalize_text,
    shallow_text_match,
)


class TestNormalizeText:
    """Test normalize_text function."""

    def test_punctuation_and_case(self):
        assert normalize_text("Hello, World!!") == "hello world"

    def test_collapses_whitespace(self):
        assert normalize_text("  new \t\n  delhi  ") == "new delhi"

    def test_punctuation_between_words_becomes_space(self):
        assert normalize_text("rock-and-roll") == "rock and roll"

    def test_digits_kept(self):
        assert normalize_text("Route 66!") == "route 66"

    def test_non_ascii_letters_removed(self):
        """Only a-z, 0-9 and whitespace survive."""
        assert normalize_text("Café") == "caf"

    def test_empty_and_none(self):
        assert normalize_text("") == ""
        assert normalize_text(None) == ""

    def test_only_punctuation(self):
        assert normalize_text("?!...") == ""

    @pytest.mark.parametrize("value", [
        "Hello, World!!",
        "  MIXED   case\ttext ",
        "a.b.c",
        "",
        "Ünïcödé & symbols #42",
    ])
    def test_idempotent(self, value):
        once = normalize_text(value)
        assert normalize_text(once) == once


class TestExtractImportantWords:
    """Test extract_important_words function."""

    def test_drops_stopwords_and_short_words(self):
        assert extract_important_words("The cat is on the mat") == ["cat", "mat"]

    def test_keeps_order_and_duplicates(self):
        assert extract_important_words("data, more data, DATA") == ["data", "more", "data", "data"]

    def test_all_stopwords(self):
        assert extract_important_words("the is of") == []

    def test_empty_input(self):
        assert extract_important_words("") == []
        assert extract_important_words(None) == []

    def test_three_letter_words_kept(self):
        assert extract_important_words("cpu ram ok") == ["cpu", "ram"]

    def test_stopword_list_is_closed(self):
        assert len(STOPWORDS) == 27
        assert "have" in STOPWORDS
        assert "not" not in STOPWORDS

    def test_custom_stopwords(self):
        assert extract_important_words("new delhi city", stopwords={"city"}) == ["new", "delhi"]

    def test_custom_min_length(self):
        assert extract_important_words("big elephant", min_length=4) == ["elephant"]


class TestShallowTextMatch:
    """Test shallow_text_match function."""

    def test_same_words_different_case(self):
        assert shallow_text_match("New Delhi", "new delhi", 0.6) is True

    def test_unrelated_answer(self):
        assert shallow_text_match("New Delhi", "Mumbai", 0.6) is False

    def test_extra_words_in_candidate_do_not_hurt(self):
        assert shallow_text_match("New Delhi", "new delhi is capital") is True

    def test_empty_candidate(self):
        assert shallow_text_match("New Delhi", "") is False
        assert shallow_text_match("New Delhi", None) is False

    def test_stopword_only_reference_never_matches(self):
        assert shallow_text_match("the is of", "the is of") is False
        assert shallow_text_match("the is of", "anything at all") is False

    def test_stopword_only_candidate(self):
        assert shallow_text_match("New Delhi", "it is an") is False

    def test_ratio_threshold_boundary(self):
        """3 of 5 reference words covered is exactly 0.6."""
        reference = "alpha bravo charlie delta echo"
        assert shallow_text_match(reference, "alpha bravo charlie") is True
        assert shallow_text_match(reference, "alpha bravo") is False

    def test_custom_ratio(self):
        reference = "alpha bravo charlie delta"
        assert shallow_text_match(reference, "alpha", min_ratio=0.25) is True
        assert shallow_text_match(reference, "alpha bravo charlie", min_ratio=1.0) is False

    def test_reference_duplicates_counted_per_occurrence(self):
        """'data' appears twice in the reference, so covering it counts twice."""
        reference = "data data science"
        assert match_ratio(reference, "data") == pytest.approx(2 / 3)
        assert shallow_text_match(reference, "data") is True
        assert match_ratio(reference, "science") == pytest.approx(1 / 3)
        assert shallow_text_match(reference, "science") is False

    def test_candidate_duplicates_collapsed(self):
        assert match_ratio("alpha bravo", "alpha alpha alpha") == pytest.approx(0.5)

    def test_match_ratio_empty_sides(self):
        assert match_ratio("", "something") == 0.0
        assert match_ratio("something", "") == 0.0

    def test_deterministic(self):
        results = {shallow_text_match("Photosynthesis needs light", "light and photosynthesis") for _ in range(5)}
        assert results == {True}

    def test_each_side_extracted_once(self, monkeypatch):
        from quizgrade.grading import text_match

        calls = []
        original = text_match.extract_important_words

        def counting(value, *args, **kwargs):
            calls.append(value)
            return original(value, *args, **kwargs)

        monkeypatch.setattr(text_match, "extract_important_words", counting)
        assert text_match.shallow_text_match("capital paris", "paris is the capital") is True
        assert calls == ["capital paris", "paris is the capital"]
