"""Tests for sentence-aware truncation."""

import pytest

from castscore.relevance.summarizer import summarize


class TestSummarize:
    """Tests for summarize()."""

    def test_short_text_unchanged(self) -> None:
        assert summarize("Short. Text.", 300) == "Short. Text."

    def test_none_and_empty(self) -> None:
        assert summarize(None, 10) is None
        assert summarize("", 10) == ""

    def test_cuts_at_last_sentence_boundary(self) -> None:
        assert summarize("One. Two. Three.", 10) == "One. Two."

    def test_exclamation_and_question_marks(self) -> None:
        assert summarize("Really? Yes! And then more words", 14) == "Really? Yes!"

    def test_boundary_exactly_at_limit(self) -> None:
        assert summarize("abcd. efgh", 5) == "abcd."

    def test_hard_truncates_without_boundary(self) -> None:
        assert summarize("no punctuation here", 5) == "no pu"

    @pytest.mark.parametrize("limit", [1, 7, 50, 300, 600])
    def test_never_exceeds_limit(self, limit) -> None:
        text = "Fermentation is old. Bread rises! Why does rye behave? " * 30
        result = summarize(text, limit)
        assert len(result) <= limit

    @pytest.mark.parametrize("limit", [25, 300, 600])
    def test_ends_at_sentence_boundary_when_one_fits(self, limit) -> None:
        text = "Fermentation is old. Bread rises! Why does rye behave? " * 30
        assert summarize(text, limit)[-1] in ".!?"
