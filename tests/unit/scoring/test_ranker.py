"""Tests for score result prioritization."""

import pytest

from castscore.catalog.models import Episode
from castscore.scoring.models import RankMode, ScoreResult, stars_for
from castscore.scoring.ranker import rank, top


def _result(index: int, score: int, potential: int = 0) -> ScoreResult:
    episode = Episode(id=f"ep-{index}", channel_id="ch-1", title=f"Episode {index}")
    return ScoreResult(
        episode=episode,
        score=score,
        stars=stars_for(score),
        improvement_potential=potential,
    )


def _ids(results: list[ScoreResult]) -> list[str]:
    return [r.episode.id for r in results]


class TestWorstFirst:
    """Tests for ascending-score ranking."""

    def test_orders_by_ascending_score(self) -> None:
        results = [_result(0, 80), _result(1, 40), _result(2, 95)]
        assert _ids(rank(results, RankMode.WORST_FIRST)) == ["ep-1", "ep-0", "ep-2"]

    def test_equal_scores_keep_input_order(self) -> None:
        scores = [70, 40, 70, 40, 100, 70, 40]
        results = [_result(i, s) for i, s in enumerate(scores)]

        ranked = rank(results, "worst-first")

        assert [r.score for r in ranked] == sorted(scores)
        for score in set(scores):
            indices = [int(r.episode.id.split("-")[1]) for r in ranked if r.score == score]
            assert indices == sorted(indices)

    def test_default_mode_is_worst_first(self) -> None:
        results = [_result(0, 90), _result(1, 10)]
        assert _ids(rank(results)) == ["ep-1", "ep-0"]

    def test_does_not_mutate_input(self) -> None:
        results = [_result(0, 90), _result(1, 10)]
        rank(results)
        assert _ids(results) == ["ep-0", "ep-1"]


class TestImprovementWeighted:
    """Tests for improvement-potential ranking."""

    def test_potential_then_score_then_input_order(self) -> None:
        results = [
            _result(0, 60, potential=25),
            _result(1, 50, potential=95),
            _result(2, 40, potential=25),
            _result(3, 60, potential=25),
            _result(4, 90, potential=95),
        ]
        ranked = rank(results, RankMode.IMPROVEMENT_WEIGHTED)
        assert _ids(ranked) == ["ep-1", "ep-4", "ep-2", "ep-0", "ep-3"]

    def test_accepts_string_mode(self) -> None:
        results = [_result(0, 10, potential=0), _result(1, 90, potential=40)]
        assert _ids(rank(results, "improvement-weighted")) == ["ep-1", "ep-0"]


class TestRankEdgeCases:
    """Tests for empty inputs, unknown modes and slicing."""

    @pytest.mark.parametrize("mode", list(RankMode))
    def test_empty_list(self, mode) -> None:
        assert rank([], mode) == []

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ValueError):
            rank([_result(0, 50)], "best-first")

    def test_accepts_generator(self) -> None:
        ranked = rank(_result(i, 100 - i) for i in range(3))
        assert _ids(ranked) == ["ep-2", "ep-1", "ep-0"]

    def test_top_limits(self) -> None:
        results = [_result(i, i) for i in range(5)]
        assert len(top(results, 2)) == 2
        assert len(top(results, None)) == 5
        assert top(results, 0) == []
