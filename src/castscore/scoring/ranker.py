"""Prioritization of score results.

Python's sort is stable, so results with equal keys keep their input
order. That stability is what makes rankings deterministic after a
parallel evaluation pass.
"""

import logging
from collections.abc import Iterable, Sequence

from castscore.scoring.models import RankMode, ScoreResult

logger = logging.getLogger(__name__)


def _worst_first_key(result: ScoreResult) -> int:
    return result.score


def _improvement_key(result: ScoreResult) -> tuple[int, int]:
    return (-result.improvement_potential, result.score)


_SORT_KEYS = {
    RankMode.WORST_FIRST: _worst_first_key,
    RankMode.IMPROVEMENT_WEIGHTED: _improvement_key,
}


def rank(
    results: Iterable[ScoreResult],
    mode: RankMode | str = RankMode.WORST_FIRST,
) -> list[ScoreResult]:
    """Order score results for display.

    Args:
        results: Score results in input order. Excluded episodes should
            already be filtered out by the caller.
        mode: ``worst-first`` (ascending score) or ``improvement-weighted``
            (descending improvement potential, then ascending score)

    Returns:
        New list in ranked order; ties keep input order

    Raises:
        ValueError: If mode is not a known RankMode
    """
    rank_mode = RankMode(mode)
    ranked = sorted(results, key=_SORT_KEYS[rank_mode])
    logger.debug("Ranked %d results (%s)", len(ranked), rank_mode.value)
    return ranked


def top(results: Sequence[ScoreResult], limit: int | None) -> list[ScoreResult]:
    """Slice an already-ranked list; None means no limit."""
    if limit is None:
        return list(results)
    return list(results[: max(0, limit)])
