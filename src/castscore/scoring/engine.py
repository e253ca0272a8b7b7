"""Optimization engine: batch evaluation, channel and global views.

Evaluation is a parallel map over episodes with no ordering dependency
between them; the ranker then applies one stable sort. Results come back
from the pool in input order, so equal scores never swap places.
"""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from castscore.catalog.models import Channel, Episode
from castscore.config.schema import GlobalConfig
from castscore.scoring.models import (
    ChannelReport,
    Issue,
    RankMode,
    ScoreResult,
    Severity,
)
from castscore.scoring.ranker import rank
from castscore.scoring.rules import RuleEvaluator

logger = logging.getLogger(__name__)


class OptimizationEngine:
    """Evaluate and prioritize episodes for optimization.

    Example:
        >>> engine = OptimizationEngine()
        >>> results = engine.channel_view(channel, episodes)
        >>> results[0].score  # lowest-scoring episode first
        40
    """

    def __init__(self, config: GlobalConfig | None = None, workers: int | None = None) -> None:
        """Initialize the engine.

        Args:
            config: Global configuration (defaults used when None)
            workers: Pool size override; 1 evaluates serially
        """
        self.config = config or GlobalConfig()
        self.workers = workers if workers is not None else self.config.workers
        self.evaluator = RuleEvaluator(
            policy=self.config.scoring, vocabulary=self.config.vocabulary
        )

    def evaluate_batch(
        self,
        episodes: Sequence[Episode],
        channels: dict[str, Channel] | None = None,
    ) -> list[ScoreResult]:
        """Evaluate many episodes, one result per episode in input order.

        A failure on one episode yields a degraded result instead of
        aborting the batch.

        Args:
            episodes: Episodes to evaluate
            channels: Optional channel lookup used to attach owners

        Returns:
            List of ScoreResult aligned with ``episodes``
        """
        channels = channels or {}

        def _evaluate(episode: Episode) -> ScoreResult:
            return self._safe_evaluate(episode, channels.get(episode.channel_id))

        if self.workers <= 1 or len(episodes) <= 1:
            return [_evaluate(episode) for episode in episodes]

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(_evaluate, episodes))

    def channel_view(
        self,
        channel: Channel,
        episodes: Iterable[Episode],
        include_excluded: bool = False,
    ) -> list[ScoreResult]:
        """Score one channel's episodes, lowest score first.

        Args:
            channel: Channel being optimized
            episodes: Episodes of that channel
            include_excluded: Keep episodes flagged as excluded

        Returns:
            Ranked results (worst-first)
        """
        selected = [
            ep
            for ep in episodes
            if ep.channel_id == channel.id and (include_excluded or not ep.excluded)
        ]
        results = self.evaluate_batch(selected, {channel.id: channel})
        return rank(results, RankMode.WORST_FIRST)

    def global_view(
        self,
        channels: Iterable[Channel],
        episodes: Iterable[Episode],
    ) -> list[ScoreResult]:
        """Score every channel's episodes and rank by improvement potential.

        Excluded episodes and episodes whose channel is unknown are skipped.

        Args:
            channels: All channels
            episodes: Episodes across those channels

        Returns:
            Ranked results (improvement-weighted), each bound to its channel
        """
        channel_map = {channel.id: channel for channel in channels}

        selected = []
        for episode in episodes:
            if episode.excluded:
                continue
            if episode.channel_id not in channel_map:
                logger.info(
                    "Skipping episode %s: unknown channel %s",
                    episode.id,
                    episode.channel_id,
                )
                continue
            selected.append(episode)

        results = self.evaluate_batch(selected, channel_map)
        return rank(results, RankMode.IMPROVEMENT_WEIGHTED)

    def _safe_evaluate(self, episode: Episode, channel: Channel | None) -> ScoreResult:
        try:
            return self.evaluator.evaluate(episode, channel)
        except Exception as e:
            logger.warning("Evaluation failed for episode %s: %s", episode.id, e, exc_info=True)
            return ScoreResult(
                episode=episode,
                score=0,
                stars=1,
                issues=(
                    Issue(
                        severity=Severity.CRITICAL,
                        category="Evaluation",
                        message=f"Episode could not be evaluated: {e}",
                        suggestion="Check the episode metadata for malformed fields",
                    ),
                ),
                channel=channel,
            )


def build_report(results: Iterable[ScoreResult]) -> ChannelReport:
    """Aggregate score results into summary statistics."""
    report = ChannelReport()
    total = 0
    for result in results:
        report.episode_count += 1
        total += result.score
        report.star_histogram[result.stars] += 1
        if result.has_transcript:
            report.transcript_count += 1
        for severity in Severity:
            report.issue_counts[severity] += len(result.issues_by_severity(severity))

    if report.episode_count:
        report.average_score = total / report.episode_count
    return report
